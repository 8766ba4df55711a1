"""CSC (Compressed Sparse Column) Store.

This module provides CscStore, a read-only accessor over a matrix given as
three CSC arrays: column pointers ``p``, row indices ``i`` and values ``x``.

Construction:
    The arrays are validated once, eagerly and in a fixed order; the first
    violation raises and no store is produced. A constructed store never
    re-checks its arrays.

Access Modes:
    - get(r, c):                 binary search within column c
    - get_row(r, first, last):   per-column cursor, cheap for neighbouring rows
    - get_col(c, first, last):   dense slice of one column
    - get_nonzero_run(c, ...):   zero-copy window over one column's entries

Storage:
    Arrays already of the right dtype are not copied. The store only hands
    out read-only views of them.

Example:
    >>> store = CscStore([10, 40, 20, 50], [0, 3, 1, 3], [0, 2, 2, 4], shape=(4, 3))
    >>> store.get(3, 0)
    40.0
    >>> store.get_row(3, 0, 3)
    array([40.,  0., 50.])
    >>> store.get_col(2)
    array([ 0., 20.,  0., 50.])
"""

import logging
from typing import Any, Optional, Tuple, Union

import numpy as np

from ._base import DimChecker
from ._cursor import RowCursor
from ._dtypes import DType, normalize_dtype, empty_value
from ._view import MatrixType, NonzeroRun
from ..core.config import get_config
from ..core.error import (
    CSC_OK,
    CSC_ERROR_LENGTH_MISMATCH,
    CSC_ERROR_MALFORMED_POINTER,
    CSC_ERROR_UNSORTED_ROWS,
    CSC_ERROR_ROW_OUT_OF_RANGE,
    LengthMismatch,
    TypeMismatch,
    check_error,
)

__all__ = ['CscStore']

logger = logging.getLogger("cscreader.store")


# =============================================================================
# Input Conversion
# =============================================================================

def _fits(arr: np.ndarray, target: np.dtype) -> bool:
    """Check that every integer in ``arr`` is representable in ``target``."""
    if arr.size == 0 or np.can_cast(arr.dtype, target, casting='safe'):
        return True
    info = np.iinfo(target)
    return int(arr.min()) >= info.min and int(arr.max()) <= info.max


def _as_values(x: Any, expected: DType) -> np.ndarray:
    """Convert the value array, enforcing the expected element type."""
    target = expected.numpy_dtype
    if isinstance(x, np.ndarray):
        if x.dtype != target:
            raise TypeMismatch(f"'x' should be {expected.value}, got {x.dtype}")
        arr = x
    else:
        arr = np.asarray(x)
        if arr.size == 0:
            arr = arr.astype(target)
        elif not np.can_cast(arr.dtype, target, casting='same_kind'):
            raise TypeMismatch(f"'x' should be {expected.value}, got values of type {arr.dtype}")
        elif arr.dtype.kind in 'iu' and target.kind == 'i' and not _fits(arr, target):
            raise TypeMismatch(f"'x' has values outside the range of {expected.value}")
        else:
            arr = arr.astype(target, copy=False)
    if arr.ndim != 1:
        raise TypeMismatch(f"'x' should be one-dimensional, got {arr.ndim} dimensions")
    return arr


def _as_index(values: Any, name: str, index_dtype: np.dtype) -> np.ndarray:
    """Convert an index array (``i`` or ``p``) to the configured index type."""
    arr = np.asarray(values)
    if arr.ndim != 1:
        raise TypeMismatch(f"'{name}' should be one-dimensional, got {arr.ndim} dimensions")
    if arr.size and arr.dtype.kind not in 'iu':
        raise TypeMismatch(f"'{name}' should be integer, got {arr.dtype}")
    if not _fits(arr, index_dtype):
        raise TypeMismatch(f"'{name}' has values outside the range of {index_dtype}")
    return arr.astype(index_dtype, copy=False)


def _readonly(arr: np.ndarray) -> np.ndarray:
    view = arr.view()
    view.flags.writeable = False
    return view


def _check_structure(
    nrow: int,
    ncol: int,
    p: np.ndarray,
    i: np.ndarray,
    nnz: int,
) -> Tuple[int, str]:
    """Check the CSC invariants in order.

    Returns:
        ``(CSC_OK, "")`` or the code and context of the first violation.
    """
    if len(i) != nnz:
        return CSC_ERROR_LENGTH_MISMATCH, (
            f"'x' and 'i' should have the same length (got {nnz} and {len(i)})"
        )
    if len(p) != ncol + 1:
        return CSC_ERROR_LENGTH_MISMATCH, (
            f"length of 'p' should be equal to 'ncol+1' (got {len(p)}, expected {ncol + 1})"
        )
    if p[0] != 0:
        return CSC_ERROR_MALFORMED_POINTER, "first element of 'p' should be 0"
    if p[ncol] != nnz:
        return CSC_ERROR_MALFORMED_POINTER, "last element of 'p' should be 'length(x)'"

    head = p[:-1]
    if np.any(head < 0):
        return CSC_ERROR_MALFORMED_POINTER, "'p' should contain non-negative values"
    if np.any(head > p[1:]):
        return CSC_ERROR_MALFORMED_POINTER, "'p' should be sorted"

    if nnz > 1:
        increasing = i[1:] > i[:-1]
        # The first entry of a column is not compared with its predecessor.
        starts = p[1:ncol]
        starts = starts[(starts > 0) & (starts < nnz)]
        increasing[starts - 1] = True
        if not increasing.all():
            return CSC_ERROR_UNSORTED_ROWS, "'i' in each column should be strictly increasing"

    if nnz and (i.min() < 0 or i.max() >= nrow):
        return CSC_ERROR_ROW_OUT_OF_RANGE, "'i' should contain elements in [0, nrow)"

    return CSC_OK, ""


# =============================================================================
# Store
# =============================================================================

class CscStore(DimChecker):
    """Read-only CSC matrix accessor.

    Attributes:
        shape: Matrix dimensions (nrow, ncol).
        dtype: Value type (DType).
        nnz: Number of stored entries.
        indptr: Column pointers ``p`` (read-only).
        indices: Row indices ``i`` (read-only).
        values: Stored values ``x`` (read-only).

    Note:
        The store's arrays can be read from several threads at once, but
        ``get_row`` uses a cursor owned by the store. Concurrent row
        readers should each take their own cursor with ``row_cursor()``.
    """

    __slots__ = ('_p', '_i', '_x', '_dtype', '_empty', '_source', '_cursor')

    def __init__(
        self,
        x: Any,
        i: Any,
        p: Any,
        shape: Tuple[int, int],
        *,
        dtype: Optional[Union[DType, str, type, np.dtype]] = None,
        source: Any = None,
    ):
        """Validate CSC arrays and build the store.

        Args:
            x: Stored values, length nnz.
            i: Row index of each stored value, length nnz.
            p: Column pointers, length ncol + 1.
            shape: (nrow, ncol).
            dtype: Expected value type. Defaults to the configured default.
            source: Opaque object the arrays came from, returned by
                ``yield_source()``.

        Raises:
            InvalidDimensions, TypeMismatch, LengthMismatch,
            MalformedPointer, UnsortedRows, RowOutOfRange
        """
        super().__init__(shape)
        config = get_config()
        expected = DType(normalize_dtype(dtype)) if dtype is not None else config.default_dtype

        x = _as_values(x, expected)
        i = _as_index(i, 'i', config.index_dtype)
        p = _as_index(p, 'p', config.index_dtype)

        code, context = _check_structure(self._nrow, self._ncol, p, i, len(x))
        check_error(code, context)

        self._x = _readonly(x)
        self._i = _readonly(i)
        self._p = _readonly(p)
        self._dtype = expected
        self._empty = empty_value(expected)
        self._source = source
        self._cursor: Optional[RowCursor] = None

        logger.debug(
            "Built CscStore: shape=%s, nnz=%d, dtype=%s",
            self.shape, self.nnz, expected.value,
        )

    # =========================================================================
    # Factory Methods
    # =========================================================================

    @classmethod
    def from_scipy(
        cls,
        mat: Any,
        *,
        dtype: Optional[Union[DType, str, type, np.dtype]] = None,
    ) -> 'CscStore':
        """Create from a scipy.sparse CSC matrix or array.

        The matrix's arrays are read without copying where their dtypes
        allow, and the matrix itself is kept as the store's source. It is
        not modified: unsorted or duplicate indices are rejected rather
        than fixed.

        Args:
            mat: scipy CSC matrix (``format == 'csc'``).
            dtype: Expected value type. Defaults to the matrix's dtype.

        Returns:
            CscStore over the matrix's arrays.
        """
        import scipy.sparse as sp

        if not sp.issparse(mat) or mat.format != 'csc':
            raise TypeMismatch(f"Expected a scipy.sparse CSC matrix, got {type(mat).__name__}")

        if dtype is None:
            try:
                dtype = normalize_dtype(mat.dtype)
            except ValueError:
                raise TypeMismatch(f"Unsupported value type for a CSC reader: {mat.dtype}")
        return cls(mat.data, mat.indices, mat.indptr, mat.shape, dtype=dtype, source=mat)

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def dtype(self) -> DType:
        """Value type."""
        return self._dtype

    @property
    def nnz(self) -> int:
        """Number of stored entries."""
        return len(self._x)

    @property
    def empty_value(self) -> Any:
        """Value reported for positions with no stored entry."""
        return self._empty

    @property
    def indptr(self) -> np.ndarray:
        """Column pointers (read-only)."""
        return self._p

    @property
    def indices(self) -> np.ndarray:
        """Row indices (read-only)."""
        return self._i

    @property
    def values(self) -> np.ndarray:
        """Stored values (read-only)."""
        return self._x

    @property
    def matrix_type(self) -> MatrixType:
        return MatrixType.SPARSE

    def yield_source(self) -> Any:
        """Return the object this store was built from, unmodified."""
        return self._source

    # =========================================================================
    # Element Access
    # =========================================================================

    def get(self, r: int, c: int) -> Any:
        """Get the value at row ``r``, column ``c``."""
        r, c = self.check_element(r, c)
        start = self._p[c]
        end = self._p[c + 1]
        k = start + np.searchsorted(self._i[start:end], r)
        if k != end and self._i[k] == r:
            return self._x[k]
        return self._empty

    # =========================================================================
    # Row Access
    # =========================================================================

    def row_cursor(self) -> RowCursor:
        """Create a new row cursor for a separate access session."""
        return RowCursor(self)

    def get_row(
        self,
        r: int,
        first: int,
        last: Optional[int],
        out: Optional[np.ndarray] = None,
    ) -> np.ndarray:
        """Get row ``r`` restricted to columns ``[first, last)``.

        Uses the store's own cursor, created on first use.
        """
        if self._cursor is None:
            self._cursor = RowCursor(self)
        return self._cursor.get_row(r, first, last, out)

    # =========================================================================
    # Column Access
    # =========================================================================

    def _run_bounds(self, c: int, first: int, last: int) -> Tuple[int, int]:
        """Offsets of column ``c``'s entries with row in ``[first, last)``."""
        start = int(self._p[c])
        end = int(self._p[c + 1])
        if first:
            start += int(np.searchsorted(self._i[start:end], first))
        if last != self._nrow:
            end = start + int(np.searchsorted(self._i[start:end], last))
        return start, end

    def get_col(
        self,
        c: int,
        first: int = 0,
        last: Optional[int] = None,
        out: Optional[np.ndarray] = None,
    ) -> np.ndarray:
        """Get column ``c`` as a dense array over rows ``[first, last)``."""
        c, first, last = self.check_col_args(c, first, last)
        out = self._prepare_output(out, last - first)
        start, end = self._run_bounds(c, first, last)

        out[:] = self._empty
        out[self._i[start:end] - first] = self._x[start:end]
        return out

    def get_nonzero_run(
        self,
        c: int,
        first: int = 0,
        last: Optional[int] = None,
    ) -> NonzeroRun:
        """Get the stored entries of column ``c`` with row in ``[first, last)``."""
        c, first, last = self.check_col_args(c, first, last)
        start, end = self._run_bounds(c, first, last)
        return NonzeroRun(self, start, end - start)

    def get_const_col_nonzero(
        self,
        c: int,
        first: int = 0,
        last: Optional[int] = None,
    ) -> Tuple[int, int]:
        """Get ``(count, start)`` of column ``c``'s entries in ``[first, last)``."""
        return self.get_nonzero_run(c, first, last).as_pair()

    def _prepare_output(self, out: Optional[np.ndarray], size: int) -> np.ndarray:
        if out is None:
            return np.empty(size, dtype=self._x.dtype)
        if not isinstance(out, np.ndarray):
            raise TypeMismatch(f"out must be a numpy array, got {type(out).__name__}")
        if out.dtype != self._x.dtype:
            raise TypeMismatch(f"out should be {self._dtype.value}, got {out.dtype}")
        if out.ndim != 1 or len(out) != size:
            raise LengthMismatch(f"out should have length {size}, got shape {out.shape}")
        return out

    # =========================================================================
    # Indexing
    # =========================================================================

    def _slice_bounds(self, key: slice) -> Tuple[int, Optional[int]]:
        if key.step not in (None, 1):
            raise TypeError(f"Only unit-step slices are supported, got step {key.step}")
        return (0 if key.start is None else key.start), key.stop

    def __getitem__(self, key) -> Any:
        """Support store[i, j], store[i, a:b] and store[a:b, j]."""
        if not (isinstance(key, tuple) and len(key) == 2):
            raise TypeError(f"Invalid index: {key!r}; expected a (row, column) pair")

        row_key, col_key = key
        if isinstance(row_key, slice) and isinstance(col_key, slice):
            raise TypeError("Only one of the row and column keys may be a slice")

        # store[a:b, j]
        if isinstance(row_key, slice):
            first, last = self._slice_bounds(row_key)
            return self.get_col(col_key, first, last)

        # store[i, a:b]
        if isinstance(col_key, slice):
            first, last = self._slice_bounds(col_key)
            return self.get_row(row_key, first, last)

        # store[i, j]
        return self.get(row_key, col_key)

    # =========================================================================
    # Representation
    # =========================================================================

    def __repr__(self) -> str:
        return f"CscStore(shape={self.shape}, nnz={self.nnz}, dtype={self._dtype.value})"

    def info(self) -> str:
        """Get detailed information string."""
        lines = [
            "CscStore:",
            f"  shape: {self.shape}",
            f"  nnz: {self.nnz}",
            f"  dtype: {self._dtype.value}",
            f"  index dtype: {self._i.dtype}",
            f"  source: {type(self._source).__name__ if self._source is not None else None}",
            f"  memory: {(self._x.nbytes + self._i.nbytes + self._p.nbytes) / 1024:.2f} KB",
        ]
        return '\n'.join(lines)
