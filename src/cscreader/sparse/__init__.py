"""
cscreader Sparse Module

Read-only access to matrices held as CSC (Compressed Sparse Column) arrays.

Classes:
- CscStore: validated CSC arrays with element, row and column access
- RowCursor: per-session cursor for row-major traversal of a CscStore
- NonzeroRun: zero-copy window over one column's stored entries

Usage:
    from cscreader.sparse import CscStore

    store = CscStore(x, i, p, shape=(nrow, ncol))
    store.get(3, 0)
    store.get_row(3, 0, ncol)
    store.get_col(2)

    # From scipy
    store = CscStore.from_scipy(scipy_csc)
"""

from ._dtypes import (
    DType,
    float32, float64,
    int32, int64,
    bool_,
    normalize_dtype,
    validate_dtype,
    is_float_dtype,
    is_int_dtype,
    is_bool_dtype,
    empty_value,
)
from ._base import DimChecker
from ._view import MatrixType, NonzeroRun
from ._cursor import RowCursor, segmented_lower_bound
from ._store import CscStore

__all__ = [
    # Store
    'CscStore',
    'RowCursor',
    'NonzeroRun',
    'MatrixType',
    'DimChecker',
    'segmented_lower_bound',
    # Type system
    'DType',
    'float32',
    'float64',
    'int32',
    'int64',
    'bool_',
    'normalize_dtype',
    'validate_dtype',
    'is_float_dtype',
    'is_int_dtype',
    'is_bool_dtype',
    'empty_value',
]
