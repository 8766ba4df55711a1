"""
Dimension Base Class

Holds the fixed ``(nrow, ncol)`` of a matrix and the argument checks every
accessor runs before touching its arrays:

    check_element(r, c)           0 <= r < nrow, 0 <= c < ncol
    check_row_args(r, first, last)  0 <= r < nrow, 0 <= first <= last <= ncol
    check_col_args(c, first, last)  0 <= c < ncol, 0 <= first <= last <= nrow

All failures raise ``IndexOutOfBounds``. Arguments are coerced with
``operator.index`` so numpy integers are accepted and floats are not.
"""

import operator
from typing import Any, Optional, Tuple

from ..core.error import IndexOutOfBounds, InvalidDimensions

__all__ = ['DimChecker']


def _as_dimension(value: Any, name: str) -> int:
    try:
        value = operator.index(value)
    except TypeError:
        raise InvalidDimensions(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise InvalidDimensions(f"{name} must be non-negative, got {value}")
    return value


class DimChecker:
    """
    Base class for objects with fixed matrix dimensions.

    Attributes:
        shape: Matrix dimensions (nrow, ncol).
        nrow: Number of rows.
        ncol: Number of columns.
    """

    __slots__ = ('_nrow', '_ncol')

    def __init__(self, shape: Tuple[int, int]):
        try:
            nrow, ncol = shape
        except (TypeError, ValueError):
            raise InvalidDimensions(f"shape must be a (nrow, ncol) pair, got {shape!r}")
        self._nrow = _as_dimension(nrow, "nrow")
        self._ncol = _as_dimension(ncol, "ncol")

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def shape(self) -> Tuple[int, int]:
        """Matrix dimensions (nrow, ncol)."""
        return (self._nrow, self._ncol)

    @property
    def nrow(self) -> int:
        """Number of rows."""
        return self._nrow

    @property
    def ncol(self) -> int:
        """Number of columns."""
        return self._ncol

    # =========================================================================
    # Argument Checks
    # =========================================================================

    @staticmethod
    def _check_dim(value: Any, dim: int, what: str) -> int:
        value = operator.index(value)
        if value < 0 or value >= dim:
            raise IndexOutOfBounds(f"{what} index {value} out of bounds [0, {dim})")
        return value

    @staticmethod
    def _check_subset(first: Any, last: Optional[Any], dim: int, what: str) -> Tuple[int, int]:
        first = operator.index(first)
        last = dim if last is None else operator.index(last)
        if first < 0 or last > dim:
            raise IndexOutOfBounds(f"{what} range [{first}, {last}) out of bounds [0, {dim}]")
        if first > last:
            raise IndexOutOfBounds(f"{what} range start {first} is greater than end {last}")
        return first, last

    def check_element(self, r: Any, c: Any) -> Tuple[int, int]:
        """Check a single (row, column) position."""
        return (
            self._check_dim(r, self._nrow, "row"),
            self._check_dim(c, self._ncol, "column"),
        )

    def check_row_args(self, r: Any, first: Any, last: Optional[Any]) -> Tuple[int, int, int]:
        """Check a row index and a column window ``[first, last)``."""
        r = self._check_dim(r, self._nrow, "row")
        first, last = self._check_subset(first, last, self._ncol, "column")
        return r, first, last

    def check_col_args(self, c: Any, first: Any, last: Optional[Any]) -> Tuple[int, int, int]:
        """Check a column index and a row range ``[first, last)``."""
        c = self._check_dim(c, self._ncol, "column")
        first, last = self._check_subset(first, last, self._nrow, "row")
        return c, first, last
