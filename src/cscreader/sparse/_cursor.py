"""Row Access Cursor.

Extracting a row from a CSC matrix means finding, in every column of the
requested window, the entry whose row index equals the requested row. A
RowCursor keeps, for each column, the offset of the first entry at or
after the row it last served, so that neighbouring rows are answered by
moving each offset at most one step.

Update Rule:
    - window changed (or first use): reset to column starts, row 0
    - same row:                      nothing to do
    - row + 1:                       step forward where the entry is behind
    - row - 1:                       step back where the previous entry is
                                     not before the target
    - any other jump:                binary search the half of each column
                                     that can still hold the target

All per-column work is vectorized over the window with numpy.

Thread Safety:
    A cursor is mutable and belongs to one access session. Readers sharing
    a store concurrently must each hold their own cursor, obtained from
    ``CscStore.row_cursor()``.

Example:
    >>> cursor = store.row_cursor()
    >>> for r in range(store.nrow):
    ...     row = cursor.get_row(r, 0, store.ncol)
"""

import logging
from typing import Optional, Tuple, TYPE_CHECKING

import numpy as np


if TYPE_CHECKING:
    from ._store import CscStore

__all__ = ['RowCursor', 'segmented_lower_bound']

logger = logging.getLogger("cscreader.cursor")


def segmented_lower_bound(
    keys: np.ndarray,
    lo: np.ndarray,
    hi: np.ndarray,
    value: int,
) -> np.ndarray:
    """Find the first position ``k`` in ``[lo[s], hi[s])`` with ``keys[k] >= value``.

    Each segment ``s`` is searched independently; segments with no such
    position yield ``hi[s]``. ``keys`` must be sorted within every segment.
    """
    lo = lo.copy()
    hi = hi.copy()
    active = lo < hi
    while active.any():
        seg_lo = lo[active]
        seg_hi = hi[active]
        mid = (seg_lo + seg_hi) // 2
        right = keys[mid] < value
        lo[active] = np.where(right, mid + 1, seg_lo)
        hi[active] = np.where(right, seg_hi, mid)
        active = lo < hi
    return lo


class RowCursor:
    """Per-column offset cache answering row queries on a CSC store.

    Attributes:
        store: The store being read.
        current_row: Row the cached offsets are consistent with.
        window: Column window ``(first, last)`` covered by the cache, or
            None before the first query.
    """

    __slots__ = ('_store', '_indices', '_current_row', '_window')

    def __init__(self, store: 'CscStore'):
        self._store = store
        self._indices: Optional[np.ndarray] = None
        self._current_row = 0
        self._window: Optional[Tuple[int, int]] = None

    @property
    def store(self) -> 'CscStore':
        return self._store

    @property
    def current_row(self) -> int:
        return self._current_row

    @property
    def window(self) -> Optional[Tuple[int, int]]:
        return self._window

    def reset(self) -> None:
        """Drop the cached offsets; the next query starts from scratch."""
        self._indices = None
        self._current_row = 0
        self._window = None

    # =========================================================================
    # Cursor Maintenance
    # =========================================================================

    def _window_changed(self, first: int, last: int) -> bool:
        return self._window != (first, last)

    def update_indices(self, r: int, first: int, last: int) -> np.ndarray:
        """Bring the cached offsets of columns ``[first, last)`` up to row ``r``.

        Arguments must already be bounds-checked. Returns the offsets of the
        window's columns (a view into the cache).
        """
        p = self._store.indptr
        i = self._store.indices

        # Allocated on first row access only.
        if self._indices is None:
            self._indices = p[:self._store.ncol].copy()

        if self._window_changed(first, last):
            logger.debug("Resetting row cursor for column window [%d, %d)", first, last)
            self._indices[first:last] = p[first:last]
            self._window = (first, last)
            self._current_row = 0

        cur = self._indices[first:last]
        if r == self._current_row:
            return cur

        starts = p[first:last]
        ends = p[first + 1:last + 1]

        if r == self._current_row + 1:
            live = np.flatnonzero(cur != ends)
            behind = live[i[cur[live]] < r]
            cur[behind] += 1
        elif r + 1 == self._current_row:
            live = np.flatnonzero(cur != starts)
            ahead = live[i[cur[live] - 1] >= r]
            cur[ahead] -= 1
        elif r > self._current_row:
            cur[:] = segmented_lower_bound(i, cur, ends, r)
        else:
            cur[:] = segmented_lower_bound(i, starts, cur, r)

        self._current_row = r
        return cur

    # =========================================================================
    # Row Access
    # =========================================================================

    def get_row(
        self,
        r: int,
        first: int,
        last: Optional[int],
        out: Optional[np.ndarray] = None,
    ) -> np.ndarray:
        """Get the dense values of row ``r`` for columns ``[first, last)``.

        Args:
            r: Row index.
            first: First column of the window.
            last: One past the last column of the window (None for ``ncol``).
            out: Optional buffer of length ``last - first`` to fill.

        Returns:
            The filled buffer.
        """
        store = self._store
        r, first, last = store.check_row_args(r, first, last)
        out = store._prepare_output(out, last - first)

        cur = self.update_indices(r, first, last)
        out[:] = store.empty_value

        i = store.indices
        ends = store.indptr[first + 1:last + 1]
        live = np.flatnonzero(cur != ends)
        hit = live[i[cur[live]] == r]
        out[hit] = store.values[cur[hit]]
        return out

    def __repr__(self) -> str:
        return f"RowCursor(current_row={self._current_row}, window={self._window})"
