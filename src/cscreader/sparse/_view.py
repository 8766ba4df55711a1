"""Zero-copy Views.

This module defines the read-only window a store hands out over one
column's stored entries, and the matrix type tag reported by readers.

Lifetime:
    A NonzeroRun holds a strong reference to its store, so the backing
    arrays stay alive as long as the run does. The ``rows`` and ``values``
    arrays are numpy views into the store's arrays and cannot be written.

Example:
    >>> run = store.get_nonzero_run(2, 2, 4)
    >>> run.start, run.count
    (3, 1)
    >>> list(run)
    [(3, 50.0)]
"""

from enum import Enum
from dataclasses import dataclass
from typing import Any, Iterator, Tuple, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from ._store import CscStore

__all__ = ['MatrixType', 'NonzeroRun']


class MatrixType(Enum):
    """Storage layout reported by a reader."""
    SIMPLE = 'simple'
    SPARSE = 'sparse'


@dataclass(frozen=True)
class NonzeroRun:
    """Contiguous run of stored entries within one column.

    Attributes:
        store: Store owning the backing arrays.
        start: Offset of the first entry in the store's ``indices``/``values``.
        count: Number of entries in the run.
    """
    store: 'CscStore'
    start: int
    count: int

    @property
    def stop(self) -> int:
        """Offset one past the last entry."""
        return self.start + self.count

    @property
    def rows(self) -> np.ndarray:
        """Row indices of the run (read-only view)."""
        return self.store.indices[self.start:self.stop]

    @property
    def values(self) -> np.ndarray:
        """Stored values of the run (read-only view)."""
        return self.store.values[self.start:self.stop]

    def as_pair(self) -> Tuple[int, int]:
        """Return the bare ``(count, start)`` pair."""
        return (self.count, self.start)

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[Tuple[int, Any]]:
        """Yield ``(row, value)`` pairs in increasing row order."""
        return zip(self.rows.tolist(), self.values.tolist())

    def __repr__(self) -> str:
        return f"NonzeroRun(start={self.start}, count={self.count})"
