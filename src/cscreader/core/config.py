"""
Global configuration for cscreader.

Provides:
- Default value type expected when a store is built without ``dtype``
- Index type used to hold column pointers and row indices

Initial values can be overridden with the ``CSCREADER_DEFAULT_DTYPE`` and
``CSCREADER_INDEX_DTYPE`` environment variables.
"""

from __future__ import annotations

import os
from enum import Enum
from typing import TYPE_CHECKING, Optional, Union

import numpy as np

if TYPE_CHECKING:
    from ..sparse._dtypes import DType


# =============================================================================
# Index Types
# =============================================================================

class IndexType(Enum):
    """Index (integer) precision."""
    INT32 = "int32"
    INT64 = "int64"

    @property
    def numpy_dtype(self) -> np.dtype:
        return np.dtype(np.int32) if self == IndexType.INT32 else np.dtype(np.int64)


def _parse_index_type(value: Union[IndexType, str, type, np.dtype]) -> IndexType:
    if isinstance(value, IndexType):
        return value
    if isinstance(value, str) and value.lower() in ('i32', 'i64'):
        value = 'int' + value[1:]
    try:
        return IndexType(np.dtype(value).name)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid index dtype: {value!r}. Valid: int32, int64")


# =============================================================================
# Global Configuration State
# =============================================================================

class _Config:
    """
    Global configuration singleton.

    Manages the default value type and the index storage type. The value
    type is kept by name and resolved to a DType on access.
    """

    def __init__(self):
        self._default_dtype = 'float64'
        self._index_type = IndexType.INT64
        self._load_environment()

    def _load_environment(self) -> None:
        dtype = os.environ.get('CSCREADER_DEFAULT_DTYPE')
        if dtype:
            self.default_dtype = dtype
        index = os.environ.get('CSCREADER_INDEX_DTYPE')
        if index:
            self.index_type = index

    @property
    def default_dtype(self) -> "DType":
        """Value type expected when no dtype is given."""
        from ..sparse._dtypes import DType
        return DType(self._default_dtype)

    @default_dtype.setter
    def default_dtype(self, value: Union["DType", str, type, np.dtype]):
        from ..sparse._dtypes import normalize_dtype
        self._default_dtype = normalize_dtype(value)

    @property
    def index_type(self) -> IndexType:
        """Storage type of column pointers and row indices."""
        return self._index_type

    @index_type.setter
    def index_type(self, value: Union[IndexType, str, type, np.dtype]):
        self._index_type = _parse_index_type(value)

    @property
    def index_dtype(self) -> np.dtype:
        """NumPy dtype for the current index type."""
        return self._index_type.numpy_dtype

    def reset(self) -> None:
        """Restore defaults, re-reading the environment."""
        self.__init__()

    def __repr__(self) -> str:
        return (
            f"Config(default_dtype={self._default_dtype}, "
            f"index_dtype={self._index_type.value})"
        )


# Global config instance, created on first use
_config: Optional[_Config] = None


# =============================================================================
# Public API
# =============================================================================

def get_config() -> _Config:
    """Get global configuration instance."""
    global _config
    if _config is None:
        _config = _Config()
    return _config


def set_default_dtype(dtype: Union["DType", str, type, np.dtype]) -> None:
    """
    Set the value type expected by stores built without ``dtype``.

    Example:
        >>> cscreader.set_default_dtype('int32')
        >>> store = CscStore([1, 2], [0, 1], [0, 2], shape=(2, 1))  # int32 values
    """
    get_config().default_dtype = dtype


def set_index_dtype(dtype: Union[IndexType, str, type, np.dtype]) -> None:
    """Set the storage type of column pointers and row indices."""
    get_config().index_type = dtype


def reset_config() -> None:
    """Restore the default configuration."""
    get_config().reset()
