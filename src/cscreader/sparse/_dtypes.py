"""
Data Type Definitions

Provides the value types a store can hold, normalization from the many
spellings numpy accepts, and the empty (zero) value of each type.
"""

from typing import Any, Union
from enum import Enum

import numpy as np

__all__ = ['DType', 'float32', 'float64', 'int32', 'int64', 'bool_']


class DType(Enum):
    """
    Value type enumeration.

    Example:
        >>> from cscreader.sparse import DType, CscStore
        >>> store = CscStore(x, i, p, shape=(4, 3), dtype=DType.int32)
        >>>
        >>> # Or use module-level constants
        >>> import cscreader.sparse as sp
        >>> store = CscStore(x, i, p, shape=(4, 3), dtype=sp.int32)
    """

    float32 = 'float32'
    float64 = 'float64'
    int32 = 'int32'
    int64 = 'int64'
    bool = 'bool'

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"DType.{self.name}"

    @property
    def numpy_dtype(self) -> np.dtype:
        return np.dtype(self.value)


# =============================================================================
# Module-Level Constants (For Clean Syntax)
# =============================================================================

float32 = DType.float32
float64 = DType.float64
int32 = DType.int32
int64 = DType.int64
bool_ = DType.bool


# =============================================================================
# Type Utilities
# =============================================================================

def normalize_dtype(dtype: Union[str, DType, type, np.dtype]) -> str:
    """
    Normalize dtype to its string name.

    Accepts DType members, strings, numpy dtypes and scalar types.

    Raises:
        ValueError: If dtype is not a supported value type

    Example:
        >>> normalize_dtype(DType.float32)
        'float32'
        >>> normalize_dtype(np.int64)
        'int64'
    """
    if isinstance(dtype, DType):
        return dtype.value
    if dtype is None:
        raise ValueError("dtype must not be None")
    try:
        name = np.dtype(dtype).name
    except TypeError:
        raise ValueError(f"Invalid dtype: {dtype!r}")
    validate_dtype(name)
    return name


def validate_dtype(dtype: str) -> None:
    """
    Validate dtype string.

    Raises:
        ValueError: If dtype is not supported
    """
    valid = {e.value for e in DType}
    if dtype not in valid:
        raise ValueError(f"Invalid dtype: {dtype}. Valid: {sorted(valid)}")


def is_float_dtype(dtype: Union[str, DType]) -> bool:
    """Check if dtype is floating point."""
    return normalize_dtype(dtype) in ('float32', 'float64')


def is_int_dtype(dtype: Union[str, DType]) -> bool:
    """Check if dtype is integer."""
    return normalize_dtype(dtype) in ('int32', 'int64')


def is_bool_dtype(dtype: Union[str, DType]) -> bool:
    """Check if dtype is logical."""
    return normalize_dtype(dtype) == 'bool'


def empty_value(dtype: Union[str, DType]) -> Any:
    """
    Get the value reported for positions with no stored entry.

    Returns a numpy scalar of the given type: ``0.0``, ``0`` or ``False``.
    """
    return np.dtype(normalize_dtype(dtype)).type(0)
