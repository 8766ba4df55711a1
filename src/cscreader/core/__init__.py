"""
cscreader Core - error handling and configuration.

Usage:
    >>> from cscreader.core import CscError, set_default_dtype
    >>> set_default_dtype('int32')
"""

from .error import (
    CscError,
    InvalidDimensions,
    TypeMismatch,
    LengthMismatch,
    MalformedPointer,
    UnsortedRows,
    RowOutOfRange,
    IndexOutOfBounds,
    check_error,
    error_message,
    # Error codes
    CSC_OK,
    CSC_ERROR_UNKNOWN,
    CSC_ERROR_INVALID_DIMENSIONS,
    CSC_ERROR_LENGTH_MISMATCH,
    CSC_ERROR_MALFORMED_POINTER,
    CSC_ERROR_UNSORTED_ROWS,
    CSC_ERROR_ROW_OUT_OF_RANGE,
    CSC_ERROR_INDEX_OUT_OF_BOUNDS,
    CSC_ERROR_TYPE_MISMATCH,
)

from .config import (
    IndexType,
    get_config,
    set_default_dtype,
    set_index_dtype,
    reset_config,
)

__all__ = [
    # Error handling
    "CscError",
    "InvalidDimensions",
    "TypeMismatch",
    "LengthMismatch",
    "MalformedPointer",
    "UnsortedRows",
    "RowOutOfRange",
    "IndexOutOfBounds",
    "check_error",
    "error_message",
    "CSC_OK",
    "CSC_ERROR_UNKNOWN",
    "CSC_ERROR_INVALID_DIMENSIONS",
    "CSC_ERROR_LENGTH_MISMATCH",
    "CSC_ERROR_MALFORMED_POINTER",
    "CSC_ERROR_UNSORTED_ROWS",
    "CSC_ERROR_ROW_OUT_OF_RANGE",
    "CSC_ERROR_INDEX_OUT_OF_BOUNDS",
    "CSC_ERROR_TYPE_MISMATCH",
    # Configuration
    "IndexType",
    "get_config",
    "set_default_dtype",
    "set_index_dtype",
    "reset_config",
]
