"""
Error handling for cscreader.

Every failure raised by the reader is a ``CscError`` subclass carrying a
numeric code. Subclasses also derive from the matching builtin exception
(``TypeError``, ``ValueError``, ``IndexError``) so callers can catch either.
"""

from __future__ import annotations

from typing import Dict, Type


# =============================================================================
# Error Codes
# =============================================================================

# Success
CSC_OK = 0

# General errors (1-9)
CSC_ERROR_UNKNOWN = 1

# Structure and argument errors (10-19)
CSC_ERROR_INVALID_DIMENSIONS = 10
CSC_ERROR_LENGTH_MISMATCH = 11
CSC_ERROR_MALFORMED_POINTER = 12
CSC_ERROR_UNSORTED_ROWS = 13
CSC_ERROR_ROW_OUT_OF_RANGE = 14
CSC_ERROR_INDEX_OUT_OF_BOUNDS = 15

# Type errors (20-29)
CSC_ERROR_TYPE_MISMATCH = 21


_ERROR_MESSAGES = {
    CSC_OK: "Success",
    CSC_ERROR_UNKNOWN: "Unknown error",
    CSC_ERROR_INVALID_DIMENSIONS: "Invalid dimensions",
    CSC_ERROR_LENGTH_MISMATCH: "Length mismatch",
    CSC_ERROR_MALFORMED_POINTER: "Malformed column pointers",
    CSC_ERROR_UNSORTED_ROWS: "Unsorted row indices",
    CSC_ERROR_ROW_OUT_OF_RANGE: "Row index out of range",
    CSC_ERROR_INDEX_OUT_OF_BOUNDS: "Index out of bounds",
    CSC_ERROR_TYPE_MISMATCH: "Type mismatch",
}


# =============================================================================
# Exception Classes
# =============================================================================

class CscError(Exception):
    """
    Base exception for all cscreader errors.

    Attributes:
        code: Numeric error code (``CSC_ERROR_*``)
        message: Human readable detail
    """

    code = CSC_ERROR_UNKNOWN

    def __init__(self, message: str = "", code: int = None):
        if code is not None:
            self.code = code
        if not message:
            message = _ERROR_MESSAGES.get(self.code, f"Unknown error (code={self.code})")
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return f"CSC Error {self.code}: {self.message}"

    @classmethod
    def from_code(cls, code: int, context: str = "") -> "CscError":
        """Create the exception matching ``code`` with optional context."""
        base_msg = _ERROR_MESSAGES.get(code, "Unknown error")
        msg = f"{context}: {base_msg}" if context else base_msg
        exc_type = _ERROR_TYPES.get(code, CscError)
        return exc_type(msg, code=code)


class InvalidDimensions(CscError, ValueError):
    """Matrix shape is not a pair of non-negative integers."""
    code = CSC_ERROR_INVALID_DIMENSIONS


class TypeMismatch(CscError, TypeError):
    """An input array has the wrong element type or rank."""
    code = CSC_ERROR_TYPE_MISMATCH


class LengthMismatch(CscError, ValueError):
    """Array lengths disagree with each other or with the dimensions."""
    code = CSC_ERROR_LENGTH_MISMATCH


class MalformedPointer(CscError, ValueError):
    """Column pointers are not a valid CSC pointer array."""
    code = CSC_ERROR_MALFORMED_POINTER


class UnsortedRows(CscError, ValueError):
    """Row indices within a column are not strictly increasing."""
    code = CSC_ERROR_UNSORTED_ROWS


class RowOutOfRange(CscError, ValueError):
    """A stored row index lies outside ``[0, nrow)``."""
    code = CSC_ERROR_ROW_OUT_OF_RANGE


class IndexOutOfBounds(CscError, IndexError):
    """An access argument lies outside the matrix dimensions."""
    code = CSC_ERROR_INDEX_OUT_OF_BOUNDS


_ERROR_TYPES: Dict[int, Type[CscError]] = {
    CSC_ERROR_INVALID_DIMENSIONS: InvalidDimensions,
    CSC_ERROR_TYPE_MISMATCH: TypeMismatch,
    CSC_ERROR_LENGTH_MISMATCH: LengthMismatch,
    CSC_ERROR_MALFORMED_POINTER: MalformedPointer,
    CSC_ERROR_UNSORTED_ROWS: UnsortedRows,
    CSC_ERROR_ROW_OUT_OF_RANGE: RowOutOfRange,
    CSC_ERROR_INDEX_OUT_OF_BOUNDS: IndexOutOfBounds,
}


# =============================================================================
# Error Checking Functions
# =============================================================================

def error_message(code: int) -> str:
    """Get the generic message for an error code."""
    return _ERROR_MESSAGES.get(code, f"Unknown error (code={code})")


def check_error(code: int, context: str = "") -> None:
    """
    Check error code and raise the matching exception if not OK.

    Args:
        code: Error code
        context: Optional context message for better error reporting

    Raises:
        CscError: If code indicates an error
    """
    if code == CSC_OK:
        return
    raise CscError.from_code(code, context)
