"""
cscreader - read-only access to CSC sparse matrices

- Structural validation of (i, p, x) arrays at construction
- Binary-search element lookup
- Cursor-based row extraction over the column-major layout
- Dense and zero-copy column slices

Modules:
- sparse: CscStore, RowCursor, NonzeroRun
- core: errors and configuration

Example:
    >>> import cscreader
    >>> store = cscreader.CscStore(
    ...     [10, 40, 20, 50], [0, 3, 1, 3], [0, 2, 2, 4], shape=(4, 3)
    ... )
    >>> store.get_row(3, 0, 3)
    array([40.,  0., 50.])

Logging:
    Loggers live under the ``cscreader`` namespace. The library installs no
    handlers; enable DEBUG output with
    ``logging.getLogger("cscreader").setLevel(logging.DEBUG)``.
"""

__version__ = '0.1.0'

from . import core
from . import sparse

from .sparse import (
    CscStore,
    RowCursor,
    NonzeroRun,
    MatrixType,
    DType,
    float32,
    float64,
    int32,
    int64,
    bool_,
)

from .core import (
    CscError,
    InvalidDimensions,
    TypeMismatch,
    LengthMismatch,
    MalformedPointer,
    UnsortedRows,
    RowOutOfRange,
    IndexOutOfBounds,
    get_config,
    set_default_dtype,
    set_index_dtype,
    reset_config,
)

__all__ = [
    # Version
    '__version__',
    # Modules
    'sparse',
    'core',
    # Store
    'CscStore',
    'RowCursor',
    'NonzeroRun',
    'MatrixType',
    # Type constants
    'DType',
    'float32',
    'float64',
    'int32',
    'int64',
    'bool_',
    # Errors
    'CscError',
    'InvalidDimensions',
    'TypeMismatch',
    'LengthMismatch',
    'MalformedPointer',
    'UnsortedRows',
    'RowOutOfRange',
    'IndexOutOfBounds',
    # Configuration
    'get_config',
    'set_default_dtype',
    'set_index_dtype',
    'reset_config',
]
