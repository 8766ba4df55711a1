"""
Tests for global configuration.
"""

import pytest
import numpy as np
from cscreader import CscStore, DType, TypeMismatch
from cscreader.core.config import (
    IndexType,
    get_config,
    set_default_dtype,
    set_index_dtype,
    reset_config,
)


class TestDefaults:
    """Test default configuration."""

    def test_defaults(self):
        config = get_config()
        assert config.default_dtype is DType.float64
        assert config.index_type is IndexType.INT64
        assert config.index_dtype == np.int64

    def test_repr(self):
        assert repr(get_config()) == "Config(default_dtype=float64, index_dtype=int64)"


class TestSetters:
    """Test changing the configuration."""

    def test_set_default_dtype(self):
        set_default_dtype('int32')
        store = CscStore([1, 2], [0, 1], [0, 2], shape=(2, 1))
        assert store.dtype is DType.int32
        assert store.values.dtype == np.int32

    def test_default_dtype_rejects_other_arrays(self):
        set_default_dtype(np.int32)
        with pytest.raises(TypeMismatch):
            CscStore(np.array([1.0, 2.0]), [0, 1], [0, 2], shape=(2, 1))

    def test_set_index_dtype(self):
        set_index_dtype('i32')
        store = CscStore([1.0], [0], [0, 1], shape=(1, 1))
        assert store.indices.dtype == np.int32
        assert store.indptr.dtype == np.int32

    def test_invalid_values(self):
        with pytest.raises(ValueError):
            set_default_dtype('complex64')
        with pytest.raises(ValueError):
            set_index_dtype('float64')

    def test_reset(self):
        set_default_dtype('bool')
        set_index_dtype('int32')
        reset_config()
        assert get_config().default_dtype is DType.float64
        assert get_config().index_type is IndexType.INT64


class TestEnvironment:
    """Test environment variable overrides."""

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("CSCREADER_DEFAULT_DTYPE", "float32")
        monkeypatch.setenv("CSCREADER_INDEX_DTYPE", "int32")
        reset_config()
        assert get_config().default_dtype is DType.float32
        assert get_config().index_type is IndexType.INT32

    def test_invalid_environment(self, monkeypatch):
        monkeypatch.setenv("CSCREADER_DEFAULT_DTYPE", "complex128")
        with pytest.raises(ValueError):
            reset_config()
        monkeypatch.delenv("CSCREADER_DEFAULT_DTYPE")


class TestIndexRange:
    """Index values must fit the configured index type."""

    def test_row_index_too_large_for_int32(self):
        set_index_dtype('int32')
        i = np.array([2**32 + 1], dtype=np.int64)
        with pytest.raises(TypeMismatch, match="'i'"):
            CscStore([7.0], i, [0, 1], shape=(4, 1))

    def test_pointer_too_large_for_int32(self):
        set_index_dtype('int32')
        p = np.array([0, 2**32 + 1], dtype=np.int64)
        with pytest.raises(TypeMismatch, match="'p'"):
            CscStore([7.0], [0], p, shape=(4, 1))

    def test_unsigned_indices_too_large(self):
        i = np.array([2**63], dtype=np.uint64)
        with pytest.raises(TypeMismatch):
            CscStore([7.0], i, [0, 1], shape=(4, 1))

    def test_int64_indices_that_fit(self):
        set_index_dtype('int32')
        i = np.array([3], dtype=np.int64)
        store = CscStore([7.0], i, [0, 1], shape=(4, 1))
        assert store.indices.dtype == np.int32
        assert store.get(3, 0) == 7.0


class TestConfigInstance:
    """Test the global configuration object."""

    def test_created_on_first_use(self, monkeypatch):
        from cscreader.core import config as config_module
        monkeypatch.setattr(config_module, '_config', None)
        config = get_config()
        assert config is get_config()
        assert config.default_dtype is DType.float64

    def test_dtype_resolved_from_name(self):
        set_default_dtype(np.float32)
        assert get_config().default_dtype is DType.float32
        assert repr(get_config()) == "Config(default_dtype=float32, index_dtype=int64)"
