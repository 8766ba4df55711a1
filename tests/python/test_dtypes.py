"""
Tests for dtype system.
"""

import pytest
import numpy as np
from cscreader.sparse._dtypes import (
    DType,
    normalize_dtype,
    validate_dtype,
    is_float_dtype,
    is_int_dtype,
    is_bool_dtype,
    empty_value,
    float32,
    float64,
    int32,
    int64,
    bool_,
)


class TestDTypeConstants:
    """Test dtype constants."""

    def test_dtype_constants(self):
        assert float32 is DType.float32
        assert float64 is DType.float64
        assert int32 is DType.int32
        assert int64 is DType.int64
        assert bool_ is DType.bool

    def test_numpy_dtype(self):
        assert DType.float32.numpy_dtype == np.float32
        assert DType.bool.numpy_dtype == np.bool_

    def test_str(self):
        assert str(DType.int64) == 'int64'
        assert repr(DType.int64) == 'DType.int64'


class TestNormalizeDType:
    """Test dtype normalization."""

    def test_normalize_string(self):
        assert normalize_dtype('float32') == 'float32'
        assert normalize_dtype('int64') == 'int64'
        assert normalize_dtype('bool') == 'bool'

    def test_normalize_dtype_enum(self):
        assert normalize_dtype(float32) == 'float32'

    def test_normalize_numpy(self):
        assert normalize_dtype(np.int32) == 'int32'
        assert normalize_dtype(np.dtype('f8')) == 'float64'
        assert normalize_dtype(bool) == 'bool'

    def test_normalize_unsupported(self):
        with pytest.raises(ValueError):
            normalize_dtype('complex128')
        with pytest.raises(ValueError):
            normalize_dtype('not_a_type')

    def test_normalize_none(self):
        with pytest.raises(ValueError):
            normalize_dtype(None)


class TestValidateDType:
    """Test dtype validation."""

    def test_validate_valid_dtypes(self):
        for dtype in ['float32', 'float64', 'int32', 'int64', 'bool']:
            validate_dtype(dtype)

    def test_validate_invalid_dtype(self):
        with pytest.raises(ValueError):
            validate_dtype('uint8')


class TestDTypeKinds:
    """Test kind predicates."""

    def test_is_float_dtype(self):
        assert is_float_dtype('float32') is True
        assert is_float_dtype('int32') is False

    def test_is_int_dtype(self):
        assert is_int_dtype('int64') is True
        assert is_int_dtype('float64') is False

    def test_is_bool_dtype(self):
        assert is_bool_dtype(bool_) is True
        assert is_bool_dtype('int32') is False


class TestEmptyValue:
    """Test empty values."""

    @pytest.mark.parametrize("dtype, expected", [
        ('float64', 0.0),
        ('float32', 0.0),
        ('int32', 0),
        ('int64', 0),
        ('bool', False),
    ])
    def test_empty_value(self, dtype, expected):
        value = empty_value(dtype)
        assert value == expected
        assert value.dtype == np.dtype(dtype)
