"""
Tests for single element access.
"""

import pytest
import numpy as np
from cscreader import CscStore, IndexOutOfBounds

from conftest import dense_of


class TestGet:
    """Test CscStore.get."""

    def test_stored_values(self, example_store):
        assert example_store.get(0, 0) == 10
        assert example_store.get(3, 0) == 40
        assert example_store.get(1, 2) == 20
        assert example_store.get(3, 2) == 50

    def test_absent_values(self, example_store):
        assert example_store.get(1, 1) == 0
        assert example_store.get(2, 0) == 0
        assert example_store.get(0, 2) == 0

    def test_matches_dense(self, example_store, example_dense):
        np.testing.assert_array_equal(dense_of(example_store), example_dense)

    def test_matches_scipy(self, random_store, random_csc):
        np.testing.assert_array_equal(dense_of(random_store), random_csc.toarray())

    def test_numpy_indices(self, example_store):
        assert example_store.get(np.int64(3), np.int32(0)) == 40

    def test_bool_store(self):
        store = CscStore([True], [1], [0, 1], shape=(2, 1), dtype='bool')
        assert store.get(1, 0) is np.True_
        assert store.get(0, 0) is np.False_

    def test_int_store(self):
        store = CscStore([7], [0], [0, 1], shape=(1, 1), dtype='int32')
        value = store.get(0, 0)
        assert value == 7
        assert value.dtype == np.int32

    @pytest.mark.parametrize("r, c", [(4, 0), (0, 3), (-1, 0), (0, -1)])
    def test_out_of_bounds(self, example_store, r, c):
        with pytest.raises(IndexOutOfBounds):
            example_store.get(r, c)

    def test_non_integer_index(self, example_store):
        with pytest.raises(TypeError):
            example_store.get(1.0, 0)


class TestGetItem:
    """Test store[...] indexing."""

    def test_element(self, example_store):
        assert example_store[3, 2] == 50

    def test_row_slice(self, example_store):
        np.testing.assert_array_equal(example_store[3, :], [40, 0, 50])
        np.testing.assert_array_equal(example_store[3, 1:], [0, 50])

    def test_col_slice(self, example_store):
        np.testing.assert_array_equal(example_store[:, 2], [0, 20, 0, 50])
        np.testing.assert_array_equal(example_store[1:3, 2], [20, 0])

    def test_invalid_keys(self, example_store):
        with pytest.raises(TypeError):
            example_store[0]
        with pytest.raises(TypeError):
            example_store[:, :]
        with pytest.raises(TypeError):
            example_store[::2, 0]

    def test_out_of_bounds(self, example_store):
        with pytest.raises(IndexOutOfBounds):
            example_store[4, 0]
        with pytest.raises(IndexOutOfBounds):
            example_store[0, 1:5]
