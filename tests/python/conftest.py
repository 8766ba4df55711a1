"""
Pytest configuration and shared fixtures for cscreader tests.
"""

import pytest
import numpy as np
import scipy.sparse as sp
from pathlib import Path
import sys

# Add src to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root / "src"))

from cscreader import CscStore, reset_config


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Run every test against the default configuration."""
    monkeypatch.delenv("CSCREADER_DEFAULT_DTYPE", raising=False)
    monkeypatch.delenv("CSCREADER_INDEX_DTYPE", raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def example_arrays():
    """Arrays of a 4x3 matrix with an empty middle column.

    Matrix:
    [[10,  0,  0],
     [ 0,  0, 20],
     [ 0,  0,  0],
     [40,  0, 50]]
    """
    return {
        'x': [10, 40, 20, 50],
        'i': [0, 3, 1, 3],
        'p': [0, 2, 2, 4],
        'shape': (4, 3),
    }


@pytest.fixture
def example_store(example_arrays):
    """CscStore over ``example_arrays``."""
    a = example_arrays
    return CscStore(a['x'], a['i'], a['p'], a['shape'])


@pytest.fixture
def example_dense():
    """Dense version of the example matrix."""
    return np.array([
        [10, 0, 0],
        [0, 0, 20],
        [0, 0, 0],
        [40, 0, 50],
    ], dtype=np.float64)


@pytest.fixture
def random_csc():
    """Random 60x45 scipy CSC matrix with empty rows and columns."""
    mat = sp.random(60, 45, density=0.15, format='csc', random_state=42, dtype=np.float64)
    mat = mat.tolil()
    mat[:, 7] = 0
    mat[:, 30] = 0
    mat[12, :] = 0
    mat = mat.tocsc()
    mat.eliminate_zeros()
    mat.sort_indices()
    return mat


@pytest.fixture
def random_store(random_csc):
    """CscStore over ``random_csc``."""
    return CscStore.from_scipy(random_csc)


# =============================================================================
# Helper Functions
# =============================================================================

def dense_of(store):
    """Dense matrix built from element lookups only."""
    nrow, ncol = store.shape
    dense = np.zeros((nrow, ncol), dtype=store.values.dtype)
    for r in range(nrow):
        for c in range(ncol):
            dense[r, c] = store.get(r, c)
    return dense


def assert_row_matches(store, result, r, first, last):
    """Assert a row slice agrees with element lookups."""
    expected = [store.get(r, c) for c in range(first, last)]
    np.testing.assert_array_equal(result, np.asarray(expected, dtype=store.values.dtype))
