import numpy as np
import pytest
import scipy.sparse as sp

from lboost.active_set import ActiveSet
from lboost.assembly import CoefficientMatrixBuilder, reconstruct_block


def test_reconstruct_block():
    active_set = ActiveSet(np.array([0, 2]), n_features=4)
    x_mean = np.array([1.0, 10.0, -2.0, 5.0])
    local_coef = np.array([[0.5, 1.0], [1.0, 2.0]])

    block = reconstruct_block(active_set, local_coef, x_mean=x_mean, y_mean=3.0)

    assert block.rows.tolist() == [0, 1, 3]
    assert block.n_steps == 2
    assert np.allclose(block.values[0], [3.0 - 0.5 + 2.0, 3.0 - 1.0 + 4.0])
    assert np.allclose(block.values[1:], local_coef.T)


def test_builder_layout():
    n_features, n_steps = 4, 2
    builder = CoefficientMatrixBuilder(n_features, n_blocks=3, n_steps=n_steps)
    x_mean = np.zeros(n_features)

    first = reconstruct_block(
        ActiveSet(np.array([1]), n_features), np.array([[1.0], [2.0]]), x_mean, 1.0
    )
    last = reconstruct_block(
        ActiveSet(np.array([0, 3]), n_features),
        np.array([[3.0, 4.0], [5.0, 6.0]]),
        x_mean,
        -1.0,
    )
    builder.add(0, first)
    builder.add(1, None)
    builder.add(2, last)
    beta = builder.to_sparse()

    assert isinstance(beta, sp.csc_array)
    assert beta.shape == (5, 6)
    expected = np.zeros((5, 6))
    expected[0, 0:2] = 1.0
    expected[2, 0:2] = [1.0, 2.0]
    expected[0, 4:6] = -1.0
    expected[1, 4:6] = [3.0, 5.0]
    expected[4, 4:6] = [4.0, 6.0]
    assert np.array_equal(beta.toarray(), expected)


def test_builder_empty():
    beta = CoefficientMatrixBuilder(3, n_blocks=2, n_steps=4).to_sparse()
    assert beta.shape == (4, 8)
    assert beta.nnz == 0


def test_builder_rejects_wrong_block_size():
    builder = CoefficientMatrixBuilder(3, n_blocks=2, n_steps=4)
    block = reconstruct_block(
        ActiveSet(np.array([1]), 3), np.ones((2, 1)), np.zeros(3), 0.0
    )
    with pytest.raises(ValueError, match="expected 4"):
        builder.add(0, block)
