import numpy as np
import pytest

from lboost.gram import init_gram, init_y_gram


@pytest.mark.parametrize("N", [100, 1000], ids=lambda x: f"N_{x}")
@pytest.mark.parametrize("D", [1, 2, 10], ids=lambda x: f"D_{x}")
@pytest.mark.parametrize(
    "random_weights", [True, False], ids=lambda x: f"random_weights_{x}"
)
def test_gram(N, D, random_weights):
    rng = np.random.default_rng(N + D)
    X = rng.normal(size=(N, D))
    y = rng.normal(size=N)
    w = rng.uniform(size=N) if random_weights else np.ones(N)

    expected_gram = X.T @ np.diag(w) @ X
    expected_y_gram = X.T @ np.diag(w) @ y

    assert np.allclose(init_gram(X, w), expected_gram)
    assert np.allclose(init_y_gram(X, y, w), expected_y_gram)
