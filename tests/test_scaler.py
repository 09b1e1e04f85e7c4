import numpy as np
import pytest
from sklearn.preprocessing import StandardScaler

from lboost import WeightedScaler


@pytest.mark.parametrize("D", [1, 10], ids=["vars_1", "vars_10"])
@pytest.mark.parametrize(
    "sample_weight",
    [True, False],
    ids=["sample_weight", "no_sample_weight"],
)
def test_weighted_scaler(D, sample_weight):
    N = 100
    rng = np.random.default_rng(42)
    X = rng.uniform(0, 10, (N, D))
    w = rng.uniform(0.1, 1.0, N) if sample_weight else None

    scaler = WeightedScaler().fit(X, sample_weight=w)
    expected = StandardScaler().fit(X, sample_weight=w)

    assert np.allclose(scaler.mean_, expected.mean_)
    assert np.allclose(scaler.var_, expected.var_)
    assert np.allclose(scaler.transform(X), expected.transform(X))
    assert np.allclose(scaler.inverse_transform(scaler.transform(X)), X)


def test_weighted_scaler_constant_column():
    rng = np.random.default_rng(1)
    X = rng.normal(size=(50, 3))
    X[:, 1] = 3.0

    scaler = WeightedScaler().fit(X)
    assert scaler.scale_[1] == 1.0
    assert np.all(scaler.transform(X)[:, 1] == 0)


@pytest.mark.parametrize("with_mean", [False, True])
@pytest.mark.parametrize("with_std", [False, True])
def test_weighted_scaler_options(with_mean, with_std):
    rng = np.random.default_rng(7)
    X = rng.normal(loc=2.0, scale=3.0, size=(200, 4))

    scaler = WeightedScaler(with_mean=with_mean, with_std=with_std).fit(X)
    X_scaled = scaler.transform(X)

    if with_mean:
        assert np.allclose(X_scaled.mean(axis=0), 0)
    else:
        assert np.all(scaler.offset_ == 0)
    if with_std:
        assert np.allclose(X_scaled.std(axis=0), 1)
    else:
        assert np.all(scaler.scale_ == 1)
