import numpy as np
import pytest

from lboost.sampling import sample_boosting_steps


def test_sample_boosting_steps_shift():
    # linspace(0, 10, 5) = [0, 2.5, 5, 7.5, 10] rounds to [0, 2, 5, 8, 10]
    steps = sample_boosting_steps(10, 5, 0.0, 1.0, max_step=100)
    assert steps.tolist() == [1, 3, 6, 9, 11]


def test_sample_boosting_steps_no_shift():
    steps = sample_boosting_steps(20, 3, 0.5, 2.0, max_step=100)
    assert steps.tolist() == [10, 25, 40]


def test_sample_boosting_steps_clipped():
    steps = sample_boosting_steps(80, 3, 0.0, 2.0, max_step=100)
    assert steps.tolist() == [1, 81, 100]


@pytest.mark.parametrize("stop", [1, 2, 7, 30])
@pytest.mark.parametrize("factors", [(0.0, 1.0), (0.2, 1.5), (1.0, 1.0)])
def test_sample_single_step(stop, factors):
    lf, uf = factors
    expected = max(int(np.rint((lf + uf) / 2 * stop)), 1)
    steps = sample_boosting_steps(stop, 1, lf, uf, max_step=1000)
    assert steps.tolist() == [expected]


@pytest.mark.parametrize("stop", [1, 3, 50, 999, 1000])
@pytest.mark.parametrize("n_steps", [1, 2, 10, 50])
@pytest.mark.parametrize("factors", [(0.0, 1.0), (0.0, 2.0), (0.2, 1.5)])
def test_sample_boosting_steps_bounds(stop, n_steps, factors):
    steps = sample_boosting_steps(stop, n_steps, *factors, max_step=1000)
    assert steps.shape == (n_steps,)
    assert steps.min() >= 1
    assert steps.max() <= 1000
    assert np.all(np.diff(steps) >= 0)
