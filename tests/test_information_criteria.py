import numpy as np
import pytest

from lboost.information_criteria import InformationCriterion


def test_corrected_aic_formula():
    n = 100
    rss = np.array([50.0, 20.0, 10.0])
    trace = np.array([1.0, 2.5, 4.0])
    ic = InformationCriterion(n, trace, "corrected").from_rss(rss)
    expected = np.log(rss / n) + (1 + trace / n) / (1 - (trace + 2) / n)
    assert np.allclose(ic, expected)


def test_corrected_aic_is_infinite_without_degrees_of_freedom():
    ic = InformationCriterion(10, np.array([1.0, 8.0, 9.5]), "corrected").from_rss(
        np.array([1.0, 1.0, 1.0])
    )
    assert np.isfinite(ic[0])
    assert np.all(np.isinf(ic[1:]))


@pytest.mark.parametrize("criterion", ["aic", "aicc", "bic", "hqc"])
def test_gaussian_criteria_from_rss(criterion):
    n, p, rss = 50, 3, 12.0
    ll = -n / 2 * np.log(rss / n) - n / 2 * (1 + np.log(2 * np.pi))
    expected = {
        "aic": -2 * ll + 2 * p,
        "aicc": -2 * ll + 2 * p * n / (n - p - 1),
        "bic": -2 * ll + p * np.log(n),
        "hqc": -2 * ll + 2 * p * np.log(np.log(n)),
    }[criterion]
    # The criteria drop the constant of the log-likelihood
    constant = n * (1 + np.log(2 * np.pi))
    ic = InformationCriterion(n, p, criterion).from_rss(rss)
    assert np.isclose(ic + constant, expected)


def test_aicc_is_infinite_without_degrees_of_freedom():
    ic = InformationCriterion(10, np.array([2.0, 9.0]), "aicc").from_rss(1.0)
    assert np.isfinite(ic[0])
    assert np.isinf(ic[1])


def test_criteria_agree_on_the_minimum_for_constant_df():
    rss = np.array([30.0, 12.0, 15.0])
    for criterion in ["aic", "aicc", "bic", "hqc", "corrected"]:
        ic = InformationCriterion(100, 2.0, criterion).from_rss(rss)
        assert np.argmin(ic) == 1


def test_unknown_criterion():
    with pytest.raises(ValueError, match="not recognized"):
        InformationCriterion(10, 1, "gic")
