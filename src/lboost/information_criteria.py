from typing import Literal, Union

import numpy as np

ArrayLike = Union[float, np.ndarray]


class InformationCriterion:
    """Information criteria for Gaussian fits with (effective) degrees of freedom.

    The degrees of freedom $df$ can be fractional, e.g. the trace of the boosting operator.
    All criteria are computed from the residual sum of squares with $\\hat\\sigma^2 = RSS / n$.

    | `criterion`   | Formula                                                       |
    |---------------|---------------------------------------------------------------|
    | `"aic"`       | $n \\log(\\hat\\sigma^2) + 2 df$                              |
    | `"aicc"`      | $n \\log(\\hat\\sigma^2) + 2 df \\, n / (n - df - 1)$         |
    | `"bic"`       | $n \\log(\\hat\\sigma^2) + df \\log(n)$                       |
    | `"hqc"`       | $n \\log(\\hat\\sigma^2) + 2 df \\log(\\log(n))$              |
    | `"corrected"` | $\\log(\\hat\\sigma^2) + (1 + df/n) / (1 - (df + 2) / n)$     |

    The first four drop the constant $n (1 + \\log(2 \\pi))$ of the Gaussian log-likelihood,
    which does not change the minimiser. `"corrected"` is the AIC of Hurvich, Simonoff and Tsai
    for linear smoothers, as used to stop $L_2$-boosting. Where its denominator is not positive,
    i.e. $df \\geq n - 2$, the criterion is `np.inf`. The same applies to `"aicc"` for
    $df \\geq n - 1$.
    """

    def __init__(
        self,
        n_observations: int,
        n_parameters: ArrayLike,
        criterion: Literal["aic", "aicc", "bic", "hqc", "corrected"] = "corrected",
    ):
        """
        Args:
            n_observations (int): Number of observations $n$.
            n_parameters (float or np.ndarray): Degrees of freedom $df$, e.g. one per boosting iteration.
            criterion (Literal["aic", "aicc", "bic", "hqc", "corrected"], optional): The criterion. Defaults to "corrected".

        Raises:
            ValueError: If the criterion is not recognized.
        """
        if criterion not in _PENALTIES:
            raise ValueError(
                f"Criterion '{criterion}' not recognized. "
                f"Choose one of {sorted(_PENALTIES)}."
            )
        self.n_observations = n_observations
        self.n_parameters = n_parameters
        self.criterion = criterion

    def penalty(self) -> ArrayLike:
        """The complexity penalty of the criterion."""
        n, df = self.n_observations, np.asarray(self.n_parameters, dtype=np.float64)
        with np.errstate(divide="ignore", invalid="ignore"):
            return _PENALTIES[self.criterion](n, df)

    def from_rss(self, rss: ArrayLike) -> ArrayLike:
        """Compute the criterion from the residual sum of squares.

        Args:
            rss (float or np.ndarray): Residual sum of squares, broadcast against `n_parameters`.

        Returns:
            float or np.ndarray: The criterion, smaller is better.
        """
        n = self.n_observations
        with np.errstate(divide="ignore"):
            log_sigma = np.log(np.asarray(rss, dtype=np.float64) / n)
        if self.criterion != "corrected":
            log_sigma = n * log_sigma
        return log_sigma + self.penalty()


def _aicc(n, df):
    return np.where(n - df - 1 > 0, 2 * df * n / (n - df - 1), np.inf)


def _corrected(n, df):
    denom = 1 - (df + 2) / n
    return np.where(denom > 0, (1 + df / n) / denom, np.inf)


_PENALTIES = {
    "aic": lambda n, df: 2 * df,
    "aicc": _aicc,
    "bic": lambda n, df: df * np.log(n),
    "hqc": lambda n, df: 2 * df * np.log(np.log(n)),
    "corrected": _corrected,
}
