from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, eq=False)
class CenteringStats:
    """Centering and scaling statistics of the training data.

    Attributes:
        x_mean (np.ndarray): Column means of $X$, used to recover the intercept.
        y_mean (float): Mean of the response.
        x_standardized (np.ndarray): Column-centred $X$ divided by the sample standard deviation.
        y_demeaned (np.ndarray): The demeaned response.
        lambda_max (float): Smallest penalty for which the lasso solution is (approximately) empty.
    """

    x_mean: np.ndarray
    y_mean: float
    x_standardized: np.ndarray
    y_demeaned: np.ndarray
    lambda_max: float

    @property
    def n_observations(self) -> int:
        return self.x_standardized.shape[0]


def centering_stats(X: np.ndarray, y: np.ndarray) -> CenteringStats:
    """Compute the centering statistics and the maximum penalty.

    The maximum penalty is defined as
    $$\\lambda_\\max = \\max_j \\left| \\frac{1}{n} \\sum_i (y_i - \\bar{y}) \\tilde{x}_{ij} \\right|$$
    where $\\tilde{x}_{ij}$ is the standardized design matrix, using the sample standard
    deviation with $n - 1$ degrees of freedom. Columns without variation are left at zero.

    Args:
        X (np.ndarray): Design matrix $X$ of shape n x p.
        y (np.ndarray): Response vector $y$ of length n.

    Returns:
        CenteringStats: The statistics.
    """
    n = X.shape[0]
    x_mean = X.mean(axis=0)
    y_mean = float(np.mean(y))

    x_centered = X - x_mean
    x_std = X.std(axis=0, ddof=1) if n > 1 else np.zeros(X.shape[1])
    x_standardized = np.divide(
        x_centered,
        x_std,
        out=np.zeros_like(x_centered, dtype=np.float64),
        where=np.ptp(X, axis=0) > 0,
    )
    y_demeaned = y - y_mean
    lambda_max = float(np.max(np.abs(y_demeaned @ x_standardized)) / n)

    return CenteringStats(
        x_mean=x_mean,
        y_mean=y_mean,
        x_standardized=x_standardized,
        y_demeaned=y_demeaned,
        lambda_max=lambda_max,
    )
