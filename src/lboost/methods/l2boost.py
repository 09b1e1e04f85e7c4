from typing import Literal, Tuple

import numba as nb
import numpy as np

from ..information_criteria import InformationCriterion


@nb.njit()
def l2boost_path(
    x_centered_t: np.ndarray,
    y: np.ndarray,
    nu: float,
    mstop: int,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Component-wise $L_2$-boosting with linear base learners.

    Starting from the offset $\\bar{y}$, every iteration fits each centred variable to the
    current residuals by least squares (without intercept), selects the variable with the
    smallest residual sum of squares and adds $\\nu$ times its fit.

    Alongside the coefficients we track the boosting operator $B_m$ with
    $\\hat{y}_m - \\bar{y} = B_m y$, which follows the recursion
    $$B_m = B_{m-1} + \\nu H_{j_m} (I - B_{m-1}), \\quad H_j = u_j u_j^T$$
    for the normalised variable $u_j$. Since every $B_m$ lies in the span of the $u_j$,
    we store $B_m = U G_m$ with a $k \\times n$ matrix $G_m$ and the trace is
    $tr(B_m) = \\sum_j u_j^T G_{m, j}$.

    !!! numba "Numba"
        This function uses `numba` just-in-time-compilation.

    Args:
        x_centered_t (np.ndarray): Transposed, column-centred design matrix of shape k x n.
        y (np.ndarray): Response vector of length n.
        nu (float): Learning rate.
        mstop (int): Number of boosting iterations.

    Returns:
        Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]: Coefficient path ((mstop + 1) x k),
            residual sum of squares and operator trace (both mstop + 1, starting at iteration 0) and
            the selected variable in each iteration (mstop, -1 if nothing could be selected).
    """
    k, n = x_centered_t.shape
    norms = np.zeros(k)
    u = np.zeros((k, n))
    for j in range(k):
        norms[j] = x_centered_t[j] @ x_centered_t[j]
        if norms[j] > 0:
            u[j] = x_centered_t[j] / np.sqrt(norms[j])
    utu = u @ u.T
    hat = np.zeros((k, n))

    coef_path = np.zeros((mstop + 1, k))
    rss = np.zeros(mstop + 1)
    trace = np.zeros(mstop + 1)
    selected = np.full(mstop, -1, dtype=np.int64)

    residuals = y - np.mean(y)
    rss[0] = residuals @ residuals

    for m in range(1, mstop + 1):
        best = -1
        best_gain = 0.0
        for j in range(k):
            if norms[j] > 0:
                gain = (x_centered_t[j] @ residuals) ** 2 / norms[j]
                if (best == -1) or (gain > best_gain):
                    best = j
                    best_gain = gain

        coef_path[m] = coef_path[m - 1]
        if best == -1:
            rss[m] = rss[m - 1]
            trace[m] = trace[m - 1]
            continue

        step = nu * (x_centered_t[best] @ residuals) / norms[best]
        coef_path[m, best] += step
        residuals -= step * x_centered_t[best]
        rss[m] = residuals @ residuals

        hat[best] += nu * (u[best] - utu[best] @ hat)
        trace[m] = np.sum(u * hat)
        selected[m - 1] = best

    return coef_path, rss, trace, selected


class L2BoostPath:
    """
    Least squares boosting path.

    Fits component-wise $L_2$-boosting with linear base learners for `mstop` iterations. The variables are centred
    and the offset is the mean of the response, so the boosting fit itself has no intercept term; the intercept of
    iteration $m$ is $\\bar{y} - \\bar{x}^T \\beta_m$.

    The stopping iteration is chosen by an information criterion over iterations $1, \\dots, m_{stop}$, where the
    degrees of freedom are the trace of the boosting operator. By default, the corrected AIC is used.

    As the base learners of variables that have not been selected yet do not carry a coefficient, `coef(m)` reports
    the selected variables and their coefficients only.
    """

    def __init__(
        self,
        mstop: int = 1000,
        nu: float = 0.1,
        criterion: Literal["aic", "aicc", "bic", "hqc", "corrected"] = "corrected",
    ):
        """
        Args:
            mstop (int, optional): Number of boosting iterations. Defaults to 1000.
            nu (float, optional): Learning rate. Defaults to 0.1.
            criterion (Literal["aic", "aicc", "bic", "hqc", "corrected"], optional): Stopping criterion. Defaults to "corrected".
        """
        self.mstop = mstop
        self.nu = nu
        self.criterion = criterion

    def fit(self, X: np.ndarray, y: np.ndarray) -> "L2BoostPath":
        """Fit the boosting path.

        Args:
            X (np.ndarray): Design matrix of shape n x k.
            y (np.ndarray): Response vector of length n.
        """
        X = np.asarray(X, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        self.n_observations_ = X.shape[0]
        self.x_mean_ = X.mean(axis=0)
        self.offset_ = float(y.mean())

        x_centered = X - self.x_mean_
        x_centered[:, np.ptp(X, axis=0) == 0] = 0
        self.coef_path_, self.rss_, self.trace_, self.selected_ = l2boost_path(
            np.ascontiguousarray(x_centered.T), y, float(self.nu), int(self.mstop)
        )
        return self

    @property
    def ic_(self) -> np.ndarray:
        """The information criterion for iterations 1 to `mstop`."""
        return InformationCriterion(
            n_observations=self.n_observations_,
            n_parameters=self.trace_[1:],
            criterion=self.criterion,
        ).from_rss(rss=self.rss_[1:])

    @property
    def stop_(self) -> int:
        """The iteration minimising the information criterion."""
        return int(np.argmin(self.ic_)) + 1

    def coef(self, iteration: int) -> Tuple[np.ndarray, np.ndarray]:
        """Coefficients of the selected variables after `iteration` steps.

        Args:
            iteration (int): The boosting iteration in $[0, m_{stop}]$.

        Returns:
            Tuple[np.ndarray, np.ndarray]: Ascending local indices of the selected variables and their coefficients.
        """
        if (iteration < 0) or (iteration > self.mstop):
            raise ValueError(
                f"Iteration {iteration} is outside of the fitted path [0, {self.mstop}]."
            )
        index = np.unique(self.selected_[:iteration])
        index = index[index >= 0]
        return index, self.coef_path_[iteration, index]

    def intercept(self, iteration: int) -> float:
        """Intercept after `iteration` steps."""
        index, values = self.coef(iteration)
        return self.offset_ - self.x_mean_[index] @ values
