import numpy as np
import scipy.sparse as sp

from ..base import EstimationMethod
from ..coordinate_descent import coordinate_descent_path
from ..gram import init_gram, init_y_gram
from ..scaler import WeightedScaler


class ElasticNetPath(EstimationMethod):
    """
    Path-based elastic net estimation.

    The elastic net method runs coordinate descent along a decreasing grid of regularization strengths (lambdas) and minimises

    $$\\frac{1}{2} \\sum_i w_i (y_i - \\beta_0 - x_i^T\\beta)^2 + \\lambda \\left(\\frac{1 - \\alpha}{2} ||\\beta||_2^2 + \\alpha ||\\beta||_1\\right)$$

    where the weights are normalised to sum to one. Parameter $\\alpha$ controls the balance between LASSO and Ridge. Thereby, $\\alpha=0$ corresponds to Ridge regression and $\\alpha=1$ corresponds to LASSO regression.

    If `fit_intercept` is set, $X$ and $y$ are centred with their weighted means, i.e. the intercept is never
    penalised. The intercept itself is not returned. If `standardize` is set, the variables are scaled before the
    path is fitted and the coefficients are transformed back to the original scale. As in `glmnet`, the scale is the
    weighted standard deviation if an intercept is fitted and the uncentred weighted root mean square otherwise.

    Each regularization strength is warm-started on the previous one. We use active set iterations, i.e.
    only non-zero coefficients are updated between full sweeps, and every solution ends with a full sweep
    that confirms no further variable enters.

    We use `numba` to speed up the coordinate descent algorithm.
    """

    def __init__(
        self,
        alpha: float,
        standardize: bool = True,
        fit_intercept: bool = True,
        tolerance: float = 1e-7,
        max_iterations: int = 10000,
    ):
        """
        Initializes the ElasticNet method with the specified parameters.

        Args:
            alpha (float): Mixing parameter between the L1 and L2 loss. Alpha = 0 corresponds to the Rigde, Alpha = 1 corresponds to the LASSO.
            standardize (bool): Whether to standardize the variables before fitting. Default is True.
            fit_intercept (bool): Whether to fit an unpenalized intercept by centering. Default is True.
            tolerance (float): Tolerance for the optimization. Default is 1e-7.
            max_iterations (int): Maximum number of iterations for the optimization. Default is 10000.
        """
        self.alpha = alpha
        self.standardize = standardize
        self.fit_intercept = fit_intercept
        self.tolerance = tolerance
        self.max_iterations = max_iterations

    def _prepare_design(self, X: np.ndarray, y: np.ndarray, weights: np.ndarray):
        if not self.fit_intercept:
            # Without intercept, the variables are scaled by their uncentred root mean square
            if self.standardize:
                rms = np.sqrt(np.average(X**2, weights=weights, axis=0))
                scale = np.where(rms > 0, rms, 1.0)
            else:
                scale = np.ones(X.shape[1])
            return X / scale, y, scale

        scaler = WeightedScaler(with_mean=True, with_std=self.standardize)
        scaler.fit(X, sample_weight=weights)
        X_scaled = scaler.transform(X)
        # Constant columns can't be selected
        X_scaled[:, scaler._is_constant] = 0
        y = y - np.average(y, weights=weights)
        return X_scaled, y, scaler.scale_

    def fit_beta_path(
        self,
        X: np.ndarray,
        y: np.ndarray,
        weights: np.ndarray,
        lambda_path: np.ndarray,
    ) -> sp.csc_array:
        """Fit the elastic net path.

        Args:
            X (np.ndarray): Design matrix of shape n x p.
            y (np.ndarray): Response vector of length n.
            weights (np.ndarray): Non-negative observation weights of length n.
            lambda_path (np.ndarray): Decreasing regularization strengths.

        Returns:
            sp.csc_array: Coefficients on the original scale, of shape p x n_lambda.
        """
        weights = np.asarray(weights, dtype=np.float64)
        weights = weights / weights.sum()
        X_scaled, y_centered, scale = self._prepare_design(X, y, weights)

        x_gram = init_gram(np.ascontiguousarray(X_scaled, dtype=np.float64), weights)
        y_gram = init_y_gram(
            np.ascontiguousarray(X_scaled, dtype=np.float64),
            np.asarray(y_centered, dtype=np.float64),
            weights,
        )
        beta_path, self.iterations_ = coordinate_descent_path(
            x_gram=x_gram,
            y_gram=y_gram,
            lambda_path=np.asarray(lambda_path, dtype=np.float64),
            alpha=float(self.alpha),
            tolerance=self.tolerance,
            max_iterations=self.max_iterations,
        )
        beta_path = beta_path / scale
        return sp.csc_array(beta_path.T)
