import numpy as np
from sklearn.base import BaseEstimator, TransformerMixin, _fit_context
from sklearn.utils.validation import (
    _check_sample_weight,
    check_is_fitted,
    validate_data,
)


class WeightedScaler(TransformerMixin, BaseEstimator):

    _parameter_constraints = {
        "with_mean": [bool],
        "with_std": [bool],
    }

    def __init__(
        self,
        with_mean: bool = True,
        with_std: bool = True,
    ):
        """The weighted scaler centers and scales matrices with observation weights.

        The mean and the standard deviation are weighted averages, i.e. the standard deviation
        uses the denominator $\\sum_i w_i$. This is the standardization of the elastic net
        objective, where the coefficients are estimated on the standardized scale and
        transformed back afterwards.

        Args:
            with_mean (bool, optional): Whether to subtract the weighted mean. Defaults to True.
            with_std (bool, optional): Whether to divide by the weighted standard deviation.
                Columns without variation are not scaled. Defaults to True.
        """
        self.with_mean = with_mean
        self.with_std = with_std

    @_fit_context(prefer_skip_nested_validation=True)
    def fit(
        self,
        X: np.ndarray,
        y: None = None,
        sample_weight: np.ndarray | None = None,
    ) -> "WeightedScaler":
        """Fit the WeightedScaler() object.

        Args:
            X (np.ndarray): Matrix of covariates X.
            y (None, optional): Not used, present for compatibility with sklearn API. Defaults to None.
            sample_weight (np.ndarray, optional): Weights for each sample. Defaults to None (uniform weights).
        """
        X = validate_data(
            self,
            X=X,
            y=None,
            reset=True,
            dtype=[np.float64, np.float32],
        )
        sample_weight = _check_sample_weight(X=X, sample_weight=sample_weight)
        self.n_observations_ = sample_weight.sum()

        self.mean_ = np.average(X, weights=sample_weight, axis=0)
        self.var_ = np.average((X - self.mean_) ** 2, weights=sample_weight, axis=0)
        self._is_constant = np.ptp(X, axis=0) == 0
        return self

    @property
    def scale_(self) -> np.ndarray:
        """Scale applied to each column. Columns without variation have scale 1."""
        check_is_fitted(self, ["mean_", "var_"])
        if not self.with_std:
            return np.ones_like(self.var_)
        std = np.sqrt(self.var_)
        return np.where((std > 0) & ~self._is_constant, std, 1.0)

    @property
    def offset_(self) -> np.ndarray:
        """Offset subtracted from each column."""
        check_is_fitted(self, ["mean_", "var_"])
        if not self.with_mean:
            return np.zeros_like(self.mean_)
        return self.mean_

    def transform(self, X: np.ndarray) -> np.ndarray:
        """Transform X to a mean-std scaled matrix.

        Args:
            X (np.ndarray): X matrix for covariates.

        Returns:
            np.ndarray: Scaled X matrix.
        """
        check_is_fitted(self, ["mean_", "var_"])
        X = validate_data(
            self,
            X=X,
            y=None,
            reset=False,
            dtype=[np.float64, np.float32],
        )
        return (X - self.offset_) / self.scale_

    def inverse_transform(self, X: np.ndarray) -> np.ndarray:
        """Back-transform a scaled X matrix to the original domain.

        Args:
            X (np.ndarray): Scaled X matrix.

        Returns:
            np.ndarray: Scaled back to the original scale.
        """
        check_is_fitted(self, ["mean_", "var_"])
        X = validate_data(
            self,
            X=X,
            reset=False,
            dtype=[np.float64, np.float32],
        )
        return X * self.scale_ + self.offset_
