from abc import ABC, abstractmethod

import numpy as np


class EstimationMethod(ABC):
    """Base class for the first stage estimation methods."""

    @abstractmethod
    def fit_beta_path(
        self,
        X: np.ndarray,
        y: np.ndarray,
        weights: np.ndarray,
        lambda_path: np.ndarray,
    ):
        """Fit the coefficients for each penalty in `lambda_path`.

        Returns a sparse coefficient matrix of shape n_features x n_lambda without the intercept.
        """
