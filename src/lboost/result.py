from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
import scipy.sparse as sp

from .active_set import ActiveSet
from .error import check_length


@dataclass(frozen=True, eq=False)
class LassoedBoostResult:
    """The lassoed boosting estimates.

    Attributes:
        beta (sp.csc_array): Coefficient matrix of shape (p + 1) x (nlambda * nb). Row 0 holds the
            intercepts, column block $i$ the `nb` sampled boosting solutions of penalty $\\lambda_i$.
        x (np.ndarray): The design matrix used for fitting.
        y (np.ndarray): The response used for fitting.
        intercept (bool): Whether `coef()` and `predict()` include the intercept.
        nlambda (int): Number of penalty values.
        nb (int): Number of sampled boosting solutions per penalty value.
        stop_num (np.ndarray): Stopping iteration of boosting for each penalty value. Values close to
            `bstop` or a small number of distinct values hint at a poor choice of `bstop`, `lf` or `uf`.
        lambda_ (np.ndarray): The penalty sequence.
        active_sets (Tuple[ActiveSet, ...]): The lasso active set for each penalty value.
        steps (Tuple[np.ndarray, ...]): The sampled boosting iterations for each penalty value.
        feature_names (np.ndarray | None): Variable names, if the design matrix had any.
    """

    beta: sp.csc_array
    x: np.ndarray
    y: np.ndarray
    intercept: bool
    nlambda: int
    nb: int
    stop_num: np.ndarray
    lambda_: np.ndarray
    active_sets: Tuple[ActiveSet, ...]
    steps: Tuple[np.ndarray, ...]
    feature_names: Optional[np.ndarray] = None

    @property
    def row_names(self) -> Optional[np.ndarray]:
        """Row labels of `beta`, i.e. `"intercept"` and the variable names."""
        if self.feature_names is None:
            return None
        return np.concatenate((["intercept"], self.feature_names)).astype(object)

    def coef(self) -> sp.csc_array:
        """The coefficient matrix, without the intercept row if `intercept` is false."""
        if self.intercept:
            return self.beta
        return self.beta[1:, :]

    def predict(self, newx: Optional[np.ndarray] = None) -> np.ndarray:
        """Predict for all stored solutions.

        Args:
            newx (np.ndarray, optional): Design matrix with the same variables as `x`. Defaults to `x`.

        Returns:
            np.ndarray: Predictions of shape n x (nlambda * nb).
        """
        if newx is None:
            newx = self.x
        newx = np.asarray(newx, dtype=np.float64)
        if newx.ndim == 1:
            newx = newx.reshape(1, -1)
        check_length(
            name="the columns of newx",
            actual=newx.shape[1],
            expected=self.beta.shape[0] - 1,
            expected_name="the number of variables",
        )
        if self.intercept:
            newx = np.hstack((np.ones((newx.shape[0], 1)), newx))
        return np.asarray((self.coef().T @ newx.T).T)
