import numbers
import warnings
from typing import List, Literal, Optional, Tuple

import numpy as np
from sklearn.base import BaseEstimator, _fit_context
from sklearn.utils._param_validation import Interval, StrOptions
from sklearn.utils.validation import (
    _check_sample_weight,
    check_is_fitted,
    validate_data,
)

from ..active_set import ActiveSet, extract_active_sets, plan_reuse
from ..assembly import CoefficientBlock, CoefficientMatrixBuilder, reconstruct_block
from ..base import LboostEstimatorMixin
from ..error import ActiveSetMappingError, check_length
from ..methods import L2BoostPath, get_estimation_method
from ..penalty import check_lambda_path, default_lambda_min_ratio, make_lambda_path
from ..result import LassoedBoostResult
from ..sampling import sample_boosting_steps
from ..stats import CenteringStats, centering_stats


class LassoedBoost(LboostEstimatorMixin, BaseEstimator):
    """Lassoed boosting for the linear regression."""

    _parameter_constraints = {
        "family": [StrOptions({"gaussian"})],
        "alpha": [Interval(numbers.Real, 0.0, 1.0, closed="both")],
        "nlambda": [Interval(numbers.Integral, 1, None, closed="left")],
        "lambda_min_ratio": [Interval(numbers.Real, 0.0, None, closed="neither"), None],
        "lambda_path": ["array-like", None],
        "standardize": [bool],
        "intercept": [bool],
        "thresh": [Interval(numbers.Real, 0.0, None, closed="neither")],
        "nu": [Interval(numbers.Real, 0.0, 1.0, closed="neither")],
        "bstop": [Interval(numbers.Integral, 1, None, closed="left")],
        "nb": [Interval(numbers.Integral, 1, None, closed="left")],
        "lf": [Interval(numbers.Real, 0.0, None, closed="left")],
        "uf": [Interval(numbers.Real, 0.0, None, closed="left")],
        "reuse": [StrOptions({"size", "members", "never"})],
        "criterion": [StrOptions({"aic", "aicc", "bic", "hqc", "corrected"})],
        "verbose": [Interval(numbers.Integral, 0, None, closed="left")],
    }

    def __init__(
        self,
        family: Literal["gaussian"] = "gaussian",
        alpha: float = 1.0,
        nlambda: int = 100,
        lambda_min_ratio: Optional[float] = None,
        lambda_path: Optional[np.ndarray] = None,
        standardize: bool = True,
        intercept: bool = True,
        thresh: float = 1e-7,
        nu: float = 0.1,
        bstop: int = 1000,
        nb: int = 50,
        lf: float = 0.0,
        uf: float = 1.0,
        reuse: Literal["size", "members", "never"] = "size",
        criterion: Literal["aic", "aicc", "bic", "hqc", "corrected"] = "corrected",
        verbose: int = 0,
    ):
        """Lassoed boosting estimates for a linear regression.

        This is a two-stage procedure. In the first stage, the lasso (or elastic net) path returns
        `nlambda` active sets of variables, some of which may be the same and may include all
        variables. In the second stage, least-squares boosting spawns a coefficient path on each active
        set. The corrected AIC of the boosting path determines a stopping iteration $m_{stop}$ and
        `nb` equally spaced iterations on $[lf \\cdot m_{stop}, uf \\cdot m_{stop}]$ are reported.
        The coefficient matrix thus has `nlambda * nb` columns.

        The estimation always includes an intercept. `intercept=False` only removes it from
        `coef()` and `predict()` (and from the lasso stage).

        !!! note "Skipping boosting fits"
            If an active set has the same number of variables as the active set of the previous
            penalty value, the boosting solutions of the previous penalty value are reused. This
            assumes nested active sets along the lasso path. Use `reuse="members"` to compare the
            variables themselves or `reuse="never"` to refit every active set.

        Args:
            family (Literal["gaussian"], optional): The response family. Only `"gaussian"` is supported. Defaults to "gaussian".
            alpha (float, optional): The elastic net mixing parameter in $[0, 1]$, 1 is the lasso. Defaults to 1.0.
            nlambda (int, optional): Number of penalty values. Defaults to 100.
            lambda_min_ratio (Optional[float], optional): Smallest penalty as a fraction of $\\lambda_\\max$. Defaults to 0.01 if $n < p$ and 1e-4 otherwise.
            lambda_path (Optional[np.ndarray], optional): User supplied penalty sequence of length `nlambda`. Defaults to None, i.e. a geometric grid.
            standardize (bool, optional): Whether to standardize $X$ for the lasso stage. Defaults to True.
            intercept (bool, optional): Whether to report the intercept. Defaults to True.
            thresh (float, optional): Convergence threshold of the coordinate descent. Defaults to 1e-7.
            nu (float, optional): The learning rate of boosting in $(0, 1)$. Defaults to 0.1.
            bstop (int, optional): Number of boosting iterations. Should exceed the usual stopping iteration, or a multiple thereof if `uf > 1`. Increase for smaller `nu`. Defaults to 1000.
            nb (int, optional): Number of sampled boosting solutions per penalty value. Defaults to 50.
            lf (float, optional): Lower factor of the sampling interval. Defaults to 0.
            uf (float, optional): Upper factor of the sampling interval. Defaults to 1.
            reuse (Literal["size", "members", "never"], optional): When to reuse the boosting solutions of the previous penalty value. Defaults to "size".
            criterion (Literal["aic", "aicc", "bic", "hqc", "corrected"], optional): Criterion for the boosting stopping iteration. Defaults to "corrected".
            verbose (int, optional): Verbosity level. 0 = silent, 1 = stages, 2 = per penalty value. Defaults to 0.
        """
        self.family = family
        self.alpha = alpha
        self.nlambda = nlambda
        self.lambda_min_ratio = lambda_min_ratio
        self.lambda_path = lambda_path
        self.standardize = standardize
        self.intercept = intercept
        self.thresh = thresh
        self.nu = nu
        self.bstop = bstop
        self.nb = nb
        self.lf = lf
        self.uf = uf
        self.reuse = reuse
        self.criterion = criterion
        self.verbose = verbose

    @property
    def beta(self):
        check_is_fitted(self, "result_")
        return self.result_.beta

    def _validate_inputs(self, X: np.ndarray, sample_weight: Optional[np.ndarray]):
        if self.lf > self.uf:
            raise ValueError(
                f"The lower factor lf={self.lf} needs to be smaller than the upper factor uf={self.uf}."
            )
        if sample_weight is not None:
            sample_weight = np.asarray(sample_weight, dtype=np.float64).ravel()
            check_length(
                name="weights",
                actual=sample_weight.shape[0],
                expected=X.shape[0],
                expected_name="the number of observations",
            )
        sample_weight = _check_sample_weight(X=X, sample_weight=sample_weight)
        if np.any(sample_weight < 0) or not np.any(sample_weight > 0):
            raise ValueError(
                "The weights need to be non-negative with at least one positive weight."
            )
        return sample_weight

    def _prepare_lambda_path(self, stats: CenteringStats, n: int, p: int) -> np.ndarray:
        if self.lambda_path is not None:
            return check_lambda_path(self.lambda_path, self.nlambda)
        if self.lambda_min_ratio is None:
            lambda_min_ratio = default_lambda_min_ratio(n, p)
        else:
            lambda_min_ratio = self.lambda_min_ratio
        return make_lambda_path(stats.lambda_max, self.nlambda, lambda_min_ratio)

    def _fit_block(
        self,
        index: int,
        X: np.ndarray,
        y: np.ndarray,
        stats: CenteringStats,
        active_set: ActiveSet,
    ) -> Tuple[CoefficientBlock, int, np.ndarray]:
        booster = L2BoostPath(mstop=self.bstop, nu=self.nu, criterion=self.criterion)
        booster.fit(X[:, active_set.global_index], y)
        stop = booster.stop_
        steps = sample_boosting_steps(
            stop=stop,
            n_steps=self.nb,
            lower_factor=self.lf,
            upper_factor=self.uf,
            max_step=self.bstop,
        )

        local_coef = np.empty((self.nb, active_set.size))
        for j, step in enumerate(steps):
            try:
                local_coef[j] = active_set.scatter(*booster.coef(step))
            except ActiveSetMappingError as e:
                raise ActiveSetMappingError(
                    f"Lambda index {index}, boosting step {step}: {e.message}"
                ) from e

        block = reconstruct_block(
            active_set=active_set,
            local_coef=local_coef,
            x_mean=stats.x_mean,
            y_mean=stats.y_mean,
        )
        return block, stop, steps

    def _boost_active_sets(
        self,
        X: np.ndarray,
        y: np.ndarray,
        stats: CenteringStats,
        active_sets: List[ActiveSet],
        reuse: np.ndarray,
    ) -> Tuple[List[Optional[CoefficientBlock]], np.ndarray, List[np.ndarray]]:
        blocks = []
        stop_num = np.zeros(len(active_sets), dtype=np.int64)
        steps = []

        for i, active_set in enumerate(active_sets):
            if active_set.is_empty:
                message = f"Lambda index {i}: empty active set, no model selected."
                self._print_message(message=message, level=2)
                blocks.append(None)
                steps.append(np.zeros(0, dtype=np.int64))
                continue

            if reuse[i]:
                message = (
                    f"Lambda index {i}: {active_set.size} variables, "
                    "reusing the boosting solutions of the previous lambda."
                )
                self._print_message(message=message, level=2)
                blocks.append(blocks[i - 1])
                stop_num[i] = stop_num[i - 1]
                steps.append(steps[i - 1])
                continue

            block, stop_num[i], step = self._fit_block(
                index=i, X=X, y=y, stats=stats, active_set=active_set
            )
            message = (
                f"Lambda index {i}: {active_set.size} variables, "
                f"boosting stopped at iteration {stop_num[i]}."
            )
            self._print_message(message=message, level=2)
            blocks.append(block)
            steps.append(step)

        at_bstop = np.flatnonzero(stop_num == self.bstop)
        if at_bstop.shape[0] > 0:
            warnings.warn(
                f"[{self.__class__.__name__}] "
                f"The stopping iteration equals bstop={self.bstop} for the lambda indices "
                f"{at_bstop.tolist()}. Consider increasing bstop.",
                RuntimeWarning,
                stacklevel=3,
            )
        return blocks, stop_num, steps

    @_fit_context(prefer_skip_nested_validation=True)
    def fit(
        self,
        X: np.ndarray,
        y: np.ndarray,
        sample_weight: Optional[np.ndarray] = None,
    ) -> "LassoedBoost":
        """Fit the lassoed boosting estimates.

        Args:
            X (np.ndarray): The design matrix $X$. Column names of a `pandas.DataFrame` become row names of the coefficient matrix.
            y (np.ndarray): The response vector $y$.
            sample_weight (Optional[np.ndarray], optional): Observation weights for the lasso stage. Defaults to None, i.e. all ones.
        """
        X, y = validate_data(
            self, X=X, y=y, reset=True, dtype=[np.float64, np.float32], y_numeric=True
        )
        sample_weight = self._validate_inputs(X=X, sample_weight=sample_weight)
        n, p = X.shape

        message = f"Starting fit with {n} observations and {p} variables."
        self._print_message(message=message, level=1)

        stats = centering_stats(X, y)
        lambda_path = self._prepare_lambda_path(stats=stats, n=n, p=p)

        self._method = get_estimation_method(
            alpha=self.alpha,
            standardize=self.standardize,
            fit_intercept=self.intercept,
            tolerance=self.thresh,
        )
        lasso_coef = self._method.fit_beta_path(
            X=X, y=y, weights=sample_weight, lambda_path=lambda_path
        )
        active_sets = extract_active_sets(lasso_coef)
        reuse = plan_reuse(active_sets, rule=self.reuse)

        message = (
            f"Fitted the lasso path for {self.nlambda} lambda values, "
            f"{np.sum([not a.is_empty for a in active_sets]) - np.sum(reuse)} boosting fits required."
        )
        self._print_message(message=message, level=1)

        blocks, stop_num, steps = self._boost_active_sets(
            X=X, y=y, stats=stats, active_sets=active_sets, reuse=reuse
        )

        builder = CoefficientMatrixBuilder(
            n_features=p, n_blocks=self.nlambda, n_steps=self.nb
        )
        for i, block in enumerate(blocks):
            builder.add(i, block)

        stop_num.setflags(write=False)
        lambda_path.setflags(write=False)
        for step in steps:
            step.setflags(write=False)

        self.result_ = LassoedBoostResult(
            beta=builder.to_sparse(),
            x=X,
            y=y,
            intercept=self.intercept,
            nlambda=self.nlambda,
            nb=self.nb,
            stop_num=stop_num,
            lambda_=lambda_path,
            active_sets=tuple(active_sets),
            steps=tuple(steps),
            feature_names=getattr(self, "feature_names_in_", None),
        )
        self.coef_path_ = self.result_.beta
        self.stop_num_ = stop_num
        self.lambda_path_ = lambda_path
        self.active_sets_ = self.result_.active_sets
        self.n_observations_ = n

        self._print_message(message="Finished fit.", level=1)
        return self

    def coef(self):
        """The coefficient matrix, see `LassoedBoostResult.coef()`."""
        check_is_fitted(self, "result_")
        return self.result_.coef()

    def predict(self, X: Optional[np.ndarray] = None) -> np.ndarray:
        """Predict for all stored solutions.

        Args:
            X (Optional[np.ndarray], optional): The design matrix $X$. Defaults to None, i.e. the training data.

        Returns:
            np.ndarray: Predictions of shape n x (nlambda * nb).
        """
        check_is_fitted(self, "result_")
        if X is not None:
            X = validate_data(self, X=X, reset=False, dtype=[np.float64, np.float32])
        return self.result_.predict(X)


def lboost(
    x: np.ndarray,
    y: np.ndarray,
    family: Literal["gaussian"] = "gaussian",
    weights: Optional[np.ndarray] = None,
    alpha: float = 1.0,
    nlambda: int = 100,
    lambda_min_ratio: Optional[float] = None,
    lambda_path: Optional[np.ndarray] = None,
    standardize: bool = True,
    intercept: bool = True,
    thresh: float = 1e-7,
    nu: float = 0.1,
    bstop: int = 1000,
    nb: int = 50,
    lf: float = 0.0,
    uf: float = 1.0,
    reuse: Literal["size", "members", "never"] = "size",
    criterion: Literal["aic", "aicc", "bic", "hqc", "corrected"] = "corrected",
    verbose: int = 0,
) -> LassoedBoostResult:
    """Compute the lassoed boosting estimates of a linear regression.

    Functional interface to `LassoedBoost`, see there for the parameters.

    Example:
        ```python
        from sklearn.datasets import load_diabetes
        from lboost import lboost

        X, y = load_diabetes(return_X_y=True)
        result = lboost(X, y, nlambda=100, lf=0, uf=2, nu=0.1, bstop=100, nb=5)
        predictions = result.predict()
        ```

    Returns:
        LassoedBoostResult: The coefficient matrix, stopping iterations and the data.
    """
    estimator = LassoedBoost(
        family=family,
        alpha=alpha,
        nlambda=nlambda,
        lambda_min_ratio=lambda_min_ratio,
        lambda_path=lambda_path,
        standardize=standardize,
        intercept=intercept,
        thresh=thresh,
        nu=nu,
        bstop=bstop,
        nb=nb,
        lf=lf,
        uf=uf,
        reuse=reuse,
        criterion=criterion,
        verbose=verbose,
    )
    return estimator.fit(x, y, sample_weight=weights).result_
