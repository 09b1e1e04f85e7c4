from .elasticnet import ElasticNetPath
from .lasso_path import LassoPath


def get_estimation_method(
    alpha: float,
    standardize: bool,
    fit_intercept: bool,
    tolerance: float,
) -> ElasticNetPath:
    """Return the first stage path estimator for the mixing parameter `alpha`."""
    if alpha == 1:
        return LassoPath(
            standardize=standardize,
            fit_intercept=fit_intercept,
            tolerance=tolerance,
        )
    return ElasticNetPath(
        alpha=alpha,
        standardize=standardize,
        fit_intercept=fit_intercept,
        tolerance=tolerance,
    )
