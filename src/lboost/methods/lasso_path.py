from .elasticnet import ElasticNetPath


class LassoPath(ElasticNetPath):
    """
    Path-based lasso estimation.

    The lasso method runs coordinate descent along a decreasing grid of regularization strengths (lambdas).
    It is the elastic net with $\\alpha = 1$. The non-zero coefficients at each regularization strength form
    the active sets that are passed on to boosting.

    We use `numba` to speed up the coordinate descent algorithm.
    """

    def __init__(
        self,
        standardize: bool = True,
        fit_intercept: bool = True,
        tolerance: float = 1e-7,
        max_iterations: int = 10000,
    ):
        """
        Initializes the lasso method with the specified parameters.

        Args:
            standardize (bool): Whether to standardize the variables before fitting. Default is True.
            fit_intercept (bool): Whether to fit an unpenalized intercept by centering. Default is True.
            tolerance (float): Tolerance for the optimization. Default is 1e-7.
            max_iterations (int): Maximum number of iterations for the optimization. Default is 10000.
        """
        super().__init__(
            alpha=1.0,
            standardize=standardize,
            fit_intercept=fit_intercept,
            tolerance=tolerance,
            max_iterations=max_iterations,
        )
