import numpy as np

from .error import check_length


def default_lambda_min_ratio(n_observations: int, n_features: int) -> float:
    """Smallest penalty as a fraction of the largest one.

    High-dimensional problems ($n < p$) stop the path earlier, since the lasso
    saturates at $n$ active variables.
    """
    return 0.01 if n_observations < n_features else 1e-4


def make_lambda_path(
    lambda_max: float, lambda_n: int, lambda_min_ratio: float
) -> np.ndarray:
    """Geometric grid from $\\lambda_\\max$ to $\\lambda_\\max \\varepsilon_\\lambda$, both inclusive.

    Args:
        lambda_max (float): Largest penalty.
        lambda_n (int): Number of penalties.
        lambda_min_ratio (float): Ratio $\\varepsilon_\\lambda$ of the smallest to the largest penalty.

    Returns:
        np.ndarray: The penalty sequence of length `lambda_n`.
    """
    if lambda_max <= 0:
        return np.zeros(lambda_n)
    return np.exp(
        np.linspace(np.log(lambda_max), np.log(lambda_max * lambda_min_ratio), lambda_n)
    )


def check_lambda_path(lambda_path, lambda_n: int) -> np.ndarray:
    """Validate a user supplied penalty sequence.

    Args:
        lambda_path (array-like): The supplied penalties.
        lambda_n (int): The expected number of penalties.

    Raises:
        ShapeMismatchError: If the length is not `lambda_n`.
        ValueError: If any penalty is negative or not finite.

    Returns:
        np.ndarray: The penalties sorted in decreasing order.
    """
    lambda_path = np.asarray(lambda_path, dtype=np.float64).ravel()
    check_length(
        name="the supplied lambda",
        actual=lambda_path.shape[0],
        expected=lambda_n,
        expected_name="nlambda",
    )
    if not np.all(np.isfinite(lambda_path)) or np.any(lambda_path < 0):
        raise ValueError(
            f"The supplied lambda values need to be finite and non-negative. Got {lambda_path}."
        )
    return -np.sort(-lambda_path)
