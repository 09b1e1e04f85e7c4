import numba as nb
import numpy as np


@nb.njit()
def init_gram(X: np.ndarray, w: np.ndarray) -> np.ndarray:
    """Initialise the weighted Gramian Matrix.

    The Gramian Matrix is defined as
    $$
    G = X^T WX
    $$
    where $X$ is the design matrix and $W$ is a diagonal matrix of observation weights.
    If the weights sum to one, $G$ is the (weighted) second moment matrix that enters
    the coordinate descent updates of the elastic net.

    !!! numba "Numba"
        This function uses `numba` just-in-time-compilation.

    Args:
        X (np.ndarray): Design matrix $X$
        w (np.ndarray): Weights vector

    Returns:
        np.ndarray: Gramian Matrix.
    """
    Xw = X * np.expand_dims(w**0.5, -1)
    return Xw.T @ Xw


@nb.njit()
def init_y_gram(X: np.ndarray, y: np.ndarray, w: np.ndarray) -> np.ndarray:
    """Initialise the y-Gramian.

    The y-Gramian is defined as $$
    H = X^T WY
    $$ where $X$ is the design matrix, $Y$ is the response variable and $W$ is a diagonal
    matrix of observation weights.

    !!! numba "Numba"
        This function uses `numba` just-in-time-compilation.

    Args:
        X (np.ndarray): Design matrix $X$
        y (np.ndarray): Response variable $Y$
        w (np.ndarray): Weights vector

    Returns:
        np.ndarray: The y-Gramian as a vector of length $J$.
    """
    return X.T @ (y * w)
