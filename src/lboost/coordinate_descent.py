from typing import Tuple

import numba as nb
import numpy as np


@nb.njit()
def soft_threshold(value: float, threshold: float):
    """Soft thresholding $S(x, \\lambda) = sign(x) \\max(|x| - \\lambda, 0)$, the proximal operator of the $L_1$ penalty."""
    return np.sign(value) * np.maximum(np.abs(value) - threshold, 0)


@nb.njit()
def coordinate_descent(
    x_gram: np.ndarray,
    y_gram: np.ndarray,
    beta: np.ndarray,
    regularization: float,
    alpha: float,
    tolerance: float = 1e-7,
    max_iterations: int = 10000,
) -> Tuple[np.ndarray, int]:
    """Coordinate descent for the elastic net at a single regularization strength.

    Minimises
    $$\\frac{1}{2} \\beta^T G \\beta - \\beta^T H + \\lambda \\left(\\frac{1 - \\alpha}{2} ||\\beta||_2^2 + \\alpha ||\\beta||_1\\right)$$
    for the Gramians $G = X^TWX$ and $H = X^TWy$.

    We alternate between full sweeps over all coefficients and active set iterations, which
    only update the non-zero coefficients. Once the active set iterations have converged, a
    full sweep checks the optimality conditions of the zero coefficients. The algorithm stops
    if the full sweep neither moves a coefficient beyond the tolerance nor adds a variable to
    the active set, otherwise the active set iterations resume.

    Args:
        x_gram (np.ndarray): X-Gramian $$X^TWX$$
        y_gram (np.ndarray): Y-Gramian $$X^TWY$$
        beta (np.ndarray): Start value for beta
        regularization (float): Regularization parameter lambda
        alpha (float): Elastic net mixing parameter, 1 is the lasso.
        tolerance (float, optional): Relative tolerance for the beta update. Defaults to 1e-7.
        max_iterations (int, optional): Maximum iterations. Defaults to 10000.

    Returns:
        Tuple[np.ndarray, int]: Converged $$ \\beta $$ and the number of sweeps.
    """
    i = 0
    J = beta.shape[0]
    beta_now = np.copy(beta)
    beta_star = np.copy(beta)
    full_sweep = True

    while True:
        i += 1
        beta_star = np.copy(beta_now)

        for j in range(J):
            if full_sweep or (beta_now[j] != 0):
                denom = x_gram[j, j] + regularization * (1 - alpha)
                if denom <= 0:
                    # Constant column, can never enter the model
                    beta_now[j] = 0
                    continue
                update = (
                    y_gram[j] - (x_gram[j, :] @ beta_now) + x_gram[j, j] * beta_now[j]
                )
                update = soft_threshold(update, alpha * regularization)
                beta_now[j] = update / denom

        converged = np.max(np.abs(beta_now - beta_star)) <= tolerance * np.max(
            np.abs(beta_now)
        )
        if full_sweep:
            entered = np.any((beta_star == 0) & (beta_now != 0))
            if converged and not entered:
                break
            full_sweep = False
        elif converged:
            full_sweep = True
        if i > max_iterations:
            break
    return beta_now, i


@nb.njit()
def coordinate_descent_path(
    x_gram: np.ndarray,
    y_gram: np.ndarray,
    lambda_path: np.ndarray,
    alpha: float,
    tolerance: float = 1e-7,
    max_iterations: int = 10000,
) -> Tuple[np.ndarray, np.ndarray]:
    """Run coordinate descent on a decreasing grid of regularization values.

    Each regularization strength is warm-started on the solution of the previous one.

    Args:
        x_gram (np.ndarray): X-Gramian $$X^TWX$$
        y_gram (np.ndarray): Y-Gramian $$X^TWY$$
        lambda_path (np.ndarray): The lambda grid
        alpha (float): Elastic net mixing parameter, 1 is the lasso.
        tolerance (float, optional): Tolerance for the beta update. Will be passed through to the parameter update. Defaults to 1e-7.
        max_iterations (int, optional): Maximum iterations. Will be passed through to the parameter update. Defaults to 10000.

    Returns:
        Tuple[np.ndarray, np.ndarray]: Tuple with the coefficient path (n_lambda x J) and the iteration count.
    """
    beta_path = np.zeros((lambda_path.shape[0], x_gram.shape[0]))
    iterations = np.zeros(lambda_path.shape[0])
    beta = np.zeros(x_gram.shape[0])

    for i, regularization in enumerate(lambda_path):
        beta, iterations[i] = coordinate_descent(
            x_gram=x_gram,
            y_gram=y_gram,
            beta=beta,
            regularization=regularization,
            alpha=alpha,
            tolerance=tolerance,
            max_iterations=max_iterations,
        )
        beta_path[i, :] = beta

    return beta_path, iterations
