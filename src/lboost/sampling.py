import numpy as np


def sample_boosting_steps(
    stop: int,
    n_steps: int,
    lower_factor: float,
    upper_factor: float,
    max_step: int,
) -> np.ndarray:
    """Sample equally spaced boosting iterations around the stopping iteration.

    The `n_steps` iterations are equally spaced on
    $[\\text{lower\\_factor} \\cdot m_{stop}, \\text{upper\\_factor} \\cdot m_{stop}]$
    and rounded to the nearest integer. A single step is placed in the middle of the
    interval. Iteration 0 is not a fit, hence if the smallest iteration rounds to 0 all
    iterations are shifted by one. The boosting path is only available up to `max_step`.

    Args:
        stop (int): The stopping iteration $m_{stop}$.
        n_steps (int): Number of iterations to sample.
        lower_factor (float): Lower end of the interval as a multiple of `stop`.
        upper_factor (float): Upper end of the interval as a multiple of `stop`.
        max_step (int): Largest available boosting iteration.

    Returns:
        np.ndarray: Non-decreasing integer iterations in $[1, \\text{max\\_step}]$.
    """
    if n_steps == 1:
        grid = np.array([(lower_factor + upper_factor) / 2 * stop])
    else:
        grid = np.linspace(lower_factor * stop, upper_factor * stop, n_steps)
    steps = np.rint(grid).astype(np.int64)
    if steps.min() == 0:
        steps += 1
    return np.minimum(steps, max_step)
