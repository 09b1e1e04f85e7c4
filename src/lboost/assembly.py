from dataclasses import dataclass
from typing import List, Optional

import numpy as np
import scipy.sparse as sp

from .active_set import ActiveSet


@dataclass(frozen=True, eq=False)
class CoefficientBlock:
    """The sampled solutions of one penalty value.

    Attributes:
        rows (np.ndarray): Rows of the coefficient matrix, starting with the intercept row 0.
        values (np.ndarray): Values of shape len(rows) x n_steps, one column per sampled step.
    """

    rows: np.ndarray
    values: np.ndarray

    @property
    def n_steps(self) -> int:
        return self.values.shape[1]


def reconstruct_block(
    active_set: ActiveSet,
    local_coef: np.ndarray,
    x_mean: np.ndarray,
    y_mean: float,
) -> CoefficientBlock:
    """Map local boosting coefficients to the full variable space and recover the intercept.

    Boosting is fit on centred variables with the response mean as offset, hence the intercept is
    $$\\beta_0 = \\bar{y} - \\sum_{k \\in A} \\bar{x}_k \\beta_k$$
    for the active set $A$.

    Args:
        active_set (ActiveSet): The active set.
        local_coef (np.ndarray): Coefficients of shape n_steps x |A| in the local index space.
        x_mean (np.ndarray): Column means of the full design matrix.
        y_mean (float): Mean of the response.

    Returns:
        CoefficientBlock: Intercept and coefficient rows for each sampled step.
    """
    local_coef = np.atleast_2d(local_coef)
    intercept = y_mean - local_coef @ x_mean[active_set.global_index]
    values = np.vstack((intercept, local_coef.T))
    values.setflags(write=False)
    return CoefficientBlock(
        rows=np.concatenate(([0], active_set.rows)),
        values=values,
    )


class CoefficientMatrixBuilder:
    """Collects coefficient blocks and emits the sparse coefficient matrix.

    Block $i$ occupies the columns $i \\cdot n_{steps}, \\dots, (i + 1) n_{steps} - 1$.
    Blocks that are never added (or added as `None`) stay zero.
    """

    def __init__(self, n_features: int, n_blocks: int, n_steps: int):
        self.n_rows = n_features + 1
        self.n_blocks = n_blocks
        self.n_steps = n_steps
        self._blocks: List[Optional[CoefficientBlock]] = [None] * n_blocks

    @property
    def shape(self):
        return (self.n_rows, self.n_blocks * self.n_steps)

    def add(self, index: int, block: Optional[CoefficientBlock]) -> None:
        if block is not None and block.n_steps != self.n_steps:
            raise ValueError(
                f"Block {index} has {block.n_steps} columns, expected {self.n_steps}."
            )
        self._blocks[index] = block

    def to_sparse(self) -> sp.csc_array:
        rows, cols, data = [], [], []
        for i, block in enumerate(self._blocks):
            if block is None:
                continue
            r, c = np.meshgrid(
                block.rows, np.arange(self.n_steps) + i * self.n_steps, indexing="ij"
            )
            rows.append(r.ravel())
            cols.append(c.ravel())
            data.append(block.values.ravel())

        if rows:
            rows, cols, data = map(np.concatenate, (rows, cols, data))
        else:
            rows = cols = np.array([], dtype=np.int64)
            data = np.array([])
        out = sp.coo_array((data, (rows, cols)), shape=self.shape).tocsc()
        out.eliminate_zeros()
        return out
