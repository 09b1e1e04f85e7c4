from dataclasses import dataclass, field
from typing import Dict, List, Literal

import numpy as np
import scipy.sparse as sp

from .error import ActiveSetMappingError


@dataclass(frozen=True, eq=False)
class ActiveSet:
    """The variables with non-zero lasso coefficient at one penalty value.

    Maps between the local index space of the active set (the columns of the
    restricted design matrix `X[:, global_index]`) and the global variable index.

    Attributes:
        global_index (np.ndarray): Ascending global variable indices.
        n_features (int): Number of variables $p$ in the full design matrix.
    """

    global_index: np.ndarray
    n_features: int
    _to_local: Dict[int, int] = field(init=False, repr=False)

    def __post_init__(self):
        global_index = np.array(self.global_index, dtype=np.int64)
        global_index.setflags(write=False)
        object.__setattr__(self, "global_index", global_index)
        object.__setattr__(
            self, "_to_local", {int(g): k for k, g in enumerate(global_index)}
        )

    @property
    def size(self) -> int:
        return self.global_index.shape[0]

    @property
    def is_empty(self) -> bool:
        return self.size == 0

    @property
    def rows(self) -> np.ndarray:
        """Rows of the coefficient matrix, where row 0 is the intercept."""
        return self.global_index + 1

    def same_members(self, other: "ActiveSet") -> bool:
        return np.array_equal(self.global_index, other.global_index)

    def to_global(self, local_index) -> np.ndarray:
        local_index = np.asarray(local_index, dtype=np.int64)
        if np.any((local_index < 0) | (local_index >= self.size)):
            raise ActiveSetMappingError(
                f"Local indices {local_index[(local_index < 0) | (local_index >= self.size)]} "
                f"are outside of the active set of size {self.size}."
            )
        return self.global_index[local_index]

    def to_local(self, global_index) -> np.ndarray:
        try:
            return np.array(
                [self._to_local[int(g)] for g in np.atleast_1d(global_index)],
                dtype=np.int64,
            )
        except KeyError as e:
            raise ActiveSetMappingError(
                f"Variable {e.args[0]} is not part of the active set {self.global_index}."
            ) from e

    def scatter(self, local_index, values) -> np.ndarray:
        """Scatter coefficients reported for a subset of the active set into a dense local vector.

        Args:
            local_index (array-like): Local indices of the reported coefficients.
            values (array-like): The coefficients.

        Raises:
            ActiveSetMappingError: If indices are out of range or duplicated,
                or do not match the number of values.

        Returns:
            np.ndarray: Coefficient vector of length `size`, zero where nothing was reported.
        """
        local_index = np.asarray(local_index, dtype=np.int64)
        values = np.asarray(values, dtype=np.float64)
        if local_index.shape != values.shape:
            raise ActiveSetMappingError(
                f"Got {local_index.shape[0]} indices for {values.shape[0]} coefficients."
            )
        self.to_global(local_index)
        if np.unique(local_index).shape[0] != local_index.shape[0]:
            raise ActiveSetMappingError(
                f"Duplicated local indices {local_index} for the active set {self.global_index}."
            )
        out = np.zeros(self.size)
        out[local_index] = values
        return out


def extract_active_sets(coef_path) -> List[ActiveSet]:
    """Extract the active set for each penalty value.

    Args:
        coef_path (sparse or np.ndarray): Coefficient matrix of shape p x n_lambda.

    Returns:
        List[ActiveSet]: One active set per column, with ascending variable indices.
    """
    coef_path = sp.csc_array(coef_path, copy=True)
    coef_path.eliminate_zeros()
    coef_path.sort_indices()
    n_features = coef_path.shape[0]
    return [
        ActiveSet(
            global_index=coef_path.indices[
                coef_path.indptr[i] : coef_path.indptr[i + 1]
            ],
            n_features=n_features,
        )
        for i in range(coef_path.shape[1])
    ]


def plan_reuse(
    active_sets: List[ActiveSet],
    rule: Literal["size", "members", "never"] = "size",
) -> np.ndarray:
    """Flag the penalty indices that can reuse the boosting fit of their predecessor.

    An index is reused if its active set is non-empty and matches the active set of the
    preceding index. Since every index (empty, reused or fitted) becomes the predecessor
    of the next one, the decision depends on consecutive pairs only and can be made before
    any boosting fit.

    `"size"` compares the number of active variables only, assuming nested active sets
    along the lasso path. `"members"` compares the variables themselves and `"never"`
    refits every non-empty active set.

    Args:
        active_sets (List[ActiveSet]): Active sets in penalty order.
        rule (Literal["size", "members", "never"], optional): Matching rule. Defaults to "size".

    Returns:
        np.ndarray: Boolean flags, one per penalty index.
    """
    reuse = np.zeros(len(active_sets), dtype=bool)
    if rule == "never":
        return reuse
    for i in range(1, len(active_sets)):
        current, previous = active_sets[i], active_sets[i - 1]
        if current.is_empty or current.size != previous.size:
            continue
        reuse[i] = rule == "size" or current.same_members(previous)
    return reuse
