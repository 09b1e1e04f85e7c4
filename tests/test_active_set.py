import numpy as np
import pytest
import scipy.sparse as sp

from lboost.active_set import ActiveSet, extract_active_sets, plan_reuse
from lboost.error import ActiveSetMappingError


def make_sets(*members, n_features=6):
    return [ActiveSet(np.array(m, dtype=int), n_features) for m in members]


def test_extract_active_sets():
    coef = np.array(
        [
            [0.0, 0.0, 1.0, 2.0],
            [0.0, 0.5, 0.0, 1.0],
            [0.0, 0.0, 0.0, 0.0],
            [0.0, 1.5, 2.0, 3.0],
        ]
    )
    for matrix in (coef, sp.csc_array(coef), sp.csr_array(coef)):
        sets = extract_active_sets(matrix)
        assert [s.global_index.tolist() for s in sets] == [[], [1, 3], [0, 3], [0, 1, 3]]
        assert all(s.n_features == 4 for s in sets)
    assert sets[0].is_empty


def test_extract_active_sets_ignores_explicit_zeros():
    coef = sp.csc_array(
        (np.array([0.0, 1.0]), np.array([0, 1]), np.array([0, 2])), shape=(2, 1)
    )
    assert extract_active_sets(coef)[0].global_index.tolist() == [1]


def test_active_set_mapping():
    active_set = ActiveSet(np.array([1, 4, 5]), n_features=6)
    assert active_set.size == 3
    assert active_set.rows.tolist() == [2, 5, 6]
    assert active_set.to_global([0, 2]).tolist() == [1, 5]
    assert active_set.to_local([5, 1]).tolist() == [2, 0]
    with pytest.raises(ActiveSetMappingError, match="not part of the active set"):
        active_set.to_local([2])
    with pytest.raises(ActiveSetMappingError, match="outside of the active set"):
        active_set.to_global([3])


def test_active_set_is_read_only():
    members = np.array([0, 2])
    active_set = ActiveSet(members, n_features=3)
    with pytest.raises(ValueError):
        active_set.global_index[0] = 1
    members[0] = 1
    assert active_set.global_index.tolist() == [0, 2]


def test_scatter():
    active_set = ActiveSet(np.array([1, 4, 5]), n_features=6)
    out = active_set.scatter([0, 2], [1.5, -2.0])
    assert out.tolist() == [1.5, 0.0, -2.0]
    assert active_set.scatter([], []).tolist() == [0.0, 0.0, 0.0]


@pytest.mark.parametrize(
    "index, values",
    [([0, 3], [1.0, 2.0]), ([-1], [1.0]), ([1, 1], [1.0, 2.0]), ([0, 1], [1.0])],
    ids=["out_of_range", "negative", "duplicated", "length"],
)
def test_scatter_raises(index, values):
    active_set = ActiveSet(np.array([1, 4, 5]), n_features=6)
    with pytest.raises(ActiveSetMappingError):
        active_set.scatter(index, values)


def test_plan_reuse_size():
    sets = make_sets([], [1], [2], [1, 2], [], [3, 4], [0, 4], [0, 1, 4])
    assert plan_reuse(sets, "size").tolist() == [
        False,
        False,
        True,
        False,
        False,
        False,
        True,
        False,
    ]


def test_plan_reuse_empty_resets_memory():
    # Same size as the set before the empty one, but the empty set is the predecessor
    sets = make_sets([1, 2], [], [1, 2])
    assert plan_reuse(sets, "size").tolist() == [False, False, False]


def test_plan_reuse_members_and_never():
    sets = make_sets([1], [1], [2], [1, 2], [1, 2])
    assert plan_reuse(sets, "members").tolist() == [False, True, False, False, True]
    assert plan_reuse(sets, "never").tolist() == [False] * 5
