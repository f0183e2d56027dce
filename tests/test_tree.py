from __future__ import annotations

import pytest

from pmf import NOT_FOUND, CompactTree, InvalidInput, OutOfRange


def test_plateau_search_returns_rightmost_point() -> None:
    tree = CompactTree([3, 1], 4)

    assert [tree.get_left_rods(i) for i in range(4)] == [0, 0, 0, 1]
    assert tree.search(0) == 2
    assert tree.search(1) == 3


def test_equal_siblings_collapse_into_parent() -> None:
    tree = CompactTree([3, 1], 4)

    # leaves 0,1 merge; leaves 2 and 3 differ
    assert tree.leaf_count == 3
    assert list(tree.leaves) == [0, 0, 1]


def test_single_rod_collapses_to_root() -> None:
    tree = CompactTree([8], 8)

    assert tree.leaf_count == 1
    assert all(tree.get_left_rods(i) == 0 for i in range(8))
    assert tree.search(0) == 7


def test_distinct_rods_keep_every_leaf() -> None:
    tree = CompactTree([1, 1, 1, 1], 4)

    assert tree.leaf_count == 4
    assert [tree.search(r) for r in range(4)] == [0, 1, 2, 3]


def test_merged_run_resolves_from_any_point() -> None:
    # rods: 0 x4, 1 x2, 2 x2 -> leaves collapse to [0-3], [4-5], [6-7]
    tree = CompactTree([4, 2, 2], 8)

    assert tree.leaf_count == 3
    assert [tree.get_left_rods(i) for i in range(8)] == [0, 0, 0, 0, 1, 1, 2, 2]
    assert [tree.search(r) for r in range(3)] == [3, 5, 7]


def test_unaligned_run_merges_only_within_subtrees() -> None:
    # the run of rod 1 straddles the middle of the tree
    tree = CompactTree([1, 6, 1], 8)

    assert [tree.get_left_rods(i) for i in range(8)] == [0, 1, 1, 1, 1, 1, 1, 2]
    assert tree.search(1) == 6
    assert tree.leaf_count == 6


def test_empty_rod_is_not_found() -> None:
    tree = CompactTree([2, 0, 2], 4)

    assert tree.search(0) == 1
    assert tree.search(1) == NOT_FOUND
    assert tree.search(2) == 3


def test_single_point_tree() -> None:
    tree = CompactTree([1], 1)

    assert len(tree) == 1
    assert tree.get_left_rods(0) == 0
    assert tree.search(0) == 0


def test_leaves_view_is_read_only() -> None:
    tree = CompactTree([2, 2], 4)

    with pytest.raises(ValueError):
        tree.leaves[0] = 5


@pytest.mark.parametrize("index", [-1, 4, 100])
def test_get_left_rods_rejects_out_of_range(index: int) -> None:
    tree = CompactTree([2, 2], 4)

    with pytest.raises(OutOfRange):
        tree.get_left_rods(index)


@pytest.mark.parametrize("rod", [-1, 2])
def test_search_rejects_out_of_range(rod: int) -> None:
    tree = CompactTree([2, 2], 4)

    with pytest.raises(OutOfRange):
        tree.search(rod)


def test_non_integer_index_is_a_type_error() -> None:
    tree = CompactTree([2, 2], 4)

    with pytest.raises(TypeError):
        tree.get_left_rods(1.0)
    with pytest.raises(TypeError):
        tree.search(True)


@pytest.mark.parametrize(
    "rods, coarseness",
    [
        ([3, 3], 6),
        ([2, 1], 4),
        ([5, -1], 4),
        ([], 4),
        ([1], 0),
    ],
)
def test_rejects_malformed_rods(rods, coarseness) -> None:
    with pytest.raises(InvalidInput):
        CompactTree(rods, coarseness)


@pytest.mark.parametrize("coarseness", [4.0, "4", True])
def test_rejects_non_integer_coarseness(coarseness) -> None:
    with pytest.raises(InvalidInput):
        CompactTree([2, 2], coarseness)


def test_shape_is_read_only() -> None:
    tree = CompactTree([2, 2], 4)

    with pytest.raises(AttributeError):
        tree.coarseness = 8
    with pytest.raises(AttributeError):
        tree.precision = 3
