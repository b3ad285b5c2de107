import pytest

from graphsolvers.subsets import generate_subsets


def test_three_vertices_in_mask_order():
    assert generate_subsets(3) == [[0, 1], [0, 2], [1, 2]]


@pytest.mark.parametrize("n", [0, 1, 2])
def test_small_graphs_have_no_proper_subsets(n):
    assert generate_subsets(n) == []


@pytest.mark.parametrize("n", [3, 4, 5, 6])
def test_subsets_are_sorted_unique_and_sized(n):
    subsets = generate_subsets(n)
    assert all(s == sorted(s) for s in subsets)
    assert len({tuple(s) for s in subsets}) == len(subsets)
    assert all(2 <= len(s) < n for s in subsets)
    assert all(0 <= i < n for s in subsets for i in s)


@pytest.mark.parametrize("n", [3, 4, 5, 6, 7])
def test_count_excludes_empty_singletons_and_full_set(n):
    assert len(generate_subsets(n)) == 2**n - n - 2


def test_full_set_is_excluded():
    assert [0, 1, 2, 3] not in generate_subsets(4)
    assert [0, 1, 2] in generate_subsets(4)


def test_negative_count_is_rejected():
    with pytest.raises(ValueError):
        generate_subsets(-1)