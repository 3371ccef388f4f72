import pytest

from katas.sublist import ListComparison, sublist


@pytest.mark.parametrize(
    ("first", "second", "expected"),
    [
        ([], [], ListComparison.EQUAL),
        ([], [1, 2, 3], ListComparison.SUBLIST),
        ([1, 2, 3], [], ListComparison.SUPERLIST),
        ([1, 2, 3], [1, 2, 3], ListComparison.EQUAL),
        ([1, 2, 3], [2, 3, 4], ListComparison.UNEQUAL),
        ([1, 2, 5], [0, 1, 2, 3, 1, 2, 5, 6], ListComparison.SUBLIST),
        ([1, 1, 2], [0, 1, 1, 1, 2, 1, 2], ListComparison.SUBLIST),
        ([0, 1, 2], [0, 1, 2, 3, 4, 5], ListComparison.SUBLIST),
        ([2, 3, 4], [0, 1, 2, 3, 4, 5], ListComparison.SUBLIST),
        ([3, 4, 5], [0, 1, 2, 3, 4, 5], ListComparison.SUBLIST),
        ([0, 1, 2, 3, 4, 5], [0, 1, 2], ListComparison.SUPERLIST),
        ([0, 1, 2, 3, 4, 5], [2, 3], ListComparison.SUPERLIST),
        ([0, 1, 2, 3, 4, 5], [3, 4, 5], ListComparison.SUPERLIST),
        ([1, 3], [1, 2, 3], ListComparison.UNEQUAL),
        ([1, 2, 3], [1, 3], ListComparison.UNEQUAL),
        ([1, 2], [1, 22], ListComparison.UNEQUAL),
        ([1, 2, 3], [3, 2, 1], ListComparison.UNEQUAL),
        ([1, 0, 1], [10, 1], ListComparison.UNEQUAL),
    ],
)
def test_sublist(first, second, expected):
    assert sublist(first, second) is expected


def test_tuples_compare_like_lists():
    assert sublist((1, 2, 3), [1, 2, 3]) is ListComparison.EQUAL


@pytest.mark.parametrize(
    ("first", "second"),
    [
        ([1, 2], [0, 1, 2, 3]),
        ([4], [1, 2, 3]),
        ([], [7]),
    ],
)
def test_swapping_arguments_mirrors_result(first, second):
    mirrored = {
        ListComparison.SUBLIST: ListComparison.SUPERLIST,
        ListComparison.SUPERLIST: ListComparison.SUBLIST,
        ListComparison.EQUAL: ListComparison.EQUAL,
        ListComparison.UNEQUAL: ListComparison.UNEQUAL,
    }
    assert sublist(second, first) is mirrored[sublist(first, second)]