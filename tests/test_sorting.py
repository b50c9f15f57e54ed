import pytest

from algokit.sorting import (
    count_distinct,
    counting_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    radix_sort,
    selection_sort,
)

SAMPLES = [
    [4, 1, 0, 5, 9, 6],
    [4, 5, 1, 0, 56, 2],
    [10, 7, 8, 9, 1, 5],
    [-4, -4, -2, -22, -11, -4, -9, -8, -7, -2],
    [],
    [7],
    [3, 3, 3],
    list(range(50)),
    list(range(50, 0, -1)),
    [5, -1, 0, 5, -1, 2, 2, 9, -30],
]


@pytest.mark.parametrize("values", SAMPLES)
def test_sorts_match_builtin(values):
    expected = sorted(values)
    assert insertion_sort(values) == expected
    assert selection_sort(values) == expected
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected
    assert counting_sort(values) == expected


def test_input_is_not_modified():
    values = [170, 45, 75, 90, 802, 24, 2, 66]
    original = list(values)
    expected = sorted(values)
    assert insertion_sort(values) == expected
    assert values == original
    assert selection_sort(values) == expected
    assert values == original
    assert merge_sort(values) == expected
    assert values == original
    assert quick_sort(values) == expected
    assert values == original
    assert counting_sort(values) == expected
    assert values == original
    assert radix_sort(values) == expected
    assert values == original


def test_general_sorts_handle_strings():
    words = ["pear", "apple", "fig", "apple", "kiwi"]
    expected = sorted(words)
    assert insertion_sort(words) == expected
    assert selection_sort(words) == expected
    assert merge_sort(words) == expected
    assert quick_sort(words) == expected


def test_sorts_accept_iterators():
    assert insertion_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert selection_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert merge_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert quick_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert counting_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert radix_sort(iter([3, 1, 2])) == [1, 2, 3]


def test_radix_sort_example():
    values = [170, 45, 75, 90, 802, 24, 2, 66]
    assert radix_sort(values) == sorted(values)


@pytest.mark.parametrize(
    "values", [[], [0], [0, 0, 0], [1000, 1, 10, 100], list(range(30, 0, -1))]
)
def test_radix_sort_matches_builtin(values):
    assert radix_sort(values) == sorted(values)


def test_radix_sort_rejects_negative():
    with pytest.raises(ValueError):
        radix_sort([3, -1, 2])


def test_counting_sort_rejects_non_integers():
    with pytest.raises(TypeError):
        counting_sort([1, 2.5, 3])


def test_radix_sort_rejects_non_integers():
    with pytest.raises(TypeError):
        radix_sort([1, 2.5, 3])


def test_counting_sort_preserves_multiset():
    values = [-4, -4, -2, -22, -11, -4, -9, -8]
    result = counting_sort(values)
    assert sorted(result) == sorted(values)
    assert all(a <= b for a, b in zip(result, result[1:]))


def test_merge_sort_is_stable():
    class Keyed:
        def __init__(self, key, tag):
            self.key = key
            self.tag = tag

        def __le__(self, other):
            return self.key <= other.key

    items = [Keyed(2, "a"), Keyed(1, "b"), Keyed(2, "c"), Keyed(1, "d")]
    result = merge_sort(items)
    assert [item.tag for item in result] == ["b", "d", "a", "c"]


def test_count_distinct_example():
    assert count_distinct([2, 3, 2, 2, 3]) == 2


def test_count_distinct_empty():
    assert count_distinct([]) == 0


def test_count_distinct_all_unique():
    values = list(range(25))
    assert count_distinct(values) == len(values)