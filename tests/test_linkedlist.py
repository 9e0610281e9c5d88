import pytest

from listalgos.linkedlist import (
    Node,
    find_middle,
    format_list,
    from_values,
    has_cycle,
    make_cyclic,
    merge_sorted,
    remove_element,
    reverse_list,
    to_values,
)


@pytest.mark.parametrize("values", [[1], [1, 2], [1, 2, 3, 4, 5], [7, -3, 7, 0]])
def test_round_trip(values):
    assert to_values(from_values(values)) == values


def test_empty_list_is_none():
    assert from_values([]) is None
    assert to_values(None) == []


def test_node_iteration():
    head = from_values([4, 5, 6])
    assert list(head) == [4, 5, 6]


def test_format_source_example():
    head = reverse_list(from_values([1, 2, 3, 4, 5]))
    assert format_list(head) == "5 -> 4 -> 3 -> 2 -> 1 -> NULL"


def test_format_ends_with_null():
    assert format_list(from_values([9])).endswith(" -> NULL")
    assert format_list(None).endswith("NULL")


@pytest.mark.parametrize("values", [[], [1], [1, 2], [3, 1, 4, 1, 5, 9]])
def test_reverse(values):
    assert to_values(reverse_list(from_values(values))) == values[::-1]


def test_reverse_twice_restores():
    values = [2, 4, 6, 8]
    assert to_values(reverse_list(reverse_list(from_values(values)))) == values


@pytest.mark.parametrize("values", [[1], [1, 2], [1, 2, 3], [1, 2, 3, 4, 5], [1, 2, 3, 4]])
def test_find_middle(values):
    assert find_middle(from_values(values)).data == values[len(values) // 2]


def test_find_middle_empty_raises():
    with pytest.raises(ValueError):
        find_middle(None)


def test_has_cycle_detects_cycle():
    assert has_cycle(make_cyclic([1, 2, 3])) is True
    assert has_cycle(make_cyclic([1])) is True


def test_has_cycle_on_plain_list():
    assert has_cycle(from_values([1, 2, 3, 4])) is False
    assert has_cycle(None) is False


def test_make_cyclic_links_back():
    head = make_cyclic([1, 2, 3])
    assert head.next.next.next is head


def test_make_cyclic_empty_raises():
    with pytest.raises(ValueError):
        make_cyclic([])


@pytest.mark.parametrize(
    "a, b",
    [([3, 6, 8], [4, 7, 9, 11]), ([], [1, 2]), ([1, 2], []), ([], []), ([1, 1, 5], [1, 2])],
)
def test_merge_sorted(a, b):
    assert to_values(merge_sorted(from_values(a), from_values(b))) == sorted(a + b)


def test_merge_prefers_first_list_on_ties():
    first = Node(1)
    second = Node(1)
    merged = merge_sorted(first, second)
    assert merged is first
    assert merged.next is second


@pytest.mark.parametrize(
    "values, val",
    [([1, 2, 3, 4, 5], 3), ([1, 2, 3], 1), ([1, 2, 3], 3), ([3, 3, 1, 3], 3), ([2, 2], 2), ([1, 2], 9)],
)
def test_remove_element(values, val):
    result = to_values(remove_element(from_values(values), val))
    assert val not in result
    assert result == [v for v in values if v != val]


def test_remove_element_empty():
    assert remove_element(None, 1) is None