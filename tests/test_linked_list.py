import pytest

from algokit.linked_list import (
    ListNode,
    add_two_numbers,
    build_list,
    delete_middle,
    delete_node,
    detect_cycle,
    is_palindrome_list,
    list_values,
    middle_node,
    odd_even_list,
    reverse_list,
    sort_list,
)


def _number(digits):
    return int("".join(str(d) for d in reversed(digits))) if digits else 0


@pytest.mark.parametrize("values", [[], [5], [1, 2, 3], [4, 4, -1, 0]])
def test_build_and_read_round_trip(values):
    assert list_values(build_list(values)) == values


def test_list_values_rejects_cycle():
    head = build_list([1, 2, 3])
    head.next.next.next = head
    with pytest.raises(ValueError):
        list_values(head)


def test_add_two_numbers_worked_example():
    result = add_two_numbers(build_list([2, 4, 3]), build_list([5, 6, 4]))
    assert list_values(result) == [7, 0, 8]


@pytest.mark.parametrize(
    "a, b",
    [([0], [0]), ([9, 9, 9, 9, 9, 9, 9], [9, 9, 9, 9]), ([1], [9, 9]), ([5], [5])],
)
def test_add_two_numbers_matches_integer_sum(a, b):
    result = list_values(add_two_numbers(build_list(a), build_list(b)))
    assert _number(result) == _number(a) + _number(b)
    assert all(0 <= d <= 9 for d in result)


def test_add_two_numbers_carry_extends_length():
    result = list_values(add_two_numbers(build_list([5]), build_list([5])))
    assert len(result) == 2


def test_detect_cycle_finds_entry_node():
    head = build_list([3, 2, 0, -4])
    entry = head.next
    head.next.next.next.next = entry
    assert detect_cycle(head) is entry


def test_detect_cycle_self_loop_on_head():
    head = build_list([1, 2])
    head.next.next = head
    assert detect_cycle(head) is head


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3]])
def test_detect_cycle_none_for_acyclic(values):
    assert detect_cycle(build_list(values)) is None


@pytest.mark.parametrize("values", [[], [1], [4, 2, 1, 3], [-1, 5, 3, 4, 0], [2, 2, 1, 1]])
def test_sort_list_sorts(values):
    assert list_values(sort_list(build_list(values))) == sorted(values)


def test_sort_list_reuses_nodes():
    head = build_list([3, 1, 2])
    original = {id(node) for node in (head, head.next, head.next.next)}
    result = sort_list(head)
    node = result
    ids = set()
    while node is not None:
        ids.add(id(node))
        node = node.next
    assert ids == original


@pytest.mark.parametrize("values", [[], [1], [1, 2], [1, 2, 3, 4, 5]])
def test_reverse_list_reverses_values(values):
    head = build_list(values)
    result = reverse_list(head)
    assert result is head
    assert list_values(result) == values[::-1]


@pytest.mark.parametrize("values", [[1], [1, 2, 2, 1], [1, 2, 1], [7, 7]])
def test_is_palindrome_list_true(values):
    assert is_palindrome_list(build_list(values)) is True


@pytest.mark.parametrize("values", [[1, 2], [1, 2, 3], [1, 2, 2, 3]])
def test_is_palindrome_list_false(values):
    assert is_palindrome_list(build_list(values)) is False


def test_is_palindrome_list_leaves_list_intact():
    values = [1, 2, 3, 2, 1]
    head = build_list(values)
    is_palindrome_list(head)
    assert list_values(head) == values


def test_delete_node_removes_value():
    values = [4, 5, 1, 9]
    head = build_list(values)
    delete_node(head.next)
    assert list_values(head) == [4, 1, 9]


def test_delete_node_rejects_tail():
    head = build_list([1, 2])
    with pytest.raises(ValueError):
        delete_node(head.next)


@pytest.mark.parametrize("values", [[], [1], [1, 2], [1, 2, 3, 4, 5], [2, 1, 3, 5, 6, 4, 7]])
def test_odd_even_list_groups_positions(values):
    result = list_values(odd_even_list(build_list(values)))
    assert result == values[0::2] + values[1::2]


@pytest.mark.parametrize("values", [[1], [1, 2], [1, 2, 3, 4, 5], [1, 2, 3, 4, 5, 6]])
def test_middle_node_picks_second_middle(values):
    assert middle_node(build_list(values)).val == values[len(values) // 2]


def test_middle_node_of_empty_list():
    assert middle_node(None) is None


@pytest.mark.parametrize("values", [[1, 2], [1, 2, 3, 4], [1, 3, 4, 7, 1, 2, 6]])
def test_delete_middle_removes_middle_index(values):
    expected = values[: len(values) // 2] + values[len(values) // 2 + 1:]
    assert list_values(delete_middle(build_list(values))) == expected


@pytest.mark.parametrize("values", [[], [1]])
def test_delete_middle_short_lists(values):
    assert delete_middle(build_list(values)) is None


def test_list_node_defaults():
    node = ListNode()
    assert node.val == 0
    assert node.next is None