"""Singly linked lists and the classic pointer puzzles played on them."""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """One node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    """Yield the nodes from ``head`` onwards, refusing to loop around a cycle."""
    seen = set()
    node = head
    while node is not None:
        if id(node) in seen:
            raise ValueError("the list contains a cycle")
        seen.add(id(node))
        yield node
        node = node.next


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order and return its head."""
    head = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(head: Optional[ListNode]) -> List[int]:
    """Return the values of the list starting at ``head``."""
    return [node.val for node in _nodes(head)]


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Add two numbers stored as lists of digits, least significant digit first."""
    dummy = ListNode(-1)
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    if carry:
        tail.next = ListNode(carry)
    return dummy.next


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where a cycle begins, or None if the list ends."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            slow = head
            while slow is not fast:
                slow = slow.next
                fast = fast.next
            return slow
    return None


def _split_middle(head: ListNode) -> ListNode:
    """Return the last node of the first half of a list of two or more nodes."""
    slow = head
    fast = head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def _merge(first: Optional[ListNode], second: Optional[ListNode]) -> Optional[ListNode]:
    """Merge two sorted lists by relinking their nodes."""
    dummy = ListNode(-1)
    tail = dummy
    while first is not None and second is not None:
        if first.val < second.val:
            tail.next = first
            first = first.next
        else:
            tail.next = second
            second = second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return dummy.next


def sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort the list by merge sort, relinking its nodes, and return the new head."""
    if head is None or head.next is None:
        return head
    middle = _split_middle(head)
    right = middle.next
    middle.next = None
    return _merge(sort_list(head), sort_list(right))


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the values of the list in place, keeping its nodes, and return ``head``."""
    nodes = list(_nodes(head))
    for node, value in zip(nodes, [node.val for node in reversed(nodes)]):
        node.val = value
    return head


def is_palindrome_list(head: Optional[ListNode]) -> bool:
    """Return True if the list's values read the same in both directions."""
    values = list_values(head)
    return values == values[::-1]


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list by taking over its successor's value and link."""
    if node.next is None:
        raise ValueError("cannot delete the last node of a list this way")
    node.val = node.next.val
    node.next = node.next.next


def odd_even_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Group the nodes at odd positions before those at even positions, keeping order."""
    if head is None or head.next is None:
        return head
    odd = head
    even = even_head = head.next
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next
    odd.next = even_head
    return head


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the middle node; of two middles, the second."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def delete_middle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Unlink the node at index ``len // 2`` and return the head; None for short lists."""
    if head is None or head.next is None:
        return None
    slow = head
    fast = head.next.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    slow.next = slow.next.next
    return head