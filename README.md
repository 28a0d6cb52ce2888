# algokit

A small collection of classic algorithms in plain Python, with no
third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `algokit.integers`

- `reverse_integer(x)`: reverses the decimal digits of `x`, keeping its sign;
  returns 0 if the result falls outside the signed 32-bit range.
- `is_palindrome_number(x)`: True if `x` reads the same both ways; negative
  numbers never do.
- `fibonacci(n)`: the `n`-th Fibonacci number (`n` up to 1 is returned as is).
- `missing_number(nums)`: the one value of `0..len(nums)` that `nums` lacks.
- `single_number(nums)`: the value that appears once when every other value
  appears twice.

### `algokit.text`

- `normalize(s)`: keeps only ASCII letters and digits, lower-cased.
- `is_palindrome(s)`: True if the normalized text reads the same both ways.

### `algokit.arrays`

- `two_sum(nums, target)`: indices of two distinct entries summing to
  `target`; raises `ValueError` if there are none.
- `next_permutation(nums)`: rearranges the list in place into its next
  lexicographic permutation (wrapping round to ascending order) and returns it.
- `max_subarray(nums)`: largest sum of a non-empty contiguous slice; raises
  `ValueError` on an empty sequence.
- `sort_colors(nums)`: sorts a sequence of 0s, 1s and 2s in place.
- `longest_consecutive(nums)`: length of the longest run of consecutive
  integers (0 for an empty sequence).
- `majority_element(nums)`: the value occurring more than `len(nums) // 2`
  times; raises `ValueError` if there is none.
- `rotate(nums, k)`: rotates the list right by `k` steps in place.
- `move_zeroes(nums)`: moves zeros to the end in place, keeping the order of
  the other values.
- `reverse_string(chars)`: reverses a list of characters in place.
- `max_consecutive_ones(nums)`: length of the longest run of 1s.
- `rearrange_by_sign(nums)`: a new list alternating non-negative and negative
  values, starting with a non-negative one, each group in its original order;
  raises `ValueError` if the counts cannot alternate.

### `algokit.matrix`

- `rotate_image(matrix)`: rotates a square matrix 90 degrees clockwise in
  place; raises `ValueError` if it is not square.
- `spiral_order(matrix)`: the elements in clockwise spiral order.
- `set_zeroes(matrix)`: zeroes, in place, every row and column holding a zero.

### `algokit.linked_list`

- `ListNode(val=0, next=None)`: a node of a singly linked list.
- `build_list(values)` / `list_values(head)`: convert between iterables and
  lists of nodes. `list_values` raises `ValueError` on a list with a cycle.
- `add_two_numbers(l1, l2)`: adds two numbers stored as digit lists, least
  significant digit first.
- `detect_cycle(head)`: the node where a cycle begins, or `None`.
- `sort_list(head)`: merge sort by relinking nodes; returns the new head.
- `reverse_list(head)`: reverses the values in place, keeping the nodes, and
  returns `head`.
- `is_palindrome_list(head)`: True if the values read the same both ways.
- `delete_node(node)`: removes `node` by copying its successor's value and
  link; raises `ValueError` on the last node.
- `odd_even_list(head)`: nodes at odd positions first, then even ones.
- `middle_node(head)`: the middle node; of two middles, the second.
- `delete_middle(head)`: unlinks the node at index `len // 2` and returns the
  head; returns `None` for lists of fewer than two nodes.

### `algokit.lru`

- `LRUCache(capacity)`: a least-recently-used cache; `capacity` must be at
  least 1, otherwise `ValueError`. `get(key)` returns the value and marks it
  most recent, or -1 if absent; `put(key, value)` stores the value as the most
  recent entry, evicting the least recently used one when full. Supports
  `len()` and `in`.

## Examples

```python
from algokit.arrays import two_sum, max_subarray
from algokit.matrix import spiral_order
from algokit.linked_list import build_list, list_values, sort_list
from algokit.lru import LRUCache

two_sum([2, 7, 11, 15], 9)               # [0, 1]
max_subarray([-2, 1, -3, 4, -1, 2, 1])   # 6
spiral_order([[1, 2, 3], [4, 5, 6]])     # [1, 2, 3, 6, 5, 4]

head = sort_list(build_list([4, 2, 1, 3]))
list_values(head)                        # [1, 2, 3, 4]

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)                             # 1
cache.put(3, 3)                          # evicts key 2
cache.get(2)                             # -1
```

## What it does not do

algokit is a library only: it has no command-line tool, and nothing is
persisted. All functions work on values held in memory.