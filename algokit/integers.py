"""Small integer puzzles: digit reversal, palindromes, Fibonacci and friends."""

from functools import reduce
from operator import xor
from typing import Iterable, Sequence

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def _reverse_digits(x: int) -> int:
    """Reverse the decimal digits of ``x``, keeping its sign."""
    sign = -1 if x < 0 else 1
    return sign * int(str(abs(x))[::-1])


def reverse_integer(x: int) -> int:
    """Reverse the digits of ``x``; return 0 if the result leaves the 32-bit range."""
    reversed_value = _reverse_digits(x)
    if not INT32_MIN <= reversed_value <= INT32_MAX:
        return 0
    return reversed_value


def is_palindrome_number(x: int) -> bool:
    """Return True if ``x`` reads the same forwards and backwards; negatives never do."""
    if x < 0:
        return False
    reversed_value = _reverse_digits(x)
    if reversed_value > INT32_MAX:
        return False
    return reversed_value == x


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number; values of ``n`` up to 1 are returned as is."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def missing_number(nums: Sequence[int]) -> int:
    """Return the one number of ``0..len(nums)`` that ``nums`` lacks."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def single_number(nums: Iterable[int]) -> int:
    """Return the value that appears once when every other value appears twice."""
    return reduce(xor, nums, 0)