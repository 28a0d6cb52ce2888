"""Array algorithms: two-pointer, Kadane, Boyer-Moore voting and in-place rearrangements."""

from itertools import groupby
from typing import List, MutableSequence, Sequence


def two_sum(nums: Sequence[int], target: int) -> List[int]:
    """Return indices of two distinct entries of ``nums`` summing to ``target``.

    Raises ValueError when no such pair exists.
    """
    ordered = sorted(nums)
    left, right = 0, len(ordered) - 1
    while left < right:
        total = ordered[left] + ordered[right]
        if total == target:
            first = nums.index(ordered[left])
            second = next(
                i for i, value in enumerate(nums) if value == ordered[right] and i != first
            )
            return [first, second]
        if total < target:
            left += 1
        else:
            right -= 1
    raise ValueError(f"no two numbers sum to {target}")


def next_permutation(nums: List[int]) -> List[int]:
    """Rearrange ``nums`` in place into its next lexicographic permutation and return it."""
    pivot = next(
        (i for i in range(len(nums) - 2, -1, -1) if nums[i] < nums[i + 1]), None
    )
    if pivot is None:
        nums.reverse()
        return nums
    swap_with = next(j for j in range(len(nums) - 1, pivot, -1) if nums[j] > nums[pivot])
    nums[pivot], nums[swap_with] = nums[swap_with], nums[pivot]
    nums[pivot + 1:] = nums[pivot + 1:][::-1]
    return nums


def max_subarray(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous slice of ``nums``."""
    if not nums:
        raise ValueError("max_subarray() needs at least one number")
    best = nums[0]
    running = 0
    for value in nums:
        running += value
        best = max(best, running)
        running = max(running, 0)
    return best


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a sequence of 0s, 1s and 2s in place in a single pass."""
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[mid], nums[low] = nums[low], nums[mid]
            low += 1
            mid += 1
        elif nums[mid] == 1:
            mid += 1
        else:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1


def longest_consecutive(nums: Sequence[int]) -> int:
    """Return the length of the longest run of consecutive integers in ``nums``."""
    if not nums:
        return 0
    longest = 1
    count = 0
    last = None
    for value in sorted(nums):
        if last is not None and value - 1 == last:
            count += 1
            last = value
        elif value != last:
            count = 1
            last = value
        longest = max(longest, count)
    return longest


def majority_element(nums: Sequence[int]) -> int:
    """Return the value occurring more than ``len(nums) // 2`` times.

    Raises ValueError when there is no such value.
    """
    count = 0
    candidate = None
    for value in nums:
        if count == 0:
            candidate, count = value, 1
        elif value == candidate:
            count += 1
        else:
            count -= 1
    if nums and nums.count(candidate) > len(nums) // 2:
        return candidate
    raise ValueError("no majority element")


def rotate(nums: List[int], k: int) -> None:
    """Rotate ``nums`` right by ``k`` steps in place."""
    if not nums:
        return
    k %= len(nums)
    if k == 0:
        return
    nums[:] = nums[-k:] + nums[:-k]


def move_zeroes(nums: List[int]) -> None:
    """Move all zeros to the end in place, keeping the order of the other values."""
    non_zero = [value for value in nums if value != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def reverse_string(chars: List[str]) -> None:
    """Reverse a list of characters in place."""
    chars.reverse()


def max_consecutive_ones(nums: Sequence[int]) -> int:
    """Return the length of the longest run of 1s in ``nums``."""
    return max(
        (sum(1 for _ in run) for value, run in groupby(nums) if value == 1),
        default=0,
    )


def rearrange_by_sign(nums: Sequence[int]) -> List[int]:
    """Interleave non-negative and negative values, starting with a non-negative one.

    Each group keeps its order. Raises ValueError when the groups cannot alternate.
    """
    positives = [value for value in nums if value >= 0]
    negatives = [value for value in nums if value < 0]
    if len(positives) != (len(nums) + 1) // 2:
        raise ValueError("non-negative and negative counts cannot alternate")
    result = [0] * len(nums)
    result[0::2] = positives
    result[1::2] = negatives
    return result