"""Array puzzles: pair sums, counting, rotation and in-place rearrangement."""

from __future__ import annotations

from collections import Counter
from functools import reduce
from itertools import combinations, groupby
from operator import xor
from typing import MutableSequence, Sequence


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the index pairs whose values add up to ``target``, flattened.

    Every pair ``(i, j)`` with ``i < j`` is reported in scan order, so a
    single match yields ``[i, j]`` and no match yields an empty list.
    """
    return [
        index
        for (i, a), (j, b) in combinations(enumerate(nums), 2)
        if a + b == target
        for index in (i, j)
    ]


def single_number(nums: Sequence[int]) -> int:
    """Return the value that occurs once when every other value occurs twice."""
    return reduce(xor, nums, 0)


def find_lucky(arr: Sequence[int]) -> int:
    """Return the largest value equal to its own frequency, or -1 if none."""
    counts = Counter(arr)
    return max((value for value, count in counts.items() if value == count), default=-1)


def majority_element(nums: Sequence[int]) -> int:
    """Return the value occurring more than ``len(nums) // 2`` times, or -1."""
    half = len(nums) // 2
    counts = Counter(nums)
    return next((value for value in sorted(counts) if counts[value] > half), -1)


def rotate(nums: MutableSequence[int], k: int) -> None:
    """Rotate ``nums`` to the right by ``k`` places, in place."""
    if not nums:
        return
    k %= len(nums)
    if k:
        nums[:] = list(nums[-k:]) + list(nums[:-k])


def max_subsequence(nums: Sequence[int], k: int) -> list[int]:
    """Return ``k`` elements with the largest sum, kept in their original order."""
    by_value = sorted(enumerate(nums), key=lambda pair: pair[1], reverse=True)
    chosen = sorted(by_value[:k])
    return [value for _, value in chosen]


def find_k_distant_indices(nums: Sequence[int], key: int, k: int) -> list[int]:
    """Return, in ascending order, every index within ``k`` of an occurrence of ``key``."""
    result: list[int] = []
    next_free = 0
    last = len(nums) - 1
    for j, value in enumerate(nums):
        if value == key:
            start = max(next_free, j - k)
            next_free = min(last, j + k) + 1
            result.extend(range(start, next_free))
    return result


def partition_array(nums: Sequence[int], k: int) -> int:
    """Return the fewest groups such that each group's max minus min is at most ``k``."""
    if len(nums) == 1:
        return 1
    partitions = 0
    group_end: int | None = None
    for value in sorted(set(nums)):
        if group_end is None or value > group_end:
            partitions += 1
            group_end = value + k
    return partitions


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact the distinct values of sorted ``nums`` to its front; return their count."""
    if not nums:
        return 0
    write = 0
    for value in list(nums[1:]):
        if value != nums[write]:
            write += 1
            nums[write] = value
    return write + 1


def missing_number(nums: Sequence[int]) -> int:
    """Return the one number of ``0..len(nums)`` absent from ``nums``."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move zeros to the end in place, keeping the order of the other values."""
    non_zero = [value for value in nums if value != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def find_max_consecutive_ones(nums: Sequence[int]) -> int:
    """Return the length of the longest run of ones."""
    return max(
        (sum(1 for _ in run) for value, run in groupby(nums) if value == 1),
        default=0,
    )


def max_subarray(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of ``nums``."""
    if not nums:
        raise ValueError("max_subarray() needs at least one number")
    best = nums[0]
    running = 0
    for value in nums:
        running += value
        best = max(best, running)
        running = max(running, 0)
    return best


def find_lhs(nums: Sequence[int]) -> int:
    """Return the longest subsequence whose max and min differ by exactly one."""
    counts = Counter(nums)
    return max(
        (counts[value] + counts[value + 1] for value in counts if value + 1 in counts),
        default=0,
    )


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place."""
    zeros = sum(1 for value in nums if value == 0)
    ones = sum(1 for value in nums if value == 1)
    others = [value for value in nums if value not in (0, 1)]
    nums[:] = [0] * zeros + [1] * ones + others