"""Binary-search puzzles over sorted integer lists."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import Sequence

_PRODUCT_BOUND = 10**10


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``nums``, or where it would go."""
    return bisect_left(nums, target)


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in sorted ``nums``, or -1 if absent."""
    index = bisect_left(nums, target)
    if index < len(nums) and nums[index] == target:
        return index
    return -1


def count_products_at_most(nums1: Sequence[int], nums2: Sequence[int], target: int) -> int:
    """Count pairs ``(a, b)`` from the sorted lists with ``a * b <= target``."""
    count = 0
    for a in nums1:
        if a == 0:
            if target >= 0:
                count += len(nums2)
        elif a > 0:
            count += bisect_right(nums2, target // a)
        else:
            lowest = -((-target) // a)
            count += len(nums2) - bisect_left(nums2, lowest)
    return count


def kth_smallest_product(nums1: Sequence[int], nums2: Sequence[int], k: int) -> int:
    """Return the ``k``-th smallest (1-based) product of a pair from the sorted lists."""
    low, high = -_PRODUCT_BOUND, _PRODUCT_BOUND
    while low < high:
        mid = low + (high - low) // 2
        if count_products_at_most(nums1, nums2, mid) < k:
            low = mid + 1
        else:
            high = mid
    return low