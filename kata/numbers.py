"""Number puzzles: Fibonacci, mirror numbers and counted subsequences."""

from __future__ import annotations

from itertools import islice
from typing import Iterator, Sequence

_MOD = 10**9 + 7


def fib(n: int) -> int:
    """Return the ``n``-th Fibonacci number; values below 2 are returned as given."""
    if n < 2:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def create_palindrome(num: int, odd: bool) -> int:
    """Mirror the decimal digits of ``num``; ``odd`` shares the middle digit."""
    digits = str(num)
    tail = digits[:-1] if odd else digits
    return int(digits + tail[::-1])


def is_palindrome(num: int, base: int) -> bool:
    """Return True if ``num`` reads the same both ways in ``base``."""
    digits = []
    while num > 0:
        num, digit = divmod(num, base)
        digits.append(digit)
    return digits == digits[::-1]


def _decimal_palindromes() -> Iterator[int]:
    """Yield every positive decimal palindrome in ascending order."""
    width = 1
    while True:
        for odd in (True, False):
            for half in range(width, width * 10):
                yield create_palindrome(half, odd)
        width *= 10


def k_mirror(k: int, n: int) -> int:
    """Return the sum of the ``n`` smallest numbers palindromic in base 10 and base ``k``."""
    if n <= 0:
        return 0
    mirrors = (p for p in _decimal_palindromes() if is_palindrome(p, k))
    return sum(islice(mirrors, n))


def num_subseq(nums: Sequence[int], target: int) -> int:
    """Count non-empty subsequences whose min plus max is at most ``target``.

    The answer is taken modulo 1_000_000_007.
    """
    ordered = sorted(nums)
    left, right = 0, len(ordered) - 1
    result = 0
    while left <= right:
        if ordered[left] + ordered[right] <= target:
            result = (result + pow(2, right - left, _MOD)) % _MOD
            left += 1
        else:
            right -= 1
    return result