"""String puzzles: repeated subsequences, grouping, typing and walking games."""

from __future__ import annotations

from collections import Counter, deque
from itertools import groupby, pairwise
from string import ascii_lowercase
from typing import Iterable

_MOD = 10**9 + 7


def is_repeated_subsequence(sub: str, text: str, k: int) -> bool:
    """Return True if ``sub`` repeated ``k`` times is a subsequence of ``text``."""
    if not sub:
        return False
    count = 0
    position = 0
    for ch in text:
        if ch == sub[position]:
            position += 1
            if position == len(sub):
                position = 0
                count += 1
                if count == k:
                    return True
    return False


def longest_subsequence_repeated_k(s: str, k: int) -> str:
    """Return the longest string whose ``k``-fold repetition is a subsequence of ``s``.

    Among equally long answers the lexicographically largest one is returned;
    the empty string means there is none.
    """
    result = ""
    pending: deque[str] = deque([""])
    while pending:
        current = pending.popleft()
        for ch in ascii_lowercase:
            candidate = current + ch
            if is_repeated_subsequence(candidate, s, k):
                result = candidate
                pending.append(candidate)
    return result


def divide_string(s: str, k: int, fill: str) -> list[str]:
    """Split ``s`` into pieces of length ``k``, padding the last with ``fill``."""
    if k <= 0:
        raise ValueError("group size must be positive")
    return [s[start:start + k].ljust(k, fill) for start in range(0, len(s), k)]


def longest_binary_subsequence(s: str, k: int) -> int:
    """Return the length of the longest subsequence of binary ``s`` worth at most ``k``."""
    zeros = s.count("0")
    ones = 0
    value = 0
    power = 1
    for ch in reversed(s):
        if ch == "1":
            if value + power > k:
                continue
            value += power
            ones += 1
        power <<= 1
        if power > k:
            break
    return zeros + ones


def minimum_deletions(word: str, k: int) -> int:
    """Return the fewest deletions making all letter frequencies differ by at most ``k``."""
    frequencies = sorted(Counter(word).values())

    def deletions_for(index: int) -> int:
        ceiling = frequencies[index] + k
        removed_below = sum(frequencies[:index])
        trimmed_above = sum(max(freq - ceiling, 0) for freq in frequencies[index:])
        return removed_below + trimmed_above

    return min((deletions_for(index) for index in range(len(frequencies))), default=0)


def _shift(ch: str, steps: int = 1) -> str:
    return chr(ord("a") + (ord(ch) - ord("a") + steps) % 26)


def kth_character(k: int) -> str:
    """Return the ``k``-th (1-based) letter of the self-extending word game."""
    if k < 1:
        raise ValueError("k must be at least 1")
    letters = ["a"]
    while len(letters) < k:
        letters.extend(_shift(ch) for ch in list(letters))
    return letters[k - 1]


def kth_character_with_operations(k: int, operations: Iterable[int]) -> str:
    """Return the ``k``-th (1-based) letter after applying the doubling operations.

    Operation 0 appends a copy of the word, operation 1 appends a copy with
    every letter advanced by one.
    """
    applied: list[tuple[int, int]] = []
    length = 1
    for op in operations:
        length *= 2
        applied.append((length, op))
        if length >= k:
            break

    shift = 0
    for length, op in reversed(applied):
        half = length // 2
        if k > half:
            k -= half
            if op == 1:
                shift += 1
    return _shift("a", shift)


def possible_string_count(word: str) -> int:
    """Count the originals ``word`` could come from with at most one key held too long."""
    return len(word) - sum(1 for a, b in pairwise(word) if a != b)


def possible_string_count_at_least(word: str, k: int) -> int:
    """Count originals of length at least ``k`` that could have produced ``word``.

    The answer is taken modulo 1_000_000_007.
    """
    if not word:
        return 0
    groups = [sum(1 for _ in run) for _, run in groupby(word)]

    total = 1
    for size in groups:
        total = total * size % _MOD
    if k <= len(groups):
        return total

    ways = [0] * k
    ways[0] = 1
    for size in groups:
        updated = [0] * k
        window = 0
        for length in range(k):
            if length > 0:
                window += ways[length - 1]
            if length > size:
                window -= ways[length - size - 1]
            window %= _MOD
            updated[length] = window
        ways = updated

    too_short = sum(ways[len(groups):]) % _MOD
    return (total - too_short) % _MOD


def max_manhattan_distance(s: str, k: int) -> int:
    """Return the largest distance from the origin reached when up to ``k`` moves change."""
    counts = Counter()
    best = 0
    for steps, ch in enumerate(s, start=1):
        counts[ch] += 1
        distance = abs(counts["N"] - counts["S"]) + abs(counts["E"] - counts["W"])
        best = max(best, distance + min(2 * k, steps - distance))
    return best