"""Problems decided by one pass, a sort or a count over an array."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Sequence

YES = "YES"
NO = "NO"
MAYBE = "MAYBE"


def _require_non_empty(a: Sequence[int], name: str = "a") -> None:
    if not a:
        raise ValueError(f"{name} must not be empty")


def alternating_sum(a: Sequence[int]) -> int:
    """``a[0] - a[1] + a[2] - ...``."""
    return sum(a[0::2]) - sum(a[1::2])


def identity_array(n: int) -> list[int]:
    """The array ``1, 2, ..., n``, which is beautiful for every divisor ``k``."""
    if n < 0:
        raise ValueError("n must not be negative")
    return list(range(1, n + 1))


def guess_the_maximum(a: Sequence[int]) -> int:
    """Largest ``k`` such that every subarray of length two or more has a maximum above ``k``."""
    _require_non_empty(a)
    answer = max(a) - 1
    for left, right in zip(a, a[1:]):
        answer = min(answer, max(left, right) - 1)
    return answer


def make_all_equal(a: Sequence[int]) -> int:
    """Fewest deletions that leave equal elements: everything but the most common value."""
    if not a:
        return 0
    most_common = max(Counter(a).values())
    return len(a) - most_common


def max_plus_size(a: Sequence[int]) -> int:
    """Best score of a red colouring with no two adjacent reds: largest red plus red count.

    Only the two alternating colourings starting at index 0 or 1 are tried.
    """
    even_part = a[0::2]
    odd_part = a[1::2]
    even_score = len(even_part) + max(even_part, default=0)
    odd_score = len(odd_part) + max(odd_part, default=0)
    return max(even_score, odd_score)


def robin_helps(a: Sequence[int], k: int) -> int:
    """How many people with no gold receive one from what Robin takes from the rich."""
    gold = 0
    helped = 0
    for value in a:
        if value >= k:
            gold += value
        elif value == 0 and gold > 0:
            gold -= 1
            helped += 1
    return helped


def strange_splitting(a: Sequence[int]) -> str | None:
    """A red/blue colouring whose two ranges differ, or ``None`` when impossible.

    Impossible exactly when all elements are equal; otherwise the second
    element alone is blue.
    """
    _require_non_empty(a)
    if len(set(a)) == 1:
        return None
    return "RB" + "R" * (len(a) - 2)


def angry_monk(a: Sequence[int]) -> int:
    """Fewest operations to merge all pieces into one, keeping the longest piece whole."""
    ordered = sorted(a, reverse=True)
    return sum(1 if piece == 1 else 2 * piece - 1 for piece in ordered[1:])


def battle_for_survive(a: Sequence[int]) -> int:
    """Largest rating the last fighter can keep after all the battles."""
    if len(a) < 2:
        raise ValueError("at least two fighters are needed")
    second_last = a[-2] - sum(a[:-2])
    return a[-1] - second_last


def k_sort(a: Sequence[int]) -> int:
    """Fewest coins to make ``a`` non-decreasing by paid increments of chosen elements."""
    _require_non_empty(a)
    total = 0
    largest_gap = 0
    running_max = a[0]
    for value in a[1:]:
        if value < running_max:
            gap = running_max - value
            total += gap
            largest_gap = max(largest_gap, gap)
        running_max = max(running_max, value)
    return total + largest_gap


def minimize_equal_sum(p: Sequence[int]) -> list[int]:
    """The permutation shifted by one: each value ``x`` becomes ``x + 1``, and ``n`` becomes 1."""
    n = len(p)
    return [1 if value == n else value + 1 for value in p]


def choosing_cubes(a: Sequence[int], f: int, k: int) -> str:
    """Whether the favourite cube (1-based index ``f``) is removed among the ``k`` largest.

    Gives ``"YES"``, ``"NO"`` or ``"MAYBE"`` when equal values make it undecided.
    """
    if not 1 <= f <= len(a):
        raise ValueError("f must be a 1-based index into a")
    favourite = a[f - 1]
    ordered = sorted(a, reverse=True)
    total = ordered.count(favourite)
    left_over = total - ordered[:k].count(favourite)
    if left_over == 0:
        return YES
    if left_over == total:
        return NO
    return MAYBE


def generate_permutation(n: int) -> list[int] | None:
    """A permutation needing equally many carriage returns from either end, or ``None``.

    None exists when ``n`` is even.
    """
    if n % 2 == 0:
        return None
    values = deque([1])
    for low in range(2, n, 2):
        values.append(low)
        values.appendleft(low + 1)
    return list(values)


def median_after_game(a: Sequence[int]) -> int:
    """The value left after optimal play: the element at index ``n // 2`` when sorted."""
    _require_non_empty(a)
    return sorted(a)[len(a) // 2]