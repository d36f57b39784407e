"""Two-player games and small decision puzzles."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def jellyfish_game(a: Sequence[int], b: Sequence[int], k: int) -> int:
    """Total of Jellyfish's apples after ``k`` rounds of swapping.

    With an even ``k`` the total is unchanged; with an odd ``k`` the
    smallest apple may be traded for the other player's largest.
    """
    total = sum(a)
    if k % 2 == 0:
        return total
    return max(total, total - min(a) + max(b))


def soccer_possible(a: int, b: int, c: int, d: int) -> bool:
    """Whether the score could go from ``a:b`` to ``c:d`` without the lead changing sides."""
    return (a >= b and c >= d) or (a <= b and c <= d)


def submission_bait(a: Sequence[int]) -> bool:
    """Whether the first player wins: some value occurs an odd number of times."""
    return any(count % 2 == 1 for count in Counter(a).values())


def card_game_wins(a: int, b: int, c: int, d: int) -> int:
    """Number of game orders in which Suneet (``a``, ``b``) beats Slavic (``c``, ``d``)."""
    wins = 0
    if (a > c and b >= d) or (a >= c and b > d):
        wins += 2
    if (a > d and b >= c) or (a >= d and b > c):
        wins += 2
    return wins


def removals_game_winner(a: Sequence[int], b: Sequence[int]) -> str:
    """``"Bob"`` when he can mirror Alice's removals, otherwise ``"Alice"``."""
    first = list(a)
    second = list(b)
    if first == second or first == second[::-1]:
        return "Bob"
    return "Alice"


def doors_to_lock(l: int, r: int, left: int, right: int) -> int:
    """Fewest doors to lock so rooms in ``[l, r]`` and ``[left, right]`` never meet."""
    low = max(l, left)
    high = min(r, right)
    if low > high:
        return 1
    doors = high - low
    if low > min(l, left):
        doors += 1
    if high < max(r, right):
        doors += 1
    return doors