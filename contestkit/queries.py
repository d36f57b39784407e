"""Problems answered per query against a sorted set of positions or a running maximum."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Sequence


def strict_teacher_easy(n: int, teachers: Sequence[int], queries: Iterable[int]) -> list[int]:
    """Moves before David is caught, for each query, by the simple bound rule.

    For each query ``x`` the first teacher at or after ``x`` (or cell 1 when
    there is none) and the first teacher after ``x`` (or cell ``n``) bound
    the answer.
    """
    ordered = sorted(teachers)
    answers = []
    for x in queries:
        at_or_after = bisect_left(ordered, x)
        after = bisect_right(ordered, x)
        lower = ordered[at_or_after] if at_or_after < len(ordered) else 1
        upper = ordered[after] if after < len(ordered) else n
        if lower < x < upper:
            gap = upper - lower - 1
            answers.append(gap % 2 + gap // 2)
        elif x < lower:
            answers.append(lower - 1)
        else:
            answers.append(n - upper)
    return answers


def strict_teacher_hard(n: int, teachers: Sequence[int], queries: Iterable[int]) -> list[int]:
    """Moves before David, starting at each query cell, is caught by the teachers.

    Left of every teacher he runs to cell 1, right of every teacher to cell
    ``n``; between two teachers he stays in the middle of them.
    """
    if not teachers:
        raise ValueError("at least one teacher is needed")
    ordered = sorted(teachers)
    answers = []
    for x in queries:
        left = bisect_left(ordered, x)
        right = bisect_right(ordered, x)
        if left == 0:
            if right >= len(ordered):
                raise ValueError(f"cell {x} is occupied by every teacher")
            answers.append(ordered[right] - 1)
        elif right >= len(ordered):
            answers.append(n - ordered[left - 1])
        else:
            answers.append((ordered[right] - ordered[left - 1]) // 2)
    return answers


def index_max_values(a: Sequence[int], operations: Iterable[tuple[str, int, int]]) -> list[int]:
    """The array maximum after each operation ``(op, l, r)``.

    ``"+"`` adds one to every value in ``[l, r]``; any other operation
    subtracts one. Only the current maximum needs to be followed.
    """
    if not a:
        raise ValueError("a must not be empty")
    highest = max(a)
    results = []
    for op, low, high in operations:
        if low <= highest <= high:
            highest += 1 if op == "+" else -1
        results.append(highest)
    return results