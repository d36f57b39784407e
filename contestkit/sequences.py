"""Problems over whole sequences: prefix sums, windows, greedy passes and counts."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import accumulate


def _require_non_empty(a: Sequence[int], name: str = "a") -> None:
    if not a:
        raise ValueError(f"{name} must not be empty")


def tnt_max_difference(a: Sequence[int]) -> int:
    """Largest gap between the heaviest and lightest truck over every valid truck size.

    For each divisor ``d`` of ``len(a)`` the boxes are loaded ``d`` at a time
    in order; the answer is the largest spread of the resulting loads.
    """
    _require_non_empty(a)
    n = len(a)
    best = -1
    for size in range(1, n + 1):
        if n % size:
            continue
        loads = [sum(a[start : start + size]) for start in range(0, n, size)]
        best = max(best, max(loads) - min(loads))
    return best


def increase_decrease_copy(a: Sequence[int], b: Sequence[int]) -> int:
    """Fewest operations to turn ``a`` into ``b``, where ``b`` has one extra last element.

    Each element is moved to its target one step at a time, and one copy
    (plus any adjustment) produces the final element.
    """
    _require_non_empty(a)
    if len(b) != len(a) + 1:
        raise ValueError("b must be exactly one element longer than a")
    last = b[-1]
    copy_cost = min(
        min(abs(last - x) + 1, abs(last - y) + 1) for x, y in zip(a, b)
    )
    total = 0
    for x, y in zip(a, b):
        total += abs(x - y)
        if min(x, y) <= last <= max(x, y):
            copy_cost = min(copy_cost, 1)
    return total + copy_cost


def maximum_sum(a: Sequence[int], k: int) -> int:
    """Largest remaining sum after ``k`` operations, each removing either the
    two smallest elements or the single largest one."""
    n = len(a)
    if k < 0 or 2 * k >= n:
        raise ValueError("k must satisfy 0 <= 2 * k < len(a)")
    ordered = sorted([0, *a])
    prefix = [ordered[0], *accumulate(ordered[1:])]
    best = 0
    for pairs in range(k + 1):
        largest_removed = k - pairs
        best = max(best, prefix[n - largest_removed] - prefix[2 * pairs])
    return best


def parity_and_sum(a: Sequence[int]) -> int:
    """Fewest operations to give every element the same parity.

    Each even element needs one operation with an odd partner; one extra
    operation is needed when the odd total cannot outgrow some even value.
    """
    largest_odd = 0
    evens: list[int] = []
    for value in a:
        if value % 2 == 1:
            largest_odd = max(largest_odd, value)
        else:
            evens.append(value)
    if not evens or len(evens) == len(a):
        return 0
    evens.sort()
    extra = 0
    for value in evens:
        if value > largest_odd:
            extra = 1
            break
        largest_odd += value
        if largest_odd > evens[-1]:
            break
    return len(evens) + extra


def seating_rules_followed(n: int, seats: Sequence[int]) -> bool:
    """Whether every passenger after the first sat next to an occupied seat."""
    _require_non_empty(seats, "seats")
    if len(seats) != n:
        raise ValueError("there must be exactly n seats taken")
    occupied = {seats[0]}
    followed = True
    for seat in seats[1:]:
        if seat - 1 in occupied or seat + 1 in occupied:
            occupied.add(seat)
        else:
            followed = False
    return followed


def difference_of_gcds(n: int, l: int, r: int) -> list[int] | None:
    """An array in ``[l, r]`` whose ``gcd(i, a_i)`` values are all distinct, or ``None``.

    Each ``a_i`` is the smallest multiple of ``i`` not below ``l``.
    """
    values = []
    for index in range(1, n + 1):
        value = ((l - 1) // index + 1) * index
        if value > r:
            return None
        values.append(value)
    return values


def divan_project(a: Sequence[int]) -> tuple[int, list[int]]:
    """Total walking time and building coordinates for the visit counts ``a``.

    The headquarters stands at coordinate 0 (first in the list); the most
    visited buildings are placed closest, alternating between sides.
    """
    ranked = sorted((visits, position) for position, visits in enumerate(a, start=1))
    coordinates = [0] * (len(a) + 1)
    total = 0
    distance = 1
    right_side = True
    for visits, position in reversed(ranked):
        if right_side:
            coordinates[position] = distance
        else:
            coordinates[position] = -distance
            distance += 1
        right_side = not right_side
        total += 2 * visits * distance
    return total, coordinates


def _bits_of(value: int, width: int) -> list[int]:
    return [bit for bit in range(width) if (value >> bit) & 1]


def _windows_share_or(a: Sequence[int], k: int) -> bool:
    """Whether every window of length ``k`` has the same bitwise OR as the first."""
    width = max((value.bit_length() for value in a), default=0)
    counts = [0] * width
    for value in a[:k]:
        for bit in _bits_of(value, width):
            counts[bit] += 1
    first = [count > 0 for count in counts]
    for incoming, outgoing in zip(a[k:], a):
        for bit in _bits_of(incoming, width):
            counts[bit] += 1
        for bit in _bits_of(outgoing, width):
            counts[bit] -= 1
        if [count > 0 for count in counts] != first:
            return False
    return True


def lonely_array(a: Sequence[int]) -> int:
    """Smallest ``k`` for which all windows of length ``k`` share one bitwise OR."""
    low, high = 1, len(a)
    answer = len(a)
    while low <= high:
        middle = (low + high) // 2
        if _windows_share_or(a, middle):
            answer = middle
            high = middle - 1
        else:
            low = middle + 1
    return answer


def bouquet_petals(a: Sequence[int], m: int) -> int:
    """Most petals in a bouquet of flowers whose petal counts differ by at most one,
    costing at most ``m`` coins (one coin per petal)."""
    counts = Counter(a)
    best = 0
    for petals in sorted(counts):
        available = counts[petals]
        taken = min(m // petals, available)
        spent = taken * petals
        best = max(best, spent)
        bigger = petals + 1
        if bigger not in counts:
            continue
        remaining = m - spent
        bigger_taken = min(remaining // petals + 1, counts[bigger])
        bigger_cost = bigger_taken * bigger
        spent += bigger_cost
        remaining -= bigger_cost
        bigger_left = counts[bigger] - bigger_taken
        best = max(best, spent + min(bigger_left, remaining, taken))
    return best


def all_pairs_segments(x: Sequence[int], queries: Sequence[int]) -> list[int]:
    """For each ``k``, the value reported for points covered by ``k`` segments.

    Queries outside ``[1, len(x) - 1]`` give 0; others give
    ``x[n - k] - x[k - 1]``.
    """
    n = len(x)
    return [x[n - k] - x[k - 1] if 1 <= k <= n - 1 else 0 for k in queries]