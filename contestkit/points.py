"""Small geometry problems on integer points."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_AXIS_LOW = 1
_AXIS_HIGH = 10


def catch_the_coin(coins: Iterable[tuple[int, int]]) -> list[bool]:
    """For each coin ``(x, y)``, whether it can be caught before it falls away.

    Coins fall one unit per second, so a coin is reachable exactly when its
    height is at least ``-1``; the horizontal position does not matter.
    """
    return [y >= -1 for _x, y in coins]


def closest_point_possible(points: Sequence[int]) -> bool:
    """Whether a new point can be the closest one to every given sorted point."""
    return len(points) == 2 and points[0] + 1 < points[1]


def x_axis_min_distance(a: int, b: int, c: int) -> int:
    """Least total distance from ``a``, ``b``, ``c`` to one integer point in ``[1, 10]``."""
    return min(
        abs(a - point) + abs(b - point) + abs(c - point)
        for point in range(_AXIS_LOW, _AXIS_HIGH + 1)
    )


def distinct_points(x: int, y: int, k: int) -> list[tuple[int, int]]:
    """``k`` distinct integer points whose centre is ``(x, y)``."""
    if k < 0:
        raise ValueError("k must not be negative")
    points: list[tuple[int, int]] = []
    if k % 2:
        points.append((x, y))
    for step in range(1, k // 2 + 1):
        points.append((x + step, y + step))
        points.append((x - step, y - step))
    return points