"""Problems on rectangular grids of digits or numbers."""

from __future__ import annotations

from collections.abc import Sequence
from math import isqrt

_MODULUS = 3


def _require_rectangular(rows: Sequence[Sequence[object]], name: str) -> int:
    width = len(rows[0]) if rows else 0
    if any(len(row) != width for row in rows):
        raise ValueError(f"{name} must be rectangular")
    return width


def _residues(lines: Sequence[str]) -> list[int]:
    return [sum(int(ch) for ch in line) % _MODULUS for line in lines]


def corner_twist(a: Sequence[str], b: Sequence[str]) -> bool:
    """Whether grid ``a`` of digits 0-2 can be turned into ``b`` by corner twists.

    This holds exactly when every row and every column has the same sum
    modulo 3 in both grids.
    """
    width_a = _require_rectangular(a, "a")
    width_b = _require_rectangular(b, "b")
    if len(a) != len(b) or width_a != width_b:
        raise ValueError("the grids must have the same shape")
    if _residues(a) != _residues(b):
        return False
    columns_a = ["".join(column) for column in zip(*a)]
    columns_b = ["".join(column) for column in zip(*b)]
    return _residues(columns_a) == _residues(columns_b)


def _pick_of_three(first: int, second: int, third: int) -> int:
    """The strictly largest of the first two, falling back to the third."""
    if first > second and first > third:
        return first
    if second > first and second > third:
        return second
    return third


def _stabilized_cell(cells: list[list[int]], i: int, j: int) -> int:
    n = len(cells)
    m = len(cells[0])
    value = cells[i][j]
    top, bottom = i == 0, i == n - 1
    left_edge, right_edge = j == 0, j == m - 1
    up = cells[i - 1][j] if not top else None
    down = cells[i + 1][j] if not bottom else None
    left = cells[i][j - 1] if not left_edge else None
    right = cells[i][j + 1] if not right_edge else None

    if top and left_edge and not bottom and not right_edge:
        if value > right and value > down:
            return max(right, down)
    elif not top and bottom and left_edge and not right_edge:
        if value > up and value > right:
            return max(up, right)
    elif top and not bottom and not left_edge and right_edge:
        if value > left and value > down:
            return max(left, down)
    elif not top and not left_edge and bottom and right_edge:
        if value > left and value > up:
            return max(left, up)
    elif not top and not left_edge and not bottom and right_edge:
        if value > left and value > up and value > down:
            return _pick_of_three(up, down, left)
    elif not top and not left_edge and bottom and not right_edge:
        if value > left and value > up and value > right:
            return _pick_of_three(up, right, left)
    elif top and not left_edge and not bottom and not right_edge:
        if value > left and value > down and value > right:
            return _pick_of_three(down, right, left)
    elif not top and left_edge and not bottom and not right_edge:
        if value > up and value > down and value > right:
            return _pick_of_three(down, right, up)
    elif not top and not left_edge and not bottom and j != n - 1:
        if value > up and value > down and value > right:
            return max(down, up, left, right)
    elif n == 1:
        if left_edge and not right_edge:
            if value > right:
                return right
        elif right_edge and not left_edge:
            if value > left:
                return left
        elif not left_edge and not right_edge and value > left and value > right:
            return max(left, right)
    elif m == 1:
        if top and not bottom:
            if value > down:
                return down
        elif bottom and not top:
            if value > up:
                return up
        elif not top and not bottom and value > up and value > down:
            return max(up, down)
    return value


def stabilize_matrix(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    """One row-major pass lowering cells that stand above their neighbours.

    Cells are updated in place during the pass, so later cells see the
    already lowered values. The input is left untouched.
    """
    cells = [list(row) for row in grid]
    if not cells:
        return []
    _require_rectangular(cells, "grid")
    if not cells[0]:
        return cells
    for i, row in enumerate(cells):
        for j in range(len(row)):
            row[j] = _stabilized_cell(cells, i, j)
    return cells


def scale_grid(grid: Sequence[str], k: int) -> list[str]:
    """Shrink a grid made of ``k`` by ``k`` uniform blocks by the factor ``k``."""
    if k <= 0:
        raise ValueError("k must be positive")
    size = len(grid)
    return [row[:size:k] for row in grid[::k]]


def square_or_not(s: str) -> bool:
    """Whether ``s`` is a square beautiful matrix read row by row.

    The matrix must have ones on its border and zeros inside.
    """
    side = isqrt(len(s))
    if side * side != len(s):
        return False
    for index, ch in enumerate(s):
        i, j = divmod(index, side)
        on_border = i in (0, side - 1) or j in (0, side - 1)
        if ch != ("1" if on_border else "0"):
            return False
    return True