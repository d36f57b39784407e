"""Small closed-form and counting problems on integers."""

from __future__ import annotations

from collections.abc import Iterator


def two_digit_sum(n: int) -> int:
    """Sum of the tens digit and the units digit of ``n``."""
    tens, units = divmod(n, 10)
    return tens + units


def digit_sum(n: int) -> int:
    """Sum of the decimal digits of ``n``; negative numbers give a negative sum."""
    total = sum(int(ch) for ch in str(abs(n)))
    return -total if n < 0 else total


def dora_set_operations(l: int, r: int) -> int:
    """Number of triples of pairwise coprime numbers removable from ``[l, r]``.

    Every operation needs two odd numbers, so the answer is half the count
    of positive odd numbers in the range.
    """
    low = max(l, 1)
    if low > r:
        return 0
    odd_count = (r + 1) // 2 - low // 2
    return odd_count // 2


def min_operations(n: int, k: int) -> int:
    """Reduce ``n`` by the largest power ``k**e`` (``e >= 1``) not exceeded by
    ``k**(e + 1)`` being above ``n``, and count what remains plus one."""
    if k < 2:
        raise ValueError("k must be at least 2")
    exponent = 1
    while k ** (exponent + 1) <= n:
        exponent += 1
    return n - k**exponent + 1


def little_nikita(n: int, m: int) -> bool:
    """Whether ``n`` moves of adding or removing one cube can leave ``m`` cubes."""
    return m <= n and m >= n % 2 and n % 2 == m % 2


def sakurako_exam(a: int, b: int) -> bool:
    """Whether ``a`` ones and ``b`` twos can be signed to sum to zero."""
    if a % 2 == 1:
        return False
    if a == 0 and b % 2 == 1:
        return False
    return True


def upload_ram_seconds(n: int, k: int) -> int:
    """Seconds needed to upload ``n`` GB with at most 1 GB per ``k`` seconds."""
    return k * (n - 1) + 1


def blender_seconds(n: int, x: int, y: int) -> int:
    """Seconds to blend ``n`` fruits when the bottleneck rate is ``min(x, y)``."""
    rate = min(x, y)
    return -(-n // rate)


def only_pluses(a: int, b: int, c: int) -> int:
    """Largest product after five increments, each applied to the smallest value."""
    for _ in range(5):
        if a <= b and a <= c:
            a += 1
        elif b <= c and b <= a:
            b += 1
        else:
            c += 1
    return a * b * c


def is_lost_power_of_ten(n: int) -> bool:
    """Whether ``n`` could be ``10**x`` (``x >= 2``) written without the caret."""
    if n <= 100:
        return False
    text = str(n)
    if len(text) == 3 and text.startswith("10") and 102 <= n <= 109:
        return True
    if len(text) == 4 and text.startswith("10") and text[2] != "0":
        return True
    return False


def _diagonal_lengths(n: int) -> Iterator[int]:
    """Diagonal lengths of an ``n`` by ``n`` board, longest first."""
    if n <= 0:
        return
    yield n
    for length in range(n - 1, 0, -1):
        yield length
        yield length


def diagonals_occupied(n: int, k: int) -> int:
    """Fewest diagonals of an ``n`` by ``n`` board that hold ``k`` chips."""
    used = 0
    remaining = k
    for length in _diagonal_lengths(n):
        if remaining <= 0:
            break
        remaining -= length
        used += 1
    return used


def split_multiset(n: int, k: int) -> int:
    """Operations needed to split ``{n}`` into ones, splitting into at most ``k`` parts."""
    if n == 1:
        return 0
    answer = n // k + 1
    if n % k != 0:
        answer += 1
    answer += (answer - 1) // k
    return answer


def turtle_piggy_score(l: int, r: int) -> int:
    """Largest score: how many times ``r`` can be halved while above one."""
    if r <= 1:
        return 0
    return r.bit_length() - 1


def collatz(x: int, y: int, k: int) -> int:
    """Value reported for the modified Collatz process."""
    return x % y + k % y


def best_multiple_base(n: int) -> int:
    """The ``x`` in ``[2, n]`` whose multiples up to ``n`` have the largest sum.

    Ties keep the smallest ``x``; ``0`` when ``n < 2``.
    """

    def multiples_sum(base: int) -> int:
        count = n // base
        return base * count * (count + 1) // 2

    return max(range(2, n + 1), key=multiples_sum, default=0)