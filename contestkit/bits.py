"""Problems decided by the binary representation of integers."""

from __future__ import annotations

from collections.abc import Sequence
from functools import reduce
from operator import and_

MODULUS = 1_000_000_007
WORD_BITS = 32
_WORD_MASK = (1 << WORD_BITS) - 1
_LOW_BITS_CHECKED = 31
_AND_IDENTITY = (1 << 30) - 1


def binomial_kind_of(ns: Sequence[int], ks: Sequence[int]) -> list[int]:
    """Values of the faulty binomial formula: ``2**k`` modulo ``MODULUS`` per pair.

    The ``n`` of each pair does not affect the value; the two sequences
    must still be of equal length.
    """
    if len(ns) != len(ks):
        raise ValueError("ns and ks must have the same length")
    return [pow(2, k, MODULUS) if k > 0 else 1 for k in ks]


def first_differing_bit_power(x: int, y: int) -> int:
    """``2**i`` for the lowest bit ``i`` (below 31) where ``x`` and ``y`` differ."""
    diff = (x ^ y) & ((1 << _LOW_BITS_CHECKED) - 1)
    if diff == 0:
        raise ValueError("x and y agree on all of their low 31 bits")
    return diff & -diff


def _range_or(low: int, high: int) -> int:
    """Bitwise OR of every integer in ``[low, high]`` (``0 <= low <= high``)."""
    spread = (low ^ high).bit_length()
    return high | ((1 << spread) - 1)


def infinite_sequence_value(n: int, m: int) -> int:
    """Value at position ``n`` of the OR-spreading sequence after ``m`` seconds.

    The value is the OR of the 32-bit words from the top position ``n + m``
    down to the largest power of two not above it (down to one when that
    power is two).
    """
    if m == 0:
        return n
    if n + m - 1 <= 0:
        return 1
    top = n + m
    low = 1 << (top.bit_length() - 1)
    if low == 2:
        low = 1
    return _range_or(low, top) & _WORD_MASK


def binary_colouring(x: int) -> list[int]:
    """Coefficients in ``{-1, 0, 1}`` for bits 0 to 31 whose weighted sum is ``x``.

    Each run of two or more consecutive ones that ends below bit 31 is
    replaced by a ``-1`` at its lowest bit and a ``1`` just above its top.
    """
    digits = [(x >> bit) & 1 for bit in range(WORD_BITS)]
    run_start: int | None = None
    for bit in range(WORD_BITS - 1):
        if digits[bit] == 1 and digits[bit + 1] == 1:
            if run_start is None:
                run_start = bit
        elif run_start is not None:
            for inner in range(run_start + 1, bit + 1):
                digits[inner] = 0
            digits[run_start] = -1
            digits[bit + 1] = 1
            run_start = None
    return digits


def and_sorting(p: Sequence[int]) -> int:
    """Largest ``X`` allowing the permutation to be sorted by swaps with ``p_i & p_j == X``.

    This is the AND of all misplaced elements, or ``2**30 - 1`` when none is.
    """
    misplaced = (value for index, value in enumerate(p) if value != index)
    return reduce(and_, misplaced, _AND_IDENTITY)


def is_large_sum(x: int | str) -> bool:
    """Whether ``x`` is the sum of two large positive integers of equal length."""
    text = str(x)
    if not text or text[0] != "1" or text[-1] == "9":
        return False
    return "0" not in text[1:-1]


def major_oak_even(n: int, k: int) -> bool:
    """Whether the oak holds an even number of leaves in year ``n``.

    Leaves grown in year ``i`` number ``i**i`` and last ``k`` years, so the
    parity follows the count of odd years in ``[n - k + 1, n]``.
    """
    start = n - k + 1
    odd_years = k // 2 + k % 2 if start % 2 else k // 2
    return odd_years % 2 == 0