import pytest

from contestkit.bits import (
    MODULUS,
    and_sorting,
    binary_colouring,
    binomial_kind_of,
    first_differing_bit_power,
    infinite_sequence_value,
    is_large_sum,
    major_oak_even,
)


def test_binomial_doubles_per_step():
    ks = list(range(1, 40))
    values = binomial_kind_of([k + 1 for k in ks], ks)
    assert len(values) == len(ks)
    for previous, current in zip(values, values[1:]):
        assert current == previous * 2 % MODULUS


def test_binomial_zero_exponent():
    assert binomial_kind_of([2], [0]) == [1]


def test_binomial_results_reduced():
    values = binomial_kind_of([10**5] * 3, [99999, 66666, 33333])
    assert all(0 <= value < MODULUS for value in values)


def test_binomial_length_mismatch():
    with pytest.raises(ValueError):
        binomial_kind_of([1, 2], [1])


@pytest.mark.parametrize("x,y", [(0, 1), (12, 4), (57, 37), (316560849, 14570961)])
def test_first_differing_bit_is_lowest_difference(x, y):
    power = first_differing_bit_power(x, y)
    diff = x ^ y
    assert power & (power - 1) == 0
    assert diff & power == power
    assert diff & (power - 1) == 0


def test_first_differing_bit_equal_raises():
    with pytest.raises(ValueError):
        first_differing_bit_power(7, 7)


def test_infinite_sequence_no_time_keeps_value():
    assert infinite_sequence_value(19198, 0) == 19198


def test_infinite_sequence_nonpositive_gives_one():
    assert infinite_sequence_value(0, 1) == 1


def test_infinite_sequence_power_of_two_top():
    assert infinite_sequence_value(5, 3) == 8


@pytest.mark.parametrize("x", [0, 1, 14, 15, 24, 27, 11, 19, 1023, 2**30 - 1, 123456789])
def test_binary_colouring_preserves_value(x):
    coefficients = binary_colouring(x)
    assert len(coefficients) == 32
    assert set(coefficients) <= {-1, 0, 1}
    assert sum(c * 2**i for i, c in enumerate(coefficients)) == x


def test_binary_colouring_zero():
    assert binary_colouring(0) == [0] * 32


def test_and_sorting_already_sorted():
    assert and_sorting([0, 1, 2, 3]) == (1 << 30) - 1


@pytest.mark.parametrize("p", [[1, 0], [0, 1, 3, 2], [7, 6, 5, 4, 3, 2, 1, 0], [1, 3, 2, 0]])
def test_and_sorting_is_common_mask(p):
    result = and_sorting(p)
    misplaced = [v for i, v in enumerate(p) if v != i]
    assert all(v & result == result for v in misplaced)


def test_large_sum_accepts():
    assert is_large_sum("1337")
    assert is_large_sum(1984)
    assert is_large_sum("10")


def test_large_sum_rejects():
    assert not is_large_sum("200")
    assert not is_large_sum("119")
    assert not is_large_sum("1034")
    assert not is_large_sum("")


def test_large_sum_int_and_str_agree():
    for value in (1337, 200, 1393938, 1434, 98765432123456789):
        assert is_large_sum(value) == is_large_sum(str(value))


@pytest.mark.parametrize("n", range(1, 15))
def test_major_oak_matches_leaf_parity(n):
    for k in range(1, n + 1):
        leaves = sum(i**i for i in range(n - k + 1, n + 1))
        assert major_oak_even(n, k) == (leaves % 2 == 0)