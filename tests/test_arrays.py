import pytest

from contestkit.arrays import (
    MAYBE,
    NO,
    YES,
    alternating_sum,
    angry_monk,
    battle_for_survive,
    choosing_cubes,
    generate_permutation,
    guess_the_maximum,
    identity_array,
    k_sort,
    make_all_equal,
    max_plus_size,
    median_after_game,
    minimize_equal_sum,
    robin_helps,
    strange_splitting,
)


@pytest.mark.parametrize("x", [-5, 0, 7, 100])
def test_alternating_sum_single(x):
    assert alternating_sum([x]) == x


@pytest.mark.parametrize("a, b", [(3, 9), (10, 2), (-4, -4)])
def test_alternating_sum_pair(a, b):
    assert alternating_sum([a, b]) == a - b


def test_alternating_sum_doubles_for_repeated_even_block():
    block = [4, 1, 8, 3]
    assert alternating_sum(block + block) == 2 * alternating_sum(block)


def test_alternating_sum_empty():
    assert alternating_sum([]) == 0


@pytest.mark.parametrize("n", [1, 2, 6, 13])
def test_identity_array_is_one_to_n(n):
    result = identity_array(n)
    assert len(result) == n
    assert result == sorted(set(result))
    assert result[0] == 1 and result[-1] == n


def test_identity_array_negative_raises():
    with pytest.raises(ValueError):
        identity_array(-1)


@pytest.mark.parametrize("v", [1, 5, 42])
def test_guess_the_maximum_single(v):
    assert guess_the_maximum([v]) == v - 1


def test_guess_the_maximum_below_every_adjacent_max():
    a = [7, 2, 9, 4, 4, 10]
    result = guess_the_maximum(a)
    assert all(result <= max(x, y) - 1 for x, y in zip(a, a[1:]))
    assert any(result == max(x, y) - 1 for x, y in zip(a, a[1:]))


def test_guess_the_maximum_empty_raises():
    with pytest.raises(ValueError):
        guess_the_maximum([])


def test_make_all_equal_all_same():
    assert make_all_equal([3, 3, 3, 3]) == 0


def test_make_all_equal_all_distinct():
    a = [1, 2, 3, 4, 5]
    assert make_all_equal(a) == len(a) - 1


def test_make_all_equal_keeps_most_common():
    a = [2, 1, 2, 3, 2]
    assert make_all_equal(a) == len(a) - a.count(2)


@pytest.mark.parametrize("v", [1, 8, 30])
def test_max_plus_size_single(v):
    assert max_plus_size([v]) == v + 1


def test_max_plus_size_at_least_each_colouring():
    a = [5, 4, 5, 1, 9, 2]
    result = max_plus_size(a)
    assert result >= len(a[0::2]) + max(a[0::2])
    assert result >= len(a[1::2]) + max(a[1::2])


def test_robin_helps_nobody_rich():
    assert robin_helps([0, 0, 0], 5) == 0


def test_robin_helps_limited_by_gold():
    k = 4
    assert robin_helps([k, 0, 0, 0, 0, 0, 0], k) == k


def test_robin_helps_zeros_before_rich_get_nothing():
    assert robin_helps([0, 0, 6], 3) == 0


def test_strange_splitting_all_equal_is_impossible():
    assert strange_splitting([2, 2, 2]) is None


@pytest.mark.parametrize("a", [[1, 2], [1, 1, 2, 2], [1, 2, 3, 4, 5]])
def test_strange_splitting_shape(a):
    result = strange_splitting(a)
    assert len(result) == len(a)
    assert result[1] == "B"
    assert result.count("B") == 1


def test_strange_splitting_empty_raises():
    with pytest.raises(ValueError):
        strange_splitting([])


def test_angry_monk_single_piece():
    assert angry_monk([10]) == 0


def test_angry_monk_all_ones():
    pieces = [1] * 6
    assert angry_monk(pieces) == len(pieces) - 1


def test_angry_monk_order_does_not_matter():
    assert angry_monk([3, 1, 2]) == angry_monk([1, 2, 3])


@pytest.mark.parametrize("a, b", [(2, 1), (1, 8), (5, 5)])
def test_battle_for_survive_two(a, b):
    assert battle_for_survive([a, b]) == b - a


def test_battle_for_survive_three():
    a = [2, 2, 8]
    assert battle_for_survive(a) == a[2] - (a[1] - a[0])


def test_battle_for_survive_too_short_raises():
    with pytest.raises(ValueError):
        battle_for_survive([4])


@pytest.mark.parametrize("a", [[1], [1, 2, 3], [2, 2, 2, 5]])
def test_k_sort_sorted_costs_nothing(a):
    assert k_sort(a) == 0


def test_k_sort_single_drop():
    high, low = 9, 4
    gap = high - low
    assert k_sort([high, low]) == gap + gap


def test_k_sort_empty_raises():
    with pytest.raises(ValueError):
        k_sort([])


def test_minimize_equal_sum_identity():
    n = 5
    p = list(range(1, n + 1))
    assert minimize_equal_sum(p) == list(range(2, n + 1)) + [1]


def test_minimize_equal_sum_is_permutation_without_fixed_points():
    p = [3, 1, 4, 2]
    result = minimize_equal_sum(p)
    assert sorted(result) == sorted(p)
    assert all(x != y for x, y in zip(p, result))


def test_choosing_cubes_favourite_largest_removed():
    assert choosing_cubes([1, 9, 3], 2, 1) == YES


def test_choosing_cubes_favourite_smallest_kept():
    assert choosing_cubes([1, 9, 3], 1, 2) == NO


def test_choosing_cubes_ties_undecided():
    assert choosing_cubes([5, 5, 1], 1, 1) == MAYBE


def test_choosing_cubes_bad_index_raises():
    with pytest.raises(ValueError):
        choosing_cubes([1, 2], 3, 1)


@pytest.mark.parametrize("n", [0, 2, 4, 10])
def test_generate_permutation_even_impossible(n):
    assert generate_permutation(n) is None


def test_generate_permutation_one():
    assert generate_permutation(1) == [1]


@pytest.mark.parametrize("n", [3, 5, 9, 15])
def test_generate_permutation_is_permutation(n):
    result = generate_permutation(n)
    assert sorted(result) == list(range(1, n + 1))
    assert result[n // 2] == 1


@pytest.mark.parametrize("a", [[7], [3, 1], [5, 2, 9, 1, 4]])
def test_median_after_game_is_sorted_middle(a):
    result = median_after_game(a)
    below = sum(1 for x in a if x < result)
    assert result in a
    assert below <= len(a) // 2
    assert sum(1 for x in a if x <= result) > len(a) // 2


def test_median_after_game_empty_raises():
    with pytest.raises(ValueError):
        median_after_game([])