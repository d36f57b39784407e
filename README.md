# contestkit

A collection of solutions to short programming-contest problems. Each problem
is a plain function that takes Python values and returns its answer. No
function reads from standard input or prints anything.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `contestkit.arithmetic`: problems on one or a few integers. Examples are
  `two_digit_sum`, `digit_sum`, `min_operations`, `only_pluses`,
  `diagonals_occupied`, `turtle_piggy_score` and `best_multiple_base`.
- `contestkit.bits`: problems decided by binary representations. Examples are
  `binomial_kind_of`, `first_differing_bit_power`, `infinite_sequence_value`,
  `binary_colouring`, `and_sorting`, `is_large_sum` and `major_oak_even`.
- `contestkit.games`: game and match outcomes. Examples are `jellyfish_game`,
  `soccer_possible`, `submission_bait`, `card_game_wins`,
  `removals_game_winner` and `doors_to_lock`.
- `contestkit.strings`: string problems. Examples are `swap_first_letters`,
  `minimal_palindrome_string`, `verify_password`, `two_screens_seconds`,
  `normalize_case`, `min_length_with_substring_and_subsequence`,
  `anagram_counts`, `missing_problems` and `max_correct_answers`.
- `contestkit.points`: problems on integer points: `catch_the_coin`,
  `closest_point_possible`, `x_axis_min_distance` and `distinct_points`.
- `contestkit.arrays`: problems solved with one pass, a sort or a count over an
  array. Examples are `alternating_sum`, `guess_the_maximum`, `make_all_equal`,
  `robin_helps`, `strange_splitting`, `k_sort`, `choosing_cubes`,
  `generate_permutation` and `median_after_game`.
- `contestkit.sequences`: larger array problems. Examples are
  `tnt_max_difference`, `increase_decrease_copy`, `maximum_sum`,
  `parity_and_sum`, `difference_of_gcds`, `divan_project`, `lonely_array`,
  `bouquet_petals` and `all_pairs_segments`.
- `contestkit.queries`: problems that answer a list of queries:
  `strict_teacher_easy`, `strict_teacher_hard` and `index_max_values`.
- `contestkit.grids`: problems on grids: `corner_twist`, `stabilize_matrix`,
  `scale_grid` and `square_or_not`.

## Example

```python
from contestkit.arithmetic import digit_sum
from contestkit.strings import swap_first_letters
from contestkit.arrays import generate_permutation, make_all_equal

digit_sum(1234)                    # 10
swap_first_letters("bit", "set")   # ("sit", "bet")
make_all_equal([1, 2, 2])          # 1
generate_permutation(4)            # None
```

## Return values and errors

Functions that answer a yes/no question return `bool`. There are two
exceptions. `arrays.choosing_cubes` returns one of the strings `"YES"`, `"NO"`
or `"MAYBE"`, and `games.removals_game_winner` returns `"Alice"` or `"Bob"`.

Where a problem has no answer, the function returns `None`. This is the case
for `arrays.generate_permutation` with an even `n`, for
`arrays.strange_splitting` when all elements are equal, and for
`sequences.difference_of_gcds` when no array fits in `[l, r]`.

Input that a problem does not allow, such as an empty array where one is
required or sequences of mismatched lengths, raises `ValueError`.

## What it does not do

The package has no command-line program. It does not parse contest input
files, and it does not run several test cases from a single input. To solve a
case, call the function for that problem directly with Python values.