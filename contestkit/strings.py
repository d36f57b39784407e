"""Puzzles on words, letter counts and simple string construction."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

VOWELS = "aeiou"
PROBLEM_LEVELS = "ABCDEFG"
ANSWER_OPTIONS = "ABCD"

_LOWER = "abcdefghijklmnopqrstuvwxyz"
_UPPER = _LOWER.upper()
_DIGITS = "0123456789"
_TO_LOWER = str.maketrans(_UPPER, _LOWER)
_TO_UPPER = str.maketrans(_LOWER, _UPPER)


def swap_first_letters(a: str, b: str) -> tuple[str, str]:
    """Exchange the first characters of ``a`` and ``b``."""
    if not a or not b:
        raise ValueError("both words must be non-empty")
    return b[0] + a[1:], a[0] + b[1:]


def minimal_palindrome_string(n: int) -> str:
    """A vowel string of length ``n`` with as few palindromic subsequences as possible.

    The vowels are spread as evenly as possible and grouped in the order
    ``a, e, i, o, u``; the first ``n % 5`` vowels get one extra letter.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    share, extra = divmod(n, len(VOWELS))
    return "".join(
        vowel * (share + (position < extra)) for position, vowel in enumerate(VOWELS)
    )


def ends_differ(s: str) -> bool:
    """Whether the first and last characters of ``s`` differ."""
    if not s:
        raise ValueError("s must be non-empty")
    return s[0] != s[-1]


def verify_password(s: str) -> bool:
    """Whether ``s`` has only lowercase letters and digits, in non-decreasing order."""
    allowed = set(_LOWER) | set(_DIGITS)
    return all(ch in allowed for ch in s) and list(s) == sorted(s)


def _common_prefix_length(s: str, t: str) -> int:
    length = 0
    for left, right in zip(s, t):
        if left != right:
            break
        length += 1
    return length


def two_screens_seconds(s: str, t: str) -> int:
    """Seconds to show ``s`` and ``t`` on two screens, typing or copying a screen.

    The shared prefix is typed once and copied in one extra second; the
    rest of both words is typed letter by letter.
    """
    prefix = _common_prefix_length(s, t)
    copy_cost = 1 if prefix else 0
    return len(s) + len(t) - prefix + copy_cost


def normalize_case(s: str) -> str:
    """Turn ``s`` wholly lowercase, or wholly uppercase if uppercase letters are the majority.

    Only ASCII letters are counted and changed; ties go to lowercase.
    """
    lower_count = sum(ch in _LOWER for ch in s)
    if lower_count >= len(s) - lower_count:
        return s.translate(_TO_LOWER)
    return s.translate(_TO_UPPER)


def min_length_with_substring_and_subsequence(a: str, b: str) -> int:
    """Shortest length of a string holding ``a`` as a substring and ``b`` as a subsequence."""
    best = 0
    for start in range(len(b)):
        matched = 0
        position = start
        for ch in a:
            if position >= len(b):
                break
            if b[position] == ch:
                matched += 1
                position += 1
        best = max(best, matched)
    return len(a) + len(b) - best


def anagram_counts(words: Iterable[str], queries: Iterable[str]) -> list[int]:
    """For each query, how many words can be built from its letters."""
    word_counts = [Counter(word) for word in words]
    results = []
    for query in queries:
        available = Counter(query)
        results.append(sum(1 for needed in word_counts if not needed - available))
    return results


def missing_problems(s: str, m: int) -> int:
    """Problems still to create so each level ``A`` to ``G`` has ``m`` for ``m`` rounds."""
    counts = Counter(s)
    return sum(max(0, m - counts[level]) for level in PROBLEM_LEVELS)


def max_correct_answers(n: int, s: str) -> int:
    """Most correct answers on a ``4n`` test where each option is right ``n`` times."""
    counts = Counter(s[: 4 * n])
    return sum(min(n, counts[option]) for option in ANSWER_OPTIONS)