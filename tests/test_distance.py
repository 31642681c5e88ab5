import itertools

import nltk
import pytest

from spell_checker import levenshtein_distance, levenshtein_matrix

WORDS = ["", "a", "the", "teh", "quick", "quikc", "kitten", "sitting", "flaw", "lawn"]


@pytest.mark.parametrize(
    "a,b,want",
    [
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("intention", "execution", 5),
        ("teh", "the", 2),
        ("quikc", "quick", 2),
        ("", "", 0),
        ("a", "", 1),
    ],
)
def test_levenshtein_distance_known_pairs(a: str, b: str, want: int) -> None:
    assert levenshtein_distance(a, b) == want


def test_levenshtein_matches_nltk_edit_distance() -> None:
    for a, b in itertools.product(WORDS, repeat=2):
        assert levenshtein_distance(a, b) == nltk.edit_distance(a, b)


def test_levenshtein_is_symmetric_and_zero_on_identity() -> None:
    for a, b in itertools.product(WORDS, repeat=2):
        assert levenshtein_distance(a, b) == levenshtein_distance(b, a)
    for w in WORDS:
        assert levenshtein_distance(w, w) == 0
        assert levenshtein_distance("", w) == len(w)


def test_levenshtein_triangle_inequality() -> None:
    for a, b, c in itertools.product(WORDS, repeat=3):
        assert levenshtein_distance(a, c) <= levenshtein_distance(a, b) + levenshtein_distance(b, c)


def test_levenshtein_matrix_borders_hold_prefix_lengths() -> None:
    dp = levenshtein_matrix("abc", "de")
    assert len(dp) == 4 and len(dp[0]) == 3
    assert [row[0] for row in dp] == [0, 1, 2, 3]
    assert dp[0] == [0, 1, 2]
