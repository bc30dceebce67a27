import math

import pytest

from evaluation.metrics import (
    char_error_rate,
    compute_percentiles,
    edit_distance,
    wer_breakdown,
    word_error_rate,
)


class TestWordErrorRate:

    def test_identical(self):
        assert word_error_rate(["a", "b", "c"], ["a", "b", "c"]) == 0

    def test_deletion(self):
        assert word_error_rate(["a", "b"], ["a"]) == 0.5

    def test_empty_reference(self):
        assert word_error_rate([], []) == 0
        assert word_error_rate([], ["x"]) == 1

    def test_unbounded_above(self):
        assert word_error_rate(["a"], ["x", "y", "z"]) == 3.0


class TestEditDistance:

    @pytest.mark.parametrize("a,b,expected", [
        ("kitten", "sitting", 3),
        ("", "abc", 3),
        ("abc", "", 3),
        ("same", "same", 0),
        (["the", "cat"], ["the", "hat"], 1),
    ])
    def test_distance(self, a, b, expected):
        assert edit_distance(a, b) == expected


def test_wer_breakdown_counts():
    # Act
    breakdown = wer_breakdown(["a", "b", "c"], ["a", "x", "c", "d"])

    # Assert
    assert breakdown.substitutions == 1
    assert breakdown.insertions == 1
    assert breakdown.deletions == 0
    assert breakdown.hits == 2
    assert breakdown.errors == 2
    assert breakdown.wer == pytest.approx(2 / 3)


def test_wer_breakdown_empty():
    breakdown = wer_breakdown([], [])

    assert breakdown.errors == 0
    assert breakdown.wer == 0.0


def test_char_error_rate_ignores_spaces():
    assert char_error_rate("ab cd", "abcd") == 0.0
    assert char_error_rate("abcd", "abce") == 0.25


def test_percentiles():
    pct = compute_percentiles([1.0, 2.0, 3.0, 4.0, 5.0])

    assert pct.p50 == 3.0
    assert pct.p95 == pytest.approx(4.8)


def test_percentiles_empty():
    assert math.isnan(compute_percentiles([]).p50)
