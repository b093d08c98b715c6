"""Tests for normalize_score — round half-up, then clamp into [0, 100]."""

import math

import pytest

from call_eval.judge.domain.score import MAX_SCORE, MIN_SCORE, normalize_score


class TestNormalizeScoreInRange:
    def test_integer_in_range_is_unchanged(self) -> None:
        assert normalize_score(85) == 85

    def test_boundaries_are_unchanged(self) -> None:
        assert normalize_score(0) == 0
        assert normalize_score(100) == 100

    def test_returns_int(self) -> None:
        assert isinstance(normalize_score(72.4), int)


class TestNormalizeScoreRounding:
    def test_fraction_below_half_rounds_down(self) -> None:
        assert normalize_score(72.4) == 72

    def test_fraction_above_half_rounds_up(self) -> None:
        assert normalize_score(72.6) == 73

    def test_exact_half_rounds_up_not_to_even(self) -> None:
        assert normalize_score(72.5) == 73
        assert normalize_score(71.5) == 72


class TestNormalizeScoreClamping:
    def test_negative_clamps_to_zero(self) -> None:
        assert normalize_score(-15) == MIN_SCORE

    def test_above_hundred_clamps_to_hundred(self) -> None:
        assert normalize_score(140) == MAX_SCORE

    def test_fractional_just_above_hundred_clamps(self) -> None:
        assert normalize_score(100.4) == 100

    def test_fractional_just_below_zero_clamps(self) -> None:
        assert normalize_score(-0.4) == 0

    @pytest.mark.parametrize("raw", [-1000.0, -0.6, 0.49, 33.3, 99.5, 250.75])
    def test_matches_round_of_clamp(self, raw: float) -> None:
        expected = math.floor(min(100.0, max(0.0, raw)) + 0.5)

        assert normalize_score(raw) == expected
        assert MIN_SCORE <= normalize_score(raw) <= MAX_SCORE
