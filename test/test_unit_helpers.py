# Test type: Unit Test
# Validation to be executed: Validates helper utility functions: currency
#   rounding, clamping, finite-number checks and formatting.
# Command: pytest test/test_unit_helpers.py -v

"""Unit tests for bonustax.utils.helpers module."""

import math

import pytest

from bonustax.utils.helpers import (
    clamp,
    format_duration,
    format_yuan,
    is_finite_number,
    round_currency,
)


# ── Currency rounding ─────────────────────────────────────────────────────

class TestRoundCurrency:
    def test_two_decimals(self):
        assert round_currency(590.736) == 590.74

    def test_exact_value(self):
        assert round_currency(2250.0) == 2250.0

    def test_rounds_down(self):
        assert round_currency(147.684) == 147.68

    def test_custom_decimals(self):
        assert round_currency(12.3456, decimals=1) == 12.3

    @pytest.mark.parametrize(
        "value, expected",
        [(0.125, 0.13), (0.625, 0.63), (2.5, 2.5), (7_391 * 0.005, 36.96)],
    )
    def test_halves_round_up(self, value, expected):
        """Exact half-cent ties go up, never to the even digit."""
        assert round_currency(value) == expected

    def test_negative_half_rounds_toward_positive(self):
        assert round_currency(-0.125) == -0.12


# ── Clamp ─────────────────────────────────────────────────────────────────

class TestClamp:
    def test_inside_band(self):
        assert clamp(10_000, 7_384.2, 36_921) == 10_000

    def test_below_floor(self):
        assert clamp(3_000, 7_384.2, 36_921) == 7_384.2

    def test_above_cap(self):
        assert clamp(100_000, 7_384.2, 36_921) == 36_921

    def test_on_boundaries(self):
        assert clamp(7_384.2, 7_384.2, 36_921) == 7_384.2
        assert clamp(36_921, 7_384.2, 36_921) == 36_921


# ── Finite-number check ───────────────────────────────────────────────────

class TestIsFiniteNumber:
    @pytest.mark.parametrize("value", [0, 1, -3.5, 1e9])
    def test_finite(self, value):
        assert is_finite_number(value)

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite(self, value):
        assert not is_finite_number(value)

    @pytest.mark.parametrize("value", [None, "100", True])
    def test_not_a_number(self, value):
        assert not is_finite_number(value)


# ── Formatting ────────────────────────────────────────────────────────────

class TestFormatting:
    def test_format_yuan(self):
        assert format_yuan(947.5) == "947.50"
        assert format_yuan(0) == "0.00"

    def test_format_duration(self):
        assert format_duration(3_723_004) == "01:02:03.004"

    def test_format_duration_sub_second(self):
        assert format_duration(12.7) == "00:00:00.012"
