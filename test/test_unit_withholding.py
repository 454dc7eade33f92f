# Test type: Unit Test
# Validation to be executed: Validates cumulative withholding: accumulation of
#   income, threshold and deductions month over month, bracket transitions, and
#   the zero-tax case.
# Command: pytest test/test_unit_withholding.py -v

"""Unit tests for bonustax.services.withholding_service module."""

import pytest

from bonustax.services.withholding_service import cumulative_tax, withholding_schedule


def _monthly_taxes(monthly_salary, monthly_deduction, month_count):
    return [row.tax for row in withholding_schedule(monthly_salary, monthly_deduction, month_count)]


class TestCumulativeTax:
    def test_zero(self):
        assert cumulative_tax(0) == 0.0

    def test_negative(self):
        assert cumulative_tax(-12_000) == 0.0

    def test_first_bracket(self):
        assert cumulative_tax(15_000) == pytest.approx(450)

    def test_second_bracket(self):
        """45,000 × 10 % − 2,520 = 1,980."""
        assert cumulative_tax(45_000) == pytest.approx(1_980)

    def test_third_bracket(self):
        """180,000 × 20 % − 16,920 = 19,080."""
        assert cumulative_tax(180_000) == pytest.approx(19_080)


class TestWithholdingSchedule:
    def test_row_count(self):
        assert len(withholding_schedule(10_000, 0, 13)) == 13
        assert len(withholding_schedule(10_000, 0, 12)) == 12

    def test_accumulation(self):
        """Income, threshold and deduction all grow linearly with the month."""
        rows = withholding_schedule(20_000, 1_500, 3)
        third = rows[2]
        assert third.month == 3
        assert third.accumulatedIncome == 60_000
        assert third.accumulatedDeduction == 3 * (1_500 + 5_000)
        assert third.taxableIncome == 60_000 - 19_500

    def test_bracket_transition(self):
        """¥15,000 taxable per month crosses 36,000 in month 3."""
        taxes = _monthly_taxes(20_000, 0, 4)
        assert taxes == pytest.approx([450, 450, 1_080, 1_500])

    def test_sum_equals_final_cumulative_tax(self):
        rows = withholding_schedule(20_000, 0, 12)
        assert sum(row.tax for row in rows) == pytest.approx(rows[-1].cumulativeTax)
        assert rows[-1].cumulativeTax == pytest.approx(19_080)

    def test_below_threshold_is_zero(self):
        """Salary equal to the threshold leaves nothing taxable."""
        assert _monthly_taxes(5_000, 0, 12) == [0.0] * 12

    def test_deduction_exceeding_income(self):
        rows = withholding_schedule(8_000, 4_000, 12)
        assert all(row.taxableIncome < 0 for row in rows)
        assert all(row.tax == 0.0 for row in rows)

    def test_withheld_amounts_never_negative_for_constant_salary(self):
        taxes = _monthly_taxes(80_000, 2_000, 13)
        assert all(tax >= 0 for tax in taxes)

    def test_schedule_cannot_be_extended(self):
        rows = withholding_schedule(10_000, 0, 12)
        with pytest.raises(AttributeError):
            rows.append(rows[0])
        assert len(rows) == 12

    def test_invalid_month_count(self):
        with pytest.raises(ValueError, match="month_count"):
            withholding_schedule(10_000, 0, 0)
