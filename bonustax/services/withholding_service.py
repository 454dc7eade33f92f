"""Cumulative withholding of salary income tax (累计预扣法).

For month m = 1 … N:

    accumulated income     = salary × m
    accumulated deduction  = (monthly deduction + threshold) × m
    taxable                = accumulated income − accumulated deduction
    cumulative tax         = taxable × rate − quick deduction   (annual table)
    tax withheld in m      = cumulative tax(m) − cumulative tax(m − 1)

Because threshold and deductions accumulate with elapsed months, the rate
applied in later months reflects the income earned so far in the year rather
than a single month in isolation.
"""

from __future__ import annotations

from typing import Tuple

from bonustax.config import settings
from bonustax.models.schemas import WithholdingMonth
from bonustax.services.bracket_service import ANNUAL_BRACKETS, apply_bracket, find_bracket


def cumulative_tax(taxable_income: float) -> float:
    """Tax due on cumulative taxable income; zero when nothing is taxable."""
    bracket = find_bracket(ANNUAL_BRACKETS, taxable_income)
    if bracket is None:
        return 0.0
    return apply_bracket(taxable_income, bracket)


def withholding_schedule(
    monthly_salary: float,
    monthly_deduction: float,
    month_count: int,
) -> Tuple[WithholdingMonth, ...]:
    """Month-by-month withholding rows.

    *monthly_deduction* already includes mandatory insurance; the statutory
    threshold is added here.  The monthly difference is taken literally and
    is never clamped at zero.
    """
    if month_count < 1:
        raise ValueError(f"month_count must be at least 1, got {month_count}")

    rows: list[WithholdingMonth] = []
    accumulated_income = 0.0
    previous_tax = 0.0

    for month in range(1, month_count + 1):
        accumulated_income += monthly_salary
        accumulated_deduction = (
            monthly_deduction * month + settings.MONTHLY_THRESHOLD * month
        )
        taxable = accumulated_income - accumulated_deduction
        current_tax = cumulative_tax(taxable)

        rows.append(
            WithholdingMonth(
                month=month,
                accumulatedIncome=accumulated_income,
                accumulatedDeduction=accumulated_deduction,
                taxableIncome=taxable,
                cumulativeTax=current_tax,
                tax=current_tax - previous_tax,
            )
        )
        previous_tax = current_tax

    return tuple(rows)

