"""Annual tax for one bonus disbursement strategy.

    January (bonus_month=1): 13 withholding cycles, bonus taxed alone.
    April   (bonus_month=4): 12 withholding cycles, bonus + that month's salary
                             taxed separately.

total tax = Σ monthly withholding + bonus tax
"""

from __future__ import annotations

import logging
from typing import Dict, Union

from bonustax.models.schemas import CityId, YearTaxResult
from bonustax.services.bonus_service import calculate_bonus_tax
from bonustax.services.insurance_service import calculate_total_payment
from bonustax.services.withholding_service import withholding_schedule

logger = logging.getLogger(__name__)

# bonus month → number of withholding cycles in the horizon
_MONTH_COUNTS: Dict[int, int] = {1: 13, 4: 12}


def _month_count(bonus_month: int) -> int:
    try:
        return _MONTH_COUNTS[bonus_month]
    except KeyError:
        raise ValueError(
            f"Unsupported bonus month: {bonus_month!r}. Expected 1 or 4."
        ) from None


def _taxed_bonus(monthly_salary: float, bonus_amount: float, bonus_month: int) -> float:
    """Amount handed to the separate bonus calculation."""
    if bonus_amount <= 0:
        return 0.0
    if bonus_month == 4:
        return bonus_amount + monthly_salary
    return bonus_amount


def calculate_year_tax_detail(
    monthly_salary: float,
    monthly_deduction: float,
    bonus_amount: float,
    city_id: Union[CityId, str],
    bonus_month: int,
) -> dict:
    """Run one strategy and keep the intermediate figures.

    Returns dict with keys: result (YearTaxResult), insurance
    (PaymentBreakdown), schedule (tuple of WithholdingMonth).
    """
    month_count = _month_count(bonus_month)

    insurance = calculate_total_payment(monthly_salary, city_id)
    deduction = monthly_deduction + insurance.totalPayment

    schedule = withholding_schedule(monthly_salary, deduction, month_count)
    monthly_taxes = tuple(row.tax for row in schedule)

    bonus_tax = calculate_bonus_tax(_taxed_bonus(monthly_salary, bonus_amount, bonus_month))

    total_tax = 0.0
    for tax in monthly_taxes:
        total_tax += tax
    total_tax += bonus_tax

    logger.debug(
        "Year tax: month=%s cycles=%s insurance=%.2f bonus_tax=%.2f total=%.2f",
        bonus_month, month_count, insurance.totalPayment, bonus_tax, total_tax,
    )

    return {
        "result": YearTaxResult(
            totalTax=total_tax,
            monthlyTaxes=monthly_taxes,
            bonusTax=bonus_tax,
        ),
        "insurance": insurance,
        "schedule": schedule,
    }


def calculate_year_tax(
    monthly_salary: float,
    monthly_deduction: float,
    bonus_amount: float,
    city_id: Union[CityId, str],
    bonus_month: int,
) -> YearTaxResult:
    """Total annual tax, monthly withholding and bonus tax for one strategy."""
    return calculate_year_tax_detail(
        monthly_salary, monthly_deduction, bonus_amount, city_id, bonus_month
    )["result"]
