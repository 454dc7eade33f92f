"""January vs. April bonus disbursement comparison."""

from __future__ import annotations

import logging
from typing import Union

from bonustax.models.schemas import CityId, ComparisonResult
from bonustax.services.year_tax_service import calculate_year_tax
from bonustax.utils.helpers import format_yuan

logger = logging.getLogger(__name__)

JANUARY = "1月"
APRIL = "4月"


def compare_bonus(
    monthly_salary: float,
    monthly_deduction: float,
    bonus_amount: float,
    city_id: Union[CityId, str],
) -> ComparisonResult:
    """Compute both strategies and recommend the cheaper one.

    Ties go to January.
    """
    january = calculate_year_tax(monthly_salary, monthly_deduction, bonus_amount, city_id, 1)
    april = calculate_year_tax(monthly_salary, monthly_deduction, bonus_amount, city_id, 4)

    recommendation = JANUARY if january.totalTax <= april.totalTax else APRIL
    result = ComparisonResult(
        januaryTax=january.totalTax,
        aprilTax=april.totalTax,
        recommendation=recommendation,
        taxDifference=abs(january.totalTax - april.totalTax),
    )

    logger.debug(
        "Bonus comparison (%s): jan=%.2f apr=%.2f → %s",
        city_id, result.januaryTax, result.aprilTax, recommendation,
    )
    return result


def build_summary(result: ComparisonResult) -> str:
    """Recommendation text shown to the user."""
    return (
        f"建议在{result.recommendation}领取，可以少缴纳个税 {format_yuan(result.taxDifference)} 元。\n"
        f"1月领取总税额：{format_yuan(result.januaryTax)} 元\n"
        f"4月领取总税额：{format_yuan(result.aprilTax)} 元"
    )
