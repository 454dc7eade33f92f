"""Routers for bonus tax endpoints:
    POST  /bonus-tax/v1/bonus:compare
    POST  /bonus-tax/v1/bonus:year
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from bonustax.models.schemas import (
    BonusRequest,
    CompareResponse,
    YearTaxRequest,
    YearTaxResponse,
)
from bonustax.services.comparison_service import build_summary, compare_bonus
from bonustax.services.validation_service import validate_bonus_inputs
from bonustax.services.year_tax_service import calculate_year_tax_detail

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/bonus-tax/v1",
    tags=["Bonus"],
)


def _require_valid(body: BonusRequest) -> None:
    """Reject the request with field-level messages if any input is invalid."""
    errors = validate_bonus_inputs(
        body.monthlySalary, body.monthlyDeduction, body.bonusAmount
    )
    if errors:
        logger.info("Rejected bonus request: %s", errors)
        raise HTTPException(status_code=422, detail={"errors": errors})


# ── 1. January vs. April comparison ──────────────────────────────────────

@router.post(
    "/bonus:compare",
    response_model=CompareResponse,
    summary="Compare January and April bonus disbursement",
)
async def bonus_compare(body: BonusRequest) -> CompareResponse:
    """Compute total annual tax for both disbursement months and recommend
    the cheaper one (ties favor January).
    """
    _require_valid(body)

    try:
        result = compare_bonus(
            monthly_salary=body.monthlySalary,
            monthly_deduction=body.monthlyDeduction,
            bonus_amount=body.bonusAmount,
            city_id=body.cityId,
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))

    return CompareResponse(**result.model_dump(), summary=build_summary(result))


# ── 2. Single-strategy detail ────────────────────────────────────────────

@router.post(
    "/bonus:year",
    response_model=YearTaxResponse,
    summary="Annual tax for one disbursement month, with monthly schedule",
)
async def bonus_year(body: YearTaxRequest) -> YearTaxResponse:
    """Return total tax, per-month withholding, bonus tax, the insurance
    breakdown and the cumulative withholding schedule for one strategy.
    """
    _require_valid(body)

    try:
        detail = calculate_year_tax_detail(
            monthly_salary=body.monthlySalary,
            monthly_deduction=body.monthlyDeduction,
            bonus_amount=body.bonusAmount,
            city_id=body.cityId,
            bonus_month=body.bonusMonth,
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))

    return YearTaxResponse(
        **detail["result"].model_dump(),
        bonusMonth=body.bonusMonth,
        insurance=detail["insurance"],
        schedule=detail["schedule"],
    )
