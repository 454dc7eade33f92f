"""Routers for insurance endpoints:
    POST  /bonus-tax/v1/insurance:payment
    GET   /bonus-tax/v1/cities
"""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, HTTPException

from bonustax.models.schemas import CityInfo, InsuranceRequest, PaymentBreakdown
from bonustax.services.insurance_service import calculate_total_payment, list_city_profiles

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/bonus-tax/v1",
    tags=["Insurance"],
)


@router.post(
    "/insurance:payment",
    response_model=PaymentBreakdown,
    summary="Monthly social insurance and housing fund contributions",
)
async def insurance_payment(body: InsuranceRequest) -> PaymentBreakdown:
    """Pension, medical, unemployment and housing-fund contributions for a
    salary in the given city, with bases clamped to the city's band.
    """
    try:
        return calculate_total_payment(body.monthlySalary, body.cityId)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))


@router.get(
    "/cities",
    response_model=List[CityInfo],
    summary="Supported cities and their contribution profiles",
)
async def cities() -> List[CityInfo]:
    return [
        CityInfo(
            id=profile.id,
            name=profile.display_name,
            averageSalary=profile.average_salary,
            pensionRate=profile.pension_rate,
            medicalRate=profile.medical_rate,
            unemploymentRate=profile.unemployment_rate,
            housingFundRate=profile.housing_fund_rate,
        )
        for profile in list_city_profiles()
    ]
