"""Mandatory social-insurance and housing-fund contributions (employee side).

Contribution base = salary clamped to [0.6 × average salary, 3 × average salary]
Payment          = base × category rate, rounded half-up to 2 dp

The monthly total is tax-deductible and is added to the user's own monthly
deduction before cumulative withholding runs.
"""

from __future__ import annotations

from typing import Dict, List, NamedTuple, Union

from bonustax.config import settings
from bonustax.models.schemas import CityId, ContributionResult, PaymentBreakdown
from bonustax.utils.helpers import clamp, round_currency


class CityProfile(NamedTuple):
    id: CityId
    display_name: str
    average_salary: float
    pension_rate: float
    medical_rate: float
    unemployment_rate: float
    housing_fund_rate: float


_CITY_PROFILES: Dict[CityId, CityProfile] = {
    CityId.BEIJING: CityProfile(CityId.BEIJING, "北京", 15_701.0, 0.08, 0.02, 0.005, 0.12),
    CityId.SHANGHAI: CityProfile(CityId.SHANGHAI, "上海", 12_307.0, 0.08, 0.02, 0.005, 0.12),
    CityId.HEFEI: CityProfile(CityId.HEFEI, "合肥", 10_502.0, 0.08, 0.02, 0.005, 0.12),
}

# category name → CityProfile attribute holding its rate
_CATEGORY_RATES: Dict[str, str] = {
    "pension": "pension_rate",
    "medical": "medical_rate",
    "unemployment": "unemployment_rate",
    "housing_fund": "housing_fund_rate",
}

INSURANCE_CATEGORIES = tuple(_CATEGORY_RATES)


def get_city_profile(city_id: Union[CityId, str]) -> CityProfile:
    """Look up a city profile; unknown ids raise ``ValueError``."""
    try:
        return _CITY_PROFILES[CityId(city_id)]
    except ValueError:
        raise ValueError(f"Unknown city id: {city_id!r}") from None


def list_city_profiles() -> List[CityProfile]:
    return list(_CITY_PROFILES.values())


def contribution_base(monthly_salary: float, city_id: Union[CityId, str]) -> float:
    """Salary clamped into the city's contribution band."""
    average = get_city_profile(city_id).average_salary
    return clamp(
        monthly_salary,
        average * settings.INSURANCE_BASE_FLOOR_RATIO,
        average * settings.INSURANCE_BASE_CAP_RATIO,
    )


def calculate_contribution(
    monthly_salary: float,
    city_id: Union[CityId, str],
    category: str,
) -> ContributionResult:
    """Employee contribution for one of ``INSURANCE_CATEGORIES``."""
    if category not in _CATEGORY_RATES:
        raise ValueError(
            f"Unknown insurance category: {category!r}. "
            f"Expected one of {', '.join(INSURANCE_CATEGORIES)}."
        )
    rate = getattr(get_city_profile(city_id), _CATEGORY_RATES[category])
    base = contribution_base(monthly_salary, city_id)
    return ContributionResult(
        payment=round_currency(base * rate),
        base=round_currency(base),
        rate=rate,
    )


def calculate_total_payment(monthly_salary: float, city_id: Union[CityId, str]) -> PaymentBreakdown:
    """All four contributions plus their rounded total."""
    pension = calculate_contribution(monthly_salary, city_id, "pension")
    medical = calculate_contribution(monthly_salary, city_id, "medical")
    unemployment = calculate_contribution(monthly_salary, city_id, "unemployment")
    housing_fund = calculate_contribution(monthly_salary, city_id, "housing_fund")

    return PaymentBreakdown(
        totalPayment=round_currency(
            pension.payment + medical.payment + unemployment.payment + housing_fund.payment
        ),
        pension=pension,
        medical=medical,
        unemployment=unemployment,
        housingFund=housing_fund,
    )
