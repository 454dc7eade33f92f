"""Pydantic value objects and request / response schemas.

Result models are frozen and hold tuples rather than lists: each computation
builds a fresh result graph and nothing can mutate it afterwards.
"""

from __future__ import annotations
from enum import Enum
from typing import Literal, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field

class CityId(str, Enum):
    """Cities with a known social-insurance profile."""
    BEIJING = "beijing"
    SHANGHAI = "shanghai"
    HEFEI = "hefei"

# ── Insurance ────────────────────────────────────────────────────────────

class ContributionResult(BaseModel):
    """Employee contribution for a single insurance category."""
    model_config = ConfigDict(frozen=True)

    payment: float = Field(..., description="Monthly contribution, rounded to 2 dp")
    base: float = Field(..., description="Contribution base after clamping")
    rate: float = Field(..., description="Employee contribution rate")

class PaymentBreakdown(BaseModel):
    """Social insurance + housing fund contributions for one month."""
    model_config = ConfigDict(frozen=True)

    totalPayment: float = Field(..., description="Sum of the four payments, rounded to 2 dp")
    pension: ContributionResult
    medical: ContributionResult
    unemployment: ContributionResult
    housingFund: ContributionResult

# ── Withholding & year totals ────────────────────────────────────────────

class WithholdingMonth(BaseModel):
    """One month of the cumulative withholding schedule."""
    model_config = ConfigDict(frozen=True)

    month: int
    accumulatedIncome: float
    accumulatedDeduction: float
    taxableIncome: float = Field(..., description="May be negative; no tax is due then")
    cumulativeTax: float = Field(..., description="Tax liability to date")
    tax: float = Field(..., description="Tax withheld this month")

class YearTaxResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    totalTax: float
    monthlyTaxes: Tuple[float, ...]
    bonusTax: float

class ComparisonResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    januaryTax: float = Field(..., description="Total tax when the bonus is paid in January")
    aprilTax: float = Field(..., description="Total tax when the bonus is paid in April")
    recommendation: Literal["1月", "4月"]
    taxDifference: float = Field(..., description="|januaryTax − aprilTax|")

# ── 1. Bonus comparison  (/bonus:compare) ────────────────────────────────

class BonusRequest(BaseModel):
    """Raw user input; missing values are reported by the input validator."""
    monthlySalary: Optional[float] = Field(None, description="Gross monthly salary (CNY)")
    monthlyDeduction: Optional[float] = Field(None, description="Monthly special additional deductions")
    bonusAmount: Optional[float] = Field(None, description="Year-end bonus (CNY)")
    cityId: CityId = Field(CityId.SHANGHAI, description="City whose insurance profile applies")

class CompareResponse(ComparisonResult):
    summary: str = Field(..., description="Human-readable recommendation")

# ── 2. Single strategy  (/bonus:year) ────────────────────────────────────

class YearTaxRequest(BonusRequest):
    bonusMonth: Literal[1, 4] = Field(..., description="Disbursement month: 1 (January) or 4 (April)")

class YearTaxResponse(YearTaxResult):
    bonusMonth: int
    insurance: PaymentBreakdown
    schedule: Tuple[WithholdingMonth, ...]

# ── 3. Insurance  (/insurance:payment, /cities) ──────────────────────────

class InsuranceRequest(BaseModel):
    monthlySalary: float = Field(..., gt=0, description="Gross monthly salary (CNY)")
    cityId: CityId

class CityInfo(BaseModel):
    id: CityId
    name: str
    averageSalary: float
    pensionRate: float
    medicalRate: float
    unemploymentRate: float
    housingFundRate: float

# ── 4. Performance Report  (/performance) ────────────────────────────────

class PerformanceResponse(BaseModel):
    uptime: str = Field(..., description="Time since startup (HH:mm:ss.SSS)")
    lastResponseTime: str = Field(..., description="Duration of the previous request (HH:mm:ss.SSS)")
    requests: int = Field(..., description="Requests served since startup")
    memory: str = Field(..., description="Current memory usage (e.g. '123.45 MB')")
    threads: int = Field(..., description="Number of active threads")
