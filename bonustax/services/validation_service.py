"""Field-level validation of user input before it reaches the tax engine.

Checks performed:
  • monthlySalary    present, finite, > 0 and ≤ MAX_MONTHLY_SALARY
  • monthlyDeduction present, finite, ≥ 0 and ≤ monthlySalary
  • bonusAmount      present, finite, ≥ 0

Returns a mapping of field name → message; an empty mapping means the input
is safe to hand to the core.
"""

from __future__ import annotations

from typing import Dict, Optional

from bonustax.config import settings
from bonustax.utils.helpers import is_finite_number

INVALID_NUMBER = "数值无效"


def _check_salary(value: Optional[float]) -> Optional[str]:
    if value is None:
        return "请输入月薪"
    if not is_finite_number(value):
        return INVALID_NUMBER
    if value <= 0:
        return "月薪必须大于0"
    if value > settings.MAX_MONTHLY_SALARY:
        return "月薪似乎太高了"
    return None


def _check_deduction(value: Optional[float], salary: Optional[float]) -> Optional[str]:
    if value is None:
        return "请输入每月抵扣额度"
    if not is_finite_number(value):
        return INVALID_NUMBER
    if value < 0:
        return "抵扣额度不能为负数"
    if is_finite_number(salary) and value > salary:
        return "抵扣额度不能大于月薪"
    return None


def _check_bonus(value: Optional[float]) -> Optional[str]:
    if value is None:
        return "请输入年终奖金额"
    if not is_finite_number(value):
        return INVALID_NUMBER
    if value < 0:
        return "年终奖不能为负数"
    return None


def validate_bonus_inputs(
    monthly_salary: Optional[float],
    monthly_deduction: Optional[float],
    bonus_amount: Optional[float],
) -> Dict[str, str]:
    """Collect one message per invalid field."""
    checks = {
        "monthlySalary": _check_salary(monthly_salary),
        "monthlyDeduction": _check_deduction(monthly_deduction, monthly_salary),
        "bonusAmount": _check_bonus(bonus_amount),
    }
    return {field: message for field, message in checks.items() if message is not None}
