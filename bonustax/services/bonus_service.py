"""Separate taxation of a year-end bonus (全年一次性奖金单独计税).

The bonus is divided by 12 to pick a rate from the monthly-equivalent table,
then the whole bonus is taxed at that rate minus a single quick deduction.
"""

from __future__ import annotations

from bonustax.services.bracket_service import MONTHLY_BRACKETS, apply_bracket, find_bracket


def calculate_bonus_tax(bonus_amount: float) -> float:
    """Tax on *bonus_amount* under the separate-taxation rule."""
    if bonus_amount <= 0:
        return 0.0

    bracket = find_bracket(MONTHLY_BRACKETS, bonus_amount / 12)
    if bracket is None:
        return 0.0
    return apply_bracket(bonus_amount, bracket)
