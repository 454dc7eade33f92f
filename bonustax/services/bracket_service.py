"""Progressive income-tax bracket tables (2022 schedule).

Annual comprehensive income (used for cumulative withholding):
    ¥0 – ¥36,000          → 3 %   quick deduction ¥0
    ¥36,000 – ¥144,000    → 10 %  quick deduction ¥2,520
    ¥144,000 – ¥300,000   → 20 %  quick deduction ¥16,920
    ¥300,000 – ¥420,000   → 25 %  quick deduction ¥31,920
    ¥420,000 – ¥660,000   → 30 %  quick deduction ¥52,920
    ¥660,000 – ¥960,000   → 35 %  quick deduction ¥85,920
    Above ¥960,000         → 45 %  quick deduction ¥181,920

The monthly-equivalent table has the same rates with thresholds divided by
12 and is used only for separately taxed year-end bonuses.

Brackets are left-open, right-closed: ¥36,000 falls in the 3 % bracket.
"""

from __future__ import annotations

from typing import NamedTuple, Optional, Tuple


class TaxBracket(NamedTuple):
    lower: float            # exclusive
    upper: float            # inclusive
    rate: float
    quick_deduction: float


_INF = float("inf")

ANNUAL_BRACKETS: Tuple[TaxBracket, ...] = (
    TaxBracket(0.0,       36_000.0,  0.03, 0.0),
    TaxBracket(36_000.0,  144_000.0, 0.10, 2_520.0),
    TaxBracket(144_000.0, 300_000.0, 0.20, 16_920.0),
    TaxBracket(300_000.0, 420_000.0, 0.25, 31_920.0),
    TaxBracket(420_000.0, 660_000.0, 0.30, 52_920.0),
    TaxBracket(660_000.0, 960_000.0, 0.35, 85_920.0),
    TaxBracket(960_000.0, _INF,      0.45, 181_920.0),
)

MONTHLY_BRACKETS: Tuple[TaxBracket, ...] = (
    TaxBracket(0.0,      3_000.0,  0.03, 0.0),
    TaxBracket(3_000.0,  12_000.0, 0.10, 210.0),
    TaxBracket(12_000.0, 25_000.0, 0.20, 1_410.0),
    TaxBracket(25_000.0, 35_000.0, 0.25, 2_660.0),
    TaxBracket(35_000.0, 55_000.0, 0.30, 4_410.0),
    TaxBracket(55_000.0, 80_000.0, 0.35, 7_160.0),
    TaxBracket(80_000.0, _INF,     0.45, 15_160.0),
)


def find_bracket(table: Tuple[TaxBracket, ...], amount: float) -> Optional[TaxBracket]:
    """Return the bracket with ``lower < amount <= upper``.

    Non-positive amounts (and NaN) match nothing and yield ``None``;
    callers treat that as zero tax.
    """
    for bracket in table:
        if bracket.lower < amount <= bracket.upper:
            return bracket
    return None


def apply_bracket(amount: float, bracket: TaxBracket) -> float:
    """Quick-deduction formula: amount × rate − quick deduction."""
    return amount * bracket.rate - bracket.quick_deduction
