"""Shared utility functions: rounding, clamping, formatting."""

from __future__ import annotations

import math

from bonustax.config import settings


# ── Financial helpers ─────────────────────────────────────────────────────

def round_currency(value: float, decimals: int = settings.CURRENCY_DECIMALS) -> float:
    """Round to *decimals* places, halves upward (36.955 → 36.96).

    Scales, adds one half and floors, so a product such as 7,391 × 0.005 is
    rounded the same way payroll systems using ``Math.round(x * 100) / 100``
    round it.  ``round()`` would send such ties to the even digit.
    """
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor


def clamp(value: float, lower: float, upper: float) -> float:
    """Limit *value* to the closed interval [lower, upper]."""
    if value < lower:
        return lower
    if value > upper:
        return upper
    return value


def is_finite_number(value: object) -> bool:
    """True for real numbers that are neither NaN nor infinite."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


# ── Formatting ────────────────────────────────────────────────────────────

def format_yuan(amount: float) -> str:
    """Render an amount with two decimals, e.g. ``947.50``."""
    return f"{amount:.2f}"


def format_duration(total_ms: float) -> str:
    """Format milliseconds into HH:mm:ss.SSS."""
    total_seconds = int(total_ms // 1000)
    hours, remainder = divmod(total_seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    millis = int(total_ms % 1000)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}.{millis:03d}"
