from __future__ import annotations

import math

__all__ = ["fmt_money", "fmt_pct", "round_half_up", "round_to_step"]


def round_half_up(value: float, digits: int = 0) -> float:
    """Round like a calculator does (halves go up), not banker's rounding."""

    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


def round_to_step(value: float, step: float) -> float:
    if step <= 0:
        raise ValueError("step must be positive")
    return math.floor(value / step + 0.5) * step


def fmt_pct(value: float) -> str:
    # 25.0 -> "25%", 16.7 -> "16.7%"
    if float(value).is_integer():
        return f"{value:.0f}%"
    return f"{value:g}%"


def fmt_money(amount: float) -> str:
    if float(amount).is_integer():
        return f"${amount:.0f}"
    return f"${amount:.2f}"
