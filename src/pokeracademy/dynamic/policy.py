"""Fold / call / raise recommendation for a flop spot.

Rules are evaluated in order and the first match wins:

1. A strong made hand (two pair or better) raises for value.
2. A 15+ out draw raises as a semi-bluff.
3. Rule-of-4 equity plus a small calling margin at or above the price calls.
4. Everything else folds.
"""

from __future__ import annotations

from ..core.formatting import round_half_up
from ..core.models import Action, HandCategory
from .equity import CALL_MARGIN_PCT, approx_equity_from_outs

__all__ = ["BIG_DRAW_OUTS", "STRONG_MADE_HANDS", "decision_why", "is_strong_made", "recommend_decision"]

BIG_DRAW_OUTS = 15

STRONG_MADE_HANDS = frozenset(
    {
        HandCategory.TWO_PAIR,
        HandCategory.THREE_OF_A_KIND,
        HandCategory.STRAIGHT,
        HandCategory.FLUSH,
        HandCategory.FULL_HOUSE,
        HandCategory.FOUR_OF_A_KIND,
        HandCategory.STRAIGHT_FLUSH,
    }
)


def is_strong_made(best_hand: HandCategory) -> bool:
    return best_hand in STRONG_MADE_HANDS


def recommend_decision(best_hand: HandCategory, outs: int, required_pct: float) -> Action:
    if is_strong_made(best_hand):
        return Action.RAISE
    if outs >= BIG_DRAW_OUTS:
        return Action.RAISE
    if approx_equity_from_outs(outs) + CALL_MARGIN_PCT >= required_pct:
        return Action.CALL
    return Action.FOLD


def decision_why(
    decision: Action,
    best_hand: HandCategory,
    outs: int,
    equity: float,
    pot_odds: float,
) -> str:
    """One plain-language line explaining ``decision``."""

    price = f"{round_half_up(pot_odds):.0f}"
    if decision is Action.RAISE:
        strong = is_strong_made(best_hand)
        if strong and outs >= BIG_DRAW_OUTS:
            return "Strong hand + big draw: raise for value and charge opponents."
        if strong:
            return f"Strong made hand ({best_hand}): raise for value and protect equity."
        return f"Massive draw ({outs} outs ≈ {equity:.0f}% equity): raise to build the pot."
    if decision is Action.CALL:
        return f"Your equity (~{equity:.0f}%) beats the price (~{price}%): calling is profitable."
    return f"Your equity (~{equity:.0f}%) is below the price (~{price}%): too expensive to draw."
