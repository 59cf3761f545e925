"""Heuristic outs and equity used for teaching.

The tables are deliberately rounded classroom numbers (flush draw ~9 outs,
Rule of 4) rather than exact card-removal counts.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from ..core.models import DrawCategory, HandCategory

__all__ = [
    "CALL_MARGIN_PCT",
    "DRAW_OUTS",
    "IMPROVEMENT_OUTS",
    "RULE_OF_FOUR",
    "approx_equity_from_outs",
    "draw_outs",
    "improvement_outs",
    "pot_odds_pct",
]

RULE_OF_FOUR = 4
CALL_MARGIN_PCT = 2

DRAW_OUTS: Mapping[DrawCategory, int] = MappingProxyType(
    {
        DrawCategory.COMBO: 15,
        DrawCategory.FLUSH_DRAW: 9,
        DrawCategory.OPEN_ENDED: 8,
        DrawCategory.GUTSHOT: 4,
        DrawCategory.NONE: 0,
    }
)

# Cards that push an already-made hand up a tier.
IMPROVEMENT_OUTS: Mapping[HandCategory, int] = MappingProxyType(
    {
        HandCategory.HIGH_CARD: 6,  # pair either hole card (3 each)
        HandCategory.ONE_PAIR: 5,  # 2 for trips + ~3 for two pair
        HandCategory.TWO_PAIR: 4,  # 2+2 remaining rank cards -> full house
        HandCategory.THREE_OF_A_KIND: 7,  # 1 for quads + ~6 full house outs
        HandCategory.STRAIGHT: 0,
        HandCategory.FLUSH: 0,
        HandCategory.FULL_HOUSE: 1,  # last card of the trips rank
        HandCategory.FOUR_OF_A_KIND: 0,
        HandCategory.STRAIGHT_FLUSH: 0,
    }
)


def draw_outs(draw: DrawCategory) -> int:
    return DRAW_OUTS[draw]


def improvement_outs(best_hand: HandCategory) -> int:
    return IMPROVEMENT_OUTS[best_hand]


def approx_equity_from_outs(outs: int) -> int:
    """Rule of 4: flop outs x 4 approximates equity by the river, capped at 100%."""

    if outs < 0:
        raise ValueError("outs must be non-negative")
    return min(100, outs * RULE_OF_FOUR)


def pot_odds_pct(pot: float, call: float) -> float:
    """Price of a call as a share of the final pot: call / (pot + call) x 100."""

    if pot < 0 or call < 0:
        raise ValueError("pot and call must be non-negative")
    if call == 0:
        return 0.0
    return call / (pot + call) * 100.0
