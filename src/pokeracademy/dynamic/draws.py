from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import combinations
from typing import NamedTuple

from ..core.models import DrawCategory
from .cards import Card
from .evaluator import WHEEL_ACE, count_by_suit, is_made_flush, is_made_straight, rank_values_with_wheel

__all__ = ["StraightDraws", "detect_draw", "has_flush_draw", "straight_draw_flags"]


class StraightDraws(NamedTuple):
    oesd: bool
    gutshot: bool


def has_flush_draw(cards: Iterable[Card]) -> bool:
    counts = count_by_suit(cards)
    return bool(counts) and max(counts.values()) == 4


def straight_draw_flags(cards: Iterable[Card]) -> StraightDraws:
    """Scan every 4-rank window of the distinct ranks (low Ace included).

    Inside a window the low Ace is measured as a Two, so A-3-4-5 and A-2-3-5
    both span 3 while A-2-3-4 spans only 2. Span 3 sets the open-ended flag;
    span 4 with a single interior hole is a gutshot. Both flags can be set by
    different windows.
    """

    oesd = False
    gutshot = False
    for window in combinations(rank_values_with_wheel(cards), 4):
        measured = sorted(0 if v == WHEEL_ACE else v for v in window)
        low, high = measured[0], measured[-1]
        span = high - low
        if span == 3:
            oesd = True
        elif span == 4:
            missing = set(range(low, high + 1)) - set(measured)
            if len(missing) == 1:
                gutshot = True
    return StraightDraws(oesd=oesd, gutshot=gutshot)


def detect_draw(hole: Sequence[Card], flop: Sequence[Card]) -> DrawCategory:
    cards = [*hole, *flop]
    # Made hands don't get draw framing.
    if is_made_flush(cards) or is_made_straight(cards):
        return DrawCategory.NONE

    flush_draw = has_flush_draw(cards)
    straights = straight_draw_flags(cards)

    if flush_draw and straights.oesd:
        return DrawCategory.COMBO
    if flush_draw:
        return DrawCategory.FLUSH_DRAW
    if straights.oesd:
        return DrawCategory.OPEN_ENDED
    if straights.gutshot:
        return DrawCategory.GUTSHOT
    return DrawCategory.NONE
