"""Made-hand classification for trainer spots.

The classifier only labels the category of the best hand; it never compares
two hands, so there is no kicker logic. It works on rank/suit multiplicities
and straight runs, which keeps it valid for any card count of five or more.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from typing import NamedTuple

from ..core.models import HandCategory
from .cards import Card

__all__ = [
    "RankMultiplicities",
    "classify_hand",
    "count_by_rank",
    "count_by_suit",
    "is_made_flush",
    "is_made_straight",
    "rank_multiplicities",
    "rank_values_with_wheel",
]

ACE = 12
WHEEL_ACE = -1


class RankMultiplicities(NamedTuple):
    pairs: int
    trips: int
    quads: int


def count_by_rank(cards: Iterable[Card]) -> Counter[str]:
    return Counter(c.rank for c in cards)


def count_by_suit(cards: Iterable[Card]) -> Counter[str]:
    return Counter(c.suit for c in cards)


def rank_multiplicities(cards: Iterable[Card]) -> RankMultiplicities:
    counts = list(count_by_rank(cards).values())
    return RankMultiplicities(
        pairs=counts.count(2),
        trips=counts.count(3),
        quads=counts.count(4),
    )


def rank_values_with_wheel(cards: Iterable[Card]) -> list[int]:
    """Sorted distinct rank values, with a low Ace (-1) added when an Ace is present."""

    values = {c.value for c in cards}
    if ACE in values:
        values.add(WHEEL_ACE)
    return sorted(values)


def _has_run_of_five(values: list[int]) -> bool:
    run = 1
    for prev, cur in zip(values, values[1:]):
        if cur == prev + 1:
            run += 1
            if run >= 5:
                return True
        else:
            run = 1
    return False


def is_made_flush(cards: Iterable[Card]) -> bool:
    return any(n >= 5 for n in count_by_suit(cards).values())


def is_made_straight(cards: Iterable[Card]) -> bool:
    return _has_run_of_five(rank_values_with_wheel(cards))


def _is_straight_flush(cards: list[Card]) -> bool:
    for suit, n in count_by_suit(cards).items():
        if n >= 5 and is_made_straight(c for c in cards if c.suit == suit):
            return True
    return False


def classify_hand(cards: Iterable[Card]) -> HandCategory:
    hand = list(cards)
    if len(hand) < 5:
        raise ValueError(f"need at least 5 cards to classify a hand, got {len(hand)}")

    pairs, trips, quads = rank_multiplicities(hand)
    made_flush = is_made_flush(hand)
    made_straight = is_made_straight(hand)

    if made_flush and made_straight and _is_straight_flush(hand):
        return HandCategory.STRAIGHT_FLUSH
    if quads:
        return HandCategory.FOUR_OF_A_KIND
    # A second set of trips also supplies the pair.
    if trips and (pairs or trips >= 2):
        return HandCategory.FULL_HOUSE
    if made_flush:
        return HandCategory.FLUSH
    if made_straight:
        return HandCategory.STRAIGHT
    if trips:
        return HandCategory.THREE_OF_A_KIND
    if pairs >= 2:
        return HandCategory.TWO_PAIR
    if pairs == 1:
        return HandCategory.ONE_PAIR
    return HandCategory.HIGH_CARD
