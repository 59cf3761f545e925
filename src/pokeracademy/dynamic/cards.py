from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TypeVar

RANKS = "23456789TJQKA"
SUITS = "shdc"  # spades, hearts, diamonds, clubs

SUIT_SYMBOLS = {"s": "♠", "h": "♥", "d": "♦", "c": "♣"}

T = TypeVar("T")

__all__ = [
    "RANKS",
    "SUITS",
    "SUIT_SYMBOLS",
    "Card",
    "DeckExhaustedError",
    "build_deck",
    "canonical_hand_abbrev",
    "cards_to_str",
    "deal",
    "format_card_ascii",
    "format_card_symbol",
    "format_cards_spaced",
    "parse_cards",
    "shuffle",
]


class DeckExhaustedError(ValueError):
    """Raised when more cards are requested than the deck still holds."""


@dataclass(frozen=True)
class Card:
    rank: str
    suit: str

    def __post_init__(self) -> None:
        if self.rank not in RANKS or self.suit not in SUITS:
            raise ValueError(f"Bad card: {self.rank!r}{self.suit!r}")

    @property
    def value(self) -> int:
        """Rank index, 0 for a Two up to 12 for an Ace."""

        return RANKS.index(self.rank)

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    @staticmethod
    def from_str(text: str) -> Card:
        token = text.strip()
        if len(token) != 2:
            raise ValueError(f"Bad card string: {text!r}")
        rank, suit = token[0].upper(), token[1].lower()
        if rank not in RANKS or suit not in SUITS:
            raise ValueError(f"Bad card string: {text!r}")
        return Card(rank, suit)


def parse_cards(cards: Iterable[str | Card]) -> list[Card]:
    return [c if isinstance(c, Card) else Card.from_str(c) for c in cards]


def cards_to_str(cards: Iterable[Card]) -> str:
    return " ".join(str(c) for c in cards)


def build_deck() -> list[Card]:
    """Return the 52-card deck in canonical order (suit-major)."""

    return [Card(rank, suit) for suit in SUITS for rank in RANKS]


def shuffle(items: Sequence[T], rng: random.Random) -> list[T]:
    """Return a Fisher-Yates permutation of ``items``; the input is left untouched."""

    out = list(items)
    for i in range(len(out) - 1, 0, -1):
        j = rng.randrange(i + 1)
        out[i], out[j] = out[j], out[i]
    return out


def deal(deck: list[Card], n: int) -> list[Card]:
    """Pop ``n`` cards off the front of ``deck``."""

    if n < 0:
        raise ValueError("cannot deal a negative number of cards")
    if n > len(deck):
        raise DeckExhaustedError(f"requested {n} cards but only {len(deck)} remain")
    dealt = deck[:n]
    del deck[:n]
    return dealt


# --- Formatting helpers for consistent UI ---


def format_card_ascii(card: Card, upper: bool = True) -> str:
    text = str(card)
    return text.upper() if upper else text


def format_card_symbol(card: Card) -> str:
    return f"{card.rank}{SUIT_SYMBOLS[card.suit]}"


def format_cards_spaced(cards: Iterable[Card]) -> str:
    # Highest rank first for a stable look
    ordered = sorted(cards, key=lambda c: c.value, reverse=True)
    return " ".join(format_card_ascii(c, upper=True) for c in ordered)


def canonical_hand_abbrev(cards: Sequence[Card]) -> str:
    # Return like 'A5s', 'KQo', or '55'
    if len(cards) != 2:
        raise ValueError("hand abbreviation needs exactly two cards")
    first, second = cards
    if second.value > first.value:
        first, second = second, first
    if first.rank == second.rank:
        return first.rank + second.rank
    suited = first.suit == second.suit
    return f"{first.rank}{second.rank}{'s' if suited else 'o'}"
