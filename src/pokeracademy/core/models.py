from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..dynamic.cards import Card


class HandCategory(str, Enum):
    # Declaration order is strength order (weakest first).
    HIGH_CARD = "High Card"
    ONE_PAIR = "One Pair"
    TWO_PAIR = "Two Pair"
    THREE_OF_A_KIND = "Three of a Kind"
    STRAIGHT = "Straight"
    FLUSH = "Flush"
    FULL_HOUSE = "Full House"
    FOUR_OF_A_KIND = "Four of a Kind"
    STRAIGHT_FLUSH = "Straight Flush"

    @property
    def strength(self) -> int:
        return list(HandCategory).index(self)

    def __str__(self) -> str:
        return self.value


class DrawCategory(str, Enum):
    NONE = "None"
    FLUSH_DRAW = "Flush Draw"
    OPEN_ENDED = "Open-Ended Straight Draw"
    GUTSHOT = "Gutshot Straight Draw"
    COMBO = "Combo Draw (Flush + Straight)"

    def __str__(self) -> str:
        return self.value


class Action(str, Enum):
    FOLD = "Fold"
    CALL = "Call"
    RAISE = "Raise"

    def __str__(self) -> str:
        return self.value


class Mode(str, Enum):
    """Practice mode; controls which parts of a spot the learner answers."""

    HAND_RECOGNITION = "hand"
    OUTS_PRACTICE = "outs"
    DECISION_LAB = "decision"

    @property
    def label(self) -> str:
        return _MODE_LABELS[self]

    def __str__(self) -> str:
        return self.value


_MODE_LABELS = {
    Mode.HAND_RECOGNITION: "Hand Recognition",
    Mode.OUTS_PRACTICE: "Outs Practice",
    Mode.DECISION_LAB: "Decision Lab",
}


@dataclass(frozen=True)
class EvalResult:
    best_hand: HandCategory
    draw: DrawCategory
    outs: int  # draw outs (flush/straight)
    improvement_outs: int  # outs that upgrade an already-made hand

    @property
    def total_outs(self) -> int:
        return self.outs + self.improvement_outs


@dataclass(frozen=True)
class ExplainerStep:
    title: str
    text: str


@dataclass(frozen=True)
class Explainer:
    steps: tuple[ExplainerStep, ...]
    summary: str
    common_mistakes: tuple[str, ...]


@dataclass(frozen=True)
class Solution:
    best_hand: HandCategory
    draw: DrawCategory
    outs: int
    improvement_outs: int
    pot_odds_pct: float
    decision: Action
    decision_why: str
    explainer: Explainer

    @property
    def total_outs(self) -> int:
        return self.outs + self.improvement_outs


@dataclass(frozen=True)
class Spot:
    """One practice scenario; built in full by the generator and never mutated."""

    mode: Mode
    hole: tuple[Card, Card]
    flop: tuple[Card, Card, Card]
    pot: int
    bet_to_call: int
    solution: Solution

    @property
    def cards(self) -> tuple[Card, ...]:
        return self.hole + self.flop
