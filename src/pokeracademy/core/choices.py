"""Tap-to-answer option sets.

The learner only ever picks from closed sets: enum members for the labels and
a handful of numeric distractors around the true outs / pot-odds values.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from ..dynamic.cards import shuffle
from .formatting import round_to_step
from .models import Action, DrawCategory, HandCategory, Mode, Spot

__all__ = [
    "DECISION_CHOICES",
    "DRAW_CHOICES",
    "HAND_CHOICES",
    "MAX_NUMERIC_CHOICES",
    "ChoiceSet",
    "choices_for",
    "outs_choices",
    "pot_odds_choices",
]

HAND_CHOICES: tuple[HandCategory, ...] = tuple(HandCategory)
DRAW_CHOICES: tuple[DrawCategory, ...] = tuple(DrawCategory)
DECISION_CHOICES: tuple[Action, ...] = tuple(Action)

MAX_NUMERIC_CHOICES = 6

_OUTS_DELTAS = (-2, -1, 1, 2, 4)
_OUTS_RANGE = (0, 20)
_POT_ODDS_DELTAS = (-10.0, -5.0, -2.5, 2.5, 5.0, 10.0)
_POT_ODDS_STEP = 0.5


@dataclass(frozen=True)
class ChoiceSet:
    hands: tuple[HandCategory, ...]
    draws: tuple[DrawCategory, ...] = ()
    outs: tuple[int, ...] = ()
    pot_odds: tuple[float, ...] = ()
    decisions: tuple[Action, ...] = ()


def _unique(values):
    seen = []
    for v in values:
        if v not in seen:
            seen.append(v)
    return seen


def outs_choices(correct: int, rng: random.Random) -> tuple[int, ...]:
    low, high = _OUTS_RANGE
    candidates = [correct + d for d in _OUTS_DELTAS if low <= correct + d <= high]
    ordered = sorted(_unique([correct, *candidates]))
    return tuple(shuffle(ordered, rng))


def pot_odds_choices(correct_pct: float, rng: random.Random) -> tuple[float, ...]:
    correct = round_to_step(correct_pct, _POT_ODDS_STEP)
    offsets = [round_to_step(correct + d, _POT_ODDS_STEP) for d in _POT_ODDS_DELTAS]
    offsets = [v for v in offsets if 0 <= v <= 100]
    everything = _unique([correct, *offsets])
    if len(everything) > MAX_NUMERIC_CHOICES:
        everything = _unique([correct, *offsets[: MAX_NUMERIC_CHOICES - 1]])
    return tuple(shuffle(everything, rng))


def choices_for(spot: Spot, rng: random.Random) -> ChoiceSet:
    """Return the option sets the learner sees for ``spot``'s mode."""

    if spot.mode is Mode.HAND_RECOGNITION:
        return ChoiceSet(hands=HAND_CHOICES)
    outs = outs_choices(spot.solution.outs, rng)
    if spot.mode is Mode.OUTS_PRACTICE:
        return ChoiceSet(hands=HAND_CHOICES, draws=DRAW_CHOICES, outs=outs)
    return ChoiceSet(
        hands=HAND_CHOICES,
        draws=DRAW_CHOICES,
        outs=outs,
        pot_odds=pot_odds_choices(spot.solution.pot_odds_pct, rng),
        decisions=DECISION_CHOICES,
    )
