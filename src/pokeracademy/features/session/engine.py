"""Session engine primitives.

Keeps the per-session random source next to spot construction so a seeded
session replays the same deals, and so the service layer never touches the
global ``random`` state.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from ...core.choices import ChoiceSet, choices_for
from ...core.models import Mode, Spot
from ...dynamic.generator import generate_spot


@dataclass
class SessionEngine:
    """Wraps the session RNG for deterministic spot generation."""

    rng: random.Random

    def build_spot(self, mode: Mode) -> Spot:
        return generate_spot(mode, self.rng)

    def choices(self, spot: Spot) -> ChoiceSet:
        return choices_for(spot, self.rng)
