from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Protocol

from .choices import ChoiceSet
from .models import Mode, Spot
from .scoring import Answer, Grade, SummaryStats


class SpotGenerator(Protocol):
    def generate(self, mode: Mode, rng: random.Random) -> Spot: ...


class Presenter(Protocol):
    def start_session(self, mode: Mode, total_rounds: int) -> None: ...

    def start_round(self, round_no: int, total_rounds: int, xp: int, streak: int) -> None: ...

    def show_spot(self, spot: Spot, choices: ChoiceSet) -> None: ...

    def prompt_answer(self, spot: Spot, choices: ChoiceSet) -> Answer | None:
        """Return the learner's answer, or ``None`` to quit."""
        ...

    def show_feedback(self, spot: Spot, grade: Grade) -> None: ...

    def summary(self, grades: Sequence[Grade], stats: SummaryStats) -> None: ...
