from __future__ import annotations

import logging
import random

from ..dynamic.generator import generate_spot
from .choices import choices_for
from .interfaces import Presenter, SpotGenerator
from .models import Mode, Spot
from .scoring import Grade, grade_answer, summarize_grades

logger = logging.getLogger(__name__)


class DealtSpots(SpotGenerator):
    def generate(self, mode: Mode, rng: random.Random) -> Spot:
        return generate_spot(mode, rng)


def run_core(
    presenter: Presenter,
    *,
    mode: Mode,
    seed: int,
    rounds: int,
    generator: SpotGenerator | None = None,
) -> list[Grade]:
    rng = random.Random(seed)
    source = generator or DealtSpots()
    presenter.start_session(mode, rounds)
    grades: list[Grade] = []
    streak = 0
    xp = 0

    for r in range(rounds):
        presenter.start_round(r + 1, rounds, xp, streak)
        spot = source.generate(mode, rng)
        choices = choices_for(spot, rng)
        presenter.show_spot(spot, choices)
        answer = presenter.prompt_answer(spot, choices)
        if answer is None:
            logger.debug("Session quit after %d rounds", len(grades))
            break
        grade = grade_answer(spot, answer, streak=streak)
        streak = grade.streak
        xp += grade.xp_gained
        grades.append(grade)
        presenter.show_feedback(spot, grade)

    presenter.summary(grades, summarize_grades(grades))
    return grades
