from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .models import Action, DrawCategory, HandCategory, Mode, Spot

# Points per correctly answered part of a spot.
BEST_HAND_POINTS = 45
DRAW_POINTS = 15
OUTS_POINTS = 20
POT_ODDS_POINTS = 10
DECISION_POINTS = 10

# Answers within these distances of the solution still count.
OUTS_TOLERANCE = 1
POT_ODDS_TOLERANCE = 2.0

PASS_THRESHOLDS = {
    Mode.HAND_RECOGNITION: 40,
    Mode.OUTS_PRACTICE: 55,
    Mode.DECISION_LAB: 70,
}

STREAK_BONUS_STEP = 2
STREAK_BONUS_CAP = 20
XP_PER_LEVEL = 100


@dataclass(frozen=True)
class Answer:
    best_hand: HandCategory | None = None
    draw: DrawCategory | None = None
    outs: int | None = None
    pot_odds: float | None = None
    decision: Action | None = None


@dataclass(frozen=True)
class Grade:
    mode: Mode
    best_hand_ok: bool
    draw_ok: bool
    outs_ok: bool
    pot_odds_ok: bool
    decision_ok: bool
    points: int
    streak_bonus: int
    passed: bool
    streak: int  # streak after this round

    @property
    def xp_gained(self) -> int:
        return self.points + self.streak_bonus


@dataclass(frozen=True)
class SummaryStats:
    rounds: int
    passes: int
    xp: int
    level: int
    level_progress: int
    best_streak: int
    accuracy_pct: float


def streak_bonus(streak: int) -> int:
    """Bonus XP for a pass that extends a streak of ``streak`` prior passes."""

    return min(STREAK_BONUS_CAP, (streak + 1) * STREAK_BONUS_STEP)


def level_for(xp: int) -> int:
    return xp // XP_PER_LEVEL + 1


def level_progress(xp: int) -> int:
    return xp % XP_PER_LEVEL


def grade_answer(spot: Spot, answer: Answer, *, streak: int = 0) -> Grade:
    """Grade ``answer`` against ``spot``'s solution.

    Label answers are compared as enum members, never as text. Parts the
    current mode does not ask about are counted as correct.
    """

    sol = spot.solution
    mode = spot.mode
    asks_draw = mode is not Mode.HAND_RECOGNITION
    asks_money = mode is Mode.DECISION_LAB

    best_hand_ok = answer.best_hand is not None and answer.best_hand is sol.best_hand

    if not asks_draw:
        draw_ok = True
    else:
        chosen_draw = answer.draw if answer.draw is not None else DrawCategory.NONE
        draw_ok = chosen_draw is sol.draw

    if not asks_draw:
        outs_ok = True
    else:
        outs_ok = answer.outs is not None and abs(answer.outs - sol.outs) <= OUTS_TOLERANCE

    if not asks_money:
        pot_odds_ok = True
        decision_ok = True
    else:
        pot_odds_ok = answer.pot_odds is not None and abs(answer.pot_odds - sol.pot_odds_pct) <= POT_ODDS_TOLERANCE
        decision_ok = answer.decision is not None and answer.decision is sol.decision

    points = (
        (BEST_HAND_POINTS if best_hand_ok else 0)
        + (DRAW_POINTS if draw_ok else 0)
        + (OUTS_POINTS if outs_ok else 0)
        + (POT_ODDS_POINTS if pot_odds_ok else 0)
        + (DECISION_POINTS if decision_ok else 0)
    )
    passed = points >= PASS_THRESHOLDS[mode]
    return Grade(
        mode=mode,
        best_hand_ok=best_hand_ok,
        draw_ok=draw_ok,
        outs_ok=outs_ok,
        pot_odds_ok=pot_odds_ok,
        decision_ok=decision_ok,
        points=points,
        streak_bonus=streak_bonus(streak) if passed else 0,
        passed=passed,
        streak=streak + 1 if passed else 0,
    )


def summarize_grades(grades: Sequence[Grade]) -> SummaryStats:
    xp = sum(g.xp_gained for g in grades)
    passes = sum(1 for g in grades if g.passed)
    rounds = len(grades)
    return SummaryStats(
        rounds=rounds,
        passes=passes,
        xp=xp,
        level=level_for(xp),
        level_progress=level_progress(xp),
        best_streak=max((g.streak for g in grades), default=0),
        accuracy_pct=(100.0 * passes / rounds) if rounds else 0.0,
    )
