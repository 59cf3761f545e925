from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

__all__ = [
    "AnswerResult",
    "ChoicesPayload",
    "ExplainerPayload",
    "GradePayload",
    "ProgressPayload",
    "SolutionPayload",
    "SpotPayload",
    "SpotResponse",
    "StepPayload",
    "SummaryPayload",
]


class _APIModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ChoicesPayload(_APIModel):
    hands: list[str]
    draws: list[str] = []
    outs: list[int] = []
    pot_odds: list[float] = []
    decisions: list[str] = []


class SpotPayload(_APIModel):
    mode: str
    mode_label: str
    round: int
    hole_cards: list[str]
    flop_cards: list[str]
    pot: int
    bet_to_call: int
    choices: ChoicesPayload


class ProgressPayload(_APIModel):
    xp: int
    level: int
    level_progress: int
    streak: int
    round: int


class SpotResponse(_APIModel):
    spot: SpotPayload
    answered: bool
    progress: ProgressPayload


class StepPayload(_APIModel):
    title: str
    text: str


class ExplainerPayload(_APIModel):
    steps: list[StepPayload]
    # The summary quotes the decision, so it is withheld outside the decision lab.
    summary: str | None = None
    common_mistakes: list[str]


class SolutionPayload(_APIModel):
    best_hand: str
    draw: str
    outs: int
    improvement_outs: int
    total_outs: int
    pot_odds_pct: float
    # Only present in the decision lab.
    decision: str | None = None
    decision_why: str | None = None
    explainer: ExplainerPayload


class GradePayload(_APIModel):
    best_hand_ok: bool
    draw_ok: bool
    outs_ok: bool
    pot_odds_ok: bool
    decision_ok: bool
    points: int
    streak_bonus: int
    xp_gained: int
    passed: bool


class AnswerResult(_APIModel):
    grade: GradePayload
    solution: SolutionPayload
    progress: ProgressPayload


class SummaryPayload(_APIModel):
    mode: str
    rounds: int
    passes: int
    xp: int
    level: int
    level_progress: int
    streak: int
    best_streak: int
    round: int
    accuracy_pct: float
