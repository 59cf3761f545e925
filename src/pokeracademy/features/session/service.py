from __future__ import annotations

import logging
import random
import secrets
import string
import threading
from dataclasses import dataclass, field

from ...core.choices import ChoiceSet
from ...core.explainer import visible_steps
from ...core.models import Mode, Spot
from ...core.scoring import Answer, Grade, grade_answer, level_for, level_progress, summarize_grades
from ...dynamic.cards import format_card_ascii
from .concurrency import run_blocking
from .engine import SessionEngine
from .schemas import (
    AnswerResult,
    ChoicesPayload,
    ExplainerPayload,
    GradePayload,
    ProgressPayload,
    SolutionPayload,
    SpotPayload,
    SpotResponse,
    StepPayload,
    SummaryPayload,
)

__all__ = ["MAX_SESSIONS", "SessionConfig", "SessionManager", "SessionState"]

logger = logging.getLogger(__name__)

# Oldest sessions are dropped once this many are live.
MAX_SESSIONS = 1024


@dataclass(frozen=True)
class SessionConfig:
    """Configuration for a practice session."""

    mode: Mode = Mode.DECISION_LAB
    seed: int | None = None


@dataclass
class SessionState:
    config: SessionConfig
    engine: SessionEngine
    mode: Mode
    spot: Spot
    choices: ChoiceSet
    answered: bool = False
    xp: int = 0
    streak: int = 0
    round: int = 1
    grades: list[Grade] = field(default_factory=list)


class SessionManager:
    """Owns session lifecycle independent of the presentation layer."""

    def __init__(self, max_sessions: int = MAX_SESSIONS) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self._sessions: dict[str, SessionState] = {}
        self._lock = threading.Lock()
        self._max_sessions = max_sessions

    def create_session(self, config: SessionConfig) -> str:
        seed = config.seed if config.seed is not None else secrets.SystemRandom().getrandbits(32)
        engine = SessionEngine(rng=random.Random(seed))
        spot = engine.build_spot(config.mode)
        state = SessionState(
            config=SessionConfig(mode=config.mode, seed=seed),
            engine=engine,
            mode=config.mode,
            spot=spot,
            choices=engine.choices(spot),
        )
        session_id = _sid()
        with self._lock:
            while len(self._sessions) >= self._max_sessions:
                evicted = next(iter(self._sessions))
                del self._sessions[evicted]
                logger.debug("session evicted", extra={"session_id": evicted})
            self._sessions[session_id] = state
        logger.debug("session created", extra={"session_id": session_id, "mode": config.mode.value})
        return session_id

    async def create_session_async(self, config: SessionConfig) -> str:
        return await run_blocking(self.create_session, config)

    def get_spot(self, session_id: str) -> SpotResponse:
        with self._lock:
            state = self._require_session(session_id)
            return _spot_response(state)

    async def get_spot_async(self, session_id: str) -> SpotResponse:
        return await run_blocking(self.get_spot, session_id)

    def answer(self, session_id: str, answer: Answer) -> AnswerResult:
        with self._lock:
            state = self._require_session(session_id)
            if state.answered:
                raise ValueError("spot already answered; request the next spot")
            grade = grade_answer(state.spot, answer, streak=state.streak)
            state.grades.append(grade)
            state.streak = grade.streak
            state.xp += grade.xp_gained
            state.answered = True
            logger.debug(
                "spot graded",
                extra={"session_id": session_id, "points": grade.points, "passed": grade.passed},
            )
            return AnswerResult(
                grade=_grade_payload(grade),
                solution=_solution_payload(state.spot),
                progress=_progress_payload(state),
            )

    async def answer_async(self, session_id: str, answer: Answer) -> AnswerResult:
        return await run_blocking(self.answer, session_id, answer)

    def next_spot(self, session_id: str) -> SpotResponse:
        with self._lock:
            state = self._require_session(session_id)
            _deal(state)
            state.round += 1
            return _spot_response(state)

    async def next_spot_async(self, session_id: str) -> SpotResponse:
        return await run_blocking(self.next_spot, session_id)

    def switch_mode(self, session_id: str, mode: Mode) -> SpotResponse:
        """Change practice mode; round counter and streak start over."""

        with self._lock:
            state = self._require_session(session_id)
            state.mode = mode
            state.round = 1
            state.streak = 0
            _deal(state)
            logger.debug("mode switched", extra={"session_id": session_id, "mode": mode.value})
            return _spot_response(state)

    async def switch_mode_async(self, session_id: str, mode: Mode) -> SpotResponse:
        return await run_blocking(self.switch_mode, session_id, mode)

    def summary(self, session_id: str) -> SummaryPayload:
        with self._lock:
            return _summary_payload(self._require_session(session_id))

    async def summary_async(self, session_id: str) -> SummaryPayload:
        return await run_blocking(self.summary, session_id)

    def end_session(self, session_id: str) -> SummaryPayload:
        """Drop the session and return its final summary."""

        with self._lock:
            state = self._require_session(session_id)
            del self._sessions[session_id]
        logger.debug("session ended", extra={"session_id": session_id, "rounds": len(state.grades)})
        return _summary_payload(state)

    async def end_session_async(self, session_id: str) -> SummaryPayload:
        return await run_blocking(self.end_session, session_id)

    def _require_session(self, session_id: str) -> SessionState:
        state = self._sessions.get(session_id)
        if state is None:
            raise KeyError(f"session '{session_id}' not found")
        return state


def _sid(length: int = 10) -> str:
    alphabet = string.ascii_lowercase + string.digits
    return "".join(secrets.choice(alphabet) for _ in range(length))


def _deal(state: SessionState) -> None:
    spot = state.engine.build_spot(state.mode)
    state.spot = spot
    state.choices = state.engine.choices(spot)
    state.answered = False


def _card_strings(cards) -> list[str]:
    return [format_card_ascii(card, upper=False) for card in cards]


def _progress_payload(state: SessionState) -> ProgressPayload:
    return ProgressPayload(
        xp=state.xp,
        level=level_for(state.xp),
        level_progress=level_progress(state.xp),
        streak=state.streak,
        round=state.round,
    )


def _choices_payload(choices: ChoiceSet) -> ChoicesPayload:
    return ChoicesPayload(
        hands=[c.value for c in choices.hands],
        draws=[c.value for c in choices.draws],
        outs=list(choices.outs),
        pot_odds=list(choices.pot_odds),
        decisions=[c.value for c in choices.decisions],
    )


def _spot_response(state: SessionState) -> SpotResponse:
    spot = state.spot
    return SpotResponse(
        spot=SpotPayload(
            mode=spot.mode.value,
            mode_label=spot.mode.label,
            round=state.round,
            hole_cards=_card_strings(spot.hole),
            flop_cards=_card_strings(spot.flop),
            pot=spot.pot,
            bet_to_call=spot.bet_to_call,
            choices=_choices_payload(state.choices),
        ),
        answered=state.answered,
        progress=_progress_payload(state),
    )


def _summary_payload(state: SessionState) -> SummaryPayload:
    stats = summarize_grades(state.grades)
    return SummaryPayload(
        mode=state.mode.value,
        rounds=stats.rounds,
        passes=stats.passes,
        xp=state.xp,
        level=level_for(state.xp),
        level_progress=level_progress(state.xp),
        streak=state.streak,
        best_streak=stats.best_streak,
        round=state.round,
        accuracy_pct=stats.accuracy_pct,
    )


def _grade_payload(grade: Grade) -> GradePayload:
    return GradePayload(
        best_hand_ok=grade.best_hand_ok,
        draw_ok=grade.draw_ok,
        outs_ok=grade.outs_ok,
        pot_odds_ok=grade.pot_odds_ok,
        decision_ok=grade.decision_ok,
        points=grade.points,
        streak_bonus=grade.streak_bonus,
        xp_gained=grade.xp_gained,
        passed=grade.passed,
    )


def _solution_payload(spot: Spot) -> SolutionPayload:
    sol = spot.solution
    in_lab = spot.mode is Mode.DECISION_LAB
    return SolutionPayload(
        best_hand=sol.best_hand.value,
        draw=sol.draw.value,
        outs=sol.outs,
        improvement_outs=sol.improvement_outs,
        total_outs=sol.total_outs,
        pot_odds_pct=sol.pot_odds_pct,
        decision=sol.decision.value if in_lab else None,
        decision_why=sol.decision_why if in_lab else None,
        explainer=ExplainerPayload(
            steps=[StepPayload(title=s.title, text=s.text) for s in visible_steps(sol.explainer, spot.mode)],
            summary=sol.explainer.summary if in_lab else None,
            common_mistakes=list(sol.explainer.common_mistakes),
        ),
    )
