from __future__ import annotations

import asyncio

import pytest

from pokeracademy.core.models import Mode
from pokeracademy.core.scoring import Answer
from pokeracademy.features.session import (
    AnswerResult,
    SessionConfig,
    SessionManager,
    SpotResponse,
    SummaryPayload,
)


def _perfect_answer(manager: SessionManager, sid: str) -> Answer:
    sol = manager._sessions[sid].spot.solution
    return Answer(
        best_hand=sol.best_hand,
        draw=sol.draw,
        outs=sol.outs,
        pot_odds=sol.pot_odds_pct,
        decision=sol.decision,
    )


def test_session_manager_basic_flow():
    manager = SessionManager()
    sid = manager.create_session(SessionConfig(seed=1234))

    first = manager.get_spot(sid)
    assert isinstance(first, SpotResponse)
    data = first.to_dict()
    spot = data["spot"]
    assert spot["mode"] == "decision"
    assert spot["mode_label"] == "Decision Lab"
    assert spot["round"] == 1
    assert len(spot["hole_cards"]) == 2 and len(spot["flop_cards"]) == 3
    assert all(isinstance(card, str) and len(card) == 2 for card in spot["hole_cards"])
    assert spot["pot"] > 0 and spot["bet_to_call"] > 0
    assert set(spot["choices"]) == {"hands", "draws", "outs", "pot_odds", "decisions"}
    assert data["answered"] is False

    result = manager.answer(sid, _perfect_answer(manager, sid))
    assert isinstance(result, AnswerResult)
    payload = result.to_dict()
    assert payload["grade"]["passed"] is True
    assert payload["grade"]["points"] == 100
    assert payload["progress"] == {"xp": 102, "level": 2, "level_progress": 2, "streak": 1, "round": 1}
    solution = payload["solution"]
    assert solution["total_outs"] == solution["outs"] + solution["improvement_outs"]
    assert len(solution["explainer"]["steps"]) == 7
    assert "decision" in solution and "summary" in solution["explainer"]
    assert manager.get_spot(sid).answered is True

    nxt = manager.next_spot(sid).to_dict()
    assert nxt["spot"]["round"] == 2
    assert nxt["answered"] is False
    assert nxt["progress"]["streak"] == 1


def test_answer_twice_is_rejected():
    manager = SessionManager()
    sid = manager.create_session(SessionConfig(seed=5))
    manager.answer(sid, Answer())
    with pytest.raises(ValueError):
        manager.answer(sid, Answer())


def test_unknown_session_raises_key_error():
    manager = SessionManager()
    with pytest.raises(KeyError):
        manager.get_spot("missing")
    with pytest.raises(KeyError):
        manager.summary("missing")


def test_seeded_sessions_replay_the_same_deals():
    manager = SessionManager()
    a = manager.create_session(SessionConfig(mode=Mode.OUTS_PRACTICE, seed=77))
    b = manager.create_session(SessionConfig(mode=Mode.OUTS_PRACTICE, seed=77))
    assert manager.get_spot(a).spot == manager.get_spot(b).spot
    assert manager.next_spot(a).spot == manager.next_spot(b).spot


def test_switch_mode_resets_round_and_streak():
    manager = SessionManager()
    sid = manager.create_session(SessionConfig(seed=3))
    manager.answer(sid, _perfect_answer(manager, sid))
    manager.next_spot(sid)

    switched = manager.switch_mode(sid, Mode.HAND_RECOGNITION).to_dict()
    assert switched["spot"]["mode"] == "hand"
    assert switched["spot"]["round"] == 1
    assert switched["progress"]["streak"] == 0
    assert switched["progress"]["xp"] == 102
    assert switched["spot"]["pot"] == 0
    choices = switched["spot"]["choices"]
    assert choices["hands"] == [
        "High Card",
        "One Pair",
        "Two Pair",
        "Three of a Kind",
        "Straight",
        "Flush",
        "Full House",
        "Four of a Kind",
        "Straight Flush",
    ]
    assert choices["draws"] == [] and choices["outs"] == [] and choices["decisions"] == []


def test_non_lab_solution_hides_the_decision():
    manager = SessionManager()
    sid = manager.create_session(SessionConfig(mode=Mode.OUTS_PRACTICE, seed=9))
    solution = manager.answer(sid, Answer()).to_dict()["solution"]
    assert "decision" not in solution
    assert "decision_why" not in solution
    assert "summary" not in solution["explainer"]
    assert len(solution["explainer"]["steps"]) == 4


def test_summary_counts_rounds():
    manager = SessionManager()
    sid = manager.create_session(SessionConfig(seed=21))
    manager.answer(sid, _perfect_answer(manager, sid))
    manager.next_spot(sid)
    manager.answer(sid, Answer())
    summary = manager.summary(sid)
    assert isinstance(summary, SummaryPayload)
    assert summary.rounds == 2
    assert summary.passes == 1
    assert summary.best_streak == 1
    assert summary.streak == 0
    assert summary.accuracy_pct == 50.0
    assert summary.xp == manager._sessions[sid].xp
    assert summary.xp >= 102
    assert summary.round == 2


def test_async_wrappers_delegate():
    manager = SessionManager()

    async def _flow() -> dict:
        sid = await manager.create_session_async(SessionConfig(seed=4))
        await manager.get_spot_async(sid)
        await manager.answer_async(sid, Answer())
        await manager.next_spot_async(sid)
        await manager.switch_mode_async(sid, Mode.OUTS_PRACTICE)
        return (await manager.summary_async(sid)).to_dict()

    summary = asyncio.run(_flow())
    assert summary["mode"] == "outs"
    assert summary["rounds"] == 1


def test_end_session_returns_summary_and_forgets_the_session():
    manager = SessionManager()
    sid = manager.create_session(SessionConfig(seed=13))
    manager.answer(sid, _perfect_answer(manager, sid))
    final = manager.end_session(sid)
    assert final.rounds == 1
    assert final.passes == 1
    assert sid not in manager._sessions
    with pytest.raises(KeyError):
        manager.end_session(sid)


def test_oldest_sessions_are_evicted_at_the_cap():
    manager = SessionManager(max_sessions=2)
    first = manager.create_session(SessionConfig(seed=1))
    second = manager.create_session(SessionConfig(seed=2))
    third = manager.create_session(SessionConfig(seed=3))
    assert list(manager._sessions) == [second, third]
    with pytest.raises(KeyError):
        manager.get_spot(first)
    assert manager.get_spot(third).spot.round == 1


def test_max_sessions_must_be_positive():
    with pytest.raises(ValueError):
        SessionManager(max_sessions=0)
