from __future__ import annotations

import pytest

from pokeracademy.core.models import Action, HandCategory
from pokeracademy.dynamic.policy import decision_why, is_strong_made, recommend_decision


@pytest.mark.parametrize(
    "best,outs,price,expected",
    [
        (HandCategory.TWO_PAIR, 0, 40.0, Action.RAISE),
        (HandCategory.FLUSH, 0, 40.0, Action.RAISE),
        (HandCategory.HIGH_CARD, 15, 40.0, Action.RAISE),
        (HandCategory.HIGH_CARD, 9, 25.0, Action.CALL),
        (HandCategory.ONE_PAIR, 8, 33.3, Action.CALL),
        (HandCategory.HIGH_CARD, 4, 25.0, Action.FOLD),
        (HandCategory.ONE_PAIR, 0, 20.0, Action.FOLD),
    ],
)
def test_recommend_decision(best, outs, price, expected):
    assert recommend_decision(best, outs, price) is expected


def test_call_margin_boundary_is_inclusive():
    # 4 outs -> 16% equity, plus the 2 point margin meets an 18% price exactly.
    assert recommend_decision(HandCategory.HIGH_CARD, 4, 18.0) is Action.CALL
    assert recommend_decision(HandCategory.HIGH_CARD, 4, 18.1) is Action.FOLD


def test_one_pair_is_not_strong():
    assert not is_strong_made(HandCategory.ONE_PAIR)
    assert is_strong_made(HandCategory.THREE_OF_A_KIND)


def test_decision_why_messages():
    assert decision_why(Action.RAISE, HandCategory.FLUSH, 15, 60, 25.0).startswith("Strong hand + big draw")
    assert decision_why(Action.RAISE, HandCategory.STRAIGHT, 0, 0, 25.0) == (
        "Strong made hand (Straight): raise for value and protect equity."
    )
    assert decision_why(Action.RAISE, HandCategory.HIGH_CARD, 15, 60, 25.0) == (
        "Massive draw (15 outs ≈ 60% equity): raise to build the pot."
    )
    assert decision_why(Action.CALL, HandCategory.HIGH_CARD, 9, 36, 25.0) == (
        "Your equity (~36%) beats the price (~25%): calling is profitable."
    )
    assert decision_why(Action.FOLD, HandCategory.HIGH_CARD, 4, 16, 33.3) == (
        "Your equity (~16%) is below the price (~33%): too expensive to draw."
    )


@pytest.mark.parametrize("outs,price", [(0, 99.0), (4, 50.0), (15, 10.0)])
def test_made_flush_always_raises(outs, price):
    assert recommend_decision(HandCategory.FLUSH, outs, price) is Action.RAISE


def test_small_draw_against_a_steep_price_folds():
    assert recommend_decision(HandCategory.HIGH_CARD, 4, 50.0) is Action.FOLD
