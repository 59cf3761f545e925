from __future__ import annotations

import pytest

from pokeracademy.core.formatting import fmt_money, fmt_pct, round_half_up, round_to_step
from pokeracademy.core.models import DrawCategory, HandCategory
from pokeracademy.dynamic.equity import (
    DRAW_OUTS,
    IMPROVEMENT_OUTS,
    approx_equity_from_outs,
    draw_outs,
    improvement_outs,
    pot_odds_pct,
)


def test_draw_outs_table():
    assert draw_outs(DrawCategory.COMBO) == 15
    assert draw_outs(DrawCategory.FLUSH_DRAW) == 9
    assert draw_outs(DrawCategory.OPEN_ENDED) == 8
    assert draw_outs(DrawCategory.GUTSHOT) == 4
    assert draw_outs(DrawCategory.NONE) == 0
    assert set(DRAW_OUTS) == set(DrawCategory)


def test_improvement_outs_table():
    assert improvement_outs(HandCategory.HIGH_CARD) == 6
    assert improvement_outs(HandCategory.ONE_PAIR) == 5
    assert improvement_outs(HandCategory.TWO_PAIR) == 4
    assert improvement_outs(HandCategory.THREE_OF_A_KIND) == 7
    assert improvement_outs(HandCategory.FULL_HOUSE) == 1
    for category in (
        HandCategory.STRAIGHT,
        HandCategory.FLUSH,
        HandCategory.FOUR_OF_A_KIND,
        HandCategory.STRAIGHT_FLUSH,
    ):
        assert improvement_outs(category) == 0
    assert dict(IMPROVEMENT_OUTS) == {
        HandCategory.HIGH_CARD: 6,
        HandCategory.ONE_PAIR: 5,
        HandCategory.TWO_PAIR: 4,
        HandCategory.THREE_OF_A_KIND: 7,
        HandCategory.STRAIGHT: 0,
        HandCategory.FLUSH: 0,
        HandCategory.FULL_HOUSE: 1,
        HandCategory.FOUR_OF_A_KIND: 0,
        HandCategory.STRAIGHT_FLUSH: 0,
    }


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        DRAW_OUTS[DrawCategory.NONE] = 1  # type: ignore[index]


def test_rule_of_four_caps_at_100():
    assert approx_equity_from_outs(0) == 0
    assert approx_equity_from_outs(9) == 36
    assert approx_equity_from_outs(15) == 60
    assert approx_equity_from_outs(30) == 100
    with pytest.raises(ValueError):
        approx_equity_from_outs(-1)


def test_pot_odds():
    assert pot_odds_pct(60, 20) == pytest.approx(25.0)
    assert pot_odds_pct(80, 20) == pytest.approx(20.0)
    assert pot_odds_pct(40, 30) == pytest.approx(300 / 7)
    assert pot_odds_pct(100, 0) == 0.0
    with pytest.raises(ValueError):
        pot_odds_pct(-1, 10)


def test_rounding_and_formatting():
    assert round_half_up(42.857, 1) == pytest.approx(42.9)
    assert round_half_up(12.5) == 13
    assert round_half_up(2.5) == 3
    assert round_to_step(23.3, 0.5) == pytest.approx(23.5)
    with pytest.raises(ValueError):
        round_to_step(1, 0)
    assert fmt_pct(25.0) == "25%"
    assert fmt_pct(16.7) == "16.7%"
    assert fmt_money(60) == "$60"
    assert fmt_money(2.5) == "$2.50"
