from __future__ import annotations

import logging
import random
import secrets
from collections.abc import Sequence

from ..core.explainer import build_explainer
from ..core.formatting import round_half_up
from ..core.models import Action, EvalResult, Mode, Solution, Spot
from .cards import Card, build_deck, cards_to_str, deal, shuffle
from .draws import detect_draw
from .equity import approx_equity_from_outs, draw_outs, improvement_outs, pot_odds_pct
from .evaluator import classify_hand
from .policy import decision_why, recommend_decision

__all__ = ["CALL_SIZES", "NEUTRAL_DECISION", "POT_SIZES", "build_spot", "evaluate_flop", "generate_spot"]

logger = logging.getLogger(__name__)

POT_SIZES: tuple[int, ...] = (40, 50, 60, 80, 100, 120)
CALL_SIZES: tuple[int, ...] = (10, 15, 20, 25, 30)

# Reported when the mode has no money decision; never graded.
NEUTRAL_DECISION = Action.CALL


def evaluate_flop(hole: Sequence[Card], flop: Sequence[Card]) -> EvalResult:
    if len(hole) != 2 or len(flop) != 3:
        raise ValueError(f"expected 2 hole and 3 flop cards, got {len(hole)} and {len(flop)}")
    cards = [*hole, *flop]
    if len(set(cards)) != len(cards):
        raise ValueError(f"duplicate cards in spot: {cards_to_str(cards)}")

    best_hand = classify_hand(cards)
    draw = detect_draw(hole, flop)
    return EvalResult(
        best_hand=best_hand,
        draw=draw,
        outs=draw_outs(draw),
        improvement_outs=improvement_outs(best_hand),
    )


def _default_rng() -> random.Random:
    return random.Random(secrets.SystemRandom().getrandbits(32))


def generate_spot(mode: Mode, rng: random.Random | None = None) -> Spot:
    """Deal and fully solve one practice spot for ``mode``."""

    rng = rng or _default_rng()
    deck = shuffle(build_deck(), rng)
    hole = deal(deck, 2)
    flop = deal(deck, 3)

    if mode is Mode.DECISION_LAB:
        pot = rng.choice(POT_SIZES)
        bet_to_call = rng.choice(CALL_SIZES)
    else:
        pot = 0
        bet_to_call = 0

    spot = build_spot(mode, hole, flop, pot=pot, bet_to_call=bet_to_call)
    logger.debug(
        "Dealt spot %s | %s",
        cards_to_str(spot.hole),
        cards_to_str(spot.flop),
        extra={"mode": mode.value, "best_hand": spot.solution.best_hand.value, "draw": spot.solution.draw.value},
    )
    return spot


def build_spot(
    mode: Mode,
    hole: Sequence[Card],
    flop: Sequence[Card],
    *,
    pot: int = 0,
    bet_to_call: int = 0,
) -> Spot:
    """Solve a known deal. Money amounts only matter in the decision lab."""

    if pot < 0 or bet_to_call < 0:
        raise ValueError("pot and bet_to_call must be non-negative")
    evaluation = evaluate_flop(hole, flop)
    required_pct = pot_odds_pct(pot, bet_to_call) if bet_to_call else 0.0

    if mode is Mode.DECISION_LAB:
        decision = recommend_decision(evaluation.best_hand, evaluation.outs, required_pct)
    else:
        decision = NEUTRAL_DECISION
    equity = approx_equity_from_outs(evaluation.outs)
    why = decision_why(decision, evaluation.best_hand, evaluation.outs, equity, required_pct)

    explainer = build_explainer(
        evaluation,
        pot=pot,
        call=bet_to_call,
        pot_odds=required_pct,
        decision=decision,
        decision_why=why,
    )
    solution = Solution(
        best_hand=evaluation.best_hand,
        draw=evaluation.draw,
        outs=evaluation.outs,
        improvement_outs=evaluation.improvement_outs,
        pot_odds_pct=round_half_up(required_pct, 1),
        decision=decision,
        decision_why=why,
        explainer=explainer,
    )
    return Spot(
        mode=mode,
        hole=(hole[0], hole[1]),
        flop=(flop[0], flop[1], flop[2]),
        pot=pot,
        bet_to_call=bet_to_call,
        solution=solution,
    )
