"""Step-by-step walkthrough shown after a spot is answered.

Steps follow the order a player should reason in: made hand, draw, draw outs,
improvement outs, price, comparison, decision. Every number quoted here comes
from the same fields stored on the spot's solution.
"""

from __future__ import annotations

from ..dynamic.equity import approx_equity_from_outs
from .formatting import fmt_money, fmt_pct, round_half_up
from .models import Action, DrawCategory, EvalResult, Explainer, ExplainerStep, Mode

__all__ = ["COMMON_MISTAKES", "build_explainer", "visible_steps"]

COMMON_MISTAKES: tuple[str, ...] = (
    "Pot odds is NOT call ÷ pot. It's call ÷ (pot + call).",
    "Counting outs that don't actually help (fake outs).",
    "Chasing tiny draws with expensive calls.",
)

# Number of leading steps each mode reveals.
_VISIBLE_STEP_COUNT = {
    Mode.HAND_RECOGNITION: 1,
    Mode.OUTS_PRACTICE: 4,
    Mode.DECISION_LAB: 7,
}


def build_explainer(
    evaluation: EvalResult,
    *,
    pot: int,
    call: int,
    pot_odds: float,
    decision: Action,
    decision_why: str,
) -> Explainer:
    best = evaluation.best_hand
    draw = evaluation.draw
    outs = evaluation.outs
    imp = evaluation.improvement_outs
    total = evaluation.total_outs
    equity = approx_equity_from_outs(outs)
    po = fmt_pct(round_half_up(pot_odds, 1))

    if draw is DrawCategory.NONE:
        draw_text = "No strong draw. That means you are mostly relying on your made hand."
    else:
        draw_text = f"Yes. Your draw is: {draw}."

    if outs > 0:
        outs_text = (
            f"Draw outs complete a flush or straight draw. Here: {outs} draw outs. "
            "(Flush≈9, OESD≈8, Gutshot≈4, Combo≈15)"
        )
        compare_text = (
            f"Rule of 4: draw outs×4 ≈ % by river. {outs}×4 ≈ {equity}%. If your % ≥ {po}, calling is OK."
        )
    else:
        outs_text = "No flush or straight draw: 0 draw outs."
        compare_text = "No draw % to compare. If you are not strong, folding is usually best."

    if imp > 0:
        imp_text = (
            "Improvement outs upgrade your already-made hand (e.g. one pair→trips, "
            f"two pair→full house, set→quads). Your {best} has ~{imp} improvement outs. "
            f"Total outs = {outs} + {imp} = {total}."
        )
    else:
        imp_text = f"Your made hand ({best}) has no significant improvement outs to count. Total outs = {total}."

    steps = (
        ExplainerStep(
            "1) What is my best hand right now?",
            f"Look at your 2 cards + the 3 flop cards. Your best made hand is: {best}.",
        ),
        ExplainerStep("2) Do I have a draw?", draw_text),
        ExplainerStep("3) Draw outs?", outs_text),
        ExplainerStep("3b) Improvement outs?", imp_text),
        ExplainerStep(
            "4) Pot odds (price)",
            f"Pot is {fmt_money(pot)}. Call is {fmt_money(call)}. "
            f"Pot odds = call ÷ (pot + call) = {call} ÷ {pot + call} ≈ {po}.",
        ),
        ExplainerStep("5) Compare", compare_text),
        ExplainerStep("6) Decision", f"Best play: {decision}. {decision_why}"),
    )

    summary = (
        f"Answer: {best} • {draw} • Draw Outs: {outs}, Improvement: {imp}, Total: {total} "
        f"• Pot odds: {po} • Decision: {decision}."
    )
    return Explainer(steps=steps, summary=summary, common_mistakes=COMMON_MISTAKES)


def visible_steps(explainer: Explainer, mode: Mode) -> tuple[ExplainerStep, ...]:
    return explainer.steps[: _VISIBLE_STEP_COUNT[mode]]
