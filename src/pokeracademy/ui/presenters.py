from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeVar

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..core.choices import ChoiceSet
from ..core.explainer import visible_steps
from ..core.formatting import fmt_money, fmt_pct
from ..core.interfaces import Presenter
from ..core.models import Mode, Spot
from ..core.scoring import Answer, Grade, SummaryStats, level_for, level_progress
from ..dynamic.cards import Card, canonical_hand_abbrev, format_card_symbol

T = TypeVar("T")


class QuitRequested(Exception):
    pass


class RichPresenter(Presenter):
    def __init__(
        self,
        *,
        no_color: bool = False,
        console: Console | None = None,
        input_fn: Callable[[str], str] = input,
    ):
        if console is not None:
            self.console = console
        elif no_color:
            self.console = Console(force_terminal=False, color_system=None)
        else:
            self.console = Console(force_terminal=True, color_system="auto")
        self._input = input_fn
        self.quit_requested = False

    def start_session(self, mode: Mode, total_rounds: int) -> None:
        guide = (
            f"[bold]{mode.label}[/] • {total_rounds} round(s)\n"
            "- Read your two cards and the flop.\n"
            "- Type the number next to each answer.\n"
            "- After each spot you'll see the step-by-step reasoning.\n\n"
            "[bold]Controls[/]: numbers = answer • q = quit"
        )
        self.console.print(Panel(guide, title="Poker Academy", border_style="green"))
        self.console.print()

    def start_round(self, round_no: int, total_rounds: int, xp: int, streak: int) -> None:
        header = (
            f"Round {round_no}/{total_rounds}\n"
            f"XP {xp} • Level {level_for(xp)} ({level_progress(xp)}/100) • Streak {streak}"
        )
        self.console.print(Panel(header, border_style="bold cyan", expand=False))

    def show_spot(self, spot: Spot, choices: ChoiceSet) -> None:
        info = Table.grid(padding=(0, 1))
        info.add_column(style="bold cyan", justify="right")
        info.add_column(justify="left")
        hand = self._format_cards_colored(spot.hole)
        info.add_row("Your hand", f"{hand} [dim]({canonical_hand_abbrev(spot.hole)})[/]")
        info.add_row("Flop", self._format_cards_colored(spot.flop))
        if spot.bet_to_call:
            info.add_row("Pot", fmt_money(spot.pot))
            info.add_row("To call", fmt_money(spot.bet_to_call))
        self.console.print(Panel(info, title="Table", border_style="magenta", expand=False))

    def prompt_answer(self, spot: Spot, choices: ChoiceSet) -> Answer | None:
        try:
            best_hand = self._pick("Best made hand", choices.hands, str)
            draw = self._pick("Draw", choices.draws, str) if choices.draws else None
            outs = self._pick("Draw outs", choices.outs, str) if choices.outs else None
            pot_odds = self._pick("Pot odds", choices.pot_odds, fmt_pct) if choices.pot_odds else None
            decision = self._pick("Decision", choices.decisions, str) if choices.decisions else None
        except QuitRequested:
            self.quit_requested = True
            return None
        return Answer(best_hand=best_hand, draw=draw, outs=outs, pot_odds=pot_odds, decision=decision)

    def show_feedback(self, spot: Spot, grade: Grade) -> None:
        sol = spot.solution
        verdict = "[green]✓ Passed[/]" if grade.passed else "[yellow]✗ Missed[/]"
        self.console.print(f"\n{verdict}  +{grade.xp_gained} XP (streak bonus {grade.streak_bonus})")

        table = Table(show_header=True, header_style="bold blue", box=box.SIMPLE_HEAVY)
        table.add_column("Part")
        table.add_column("Answer")
        table.add_column("", justify="center")
        rows = [("Best hand", str(sol.best_hand), grade.best_hand_ok)]
        if spot.mode is not Mode.HAND_RECOGNITION:
            rows.append(("Draw", str(sol.draw), grade.draw_ok))
            rows.append(("Draw outs", str(sol.outs), grade.outs_ok))
        if spot.mode is Mode.DECISION_LAB:
            rows.append(("Pot odds", fmt_pct(sol.pot_odds_pct), grade.pot_odds_ok))
            rows.append(("Decision", str(sol.decision), grade.decision_ok))
        for part, value, ok in rows:
            table.add_row(part, value, "[green]✓[/]" if ok else "[red]✗[/]")
        self.console.print(table)

        for step in visible_steps(sol.explainer, spot.mode):
            self.console.print(f"[bold]{step.title}[/]\n  {step.text}")
        if spot.mode is Mode.DECISION_LAB:
            self.console.print(f"[dim]{sol.explainer.summary}[/]")
        self.console.print("[dim]Common mistakes:[/]")
        for mistake in sol.explainer.common_mistakes:
            self.console.print(f"[dim]- {mistake}[/]")
        self.console.print("[dim]—[/]\n")

    def summary(self, grades: Sequence[Grade], stats: SummaryStats) -> None:
        if not grades:
            self.console.print("No spots answered.")
            return
        table = Table(title="Session Summary", show_header=False)
        table.add_row("Spots answered:", str(stats.rounds))
        table.add_row("Passed:", f"{stats.passes} ({stats.accuracy_pct:.0f}%)")
        table.add_row("XP:", str(stats.xp))
        table.add_row("Level:", f"{stats.level} ({stats.level_progress}/100)")
        table.add_row("Best streak:", str(stats.best_streak))
        self.console.print("\n")
        self.console.print(table)

    # --- helpers ---
    def _pick(self, label: str, options: Sequence[T], fmt: Callable[[T], str]) -> T:
        table = Table(show_header=True, header_style="bold blue", box=box.SIMPLE_HEAVY, title=label)
        table.add_column("#", justify="right", style="cyan", no_wrap=True)
        table.add_column("Choice", style="bold")
        for i, option in enumerate(options, 1):
            table.add_row(str(i), fmt(option))
        self.console.print(table)
        n = len(options)
        while True:
            raw = self._input(f"{label} (1-{n}), or 'q' to quit: ").strip().lower()
            if raw == "q":
                raise QuitRequested
            if raw.isdigit():
                v = int(raw)
                if 1 <= v <= n:
                    return options[v - 1]
            self.console.print(f"[red]Invalid input[/]. Please enter a number 1-{n} or 'q'.")

    def _format_cards_colored(self, cards: Sequence[Card]) -> str:
        # Four-colour deck tuned for both light and dark terminals.
        colors = {
            "s": "bold white",
            "h": "bold #c14657",
            "d": "bold #2f73d2",
            "c": "bold #2f8a5e",
        }
        return " ".join(f"[{colors[c.suit]}]{format_card_symbol(c)}[/]" for c in cards)
