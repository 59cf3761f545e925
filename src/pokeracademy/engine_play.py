from __future__ import annotations

import secrets
from collections.abc import Callable

from .core.engine_core import run_core
from .core.models import Mode
from .core.scoring import Grade
from .ui.presenters import RichPresenter


def run_play(
    seed: int | None = None,
    rounds: int = 5,
    mode: Mode = Mode.DECISION_LAB,
    no_color: bool = False,
    _input_fn: Callable[[str], str] = input,
) -> list[Grade]:
    presenter = RichPresenter(no_color=no_color, input_fn=_input_fn)
    # Choose a random seed when none is provided for varied sessions
    actual_seed = seed if seed is not None else secrets.randbits(32)
    return run_core(presenter, mode=mode, seed=actual_seed, rounds=rounds)
