from __future__ import annotations

import argparse
import logging
import sys

from .core.models import Mode
from .engine_play import run_play


def _add_play_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--mode",
        choices=[m.value for m in Mode],
        default=Mode.DECISION_LAB.value,
        help="hand = hand recognition, outs = outs practice, decision = full decision lab",
    )
    p.add_argument("--rounds", type=int, default=5, help="Number of spots to practise")
    # If omitted, runs with a random seed for variety. Pass an int to reproduce.
    p.add_argument("--seed", type=int, default=None, help="RNG seed (random if omitted)")
    p.add_argument("--no-color", action="store_true", help="Disable colored output (default is colored)")
    p.add_argument("--verbose", action="store_true", help="Log debug output to stderr")


def main(argv: list[str] | None = None) -> None:
    """Terminal trainer.

    An optional "play" subcommand is accepted for symmetry with the web
    runner; omitting it runs the same behaviour.
    """
    args_in = list(sys.argv[1:] if argv is None else argv)

    first_non_flag = next((t for t in args_in if not t.startswith("-")), None)
    if first_non_flag == "play":
        args_in.remove("play")

    parser = argparse.ArgumentParser(prog="pokeracademy", description="Flop hand-reading, outs and pot-odds trainer")
    _add_play_args(parser)
    args = parser.parse_args(args_in)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        run_play(
            seed=args.seed,
            rounds=max(1, args.rounds),
            mode=Mode(args.mode),
            no_color=args.no_color,
        )
    except (KeyboardInterrupt, EOFError):
        raise SystemExit(130) from None


if __name__ == "__main__":
    main()
