"""Command line entry point for running a match."""

from __future__ import annotations

import argparse
import random
import sys

from .bots import AbstainingBot, HumanPlayer, ShootOtherBot
from .game import Game


def _read_line() -> str:
    return input()


def main(argv: list[str] | None = None) -> int:
    """Run one match between the built-in bot and either the second bot or a human."""
    parser = argparse.ArgumentParser(
        prog="buckshot", description="Play a best-of-three match of shotgun roulette."
    )
    parser.add_argument("--human", action="store_true", help="play as player 2 at the keyboard")
    parser.add_argument(
        "--no-pause", action="store_true", help="do not wait for ENTER between turns"
    )
    parser.add_argument("--debug", action="store_true", help="show the shells in the gun")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random generator")
    args = parser.parse_args(argv)

    output = sys.stdout
    if args.human:
        player2 = HumanPlayer(input_func=_read_line, output=output)
        pause = None if args.no_pause else _read_line
    else:
        player2 = ShootOtherBot()
        pause = None

    game = Game(
        AbstainingBot(),
        player2,
        rng=random.Random(args.seed),
        output=output,
        debug=args.debug,
        pause=pause,
    )
    try:
        game.play()
    except (EOFError, KeyboardInterrupt):
        output.write("\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())