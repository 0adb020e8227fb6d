"""Console entry point: seat two players and play one game."""

from __future__ import annotations

import argparse
import logging
import random
import sys

from checkie.core.enums import Color
from checkie.core.errors import CheckersError
from checkie.game.controller import TurnController
from checkie.game.game import CheckersGame, TurnRecord
from checkie.settings import PLAYER_KINDS, AppSettings, make_player

_LOGGER = logging.getLogger(__name__)


def build_parser(defaults: AppSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="checkie",
        description="Play a game of checkers between two configurable players.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--light", choices=PLAYER_KINDS, default=defaults.light_player)
    parser.add_argument("--dark", choices=PLAYER_KINDS, default=defaults.dark_player)
    parser.add_argument("--depth", type=int, default=defaults.depth)
    parser.add_argument(
        "--evaluator", choices=("material", "positional"), default=defaults.evaluator
    )
    parser.add_argument("--workers", type=int, default=defaults.workers)
    parser.add_argument("--seed", type=int, default=defaults.seed)
    parser.add_argument("--max-turns", type=int, default=defaults.max_turns)
    parser.add_argument("-q", "--quiet", action="store_true", help="only print the result")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def _print_turn(record: TurnRecord, controller: TurnController) -> None:
    print(f"{record.color}: {record.action}")
    print(repr(controller.board))
    print()


def main(argv: list[str] | None = None) -> int:
    """Launch one game; returns the process exit status."""
    settings = AppSettings.from_env()
    args = build_parser(settings).parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings.light_player = args.light
    settings.dark_player = args.dark
    settings.depth = args.depth
    settings.evaluator = args.evaluator
    settings.workers = args.workers
    settings.seed = args.seed
    settings.max_turns = args.max_turns

    rng = random.Random(settings.seed)
    try:
        light = make_player(settings.light_player, Color.LIGHT, settings, rng)
        dark = make_player(settings.dark_player, Color.DARK, settings, rng)
        game = CheckersGame(
            light, dark, TurnController(idle_limit=settings.idle_limit)
        )
        if not args.quiet:
            print(repr(game.controller.board))
            print()
            game.events.on_turn.append(_print_turn)
        result = game.run(max_turns=settings.max_turns)
    except (CheckersError, ValueError) as exc:
        _LOGGER.error("%s", exc)
        return 2
    except (KeyboardInterrupt, EOFError):
        print("\ngame aborted", file=sys.stderr)
        return 130

    print(f"{result.name} after {game.turns} turns")
    return 0


if __name__ == "__main__":
    sys.exit(main())
