"""
Command line entry point.

    sugoroku play PLAYER_LIST WORLD [--locale ja] [--min-dice 0]
    sugoroku world-to-tex WORLD [--locale ja]
"""

import argparse
import logging
import sys
from pathlib import Path

from sugoroku import __version__
from sugoroku.config.loader import load_session
from sugoroku.config.log import configure_logging
from sugoroku.config.settings import get_settings
from sugoroku.engine.errors import GameSystemError
from sugoroku.engine.locale import Locale
from sugoroku.export.tex import write_world_tex
from sugoroku.ui.console import run_console

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--locale",
        choices=[locale.value for locale in Locale],
        default=settings.locale.value,
        help=f"Language of game text (default: {settings.locale.value})",
    )

    parser = argparse.ArgumentParser(prog="sugoroku", description="Sugoroku")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="action", required=True)

    game = subparsers.add_parser("play", parents=[common], help="Play a game in the terminal")
    game.add_argument("player_list_file", type=Path, help="Path to the player list TOML file")
    game.add_argument("world_file", type=Path, help="Path to the world TOML file")
    game.add_argument(
        "--min-dice",
        type=int,
        choices=(0, 1),
        default=settings.min_dice,
        help=f"Smallest accepted die value (default: {settings.min_dice})",
    )

    tex = subparsers.add_parser("world-to-tex", parents=[common], help="Export a world file as a LaTeX document")
    tex.add_argument("world_file", type=Path, help="Path to the world TOML file")
    return parser


def main(argv: list[str] | None = None) -> int:
    configure_logging(get_settings())
    args = build_parser().parse_args(argv)

    try:
        if args.action == "play":
            session = load_session(
                args.player_list_file, args.world_file, locale=Locale(args.locale), min_dice=args.min_dice
            )
            run_console(session)
        elif args.action == "world-to-tex":
            output = write_world_tex(args.world_file, Locale(args.locale))
            print(output)
    except GameSystemError as exc:
        logger.error("%s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
