"""Command line entry point: validate a map and play it."""

from __future__ import annotations

import argparse
import sys

from solong.display import DEFAULT_ASSET_DIR, DisplayError, run_game
from solong.game import Game
from solong.mapfile import MapError, check_map_path, debug_report, load_map


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="solong",
        description="Collect every plant, then leave through the door.",
    )
    parser.add_argument("maps", nargs="*", metavar="MAP", help="a .ber map file")
    parser.add_argument(
        "--bonus",
        action="store_true",
        help="allow patrolling enemies and show the step counter",
    )
    parser.add_argument(
        "--debug", action="store_true", help="print the parsed map before playing"
    )
    parser.add_argument(
        "--assets",
        default=str(DEFAULT_ASSET_DIR),
        help="directory holding the sprite images",
    )
    return parser


def _fail(message: str) -> int:
    sys.stderr.write(f"Error\n{message}\n")
    return 1


def main(argv: list[str] | None = None) -> int:
    """Run the game on the map named on the command line."""
    args = _parser().parse_args(sys.argv[1:] if argv is None else argv)
    try:
        if len(args.maps) != 1:
            raise MapError("Wrong number of arguments")
        path = check_map_path(args.maps[0])
        info = load_map(path, allow_enemies=args.bonus)
        game = Game(info, bonus=args.bonus)
        if args.debug:
            sys.stdout.write(debug_report(info))
        run_game(game, args.assets)
    except (MapError, DisplayError) as exc:
        return _fail(str(exc))
    return 0


if __name__ == "__main__":
    sys.exit(main())