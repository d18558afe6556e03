"""Command line entry point: validate the argument, parse the scene, play."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .errors import CubError, report
from .game import game_start
from .parser import parse_cub

EXTENSION = ".cub"


def check_extension(path: str) -> bool:
    """True if the path ends in '.cub' with at least one character before it."""
    return len(path) > len(EXTENSION) and path.endswith(EXTENSION)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the scene file named by the single argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        report("usage: cub3D map.cub")
        return 1
    path = args[0]
    if not check_extension(path):
        report("invalid file extension")
        return 1
    try:
        cfg = parse_cub(path)
    except CubError as exc:
        report(exc.message)
        return 1
    return game_start(cfg)


if __name__ == "__main__":
    sys.exit(main())