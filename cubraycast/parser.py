"""Loading a whole .cub scene into a Config."""

from __future__ import annotations

import os

from .config import Config
from .elements import parse_elements, validate_cfg_complete
from .mapgrid import map_check_closed, parse_map_grid, parse_map_validate_player
from .scan import find_map_start, read_file_to_str, split_lines


def parse_cub_text(text: str) -> Config:
    """Parse the contents of a scene file; raises CubError when invalid."""
    lines = split_lines(text)
    map_start = find_map_start(lines)
    cfg = Config()
    parse_elements(cfg, lines, map_start)
    validate_cfg_complete(cfg)
    parse_map_grid(cfg, lines, map_start)
    parse_map_validate_player(cfg)
    map_check_closed(cfg)
    return cfg


def parse_cub(path: str | os.PathLike[str]) -> Config:
    """Read and parse a scene file; raises CubError when it cannot be used."""
    return parse_cub_text(read_file_to_str(path))