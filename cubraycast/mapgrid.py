"""Building and validating the map grid of a scene."""

from __future__ import annotations

from .config import PLAYER_DIRECTIONS, Config, MapGrid, Player
from .errors import CubError

_WHITESPACE = " \t\n\v\f\r"
_ALLOWED = frozenset("01 " + PLAYER_DIRECTIONS)
_NEIGHBOURS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def is_line_empty(line: str | None) -> bool:
    """True if the line is missing, empty or only whitespace."""
    if not line:
        return True
    return all(ch in _WHITESPACE for ch in line)


def _count_map_lines(lines: list[str], map_start: int) -> int:
    if map_start < 0:
        return 0
    tail = lines[map_start:]
    count = 0
    while count < len(tail) and not is_line_empty(tail[count]):
        count += 1
    if any(not is_line_empty(line) for line in tail[count:]):
        raise CubError("Map is separated by empty lines")
    return count


def pad_grid(grid: list[str], w: int) -> list[str]:
    """Return the rows with those shorter than ``w`` padded with spaces."""
    if not grid or w <= 0:
        raise ValueError("pad_grid needs rows and a positive width")
    if any(row is None for row in grid):
        raise ValueError("pad_grid got a missing row")
    return [row.ljust(w) for row in grid]


def parse_map_grid(cfg: Config, lines: list[str], map_start: int) -> Config:
    """Copy the map lines into ``cfg.map``, padded to equal width; returns ``cfg``."""
    h = _count_map_lines(lines, map_start)
    if h <= 0:
        raise CubError("empty map")
    rows = lines[map_start:map_start + h]
    w = max(len(row) for row in rows)
    cfg.map = MapGrid(pad_grid(rows, w))
    return cfg


def parse_map_validate_player(cfg: Config) -> Config:
    """Check map characters, find the single player and replace it by '0'."""
    if cfg is None or not cfg.map.rows or cfg.map.w <= 0:
        raise CubError("validate map: bad args")
    player: Player | None = None
    new_rows = []
    for y, row in enumerate(cfg.map.rows):
        cells = list(row)
        for x, ch in enumerate(cells):
            if ch not in _ALLOWED:
                raise CubError("invalid map char")
            if ch in PLAYER_DIRECTIONS:
                if player is not None:
                    raise CubError("multiple players")
                player = Player(x, y, ch)
                cells[x] = "0"
        new_rows.append("".join(cells))
    if player is None:
        raise CubError("missing player")
    cfg.map = MapGrid(new_rows)
    cfg.player = player
    return cfg


def _cell_or_space(grid: list[str], x: int, y: int) -> str:
    row = grid[y]
    return row[x] if x < len(row) else " "


def flood_escapes(grid: list[str], w: int, h: int, x: int, y: int) -> bool:
    """True if, walking through non-wall cells from (x, y), a space or the edge is reached."""
    visited: set[tuple[int, int]] = set()
    stack = [(x, y)]
    while stack:
        cx, cy = stack.pop()
        if cx < 0 or cy < 0 or cx >= w or cy >= h:
            return True
        ch = _cell_or_space(grid, cx, cy)
        if ch == " ":
            return True
        if ch == "1" or (cx, cy) in visited:
            continue
        visited.add((cx, cy))
        stack.extend((cx + dx, cy + dy) for dx, dy in _NEIGHBOURS)
    return False


def _is_open(cfg: Config, x: int, y: int) -> bool:
    if x < 0 or y < 0 or x >= cfg.map.w or y >= cfg.map.h:
        return True
    return _cell_or_space(cfg.map.rows, x, y) == " "


def check_all_zeros(cfg: Config) -> bool:
    """True if any floor cell touches a space or the map edge."""
    return any(
        ch == "0" and any(_is_open(cfg, x + dx, y + dy) for dx, dy in _NEIGHBOURS)
        for y, row in enumerate(cfg.map.rows)
        for x, ch in enumerate(row)
    )


def map_check_closed(cfg: Config) -> Config:
    """Raise unless the map is closed by walls; returns ``cfg``."""
    if cfg.player is None:
        raise CubError("missing player")
    grid = cfg.map
    if flood_escapes(grid.rows, grid.w, grid.h, cfg.player.x, cfg.player.y):
        raise CubError("Map is not closed")
    if check_all_zeros(cfg):
        raise CubError("Map is not closed")
    return cfg