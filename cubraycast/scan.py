"""Reading a scene file and locating its element lines and map."""

from __future__ import annotations

import os

from .config import ElementId
from .errors import CubError

_BLANKS = " \t"
_MAP_TILES = frozenset("01NSEW")

_ID_PREFIXES: tuple[tuple[str, ElementId], ...] = (
    ("NO", ElementId.NO),
    ("SO", ElementId.SO),
    ("WE", ElementId.WE),
    ("EA", ElementId.EA),
    ("F", ElementId.F),
    ("C", ElementId.C),
)


def skip_spaces(s: str | None, i: int = 0) -> int:
    """Return the first index at or after ``i`` that is not a space or tab."""
    if s is None:
        return i
    while i < len(s) and s[i] in _BLANKS:
        i += 1
    return i


def parse_id(line: str | None) -> ElementId:
    """Identify the element a line declares, or ElementId.NONE."""
    if line is None:
        return ElementId.NONE
    rest = line[skip_spaces(line):]
    for prefix, element in _ID_PREFIXES:
        n = len(prefix)
        if rest.startswith(prefix) and len(rest) > n and rest[n] in _BLANKS:
            return element
    return ElementId.NONE


def is_map_line(line: str | None) -> bool:
    """True if the line holds only spaces and map tiles, with at least one tile."""
    if line is None:
        return False
    has_tile = False
    for ch in line:
        if ch in _MAP_TILES:
            has_tile = True
        elif ch != " ":
            return False
    return has_tile


def find_map_start(lines: list[str]) -> int:
    """Return the index of the first map line, skipping blanks and elements."""
    for index, line in enumerate(lines):
        if skip_spaces(line) == len(line):
            continue
        if parse_id(line) is not ElementId.NONE:
            continue
        if is_map_line(line):
            return index
        raise CubError("unknown line before map")
    raise CubError("no map found")


def split_lines(text: str) -> list[str]:
    """Split on newlines, keeping empty lines and the piece after a final newline."""
    return text.split("\n")


def read_file_to_str(path: str | os.PathLike[str]) -> str:
    """Read a whole file as text; content stops at the first NUL character."""
    try:
        with open(path, encoding="utf-8", errors="surrogateescape") as fh:
            text = fh.read()
    except OSError as exc:
        raise CubError(f"{os.fspath(path)}: {exc.strerror or exc}") from exc
    return text.partition("\0")[0]