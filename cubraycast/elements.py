"""Parsing of the element lines: wall textures and floor/ceiling colours."""

from __future__ import annotations

from .config import Config, ElementId, Rgb, TexId
from .errors import CubError
from .scan import parse_id, skip_spaces

_DIGITS = "0123456789"

_TEX_FOR_ID = {
    ElementId.NO: TexId.NO,
    ElementId.SO: TexId.SO,
    ElementId.WE: TexId.WE,
    ElementId.EA: TexId.EA,
}


def _extract_tex_path(line: str) -> str:
    i = skip_spaces(line) + 2
    i = skip_spaces(line, i)
    return line[i:].strip(" \t")


def parse_tex_line(cfg: Config, line: str, element_id: ElementId) -> Config:
    """Store the texture path declared by ``line``; returns ``cfg``."""
    if cfg is None or line is None:
        raise CubError("parse_tex_line: null")
    tex = _TEX_FOR_ID.get(element_id)
    if tex is None:
        raise CubError("parse_tex_line: bad id")
    if cfg.tex_paths[tex] is not None:
        raise CubError("texture set twice")
    path = _extract_tex_path(line)
    if not path:
        raise CubError("empty texture path")
    cfg.tex_paths[tex] = path
    return cfg


def _read_channel(line: str, i: int) -> tuple[int, int]:
    if i >= len(line) or line[i] not in _DIGITS:
        raise CubError("invalid rgb format")
    value = 0
    while i < len(line) and line[i] in _DIGITS:
        value = value * 10 + int(line[i])
        if value > 255:
            raise CubError("invalid rgb format")
        i += 1
    return value, i


def _expect(line: str, i: int, ch: str) -> int:
    if i >= len(line) or line[i] != ch:
        raise CubError("invalid rgb format")
    return i + 1


def _parse_rgb_tail(line: str, start: int) -> Rgb:
    r, i = _read_channel(line, start)
    i = _expect(line, i, ",")
    g, i = _read_channel(line, i)
    i = _expect(line, i, ",")
    b, i = _read_channel(line, i)
    if skip_spaces(line, i) != len(line):
        raise CubError("invalid rgb format")
    return Rgb(r, g, b)


def parse_color_line(cfg: Config, line: str, element_id: ElementId) -> Config:
    """Store the floor or ceiling colour declared by ``line``; returns ``cfg``."""
    if cfg is None or line is None:
        raise CubError("parse_color_line: null")
    if element_id not in (ElementId.F, ElementId.C):
        raise CubError("parse_color_line: bad id")
    if element_id is ElementId.F and cfg.floor is not None:
        raise CubError("floor color set twice")
    if element_id is ElementId.C and cfg.ceil is not None:
        raise CubError("ceiling color set twice")
    i = skip_spaces(line) + 1
    i = skip_spaces(line, i)
    if i >= len(line):
        raise CubError("empty rgb")
    colour = _parse_rgb_tail(line, i)
    if element_id is ElementId.F:
        cfg.floor = colour
    else:
        cfg.ceil = colour
    return cfg


def parse_elements(cfg: Config, lines: list[str], map_start: int) -> Config:
    """Parse every non-blank line before ``map_start``; returns ``cfg``."""
    if cfg is None or lines is None:
        raise CubError("parse_elements: null")
    for line in lines[:max(map_start, 0)]:
        if skip_spaces(line) == len(line):
            continue
        element = parse_id(line)
        if element is ElementId.NONE:
            raise CubError("invalid line in elements")
        if element in _TEX_FOR_ID:
            parse_tex_line(cfg, line, element)
        else:
            parse_color_line(cfg, line, element)
    return cfg


def validate_cfg_complete(cfg: Config) -> Config:
    """Check that all textures and both colours are set; returns ``cfg``."""
    if cfg is None:
        raise CubError("validate_cfg_complete: null")
    for tex in TexId:
        if cfg.tex_paths[tex] is None:
            raise CubError(f"missing {tex.name} texture")
    if cfg.floor is None:
        raise CubError("missing floor color")
    if cfg.ceil is None:
        raise CubError("missing ceiling color")
    return cfg