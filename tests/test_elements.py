import pytest

from cubraycast.config import Config, ElementId, Rgb, TexId
from cubraycast.elements import (
    parse_color_line,
    parse_elements,
    parse_tex_line,
    validate_cfg_complete,
)
from cubraycast.errors import CubError


def test_tex_line_sets_path():
    cfg = Config()
    parse_tex_line(cfg, "NO ./path_to_the_north_texture", ElementId.NO)
    assert cfg.tex_paths[TexId.NO] == "./path_to_the_north_texture"


def test_tex_line_trims_surrounding_blanks():
    cfg = Config()
    parse_tex_line(cfg, "  EA \t ./east.xpm \t ", ElementId.EA)
    assert cfg.tex_paths[TexId.EA] == "./east.xpm"


def test_tex_line_twice():
    cfg = Config()
    parse_tex_line(cfg, "SO a.xpm", ElementId.SO)
    with pytest.raises(CubError, match="texture set twice"):
        parse_tex_line(cfg, "SO b.xpm", ElementId.SO)


def test_tex_line_empty_path():
    with pytest.raises(CubError, match="empty texture path"):
        parse_tex_line(Config(), "WE   ", ElementId.WE)


def test_tex_line_bad_id():
    with pytest.raises(CubError, match="bad id"):
        parse_tex_line(Config(), "F 1,2,3", ElementId.F)


def test_color_line_floor_and_ceiling():
    cfg = Config()
    parse_color_line(cfg, "F 220,100,0", ElementId.F)
    parse_color_line(cfg, "   C 10,20,30  ", ElementId.C)
    assert cfg.floor == Rgb(220, 100, 0)
    assert cfg.ceil == Rgb(10, 20, 30)


@pytest.mark.parametrize(
    "line",
    ["F 256,0,0", "F 1, 2,3", "F 1,2", "F -1,2,3", "F 1,2,3x", "F 1,,3", "F 1,2,3,"],
)
def test_color_line_invalid(line):
    with pytest.raises(CubError, match="invalid rgb format"):
        parse_color_line(Config(), line, ElementId.F)


def test_color_line_empty():
    with pytest.raises(CubError, match="empty rgb"):
        parse_color_line(Config(), "C   ", ElementId.C)


def test_color_line_twice():
    cfg = Config()
    parse_color_line(cfg, "F 1,2,3", ElementId.F)
    with pytest.raises(CubError, match="floor color set twice"):
        parse_color_line(cfg, "F 4,5,6", ElementId.F)
    parse_color_line(cfg, "C 1,2,3", ElementId.C)
    with pytest.raises(CubError, match="ceiling color set twice"):
        parse_color_line(cfg, "C 4,5,6", ElementId.C)


def test_color_line_bad_id():
    with pytest.raises(CubError, match="bad id"):
        parse_color_line(Config(), "NO x", ElementId.NO)


def test_parse_elements_full_and_ignores_map_part():
    lines = [
        "NO n.xpm",
        "",
        "SO s.xpm",
        "WE w.xpm",
        "   ",
        "EA e.xpm",
        "F 0,0,0",
        "C 255,255,255",
        "111",
        "garbage",
    ]
    cfg = parse_elements(Config(), lines, 8)
    assert cfg.tex_paths == ["n.xpm", "s.xpm", "w.xpm", "e.xpm"]
    assert cfg.floor == Rgb(0, 0, 0)
    assert cfg.ceil == Rgb(255, 255, 255)
    assert validate_cfg_complete(cfg) is cfg


def test_parse_elements_invalid_line():
    with pytest.raises(CubError, match="invalid line in elements"):
        parse_elements(Config(), ["NO a", "X foo"], 2)


@pytest.mark.parametrize(
    "drop, message",
    [
        (0, "missing NO texture"),
        (1, "missing SO texture"),
        (2, "missing WE texture"),
        (3, "missing EA texture"),
        (4, "missing floor color"),
        (5, "missing ceiling color"),
    ],
)
def test_validate_missing(drop, message):
    lines = ["NO a", "SO b", "WE c", "EA d", "F 1,2,3", "C 4,5,6"]
    del lines[drop]
    cfg = parse_elements(Config(), lines, len(lines))
    with pytest.raises(CubError, match=message):
        validate_cfg_complete(cfg)