import pytest

from cubraycast.config import Config, ElementId, MapGrid, Player, Rgb, TexId


def test_tex_ids_match_texture_slots():
    cfg = Config()
    cfg.tex_paths[TexId.WE] = "west.xpm"
    assert cfg.tex_paths[2] == "west.xpm"
    assert len(cfg.tex_paths) == len(TexId)
    assert TexId(3) is TexId.EA
    assert [t.name for t in TexId] == ["NO", "SO", "WE", "EA"]


def test_element_ids_order():
    assert ElementId(0) is ElementId.NONE
    assert ElementId(5) is ElementId.F
    assert ElementId(6) is ElementId.C
    assert [e.name for e in ElementId] == ["NONE", "NO", "SO", "WE", "EA", "F", "C"]


def test_rgb_value_packs_channels():
    colour = Rgb(220, 100, 0)
    assert colour.value >> 16 == 220
    assert (colour.value >> 8) & 0xFF == 100
    assert colour.value & 0xFF == 0


def test_rgb_white_value():
    assert Rgb(255, 255, 255).value == 0xFFFFFF


@pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 300)])
def test_rgb_rejects_out_of_range(channels):
    with pytest.raises(ValueError):
        Rgb(*channels)


def test_player_rejects_bad_direction():
    with pytest.raises(ValueError):
        Player(1, 1, "X")


def test_player_keeps_fields():
    player = Player(3, 4, "W")
    assert (player.x, player.y, player.dir) == (3, 4, "W")


def test_config_defaults_are_unset():
    cfg = Config()
    assert cfg.tex_paths == [None, None, None, None]
    assert cfg.floor is None
    assert cfg.ceil is None
    assert cfg.player is None
    assert cfg.map.rows == []
    assert (cfg.map.w, cfg.map.h) == (0, 0)


def test_config_defaults_are_independent():
    first = Config()
    second = Config()
    first.tex_paths[0] = "north.xpm"
    assert second.tex_paths[0] is None


def test_mapgrid_dimensions_and_cells():
    grid = MapGrid(["111", "1N1", "111"])
    assert grid.w == 3
    assert grid.h == 3
    assert grid.cell(1, 1) == "N"
    assert grid.cell(0, 2) == "1"


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (3, 0), (0, 3)])
def test_mapgrid_cell_out_of_bounds(x, y):
    grid = MapGrid(["111", "101", "111"])
    with pytest.raises(IndexError):
        grid.cell(x, y)