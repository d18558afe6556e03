import pytest

from cubraycast.config import MapGrid, Player, TexId
from cubraycast.player import camera_for_player
from cubraycast.raycast import cast_ray, dda_init, dda_run, is_wall, ray_init

ROOM = MapGrid(["11111", "10001", "10001", "10001", "11111"])
WIDTH = 64


def _centre(direction):
    return camera_for_player(Player(2, 2, direction))


def test_is_wall():
    assert is_wall(ROOM, 0, 0) is True
    assert is_wall(ROOM, 2, 2) is False
    assert is_wall(ROOM, -1, 2) is True
    assert is_wall(ROOM, 2, 5) is True
    assert is_wall(MapGrid(["1 1"]), 1, 0) is True


def test_centre_ray_follows_camera_direction():
    cam = _centre("N")
    ray = ray_init(cam, WIDTH // 2, WIDTH)
    assert (ray.ray_dir_x, ray.ray_dir_y) == pytest.approx((cam.dir_x, cam.dir_y))
    assert (ray.map_x, ray.map_y) == (2, 2)
    assert ray.delta_dist_x == 1e30


def test_leftmost_ray_is_dir_minus_plane():
    cam = _centre("E")
    ray = ray_init(cam, 0, WIDTH)
    assert ray.ray_dir_x == pytest.approx(cam.dir_x - cam.plane_x)
    assert ray.ray_dir_y == pytest.approx(cam.dir_y - cam.plane_y)


def test_dda_init_steps_follow_direction():
    cam = _centre("W")
    ray = dda_init(cam, ray_init(cam, 5, WIDTH))
    assert ray.step_x == (-1 if ray.ray_dir_x < 0 else 1)
    assert ray.step_y == (-1 if ray.ray_dir_y < 0 else 1)
    assert ray.side_dist_x >= 0 and ray.side_dist_y >= 0


def test_dda_run_hits_north_wall():
    cam = _centre("N")
    ray = dda_run(ROOM, dda_init(cam, ray_init(cam, WIDTH // 2, WIDTH)))
    assert (ray.map_x, ray.map_y) == (2, 0)
    assert ray.side == 1
    assert ray.perp_wall_dist == pytest.approx(1.5)


@pytest.mark.parametrize(
    "direction, texture",
    [("N", TexId.NO), ("S", TexId.SO), ("E", TexId.EA), ("W", TexId.WE)],
)
def test_cast_ray_texture(direction, texture):
    ray = cast_ray(_centre(direction), ROOM, WIDTH // 2, WIDTH)
    assert ray.tex_idx is texture


@pytest.mark.parametrize("direction", "NSEW")
def test_every_column_hits_a_wall(direction):
    cam = _centre(direction)
    for x in range(WIDTH):
        ray = cast_ray(cam, ROOM, x, WIDTH)
        assert is_wall(ROOM, ray.map_x, ray.map_y)
        assert ray.perp_wall_dist > 0