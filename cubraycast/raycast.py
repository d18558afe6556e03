"""Casting one ray per screen column through the map grid (DDA)."""

from __future__ import annotations

from dataclasses import dataclass

from .config import MapGrid, TexId
from .player import Camera

WIN_W = 1280
WIN_H = 720
_FAR = 1e30


@dataclass
class Ray:
    """State of a ray walking the grid and the wall it hit."""

    ray_dir_x: float
    ray_dir_y: float
    map_x: int
    map_y: int
    delta_dist_x: float
    delta_dist_y: float
    side_dist_x: float = 0.0
    side_dist_y: float = 0.0
    perp_wall_dist: float = 0.0
    step_x: int = 0
    step_y: int = 0
    side: int = 0
    tex_idx: TexId = TexId.NO


def is_wall(grid: MapGrid, mx: int, my: int) -> bool:
    """True for wall and space cells and for anything outside the map."""
    if my < 0 or my >= grid.h or mx < 0 or mx >= grid.w:
        return True
    row = grid.rows[my]
    ch = row[mx] if mx < len(row) else " "
    return ch in ("1", " ")


def ray_init(camera: Camera, x: int, width: int = WIN_W) -> Ray:
    """Start the ray for screen column ``x`` of a screen ``width`` pixels wide."""
    cam_x = 2.0 * x / float(width) - 1.0
    dir_x = camera.dir_x + camera.plane_x * cam_x
    dir_y = camera.dir_y + camera.plane_y * cam_x
    return Ray(
        ray_dir_x=dir_x,
        ray_dir_y=dir_y,
        map_x=int(camera.pos_x),
        map_y=int(camera.pos_y),
        delta_dist_x=_FAR if dir_x == 0 else abs(1.0 / dir_x),
        delta_dist_y=_FAR if dir_y == 0 else abs(1.0 / dir_y),
    )


def dda_init(camera: Camera, ray: Ray) -> Ray:
    """Set the step directions and distances to the first grid lines."""
    if ray.ray_dir_x < 0:
        ray.step_x = -1
        ray.side_dist_x = (camera.pos_x - ray.map_x) * ray.delta_dist_x
    else:
        ray.step_x = 1
        ray.side_dist_x = (ray.map_x + 1.0 - camera.pos_x) * ray.delta_dist_x
    if ray.ray_dir_y < 0:
        ray.step_y = -1
        ray.side_dist_y = (camera.pos_y - ray.map_y) * ray.delta_dist_y
    else:
        ray.step_y = 1
        ray.side_dist_y = (ray.map_y + 1.0 - camera.pos_y) * ray.delta_dist_y
    return ray


def dda_run(grid: MapGrid, ray: Ray) -> Ray:
    """Step the ray cell by cell until it enters a wall; set the wall distance."""
    while True:
        if ray.side_dist_x < ray.side_dist_y:
            ray.side_dist_x += ray.delta_dist_x
            ray.map_x += ray.step_x
            ray.side = 0
        else:
            ray.side_dist_y += ray.delta_dist_y
            ray.map_y += ray.step_y
            ray.side = 1
        if is_wall(grid, ray.map_x, ray.map_y):
            break
    if ray.side == 0:
        ray.perp_wall_dist = ray.side_dist_x - ray.delta_dist_x
    else:
        ray.perp_wall_dist = ray.side_dist_y - ray.delta_dist_y
    return ray


def _texture_for(ray: Ray) -> TexId:
    if ray.side == 1 and ray.step_y < 0:
        return TexId.NO
    if ray.side == 1 and ray.step_y > 0:
        return TexId.SO
    if ray.side == 0 and ray.step_x > 0:
        return TexId.EA
    return TexId.WE


def cast_ray(camera: Camera, grid: MapGrid, x: int, width: int = WIN_W) -> Ray:
    """Cast the ray for column ``x`` and record which wall texture it hit."""
    ray = ray_init(camera, x, width)
    dda_init(camera, ray)
    dda_run(grid, ray)
    ray.tex_idx = _texture_for(ray)
    return ray