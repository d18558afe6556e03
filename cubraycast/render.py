"""Software frame buffer and the wall, ceiling and floor renderer."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .config import Config, MapGrid
from .player import Camera
from .raycast import Ray, cast_ray

_MIN_DIST = 1e-9


class Image:
    """A width x height grid of 0xRRGGBB pixels stored row by row."""

    def __init__(self, width: int, height: int, pixels: Sequence[int] | None = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid image size {width}x{height}")
        self.width = width
        self.height = height
        if pixels is None:
            self.pixels = [0] * (width * height)
        else:
            self.pixels = list(pixels)
            if len(self.pixels) != width * height:
                raise ValueError("pixel count does not match image size")

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set a pixel; points outside the image are ignored."""
        if self._inside(x, y):
            self.pixels[y * self.width + x] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """Return a pixel; raises IndexError outside the image."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        return self.pixels[y * self.width + x]

    def fill_row(self, y: int, color: int) -> None:
        """Set every pixel of row ``y``."""
        start = y * self.width
        self.pixels[start:start + self.width] = [color & 0xFFFFFFFF] * self.width


def render_ceiling_floor(screen: Image, cfg: Config) -> Image:
    """Fill the top half with the ceiling colour and the rest with the floor colour."""
    if cfg.ceil is None or cfg.floor is None:
        raise ValueError("ceiling and floor colours must be set")
    half = screen.height // 2
    for y in range(screen.height):
        screen.fill_row(y, cfg.ceil.value if y < half else cfg.floor.value)
    return screen


def draw_column(
    screen: Image, textures: Sequence[Image], camera: Camera, x: int, ray: Ray
) -> None:
    """Draw the textured wall slice hit by ``ray`` into column ``x``."""
    h = screen.height
    perp = ray.perp_wall_dist if ray.perp_wall_dist > 0 else _MIN_DIST
    line_h = int(h / perp)
    draw_start = max(-(line_h // 2) + h // 2, 0)
    draw_end = min(line_h // 2 + h // 2, h - 1)

    tex = textures[ray.tex_idx]
    if ray.side == 0:
        wall_x = camera.pos_y + ray.perp_wall_dist * ray.ray_dir_y
    else:
        wall_x = camera.pos_x + ray.perp_wall_dist * ray.ray_dir_x
    wall_x -= math.floor(wall_x)
    tex_x = int(wall_x * tex.width)
    if (ray.side == 0 and ray.ray_dir_x < 0) or (ray.side == 1 and ray.ray_dir_y > 0):
        tex_x = tex.width - tex_x - 1

    step = tex.height / max(line_h, 1)
    tex_pos = (draw_start - h // 2 + line_h // 2) * step
    for y in range(draw_start, draw_end + 1):
        tex_y = int(tex_pos) % tex.height
        tex_pos += step
        color = tex.get_pixel(tex_x, tex_y)
        if ray.side == 1:
            color = (color >> 1) & 0x7F7F7F
        screen.put_pixel(x, y, color)


def render_walls(
    screen: Image, textures: Sequence[Image], camera: Camera, grid: MapGrid
) -> Image:
    """Cast a ray for every screen column and draw its wall slice."""
    for x in range(screen.width):
        ray = cast_ray(camera, grid, x, screen.width)
        draw_column(screen, textures, camera, x, ray)
    return screen


def render_frame(
    screen: Image, textures: Sequence[Image], camera: Camera, cfg: Config
) -> Image:
    """Draw a whole frame: ceiling and floor, then the walls."""
    render_ceiling_floor(screen, cfg)
    render_walls(screen, textures, camera, cfg.map)
    return screen