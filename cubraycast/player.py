"""Player camera: start orientation, movement with wall margin, rotation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum

from .config import MapGrid, Player

MOVE_SPEED = 0.05
ROT_SPEED = 0.03
MARGIN = 0.2
PLANE_LENGTH = 0.66

# direction -> (dir_x, dir_y, plane_x, plane_y)
_ORIENTATIONS: dict[str, tuple[float, float, float, float]] = {
    "N": (0.0, -1.0, PLANE_LENGTH, 0.0),
    "S": (0.0, 1.0, -PLANE_LENGTH, 0.0),
    "E": (1.0, 0.0, 0.0, PLANE_LENGTH),
    "W": (-1.0, 0.0, 0.0, -PLANE_LENGTH),
}


class Key(IntEnum):
    """Movement and turning keys the camera reacts to."""

    W = 0
    A = 1
    S = 2
    D = 3
    LEFT = 4
    RIGHT = 5


def _cell(grid: MapGrid, x: int, y: int) -> str:
    row = grid.rows[y]
    return row[x] if x < len(row) else " "


def can_move(grid: MapGrid, x: float, y: float) -> bool:
    """True if the point (x, y) lies inside the map on a non-wall, non-space cell."""
    if y < 0 or y >= grid.h or x < 0 or x >= grid.w:
        return False
    ch = _cell(grid, int(x), int(y))
    return ch not in ("1", " ")


@dataclass
class Camera:
    """Position, view direction and camera plane, plus the keys held down."""

    pos_x: float
    pos_y: float
    dir_x: float
    dir_y: float
    plane_x: float
    plane_y: float
    keys: set[Key] = field(default_factory=set)

    def move(self, grid: MapGrid, dx: float, dy: float) -> None:
        """Move by (dx, dy), each axis only if the wall margin stays clear."""
        mx = MARGIN if dx > 0 else -MARGIN
        my = MARGIN if dy > 0 else -MARGIN
        if dx != 0 and can_move(grid, self.pos_x + dx + mx, self.pos_y):
            self.pos_x += dx
        if dy != 0 and can_move(grid, self.pos_x, self.pos_y + dy + my):
            self.pos_y += dy

    def rotate(self, angle: float) -> None:
        """Rotate the view direction and camera plane by ``angle`` radians."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        self.dir_x, self.dir_y = (
            self.dir_x * cos_a - self.dir_y * sin_a,
            self.dir_x * sin_a + self.dir_y * cos_a,
        )
        self.plane_x, self.plane_y = (
            self.plane_x * cos_a - self.plane_y * sin_a,
            self.plane_x * sin_a + self.plane_y * cos_a,
        )

    def update(self, grid: MapGrid) -> None:
        """Apply one frame of movement and turning for the keys held down."""
        dx = 0.0
        dy = 0.0
        if Key.W in self.keys:
            dx += self.dir_x * MOVE_SPEED
            dy += self.dir_y * MOVE_SPEED
        if Key.S in self.keys:
            dx -= self.dir_x * MOVE_SPEED
            dy -= self.dir_y * MOVE_SPEED
        if Key.A in self.keys:
            dx += self.dir_y * MOVE_SPEED
            dy -= self.dir_x * MOVE_SPEED
        if Key.D in self.keys:
            dx -= self.dir_y * MOVE_SPEED
            dy += self.dir_x * MOVE_SPEED
        if dx != 0 or dy != 0:
            self.move(grid, dx, dy)
        if Key.LEFT in self.keys:
            self.rotate(-ROT_SPEED)
        if Key.RIGHT in self.keys:
            self.rotate(ROT_SPEED)


def camera_for_player(player: Player) -> Camera:
    """Camera centred in the player's start cell, facing the start direction."""
    dir_x, dir_y, plane_x, plane_y = _ORIENTATIONS[player.dir]
    return Camera(
        pos_x=player.x + 0.5,
        pos_y=player.y + 0.5,
        dir_x=dir_x,
        dir_y=dir_y,
        plane_x=plane_x,
        plane_y=plane_y,
    )