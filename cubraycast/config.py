"""Scene configuration: textures, colours, map grid and player start."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

PLAYER_DIRECTIONS = "NSEW"


class TexId(IntEnum):
    """Index of a wall texture."""

    NO = 0
    SO = 1
    WE = 2
    EA = 3


class ElementId(IntEnum):
    """Identifier found at the start of an element line."""

    NONE = 0
    NO = 1
    SO = 2
    WE = 3
    EA = 4
    F = 5
    C = 6


@dataclass(frozen=True)
class Rgb:
    """A colour with channels in 0..255."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            channel = getattr(self, name)
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel {name} out of range: {channel}")

    @property
    def value(self) -> int:
        """The colour packed as 0xRRGGBB."""
        return (self.r << 16) | (self.g << 8) | self.b


@dataclass
class Player:
    """Player start cell and facing direction (one of N, S, E, W)."""

    x: int
    y: int
    dir: str

    def __post_init__(self) -> None:
        if len(self.dir) != 1 or self.dir not in PLAYER_DIRECTIONS:
            raise ValueError(f"invalid player direction: {self.dir!r}")


@dataclass
class MapGrid:
    """Rows of map characters; rows are padded with spaces to equal width."""

    rows: list[str] = field(default_factory=list)

    @property
    def h(self) -> int:
        return len(self.rows)

    @property
    def w(self) -> int:
        return max((len(row) for row in self.rows), default=0)

    def cell(self, x: int, y: int) -> str:
        """Return the character at column ``x``, row ``y``."""
        if y < 0 or y >= len(self.rows) or x < 0 or x >= len(self.rows[y]):
            raise IndexError(f"cell ({x}, {y}) is outside the map")
        return self.rows[y][x]


@dataclass
class Config:
    """Everything read from a .cub scene file."""

    tex_paths: list[str | None] = field(default_factory=lambda: [None] * len(TexId))
    floor: Rgb | None = None
    ceil: Rgb | None = None
    map: MapGrid = field(default_factory=MapGrid)
    player: Player | None = None