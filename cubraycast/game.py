"""Game window, texture loading, input handling and the main loop."""

from __future__ import annotations

import os
import re
from collections.abc import Sequence

from .config import Config, TexId
from .errors import CubError, report
from .player import Camera, Key, camera_for_player
from .raycast import WIN_H, WIN_W
from .render import Image, render_frame

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

TITLE = "cub3D"

# X11 keysyms and pygame key codes both map to the same actions.
_X11_ESC = 65307
_X11_LEFT = 65361
_X11_RIGHT = 65363

KEYMAP: dict[int, Key] = {
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    _X11_LEFT: Key.LEFT,
    _X11_RIGHT: Key.RIGHT,
}
ESCAPE_KEYS = frozenset({pygame.K_ESCAPE, _X11_ESC})

_QUOTED = re.compile(r'"((?:[^"\\]|\\.)*)"')
_XPM_KEYS = frozenset({"c", "m", "s", "g", "g4"})
_NAMED_COLOURS = {
    "black": 0x000000,
    "white": 0xFFFFFF,
    "red": 0xFF0000,
    "green": 0x00FF00,
    "blue": 0x0000FF,
    "yellow": 0xFFFF00,
    "cyan": 0x00FFFF,
    "magenta": 0xFF00FF,
    "gray": 0xBEBEBE,
    "grey": 0xBEBEBE,
    "none": 0x000000,
}


def _parse_colour(spec: str) -> int:
    spec = spec.strip()
    if spec.startswith("#"):
        digits = spec[1:]
        if not digits or len(digits) % 3 or any(c not in "0123456789abcdefABCDEF" for c in digits):
            raise CubError("texture load failed")
        n = len(digits) // 3
        channels = [int(digits[i * n:(i + 1) * n], 16) for i in range(3)]
        # keep the most significant 8 bits of each channel
        channels = [c >> (4 * n - 8) if n > 2 else (c * 17 if n == 1 else c) for c in channels]
        return (channels[0] << 16) | (channels[1] << 8) | channels[2]
    colour = _NAMED_COLOURS.get(spec.lower().replace(" ", ""))
    if colour is None:
        raise CubError("texture load failed")
    return colour


def _colour_entry(rest: str) -> int:
    tokens = rest.split()
    specs: dict[str, str] = {}
    key: str | None = None
    words: list[str] = []
    for token in tokens:
        if token in _XPM_KEYS and (key is None or words):
            if key is not None:
                specs[key] = " ".join(words)
            key, words = token, []
        else:
            words.append(token)
    if key is not None:
        specs[key] = " ".join(words)
    for wanted in ("c", "g", "g4", "m"):
        if wanted in specs:
            return _parse_colour(specs[wanted])
    raise CubError("texture load failed")


def _parse_xpm(text: str) -> Image:
    strings = _QUOTED.findall(text)
    if not strings:
        raise CubError("texture load failed")
    try:
        header = [int(part) for part in strings[0].split()[:4]]
        width, height, ncolours, cpp = header
    except ValueError as exc:
        raise CubError("texture load failed") from exc
    if width <= 0 or height <= 0 or ncolours <= 0 or cpp <= 0:
        raise CubError("texture load failed")
    colour_lines = strings[1:1 + ncolours]
    rows = strings[1 + ncolours:1 + ncolours + height]
    if len(colour_lines) != ncolours or len(rows) != height:
        raise CubError("texture load failed")
    palette = {line[:cpp]: _colour_entry(line[cpp:]) for line in colour_lines}
    pixels: list[int] = []
    for row in rows:
        if len(row) < width * cpp:
            raise CubError("texture load failed")
        for start in range(0, width * cpp, cpp):
            code = row[start:start + cpp]
            if code not in palette:
                raise CubError("texture load failed")
            pixels.append(palette[code])
    return Image(width, height, pixels)


def _load_with_pygame(path: str) -> Image:
    try:
        surface = pygame.image.load(path)
    except (pygame.error, OSError, FileNotFoundError) as exc:
        raise CubError("texture load failed") from exc
    width, height = surface.get_size()
    raw = pygame.image.tostring(surface, "RGB")
    pixels = [
        (raw[i] << 16) | (raw[i + 1] << 8) | raw[i + 2]
        for i in range(0, len(raw), 3)
    ]
    return Image(width, height, pixels)


def load_texture(path: str | os.PathLike[str]) -> Image:
    """Load one wall texture (XPM, or any format pygame reads)."""
    path = os.fspath(path)
    if path.lower().endswith(".xpm"):
        try:
            with open(path, encoding="utf-8", errors="replace") as fh:
                text = fh.read()
        except OSError as exc:
            raise CubError("texture load failed") from exc
        return _parse_xpm(text)
    return _load_with_pygame(path)


def load_textures(cfg: Config) -> list[Image]:
    """Load the four wall textures in NO, SO, WE, EA order."""
    textures = []
    for tex in TexId:
        path = cfg.tex_paths[tex]
        if path is None:
            raise CubError("texture load failed")
        textures.append(load_texture(path))
    return textures


class Game:
    """A running scene: configuration, camera, textures and frame buffer."""

    def __init__(
        self,
        cfg: Config,
        textures: Sequence[Image] | None = None,
        width: int = WIN_W,
        height: int = WIN_H,
    ) -> None:
        if cfg.player is None:
            raise CubError("missing player")
        self.cfg = cfg
        self.textures = list(textures) if textures is not None else load_textures(cfg)
        if len(self.textures) != len(TexId):
            raise CubError("texture load failed")
        self.camera: Camera = camera_for_player(cfg.player)
        self.screen = Image(width, height)
        self.running = True

    def close(self) -> None:
        """Stop the main loop."""
        self.running = False

    def key_press(self, key: int) -> None:
        """Mark a key as held; escape closes the game."""
        if key in ESCAPE_KEYS:
            self.close()
        action = KEYMAP.get(key)
        if action is not None:
            self.camera.keys.add(action)

    def key_release(self, key: int) -> None:
        """Mark a key as released."""
        action = KEYMAP.get(key)
        if action is not None:
            self.camera.keys.discard(action)

    def tick(self) -> Image:
        """Advance the player by one frame and render it."""
        self.camera.update(self.cfg.map)
        return render_frame(self.screen, self.textures, self.camera, self.cfg)

    def _surface(self) -> pygame.Surface:
        pixels = self.screen.pixels
        data = bytearray(3 * len(pixels))
        data[0::3] = bytes((p >> 16) & 0xFF for p in pixels)
        data[1::3] = bytes((p >> 8) & 0xFF for p in pixels)
        data[2::3] = bytes(p & 0xFF for p in pixels)
        return pygame.image.frombuffer(
            bytes(data), (self.screen.width, self.screen.height), "RGB"
        )

    def run(self) -> None:
        """Open the window and run the main loop until the game is closed."""
        try:
            pygame.init()
            window = pygame.display.set_mode((self.screen.width, self.screen.height))
        except pygame.error as exc:
            raise CubError("window setup failed") from exc
        pygame.display.set_caption(TITLE)
        try:
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.close()
                    elif event.type == pygame.KEYDOWN:
                        self.key_press(event.key)
                    elif event.type == pygame.KEYUP:
                        self.key_release(event.key)
                if not self.running:
                    break
                self.tick()
                window.blit(self._surface(), (0, 0))
                pygame.display.flip()
        finally:
            pygame.quit()


def game_start(cfg: Config) -> int:
    """Load textures, open the window and play; returns an exit status."""
    try:
        Game(cfg).run()
    except CubError as exc:
        report(exc.message)
        return 1
    return 0