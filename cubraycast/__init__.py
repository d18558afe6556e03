"""Grid-map raycasting engine: .cub scene parsing, camera, renderer and game window."""

__version__ = "0.1.0"
__all__ = ["__version__"]