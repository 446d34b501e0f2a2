"""Textured raycasting maze explorer driven by .cub scene files and XPM textures."""

__version__ = "0.1.0"