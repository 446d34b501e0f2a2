"""Error type raised for invalid scenes, maps and textures."""

from __future__ import annotations

import os


class CubError(Exception):
    """A fatal problem with the scene, carrying an errno-style code."""

    def __init__(self, message, code):
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        return self.message


def format_error(error):
    """Return the text reported on standard error for ``error``."""
    return (
        "Error\n"
        f"{error.message}\n"
        f"Error code: {error.code} - {os.strerror(error.code)}\n"
    )