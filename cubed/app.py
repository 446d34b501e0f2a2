"""Window, input handling and the main loop of the viewer."""

from __future__ import annotations

import errno
import os
import sys
from array import array

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .errors import CubError, format_error  # noqa: E402
from .minimap import draw_minimap  # noqa: E402
from .parser import load_scene  # noqa: E402
from .raycast import Frame, render_scene  # noqa: E402

_TITLE = "cubed"
_MINIMAP_FLAG = "--minimap"
_USAGE = "cubed path/to/map.cub"
_CONTROLS = (
    "Controls:",
    "Move forward: W",
    "Move backward: S",
    "Strafe left: A",
    "Strafe right: D",
    "Look left: Left arrow",
    "Look right: Right arrow",
    "Exit: ESC",
)
_MOVES = {pygame.K_w: "W", pygame.K_s: "S", pygame.K_a: "A", pygame.K_d: "D"}
_TURNS = {pygame.K_LEFT: -1, pygame.K_RIGHT: 1}


def controls_text():
    """Return the help text listing the keyboard controls."""
    return "\n".join(_CONTROLS)


def handle_key(scene, key):
    """Apply a pressed key to ``scene``; return False when the viewer should quit."""
    if key in _MOVES:
        scene.move_player(_MOVES[key])
    elif key in _TURNS:
        scene.rotate_player(_TURNS[key])
    elif key == pygame.K_ESCAPE:
        return False
    return True


def render_frame(scene, bonus):
    """Render the view of ``scene``, with the minimap on top when ``bonus`` is set."""
    frame = Frame(scene.width, scene.height)
    render_scene(scene, frame)
    if bonus:
        draw_minimap(scene, frame)
    return frame


def _frame_bytes(frame: Frame) -> bytes:
    data = array("I", ((pixel << 8) & 0xFFFFFFFF for pixel in frame.pixels))
    if sys.byteorder == "little":
        data.byteswap()
    return data.tobytes()


def _show(screen, frame: Frame) -> None:
    image = pygame.image.frombuffer(
        _frame_bytes(frame), (frame.width, frame.height), "RGBX"
    )
    screen.blit(image, (0, 0))
    pygame.display.flip()


def _run(scene, bonus: bool) -> None:
    pygame.init()
    try:
        screen = pygame.display.set_mode((scene.width, scene.height), pygame.RESIZABLE)
        pygame.display.set_caption(_TITLE)
        pygame.key.set_repeat(200, 30)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    running = handle_key(scene, event.key) and running
                elif event.type == pygame.VIDEORESIZE:
                    scene.resize(event.w, event.h)
                    screen = pygame.display.set_mode(
                        (scene.width, scene.height), pygame.RESIZABLE
                    )
            if running:
                _show(screen, render_frame(scene, bonus))
                clock.tick(60)
    finally:
        pygame.quit()


def main(argv=None):
    """Load the scene named on the command line and show it; return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    bonus = _MINIMAP_FLAG in args
    paths = [arg for arg in args if arg != _MINIMAP_FLAG]
    try:
        if not paths:
            raise CubError(f"Missing argument. Try:\t{_USAGE}", errno.EINVAL)
        if len(paths) > 1:
            raise CubError(f"Too many arguments. Try:\t{_USAGE}", errno.EINVAL)
        scene = load_scene(paths[0])
    except CubError as exc:
        sys.stderr.write(format_error(exc))
        return exc.code
    print(controls_text())
    _run(scene, bonus)
    return 0