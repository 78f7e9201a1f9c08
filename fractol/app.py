"""The interactive viewer and the command that starts it."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

import numpy as np

from fractol.fractal import FractalKind
from fractol.fractal import render as render_fractal
from fractol.guides import events_guide, fractals_guide, general_guide
from fractol.keys import Key, MouseButton
from fractol.options import parse_args
from fractol.palette import Palette, default_palette
from fractol.view import DEFAULT_ITERATIONS, DEFAULT_JULIA_C, STEP, View, initial_view

WINDOW_TITLE = "fract-ol"


class Viewer:
    """State of the viewer and its reactions to keyboard and mouse events."""

    def __init__(
        self,
        kind: FractalKind,
        view: View | None = None,
        palette: Palette | None = None,
        max_iter: int = DEFAULT_ITERATIONS,
        julia_c: complex = DEFAULT_JULIA_C,
        stream: TextIO | None = None,
    ) -> None:
        self.kind = FractalKind(kind)
        self.view = view if view is not None else initial_view()
        self.palette = palette if palette is not None else default_palette()
        self.max_iter = max_iter
        self.julia_c = complex(julia_c)
        self.stream = stream
        self.movement = True
        self.running = True
        self.pixels: np.ndarray | None = None

    def render(self) -> np.ndarray:
        """Recompute every pixel and keep the result in ``pixels``."""
        self.pixels = render_fractal(
            self.view, self.kind, self.palette, self.max_iter, self.julia_c
        )
        return self.pixels

    def press_key(self, key: int) -> None:
        """React to a key; unknown keys print the list of controls."""
        try:
            key = Key(key)
        except ValueError:
            events_guide(self.stream)
            return
        if key is Key.ESC:
            self.running = False
            return
        if key is Key.PLUS:
            self.max_iter += STEP
        elif key is Key.MINUS:
            self.max_iter -= STEP
        elif key in (Key.UP, Key.DOWN, Key.LEFT, Key.RIGHT):
            self.view.move(key)
        elif key is Key.ENTER:
            self.view.zoom(1)
        elif key is Key.SPC:
            self.view.zoom(-1)
        elif key is Key.TAB:
            self.palette = self.palette.rotate()
        self.render()

    def mouse_motion(self, x: int, y: int) -> None:
        """While movement is on, steer the Julia constant with the pointer."""
        if self.kind is not FractalKind.JULIA or not self.movement:
            return
        if 0 <= x < self.view.width and 0 <= y < self.view.height:
            self.julia_c = self.view.to_complex(x, y)
            self.render()

    def mouse_click(self, button: int, x: int, y: int) -> None:
        """Scroll zooms around the pointer; left or right click toggles movement."""
        if button == MouseButton.SCROLL_UP:
            self.view.zoom(1, x, y)
            self.render()
        elif button == MouseButton.SCROLL_DOWN:
            self.view.zoom(-1, x, y)
            self.render()
        elif button in (MouseButton.LEFT_CLICK, MouseButton.RIGHT_CLICK):
            self.movement = not self.movement


def _key_map(pygame) -> dict[int, Key]:
    return {
        pygame.K_ESCAPE: Key.ESC,
        pygame.K_PLUS: Key.PLUS,
        pygame.K_KP_PLUS: Key.PLUS,
        pygame.K_MINUS: Key.MINUS,
        pygame.K_KP_MINUS: Key.MINUS,
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_RETURN: Key.ENTER,
        pygame.K_KP_ENTER: Key.ENTER,
        pygame.K_SPACE: Key.SPC,
        pygame.K_TAB: Key.TAB,
    }


def _to_rgb(pixels: np.ndarray) -> np.ndarray:
    rgb = np.stack(
        [(pixels >> 16) & 0xFF, (pixels >> 8) & 0xFF, pixels & 0xFF], axis=-1
    ).astype(np.uint8)
    return rgb.transpose(1, 0, 2)


def _run(viewer: Viewer) -> None:
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((viewer.view.width, viewer.view.height))
        pygame.display.set_caption(WINDOW_TITLE)
        keys = _key_map(pygame)
        viewer.render()
        shown = None
        while viewer.running:
            if viewer.pixels is not shown:
                shown = viewer.pixels
                screen.blit(pygame.surfarray.make_surface(_to_rgb(shown)), (0, 0))
                pygame.display.flip()
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                viewer.running = False
            elif event.type == pygame.KEYDOWN:
                viewer.press_key(keys.get(event.key, -1))
            elif event.type == pygame.MOUSEMOTION:
                viewer.mouse_motion(*event.pos)
            elif event.type == pygame.MOUSEBUTTONDOWN:
                viewer.mouse_click(event.button, *event.pos)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the viewer for the fractal named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        config = parse_args(args)
    except ValueError:
        general_guide()
        return 0
    if config.kind is None:
        fractals_guide()
        return 0
    try:
        _run(Viewer(config.kind))
    except Exception as exc:  # window or display could not be created
        if type(exc).__name__ != "error":
            raise
        sys.stderr.write("Error\n")
        return 1
    return 0