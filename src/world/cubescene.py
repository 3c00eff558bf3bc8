"""Cube scene: wires the animation session to the window, keyboard and overlay.

The cube is drawn on a square canvas centred in the window. Resizing the
window stops the bounce immediately and, once resize events settle, rebuilds
the canvas and restarts the session at the new size.
"""

from __future__ import annotations

import logging
from typing import Tuple

import pygame

from camera.camera import ViewAngles
from camera.cameracontroller import KeyboardController
from config import BACKGROUND, FONT_SIZE, RESTART_THROTTLE_MS, TICK_INTERVAL_MS, WINDOW_MARGIN
from core.scene import Scene
from core.scheduler import TrailingThrottle
from render.surface import PygameSurface
from ui.metrics_overlay import MetricsOverlay
from ui.text_renderer import TextRenderer
from world.session import AnimationSession

logger = logging.getLogger(__name__)


def canvas_rect(window_size: Tuple[int, int], margin: int = WINDOW_MARGIN) -> pygame.Rect:
    """Largest square that fits the window minus `margin`, centred."""
    w, h = window_size
    dim = max(1, min(w, h) - margin)
    return pygame.Rect((w - dim) // 2, (h - dim) // 2, dim, dim)


class CubeScene(Scene):
    def __init__(
        self,
        window: pygame.Surface,
        view: ViewAngles,
        *,
        interval_ms: float = TICK_INTERVAL_MS,
        margin: int = WINDOW_MARGIN,
        throttle_ms: float = RESTART_THROTTLE_MS,
    ) -> None:
        super().__init__()
        self.margin = margin
        canvas = window.subsurface(canvas_rect(window.get_size(), margin))

        self.surface = PygameSurface(canvas)
        self.text = TextRenderer(canvas, size=FONT_SIZE)
        self.overlay = MetricsOverlay(self.text)
        self.session = AnimationSession(
            view,
            canvas.get_width(),
            canvas.get_height(),
            surface=self.surface,
            overlay=self.overlay,
            interval_ms=interval_ms,
        )
        self.camera = self.session.camera
        self.controller = KeyboardController(self.session)
        self._restart = TrailingThrottle(self._apply_resize, throttle_ms)

    def start(self) -> None:
        self.session.start()

    async def teardown(self) -> None:
        self._restart.cancel()
        await self.session.teardown()

    def handle_event(self, event) -> None:
        if event.type == pygame.VIDEORESIZE:
            self.on_resize(event.w, event.h)
        else:
            self.controller.handle_event(event)

    def on_resize(self, width: int, height: int) -> None:
        # Stop bouncing right away; restart once resizing settles
        self.session.scheduler.cancel()
        self._restart(width, height)

    def _apply_resize(self, width: int, height: int) -> None:
        window = pygame.display.get_surface()
        window.fill(BACKGROUND)
        canvas = window.subsurface(canvas_rect(window.get_size(), self.margin))
        self.surface.target = canvas
        self.text.target = canvas
        logger.debug("Window resized to %dx%d", width, height)
        self.session.restart(canvas.get_width(), canvas.get_height())


__all__ = ["CubeScene", "canvas_rect"]
