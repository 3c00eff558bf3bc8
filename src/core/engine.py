"""Core engine loop & orchestration.

Separates concerns:
- Engine: sets up the window and runs the asyncio main loop (events, flips).
- Scene: owns the animation session, input and drawing.

The bounce itself is stepped by the session's own scheduler task; the engine
only pumps events and presents frames.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import pygame

from camera.camera import ViewAngles
from config import FOV_HORIZONTAL, FOV_VERTICAL, FPS, HEIGHT, TICK_INTERVAL_MS, WIDTH
from core.errors import InvalidConfiguration
from core.scheduler import Clock
from world.cubescene import CubeScene

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class Engine:
    def __init__(
        self,
        view: Optional[ViewAngles] = None,
        *,
        size: tuple[int, int] = (WIDTH, HEIGHT),
        interval_ms: float = TICK_INTERVAL_MS,
        fps: int = FPS,
    ):
        if interval_ms <= 0:
            raise InvalidConfiguration(f"tick interval must be positive, got {interval_ms!r}")
        if min(size) <= 0:
            raise InvalidConfiguration(f"window size must be positive, got {size}")
        self.view = view or ViewAngles.from_degrees(FOV_HORIZONTAL, FOV_VERTICAL)
        self.size = size
        self.interval_ms = interval_ms
        self.fps = fps
        self.scene: Optional[CubeScene] = None

    # ------------------------------------------------------------------
    def handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
            # Forward events to the active scene
            self.scene.handle_event(event)
        return True

    # ------------------------------------------------------------------
    async def run_async(self) -> None:  # pragma: no cover - visual
        pygame.init()
        pygame.display.set_caption("Cube Shift")
        window = pygame.display.set_mode(self.size, pygame.RESIZABLE)
        self.scene = CubeScene(window, self.view, interval_ms=self.interval_ms)
        clock = Clock(pygame.time.get_ticks)

        self.scene.start()
        try:
            while self.handle_events():
                pygame.display.flip()
                await clock.tick(self.fps)
        finally:
            await self.scene.teardown()
            pygame.quit()
            logger.info("Engine shut down")

    def run(self) -> None:  # pragma: no cover - visual
        asyncio.run(self.run_async())
