"""AnimationSession: owns the cube, its bounds, the pause flag and the tick loop.

The input layer, the overlay and the engine all receive the session by
reference instead of reaching for module globals. All state is touched from
the event loop thread only.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from camera.camera import Camera, ViewAngles
from config import (
    CUBE_DEPTH,
    CUBE_HEIGHT,
    CUBE_LENGTH,
    CUBE_WIDTH,
    MOTION_VECTOR,
    TICK_INTERVAL_MS,
)
from core.cuboid import Cuboid, Face, MotionBounds, MotionVector
from core.drawable import DrawingSurface
from core.errors import InvalidConfiguration
from core.scheduler import TickScheduler

logger = logging.getLogger(__name__)


class AnimationSession:
    def __init__(
        self,
        view: ViewAngles,
        width: float,
        height: float,
        *,
        surface: Optional[DrawingSurface] = None,
        overlay=None,
        cube_size: tuple[float, float, float] = (CUBE_WIDTH, CUBE_HEIGHT, CUBE_LENGTH),
        depth: float = CUBE_DEPTH,
        motion: tuple[float, float] = MOTION_VECTOR,
        interval_ms: float = TICK_INTERVAL_MS,
    ) -> None:
        if any(d <= 0 for d in cube_size):
            raise InvalidConfiguration(f"box dimensions must be positive, got {cube_size}")
        self.view = view
        self.camera = Camera(view, width, height)
        self.bounds = MotionBounds.from_view(view, depth)
        self.surface = surface
        self.overlay = overlay
        self.cube_size = cube_size
        self.depth = depth
        self.initial_motion = motion
        self.scheduler = TickScheduler(self.step, interval_ms)

        self.cuboid: Optional[Cuboid] = None
        self.paused = False
        self.last_faces: List[Face] = []

    # ------------------------------------------------------------------
    def _build_cuboid(self) -> Cuboid:
        width, height, length = self.cube_size
        return Cuboid.at_corner(
            self.bounds,
            width=width,
            height=height,
            length=length,
            depth=self.depth,
            motion=MotionVector(*self.initial_motion),
        )

    def start(self) -> None:
        """Place a fresh cube in the top-left corner and start ticking.

        Must be called from a running event loop. Any loop already running
        is cancelled first.
        """
        self.cuboid = self._build_cuboid()
        logger.info(
            "Starting animation on %dx%d surface, bounds %s",
            self.camera.width,
            self.camera.height,
            self.bounds,
        )
        self.draw()
        self.scheduler.start()

    def restart(self, width: float, height: float) -> None:
        """Viewport changed: rescale the projector and start over."""
        self.scheduler.cancel()
        self.camera.resize(width, height)
        logger.info("Restarting animation at %dx%d", width, height)
        self.start()

    async def teardown(self) -> None:
        await self.scheduler.stop()
        logger.info("Animation session stopped")

    # ------------------------------------------------------------------
    def step(self) -> None:
        """Scheduled entry point: one bounce step and a redraw, unless paused."""
        if self.paused or self.cuboid is None:
            return
        self.cuboid.tick()
        self.draw()

    def draw(self) -> List[Face]:
        if self.cuboid is None:
            return []
        if self.surface is not None:
            self.last_faces = self.cuboid.render(self.surface, self.camera)
        else:
            self.last_faces = [face for face, _ in self.cuboid.visible_faces(self.camera)]
        if self.overlay is not None:
            self.overlay.draw(self)
        return self.last_faces

    def toggle_pause(self) -> bool:
        self.paused = not self.paused
        logger.info("Animation %s", "paused" if self.paused else "resumed")
        self.draw()
        return self.paused

    def nudge(self, dx: float, dy: float, dz: float) -> bool:
        """Manual move, honoured only while paused. Returns whether it moved."""
        if not self.paused or self.cuboid is None:
            return False
        self.cuboid.translate(dx, dy, dz)
        self.draw()
        return True


__all__ = ["AnimationSession"]
