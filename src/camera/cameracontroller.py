"""KeyboardController: pause toggling and manual cube nudges.

Space toggles pause. While paused the arrow keys move the cube on x/y and
Shift+Up/Shift+Down move it along z (away from / toward the camera).
Arrow keys are ignored while the cube is bouncing.
"""

from __future__ import annotations

import pygame

from config import NUDGE_STEP


class KeyboardController:
    def __init__(self, session, *, step: float = NUDGE_STEP):
        self.session = session
        self.step = float(step)

    def _nudge_for(self, key: int, shift: bool):
        s = self.step
        if shift:
            return {
                pygame.K_UP: (0, 0, s),
                pygame.K_DOWN: (0, 0, -s),
            }.get(key)
        return {
            pygame.K_UP: (0, s, 0),
            pygame.K_DOWN: (0, -s, 0),
            pygame.K_LEFT: (-s, 0, 0),
            pygame.K_RIGHT: (s, 0, 0),
        }.get(key)

    def on_key(self, key: int, mods: int = 0) -> bool:
        """Handle one key press. Returns True if it changed anything."""
        if key == pygame.K_SPACE:
            self.session.toggle_pause()
            return True

        if not self.session.paused:
            return False

        delta = self._nudge_for(key, bool(mods & pygame.KMOD_SHIFT))
        if delta is None:
            return False
        return self.session.nudge(*delta)

    def handle_event(self, event) -> bool:
        if event.type != pygame.KEYDOWN:
            return False
        return self.on_key(event.key, getattr(event, "mod", 0))


__all__ = ["KeyboardController"]
