"""Simple text rendering onto a pygame surface.

Provides a small API to draw 2D text on top of the cube. Each label lives in
a keyed slot and is only re-rasterised when its text changes, so the metrics
line costs one font render per change rather than one per frame.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import pygame


@dataclass
class _TextSlot:
    surface: Optional[pygame.Surface]
    last_text: str | None = None


class TextRenderer:
    """2D text renderer using pygame.font, drawing top-left aligned labels."""

    def __init__(
        self,
        target: pygame.Surface,
        font: Optional[pygame.font.Font] = None,
        size: int = 24,
    ) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        self.target = target
        self.font = font or pygame.font.Font(None, size)
        self._slots: Dict[str, _TextSlot] = {}

    def _render(self, key: str, text: str, color: Tuple[int, int, int]) -> pygame.Surface:
        slot = self._slots.setdefault(key, _TextSlot(surface=None))
        if slot.surface is None or slot.last_text != text:
            slot.surface = self.font.render(text, True, color)
            slot.last_text = text
        return slot.surface

    def draw_text(
        self,
        key: str,
        text: str,
        x: float,
        y: float,
        color: Tuple[int, int, int] = (255, 255, 255),
    ) -> Tuple[int, int]:  # returns (w, h)
        surf = self._render(key, text, color)
        self.target.blit(surf, (x, y))
        return surf.get_size()

    def draw_lines(
        self,
        lines: list[str],
        x: float,
        y: float,
        color: Tuple[int, int, int] = (255, 255, 255),
        *,
        line_spacing: float = 1.2,
    ) -> Tuple[int, int]:
        """Draw lines top-to-bottom from (x, y); returns (max_w, total_h)."""
        if not lines:
            return 0, 0
        line_h = self.font.get_height()
        max_w = 0
        for i, line in enumerate(lines):
            line_y = y + int(i * line_h * line_spacing)
            w, _ = self.draw_text(f"line{i}", line, x, line_y, color)
            max_w = max(max_w, w)
        n = len(lines)
        total_h = int(line_h + (n - 1) * line_h * line_spacing)
        return max_w, total_h


__all__ = ["TextRenderer"]
