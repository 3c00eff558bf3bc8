"""pygame-backed drawing surface for the cube renderer."""

from __future__ import annotations

from typing import Sequence, Tuple

import pygame
from pygame.math import Vector2

from config import BACKGROUND, STROKE_COLOR


class PygameSurface:
    """Wraps a pygame.Surface (usually the display) with quad helpers."""

    def __init__(
        self,
        target: pygame.Surface,
        background: Tuple[int, int, int] = BACKGROUND,
        stroke: Tuple[int, int, int] = STROKE_COLOR,
    ) -> None:
        self.target = target
        self.background = background
        self.stroke = stroke

    @property
    def width(self) -> int:
        return self.target.get_width()

    @property
    def height(self) -> int:
        return self.target.get_height()

    def clear(self, width: int, height: int) -> None:
        self.target.fill(self.background, pygame.Rect(0, 0, width, height))

    def draw_filled_stroked_quad(
        self, points: Sequence[Vector2], color: Tuple[int, int, int]
    ) -> None:
        # pygame wants plain (x, y) pairs
        corners = [(p.x, p.y) for p in points]
        pygame.draw.polygon(self.target, color, corners)
        pygame.draw.polygon(self.target, self.stroke, corners, width=1)


__all__ = ["PygameSurface"]
