from typing import Protocol, Sequence, Tuple

from pygame.math import Vector2


class DrawingSurface(Protocol):
    width: int
    height: int

    def clear(self, width: int, height: int) -> None: ...  # noqa: D401

    def draw_filled_stroked_quad(
        self, points: Sequence[Vector2], color: Tuple[int, int, int]
    ) -> None: ...
