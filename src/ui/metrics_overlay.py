"""Metrics overlay: surface size, pause hint and (while paused) cube position and size."""

from __future__ import annotations

from typing import List, Optional, Tuple

from pygame.math import Vector3

from camera.camera import point_angles, to_degrees
from config import TEXT_COLOR
from core.errors import DegenerateProjection
from ui.text_renderer import TextRenderer

KEY_MESSAGE = "Use Arrow Keys and Shift to move cube."


def format_position(point: Vector3) -> str:
    try:
        lr_angle, ud_angle = point_angles(point)
    except DegenerateProjection:
        angles = "lrangle: n/a, udangle: n/a"
    else:
        angles = (
            f"lrangle: {to_degrees(lr_angle):.1f}, udangle: {to_degrees(ud_angle):.1f}"
        )
    return f"({point.x:.2f}, {point.y:.2f}, {point.z:.2f}, {angles})"


def format_size(dimensions: Tuple[float, float, float]) -> str:
    w, h, length = dimensions
    return f"Cube Size: {w:.2f} x {h:.2f} x {length:.2f}"


def format_metrics(
    width: float, height: float, paused: bool, top_left: Optional[Vector3] = None
) -> str:
    text = f"Canvas Width: {width:.1f}; Canvas Height: {height:.1f}"
    if paused and top_left is not None:
        text += f"; Cube Position: {format_position(top_left)}"
    return text


class MetricsOverlay:
    def __init__(self, text: TextRenderer, margin: int = 8) -> None:
        self.text = text
        self.margin = margin

    def lines(self, session) -> List[str]:
        cube = session.cuboid
        top_left = cube.vertices[0] if cube is not None else None
        lines = [
            format_metrics(session.camera.width, session.camera.height, session.paused, top_left)
        ]
        if session.paused:
            if cube is not None:
                lines.append(format_size(cube.dimensions))
            lines.append("Press Space to resume. " + KEY_MESSAGE)
        else:
            lines.append("Press Space to pause.")
        return lines

    def draw(self, session) -> None:  # pragma: no cover - visual
        self.text.draw_lines(self.lines(session), self.margin, self.margin, TEXT_COLOR)


__all__ = ["KEY_MESSAGE", "MetricsOverlay", "format_metrics", "format_position", "format_size"]
