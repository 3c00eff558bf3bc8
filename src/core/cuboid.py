"""Rigid cuboid that bounces around inside the viewing frustum.

Vertex order is fixed and face assembly depends on it:

    0 top-left near       4 top-left far
    1 top-right near      5 top-right far
    2 bottom-right near   6 bottom-right far
    3 bottom-left near    7 bottom-left far

Model y grows upward. The cuboid only ever translates as a whole, so the
eight points always describe the same axis-aligned box.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, List, NamedTuple, Sequence, Tuple

import numpy as np
from pygame.math import Vector2, Vector3

from camera.camera import Camera, ViewAngles
from config import FACE_COLORS
from core.drawable import DrawingSurface
from core.errors import DegenerateProjection, InvalidConfiguration

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]


class Face(NamedTuple):
    name: str
    indices: Tuple[int, int, int, int]
    color: Color


FRONT = Face("front", (0, 1, 2, 3), FACE_COLORS["front"])
LEFT = Face("left", (0, 3, 7, 4), FACE_COLORS["left"])
RIGHT = Face("right", (1, 2, 6, 5), FACE_COLORS["right"])
TOP = Face("top", (0, 1, 5, 4), FACE_COLORS["top"])
BOTTOM = Face("bottom", (2, 3, 7, 6), FACE_COLORS["bottom"])


@dataclass
class MotionVector:
    dx: float
    dy: float


@dataclass(frozen=True)
class MotionBounds:
    """Camera-space x/y extent of the frustum at a reference depth."""

    left: float
    right: float
    top: float
    bottom: float

    @classmethod
    def from_view(cls, view: ViewAngles, depth: float) -> "MotionBounds":
        if depth <= 0:
            raise InvalidConfiguration(f"reference depth must be positive, got {depth!r}")
        left = -1 * math.tan(view.horizontal / 2) * depth
        top = math.tan(view.vertical / 2) * depth
        return cls(left=left, right=-1 * left, top=top, bottom=-1 * top)


class Cuboid:
    def __init__(
        self,
        vertices: Sequence[Vector3],
        motion: MotionVector,
        bounds: MotionBounds,
    ) -> None:
        if len(vertices) != 8:
            raise InvalidConfiguration(f"a cuboid needs 8 vertices, got {len(vertices)}")
        self.vertices: List[Vector3] = [Vector3(v) for v in vertices]
        self.motion = motion
        self.bounds = bounds

    @classmethod
    def at_corner(
        cls,
        bounds: MotionBounds,
        *,
        width: float,
        height: float,
        length: float,
        depth: float,
        motion: MotionVector,
    ) -> "Cuboid":
        """Build a box whose near top-left vertex sits on the top-left bound."""
        if width <= 0 or height <= 0 or length <= 0:
            raise InvalidConfiguration(
                f"box dimensions must be positive, got {width}x{height}x{length}"
            )
        if depth <= 0:
            raise InvalidConfiguration(f"box depth must be positive, got {depth!r}")

        left, top = bounds.left, bounds.top
        near = [
            (left, top),
            (left + width, top),
            (left + width, top - height),
            (left, top - height),
        ]
        vertices = [Vector3(x, y, depth) for x, y in near]
        vertices += [Vector3(x, y, depth + length) for x, y in near]
        return cls(vertices, motion, bounds)

    # ------------------------------------------------------------------
    @property
    def near_depth(self) -> float:
        return self.vertices[0].z

    def as_array(self) -> np.ndarray:
        """(8, 3) float array snapshot of the vertices."""
        return np.array([(v.x, v.y, v.z) for v in self.vertices], dtype=np.float64)

    @property
    def dimensions(self) -> Tuple[float, float, float]:
        """(width, height, length) measured from the current vertices."""
        w, h, length = np.ptp(self.as_array(), axis=0)
        return float(w), float(h), float(length)

    # ------------------------------------------------------------------
    def map_vertices(self, transform: Callable[[Vector3], Vector3]) -> None:
        """Replace every vertex with transform(vertex), in place."""
        for i, vertex in enumerate(self.vertices):
            self.vertices[i] = transform(vertex)

    def translate(self, dx: float, dy: float, dz: float) -> None:
        """Shift the whole box. No bounds checks; used for manual nudges."""
        offset = Vector3(dx, dy, dz)
        self.map_vertices(lambda v: v + offset)

    def tick(self) -> None:
        """One automatic bounce step.

        x is tried first. y is only tried on a tick where x was blocked, so
        at most one axis moves per tick and a blocked y costs a whole tick.
        This coupling is observable (the box traces a Pong-like staircase)
        and is kept as-is.
        """
        vect = self.motion
        b = self.bounds
        tl, tr, br = self.vertices[0], self.vertices[1], self.vertices[2]

        if tl.x + vect.dx > b.left and tr.x + vect.dx < b.right:
            self.translate(vect.dx, 0, 0)
            return

        vect.dx = -1 * vect.dx
        if tl.y + vect.dy < b.top and br.y + vect.dy > b.bottom:
            self.translate(0, vect.dy, 0)
        else:
            vect.dy = -1 * vect.dy

    # ------------------------------------------------------------------
    def visible_faces(self, camera: Camera) -> List[Tuple[Face, List[Vector2]]]:
        """Faces to draw this frame, in draw order, with projected corners.

        Nothing is visible unless the near face is in front of the camera.
        Side faces use a screen-position heuristic rather than real culling:
        a side is shown when the near face sits on the opposite half of the
        surface.
        """
        if not self.near_depth > 0:
            return []

        cps = [camera.project(v) for v in self.vertices]
        mid_x = camera.width / 2
        mid_y = camera.height / 2

        faces = [FRONT]
        if cps[0].x > mid_x:
            faces.append(LEFT)
        if cps[1].x < mid_x:
            faces.append(RIGHT)
        if cps[0].y > mid_y:
            faces.append(TOP)
        if cps[3].y < mid_y:
            faces.append(BOTTOM)

        return [(face, [cps[i] for i in face.indices]) for face in faces]

    def render(self, surface: DrawingSurface, camera: Camera) -> List[Face]:
        """Clear the surface and draw the visible faces. Returns what was drawn."""
        surface.clear(surface.width, surface.height)
        try:
            faces = self.visible_faces(camera)
        except DegenerateProjection as e:
            logger.warning("Skipping frame: %s", e)
            return []

        for face, points in faces:
            surface.draw_filled_stroked_quad(points, face.color)
        return [face for face, _ in faces]


__all__ = [
    "Cuboid",
    "Face",
    "MotionBounds",
    "MotionVector",
    "FRONT",
    "LEFT",
    "RIGHT",
    "TOP",
    "BOTTOM",
]
