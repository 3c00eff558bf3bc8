"""Angular perspective projection from camera space onto a 2D surface.

The camera sits at the origin looking down +z. A point's horizontal and
vertical angles off that axis are scaled linearly into surface pixels, so
objects near the frustum edge compress the way they would on a curved
retina rather than a flat image plane. No matrices are involved.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from pygame.math import Vector2, Vector3

from core.errors import DegenerateProjection, InvalidConfiguration


def to_degrees(radians: float) -> float:
    return 360 * radians / (2 * math.pi)


def to_radians(degrees: float) -> float:
    return 2 * math.pi * (degrees / 360)


@dataclass(frozen=True)
class ViewAngles:
    """Horizontal/vertical field of view in radians. Fixed for a run."""

    horizontal: float
    vertical: float

    def __post_init__(self) -> None:
        for name in ("horizontal", "vertical"):
            value = getattr(self, name)
            # tan(fov / 2) must stay finite for the motion bounds
            if not 0 < value < math.pi:
                raise InvalidConfiguration(
                    f"{name} field of view must be in (0, pi) radians, got {value!r}"
                )

    @classmethod
    def from_degrees(cls, horizontal: float, vertical: float) -> "ViewAngles":
        return cls(to_radians(horizontal), to_radians(vertical))


def point_angles(point: Vector3) -> Tuple[float, float]:
    """Return (lr_angle, ud_angle) of a camera-space point in radians."""
    if point.z == 0:
        raise DegenerateProjection(point)
    return math.atan(point.x / point.z), math.atan(point.y / point.z)


def project(
    point: Vector3, surface_width: float, surface_height: float, view: ViewAngles
) -> Vector2:
    """Map a camera-space point to surface pixels (origin top-left).

    Raises DegenerateProjection when the point has zero depth.
    """
    lr_angle, ud_angle = point_angles(point)

    # Offsets from the surface centre, model y pointing up
    dx = lr_angle * surface_width / view.horizontal
    dy = ud_angle * surface_height / view.vertical

    return Vector2(surface_width / 2 + dx, surface_height / 2 - dy)


def unproject_angles(
    surface_point: Vector2, surface_width: float, surface_height: float, view: ViewAngles
) -> Tuple[float, float]:
    """Recover the (lr_angle, ud_angle) a surface point was projected from."""
    lr_angle = (surface_point.x - surface_width / 2) * view.horizontal / surface_width
    ud_angle = (surface_height / 2 - surface_point.y) * view.vertical / surface_height
    return lr_angle, ud_angle


class Camera:
    """Projector bound to a surface size and a fixed set of view angles.

    Resizing only changes the pixel scale; the angles never change.
    """

    def __init__(self, view: ViewAngles, width: float = 800, height: float = 800):
        self.view = view
        self.resize(width, height)

    def resize(self, width: float, height: float) -> None:
        if width <= 0 or height <= 0:
            raise InvalidConfiguration(
                f"surface size must be positive, got {width}x{height}"
            )
        self.width = width
        self.height = height

    def project(self, point: Vector3) -> Vector2:
        return project(point, self.width, self.height, self.view)

    def unproject_angles(self, surface_point: Vector2) -> Tuple[float, float]:
        return unproject_angles(surface_point, self.width, self.height, self.view)


__all__ = [
    "Camera",
    "ViewAngles",
    "point_angles",
    "project",
    "unproject_angles",
    "to_degrees",
    "to_radians",
]
