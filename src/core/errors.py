"""Error types raised by the projection and motion code."""

from __future__ import annotations


class CubeShiftError(Exception):
    pass


class DegenerateProjection(CubeShiftError, ValueError):
    """A camera-space point sits on the camera's depth plane (z == 0).

    Such a point has no defined viewing angle, so callers skip the frame
    instead of drawing NaN coordinates.
    """

    def __init__(self, point) -> None:
        self.point = point
        super().__init__(
            f"cannot project ({point.x}, {point.y}, {point.z}): zero depth"
        )


class InvalidConfiguration(CubeShiftError, ValueError):
    """Bad angles, sizes or intervals handed to a constructor."""


__all__ = ["CubeShiftError", "DegenerateProjection", "InvalidConfiguration"]
