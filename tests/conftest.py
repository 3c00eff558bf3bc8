import os
import sys

import pytest
from pygame.math import Vector3

# Ensure src is on the python path for all tests
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "../src")))


def pytest_configure(config):
    # Headless pygame unless a real driver was requested
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


class RecordingSurface:
    """DrawingSurface double that remembers every call."""

    def __init__(self, width=500, height=500):
        self.width = width
        self.height = height
        self.clears = []
        self.quads = []

    def clear(self, width, height):
        self.clears.append((width, height))
        self.quads.clear()

    def draw_filled_stroked_quad(self, points, color):
        self.quads.append(([(p.x, p.y) for p in points], color))


def box_vertices(x, y, z, width=25.0, height=25.0, length=25.0):
    """Eight vertices of a box whose near top-left corner is (x, y, z)."""
    near = [(x, y), (x + width, y), (x + width, y - height), (x, y - height)]
    return [Vector3(px, py, z) for px, py in near] + [
        Vector3(px, py, z + length) for px, py in near
    ]


@pytest.fixture
def recording_surface():
    return RecordingSurface()
