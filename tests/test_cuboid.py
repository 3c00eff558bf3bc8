"""Tests for cuboid construction, translation and the bounce step."""
import math

import numpy as np
import pytest
from pygame.math import Vector3

from camera.camera import ViewAngles
from conftest import box_vertices
from core.cuboid import Cuboid, MotionBounds, MotionVector
from core.errors import InvalidConfiguration

RIGHT_ANGLES = ViewAngles(math.pi / 2, math.pi / 2)


@pytest.fixture
def bounds():
    return MotionBounds.from_view(RIGHT_ANGLES, 100)


def corner_cube(bounds, dx=1.0, dy=-4.0):
    return Cuboid.at_corner(
        bounds,
        width=25,
        height=25,
        length=25,
        depth=100,
        motion=MotionVector(dx, dy),
    )


class TestMotionBounds:
    def test_right_angle_view_at_depth_100(self, bounds):
        assert bounds.left == pytest.approx(-100)
        assert bounds.right == pytest.approx(100)
        assert bounds.top == pytest.approx(100)
        assert bounds.bottom == pytest.approx(-100)

    def test_symmetric(self):
        b = MotionBounds.from_view(ViewAngles(math.radians(60), math.radians(40)), 50)
        assert b.right == -b.left
        assert b.bottom == -b.top
        assert b.top == pytest.approx(math.tan(math.radians(20)) * 50)

    def test_rejects_non_positive_depth(self):
        with pytest.raises(InvalidConfiguration):
            MotionBounds.from_view(RIGHT_ANGLES, 0)


class TestConstruction:
    def test_vertex_layout(self, bounds):
        cube = corner_cube(bounds)
        v = cube.vertices
        assert v[0] == Vector3(bounds.left, bounds.top, 100)
        assert v[1] == Vector3(bounds.left + 25, bounds.top, 100)
        assert v[2] == Vector3(bounds.left + 25, bounds.top - 25, 100)
        assert v[3] == Vector3(bounds.left, bounds.top - 25, 100)
        for near, far in zip(v[:4], v[4:]):
            assert far.x == near.x and far.y == near.y
            assert far.z == near.z + 25

    def test_dimensions(self, bounds):
        cube = Cuboid.at_corner(
            bounds, width=10, height=20, length=30, depth=100, motion=MotionVector(1, 1)
        )
        assert cube.dimensions == pytest.approx((10, 20, 30))
        assert cube.as_array().shape == (8, 3)

    @pytest.mark.parametrize("w, h, l", [(0, 25, 25), (25, -1, 25), (25, 25, 0)])
    def test_rejects_bad_dimensions(self, bounds, w, h, l):
        with pytest.raises(InvalidConfiguration):
            Cuboid.at_corner(
                bounds, width=w, height=h, length=l, depth=100, motion=MotionVector(1, 1)
            )

    def test_rejects_bad_depth(self, bounds):
        with pytest.raises(InvalidConfiguration):
            Cuboid.at_corner(
                bounds, width=1, height=1, length=1, depth=0, motion=MotionVector(1, 1)
            )

    def test_rejects_wrong_vertex_count(self, bounds):
        with pytest.raises(InvalidConfiguration):
            Cuboid(box_vertices(0, 0, 10)[:7], MotionVector(1, 1), bounds)

    def test_copies_input_vertices(self, bounds):
        verts = box_vertices(0, 0, 10)
        cube = Cuboid(verts, MotionVector(1, 1), bounds)
        cube.translate(1, 0, 0)
        assert verts[0] == Vector3(0, 0, 10)


class TestTranslate:
    def test_shifts_every_vertex_x_only(self, bounds):
        cube = corner_cube(bounds)
        before = cube.as_array()
        cube.translate(5, 0, 0)
        after = cube.as_array()
        np.testing.assert_allclose(after[:, 0], before[:, 0] + 5)
        np.testing.assert_array_equal(after[:, 1:], before[:, 1:])

    def test_ignores_bounds(self, bounds):
        cube = corner_cube(bounds)
        cube.translate(-1000, 0, -500)
        assert cube.vertices[0].x == pytest.approx(bounds.left - 1000)
        assert cube.near_depth == -400

    def test_map_vertices_applies_transform(self, bounds):
        cube = corner_cube(bounds)
        cube.map_vertices(lambda v: v + Vector3(0, 0, 1))
        assert all(v.z in (101, 126) for v in cube.vertices)


class TestTick:
    def test_clear_on_x_moves_x_only(self, bounds):
        cube = corner_cube(bounds, dx=1, dy=-4)
        before = cube.as_array()
        cube.tick()
        after = cube.as_array()
        np.testing.assert_allclose(after - before, np.tile([1, 0, 0], (8, 1)))
        assert (cube.motion.dx, cube.motion.dy) == (1, -4)

    def test_blocked_on_x_bounces_and_moves_y(self, bounds):
        # Heading left from the left bound
        cube = corner_cube(bounds, dx=-1, dy=-4)
        before = cube.as_array()
        cube.tick()
        after = cube.as_array()
        assert cube.motion.dx == 1
        assert cube.motion.dy == -4
        np.testing.assert_allclose(after - before, np.tile([0, -4, 0], (8, 1)))

    def test_blocked_on_both_flips_both_and_stays_put(self, bounds):
        # Heading up-left out of the top-left corner
        cube = corner_cube(bounds, dx=-1, dy=4)
        before = cube.as_array()
        cube.tick()
        assert (cube.motion.dx, cube.motion.dy) == (1, -4)
        np.testing.assert_array_equal(cube.as_array(), before)

    def test_y_is_not_tried_when_x_moves(self, bounds):
        """Even with y blocked, a free x step leaves dy alone."""
        cube = corner_cube(bounds, dx=1, dy=4)
        cube.tick()
        assert cube.motion.dy == 4
        assert cube.vertices[0].y == pytest.approx(bounds.top)

    def test_right_edge_uses_top_right_vertex(self, bounds):
        verts = box_vertices(bounds.right - 25.5, 0, 100)
        cube = Cuboid(verts, MotionVector(1, -4), bounds)
        cube.tick()
        # top-right would reach right - 0.5 + 1, past the bound
        assert cube.motion.dx == -1
        assert cube.vertices[0].x == pytest.approx(bounds.right - 25.5)
        assert cube.vertices[0].y == pytest.approx(-4)

    def test_bottom_edge_uses_bottom_right_vertex(self, bounds):
        verts = box_vertices(-100, bounds.bottom + 27, 100)
        cube = Cuboid(verts, MotionVector(-1, -4), bounds)
        cube.tick()
        assert (cube.motion.dx, cube.motion.dy) == (1, 4)
        assert cube.vertices[2].y == pytest.approx(bounds.bottom + 2)

    @pytest.mark.parametrize("motion", [(1, -4), (3, 7), (-2.5, 1.5), (7, -0.25)])
    def test_never_escapes_bounds(self, bounds, motion):
        cube = corner_cube(bounds, *motion)
        for _ in range(5000):
            cube.tick()
            tl = cube.vertices[0]
            assert bounds.left <= tl.x <= bounds.right
            assert bounds.bottom <= tl.y <= bounds.top
        assert cube.dimensions == pytest.approx((25, 25, 25))
        assert cube.near_depth == 100

    def test_bounce_reverses_direction_over_time(self, bounds):
        cube = corner_cube(bounds, 1, -4)
        seen = set()
        for _ in range(2000):
            cube.tick()
            seen.add(cube.motion.dx)
        assert seen == {1, -1}
