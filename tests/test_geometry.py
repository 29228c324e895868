import math

import pytest

from geom.collision import first_collision, is_colliding, is_colliding_sat, poly_intersect_sat
from geom.polygons import (Rect, angular_distance, normalize_angle, oriented_box,
                           point_in_rect, vehicle_corners)
from src_env.world import World
from vehicles.base import VehicleShape, VehicleState

SHAPE = VehicleShape(40.0, 22.0)


def test_corners_winding_facing_east():
    corners = vehicle_corners(VehicleState(100.0, 100.0), SHAPE)
    # rear-right, rear-left, front-left, front-right
    assert corners == [(80.0, 111.0), (80.0, 89.0), (120.0, 89.0), (120.0, 111.0)]


def test_corners_rotated_quarter_turn():
    corners = oriented_box((100.0, 100.0), 40.0, 22.0, math.pi / 2)
    expected = [(89.0, 80.0), (111.0, 80.0), (111.0, 120.0), (89.0, 120.0)]
    for got, want in zip(corners, expected):
        assert got == pytest.approx(want)


def test_corners_are_pure():
    s = VehicleState(123.4, 56.7, heading=0.8)
    assert vehicle_corners(s, SHAPE) == vehicle_corners(s, SHAPE)


def test_point_in_rect_bounds_inclusive():
    r = Rect(10, 20, 30, 40)
    assert point_in_rect((10, 20), r)
    assert point_in_rect((40, 60), r)
    assert point_in_rect((25, 30), r)
    assert not point_in_rect((40.001, 30), r)
    assert not point_in_rect((25, 19.999), r)


@pytest.mark.parametrize("w,h", [(0, 10), (10, 0), (-1, 5)])
def test_degenerate_rect_rejected(w, h):
    with pytest.raises(ValueError):
        Rect(0, 0, w, h)


def test_angle_helpers():
    assert normalize_angle(-math.pi / 2) == pytest.approx(1.5 * math.pi)
    assert normalize_angle(5 * math.pi) == pytest.approx(math.pi)
    assert angular_distance(0.1, 2 * math.pi - 0.1) == pytest.approx(0.2)
    assert angular_distance(0.0, math.pi) == pytest.approx(math.pi)


def test_vehicle_on_top_of_obstacle_collides():
    obstacle = Rect(0, 0, 100, 100)
    assert is_colliding(VehicleState(50.0, 50.0), SHAPE, [obstacle])


def test_vehicle_in_open_lot_is_clear():
    world = World()
    assert not is_colliding(VehicleState(400.0, 300.0), SHAPE, world.obstacles)
    assert not is_colliding(world.start_state, SHAPE, world.obstacles)


def test_first_collision_reports_indices():
    obstacles = [Rect(500, 500, 10, 10), Rect(115, 105, 20, 20)]
    k, j = first_collision(VehicleState(100.0, 100.0), SHAPE, obstacles)
    assert (k, j) == (3, 1)   # front-right corner in the second obstacle
    assert first_collision(VehicleState(300.0, 300.0), SHAPE, obstacles) == (None, None)


def test_thin_obstacle_through_body_is_missed_by_corner_test():
    post = Rect(95, 0, 10, 200)
    s = VehicleState(100.0, 100.0)
    assert not is_colliding(s, SHAPE, [post])
    assert is_colliding_sat(s, SHAPE, [post])


def test_sat_separated_polygons():
    a = Rect(0, 0, 10, 10).polygon()
    b = Rect(20, 0, 10, 10).polygon()
    assert not poly_intersect_sat(a, b)
    assert poly_intersect_sat(a, Rect(5, 5, 10, 10).polygon())
