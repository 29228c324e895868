import math

import pytest

from vehicles.ackermann import (PREDICTION_STEPS, SPEED_TO_DISTANCE_SCALE, Ackermann,
                                predict, step)
from vehicles.base import VehicleShape, VehicleState
from vehicles.steering import SteeringMapper, pointer_delta

WHEEL_BASE = 26.0
MAX_STEER = math.pi / 4


@pytest.mark.parametrize("speed", [0.0, 0.005, -0.0099])
def test_step_at_rest_returns_input(speed):
    s = VehicleState(200.0, 350.0, heading=0.3, steering_angle=MAX_STEER, speed=speed)
    assert step(s, 0.016, WHEEL_BASE) == s


def test_step_straight_line():
    s = VehicleState(0.0, 0.0, speed=1.0)
    out = step(s, 1.0, WHEEL_BASE)
    assert out.x == pytest.approx(SPEED_TO_DISTANCE_SCALE)
    assert out.y == pytest.approx(0.0)
    assert out.heading == 0.0
    assert out.speed == 1.0


def test_step_turns_before_translating():
    s = VehicleState(0.0, 0.0, steering_angle=MAX_STEER, speed=1.0)
    out = step(s, 0.1, WHEEL_BASE)
    dist = 3.0
    dh = dist / WHEEL_BASE * math.tan(MAX_STEER)
    assert out.heading == pytest.approx(dh)
    assert out.x == pytest.approx(dist * math.cos(dh))
    assert out.y == pytest.approx(dist * math.sin(dh))


def test_heading_is_not_wrapped():
    s = VehicleState(0.0, 0.0, steering_angle=MAX_STEER, speed=2.0)
    for _ in range(10):
        s = step(s, 0.5, WHEEL_BASE)
    assert s.heading > 2 * math.pi


def test_reverse_with_right_lock_turns_heading_down():
    s = VehicleState(200.0, 350.0, steering_angle=MAX_STEER, speed=-2.0)
    out = step(s, 0.016, WHEEL_BASE)
    assert out.heading < s.heading
    assert out.x < s.x


def test_predict_uses_gear_direction_when_stopped():
    s = VehicleState(200.0, 350.0)
    path = predict(s, WHEEL_BASE, -1)
    assert len(path) == PREDICTION_STEPS
    assert path[0] == pytest.approx((200.0 - 22.5, 350.0))
    assert path[-1][0] < path[0][0]


def test_predict_follows_real_momentum():
    s = VehicleState(200.0, 350.0, speed=2.0)
    path = predict(s, WHEEL_BASE, -1, steps=5)
    assert len(path) == 5
    assert path[0] == pytest.approx((230.0, 350.0))


def test_predict_does_not_touch_state():
    s = VehicleState(200.0, 350.0, steering_angle=0.3, speed=0.05)
    predict(s, WHEEL_BASE, 1)
    assert s == VehicleState(200.0, 350.0, steering_angle=0.3, speed=0.05)


def test_predict_rejects_bad_direction():
    with pytest.raises(ValueError):
        predict(VehicleState(0.0, 0.0), WHEEL_BASE, 0)


def test_ackermann_model():
    car = Ackermann(VehicleShape(40.0, 22.0), wheelbase=WHEEL_BASE, max_steer=MAX_STEER)
    s = VehicleState(100.0, 100.0, speed=1.0)
    assert car.step(s, 0.1) == step(s, 0.1, WHEEL_BASE)
    assert len(car.predict(s, 1, steps=7)) == 7
    assert len(car.footprint(s)) == 4


@pytest.mark.parametrize("kwargs", [
    {"wheelbase": 0.0},
    {"max_steer": 0.0},
    {"max_steer": math.pi / 2},
])
def test_ackermann_rejects_bad_config(kwargs):
    with pytest.raises(ValueError):
        Ackermann(VehicleShape(40.0, 22.0), **kwargs)


# --- steering wheel ---

def test_incremental_rotation_maps_linearly():
    wheel = SteeringMapper(MAX_STEER)
    assert wheel.rotate(270) == pytest.approx(MAX_STEER / 2)
    assert wheel.visual_rotation == 270


def test_repeated_overflowing_deltas_stay_at_lock():
    wheel = SteeringMapper(MAX_STEER)
    for _ in range(5):
        angle = wheel.rotate(400)
        assert abs(angle) <= MAX_STEER
    assert angle == pytest.approx(MAX_STEER)
    assert wheel.at_right_lock
    for _ in range(10):
        angle = wheel.rotate(-333)
        assert abs(angle) <= MAX_STEER
    assert angle == pytest.approx(-MAX_STEER)
    assert wheel.at_left_lock


def test_quick_set_actions():
    wheel = SteeringMapper(MAX_STEER, turns=1.5)
    assert wheel.full_left() == pytest.approx(-MAX_STEER)
    assert wheel.center() == 0.0
    assert wheel.full_right() == pytest.approx(MAX_STEER)
    assert wheel.set_turns(3) == pytest.approx(MAX_STEER)
    assert wheel.display_turns == 1.5


def test_sync_from_physical_angle():
    wheel = SteeringMapper(MAX_STEER)
    wheel.sync(MAX_STEER / 2)
    assert wheel.visual_rotation == pytest.approx(270)


def test_pointer_delta_wraps():
    assert pointer_delta(170, -170) == pytest.approx(20)
    assert pointer_delta(-170, 170) == pytest.approx(-20)
    assert pointer_delta(10, 40) == pytest.approx(30)


@pytest.mark.parametrize("max_angle,turns", [(0.0, 1.5), (-0.1, 1.5), (MAX_STEER, 0)])
def test_steering_rejects_bad_config(max_angle, turns):
    with pytest.raises(ValueError):
        SteeringMapper(max_angle, turns)
