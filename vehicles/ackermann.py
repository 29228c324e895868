import math
from dataclasses import replace

from geom.polygons import vehicle_corners
from vehicles.base import VehicleShape, VehicleState

SPEED_TO_DISTANCE_SCALE = 30.0    # world units per (speed unit * second)
REST_SPEED_EPSILON = 0.01         # below this the vehicle does not move or turn

PREDICTION_SPEED_THRESHOLD = 0.1  # above this the preview uses the real speed
PREDICTION_NOMINAL_SPEED = 1.5
PREDICTION_STEP_SECONDS = 0.5
PREDICTION_STEPS = 30


def step(state: VehicleState, dt: float, wheel_base: float) -> VehicleState:
    """
    Integrate one step of bicycle kinematics referenced at the body center.

    Heading is updated first and the position advances along the new
    heading. Heading is not wrapped.
    """
    if abs(state.speed) < REST_SPEED_EPSILON:
        return state

    dist = state.speed * dt * SPEED_TO_DISTANCE_SCALE
    nth = state.heading + dist / wheel_base * math.tan(state.steering_angle)
    nx = state.x + dist * math.cos(nth)
    ny = state.y + dist * math.sin(nth)
    return replace(state, x=nx, y=ny, heading=nth)


def predict(state: VehicleState, wheel_base: float, direction_sign: int,
            steps: int = PREDICTION_STEPS):
    """
    Preview positions for the next `steps` coarse steps.

    A moving vehicle keeps its real signed speed; a (nearly) stationary one
    gets a nominal speed in the direction of the selected gear. The
    committed state is never touched and obstacles are ignored.
    """
    if direction_sign not in (1, -1):
        raise ValueError(f"direction_sign must be +1 or -1, got {direction_sign!r}")

    if abs(state.speed) > PREDICTION_SPEED_THRESHOLD:
        sim_speed = state.speed
    else:
        sim_speed = direction_sign * PREDICTION_NOMINAL_SPEED

    s = replace(state, speed=sim_speed)
    path = []
    for _ in range(steps):
        s = step(s, PREDICTION_STEP_SECONDS, wheel_base)
        path.append((s.x, s.y))
    return path


class Ackermann:
    """Car model: fixed footprint, wheelbase and steering lock."""

    def __init__(self, shape: VehicleShape, wheelbase=26.0, max_steer=math.pi / 4):
        if wheelbase <= 0:
            raise ValueError(f"wheelbase must be positive, got {wheelbase}")
        if not 0 < max_steer < math.pi / 2:
            raise ValueError(f"max_steer must be in (0, pi/2), got {max_steer}")
        self.shape = shape
        self.L = wheelbase
        self.max_steer = max_steer

    def step(self, state: VehicleState, dt: float) -> VehicleState:
        return step(state, dt, self.L)

    def predict(self, state: VehicleState, direction_sign: int, steps=PREDICTION_STEPS):
        return predict(state, self.L, direction_sign, steps)

    def footprint(self, state: VehicleState):
        return vehicle_corners(state, self.shape)
