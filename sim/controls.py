# sim/controls.py
from enum import Enum

FRAME_RATE_REFERENCE = 60.0   # response factors are tuned per 1/60 s frame

# blend response per driving situation
PARK_RESPONSE = 0.5
BRAKE_RESPONSE = 0.2
NEUTRAL_RESPONSE = 0.01
THROTTLE_RESPONSE = 0.05
COAST_RESPONSE = 0.02


class Gear(str, Enum):
    P = "P"
    R = "R"
    N = "N"
    D = "D"


def direction_sign(gear):
    """+1 for D, -1 for R, None where the gear gives no drive direction."""
    gear = Gear(gear)
    if gear is Gear.D:
        return 1
    if gear is Gear.R:
        return -1
    return None


def speed_command(gear, gas, brake, max_speed):
    """
    Target speed and blend response for the current gear and pedals.

    Park holds the car hard, the brake beats the throttle, neutral coasts
    with very little drag.
    """
    gear = Gear(gear)
    if gear is Gear.P:
        return 0.0, PARK_RESPONSE
    if brake:
        return 0.0, BRAKE_RESPONSE
    if gear is Gear.N:
        return 0.0, NEUTRAL_RESPONSE
    if gas:
        return direction_sign(gear) * max_speed, THROTTLE_RESPONSE
    return 0.0, COAST_RESPONSE


def blend_speed(current, target, response, dt):
    """
    Move the speed toward target by a fraction scaled to the frame length.

    The fraction is capped at 1 so a long frame lands on the target
    instead of overshooting past it.
    """
    k = min(1.0, response * dt * FRAME_RATE_REFERENCE)
    return current + (target - current) * k
