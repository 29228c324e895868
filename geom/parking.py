# geom/parking.py
import math

from geom.polygons import angular_distance, normalize_angle, point_in_rect, vehicle_corners

TARGET_HEADING = 1.5 * math.pi    # nose toward the curb (screen "up")
HEADING_TOLERANCE_RAD = 0.2       # ~11.5 degrees
PARKED_SPEED_THRESHOLD = 0.1      # callers only commit PARKED below this |speed|


def is_inside(state, shape, spot):
    """Every corner of the body lies inside the spot."""
    return all(point_in_rect(c, spot) for c in vehicle_corners(state, shape))


def is_aligned(heading, target=TARGET_HEADING, tol=HEADING_TOLERANCE_RAD):
    return angular_distance(normalize_angle(heading), target) < tol


def is_parked(state, shape, spot, target=TARGET_HEADING, tol=HEADING_TOLERANCE_RAD):
    """
    Containment and alignment must both hold. Speed is not checked here.

    target: fixed for the perpendicular row layout; pass another value for
    spots that open in a different direction.
    """
    return is_inside(state, shape, spot) and is_aligned(state.heading, target, tol)
