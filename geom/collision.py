# geom/collision.py
from geom.polygons import point_in_rect, vehicle_corners


def _project(poly, ax, ay):
    """Project polygon onto axis (ax, ay). Returns (min, max) scalar interval."""
    v0 = ax*poly[0][0] + ay*poly[0][1]
    mn = mx = v0
    for (x,y) in poly[1:]:
        v = ax*x + ay*y
        if v < mn: mn = v
        if v > mx: mx = v
    return mn, mx

def poly_intersect_sat(polyA, polyB):
    """
    Separating Axis Theorem for convex polygons (vehicle box vs. obstacle rectangle).
    Returns True if polygons overlap. Touching edges count as overlap.
    """
    for poly in (polyA, polyB):
        for i in range(len(poly)):
            x1,y1 = poly[i]
            x2,y2 = poly[(i+1) % len(poly)]
            # edge normal is a separating axis candidate
            ax, ay = -(y2 - y1), (x2 - x1)
            mnA, mxA = _project(polyA, ax, ay)
            mnB, mxB = _project(polyB, ax, ay)
            if mxA < mnB or mxB < mnA:
                return False  # found a separating axis
    return True

def first_collision(state, shape, obstacles):
    """
    Corner-only test. Return (corner_index, obstacle_index) of the first
    vehicle corner found inside an obstacle, or (None, None) if clear.

    An obstacle that cuts through the body without containing a corner is
    not reported.
    """
    for k, corner in enumerate(vehicle_corners(state, shape)):
        for j, rect in enumerate(obstacles):
            if point_in_rect(corner, rect):
                return k, j
    return None, None

def is_colliding(state, shape, obstacles):
    k, _ = first_collision(state, shape, obstacles)
    return k is not None

def is_colliding_sat(state, shape, obstacles):
    """Stricter opt-in check: full polygon overlap against each obstacle."""
    vpoly = vehicle_corners(state, shape)
    return any(poly_intersect_sat(vpoly, rect.polygon()) for rect in obstacles)

COLLISION_MODES = {
    "corners": is_colliding,
    "sat": is_colliding_sat,
}
