# geom/polygons.py
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle (world units). Used for obstacles and the parking spot."""
    x: float
    y: float
    width: float
    height: float

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"rectangle extents must be positive, got {self.width}x{self.height}")

    @property
    def center(self):
        return (self.x + self.width / 2.0, self.y + self.height / 2.0)

    def polygon(self):
        """Corners as a 4-vertex polygon (for SAT and drawing)."""
        x0, y0 = self.x, self.y
        x1, y1 = self.x + self.width, self.y + self.height
        return [(x0, y0), (x1, y0), (x1, y1), (x0, y1)]


def oriented_box(center, length, width, theta):
    """
    Return a 4-vertex polygon for a rectangle centered at 'center' with heading 'theta'.
    Long side = length (front/back), short side = width (left/right).

    Winding is fixed: rear-right, rear-left, front-left, front-right
    (screen frame, +y is the vehicle's right when facing +x).
    """
    x, y = center
    L = length / 2.0
    W = width  / 2.0
    # local corners before rotation
    pts = [(-L, W), (-L, -W), (L, -W), (L, W)]
    c, s = math.cos(theta), math.sin(theta)
    return [(x + c*px - s*py, y + s*px + c*py) for (px, py) in pts]


def vehicle_corners(state, shape):
    """Corner set of the vehicle body. Recomputed on every call."""
    return oriented_box((state.x, state.y), shape.width, shape.height, state.heading)


def point_in_rect(point, rect):
    """Inclusive containment: x in [rect.x, rect.x+width], same for y."""
    px, py = point
    return (rect.x <= px <= rect.x + rect.width and
            rect.y <= py <= rect.y + rect.height)


def normalize_angle(theta):
    """Reduce to [0, 2*pi)."""
    a = theta % (2 * math.pi)
    # float modulo can land exactly on 2*pi for tiny negative inputs
    return 0.0 if a >= 2 * math.pi else a


def angular_distance(a, b):
    """Short-way distance between two headings, in [0, pi]."""
    d = abs(normalize_angle(a) - normalize_angle(b))
    return min(d, 2 * math.pi - d)
