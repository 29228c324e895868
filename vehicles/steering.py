# vehicles/steering.py
import math

DEFAULT_LOCK_TURNS = 1.5       # turns from center to each lock
LOCK_INDICATOR_TOLERANCE_DEG = 1.0


def pointer_delta(previous_deg, current_deg):
    """Angle moved by a drag between two pointer angles, wrapped to [-180, 180]."""
    delta = current_deg - previous_deg
    if delta > 180:
        delta -= 360
    if delta < -180:
        delta += 360
    return delta


class SteeringMapper:
    """
    Maps steering-wheel rotation (degrees) to the front-wheel angle (radians).

    The wheel turns `turns` full revolutions from center to each lock, so
    ±turns*360 degrees of wheel map linearly onto ±max_angle. Only the
    current wheel rotation is stored.
    """

    def __init__(self, max_angle: float, turns: float = DEFAULT_LOCK_TURNS):
        if not 0 < max_angle < math.pi / 2:
            raise ValueError(f"max_angle must be in (0, pi/2), got {max_angle}")
        if turns <= 0:
            raise ValueError(f"turns must be positive, got {turns}")
        self.max_angle = max_angle
        self.turns = turns
        self.visual_rotation = 0.0

    @property
    def max_visual_degrees(self):
        return self.turns * 360.0

    @property
    def angle(self):
        """Current physical steering angle."""
        return self.visual_rotation / self.max_visual_degrees * self.max_angle

    def _apply(self, visual):
        lim = self.max_visual_degrees
        self.visual_rotation = max(-lim, min(lim, visual))
        return self.angle

    def rotate(self, delta_deg):
        """Accumulate an incremental wheel rotation; returns the new angle."""
        return self._apply(self.visual_rotation + delta_deg)

    def set_turns(self, turns):
        """Quick-set the wheel to an absolute number of turns."""
        return self._apply(turns * 360.0)

    def full_left(self):
        return self.set_turns(-self.turns)

    def center(self):
        return self.set_turns(0)

    def full_right(self):
        return self.set_turns(self.turns)

    def sync(self, angle):
        """Move the wheel to match an externally set physical angle."""
        return self._apply(angle / self.max_angle * self.max_visual_degrees)

    @property
    def display_turns(self):
        return round(self.visual_rotation / 360.0, 1)

    @property
    def at_left_lock(self):
        return self.visual_rotation <= -self.max_visual_degrees + LOCK_INDICATOR_TOLERANCE_DEG

    @property
    def at_right_lock(self):
        return self.visual_rotation >= self.max_visual_degrees - LOCK_INDICATOR_TOLERANCE_DEG
