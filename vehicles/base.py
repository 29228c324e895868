# vehicles/base.py
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class VehicleState:
    """
    Vehicle pose and controls (world units, radians).

    heading: 0 faces +x; stored unbounded, never wrapped.
    speed:   signed, negative is reverse.
    """
    x: float
    y: float
    heading: float = 0.0
    steering_angle: float = 0.0
    speed: float = 0.0

    def with_controls(self, speed=None, steering_angle=None):
        """Copy with new speed and/or steering angle; pose untouched."""
        changes = {}
        if speed is not None:
            changes["speed"] = speed
        if steering_angle is not None:
            changes["steering_angle"] = steering_angle
        return replace(self, **changes) if changes else self


@dataclass(frozen=True)
class VehicleShape:
    """Body footprint. width runs along the heading, height across it."""
    width: float
    height: float

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"vehicle shape must be positive, got {self.width}x{self.height}")
