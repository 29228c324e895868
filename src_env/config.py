"""
config.py
Simulation parameters and difficulty limits for the parking trainer.

Units are screen-style world units (y grows downward) and radians.
"""
import math
from dataclasses import dataclass, field

from vehicles.base import VehicleShape


# ========================
# Global configuration
# ========================

DEFAULT_CAR_WIDTH = 40.0             # along the heading
DEFAULT_CAR_HEIGHT = 22.0            # across the heading
DEFAULT_WHEEL_BASE = 26.0
MAX_STEERING_ANGLE_RAD = math.pi / 4 # 45 degrees
MAX_SPEED = 2.0
STEERING_LOCK_TURNS = 1.5
DEFAULT_SPOT_WIDTH = 65.0

# Difficulty slider ranges
CAR_WIDTH_RANGE = (35.0, 50.0)
SPOT_WIDTH_RANGE = (45.0, 80.0)

COLLISION_MODES = ("corners", "sat")


class ConfigError(ValueError):
    """Raised for simulation parameters that cannot produce a valid session."""


@dataclass(frozen=True)
class SimulationConfig:
    shape: VehicleShape = field(
        default_factory=lambda: VehicleShape(DEFAULT_CAR_WIDTH, DEFAULT_CAR_HEIGHT))
    wheel_base: float = DEFAULT_WHEEL_BASE
    max_steering_angle: float = MAX_STEERING_ANGLE_RAD
    max_speed: float = MAX_SPEED
    steering_turns: float = STEERING_LOCK_TURNS
    spot_width: float = DEFAULT_SPOT_WIDTH
    collision_mode: str = "corners"

    def __post_init__(self):
        if self.wheel_base <= 0:
            raise ConfigError(f"wheel_base must be positive, got {self.wheel_base}")
        if not 0 < self.max_steering_angle < math.pi / 2:
            raise ConfigError(
                f"max_steering_angle must be in (0, pi/2), got {self.max_steering_angle}")
        if self.max_speed <= 0:
            raise ConfigError(f"max_speed must be positive, got {self.max_speed}")
        if self.steering_turns <= 0:
            raise ConfigError(f"steering_turns must be positive, got {self.steering_turns}")
        if self.spot_width <= 0:
            raise ConfigError(f"spot_width must be positive, got {self.spot_width}")
        if self.collision_mode not in COLLISION_MODES:
            raise ConfigError(
                f"collision_mode must be one of {COLLISION_MODES}, got {self.collision_mode!r}")

    @classmethod
    def from_difficulty(cls, car_width=DEFAULT_CAR_WIDTH, spot_width=DEFAULT_SPOT_WIDTH, **kwargs):
        """Build a config from the two difficulty sliders (car size, spot size)."""
        lo, hi = CAR_WIDTH_RANGE
        if not lo <= car_width <= hi:
            raise ConfigError(f"car width {car_width} outside [{lo}, {hi}]")
        lo, hi = SPOT_WIDTH_RANGE
        if not lo <= spot_width <= hi:
            raise ConfigError(f"spot width {spot_width} outside [{lo}, {hi}]")
        return cls(shape=VehicleShape(car_width, DEFAULT_CAR_HEIGHT),
                   spot_width=spot_width, **kwargs)
