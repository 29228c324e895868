"""
world.py
Parking lot layout for the reverse-parking trainer.

An 800×600 lot bounded by a 50-unit curb on every side.  One row of
perpendicular spots runs along the top curb; the target spot sits in the
middle of the row with a parked car on either side.  The vehicle starts in
the open lane below the row, facing east.
"""
from geom.polygons import Rect
from vehicles.base import VehicleState
from src_env.config import DEFAULT_SPOT_WIDTH


# ========================
# Global configuration
# ========================

WORLD_WIDTH = 800.0
WORLD_HEIGHT = 600.0
CURB_THICKNESS = 50.0

ROW_START_Y = 50.0                   # parking row begins right below the top curb
SPOT_HEIGHT = 100.0
NEIGHBOR_GAP = 5.0                   # painted-line gap between spot and neighbours
NEIGHBOR_WIDTH = 200.0

START_STATE = VehicleState(x=200.0, y=350.0, heading=0.0, steering_angle=0.0, speed=0.0)


# ========================
# Helper functions
# ========================

def build_parking_spot(spot_width):
    """Target spot centered horizontally in the parking row."""
    return Rect(WORLD_WIDTH / 2 - spot_width / 2, ROW_START_Y, spot_width, SPOT_HEIGHT)


def build_walls(spot):
    """Curbs on all four edges plus the two neighbouring parked cars."""
    return (
        Rect(0, 0, WORLD_WIDTH, CURB_THICKNESS),                                  # top
        Rect(0, WORLD_HEIGHT - CURB_THICKNESS, WORLD_WIDTH, CURB_THICKNESS),      # bottom
        Rect(0, 0, CURB_THICKNESS, WORLD_HEIGHT),                                 # left
        Rect(WORLD_WIDTH - CURB_THICKNESS, 0, CURB_THICKNESS, WORLD_HEIGHT),      # right
        Rect(spot.x - NEIGHBOR_GAP - NEIGHBOR_WIDTH, ROW_START_Y,
             NEIGHBOR_WIDTH, SPOT_HEIGHT),                                        # left neighbour
        Rect(spot.x + spot.width + NEIGHBOR_GAP, ROW_START_Y,
             NEIGHBOR_WIDTH, SPOT_HEIGHT),                                        # right neighbour
    )


# ========================
# World class
# ========================

class World:
    """Lot container: obstacles, the target spot and the start state. Fixed per session."""

    def __init__(self, spot_width: float = DEFAULT_SPOT_WIDTH,
                 obstacles=None, parking_spot=None, start_state=None):
        self.width = WORLD_WIDTH
        self.height = WORLD_HEIGHT

        self.parking_spot = parking_spot if parking_spot is not None else build_parking_spot(spot_width)
        if obstacles is None:
            obstacles = build_walls(self.parking_spot)
        self.obstacles = tuple(obstacles)
        self.start_state = start_state if start_state is not None else START_STATE

    @classmethod
    def from_config(cls, config):
        return cls(spot_width=config.spot_width)

    def is_neighbor_car(self, rect):
        """True for obstacles inside the parking row (drawn as parked cars)."""
        return (rect.y > 0 and rect.y < self.height - CURB_THICKNESS
                and rect.width > CURB_THICKNESS)
