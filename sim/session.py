# sim/session.py
import logging
from collections import namedtuple
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from geom.collision import COLLISION_MODES
from geom.parking import PARKED_SPEED_THRESHOLD, is_parked
from sim.advice import Telemetry
from src_env.config import SimulationConfig
from src_env.world import World
from vehicles.ackermann import Ackermann

logger = logging.getLogger(__name__)


class Outcome(str, Enum):
    ACTIVE = "ACTIVE"
    COLLIDED = "COLLIDED"
    PARKED = "PARKED"

    @property
    def terminal(self):
        return self is not Outcome.ACTIVE


@dataclass(frozen=True)
class TickInput:
    """One frame of driver input. speed is already blended by the host."""
    dt: float
    speed: float
    steering_angle: Optional[float] = None   # None keeps the current angle


# state and outcome always travel together
Snapshot = namedtuple("Snapshot", ["state", "outcome"])


class ParkingSession:
    """
    Owns the committed vehicle state and outcome between ticks.

    tick() and reset() each swap in one new Snapshot, so a reader never
    sees a fresh state paired with a stale outcome.
    """

    def __init__(self, config: SimulationConfig = None, world: World = None):
        self.config = config or SimulationConfig()
        self.world = world or World.from_config(self.config)
        self.car = Ackermann(self.config.shape, self.config.wheel_base,
                             self.config.max_steering_angle)
        self._collides = COLLISION_MODES[self.config.collision_mode]
        self._snapshot = Snapshot(self.world.start_state, Outcome.ACTIVE)

    @property
    def snapshot(self):
        return self._snapshot

    @property
    def state(self):
        return self._snapshot.state

    @property
    def outcome(self):
        return self._snapshot.outcome

    def tick(self, inp: TickInput):
        current = self._snapshot
        if current.outcome.terminal:
            return current

        steer = inp.steering_angle
        if steer is not None and abs(steer) > self.config.max_steering_angle:
            raise ValueError(f"steering angle {steer} exceeds lock "
                             f"{self.config.max_steering_angle}")

        moved = self.car.step(current.state.with_controls(speed=inp.speed, steering_angle=steer),
                              inp.dt)

        outcome = Outcome.ACTIVE
        shape = self.config.shape
        if self._collides(moved, shape, self.world.obstacles):
            outcome = Outcome.COLLIDED
            logger.info("collision at (%.1f, %.1f) heading %.3f", moved.x, moved.y, moved.heading)
        elif (abs(moved.speed) < PARKED_SPEED_THRESHOLD
              and is_parked(moved, shape, self.world.parking_spot)):
            outcome = Outcome.PARKED
            logger.info("parked at (%.1f, %.1f) heading %.3f", moved.x, moved.y, moved.heading)

        self._snapshot = Snapshot(moved, outcome)
        return self._snapshot

    def reset(self):
        self._snapshot = Snapshot(self.world.start_state, Outcome.ACTIVE)
        logger.info("session reset")
        return self._snapshot

    def corners(self):
        return self.car.footprint(self.state)

    def predicted_path(self, direction_sign, steps=None):
        """Preview from the committed state; empty when there is no drive direction."""
        if direction_sign is None:
            return []
        if steps is None:
            return self.car.predict(self.state, direction_sign)
        return self.car.predict(self.state, direction_sign, steps)

    def telemetry(self, last_action):
        snap = self._snapshot
        return Telemetry.capture(snap.state, self.world.parking_spot, snap.outcome, last_action)
