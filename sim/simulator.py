# sim/simulator.py
import logging

from sim.advice import RESET_MESSAGE, AdviceService
from sim.controls import Gear, blend_speed, direction_sign, speed_command
from sim.session import Outcome, ParkingSession, TickInput
from vehicles.steering import SteeringMapper, pointer_delta

logger = logging.getLogger(__name__)

OUTCOME_ACTIONS = {
    Outcome.COLLIDED: "crashed",
    Outcome.PARKED: "parked",
}


class ParkingSimulator:
    """
    Host loop around a ParkingSession: gear, pedals, steering wheel, coach.

    Call frame(dt) once per display refresh. Steering changes land in the
    next frame's input.
    """

    def __init__(self, session=None, advice=None):
        self.session = session or ParkingSession()
        cfg = self.session.config
        self.wheel = SteeringMapper(cfg.max_steering_angle, cfg.steering_turns)
        self.advice = advice or AdviceService()
        self.gear = Gear.P
        self.gas = False
        self.brake = False
        self.show_guide = True

    @property
    def state(self):
        return self.session.state

    @property
    def outcome(self):
        return self.session.outcome

    def set_gear(self, gear):
        self.gear = Gear(gear)

    def frame(self, dt):
        before = self.session.outcome
        if before.terminal:
            return self.session.snapshot

        cur = self.session.state.speed
        target, response = speed_command(self.gear, self.gas, self.brake,
                                         self.session.config.max_speed)
        speed = blend_speed(cur, target, response, dt)
        snap = self.session.tick(TickInput(dt=dt, speed=speed, steering_angle=self.wheel.angle))

        if snap.outcome is not before:
            self.advice.request(self.session.telemetry(OUTCOME_ACTIONS[snap.outcome]))
        return snap

    # --- steering wheel (ignored once the session has ended) ---

    def _steer(self, apply, *args):
        if self.session.outcome.terminal:
            return self.wheel.angle
        return apply(*args)

    def turn_wheel(self, delta_deg):
        return self._steer(self.wheel.rotate, delta_deg)

    def drag_wheel(self, previous_deg, current_deg):
        """Turn the wheel by a pointer drag between two screen angles."""
        return self.turn_wheel(pointer_delta(previous_deg, current_deg))

    def set_wheel_turns(self, turns):
        return self._steer(self.wheel.set_turns, turns)

    def full_left(self):
        return self._steer(self.wheel.full_left)

    def center(self):
        return self._steer(self.wheel.center)

    def full_right(self):
        return self._steer(self.wheel.full_right)

    # ---

    def predicted_path(self):
        if not self.show_guide or self.session.outcome.terminal:
            return []
        return self.session.predicted_path(direction_sign(self.gear))

    def ask_advice(self):
        return self.advice.request(self.session.telemetry("asked for help"))

    def reset(self):
        snap = self.session.reset()
        self.wheel.sync(snap.state.steering_angle)
        self.gear = Gear.P
        self.gas = False
        self.brake = False
        self.advice.set_message(RESET_MESSAGE)
        return snap
