# sim/advice.py
"""
Driving-instructor advice, decoupled from the tick loop.

The simulation hands a telemetry snapshot to AdviceService.request(), which
runs the text generator on a daemon thread and never blocks the caller.
Generator failures are logged and replaced by a fixed fallback line.
"""
import logging
import math
import threading
from dataclasses import dataclass

from geom.polygons import angular_distance, normalize_angle
from geom.parking import HEADING_TOLERANCE_RAD, TARGET_HEADING

logger = logging.getLogger(__name__)

GREETING = ("Hi, I'm your driving coach. The car is in P. Shift into R, "
            "then ease onto the gas to start backing in.")
RESET_MESSAGE = "Fresh start! Pick a gear first."
FALLBACK_ADVICE = "Connection hiccup, the coach didn't catch that. Try again?"


@dataclass(frozen=True)
class Telemetry:
    """What the coach gets to see. Distances are relative to the spot's corner."""
    dx: float
    dy: float
    heading_degrees: int
    steering_degrees: int
    outcome: str
    last_action: str

    @classmethod
    def capture(cls, state, spot, outcome, last_action):
        heading = int(round(math.degrees(normalize_angle(state.heading)))) % 360
        return cls(
            dx=round(state.x - spot.x, 1),
            dy=round(state.y - spot.y, 1),
            heading_degrees=heading,
            steering_degrees=int(round(math.degrees(state.steering_angle))),
            outcome=getattr(outcome, "value", str(outcome)),
            last_action=last_action,
        )

    def to_payload(self):
        return {
            "relativePosition": {"dx": self.dx, "dy": self.dy},
            "headingDegrees": self.heading_degrees,
            "steeringDegrees": self.steering_degrees,
            "outcome": self.outcome,
            "lastAction": self.last_action,
        }


def coach_advice(telemetry):
    """Offline rule-based coach. Short, one or two sentences."""
    if telemetry.outcome == "COLLIDED":
        return ("Bang, you touched something. Reset, go slower, and check the "
                "corner closest to the obstacle before each move.")
    if telemetry.outcome == "PARKED":
        return "Perfect, right in the box and straight. Shift to P and you're done!"

    off_target = angular_distance(math.radians(telemetry.heading_degrees), TARGET_HEADING)
    if off_target < HEADING_TOLERANCE_RAD:
        if abs(telemetry.steering_degrees) > 2:
            return "The car is straight now. Center the wheel and keep it slow."
        return "Straight and centered. Creep in and brake once the whole car is inside the lines."
    if abs(telemetry.steering_degrees) < 5:
        return ("You're driving with the wheel centered. Turn it to full lock "
                "before you start the turn into the spot.")
    if telemetry.dy > 0 and telemetry.heading_degrees < 90:
        return "You're still facing along the lane. Keep the lock on and watch the rear corner."
    return "Go slowly and correct with small steering changes; brake whenever you're unsure."


class AdviceService:
    """
    Fire-and-forget advice requests.

    generate: callable(Telemetry) -> str. May be slow or raise; neither
    reaches the caller of request().
    """

    def __init__(self, generate=coach_advice, fallback=FALLBACK_ADVICE, initial=GREETING):
        self._generate = generate
        self._fallback = fallback
        self._lock = threading.Lock()
        self._latest = initial
        self._seq = 0
        self._applied = 0
        self._threads = []

    @property
    def latest(self):
        with self._lock:
            return self._latest

    @property
    def pending(self):
        return any(t.is_alive() for t in self._threads)

    def set_message(self, text):
        with self._lock:
            self._seq += 1
            self._applied = self._seq
            self._latest = text

    def request(self, telemetry, on_done=None):
        """Start generating advice in the background and return immediately."""
        with self._lock:
            self._seq += 1
            seq = self._seq
        t = threading.Thread(target=self._run, args=(seq, telemetry, on_done),
                             name=f"advice-{seq}", daemon=True)
        self._threads = [th for th in self._threads if th.is_alive()] + [t]
        t.start()
        return t

    def _run(self, seq, telemetry, on_done):
        try:
            text = self._generate(telemetry) or self._fallback
        except Exception:
            logger.exception("advice generation failed (%s)", telemetry.last_action)
            text = self._fallback
        with self._lock:
            # an older reply must not overwrite a newer one
            if seq > self._applied:
                self._applied = seq
                self._latest = text
        if on_done is not None:
            on_done(text)

    def wait(self, timeout=None):
        for t in list(self._threads):
            t.join(timeout)
