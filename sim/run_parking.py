#!/usr/bin/env python3
"""
Run a scripted parking maneuver headlessly and record what happened.

A script is a JSON list of phases, each held for `seconds`:
    {"gear": "D", "gas": true, "brake": false, "turns": -1.5, "seconds": 0.7}
`turns` is optional (wheel keeps its position when omitted).
"""
import argparse, csv, json, logging, os

from sim.session import Outcome, ParkingSession
from sim.simulator import ParkingSimulator
from src_env.config import (DEFAULT_CAR_WIDTH, DEFAULT_SPOT_WIDTH, ConfigError,
                            SimulationConfig)

logger = logging.getLogger(__name__)

# Nose-in along the default layout: pull up, full left lock, straighten, brake.
DEMO_SCRIPT = [
    {"gear": "D", "gas": True, "turns": 0, "seconds": 3.2},
    {"gear": "D", "gas": True, "turns": -1.5, "seconds": 0.68},
    {"gear": "D", "gas": True, "turns": 0, "seconds": 3.6},
    {"gear": "D", "brake": True, "seconds": 1.5},
]


def load_script(path):
    with open(path) as f:
        phases = json.load(f)
    if not isinstance(phases, list):
        raise ValueError(f"{path}: expected a JSON list of phases")
    return phases


def run_script(sim, phases, dt):
    """Drive `sim` through the phases; returns the list of recorded (t, state, outcome)."""
    t = 0.0
    rows = [(t, sim.state, sim.outcome)]
    for phase in phases:
        sim.set_gear(phase.get("gear", sim.gear))
        sim.gas = bool(phase.get("gas", False))
        sim.brake = bool(phase.get("brake", False))
        if "turns" in phase:
            sim.set_wheel_turns(phase["turns"])
        for _ in range(int(round(phase["seconds"] / dt))):
            snap = sim.frame(dt)
            t += dt
            rows.append((t, snap.state, snap.outcome))
            if snap.outcome.terminal:
                return rows
    return rows


def write_trace(rows, path):
    with open(path, 'w', newline='') as f:
        w = csv.writer(f)
        w.writerow(['t', 'x', 'y', 'heading', 'steering', 'speed', 'outcome'])
        for t, s, outcome in rows:
            w.writerow([f"{t:.4f}", f"{s.x:.3f}", f"{s.y:.3f}", f"{s.heading:.5f}",
                        f"{s.steering_angle:.5f}", f"{s.speed:.4f}", outcome.value])


def main(argv=None):
    ap = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    ap.add_argument('--script', type=str, default=None, help='JSON phase list (default: built-in demo)')
    ap.add_argument('--car-width', type=float, default=DEFAULT_CAR_WIDTH)
    ap.add_argument('--spot-width', type=float, default=DEFAULT_SPOT_WIDTH)
    ap.add_argument('--collision', choices=['corners', 'sat'], default='corners')
    ap.add_argument('--dt', type=float, default=1 / 60)
    ap.add_argument('--outdir', type=str, default='results')
    ap.add_argument('--png', action='store_true', help='save the final frame')
    ap.add_argument('--gif', action='store_true', help='save an animation of the run')
    ap.add_argument('--stride', type=int, default=6)
    ap.add_argument('--log-level', default='INFO')
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        config = SimulationConfig.from_difficulty(args.car_width, args.spot_width,
                                                  collision_mode=args.collision)
    except ConfigError as e:
        ap.error(str(e))

    phases = load_script(args.script) if args.script else DEMO_SCRIPT
    sim = ParkingSimulator(ParkingSession(config))
    rows = run_script(sim, phases, args.dt)
    outcome = sim.outcome
    logger.info("finished after %.2f s: %s", rows[-1][0], outcome.value)

    os.makedirs(args.outdir, exist_ok=True)
    write_trace(rows, os.path.join(args.outdir, 'trace.csv'))

    final = sim.state
    with open(os.path.join(args.outdir, 'summary.csv'), 'w', newline='') as f:
        w = csv.writer(f)
        w.writerow(['outcome', 'duration_s', 'frames', 'x', 'y', 'heading'])
        w.writerow([outcome.value, f"{rows[-1][0]:.3f}", len(rows) - 1,
                    f"{final.x:.3f}", f"{final.y:.3f}", f"{final.heading:.5f}"])

    if args.png or args.gif:
        from sim import animate  # matplotlib only when drawing
        crashed = outcome is Outcome.COLLIDED
        if args.png:
            animate.save_png(sim.session.world, final, config.shape,
                             os.path.join(args.outdir, 'final.png'),
                             crashed=crashed, title=f"Outcome: {outcome.value}")
        if args.gif:
            animate.save_gif_frames(sim.session.world, [s for _, s, _ in rows],
                                    os.path.join(args.outdir, 'parking.gif'),
                                    stride=args.stride, shape=config.shape, crashed=crashed)

    sim.advice.wait(timeout=1.0)
    if sim.advice.latest:
        logger.info("coach: %s", sim.advice.latest)
    return outcome


if __name__ == '__main__':
    main()
