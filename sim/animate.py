# sim/animate.py
import math
import numpy as np
import matplotlib
matplotlib.use("Agg")  # off-screen backend for image/GIF writing
import matplotlib.pyplot as plt
from matplotlib.patches import Polygon as MplPoly
import imageio.v2 as imageio
from geom.polygons import oriented_box

FORWARD_PATH_COLOR = "#38bdf8"
REVERSE_PATH_COLOR = "#fbbf24"
CRASHED_COLOR = "#EF4444"
CAR_COLOR = "#CA8A04"
SPOT_COLOR = "#3B82F6"


def draw_scene(ax, world, state=None, shape=None, path_xy=None, reverse=False, crashed=False):
    """Draw obstacles, the target spot, an optional predicted path and the vehicle."""
    ax.clear()
    ax.set_aspect('equal', adjustable='box')
    ax.set_xlim(0, world.width)
    ax.set_ylim(world.height, 0)   # screen frame: y grows downward

    for rect in world.obstacles:
        shade = "#4B5563" if world.is_neighbor_car(rect) else "#1F2937"
        ax.add_patch(MplPoly(rect.polygon(), closed=True, fill=True, alpha=0.35, color=shade))

    spot = world.parking_spot
    ax.add_patch(MplPoly(spot.polygon(), closed=True, fill=False, linewidth=2,
                         linestyle='--', edgecolor=SPOT_COLOR))
    cx, cy = spot.center
    ax.text(cx, cy, "P", ha="center", va="center", color=SPOT_COLOR, fontsize=14, alpha=0.6)

    if path_xy:
        xs, ys = zip(*path_xy)
        ax.plot(xs, ys, linewidth=2, linestyle='--', alpha=0.7,
                color=REVERSE_PATH_COLOR if reverse else FORWARD_PATH_COLOR)

    if state is not None and shape is not None:
        vpoly = oriented_box((state.x, state.y), shape.width, shape.height, state.heading)
        edge = CRASHED_COLOR if crashed else CAR_COLOR
        ax.add_patch(MplPoly(vpoly, closed=True, fill=False, linewidth=2, edgecolor=edge))
        # heading tick (nose direction)
        nose = 0.5 * shape.width
        hx = state.x + nose * math.cos(state.heading)
        hy = state.y + nose * math.sin(state.heading)
        ax.plot([state.x, hx], [state.y, hy], linewidth=2, color='red')

    ax.set_xlabel("x")
    ax.set_ylabel("y")


def save_png(world, state, shape, out_path, path_xy=None, reverse=False, crashed=False, title=None):
    """Save a single frame: scene, vehicle and (optionally) its predicted path."""
    fig, ax = plt.subplots(figsize=(8, 6))
    draw_scene(ax, world, state, shape, path_xy, reverse=reverse, crashed=crashed)
    ax.set_title(title or "Parking lot")
    fig.savefig(out_path, dpi=100, bbox_inches="tight")
    plt.close(fig)


def save_gif_frames(world, trace, out="parking.gif", stride=1, *, shape, frame_delay=0.05,
                    crashed=False):
    """
    Save an animated GIF of the vehicle following `trace`.

    Args:
        world: World (bounds, obstacles, spot).
        trace: list of VehicleState, one per recorded frame.
        out (str): output GIF filename.
        stride (int): keep every k-th state.
        shape: VehicleShape for the body outline.
        frame_delay (float): seconds per GIF frame.
        crashed (bool): draw the last frame in the crash colour.
    """
    stride = max(1, int(stride))
    indices = list(range(0, len(trace), stride))
    if trace and indices[-1] != len(trace) - 1:
        indices.append(len(trace) - 1)

    def render_frame(k_idx):
        fig, ax = plt.subplots(figsize=(8, 6))
        trail = [(s.x, s.y) for s in trace[:k_idx + 1]]
        last = k_idx == len(trace) - 1
        draw_scene(ax, world, trace[k_idx], shape, trail, crashed=crashed and last)

        # rasterize
        fig.canvas.draw()
        w, h = fig.canvas.get_width_height()
        buf = np.frombuffer(fig.canvas.buffer_rgba(), dtype=np.uint8)
        rgb = buf.reshape(h, w, 4)[..., :3].copy()
        plt.close(fig)
        return rgb

    imgs = [render_frame(k) for k in indices]
    imageio.mimsave(out, imgs, duration=float(frame_delay))
