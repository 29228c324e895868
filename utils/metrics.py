#!/usr/bin/env python3
import argparse, csv, math
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt


def load_trace(csv_path):
    cols = {'t': [], 'heading': [], 'speed': [], 'steering': []}
    with open(csv_path, newline='') as f:
        for row in csv.DictReader(f):
            for k in cols:
                cols[k].append(float(row[k]))
    return cols


def plot_trace(cols, out):
    fig, axes = plt.subplots(3, 1, figsize=(7, 7), sharex=True)
    axes[0].plot(cols['t'], [math.degrees(h) for h in cols['heading']])
    axes[0].set_ylabel('heading (deg)')
    axes[1].plot(cols['t'], cols['speed'])
    axes[1].axhline(0.0, color='#999999', linewidth=0.8)
    axes[1].set_ylabel('speed')
    axes[2].plot(cols['t'], [math.degrees(s) for s in cols['steering']])
    axes[2].set_ylabel('steering (deg)')
    axes[2].set_xlabel('time (s)')
    axes[0].set_title('Maneuver trace')
    fig.tight_layout()
    fig.savefig(out)
    plt.close(fig)


def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument('csv_path')
    ap.add_argument('--out', default='results/trace.png')
    args = ap.parse_args(argv)
    plot_trace(load_trace(args.csv_path), args.out)

if __name__ == '__main__':
    main()
