# run_all.py
import subprocess
import sys

def run_sim(outdir="results", script=None, gif=True):
    cmd = [sys.executable, "-m", "sim.run_parking", "--outdir", outdir, "--png"]
    if gif:
        cmd.append("--gif")
    if script:
        cmd += ["--script", script]
    subprocess.run(cmd, check=True)

def make_plot(outdir="results"):
    subprocess.run([
        sys.executable, "-m", "utils.metrics",
        f"{outdir}/trace.csv",
        "--out", f"{outdir}/trace.png"
    ], check=True)

if __name__ == "__main__":
    run_sim()
    make_plot()
