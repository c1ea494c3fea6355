# qlinalg/plot_results.py
import csv, os, sys
from collections import defaultdict
from statistics import median
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

DATA_DIR = os.path.join(os.path.dirname(__file__), "..", "data")

def load_rows(path):
    rows = []
    with open(path, "r") as f:
        r = csv.DictReader(f)
        for row in r:
            row["dimension"] = int(row["dimension"])
            row["reps"]      = int(row["reps"])
            row["threads"]   = int(row["threads"])
            row["wall_ms"]   = float(row["wall_ms"])
            rows.append(row)
    return rows

def median_by_key(rows, key_fields):
    buckets = defaultdict(list)
    for r in rows:
        key = tuple(r[k] for k in key_fields)
        buckets[key].append(r["wall_ms"])
    agg = []
    for key, vals in buckets.items():
        out = dict(zip(key_fields, key))
        out["wall_ms"] = float(median(vals))
        agg.append(out)
    return agg

def plot_runtime_vs_dimension(rows_by_backend, out_dir, tag):
    """rows_by_backend: {backend: rows from dims.csv}. Returns the png path or None."""
    if not any(rows_by_backend.values()):
        return None
    plt.figure()
    for be, rows in rows_by_backend.items():
        pts = median_by_key(rows, ["dimension"])
        if not pts:
            continue
        xs, ys = zip(*sorted((r["dimension"], r["wall_ms"]) for r in pts))
        plt.plot(xs, ys, marker="o", label=be)
    plt.xlabel("Dimension (n)")
    plt.ylabel("Runtime per basis change (ms, log scale)")
    plt.title(f"Runtime vs Dimension [{tag}]")
    plt.xscale("log", base=2)
    plt.yscale("log")
    plt.grid(True, which="both", ls="--", lw=0.5)
    plt.legend()
    plt.tight_layout()
    path = os.path.join(out_dir, f"runtime_vs_dimension_{tag}.png")
    plt.savefig(path, dpi=200)
    plt.close()
    return path

def plot_speedup_vs_threads(rows, out_dir, tag):
    pts = sorted(median_by_key(rows, ["threads"]), key=lambda r: r["threads"])
    t1 = next((r["wall_ms"] for r in pts if r["threads"] == 1), None)
    if not t1:
        return None
    xs = [r["threads"] for r in pts]
    ys = [t1 / r["wall_ms"] for r in pts]
    plt.figure()
    plt.plot(xs, ys, marker="o")
    plt.xlabel("Threads")
    plt.ylabel("Speedup (T1/Tt)")
    plt.title(f"Speedup vs Threads [{tag}]")
    plt.grid(True)
    path = os.path.join(out_dir, f"speedup_vs_threads_{tag}.png")
    plt.savefig(path, dpi=200)
    plt.close()
    return path

def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    tag = argv[0] if argv else "compare"
    data_dir = argv[1] if len(argv) > 1 else DATA_DIR

    dims_rows = {}
    for be in ("serial", "numba"):
        p = os.path.join(data_dir, be, "dims.csv")
        if os.path.exists(p):
            dims_rows[be] = load_rows(p)
    threads_path = os.path.join(data_dir, "numba", "threads.csv")

    if not dims_rows and not os.path.exists(threads_path):
        print(f"No CSV files found under {data_dir}")
        return

    saved = []
    if dims_rows:
        print(f"Plotting dims.csv for {', '.join(dims_rows)}...")
        saved.append(plot_runtime_vs_dimension(dims_rows, data_dir, tag))
    if os.path.exists(threads_path):
        print("Plotting numba/threads.csv...")
        saved.append(plot_speedup_vs_threads(load_rows(threads_path), data_dir, tag))

    for path in saved:
        if path:
            print(f"Saved {path}")

if __name__ == "__main__":
    main()
