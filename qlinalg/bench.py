# qlinalg/bench.py
import argparse, csv, os, socket, subprocess, time, platform
from datetime import datetime
import numpy as np
from .basis import OrderedOrthonormalBasis
from .vector import vector_class_for

DATA_DIR = os.path.join(os.path.dirname(__file__), "..", "data")

def backend_dir(backend, data_dir=DATA_DIR):
    path = os.path.join(data_dir, backend)
    os.makedirs(path, exist_ok=True)
    return path

# ---------------------------------------------------------------------

def meta_row():
    commit = ""
    try:
        commit = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"],
                                         stderr=subprocess.DEVNULL).decode().strip()
    except (OSError, subprocess.CalledProcessError):
        commit = ""
    return {
        "hostname": socket.gethostname(),
        "commit": commit,
        "dtype": "float64",
        "timestamp": datetime.now().isoformat(timespec="seconds"),
        "python": platform.python_version(),
        "machine": platform.machine(),
        "cpu": platform.processor(),
    }

HEADER = ["dimension","reps","backend","threads","wall_ms","hostname","commit","dtype","timestamp"]

def new_csv(path):
    """Create/overwrite CSV with header."""
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w", newline="") as f:
        csv.DictWriter(f, fieldnames=HEADER).writeheader()

def write_row(path, row):
    with open(path, "a", newline="") as f:
        csv.DictWriter(f, fieldnames=HEADER).writerow(row)

# ---------------------------------------------------------------------

def random_basis(n, seed=0) -> OrderedOrthonormalBasis:
    """Random orthogonal basis: Q of the QR of a Gaussian matrix, sign-fixed."""
    rng = np.random.default_rng(seed)
    q, r = np.linalg.qr(rng.standard_normal((n, n)))
    q = q * np.where(np.diag(r) < 0, -1.0, 1.0)
    return OrderedOrthonormalBasis(q)

def random_state(n, seed=0):
    rng = np.random.default_rng(seed)
    return vector_class_for(n)(rng.standard_normal(n)).normalize()

def warmup(n, backend):
    # one dummy run to JIT-compile the numba kernel
    b = random_basis(n, seed=1)
    b.change_from_basis(random_state(n, seed=1), b, backend=backend)

def time_run(new_basis, old_basis, vec, backend, reps):
    t0 = time.perf_counter()
    for _ in range(reps):
        new_basis.change_from_basis(vec, old_basis, backend=backend)
    return (time.perf_counter() - t0) * 1e3 / reps  # ms per change

def numba_max_threads():
    try:
        from .transform_numba import max_threads
    except ImportError:
        return os.cpu_count() or 1
    return max_threads()

def _row(n, reps, backend, threads, wall):
    m = meta_row()
    return {
        "dimension": n, "reps": reps, "backend": backend, "threads": threads,
        "wall_ms": f"{wall:.3f}",
        "hostname": m["hostname"], "commit": m["commit"], "dtype": m["dtype"], "timestamp": m["timestamp"]
    }

# ---------------------------------------------------------------------
# individual experiments

def bench_dims(dims, reps, backend, out_path):
    print(f"[run] Dimension scaling → {out_path}")
    new_csv(out_path)
    warmup(min(dims), backend)
    threads = 0 if backend == "serial" else numba_max_threads()
    for n in dims:
        old_basis = random_basis(n, seed=42)
        new_basis = random_basis(n, seed=43)
        vec = random_state(n, seed=44)
        wall = time_run(new_basis, old_basis, vec, backend, reps)
        write_row(out_path, _row(n, reps, backend, threads, wall))
        print(f"  n={n}  wall={wall:.3f} ms")
    print("✓ done.\n")

def bench_threads(n, reps, threads_list, out_path):
    print(f"[run] Thread scaling → {out_path}")
    new_csv(out_path)
    from .transform_numba import set_threads
    old_basis = random_basis(n, seed=42)
    new_basis = random_basis(n, seed=43)
    vec = random_state(n, seed=44)
    warmup(n, "numba")
    pool = numba_max_threads()
    set_threads(1)
    t1 = time_run(new_basis, old_basis, vec, "numba", reps)
    print(f"  pool={pool}  T1={t1:.3f} ms")

    for t in threads_list:
        tt = min(int(t), pool)
        if tt != t:
            print(f"  requested t={t} > pool={pool}; using t={tt}")
        set_threads(tt)
        wall = time_run(new_basis, old_basis, vec, "numba", reps)
        speedup = t1 / wall if wall > 0 else float("nan")
        write_row(out_path, _row(n, reps, "numba", tt, wall))
        print(f"  t={tt}  wall={wall:.3f} ms  speedup={speedup:.2f}×")
    print("✓ done.\n")

# ---------------------------------------------------------------------
def main(argv=None):
    p = argparse.ArgumentParser(description="qlinalg basis-change benchmarks → data/<backend>/*.csv")
    p.add_argument("--data-dir", type=str, default=DATA_DIR)
    sub = p.add_subparsers(dest="cmd", required=True)

    p_dims = sub.add_parser("dims")
    p_dims.add_argument("--dims", type=str, default="2,8,32,128")
    p_dims.add_argument("--reps", type=int, default=20)
    p_dims.add_argument("--backend", type=str, default="numba", choices=["serial","numba"])

    p_threads = sub.add_parser("threads")
    p_threads.add_argument("--n", type=int, default=512)
    p_threads.add_argument("--reps", type=int, default=20)
    p_threads.add_argument("--threads", type=str, default="1,2,4,8")

    args = p.parse_args(argv)

    if args.cmd == "dims":
        ds = [int(x) for x in args.dims.split(",")]
        out_path = os.path.join(backend_dir(args.backend, args.data_dir), "dims.csv")
        bench_dims(ds, args.reps, args.backend, out_path)

    elif args.cmd == "threads":
        ts = [int(x) for x in args.threads.split(",")]
        out_path = os.path.join(backend_dir("numba", args.data_dir), "threads.csv")
        bench_threads(args.n, args.reps, ts, out_path)

if __name__ == "__main__":
    main()
