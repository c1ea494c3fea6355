# qlinalg/transform_numba.py
import numpy as np
from numba import config, njit, prange, set_num_threads, get_num_threads

# ---------- low-level kernels (Numba JIT) ----------

@njit(parallel=True, fastmath=True)
def _matvec_kernel(mat, vec, out):
    n_rows, n_cols = mat.shape
    # rows are independent → one prange task per output component
    for i in prange(n_rows):
        for j in range(n_cols):
            out[i] += mat[i, j] * vec[j]

# ---------- user-facing helpers ----------

def set_threads(n: int):
    set_num_threads(n)

def get_threads() -> int:
    return get_num_threads()

def max_threads() -> int:
    return config.NUMBA_NUM_THREADS

def matvec(mat: np.ndarray, vec: np.ndarray) -> np.ndarray:
    assert mat.ndim == 2 and vec.shape == (mat.shape[1],)
    dtype = np.result_type(mat, vec)
    out = np.zeros(mat.shape[0], dtype=dtype)
    _matvec_kernel(np.ascontiguousarray(mat, dtype=dtype),
                   np.ascontiguousarray(vec, dtype=dtype), out)
    return out
