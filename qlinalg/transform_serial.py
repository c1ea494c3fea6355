# qlinalg/transform_serial.py
import numpy as np


def matvec(mat: np.ndarray, vec: np.ndarray) -> np.ndarray:
    """out[i] = sum_j mat[i,j] * vec[j], one row at a time."""
    n_rows, n_cols = mat.shape
    assert vec.shape == (n_cols,)
    out = np.zeros(n_rows, dtype=np.result_type(mat, vec))
    for i in range(n_rows):
        acc = out.dtype.type(0)
        for j in range(n_cols):
            acc += mat[i, j] * vec[j]
        out[i] = acc
    return out
