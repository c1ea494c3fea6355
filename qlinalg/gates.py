# qlinalg/gates.py
# Orthonormal (unitary) matrices usable as change-of-basis matrices.
import numpy as np

def H(dtype=np.float64) -> np.ndarray:
    """Hadamard: columns are |+> and |->."""
    s = np.sqrt(0.5)
    return np.array([[s, s],
                     [s, -s]], dtype=dtype)

def X(dtype=np.float64) -> np.ndarray:
    return np.array([[0, 1],
                     [1, 0]], dtype=dtype)

def CNOT(dtype=np.float64) -> np.ndarray:
    # 4x4 in order 00,01,10,11
    mat = np.eye(4, dtype=dtype)
    # swap |10> <-> |11>
    mat[2,2] = 0; mat[3,3] = 0
    mat[2,3] = 1; mat[3,2] = 1
    return mat

def ROT(theta: float, dtype=np.float64) -> np.ndarray:
    """Real rotation of the plane by theta."""
    c, s = np.cos(theta), np.sin(theta)
    return np.array([[c, -s],
                     [s, c]], dtype=dtype)

def RZ(theta: float, dtype=np.complex128) -> np.ndarray:
    return np.array([[np.exp(-0.5j*theta), 0],
                     [0, np.exp(+0.5j*theta)]], dtype=dtype)

def RX(theta: float, dtype=np.complex128) -> np.ndarray:
    c = np.cos(theta/2.0)
    s = -1j*np.sin(theta/2.0)
    return np.array([[c, s],
                     [s, c]], dtype=dtype)
