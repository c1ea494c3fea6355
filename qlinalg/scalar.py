# qlinalg/scalar.py
"""Scalar field helpers: epsilon, rounding and approximate equality.

Everything here works on numpy scalars and, elementwise, on numpy arrays,
so the same code serves real (float64) and complex (complex128) fields.
"""
from collections.abc import Iterable, Sequence

import numpy as np

Real = np.float64
Complex = np.complex128


def default_epsilon(real_type=Real):
    """2**-23 (~1.1920929e-7), built by halving/squaring inside `real_type`."""
    one = real_type(1)
    half = one / (one + one)
    fourth = half * half
    sixteenth = fourth * fourth
    two_fifty_sixth = sixteenth * sixteenth
    big_frac = two_fifty_sixth * two_fifty_sixth
    return big_frac * sixteenth * fourth * half


def _round_half_away(x):
    return np.sign(x) * np.floor(np.abs(x) + 0.5)


def round_to(value, epsilon):
    """Round to the nearest multiple of epsilon (complex: per component)."""
    scaled = np.asarray(value) / epsilon
    if np.iscomplexobj(scaled):
        out = (_round_half_away(scaled.real) + 1j * _round_half_away(scaled.imag)) * epsilon
    else:
        out = _round_half_away(scaled) * epsilon
    return out if np.ndim(out) > 0 else np.asarray(out)[()]


def round_small(value):
    return round_to(value, default_epsilon())


def is_close(a, b, epsilon):
    res = round_to(a, epsilon) == round_to(b, epsilon)
    return bool(res) if np.ndim(res) == 0 else res


def is_very_close(a, b):
    return is_close(a, b, default_epsilon())


# ---------- field capability helpers ----------

def as_scalar_array(data, ndim=1) -> np.ndarray:
    """Coerce a sequence or iterable into a float64/complex128 array of the given rank."""
    if not isinstance(data, (np.ndarray, Sequence)) and isinstance(data, Iterable):
        data = list(data)
    arr = np.array(data)
    if arr.dtype == object:
        arr = np.array(data, dtype=Complex)
    if arr.size == 0:
        arr = arr.astype(Real).reshape((0,) * ndim)
    elif arr.dtype.kind in "biuf":
        arr = arr.astype(Real)
    elif arr.dtype.kind == "c":
        arr = arr.astype(Complex)
    else:
        raise TypeError(f"Unsupported scalar dtype {arr.dtype}")
    if arr.ndim != ndim:
        raise ValueError(f"Expected {ndim}-D data, got shape {arr.shape}")
    return arr


def is_complex(value) -> bool:
    return bool(np.iscomplexobj(value))


def conjugate(value):
    return np.conj(value) if is_complex(value) else value


def real_part(value):
    return np.real(value)
