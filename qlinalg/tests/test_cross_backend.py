import numpy as np
from qlinalg import gates as G
from qlinalg.basis import OrderedOrthonormalBasis
from qlinalg.bench import random_basis, random_state
from qlinalg.superposition import SuperPosition
from qlinalg.transform_numba import matvec as matvec_numba, set_threads, get_threads
from qlinalg.transform_serial import matvec as matvec_serial
from qlinalg.vector import Vector

def max_abs_diff(a, b):
    return float(np.max(np.abs(a - b)))

def test_serial_vs_numba_matvec_small():
    m = G.RX(0.3) @ G.H()
    v = np.array([0.6, 0.8j])
    d = max_abs_diff(matvec_serial(m, v), matvec_numba(m, v))
    assert d < 1e-12
    assert np.allclose(matvec_serial(m, v), m @ v, atol=1e-12, rtol=0)

def test_random_bases_match():
    for n in (3, 8, 33):
        old = random_basis(n, seed=n)
        new = random_basis(n, seed=n + 100)
        v = random_state(n, seed=n + 200)
        s = new.change_from_basis(v, old, backend="serial")
        t = new.change_from_basis(v, old, backend="numba")
        assert type(s) is type(t)
        assert np.allclose(s.elements, t.elements, atol=1e-12, rtol=0)

def test_superposition_round_trip_numba():
    old = OrderedOrthonormalBasis(G.RZ(0.5))
    new = OrderedOrthonormalBasis(G.H())
    psi = SuperPosition(Vector([0.6, 0.8j]), old, backend="numba")
    back = psi.to_basis(new, backend="numba").to_basis(old, backend="numba")
    assert np.allclose(back.scalars.elements, [0.6, 0.8j], atol=1e-12, rtol=0)

def test_thread_control():
    before = get_threads()
    try:
        set_threads(1)
        assert get_threads() == 1
    finally:
        set_threads(before)
    assert get_threads() == before
