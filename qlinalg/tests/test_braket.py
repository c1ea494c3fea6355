import numpy as np
import pytest
from qlinalg.braket import Bra, Ket
from qlinalg.errors import LengthMismatchError
from qlinalg.vector import Vec2, Vec3

def test_dagger_gives_norm_squared():
    k = Ket([1 + 1j, 2.0])
    assert np.isclose(k.dagger() @ k, 6.0)
    assert k.vector.norm_squared() == 6.0

def test_bra_ket_matches_inner_product():
    phi = Vec2([1j, 2.0])
    psi = Vec2([3.0, 1 - 1j])
    # <phi|psi> = conj(phi) . psi = psi.inner_product(phi)
    assert Ket(phi).dagger() @ Ket(psi) == psi.inner_product(phi)

def test_dagger_round_trip():
    k = Ket(Vec2([1j, 2.0]))
    b = k.dagger()
    assert b == Bra(Vec2([-1j, 2.0]))
    assert b.dagger() == k
    assert len(b) == 2
    assert b.norm() == k.norm()

def test_display():
    assert str(Ket(Vec2([1.0, 0.0]))) == "|[1, 0]>"
    assert str(Bra(Vec2([1.0, 0.0]))) == "<[1, 0]|"

def test_mismatched_lengths():
    with pytest.raises(LengthMismatchError):
        Bra(Vec2([1.0, 0.0])) @ Ket(Vec3([1.0, 0.0, 0.0]))

def test_ket_ket_product_undefined():
    with pytest.raises(TypeError):
        Ket([1.0]) @ Ket([1.0])
