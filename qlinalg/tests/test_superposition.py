import numpy as np
import pytest
from qlinalg import gates as G
from qlinalg.basis import OrderedOrthonormalBasis
from qlinalg.errors import SuperPositionError
from qlinalg.scalar import is_very_close
from qlinalg.superposition import SuperPosition
from qlinalg.vector import Vec2, Vec3, Vector

def almost(p, q, tol=1e-12):
    return np.allclose(p, q, atol=tol, rtol=0)

S = np.sqrt(0.5)
STD2 = OrderedOrthonormalBasis.standard(2)

def test_equal_superposition_to_hadamard():
    psi = SuperPosition.from_scalars_and_basis(Vec2([S, S]), STD2)
    h = OrderedOrthonormalBasis(G.H())
    in_h = psi.to_basis(h)
    assert in_h.basis == h
    assert isinstance(in_h.scalars, Vec2)
    assert almost(in_h.scalars.elements, [1.0, 0.0])
    assert is_very_close(in_h.norm2(), 1.0)

def test_round_trip_restores_scalars():
    rng = np.random.default_rng(3)
    old = OrderedOrthonormalBasis(G.RX(0.4))
    for m in (G.H(), G.ROT(1.3), G.RZ(0.9), G.RX(2.1)):
        new = OrderedOrthonormalBasis(m)
        scalars = Vec2(rng.standard_normal(2) + 1j * rng.standard_normal(2)).normalize()
        psi = SuperPosition(scalars, old)
        there = psi.to_basis(new)
        back = there.to_basis(old)
        assert is_very_close(there.norm2(), 1.0)
        assert is_very_close(back.norm2(), 1.0)
        assert almost(back.scalars.elements, scalars.elements)
        assert almost(back.vector_in_standard_basis.elements, psi.vector_in_standard_basis.elements)

def test_standard_cache():
    h = OrderedOrthonormalBasis(G.H())
    psi = SuperPosition(Vec2([1.0, 0.0]), h)
    assert almost(psi.vector_in_standard_basis.elements, [S, S])

def test_dimension_four_with_cnot():
    cnot = OrderedOrthonormalBasis(G.CNOT())
    psi = SuperPosition(Vector([0.0, 0.0, 1.0, 0.0]), cnot)
    assert psi.vector_in_standard_basis == Vector([0.0, 0.0, 0.0, 1.0])
    back = psi.to_basis(OrderedOrthonormalBasis.standard(4))
    assert back.scalars == Vector([0.0, 0.0, 0.0, 1.0])

def test_not_normalized_rejected():
    with pytest.raises(SuperPositionError):
        SuperPosition(Vec2([1.0, 1.0]), STD2)
    with pytest.raises(ValueError):
        SuperPosition(Vec2([0.0, 0.0]), STD2)

def test_dimension_mismatch_rejected():
    with pytest.raises(SuperPositionError):
        SuperPosition(Vec3([1.0, 0.0, 0.0]), STD2)
    with pytest.raises(SuperPositionError):
        SuperPosition(Vec2([1.0, 0.0]), OrderedOrthonormalBasis.standard(3))

def test_probabilities():
    psi = SuperPosition([S, 1j * S], STD2)
    assert isinstance(psi.scalars, Vec2)
    assert almost(psi.probabilities(), [0.5, 0.5])
    assert psi.probabilities().dtype == np.float64

def test_accessors_return_copies():
    psi = SuperPosition(Vec2([1.0, 0.0]), STD2)
    sc = psi.scalars
    sc[0] = 5.0
    psi.vector_in_standard_basis[0] = 5.0
    assert psi.scalars == Vec2([1.0, 0.0])
    assert psi.vector_in_standard_basis == Vec2([1.0, 0.0])

def test_display():
    psi = SuperPosition(Vec2([0.0, 1.0]), STD2)
    assert str(psi) == "scalars: [0, 1], basis: [[1, 0], [0, 1]]"

def test_to_basis_of_other_dimension_rejected():
    psi = SuperPosition(Vec2([S, S]), STD2)
    with pytest.raises(SuperPositionError):
        psi.to_basis(OrderedOrthonormalBasis.standard(3))
