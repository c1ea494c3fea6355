# qlinalg/braket.py
"""Dirac notation over Vector: |psi> as Ket, <phi| as Bra.

A Bra stores its components already conjugated, so `bra @ ket` is a plain
sum of products and `ket.dagger() @ ket` is the squared norm of the ket.
"""
import numpy as np

from .vector import Vector


def _as_vector(data) -> Vector:
    return data if isinstance(data, Vector) else Vector(data)


class Ket:
    def __init__(self, vector):
        self.vector = _as_vector(vector)

    def dagger(self) -> "Bra":
        return Bra(self.vector.conjugate())

    def norm(self):
        return self.vector.norm()

    def __len__(self):
        return len(self.vector)

    def __eq__(self, other):
        if not isinstance(other, Ket):
            return NotImplemented
        return self.vector == other.vector

    def __str__(self):
        return f"|{self.vector}>"

    def __repr__(self):
        return f"Ket({self.vector!r})"


class Bra:
    def __init__(self, vector):
        self.vector = _as_vector(vector)

    def dagger(self) -> Ket:
        return Ket(self.vector.conjugate())

    def norm(self):
        return self.vector.norm()

    def __len__(self):
        return len(self.vector)

    def __matmul__(self, other):
        if not isinstance(other, Ket):
            return NotImplemented
        return np.sum((self.vector * other.vector).elements)

    def __eq__(self, other):
        if not isinstance(other, Bra):
            return NotImplemented
        return self.vector == other.vector

    def __str__(self):
        return f"<{self.vector}|"

    def __repr__(self):
        return f"Bra({self.vector!r})"
