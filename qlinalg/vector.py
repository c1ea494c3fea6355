# qlinalg/vector.py
import math
import numbers
import operator

import numpy as np

from .errors import DegenerateNormalizeError, LengthMismatchError, UndefinedOperationError
from .scalar import Complex, Real, as_scalar_array, default_epsilon, is_close, real_part

# cosines within a few ulps of +/-1 are treated as exactly +/-1 by Vector.angle
_COS_SLACK = 4 * np.finfo(Real).eps


def check_lengths(a: "Vector", b: "Vector"):
    if len(a) > 0 and len(b) > 0 and len(a) != len(b):
        raise LengthMismatchError(
            f"Cannot operate on vectors with different non-zero sizes ({len(a)} vs {len(b)})."
        )


def _pad(elements: np.ndarray, n: int) -> np.ndarray:
    # an empty operand stands for the zero vector of the other operand's length
    if len(elements) == n:
        return elements
    return np.zeros(n, dtype=elements.dtype)


class Vector:
    """Variable-length vector over a real or complex field.

    Fixed-dimension subclasses (Vec0..Vec3) set DIMENSION; here it is None.
    A zero-length vector is the zero vector of every dimension.
    """

    DIMENSION = None
    # keep numpy scalars from swallowing vectors in `np.float64(2) * v`
    __array_ufunc__ = None

    def __init__(self, data=()):
        if isinstance(data, Vector):
            data = data.elements
        elements = as_scalar_array(data)
        if self.DIMENSION is not None and len(elements) != self.DIMENSION:
            raise LengthMismatchError(
                f"{type(self).__name__} needs {self.DIMENSION} elements, got {len(elements)}"
            )
        self.elements = elements

    @classmethod
    def from_sequence(cls, data) -> "Vector":
        return cls(data)

    @classmethod
    def from_ndarray(cls, arr: np.ndarray) -> "Vector":
        return cls(arr)

    @classmethod
    def _wrap(cls, elements: np.ndarray) -> "Vector":
        obj = cls.__new__(cls)
        obj.elements = elements
        return obj

    @classmethod
    def zero(cls, dtype=Real) -> "Vector":
        return cls._wrap(np.zeros(cls.DIMENSION or 0, dtype=dtype))

    # ---------- element access ----------

    def __len__(self):
        return len(self.elements)

    def length(self) -> int:
        return len(self.elements)

    def _check_index(self, i) -> int:
        i = operator.index(i)
        if not 0 <= i < len(self):
            raise IndexError(f"index {i} out of range for vector of length {len(self)}")
        return i

    def __getitem__(self, i):
        return self.elements[self._check_index(i)]

    def __setitem__(self, i, value):
        i = self._check_index(i)
        if np.iscomplexobj(value) and not np.iscomplexobj(self.elements):
            self.elements = self.elements.astype(Complex)
        self.elements[i] = value

    def __iter__(self):
        return iter(self.elements)

    def copy(self) -> "Vector":
        return type(self)._wrap(self.elements.copy())

    def as_numpy(self) -> np.ndarray:
        return self.elements

    # ---------- arithmetic ----------

    def _binary(self, other, op, reflected=False):
        if isinstance(other, Vector):
            check_lengths(self, other)
            n = max(len(self), len(other))
            cls = type(self) if len(self) == n else type(other)
            a, b = _pad(self.elements, n), _pad(other.elements, n)
        elif isinstance(other, numbers.Number):
            cls, a, b = type(self), self.elements, other
        else:
            return NotImplemented
        if reflected:
            a, b = b, a
        return cls._wrap(np.asarray(op(a, b)))

    def _inplace(self, other, op):
        res = self._binary(other, op)
        if res is NotImplemented:
            return res
        if self.DIMENSION is None or len(res) == self.DIMENSION:
            self.elements = res.elements
            return self
        # e.g. Vec0 += Vec2: the result no longer fits this class
        return res

    def __add__(self, other):
        return self._binary(other, operator.add)

    def __radd__(self, other):
        return self._binary(other, operator.add, reflected=True)

    def __sub__(self, other):
        return self._binary(other, operator.sub)

    def __rsub__(self, other):
        return self._binary(other, operator.sub, reflected=True)

    def __mul__(self, other):
        return self._binary(other, operator.mul)

    def __rmul__(self, other):
        return self._binary(other, operator.mul, reflected=True)

    def __iadd__(self, other):
        return self._inplace(other, operator.add)

    def __isub__(self, other):
        return self._inplace(other, operator.sub)

    def __imul__(self, other):
        return self._inplace(other, operator.mul)

    def __neg__(self):
        return type(self)._wrap(-self.elements)

    def conjugate(self) -> "Vector":
        return type(self)._wrap(np.conj(self.elements))

    # ---------- identity / equality ----------

    def is_zero(self) -> bool:
        return bool(np.all(self.elements == 0))

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        if len(self) != len(other):
            return self.is_zero() and other.is_zero()
        return bool(np.all(self.elements == other.elements))

    def is_close(self, other: "Vector", epsilon) -> bool:
        if len(self) != len(other):
            return bool(np.all(is_close(self.elements, 0, epsilon))) and bool(
                np.all(is_close(other.elements, 0, epsilon))
            )
        return bool(np.all(is_close(self.elements, other.elements, epsilon)))

    def is_very_close(self, other: "Vector") -> bool:
        return self.is_close(other, default_epsilon())

    # ---------- inner product space ----------

    def inner_product(self, other: "Vector"):
        """sum_i self[i] * conj(other[i])"""
        check_lengths(self, other)
        n = max(len(self), len(other))
        a, b = _pad(self.elements, n), _pad(other.elements, n)
        return np.sum(a * np.conj(b))

    def dot(self, other):
        raise UndefinedOperationError(
            'Dot product is not defined on a vector space, use "inner_product" instead.'
        )

    def norm_squared(self):
        return Real(np.sum((self.elements * np.conj(self.elements)).real))

    def norm(self):
        return Real(np.sqrt(self.norm_squared()))

    def try_normalize(self, epsilon):
        norm = self.norm()
        if abs(norm) <= epsilon:
            return None
        return type(self)._wrap(self.elements / norm)

    def try_normalize_mut(self, epsilon):
        """Normalize in place; returns the norm before normalizing, or None."""
        norm = self.norm()
        if abs(norm) <= epsilon:
            return None
        self.elements = self.elements / norm
        return norm

    def normalize(self) -> "Vector":
        res = self.try_normalize(Real(0))
        if res is None:
            raise DegenerateNormalizeError("Cannot normalize a vector with norm 0.")
        return res

    def normalize_mut(self):
        norm = self.try_normalize_mut(Real(0))
        if norm is None:
            raise DegenerateNormalizeError("Cannot normalize a vector with norm 0.")
        return norm

    def angle(self, other: "Vector"):
        prod = self.inner_product(other)
        n1, n2 = self.norm(), other.norm()
        if n1 == 0 or n2 == 0:
            return Real(0)
        cang = real_part(prod) / (n1 * n2)
        if cang >= 1 - _COS_SLACK:
            return Real(0)
        if cang <= -1 + _COS_SLACK:
            return Real(math.pi)
        return Real(math.acos(cang))

    # ---------- rendering ----------

    def __str__(self):
        return "[" + ", ".join(format(e, "g") for e in self.elements) + "]"

    def __repr__(self):
        return f"{type(self).__name__}({self.elements.tolist()!r})"


class FiniteVector(Vector):
    """Vector whose length is fixed by the class."""

    DIMENSION = 0

    @classmethod
    def dimension(cls) -> int:
        return cls.DIMENSION

    @classmethod
    def canonical_basis_element(cls, i: int, dtype=Real) -> "FiniteVector":
        if not 0 <= i < cls.DIMENSION:
            raise IndexError(f"Cannot find canonical basis at index {i}")
        res = cls.zero(dtype)
        res[i] = 1
        return res

    @classmethod
    def canonical_basis(cls, dtype=Real) -> list:
        return [cls.canonical_basis_element(i, dtype) for i in range(cls.DIMENSION)]


def finite_space(name: str, ndim: int) -> type:
    return type(name, (FiniteVector,), {
        "DIMENSION": ndim,
        "__doc__": f"Vector with exactly {ndim} components.",
        "__module__": __name__,
    })


Vec0 = finite_space("Vec0", 0)
Vec1 = finite_space("Vec1", 1)
Vec2 = finite_space("Vec2", 2)
Vec3 = finite_space("Vec3", 3)

_FINITE = {cls.DIMENSION: cls for cls in (Vec0, Vec1, Vec2, Vec3)}


def vector_class_for(n: int) -> type:
    """VecN for n in 0..3, otherwise the variable-length Vector."""
    return _FINITE.get(n, Vector)


def orthonormalize(vectors: list, epsilon=None) -> int:
    """Gram-Schmidt in place.

    The largest free family is moved to the front of `vectors`, normalized,
    and its size is returned. Entries at or past that index are unspecified.
    """
    eps = default_epsilon() if epsilon is None else epsilon
    n_free = 0
    for i in range(len(vectors)):
        v = vectors[i]
        for j in range(n_free):
            q = vectors[j]
            v = v - q * v.inner_product(q)
        unit = v.try_normalize(eps)
        if unit is None:
            continue
        vectors[i] = vectors[n_free]
        vectors[n_free] = unit
        n_free += 1
    return n_free
