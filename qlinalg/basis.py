# qlinalg/basis.py
import logging
from dataclasses import InitVar, dataclass, field
from typing import Optional

import numpy as np

from .errors import BasisShapeError, LengthMismatchError, NotOrthonormalError
from .scalar import as_scalar_array, default_epsilon, is_close
from .vector import Vector, vector_class_for

logger = logging.getLogger(__name__)

DEFAULT_BACKEND = "serial"


def get_matvec(backend: str):
    """Return the matrix-vector kernel for `backend` ("serial" or "numba")."""
    if backend == "serial":
        from .transform_serial import matvec
    elif backend == "numba":
        try:
            from .transform_numba import matvec
        except Exception as e:
            raise RuntimeError("Numba backend not available. Did you `pip install numba`?") from e
    else:
        raise NotImplementedError(f"Unknown backend: {backend}")
    return matvec


def _format_row(row) -> str:
    return "[" + ", ".join(format(e, "g") for e in row) + "]"


class OrderedBasis:
    """Ordered sequence of vectors from one vector space."""

    def __init__(self, vectors):
        self.basis = tuple(vectors)

    @classmethod
    def from_sequence(cls, vectors) -> "OrderedBasis":
        return cls(vectors)

    @classmethod
    def from_ndarray(cls, arr: np.ndarray) -> "OrderedBasis":
        return cls(list(arr))

    def index(self, i: int):
        if not 0 <= i < len(self.basis):
            raise IndexError(f"index {i} out of range for basis of length {len(self.basis)}")
        return self.basis[i]

    __getitem__ = index

    def __len__(self):
        return len(self.basis)

    def __iter__(self):
        return iter(self.basis)

    def __eq__(self, other):
        if not isinstance(other, OrderedBasis):
            return NotImplemented
        return self.basis == other.basis

    def __str__(self):
        return "[" + ", ".join(str(v) for v in self.basis) + "]"


@dataclass(frozen=True, eq=False)
class OrderedOrthonormalBasis:
    """Square orthonormal matrix whose columns are the basis vectors.

    `matrix` maps coordinates in this basis to the standard basis and
    `inverse` (its conjugate transpose) maps standard coordinates back.
    Both arrays are read-only. Build from a list of vectors with
    `from_vectors`; a plain nested sequence is read row by row.
    """
    matrix: np.ndarray
    check: InitVar[bool] = True
    epsilon: InitVar[Optional[float]] = None
    inverse: np.ndarray = field(init=False)

    def __post_init__(self, check, epsilon):
        if isinstance(self.matrix, (list, tuple)) and any(isinstance(r, Vector) for r in self.matrix):
            raise BasisShapeError(
                "Got a sequence of vectors; use OrderedOrthonormalBasis.from_vectors to use them as columns"
            )
        try:
            mat = as_scalar_array(self.matrix, ndim=2)
        except ValueError as e:
            raise BasisShapeError(str(e)) from e
        if mat.shape[0] != mat.shape[1]:
            raise BasisShapeError(f"Basis matrix must be square, got shape {mat.shape}")

        inverse = mat.conj().T.copy()
        if check:
            eps = default_epsilon() if epsilon is None else epsilon
            gram = mat @ inverse
            if not np.all(is_close(gram, np.eye(len(mat)), eps)):
                raise NotOrthonormalError(f"Basis matrix is not orthonormal:\n{mat}")

        mat.setflags(write=False)
        inverse.setflags(write=False)
        object.__setattr__(self, "matrix", mat)
        object.__setattr__(self, "inverse", inverse)
        logger.debug("built %dx%d orthonormal basis (check=%s)", mat.shape[0], mat.shape[1], check)

    @classmethod
    def from_matrix(cls, matrix, check: bool = True, epsilon=None) -> "OrderedOrthonormalBasis":
        return cls(matrix, check=check, epsilon=epsilon)

    @classmethod
    def from_vectors(cls, vectors, check: bool = True, epsilon=None) -> "OrderedOrthonormalBasis":
        """Use the given vectors, in order, as the columns of the basis matrix."""
        cols = [v.elements if isinstance(v, Vector) else as_scalar_array(v) for v in vectors]
        if not cols:
            return cls(np.zeros((0, 0)), check=check, epsilon=epsilon)
        try:
            mat = np.column_stack(cols)
        except ValueError as e:
            raise BasisShapeError(f"Basis vectors differ in length: {[len(c) for c in cols]}") from e
        return cls(mat, check=check, epsilon=epsilon)

    @classmethod
    def standard(cls, dimension: int = 2) -> "OrderedOrthonormalBasis":
        return cls(np.eye(dimension), check=False)

    def dimension(self) -> int:
        return self.matrix.shape[0]

    def get(self, i: int) -> Vector:
        """The i-th basis vector expressed in the standard basis."""
        n = self.dimension()
        if not 0 <= i < n:
            raise IndexError(f"index {i} out of range for basis of dimension {n}")
        return vector_class_for(n).from_ndarray(self.matrix[:, i])

    def to_ordered_basis(self) -> OrderedBasis:
        return OrderedBasis(self.get(i) for i in range(self.dimension()))

    # ---------- coordinate transforms ----------

    def _apply(self, mat: np.ndarray, v: Vector, backend: str) -> Vector:
        n = self.dimension()
        if len(v) not in (0, n):
            raise LengthMismatchError(
                f"Vector of length {len(v)} does not live in a space of dimension {n}"
            )
        elements = v.elements if len(v) == n else np.zeros(n, dtype=v.elements.dtype)
        cls = type(v) if (type(v).DIMENSION is None or len(v) == n) else vector_class_for(n)
        return cls._wrap(get_matvec(backend)(mat, elements))

    def change_to_standard_basis(self, v: Vector, backend: str = DEFAULT_BACKEND) -> Vector:
        """matrix @ v"""
        return self._apply(self.matrix, v, backend)

    def change_from_standard_basis(self, v: Vector, backend: str = DEFAULT_BACKEND) -> Vector:
        """inverse @ v"""
        return self._apply(self.inverse, v, backend)

    def change_from_basis(self, old_vector: Vector, old_basis: "OrderedOrthonormalBasis",
                          backend: str = DEFAULT_BACKEND) -> Vector:
        """Re-express coordinates from `old_basis` in this basis via the standard basis."""
        in_standard = old_basis.change_to_standard_basis(old_vector, backend=backend)
        return self.change_from_standard_basis(in_standard, backend=backend)

    def __eq__(self, other):
        if not isinstance(other, OrderedOrthonormalBasis):
            return NotImplemented
        return bool(np.array_equal(self.matrix, other.matrix))

    def __str__(self):
        return "[" + ", ".join(_format_row(row) for row in self.matrix) + "]"

    def __repr__(self):
        return f"OrderedOrthonormalBasis({self.matrix.tolist()!r})"
