# qlinalg/superposition.py
import logging

import numpy as np

from .basis import DEFAULT_BACKEND, OrderedOrthonormalBasis
from .errors import SuperPositionError
from .scalar import is_very_close
from .vector import Vector, vector_class_for

logger = logging.getLogger(__name__)


class SuperPosition:
    """Unit-norm coefficients over an orthonormal basis.

    The same state in the standard basis is computed once at construction
    and is what `to_basis` converts from.
    """

    def __init__(self, scalars, basis: OrderedOrthonormalBasis, backend: str = DEFAULT_BACKEND):
        if not isinstance(scalars, Vector):
            scalars = vector_class_for(len(scalars))(scalars)
        dim = basis.dimension()
        if len(scalars) != dim:
            raise SuperPositionError(f"{len(scalars)} scalars given for a basis of dimension {dim}")
        n2 = scalars.norm_squared()
        if not is_very_close(n2, 1.0):
            raise SuperPositionError(f"Normalization failed: ||scalars||^2={n2}")

        standard = OrderedOrthonormalBasis.standard(dim)
        self._scalars = scalars.copy()
        self._basis = basis
        self._in_standard = standard.change_from_basis(scalars, basis, backend=backend)
        logger.debug("superposition of dimension %d, ||scalars||^2=%r", dim, n2)

    @classmethod
    def from_scalars_and_basis(cls, scalars, basis: OrderedOrthonormalBasis,
                               backend: str = DEFAULT_BACKEND) -> "SuperPosition":
        return cls(scalars, basis, backend=backend)

    @property
    def scalars(self) -> Vector:
        return self._scalars.copy()

    @property
    def basis(self) -> OrderedOrthonormalBasis:
        return self._basis

    @property
    def vector_in_standard_basis(self) -> Vector:
        return self._in_standard.copy()

    def norm2(self) -> float:
        return float(self._scalars.norm_squared())

    def probabilities(self) -> np.ndarray:
        e = self._scalars.elements
        return (e * np.conj(e)).real

    def to_basis(self, new_basis: OrderedOrthonormalBasis, backend: str = DEFAULT_BACKEND) -> "SuperPosition":
        if new_basis.dimension() != self._basis.dimension():
            raise SuperPositionError(
                f"Cannot move a dimension {self._basis.dimension()} superposition "
                f"to a basis of dimension {new_basis.dimension()}"
            )
        new_scalars = new_basis.change_from_standard_basis(self._in_standard, backend=backend)
        return SuperPosition(new_scalars, new_basis, backend=backend)

    def __str__(self):
        return f"scalars: {self._scalars}, basis: {self._basis}"

    def __repr__(self):
        return f"SuperPosition({self._scalars!r}, {self._basis!r})"
