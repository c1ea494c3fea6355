# qlinalg/errors.py


class QLinalgError(Exception):
    """Base class for all library errors."""


class LengthMismatchError(QLinalgError, ValueError):
    """Two vectors of different non-zero lengths were combined."""


class DegenerateNormalizeError(QLinalgError, ZeroDivisionError):
    """A vector with zero norm cannot be normalized."""


class UndefinedOperationError(QLinalgError, TypeError):
    pass


class BasisShapeError(QLinalgError, ValueError):
    pass


class NotOrthonormalError(BasisShapeError):
    """The basis matrix times its conjugate transpose is not the identity."""


class SuperPositionError(QLinalgError, ValueError):
    """Coefficients do not match the basis dimension or are not unit norm."""
