"""Failure conditions raised by the conjugate regression engine."""

from __future__ import annotations


class BayesRegError(ValueError):
    """Base class for engine failures reported to the immediate caller."""


class InvalidInputError(BayesRegError):
    """Raised for non-finite numbers or non-positive standard deviations."""


class DimensionMismatchError(BayesRegError):
    """Raised when observation or design-row shapes are inconsistent."""


class SingularMatrixError(BayesRegError):
    """Raised when a 2x2 determinant falls below the inversion threshold.

    Attributes:
        det (float): Determinant of the matrix that could not be inverted.
    """

    def __init__(self, message: str, det: float = float("nan")):
        super().__init__(message)
        self.det = det
