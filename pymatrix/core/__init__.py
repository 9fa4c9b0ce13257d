"""
Core infrastructure for pymatrix.

Shared abstractions used by the linear algebra engine.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    result: Generic Result[P] envelope
    compute: Precision constants, tolerance tiers, timing
"""

from pymatrix.core.result import Result
from pymatrix.core.exceptions import (
    MatrixError,
    ValidationError,
    UninitializedError,
    DimensionError,
    InconsistentShapeError,
    DimMismatchError,
    NotSquareError,
    NotAVectorError,
    OutOfBoundsError,
    NegativeIndexError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "MatrixError",
    "ValidationError",
    "UninitializedError",
    "DimensionError",
    "InconsistentShapeError",
    "DimMismatchError",
    "NotSquareError",
    "NotAVectorError",
    "OutOfBoundsError",
    "NegativeIndexError",
    "NumericalError",
    "SingularMatrixError",
]
