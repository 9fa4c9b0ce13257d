"""
pymatrix: dense matrix and vector algebra for Python.

The numeric foundation of a linear-regression trainer: construction,
shape validation, arithmetic, aliasing sub-matrix views and
Gauss-Jordan inversion over 64-bit floats.

Submodules:
    linalg: Matrix, Vector and the inversion solver
    core: Exceptions, validators, result envelope, tolerances, timing
"""

__version__ = "0.1.0"

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
from pymatrix.linalg import Matrix, Vector, to_vector, gauss_jordan, inverse

__all__ = [
    "__version__",
    "Matrix",
    "Vector",
    "to_vector",
    "gauss_jordan",
    "inverse",
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
