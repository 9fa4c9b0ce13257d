"""
Dense linear algebra engine.

Public API:
    Matrix          - row-major float64 matrix with aliasing views
    Vector          - single-column wrapper around Matrix
    to_vector(m)    - validating Matrix -> Vector conversion
    gauss_jordan(m) - inversion with pivot diagnostics (Result envelope)
    inverse(m)      - plain inversion
"""

from pymatrix.linalg.matrix import Matrix
from pymatrix.linalg.vector import Vector, to_vector
from pymatrix.linalg.gauss_jordan import InverseParams, gauss_jordan, inverse

__all__ = [
    "Matrix",
    "Vector",
    "to_vector",
    "InverseParams",
    "gauss_jordan",
    "inverse",
]
