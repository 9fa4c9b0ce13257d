"""
Column vectors.

A Vector wraps a Matrix constrained to exactly one column. It is not a
Matrix subclass: conversion in either direction is explicit, and only
to_vector() checks the single-column constraint.
"""

from __future__ import annotations

import numbers
from typing import Iterable, Iterator

import numpy as np
from numpy.typing import ArrayLike

from pymatrix.core.exceptions import NotAVectorError
from pymatrix.core.validation import check_row, check_size
from pymatrix.linalg.matrix import Matrix


class Vector:
    """
    n x 1 column vector backed by a Matrix.

    Construction:
        Vector([[1], [2], [3]])         literal rows (not validated)
        Vector(matrix)                  wraps matrix, sharing its storage
        Vector.zeros(3)                 zero-filled
        Vector.from_values([1, 2, 3])   from a flat sequence
        to_vector(matrix)               validating conversion
    """

    __slots__ = ('_matrix',)
    __hash__ = None  # mutable

    def __init__(self, source: Matrix | Vector | Iterable[ArrayLike] | None = None):
        if isinstance(source, Vector):
            self._matrix = source._matrix
        elif isinstance(source, Matrix):
            self._matrix = source
        else:
            self._matrix = Matrix(source)

    @classmethod
    def zeros(cls, n: int) -> Vector:
        """Allocate an n x 1 vector of zeros."""
        return cls(Matrix.zeros(check_size(n, 'n'), 1))

    @classmethod
    def from_values(cls, values: ArrayLike) -> Vector:
        """Build a vector from a flat sequence of numbers (copied)."""
        flat = check_row(values, 'values')
        return cls(Matrix(flat.reshape(-1, 1)))

    @classmethod
    def from_row(cls, row: ArrayLike) -> Vector:
        """
        Reinterpret a matrix row as a column vector.

        Element i of the row becomes element i of the vector. The data is
        copied; the vector does not alias the row.
        """
        return cls.from_values(row)

    def validate(self) -> None:
        """
        Check the wrapped matrix, then the single-column constraint.

        A vector without rows is valid.

        Raises:
            UninitializedError, InconsistentShapeError: see Matrix.validate
            NotAVectorError: If rows are not exactly one element wide
        """
        self._matrix.validate()
        if len(self._matrix) and len(self._matrix.row(0)) != 1:
            raise NotAVectorError(
                f"vector must have exactly 1 column, got {len(self._matrix.row(0))}",
                shape=self._matrix.dim(),
            )

    def to_matrix(self) -> Matrix:
        """The wrapped matrix. Not a copy."""
        return self._matrix

    def dim(self) -> tuple[int, int]:
        return self._matrix.dim()

    def sum(self) -> float:
        """Sum of all elements, 0.0 for an empty vector."""
        total = 0.0
        for row in self._matrix:
            if len(row):
                total += float(row[0])
        return total

    def transpose(self) -> Matrix:
        """Transposed copy as a 1 x n Matrix."""
        return self._matrix.transpose()

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def scale(self, k: float) -> Vector:
        return Vector(self._matrix.scale(k))

    def add_v(self, other: Vector | Matrix) -> Vector:
        """Return self + other as a new vector."""
        return Vector(self._matrix.add(other))

    def sub_v(self, other: Vector | Matrix) -> Vector:
        """Return self - other as a new vector."""
        return Vector(self._matrix.sub(other))

    def equal(self, other: Vector | Matrix) -> bool:
        return self._matrix.equal(other)

    def copy(self) -> Vector:
        return Vector(self._matrix.copy())

    def to_numpy(self) -> np.ndarray:
        """Copy into a 1D ndarray."""
        self.validate()
        return self._matrix.to_numpy().reshape(-1)

    def to_list(self) -> list[float]:
        return list(self)

    def __len__(self) -> int:
        return len(self._matrix)

    def __iter__(self) -> Iterator[float]:
        for i in range(len(self._matrix)):
            yield self._matrix[i, 0]

    def __getitem__(self, i: int) -> float:
        return self._matrix[i, 0]

    def __setitem__(self, i: int, value: float) -> None:
        self._matrix[i, 0] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (Vector, Matrix)):
            return NotImplemented
        return self.equal(other)

    def __add__(self, other: object) -> Vector:
        if not isinstance(other, (Vector, Matrix)):
            return NotImplemented
        return self.add_v(other)

    def __sub__(self, other: object) -> Vector:
        if not isinstance(other, (Vector, Matrix)):
            return NotImplemented
        return self.sub_v(other)

    def __mul__(self, k: object) -> Vector:
        if isinstance(k, bool) or not isinstance(k, numbers.Real):
            return NotImplemented
        return self.scale(k)

    __rmul__ = __mul__

    def __neg__(self) -> Vector:
        return self.scale(-1.0)

    def __str__(self) -> str:
        return str(self._matrix)

    def __repr__(self) -> str:
        if self._matrix.is_uninitialized:
            return "Vector(None)"
        return f"Vector({self._matrix.to_list()!r})"


def to_vector(matrix: Matrix | Vector) -> Vector:
    """
    Validating conversion from Matrix to Vector.

    The result shares storage with the matrix.

    Raises:
        UninitializedError, InconsistentShapeError, NotAVectorError:
            see Vector.validate
    """
    vector = Vector(matrix)
    vector.validate()
    return vector
