"""
Dense row-major matrix.

A Matrix is an ordered list of rows, each row a 1D float64 numpy array.
Dimensions are derived from the rows rather than stored, which allows
literal (possibly ragged) data to be wrapped first and checked later
with validate().

Views:
    sub_matrix() returns a matrix whose rows are numpy slices of the
    parent's rows. The view aliases the parent's storage: writing through
    the view (set_sub_matrix, item assignment, in-place row arithmetic)
    changes the parent. copy() and extend() never alias.

Shape convention:
    A matrix without rows reports (0, 0). A matrix with rows whose first
    row is empty reports (rows, 1), so Matrix([[]]).dim() == (1, 1).
    This is kept for compatibility with existing callers. Arithmetic
    treats an empty row as zeros, but equal() only matches an empty row
    with another empty row.

All arithmetic returns new matrices and never mutates its operands.
"""

from __future__ import annotations

import numbers
import warnings
from typing import Any, Iterable, Iterator, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.compute.precision import is_close
from pymatrix.core.compute.tolerances import ToleranceTier, CPU_FP64
from pymatrix.core.exceptions import (
    DimensionError,
    DimMismatchError,
    InconsistentShapeError,
    NotSquareError,
    OutOfBoundsError,
    UninitializedError,
    ValidationError,
)
from pymatrix.core.validation import (
    check_index,
    check_row_index,
    check_rows,
    check_scalar,
    check_size,
)

if TYPE_CHECKING:
    from pymatrix.linalg.vector import Vector


Row = NDArray[np.float64]


class Matrix:
    """
    Dense 2D float64 matrix with row-major storage.

    Construction:
        Matrix([[1, 2], [3, 4]])   literal rows (copied, not validated)
        Matrix.zeros(2, 3)         zero-filled
        Matrix.from_numpy(arr)     from a 2D ndarray (copied)
        Matrix() / Matrix(None)    the uninitialized matrix

    Literal data may be ragged; call validate() before trusting it.
    """

    __slots__ = ('_rows', '_is_view')
    __hash__ = None  # mutable

    def __init__(self, rows: Iterable[ArrayLike] | None = None):
        self._rows: list[Row] | None = (
            None if rows is None else check_rows(rows, 'rows')
        )
        self._is_view = False

    @classmethod
    def _wrap(cls, rows: list[Row] | None, is_view: bool = False) -> Matrix:
        """Wrap existing row arrays without copying."""
        matrix = cls.__new__(cls)
        matrix._rows = rows
        matrix._is_view = is_view
        return matrix

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        """
        Allocate a rows x cols matrix of zeros.

        Either size may be 0. Note that zeros(m, 0) with m > 0 reports
        dim() == (m, 1), following the shape convention of this module.
        """
        n_rows = check_size(rows, 'rows')
        n_cols = check_size(cols, 'cols')
        return cls._wrap([np.zeros(n_cols, dtype=np.float64) for _ in range(n_rows)])

    @classmethod
    def from_numpy(cls, array: ArrayLike) -> Matrix:
        """Build a matrix from a 2D array (copied)."""
        arr = np.asarray(array)
        if arr.ndim != 2:
            raise DimensionError(
                f"array: expected 2D array, got {arr.ndim}D with shape {arr.shape}"
            )
        return cls(arr)

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------

    def dim(self) -> tuple[int, int]:
        """
        Return (rows, cols).

        (0, 0) without rows, (rows, 1) when the first row is empty,
        otherwise (rows, len(first row)).
        """
        if not self._rows:
            return 0, 0
        if len(self._rows[0]) == 0:
            return len(self._rows), 1
        return len(self._rows), len(self._rows[0])

    @property
    def shape(self) -> tuple[int, int]:
        return self.dim()

    @property
    def is_uninitialized(self) -> bool:
        return self._rows is None

    @property
    def is_view(self) -> bool:
        """True if the rows alias another matrix's storage."""
        return self._is_view

    def validate(self) -> None:
        """
        Check that the matrix is allocated and rectangular.

        Must be called on matrices built from literal data before they are
        combined with others; it is not enforced on mutation.

        Raises:
            UninitializedError: If the matrix was never allocated
            InconsistentShapeError: If a row length differs from row 0
        """
        if self._rows is None:
            raise UninitializedError("matrix not initialized")
        if not self._rows:
            return
        n = len(self._rows[0])
        for i, row in enumerate(self._rows):
            if len(row) != n:
                raise InconsistentShapeError(
                    f"row {i} has length {len(row)}, expected {n} (length of row 0)",
                    row=i,
                    expected=n,
                    actual=len(row),
                )

    def dim_match(self, other: Matrix | Vector) -> bool:
        """True iff both matrices report the same dim()."""
        return self.dim() == _as_matrix(other, 'other').dim()

    def _check_row_widths(self, operation: str) -> None:
        # Empty rows are tolerated here; they are skipped by arithmetic.
        _, n = self.dim()
        for i, row in enumerate(self._iter_rows()):
            if len(row) and len(row) != n:
                raise InconsistentShapeError(
                    f"{operation}: row {i} has length {len(row)}, expected {n}; "
                    f"call validate() on literal data",
                    row=i,
                    expected=n,
                    actual=len(row),
                )

    def _iter_rows(self) -> Iterator[Row]:
        return iter(self._rows or ())

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, other: Matrix | Vector) -> Matrix:
        """Elementwise sum. Raises DimMismatchError on differing shapes."""
        return self._elementwise(_as_matrix(other, 'other'), np.add, 'add')

    def sub(self, other: Matrix | Vector) -> Matrix:
        """Elementwise difference. Raises DimMismatchError on differing shapes."""
        return self._elementwise(_as_matrix(other, 'other'), np.subtract, 'sub')

    def _elementwise(self, other: Matrix, op, operation: str) -> Matrix:
        if not self.dim_match(other):
            raise DimMismatchError(
                f"{operation}: dimension mismatch {self.dim()} vs {other.dim()}",
                left=self.dim(),
                right=other.dim(),
            )
        self._check_row_widths(operation)
        other._check_row_widths(operation)

        result = Matrix.zeros(*self.dim())
        for i, row in enumerate(self._iter_rows()):
            if len(row) == 0:
                continue
            other_row = other._rows[i]
            result._rows[i][:] = op(row, other_row if len(other_row) else 0.0)
        return result

    def mul(self, other: Matrix | Vector) -> Matrix:
        """
        Matrix product self @ other.

        Requires self.cols == other.rows. The result has shape
        (self.rows, other.cols). Each entry is accumulated left to right
        from 0.0 so results are reproducible bit for bit.

        Raises:
            DimMismatchError: If the inner dimensions differ
        """
        other = _as_matrix(other, 'other')
        m, n = self.dim()
        p, q = other.dim()
        if n != p:
            raise DimMismatchError(
                f"mul: cannot multiply ({m},{n}) by ({p},{q}), "
                f"inner dimensions {n} != {p}",
                left=(m, n),
                right=(p, q),
            )
        self._check_row_widths('mul')
        other._check_row_widths('mul')

        result = Matrix.zeros(m, q)
        if not other._rows:
            return result

        width = len(other._rows[0])
        right = [row.tolist() if len(row) else [0.0] * width for row in other._rows]
        for i, row in enumerate(self._iter_rows()):
            if len(row) == 0:
                continue
            left = row.tolist()
            out = result._rows[i]
            for j in range(width):
                total = 0.0
                for k, value in enumerate(left):
                    total += value * right[k][j]
                out[j] = total
        return result

    def mul_v(self, vector: Vector) -> Vector:
        """Multiply by a column vector, returning a Vector."""
        from pymatrix.linalg.vector import Vector

        return Vector(self.mul(vector))

    def scale(self, k: float) -> Matrix:
        """Multiply every element by the scalar k."""
        factor = check_scalar(k, 'k')
        self._check_row_widths('scale')
        result = Matrix.zeros(*self.dim())
        for i, row in enumerate(self._iter_rows()):
            if len(row):
                result._rows[i][:] = row * factor
        return result

    def transpose(self) -> Matrix:
        """Return a new (cols, rows) matrix with result[j][i] = self[i][j]."""
        self._check_row_widths('transpose')
        m, n = self.dim()
        result = Matrix.zeros(n, m)
        for i, row in enumerate(self._iter_rows()):
            for j, value in enumerate(row):
                result._rows[j][i] = value
        return result

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def identity(self) -> Matrix:
        """
        Identity matrix of the same shape.

        Only the shape of self is used; its values are ignored.

        Raises:
            NotSquareError: If rows != cols
        """
        m, n = self.dim()
        if m != n:
            raise NotSquareError(
                f"identity: matrix of shape ({m},{n}) is not square",
                shape=(m, n),
            )
        result = Matrix.zeros(m, n)
        for i in range(m):
            result._rows[i][i] = 1.0
        return result

    def inverse(self) -> Matrix:
        """
        Inverse by Gauss-Jordan elimination with partial pivoting.

        Near-singular pivots are reported as RuntimeWarning; the full
        diagnostics are available from pymatrix.linalg.gauss_jordan.

        Raises:
            NotSquareError: If rows != cols
            SingularMatrixError: If a pivot is exactly zero
        """
        from pymatrix.linalg.gauss_jordan import gauss_jordan

        result = gauss_jordan(self)
        for message in result.warnings:
            warnings.warn(message, RuntimeWarning, stacklevel=2)
        return result.params.inverse

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def equal(self, other: Matrix | Vector) -> bool:
        """
        Exact elementwise equality.

        Shapes must match and every pair of elements must compare equal
        as floats (no tolerance, NaN never equal). An empty row only equals
        another empty row. Use allclose() when a tolerance is needed.
        """
        other = _as_matrix(other, 'other')
        if not self.dim_match(other):
            return False
        for row, other_row in zip(self._iter_rows(), other._iter_rows()):
            if not np.array_equal(row, other_row):
                return False
        return True

    def allclose(self, other: Matrix | Vector, tier: ToleranceTier = CPU_FP64) -> bool:
        """Elementwise comparison within the tolerances of a ToleranceTier."""
        other = _as_matrix(other, 'other')
        if not self.dim_match(other):
            return False
        for row, other_row in zip(self._iter_rows(), other._iter_rows()):
            if len(row) != len(other_row):
                return False
            if not np.all(is_close(row, other_row, rtol=tier.rtol, atol=tier.atol)):
                return False
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equal(other)

    # ------------------------------------------------------------------
    # Copies, views, in-place writes
    # ------------------------------------------------------------------

    def extend(self, rows: int, cols: int) -> Matrix:
        """
        Copy into a larger matrix with `rows` more rows and `cols` more cols.

        The original content lands in the top-left block, the rest is zero.
        On the uninitialized matrix this is zeros(rows, cols).
        """
        extra_rows = check_size(rows, 'rows')
        extra_cols = check_size(cols, 'cols')
        if self._rows is None:
            return Matrix.zeros(extra_rows, extra_cols)
        self._check_row_widths('extend')

        m, n = self.dim()
        result = Matrix.zeros(m + extra_rows, n + extra_cols)
        for i, row in enumerate(self._rows):
            if len(row):
                result._rows[i][:len(row)] = row
        return result

    def copy(self) -> Matrix:
        """Deep copy, equivalent to extend(0, 0)."""
        return self.extend(0, 0)

    def sub_matrix(
        self,
        row_start: int,
        col_start: int,
        row_count: int,
        col_count: int,
    ) -> Matrix:
        """
        Aliasing view of row_count x col_count elements at (row_start, col_start).

        NOTE: Changes made through the view change this matrix.

        Raises:
            NegativeIndexError: If an offset or count is negative
            OutOfBoundsError: If the window leaves the matrix
        """
        row_start = check_index(row_start, 'row_start')
        col_start = check_index(col_start, 'col_start')
        row_count = check_index(row_count, 'row_count')
        col_count = check_index(col_count, 'col_count')

        rows = self._rows or []
        width = len(rows[0]) if rows else 0
        if row_start > len(rows) or col_start + col_count > width:
            raise OutOfBoundsError(
                f"sub_matrix: window at ({row_start},{col_start}) of size "
                f"({row_count},{col_count}) exceeds {len(rows)} rows of width {width}",
                index=(row_start, col_start),
                shape=self.dim(),
            )
        if row_start + row_count > len(rows):
            raise OutOfBoundsError(
                f"sub_matrix: rows {row_start}..{row_start + row_count - 1} "
                f"exceed {len(rows)} rows",
                index=(row_start, col_start),
                shape=self.dim(),
            )

        stop = col_start + col_count
        view = []
        for i in range(row_start, row_start + row_count):
            if len(rows[i]) < stop:
                raise OutOfBoundsError(
                    f"sub_matrix: row {i} has length {len(rows[i])}, "
                    f"window needs {stop}",
                    index=(i, col_start),
                    shape=self.dim(),
                )
            view.append(rows[i][col_start:stop])
        return Matrix._wrap(view, is_view=True)

    def set_sub_matrix(self, block: Matrix | Vector, row_start: int, col_start: int) -> Matrix:
        """
        Copy block into this matrix at (row_start, col_start).

        NOTE: Changes the state of the current matrix, and of any matrix
        this one is a view of. Returns self.

        Raises:
            NegativeIndexError: If an offset is negative
            OutOfBoundsError: If the block overflows this matrix
        """
        block = _as_matrix(block, 'block')
        row_start = check_index(row_start, 'row_start')
        col_start = check_index(col_start, 'col_start')

        m1, n1 = self.dim()
        m2, n2 = block.dim()
        if row_start + m2 > m1 or col_start + n2 > n1:
            raise OutOfBoundsError(
                f"set_sub_matrix: block of shape ({m2},{n2}) at "
                f"({row_start},{col_start}) overflows matrix of shape ({m1},{n1})",
                index=(row_start, col_start),
                shape=(m1, n1),
            )
        # All target rows are checked before the first write.
        for i, line in enumerate(block._iter_rows()):
            target = self._rows[row_start + i]
            stop = col_start + len(line)
            if len(target) < stop:
                raise OutOfBoundsError(
                    f"set_sub_matrix: row {row_start + i} has length {len(target)}, "
                    f"block row needs {stop}",
                    index=(row_start + i, col_start),
                    shape=(m1, n1),
                )
        for i, line in enumerate(block._iter_rows()):
            self._rows[row_start + i][col_start:col_start + len(line)] = line
        return self

    def swap_rows(self, i: int, j: int) -> Matrix:
        """
        Swap rows i and j in place and return self.

        On a view only the view's row order changes; the parent's rows
        stay where they are.
        """
        n_rows = len(self)
        i = check_row_index(i, n_rows, 'i')
        j = check_row_index(j, n_rows, 'j')
        self._rows[i], self._rows[j] = self._rows[j], self._rows[i]
        return self

    # ------------------------------------------------------------------
    # Row access and conversion
    # ------------------------------------------------------------------

    def row(self, i: int) -> Row:
        """
        Row i as a numpy array.

        NOTE: Not a copy, changes to the row change the matrix.
        """
        return self._rows[check_row_index(i, len(self), 'i')]

    def row_to_vector(self, i: int) -> Vector:
        """Copy of row i as an n x 1 Vector."""
        from pymatrix.linalg.vector import Vector

        return Vector.from_row(self.row(i))

    def to_vector(self) -> Vector:
        """Validating conversion to Vector; see pymatrix.linalg.vector.to_vector."""
        from pymatrix.linalg.vector import to_vector

        return to_vector(self)

    def to_numpy(self) -> NDArray[np.float64]:
        """
        Copy into a 2D ndarray of shape dim().

        Raises:
            UninitializedError, InconsistentShapeError: see validate()
        """
        self.validate()
        result = np.zeros(self.dim(), dtype=np.float64)
        for i, row in enumerate(self._rows):
            result[i, :len(row)] = row
        return result

    def to_list(self) -> list[list[float]]:
        """Row data as nested lists of floats."""
        return [row.tolist() for row in self._iter_rows()]

    def __len__(self) -> int:
        return len(self._rows) if self._rows is not None else 0

    def __iter__(self) -> Iterator[Row]:
        return self._iter_rows()

    def __getitem__(self, key: int | tuple[int, int]) -> Any:
        if isinstance(key, tuple):
            i, j = key
            row = self.row(i)
            return float(row[_check_col(j, len(row))])
        return self.row(key)

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        if not isinstance(key, tuple):
            raise ValidationError(
                "item assignment needs a (row, col) pair; write rows through row(i)"
            )
        i, j = key
        row = self.row(i)
        row[_check_col(j, len(row))] = check_scalar(value, 'value')

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sub(other)

    def __matmul__(self, other: object) -> Any:
        from pymatrix.linalg.vector import Vector

        if isinstance(other, Vector):
            return self.mul_v(other)
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.mul(other)

    def __mul__(self, k: object) -> Matrix:
        if isinstance(k, bool) or not isinstance(k, numbers.Real):
            return NotImplemented
        return self.scale(k)

    __rmul__ = __mul__

    def __neg__(self) -> Matrix:
        return self.scale(-1.0)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        if self._rows is None:
            return "<uninitialized>"
        if not self._rows:
            return "||"
        m, n = self.dim()
        lines = [f"({m},{n})"]
        lines.extend(_format_row(row) for row in self._rows)
        return "\n".join(lines)

    def __repr__(self) -> str:
        if self._rows is None:
            return "Matrix(None)"
        return f"Matrix({self.to_list()!r})"


def _as_matrix(value: Any, name: str) -> Matrix:
    if isinstance(value, Matrix):
        return value

    from pymatrix.linalg.vector import Vector

    if isinstance(value, Vector):
        return value.to_matrix()
    raise ValidationError(
        f"{name}: expected Matrix or Vector, got {type(value).__name__}"
    )


def _check_col(j: int, width: int) -> int:
    index = check_index(j, 'j')
    if index >= width:
        raise OutOfBoundsError(
            f"j: column {index} out of range for row of length {width}",
            index=(index,),
        )
    return index


def _format_row(row: Row) -> str:
    return "[" + " ".join(f"{value:4g}" for value in row) + "]"
