"""
Matrix inversion by Gauss-Jordan elimination with partial pivoting.

Algorithm, for an n x n matrix A:
    1. Build the n x 2n augmented matrix [A | I].
    2. For each pivot column i:
        a. scan rows i..n-1 and keep the first row whose |a[k][i]| is
           strictly greater than the incumbent's (starting with row i)
        b. swap that row into position i
        c. fail if the pivot a[i][i] is exactly zero
        d. multiply row i by 1 / a[i][i]
        e. add row i * (-a[k][i]) to every other row k, over the full
           augmented width
    3. The right half is the inverse.

The scan is sequential and deterministic so that tied or degenerate
inputs always produce bit-identical results.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np

from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.tolerances import PIVOT_RTOL
from pymatrix.core.exceptions import NotSquareError, SingularMatrixError
from pymatrix.core.result import Result
from pymatrix.linalg.matrix import Matrix


BACKEND_NAME = 'cpu_gauss_jordan'


@dataclass(frozen=True)
class InverseParams:
    """
    Parameter payload for matrix inversion.

    Attributes:
        inverse: The n x n inverse, independent of the input's storage
        pivots: Pivot value used for each eliminated column, before scaling
        row_swaps: Number of row exchanges performed by partial pivoting
    """
    inverse: Matrix
    pivots: tuple[float, ...]
    row_swaps: int


def gauss_jordan(
    matrix: Matrix,
    *,
    pivot_rtol: float = PIVOT_RTOL,
) -> Result[InverseParams]:
    """
    Invert a square matrix and report elimination diagnostics.

    Args:
        matrix: Square matrix to invert (not modified)
        pivot_rtol: A pivot with |pivot| <= pivot_rtol * max|A| is reported
            in Result.warnings as near-singular. Elimination still proceeds;
            only an exactly zero pivot is an error.

    Returns:
        Result containing InverseParams

    Raises:
        NotSquareError: If the matrix is not square
        SingularMatrixError: If no nonzero pivot exists for some column
    """
    m, n = matrix.dim()
    if m != n:
        raise NotSquareError(
            f"inverse: matrix of shape ({m},{n}) is not square",
            shape=(m, n),
        )

    timer = Timer()
    timer.start()

    with timer.section('augment'):
        work = matrix.extend(0, n)
        work.set_sub_matrix(work.sub_matrix(0, n, m, n).identity(), 0, n)
        left = work.sub_matrix(0, 0, m, n).to_numpy()
        scale = float(np.max(np.abs(left))) if left.size else 0.0

    pivots: list[float] = []
    row_swaps = 0
    warnings: list[str] = []

    with timer.section('eliminate'):
        for i in range(n):
            # Empty source rows are skipped, matching the shape convention.
            if len(matrix.row(i)) == 0:
                continue

            j = i
            for k in range(i, n):
                if abs(work[k, i]) > abs(work[j, i]):
                    j = k
            if j != i:
                work.swap_rows(i, j)
                row_swaps += 1

            pivot_row = work.row(i)
            pivot = float(pivot_row[i])
            if pivot == 0:
                raise SingularMatrixError(
                    f"inverse: matrix is singular, no nonzero pivot in column {i}",
                    matrix_name='A',
                    column=i,
                    size=n,
                )
            if abs(pivot) <= pivot_rtol * scale:
                warnings.append(
                    f"near-singular pivot {pivot:.3g} in column {i} "
                    f"(|pivot| <= {pivot_rtol:g} * max|A|); inverse may be inaccurate"
                )
            pivots.append(pivot)

            pivot_row *= 1 / pivot
            for k in range(n):
                if k == i:
                    continue
                row = work.row(k)
                row += pivot_row * -row[i]

    inverse = work.sub_matrix(0, n, m, n).copy()
    timer.stop()

    info: dict[str, Any] = {
        'method': 'gauss_jordan',
        'n': n,
        'row_swaps': row_swaps,
        'min_abs_pivot': min((abs(p) for p in pivots), default=None),
    }

    return Result(
        params=InverseParams(
            inverse=inverse,
            pivots=tuple(pivots),
            row_swaps=row_swaps,
        ),
        info=info,
        timing=timer.result(),
        backend_name=BACKEND_NAME,
        warnings=tuple(warnings),
    )


def inverse(matrix: Matrix) -> Matrix:
    """Inverse of a square matrix; see gauss_jordan for diagnostics."""
    return gauss_jordan(matrix).params.inverse
