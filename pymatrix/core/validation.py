"""
Input validation utilities for pymatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any, Iterable

from pymatrix.core.exceptions import (
    ValidationError,
    DimensionError,
    NegativeIndexError,
    OutOfBoundsError,
)


def check_row(
    row: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate a single matrix row and copy it into a float64 array.

    Rejects inputs that result in object or non-numeric dtype, and inputs
    that are not one-dimensional.

    Args:
        row: Input to validate (list, tuple, ndarray, ...)
        name: Parameter name for error messages

    Returns:
        New 1D numpy.ndarray of dtype float64

    Raises:
        ValidationError: If input cannot be converted to a numeric array
        DimensionError: If input is not 1D
    """
    try:
        result = np.array(row)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.size == 0:
        result = result.astype(np.float64)

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number) and not np.issubdtype(result.dtype, np.bool_):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.iscomplexobj(result):
        raise ValidationError(f"{name}: complex values are not supported")

    if result.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D row, got {result.ndim}D with shape {result.shape}"
        )

    return result.astype(np.float64, copy=False)


def check_rows(
    rows: Iterable[ArrayLike],
    name: str,
) -> list[NDArray[np.float64]]:
    """
    Validate literal row data and copy it into float64 rows.

    Row lengths are NOT compared here; ragged data is accepted and
    reported later by Matrix.validate().

    Args:
        rows: Iterable of row-likes
        name: Parameter name for error messages

    Returns:
        List of independent 1D float64 arrays

    Raises:
        ValidationError: If rows is a scalar/string or a row is non-numeric
        DimensionError: If a row is not 1D
    """
    if isinstance(rows, (str, bytes)) or np.isscalar(rows):
        raise ValidationError(
            f"{name}: expected a sequence of rows, got {type(rows).__name__}"
        )
    if isinstance(rows, np.ndarray) and rows.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {rows.ndim}D with shape {rows.shape}"
        )
    return [check_row(row, f"{name}[{i}]") for i, row in enumerate(rows)]


def check_size(value: int, name: str) -> int:
    """
    Verify a dimension size is a non-negative integer.

    Args:
        value: Requested size
        name: Parameter name for error messages

    Returns:
        The size as a Python int

    Raises:
        ValidationError: If value is not an integer or is negative
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected integer size, got {type(value).__name__}"
        )
    if value < 0:
        raise ValidationError(f"{name}: size must be non-negative, got {value}")
    return int(value)


def check_index(value: int, name: str) -> int:
    """
    Verify an offset or count is a non-negative integer.

    Args:
        value: Offset or count
        name: Parameter name for error messages

    Returns:
        The index as a Python int

    Raises:
        ValidationError: If value is not an integer
        NegativeIndexError: If value is negative
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected integer index, got {type(value).__name__}"
        )
    if value < 0:
        raise NegativeIndexError(
            f"{name}: negative indices are not supported, got {value}"
        )
    return int(value)


def check_row_index(value: int, n_rows: int, name: str) -> int:
    """
    Verify a row index addresses an existing row.

    Raises:
        OutOfBoundsError: If value is outside 0..n_rows-1
    """
    index = check_index(value, name)
    if index >= n_rows:
        raise OutOfBoundsError(
            f"{name}: row {index} out of range for matrix with {n_rows} rows",
            index=(index,),
        )
    return index


def check_scalar(value: Any, name: str) -> float:
    """
    Verify a value is a real scalar and return it as float.

    Raises:
        ValidationError: If value is not a real number
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected real scalar, got {type(value).__name__}"
        )
    return float(value)
