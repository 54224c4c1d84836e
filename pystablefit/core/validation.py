"""
Boundary validators for arrays entering PyStableFit.

Every public entry point (regress, fit, algebraic_network) runs its
inputs through these checks before any numerical work. A failing check
raises at once; nothing is clipped, imputed or reshaped behind the
caller's back beyond the documented vector-to-column promotions done by
the design classes.

Each validator checks a single property and names the offending
argument in its message.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pystablefit.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Convert an array-like to a private float64 array.

    Integer and floating inputs are accepted; boolean, object, string
    and complex inputs are refused.

    Args:
        array: Array-like to convert
        name: Argument name used in error messages

    Returns:
        A float64 copy that the caller owns

    Raises:
        ValidationError: If the input is not real numeric data
    """
    try:
        arr = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if arr.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )
    if not np.issubdtype(arr.dtype, np.number):
        raise ValidationError(f"{name}: non-numeric dtype {arr.dtype}, expected numeric data")
    if np.issubdtype(arr.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {arr.dtype} is not supported")

    # kernels write into their outputs, so always hand back a copy
    return np.array(arr, dtype=np.float64)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """Raise ValidationError if array holds any NaN or Inf."""
    finite = np.isfinite(array)
    if finite.all():
        return
    n_nan = int(np.isnan(array).sum())
    n_inf = int(array.size - finite.sum() - n_nan)
    raise ValidationError(
        f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
    )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """Raise DimensionError unless array.ndim == ndim."""
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    check_ndim(array, 2, name)


def check_1d_or_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Accept a vector or a matrix.

    Responses are one of these: a vector for a single response, a
    matrix with one column per response otherwise.

    Raises:
        DimensionError: For scalars and arrays of three or more dimensions
    """
    if array.ndim not in (1, 2):
        raise DimensionError(
            f"{name}: expected 1D or 2D array, got {array.ndim}D with shape {array.shape}"
        )


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Require every array to have the same number of rows.

    Args:
        *arrays: Arrays whose first dimensions are compared
        names: One argument name per array, in the same order

    Raises:
        ValueError: If names and arrays differ in number (caller bug)
        DimensionError: If the row counts disagree
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    rows = {name: arr.shape[0] for name, arr in zip(names, arrays)}
    if len(set(rows.values())) > 1:
        details = ", ".join(f"{name}={n}" for name, n in rows.items())
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """Raise ValidationError if array has fewer than min_samples rows."""
    n = array.shape[0]
    if n < min_samples:
        raise ValidationError(f"{name}: requires at least {min_samples} samples, got {n}")


def check_positive_int(value: int, name: str) -> None:
    """
    Require a strictly positive integer (bools are refused).

    Raises:
        ValidationError: If value is not an integer or is < 1
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValidationError(f"{name}: expected an integer, got {type(value).__name__}")
    if value < 1:
        raise ValidationError(f"{name}: must be >= 1, got {value}")
