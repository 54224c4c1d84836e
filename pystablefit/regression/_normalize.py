"""
Column standardization for regression.

Columns are centred on their mean and scaled by their sample standard
deviation (ddof=1). Columns must not be constant: a zero standard
deviation produces inf/nan rather than an error.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray


def normalize(
    x: NDArray[np.floating[Any]],
    intercept: bool = False
) -> tuple[NDArray[np.floating[Any]], Any, Any]:
    """
    Standardize a matrix column-wise or a vector as a whole.

    Args:
        x: Matrix (n x k) or vector (n,)
        intercept: If True and x is a matrix, its first column is an
            existing intercept column and is dropped before standardizing

    Returns:
        (xn, mu, sigma). For a matrix mu and sigma are (k,) arrays;
        for a vector they are floats.
    """
    if x.ndim == 1:
        mu = float(np.mean(x))
        sigma = float(np.std(x, ddof=1))
        return (x - mu) / sigma, mu, sigma

    _x = x[:, 1:] if intercept else x
    mu = np.mean(_x, axis=0)
    sigma = np.std(_x, axis=0, ddof=1)
    return (_x - mu) / sigma, mu, sigma


def add_intercept(x: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """Prepend a column of ones to x."""
    return np.column_stack([np.ones(x.shape[0], dtype=x.dtype), x])
