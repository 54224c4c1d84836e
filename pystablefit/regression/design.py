"""
Regression Design.

Design holds the validated design matrix X and response y that the
dispatcher works on. y is either a vector (one response) or a matrix
with one column per response.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pystablefit.core.validation import (
    check_1d_or_2d,
    check_2d,
    check_array,
    check_consistent_length,
    check_finite,
    check_min_samples,
)


@dataclass(frozen=True)
class RegressionDesign:
    """
    Validated regression inputs.

    Immutable after construction.

    Construction:
        RegressionDesign.from_arrays(X, y)
    """
    _X: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int
    _k: int
    _m: int

    @classmethod
    def from_arrays(cls, X: ArrayLike, y: ArrayLike) -> RegressionDesign:
        """
        Build Design directly from array-likes.

        A 1D X is treated as a single regressor. A single-column y
        matrix is kept as a matrix so the output shape follows the input.

        Raises:
            ValidationError: If inputs are non-numeric or non-finite
            DimensionError: If shapes are inconsistent
        """
        X_arr = check_array(X, 'X')
        y_arr = check_array(y, 'y')

        if X_arr.ndim == 1:
            X_arr = X_arr.reshape(-1, 1)

        check_2d(X_arr, 'X')
        check_1d_or_2d(y_arr, 'y')
        check_finite(X_arr, 'X')
        check_finite(y_arr, 'y')
        check_consistent_length(X_arr, y_arr, names=('X', 'y'))
        check_min_samples(X_arr, 2, 'X')

        n, k = X_arr.shape
        m = 1 if y_arr.ndim == 1 else y_arr.shape[1]
        return cls(_X=X_arr, _y=y_arr, _n=n, _k=k, _m=m)

    # === Properties ===

    @property
    def X(self) -> NDArray[np.floating[Any]]:
        """Design matrix (n x k)."""
        return self._X

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response vector (n,) or matrix (n x m)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def k(self) -> int:
        """Number of regressors (columns of X)."""
        return self._k

    @property
    def m(self) -> int:
        """Number of responses."""
        return self._m

    @property
    def multi_response(self) -> bool:
        """True when y was given as a matrix."""
        return self._y.ndim == 2
