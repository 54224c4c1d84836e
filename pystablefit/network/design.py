"""
Network Design.

Validated training samples for an algebraic network: inputs x (p x q),
targets y (p,) and, optionally, target gradients (p x q) with one row
per training sample.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pystablefit.core.exceptions import DimensionError
from pystablefit.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_consistent_length,
    check_finite,
    check_min_samples,
)


@dataclass(frozen=True)
class NetworkDesign:
    """
    Training data for an algebraic network.

    Immutable after construction.

    Construction:
        NetworkDesign.from_arrays(x, y)
        NetworkDesign.from_arrays(x, y, gradients)
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _gradients: NDArray[np.floating[Any]] | None
    _p: int
    _q: int

    @classmethod
    def from_arrays(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        gradients: ArrayLike | None = None,
    ) -> NetworkDesign:
        """
        Build Design from array-likes.

        A 1D x is a one-dimensional domain (q = 1). A single-column y
        matrix is flattened. For q = 1 gradients may be given as a
        vector.

        Raises:
            ValidationError: If inputs are non-numeric or non-finite
            DimensionError: If x, y and gradients disagree in shape
        """
        x_arr = check_array(x, 'x')
        y_arr = check_array(y, 'y')

        if x_arr.ndim == 1:
            x_arr = x_arr.reshape(-1, 1)
        if y_arr.ndim == 2 and y_arr.shape[1] == 1:
            y_arr = y_arr.ravel()

        check_2d(x_arr, 'x')
        check_1d(y_arr, 'y')
        check_finite(x_arr, 'x')
        check_finite(y_arr, 'y')
        check_consistent_length(x_arr, y_arr, names=('x', 'y'))
        check_min_samples(x_arr, 1, 'x')

        p, q = x_arr.shape

        g_arr = None
        if gradients is not None:
            g_arr = check_array(gradients, 'gradients')
            if g_arr.ndim == 1 and q == 1:
                g_arr = g_arr.reshape(-1, 1)
            if g_arr.shape != (p, q):
                raise DimensionError(
                    f"gradients: expected shape ({p}, {q}), one row per training "
                    f"sample, got {g_arr.shape}"
                )
            check_finite(g_arr, 'gradients')

        return cls(_x=x_arr, _y=y_arr, _gradients=g_arr, _p=p, _q=q)

    # === Properties ===

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Training inputs (p x q)."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Training targets (p,)."""
        return self._y

    @property
    def gradients(self) -> NDArray[np.floating[Any]] | None:
        """Target gradients (p x q), or None."""
        return self._gradients

    @property
    def p(self) -> int:
        """Number of training samples."""
        return self._p

    @property
    def q(self) -> int:
        """Input dimension."""
        return self._q

    @property
    def has_gradients(self) -> bool:
        return self._gradients is not None
