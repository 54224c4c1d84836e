"""
Least squares solvers.

Provides the three direct least squares primitives used across the
package:
    - pinv_normal_solve: pseudo-inverse of the (optionally ridged) normal
      equations, minimum-norm under rank deficiency
    - left_divide: matrix left division, LU for square systems and
      least squares otherwise
    - lstsq_solve: plain least squares that never fails on rank deficiency
"""

from typing import Any
import numpy as np
import scipy.linalg
from numpy.typing import NDArray

from pystablefit.core.exceptions import SingularMatrixError


def pinv_normal_solve(
    X: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
    ridge: float = 0.0
) -> NDArray[np.floating[Any]]:
    """
    Solve β = pinv(X'X + ridge·I) X'y.

    Args:
        X: Design matrix (n x k)
        y: Response vector (n,) or matrix (n x m)
        ridge: Non-negative value added to the diagonal of X'X

    Returns:
        β with shape (k,) or (k, m)
    """
    XtX = X.T @ X
    if ridge:
        XtX = XtX + ridge * np.eye(XtX.shape[0])
    return np.linalg.pinv(XtX) @ (X.T @ y)


def left_divide(
    A: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]]
) -> NDArray[np.floating[Any]]:
    """
    Matrix left division A \\ b.

    Square systems are solved by LU factorization; rectangular systems
    by least squares (LAPACK gelsd).

    Raises:
        SingularMatrixError: If A is square and exactly singular
    """
    n, k = A.shape
    if n == k:
        try:
            return scipy.linalg.solve(A, b)
        except scipy.linalg.LinAlgError as e:
            raise SingularMatrixError(
                f"Square system is singular: {e}",
                matrix_name='X',
                rank=int(np.linalg.matrix_rank(A)),
                expected_rank=k,
            ) from e
    solution, _, _, _ = scipy.linalg.lstsq(A, b)
    return solution


def lstsq_solve(
    A: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]]
) -> NDArray[np.floating[Any]]:
    """Minimum-norm least squares solution of A x = b."""
    solution, _, _, _ = np.linalg.lstsq(A, b, rcond=None)
    return solution
