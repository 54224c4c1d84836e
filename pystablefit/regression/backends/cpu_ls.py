"""
CPU least squares slope kernels.

Each kernel computes β for min ||y - Xβ||² (possibly regularized) with
no intercept and no normalization; those are layered on by the
dispatcher. y may hold several responses as columns, in which case all
columns are solved jointly from a single factorization.

References:
    Judd, K. L., Maliar, L., & Maliar, S. (2011). Numerically stable and
    accurate stochastic simulation approaches for solving dynamic
    economic models. Quantitative Economics, 2(2), 173-210. Section 4.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pystablefit.core.exceptions import SingularMatrixError
from pystablefit.core.compute.linalg import (
    left_divide,
    pinv_normal_solve,
    svd_cpu,
    truncation_rank,
)


def ols_slopes(X: NDArray, y: NDArray) -> NDArray[np.floating[Any]]:
    """β = pinv(X'X) X'y, the minimum-norm solution when X'X is singular."""
    return pinv_normal_solve(X, y)


def ldiv_slopes(X: NDArray, y: NDArray) -> NDArray[np.floating[Any]]:
    """β = X \\ y by direct decomposition of X."""
    return left_divide(X, y)


def svd_slopes(X: NDArray, y: NDArray) -> NDArray[np.floating[Any]]:
    """
    β = V S⁻¹ U'y from the thin SVD of X.

    Raises:
        SingularMatrixError: If any singular value is exactly zero
    """
    svd = svd_cpu(X)
    if np.any(svd.S == 0):
        raise SingularMatrixError(
            "Design matrix has a zero singular value; "
            "S⁻¹ is undefined. Use a truncated or regularized method.",
            matrix_name='X',
            condition_number=svd.condition_number,
            rank=svd.rank,
            expected_rank=len(svd.S),
        )
    return svd.V @ ((svd.U.T @ y) / _column(svd.S, y))


def tikhonov_slopes(X: NDArray, y: NDArray, eta: float) -> NDArray[np.floating[Any]]:
    """
    β = pinv(X'X + (n/k)·10^η I) X'y.

    The penalty is scaled by n/k so that eta has the same meaning
    regardless of sample size and number of regressors.
    """
    n, k = X.shape
    return pinv_normal_solve(X, y, ridge=n / k * 10.0 ** eta)


def truncated_svd_slopes(X: NDArray, y: NDArray, kappa: float) -> NDArray[np.floating[Any]]:
    """
    β = V_r S_r⁻¹ U_r'y keeping the r leading singular values.

    r is the number of components whose condition number S₁/Sᵢ stays
    within kappa; with a single admissible component this is a rank-1 fit.

    Raises:
        SingularMatrixError: If X is identically zero
    """
    svd = svd_cpu(X)
    if svd.S[0] == 0:
        raise SingularMatrixError(
            "Design matrix is identically zero; no component can be retained.",
            matrix_name='X',
            rank=0,
            expected_rank=len(svd.S),
        )
    r = truncation_rank(svd.S, kappa)
    Ur = svd.U[:, :r]
    Vr = svd.V[:, :r]
    return Vr @ ((Ur.T @ y) / _column(svd.S[:r], y))


def _column(s: NDArray, y: NDArray) -> NDArray:
    # broadcast singular values down rows when y holds several responses
    return s if y.ndim == 1 else s[:, None]
