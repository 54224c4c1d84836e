"""
CPU least absolute deviations slope kernels.

LAD regression min Σ|y - Xβ| is solved as a linear program, either in
primal form (β is part of the solution vector) or in dual form (β is
read off the constraint marginals). The regularized variants add an
L1 penalty 10^η·n/k·||β||₁.

Unlike the least squares kernels, one program is solved per response
column.

References:
    Judd, K. L., Maliar, L., & Maliar, S. (2011). Numerically stable and
    accurate stochastic simulation approaches for solving dynamic
    economic models. Quantitative Economics, 2(2), 173-210. Section 4.3.
"""

from typing import Any, Callable
import numpy as np
from numpy.typing import NDArray

from pystablefit.core.compute.linalg import solve_lp
from pystablefit.core.compute.tolerances import LAD_COEFFICIENT_BOUND


def lad_primal_slopes(X: NDArray, y: NDArray) -> NDArray[np.floating[Any]]:
    """
    Solve the primal LAD program

        min 1'v⁺ + 1'v⁻
        s.t. v⁺ - v⁻ + Xβ = y,  v⁺ ≥ 0, v⁻ ≥ 0, -300 ≤ β ≤ 300

    The solution vector is ordered [v⁺; v⁻; β] and β is its tail.
    """
    n, k = X.shape

    lb = np.concatenate([np.zeros(2 * n), np.full(k, -LAD_COEFFICIENT_BOUND)])
    ub = np.concatenate([np.full(2 * n, np.inf), np.full(k, LAD_COEFFICIENT_BOUND)])
    c = np.concatenate([np.ones(2 * n), np.zeros(k)])
    A = np.hstack([np.eye(n), -np.eye(n), X])

    def solve_column(y_j: NDArray) -> NDArray:
        out = solve_lp(c, A, '=', y_j, lb, ub)
        return out.x[-k:]

    return _per_column(solve_column, y, k)


def lad_dual_slopes(X: NDArray, y: NDArray) -> NDArray[np.floating[Any]]:
    """
    Solve the dual LAD program

        min -y'q
        s.t. X'q = 0,  -1 ≤ q ≤ 1

    β is the negative of the equality-constraint marginals.
    """
    n, k = X.shape

    lb = np.full(n, -1.0)
    ub = np.full(n, 1.0)
    A = X.T
    b = np.zeros(k)

    def solve_column(y_j: NDArray) -> NDArray:
        out = solve_lp(-y_j, A, '=', b, lb, ub)
        return -out.eq_duals[:k]

    return _per_column(solve_column, y, k)


def rlad_primal_slopes(X: NDArray, y: NDArray, eta: float) -> NDArray[np.floating[Any]]:
    """
    Solve the regularized primal LAD program

        min 1'v⁺ + 1'v⁻ + λ1'ψ⁺ + λ1'ψ⁻,   λ = 10^η·n/k
        s.t. v⁺ - v⁻ + Xψ⁺ - Xψ⁻ = y,  all variables ≥ 0

    The solution vector is ordered [v⁺; v⁻; ψ⁺; ψ⁻] and β = ψ⁺ - ψ⁻.
    """
    n, k = X.shape
    penalty = 10.0 ** eta * n / k

    nvar = 2 * n + 2 * k
    lb = np.zeros(nvar)
    ub = np.full(nvar, np.inf)
    c = np.concatenate([np.ones(2 * n), np.full(2 * k, penalty)])
    A = np.hstack([np.eye(n), -np.eye(n), X, -X])

    def solve_column(y_j: NDArray) -> NDArray:
        out = solve_lp(c, A, '=', y_j, lb, ub)
        psi_plus = out.x[2 * n:2 * n + k]
        psi_minus = out.x[2 * n + k:]
        return psi_plus - psi_minus

    return _per_column(solve_column, y, k)


def rlad_dual_slopes(X: NDArray, y: NDArray, eta: float) -> NDArray[np.floating[Any]]:
    """
    Solve the regularized dual LAD program

        min -y'q
        s.t. X'q ≤ λ1,  -X'q ≤ λ1,  -1 ≤ q ≤ 1,   λ = 10^η·n/k

    With ψ⁺, ψ⁻ the negated marginals of the two inequality blocks,
    β = ψ⁺ - ψ⁻.
    """
    n, k = X.shape
    penalty = 10.0 ** eta * n / k

    lb = np.full(n, -1.0)
    ub = np.full(n, 1.0)
    A = np.vstack([X.T, -X.T])
    b = np.full(2 * k, penalty)

    def solve_column(y_j: NDArray) -> NDArray:
        out = solve_lp(-y_j, A, '<', b, lb, ub)
        psi_plus = -out.ineq_duals[:k]
        psi_minus = -out.ineq_duals[k:2 * k]
        return psi_plus - psi_minus

    return _per_column(solve_column, y, k)


def _per_column(
    solve_column: Callable[[NDArray], NDArray],
    y: NDArray,
    k: int
) -> NDArray[np.floating[Any]]:
    """Run one linear program per response column; 1D y gives 1D β."""
    if y.ndim == 1:
        return solve_column(y)

    beta = np.empty((k, y.shape[1]), dtype=np.float64)
    for j in range(y.shape[1]):
        beta[:, j] = solve_column(y[:, j])
    return beta

