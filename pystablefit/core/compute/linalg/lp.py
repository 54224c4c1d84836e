"""
Linear program kernel.

Thin adapter over scipy.optimize.linprog (HiGHS) that accepts a single
constraint block with an explicit operator and returns both the primal
solution and the constraint marginals (shadow prices).

Marginal convention (HiGHS): marginals are the partial derivatives of
the optimal objective with respect to the constraint right-hand side.
For a minimization with '<=' constraints they are non-positive.
"""

from dataclasses import dataclass
from typing import Any, Literal
import numpy as np
from numpy.typing import NDArray
from scipy.optimize import linprog

from pystablefit.core.exceptions import DimensionError, LinearProgramError

ConstraintSense = Literal['=', '<']


@dataclass(frozen=True)
class LPResult:
    """
    Solution of a linear program.

    Attributes:
        x: Primal solution vector
        fun: Optimal objective value
        eq_duals: Marginals of the equality constraints (empty if none)
        ineq_duals: Marginals of the '<=' constraints (empty if none)
        status: Solver status code (0 = optimal)
        n_iter: Solver iterations
    """
    x: NDArray[np.floating[Any]]
    fun: float
    eq_duals: NDArray[np.floating[Any]]
    ineq_duals: NDArray[np.floating[Any]]
    status: int
    n_iter: int


def solve_lp(
    c: NDArray[np.floating[Any]],
    A: NDArray[np.floating[Any]],
    sense: ConstraintSense,
    b: NDArray[np.floating[Any]],
    lb: NDArray[np.floating[Any]],
    ub: NDArray[np.floating[Any]],
) -> LPResult:
    """
    Solve min c'x subject to A x (sense) b and lb <= x <= ub.

    Args:
        c: Objective coefficients (nvar,)
        A: Constraint matrix (ncon x nvar)
        sense: '=' for equality constraints, '<' for A x <= b
        b: Right-hand side (ncon,)
        lb: Lower bounds (nvar,), -inf allowed
        ub: Upper bounds (nvar,), +inf allowed

    Returns:
        LPResult with primal solution and marginals

    Raises:
        DimensionError: If the pieces of the program have inconsistent sizes
        ValueError: If sense is not '=' or '<'
        LinearProgramError: If the solver does not reach an optimum
    """
    nvar = c.shape[0]
    if A.shape != (b.shape[0], nvar):
        raise DimensionError(
            f"Constraint matrix has shape {A.shape}, expected ({b.shape[0]}, {nvar})"
        )
    if lb.shape[0] != nvar or ub.shape[0] != nvar:
        raise DimensionError(
            f"Bounds have lengths {lb.shape[0]}/{ub.shape[0]}, expected {nvar}"
        )

    bounds = np.column_stack([lb, ub])

    if sense == '=':
        res = linprog(c, A_eq=A, b_eq=b, bounds=bounds, method='highs')
    elif sense == '<':
        res = linprog(c, A_ub=A, b_ub=b, bounds=bounds, method='highs')
    else:
        raise ValueError(f"Unknown constraint sense: {sense!r}")

    if not res.success:
        raise LinearProgramError(
            f"Linear program failed (status {res.status}): {res.message}",
            status=int(res.status),
            solver_message=res.message,
        )

    empty = np.empty(0, dtype=np.float64)
    eq_duals = np.asarray(res.eqlin.marginals) if sense == '=' else empty
    ineq_duals = np.asarray(res.ineqlin.marginals) if sense == '<' else empty

    return LPResult(
        x=np.asarray(res.x),
        fun=float(res.fun),
        eq_duals=eq_duals,
        ineq_duals=ineq_duals,
        status=int(res.status),
        n_iter=int(res.nit),
    )
