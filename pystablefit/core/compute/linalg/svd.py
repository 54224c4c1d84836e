"""
Singular value decomposition.

Thin SVD with the conventions the regression kernels rely on:
singular values in descending order and V returned (not V').
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class SVDResult:
    """
    Result of a thin singular value decomposition X = U diag(S) V'.

    Attributes:
        U: Left singular vectors (n x k, k = min(n, p))
        S: Singular values, descending (k,)
        V: Right singular vectors (p x k)
        rank: Numerical rank (singular values above the LAPACK-style tolerance)
    """
    U: NDArray[np.floating[Any]]
    S: NDArray[np.floating[Any]]
    V: NDArray[np.floating[Any]]
    rank: int

    @property
    def condition_number(self) -> float:
        """Ratio of largest to smallest singular value (inf when singular)."""
        if len(self.S) == 0 or self.S[-1] == 0:
            return float('inf')
        return float(self.S[0] / self.S[-1])


def svd_cpu(X: NDArray[np.floating[Any]]) -> SVDResult:
    """
    Thin SVD using LAPACK (via NumPy).

    Args:
        X: Matrix to decompose (n x p)

    Returns:
        SVDResult with U, S, V and numerical rank
    """
    U, S, Vt = np.linalg.svd(X, full_matrices=False)

    if len(S) > 0 and S[0] > 0:
        tol = max(X.shape) * np.finfo(X.dtype).eps * S[0]
        rank = int(np.sum(S > tol))
    else:
        rank = 0

    return SVDResult(U=U, S=S, V=Vt.T, rank=rank)


def truncation_rank(S: NDArray[np.floating[Any]], kappa: float) -> int:
    """
    Number of leading singular values to keep for condition bound kappa.

    Keeps S[0..r-1] where r is the first position (counting from the
    second singular value) at which S[0] / S[i] exceeds kappa. If no
    ratio exceeds kappa every component is kept.

    Args:
        S: Singular values, descending
        kappa: Largest admissible condition number

    Returns:
        r, with 1 <= r <= len(S)
    """
    with np.errstate(divide='ignore'):
        condition_numbers = S[0] / S[1:]
    exceeded = np.flatnonzero(condition_numbers > kappa)
    if exceeded.size == 0:
        return len(S)
    return int(exceeded[0]) + 1
