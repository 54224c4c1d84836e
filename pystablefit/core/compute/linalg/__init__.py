"""
Linear algebra kernels for PyStableFit.

All functions follow these conventions:
    - Functions use NumPy/SciPy (LAPACK and HiGHS under the hood)
    - Decompositions return a structured result dataclass
    - Errors are raised immediately with clear messages

Submodules:
    svd: Thin singular value decomposition and truncation rank
    lstsq: Pseudo-inverse normal equations, left division, least squares
    lp: Linear programs with primal solution and marginals
"""

from pystablefit.core.compute.linalg.svd import (
    SVDResult,
    svd_cpu,
    truncation_rank,
)
from pystablefit.core.compute.linalg.lstsq import (
    pinv_normal_solve,
    left_divide,
    lstsq_solve,
)
from pystablefit.core.compute.linalg.lp import LPResult, solve_lp

__all__ = [
    # SVD
    "SVDResult",
    "svd_cpu",
    "truncation_rank",
    # Least squares
    "pinv_normal_solve",
    "left_divide",
    "lstsq_solve",
    # Linear programs
    "LPResult",
    "solve_lp",
]
