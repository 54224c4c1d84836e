"""
Tolerance tiers and numeric constants.

Defines precision expectations for the different solution paths:
- Direct least squares (pinv, SVD, LU): machine precision
- Regularized least squares: bias of order 10^eta
- Linear programs (HiGHS): solver feasibility tolerance

Used by the test suite and by the kernels for their fixed bounds.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


LEAST_SQUARES = ToleranceTier(
    rtol=1e-8,
    atol=1e-10,
    name='least_squares',
    description='Direct least squares, machine precision up to conditioning',
)

REGULARIZED = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='regularized',
    description='Penalized least squares or LP, shrinkage of order 10^eta',
)

LINEAR_PROGRAM = ToleranceTier(
    rtol=1e-6,
    atol=1e-7,
    name='linear_program',
    description='LP solution, HiGHS primal/dual feasibility tolerance',
)

# Box bound on beta in the primal LAD program
LAD_COEFFICIENT_BOUND = 300.0

# Refined hidden weights larger than this in magnitude are rejected
GRADIENT_WEIGHT_BOUND = 50.0

# Default gradient discrepancy below which a neuron is left alone
GRADIENT_TOLERANCE = 1e-5


def select_tolerance(method_name: str) -> ToleranceTier:
    """Select the tolerance tier for an estimator name."""
    if method_name.startswith('rlad') or method_name.startswith('rls'):
        return REGULARIZED
    if method_name.startswith('lad'):
        return LINEAR_PROGRAM
    return LEAST_SQUARES
