"""
Shared compute infrastructure for PyStableFit.

Numeric building blocks used by both regression and network. The
estimator-specific slope kernels live in regression/backends/ and call
into linalg here.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers and numeric constants
    linalg: SVD, least squares and LP kernels
"""

from pystablefit.core.compute.timing import Timer

__all__ = [
    # Timing
    "Timer",
]
