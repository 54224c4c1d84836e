"""
Core infrastructure for PyStableFit.

This module provides shared abstractions and utilities used by the
domain-specific submodules (regression, network).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, tolerances, linear algebra and LP kernels
"""

from pystablefit.core.result import Result
from pystablefit.core.exceptions import (
    PyStableFitError,
    ValidationError,
    DimensionError,
    ConfigurationError,
    NumericalError,
    SingularMatrixError,
    LinearProgramError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyStableFitError",
    "ValidationError",
    "DimensionError",
    "ConfigurationError",
    "NumericalError",
    "SingularMatrixError",
    "LinearProgramError",
]
