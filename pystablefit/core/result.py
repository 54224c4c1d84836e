"""
Result envelope shared by PyStableFit solvers.

fit() wraps its domain payload (RegressionParams) in a Result together
with metadata, timings and any non-fatal warnings raised along the way.
Solution classes then expose the payload through read-only properties.
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable container for a computed payload and its provenance.

    Attributes:
        params: Domain payload (coefficients, fitted values, residuals)
        info: Metadata such as method name, normalize/intercept flags
            and problem sizes
        timing: Seconds per timed section, or None when not measured
        backend_name: Kernel that produced the payload, e.g. 'cpu_rls_svd'
        warnings: Messages for conditions that did not stop the fit

    Example:
        >>> Result(params=payload, info={'method': 'ols'},
        ...        timing=None, backend_name='cpu_ols')
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """True if some recorded warning contains substring."""
        return any(substring in w for w in self.warnings)
