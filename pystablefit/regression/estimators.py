"""
Regression estimator variants.

Each estimator is an immutable configuration record (policy flags plus
an optional hyperparameter) paired with a slopes() computation. The set
of estimators is closed:

    Least squares:                  OLS, LSLdiv, LSSVD
    Regularized least squares:      RLSTikhonov (alias RLST), RLSSVD
    Least absolute deviations:      LADPP, LADDP
    Regularized LAD:                RLADPP, RLADDP

All of them satisfy the SlopeEstimator protocol used by the dispatcher
in regression.solvers.

Configuration is validated at construction; invalid combinations raise
ConfigurationError:
    - normalize=True requires intercept=True (the intercept is what
      absorbs the centring when normalization is undone)
    - LAD variants always normalize and add an intercept
    - eta, the log10 penalty, must be negative
    - kappa, the condition-number bound, must be positive

References:
    Judd, K. L., Maliar, L., & Maliar, S. (2011). Numerically stable and
    accurate stochastic simulation approaches for solving dynamic
    economic models. Quantitative Economics, 2(2), 173-210.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, Union, runtime_checkable

import numpy as np
from numpy.typing import NDArray

from pystablefit.core.exceptions import ConfigurationError
from pystablefit.regression.backends import cpu_lad, cpu_ls


@runtime_checkable
class SlopeEstimator(Protocol):
    """
    Capability set shared by every estimator variant.

    should_normalize: standardize x and y before computing slopes
    should_add_intercept: produce an intercept as the leading coefficient
    slopes: β for (x, y) without intercept handling or normalization
    """

    @property
    def name(self) -> str:
        ...

    @property
    def should_normalize(self) -> bool:
        ...

    @property
    def should_add_intercept(self) -> bool:
        ...

    def slopes(self, x: NDArray, y: NDArray) -> NDArray[np.floating[Any]]:
        ...


class _PolicyFlags:
    """normalize/intercept accessors and their validation."""

    normalize: bool
    intercept: bool

    @property
    def should_normalize(self) -> bool:
        return self.normalize

    @property
    def should_add_intercept(self) -> bool:
        return self.intercept

    def _require_intercept_if_normalizing(self) -> None:
        if self.normalize and not self.intercept:
            raise ConfigurationError(
                f"{type(self).__name__}: must have intercept if normalizing "
                f"(normalize=True, intercept=False)",
                estimator=type(self).__name__,
                parameter='intercept',
            )

    def _require_normalize_and_intercept(self) -> None:
        if not (self.normalize and self.intercept):
            raise ConfigurationError(
                f"{type(self).__name__}: normalize and intercept must both be True, "
                f"got normalize={self.normalize}, intercept={self.intercept}",
                estimator=type(self).__name__,
                parameter='normalize' if not self.normalize else 'intercept',
            )

    def _require_negative_eta(self, eta: float) -> None:
        if not eta < 0.0:
            raise ConfigurationError(
                f"{type(self).__name__}: penalty exponent eta must be negative, got {eta}",
                estimator=type(self).__name__,
                parameter='eta',
            )


# =====================================================================
# Least squares
# =====================================================================


@dataclass(frozen=True)
class OLS(_PolicyFlags):
    """Ordinary least squares via the pseudo-inverse of X'X."""
    normalize: bool = True
    intercept: bool = True

    def __post_init__(self):
        self._require_intercept_if_normalizing()

    @property
    def name(self) -> str:
        return 'ols'

    def slopes(self, x, y):
        return cpu_ls.ols_slopes(x, y)


@dataclass(frozen=True)
class LSLdiv(_PolicyFlags):
    """Least squares by matrix left division (LU or QR-type solve)."""
    normalize: bool = True
    intercept: bool = True

    def __post_init__(self):
        self._require_intercept_if_normalizing()

    @property
    def name(self) -> str:
        return 'ls_ldiv'

    def slopes(self, x, y):
        return cpu_ls.ldiv_slopes(x, y)


@dataclass(frozen=True)
class LSSVD(_PolicyFlags):
    """Least squares through the full-rank thin SVD of X."""
    normalize: bool = True
    intercept: bool = True

    def __post_init__(self):
        self._require_intercept_if_normalizing()

    @property
    def name(self) -> str:
        return 'ls_svd'

    def slopes(self, x, y):
        return cpu_ls.svd_slopes(x, y)


# =====================================================================
# Regularized least squares
# =====================================================================


@dataclass(frozen=True)
class RLSTikhonov(_PolicyFlags):
    """
    Tikhonov (ridge) regularized least squares.

    Penalty is (n/k)·10^eta; eta = -5 shrinks very little.
    """
    eta: float = -5.0
    normalize: bool = True
    intercept: bool = True

    def __post_init__(self):
        self._require_intercept_if_normalizing()
        self._require_negative_eta(self.eta)

    @property
    def name(self) -> str:
        return 'rls_tikhonov'

    def slopes(self, x, y):
        return cpu_ls.tikhonov_slopes(x, y, self.eta)


RLST = RLSTikhonov


@dataclass(frozen=True)
class RLSSVD(_PolicyFlags):
    """
    Truncated-SVD least squares.

    Singular components whose condition number S₁/Sᵢ exceeds kappa are
    discarded before inverting.
    """
    kappa: float = 100_000.0
    normalize: bool = True
    intercept: bool = True

    def __post_init__(self):
        if not self.kappa > 0:
            raise ConfigurationError(
                f"RLSSVD: kappa must be positive, got {self.kappa}",
                estimator='RLSSVD',
                parameter='kappa',
            )
        self._require_intercept_if_normalizing()

    @property
    def name(self) -> str:
        return 'rls_svd'

    def slopes(self, x, y):
        return cpu_ls.truncated_svd_slopes(x, y, self.kappa)


# =====================================================================
# Least absolute deviations
# =====================================================================


@dataclass(frozen=True)
class LADPP(_PolicyFlags):
    """LAD regression, primal linear program."""
    normalize: bool = True
    intercept: bool = True

    def __post_init__(self):
        self._require_normalize_and_intercept()

    @property
    def name(self) -> str:
        return 'lad_pp'

    def slopes(self, x, y):
        return cpu_lad.lad_primal_slopes(x, y)


@dataclass(frozen=True)
class LADDP(_PolicyFlags):
    """LAD regression, dual linear program."""
    normalize: bool = True
    intercept: bool = True

    def __post_init__(self):
        self._require_normalize_and_intercept()

    @property
    def name(self) -> str:
        return 'lad_dp'

    def slopes(self, x, y):
        return cpu_lad.lad_dual_slopes(x, y)


@dataclass(frozen=True)
class RLADPP(_PolicyFlags):
    """L1-regularized LAD regression, primal linear program."""
    eta: float = -5.0
    normalize: bool = True
    intercept: bool = True

    def __post_init__(self):
        self._require_negative_eta(self.eta)
        self._require_normalize_and_intercept()

    @property
    def name(self) -> str:
        return 'rlad_pp'

    def slopes(self, x, y):
        return cpu_lad.rlad_primal_slopes(x, y, self.eta)


@dataclass(frozen=True)
class RLADDP(_PolicyFlags):
    """L1-regularized LAD regression, dual linear program."""
    eta: float = -5.0
    normalize: bool = True
    intercept: bool = True

    def __post_init__(self):
        self._require_negative_eta(self.eta)
        self._require_normalize_and_intercept()

    @property
    def name(self) -> str:
        return 'rlad_dp'

    def slopes(self, x, y):
        return cpu_lad.rlad_dual_slopes(x, y, self.eta)


Estimator = Union[OLS, LSLdiv, LSSVD, RLSTikhonov, RLSSVD, LADPP, LADDP, RLADPP, RLADDP]

LEAST_SQUARES_ESTIMATORS = (OLS, LSLdiv, LSSVD, RLSTikhonov, RLSSVD)
LAD_ESTIMATORS = (LADPP, LADDP, RLADPP, RLADDP)
ESTIMATORS = LEAST_SQUARES_ESTIMATORS + LAD_ESTIMATORS
