"""
Numerically stable linear regression.

A closed family of interchangeable estimators for ill-conditioned or
collinear design matrices, unified under one normalization/intercept
dispatcher.

Public API:
    regress(estimator, X, y) -> coefficients
    fit(estimator, X, y) -> RegressionSolution

Estimators:
    OLS, LSLdiv, LSSVD, RLSTikhonov (RLST), RLSSVD,
    LADPP, LADDP, RLADPP, RLADDP

Example:
    >>> from pystablefit.regression import regress, RLSSVD
    >>> beta = regress(RLSSVD(kappa=1e6), X, y)
    >>> beta[0]     # intercept
    >>> beta[1:]    # slopes in the units of X and y
"""

from pystablefit.regression.estimators import (
    ESTIMATORS,
    LAD_ESTIMATORS,
    LEAST_SQUARES_ESTIMATORS,
    Estimator,
    SlopeEstimator,
    OLS,
    LSLdiv,
    LSSVD,
    RLSTikhonov,
    RLST,
    RLSSVD,
    LADPP,
    LADDP,
    RLADPP,
    RLADDP,
)
from pystablefit.regression.design import RegressionDesign
from pystablefit.regression.solution import RegressionParams, RegressionSolution
from pystablefit.regression.solvers import fit, regress

__all__ = [
    "regress",
    "fit",
    "RegressionDesign",
    "RegressionParams",
    "RegressionSolution",
    "Estimator",
    "SlopeEstimator",
    "ESTIMATORS",
    "LEAST_SQUARES_ESTIMATORS",
    "LAD_ESTIMATORS",
    "OLS",
    "LSLdiv",
    "LSSVD",
    "RLSTikhonov",
    "RLST",
    "RLSSVD",
    "LADPP",
    "LADDP",
    "RLADPP",
    "RLADDP",
]
