"""
PyStableFit: numerically stable regression and algebraic network fitting.

Robust coefficient estimation and fast smooth-function approximation
for simulation pipelines.

Submodules:
    regression: Stable least squares and least absolute deviations
    network: Algebraic single-hidden-layer function approximation
"""

__version__ = "0.1.0"

from pystablefit import regression
from pystablefit import network
from pystablefit.regression import regress, fit
from pystablefit.network import algebraic_network, isexact, AlgebraicNetwork

__all__ = [
    "__version__",
    "regression",
    "network",
    "regress",
    "fit",
    "algebraic_network",
    "isexact",
    "AlgebraicNetwork",
]
