"""
Algebraic single-hidden-layer networks.

Fits a smooth approximator to sampled function values (and optionally
gradients) by randomized projection plus a linear solve, without
iterative gradient descent.

Public API:
    algebraic_network(x, y, gradients=None, ...) -> AlgebraicNetwork
    network(x_new) -> predictions
    isexact(network) -> bool

Example:
    >>> from pystablefit.network import algebraic_network, isexact
    >>> x = np.linspace(0, 3, 10)
    >>> net = algebraic_network(x, np.sin(x), np.cos(x), rng=42)
    >>> net(np.array([1.5]))
    >>> isexact(net)
    True
"""

from pystablefit.network.activations import Activation, Sigmoid, Tanh
from pystablefit.network.algebraic import AlgebraicNetwork, isexact
from pystablefit.network.design import NetworkDesign
from pystablefit.network.solvers import algebraic_network

__all__ = [
    "algebraic_network",
    "isexact",
    "AlgebraicNetwork",
    "NetworkDesign",
    "Activation",
    "Sigmoid",
    "Tanh",
]
