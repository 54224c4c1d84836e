"""
Algebraic single-hidden-layer network.

The network maps x (N x q) to

    activation(x W + d) v

with hidden weights W (q x s), hidden biases d (s,) and output weights
v (s,). Hidden neuron i is anchored on training point i through
d[i] = -<x_i, W[:, i]>.

Weights are set by the fitting procedure in network.solvers and are
not meant to be modified by callers.

References:
    Ferrari, S., & Stengel, R. F. (2005). Smooth function approximation
    using neural networks. IEEE Transactions on Neural Networks, 16(1),
    24-38.
"""

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pystablefit.core.exceptions import DimensionError, ValidationError
from pystablefit.core.validation import check_array, check_positive_int
from pystablefit.network.activations import Activation, Sigmoid


class AlgebraicNetwork:
    """
    Single-hidden-layer feed-forward approximator.

    Attributes:
        p: Number of training points
        q: Dimension of the function domain
        s: Number of hidden neurons (s <= p)
        n_train_it: Number of rank-deficient draws that were retried
        activation: Hidden-layer activation
        W: Hidden weights (q x s)
        d: Hidden biases (s,)
        v: Output weights (s,)
        full_rank: Whether the accepted activation matrix had rank s
        timing: Fit timing breakdown, set by the fitting procedure
    """

    def __init__(self, p: int, q: int, s: int, activation: Activation | None = None):
        check_positive_int(p, 'p')
        check_positive_int(q, 'q')
        check_positive_int(s, 's')
        if s > p:
            raise ValidationError(
                f"s: number of neurons ({s}) cannot exceed number of training "
                f"points ({p}); the activation matrix could not reach full column rank"
            )

        self.p = int(p)
        self.q = int(q)
        self.s = int(s)
        self.n_train_it = 0
        self.activation = activation if activation is not None else Sigmoid()
        self.W = np.zeros((self.q, self.s))
        self.d = np.zeros(self.s)
        self.v = np.zeros(self.s)
        self.full_rank = False
        self.timing: dict[str, float] | None = None

    @property
    def is_exact(self) -> bool:
        """True when there is one neuron per training point (exact interpolant)."""
        return self.p == self.s

    def input_to_node(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        """Hidden-layer input x W + d, shape (N, s)."""
        return self._check_input(x) @ self.W + self.d

    def activation_matrix(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        """Hidden-layer output activation(x W + d), shape (N, s)."""
        return self.activation(self.input_to_node(x))

    def gradient(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        """
        Gradient of the network output with respect to its inputs.

        Returns:
            (N, q) array, row r being Σ_j v_j σ'(n_rj) W[:, j]
        """
        N = self.input_to_node(x)
        return (self.activation.deriv(N) * self.v) @ self.W.T

    def __call__(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        """Evaluate the network at the rows of x (N x q); returns (N,)."""
        return self.activation_matrix(x) @ self.v

    def _check_input(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        x_arr = check_array(x, 'x')
        if x_arr.ndim == 1 and self.q == 1:
            x_arr = x_arr.reshape(-1, 1)
        if x_arr.ndim != 2 or x_arr.shape[1] != self.q:
            raise DimensionError(
                f"x: wrong input dimension, expected (N, {self.q}), got {x_arr.shape}"
            )
        return x_arr

    def summary(self) -> str:
        return "\n".join([
            "AlgebraicNetwork with",
            f"  - {type(self.activation).__name__} activation function",
            f"  - {self.q} input dimension(s)",
            f"  - {self.s} neuron(s)",
            f"  - {self.p} training point(s)",
        ])

    def __repr__(self) -> str:
        return (
            f"AlgebraicNetwork(activation={type(self.activation).__name__}, "
            f"q={self.q}, s={self.s}, p={self.p})"
        )


def isexact(network: AlgebraicNetwork) -> bool:
    """True iff the network has as many neurons as training points."""
    return network.is_exact
