"""
Activation functions for single-hidden-layer networks.

Each activation is a stateless callable applied elementwise, with its
derivative available as deriv(). The derivative is what the gradient
refinement pass uses as the local sensitivity of a neuron.
"""

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable
import numpy as np
from numpy.typing import NDArray


@runtime_checkable
class Activation(Protocol):
    """Elementwise activation with a derivative."""

    def __call__(self, x: NDArray) -> NDArray[np.floating[Any]]:
        ...

    def deriv(self, x: NDArray) -> NDArray[np.floating[Any]]:
        ...


@dataclass(frozen=True)
class Sigmoid:
    """Logistic sigmoid σ(x) = 1 / (1 + e^-x)."""

    def __call__(self, x):
        # tanh form avoids overflow in exp for large |x|
        return 0.5 * (1.0 + np.tanh(0.5 * np.asarray(x, dtype=np.float64)))

    def deriv(self, x):
        s = self(x)
        return s * (1.0 - s)


@dataclass(frozen=True)
class Tanh:
    """Hyperbolic tangent."""

    def __call__(self, x):
        return np.tanh(np.asarray(x, dtype=np.float64))

    def deriv(self, x):
        t = np.tanh(np.asarray(x, dtype=np.float64))
        return 1.0 - t * t
