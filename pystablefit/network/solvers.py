"""
Fitting procedure for algebraic networks.

Phase 1, randomized fit:
    Draw W ~ f·N(0, 1), anchor each neuron on its training point
    (d[i] = -<x_i, W[:, i]>), form S = activation(x W + d) and, once S
    has full column rank, solve S v = y. Rank-deficient draws are
    retried up to maxit times; on exhaustion the last draw is kept with
    a least squares v and a RuntimeWarning.

Phase 2, gradient refinement (only when target gradients are given):
    Visit the anchor points in order. Where the network gradient at x_i
    misses the target by more than tol, take one first-order step on
    W[:, i] using v_i·σ'(0) as the sensitivity, reject the step if any
    weight leaves [-50, 50], then re-anchor neuron i and re-solve v
    against the updated activation matrix. Each point uses the matrix
    left by the previous one, so the pass is strictly sequential.
"""

import warnings
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pystablefit.core.exceptions import ValidationError
from pystablefit.core.validation import check_positive_int
from pystablefit.core.compute.timing import Timer
from pystablefit.core.compute.linalg import left_divide, lstsq_solve
from pystablefit.core.compute.tolerances import GRADIENT_TOLERANCE, GRADIENT_WEIGHT_BOUND
from pystablefit.network.activations import Activation
from pystablefit.network.algebraic import AlgebraicNetwork
from pystablefit.network.design import NetworkDesign

# default projection scale for value-only and gradient-aware fits
DEFAULT_SCALE = 4.5
DEFAULT_SCALE_GRADIENTS = 5.0


def algebraic_network(
    x: ArrayLike,
    y: ArrayLike,
    gradients: ArrayLike | None = None,
    *,
    activation: Activation | None = None,
    s: int | None = None,
    f: float | None = None,
    tol: float = GRADIENT_TOLERANCE,
    maxit: int = 1000,
    rng: np.random.Generator | int | None = None,
) -> AlgebraicNetwork:
    """
    Fit an algebraic network to samples of a function (and its gradient).

    Args:
        x: Training inputs (p x q); a 1D array is a one-dimensional domain
        y: Function values at the training inputs (p,)
        gradients: Optional target gradients (p x q), one row per sample
        activation: Hidden-layer activation, Sigmoid() by default
        s: Number of neurons, defaults to p; must not exceed p
        f: Scale of the random hidden weights; 4.5 by default, 5.0 when
           gradients are given
        tol: Gradient discrepancy (max-norm) tolerated without refinement
        maxit: Maximum number of random draws in the fitting loop
        rng: numpy Generator or seed for the weight draws

    Returns:
        Fitted AlgebraicNetwork

    Raises:
        ValidationError: If s > p or a tuning parameter is out of range
        DimensionError: If x, y and gradients disagree in shape

    Example:
        >>> x = np.array([0.0, 1.0, 2.0])
        >>> net = algebraic_network(x, np.sin(x), rng=0)
        >>> np.allclose(net(x), np.sin(x))
        True
    """
    design = NetworkDesign.from_arrays(x, y, gradients)

    if s is None:
        s = design.p
    if f is None:
        f = DEFAULT_SCALE_GRADIENTS if design.has_gradients else DEFAULT_SCALE
    check_positive_int(maxit, 'maxit')
    if not f > 0:
        raise ValidationError(f"f: weight scale must be positive, got {f}")
    if not tol >= 0:
        raise ValidationError(f"tol: must be non-negative, got {tol}")

    net = AlgebraicNetwork(design.p, design.q, s, activation)
    generator = np.random.default_rng(rng)

    timer = Timer()
    timer.start()

    with timer.section('randomized_fit'):
        _fit_randomized(net, design.x, design.y, f, maxit, generator)

    if design.has_gradients:
        with timer.section('gradient_refinement'):
            _refine_with_gradients(net, design.x, design.y, design.gradients, tol)

    timer.stop()
    net.timing = timer.result()
    return net


def _fit_randomized(
    net: AlgebraicNetwork,
    x: NDArray,
    y: NDArray,
    f: float,
    maxit: int,
    rng: np.random.Generator,
) -> None:
    """Phase 1. Mutates net.W, net.d, net.v and net.n_train_it."""
    for it in range(1, maxit + 1):
        net.W[:] = f * rng.standard_normal((net.q, net.s))
        net.d[:] = _anchor_biases(x, net.W)
        S = net.activation_matrix(x)

        rank = int(np.linalg.matrix_rank(S))
        if rank < net.s and it < maxit:
            net.n_train_it += 1
            continue

        net.full_rank = rank == net.s
        if not net.full_rank:
            warnings.warn(
                f"Activation matrix still rank-deficient (rank {rank} < {net.s}) "
                f"after {maxit} draws; keeping the last draw with least squares "
                f"output weights",
                RuntimeWarning,
                stacklevel=3,
            )
        net.v[:] = left_divide(S, y) if net.full_rank else lstsq_solve(S, y)
        return


def _refine_with_gradients(
    net: AlgebraicNetwork,
    x: NDArray,
    y: NDArray,
    gradients: NDArray,
    tol: float,
) -> None:
    """Phase 2. Mutates net.W, net.d and net.v one anchor point at a time."""
    act = net.activation
    N = net.input_to_node(x)

    for i in range(net.s):
        w_old = net.W[:, i].copy()
        c_network = (net.v * act.deriv(N[i, :])) @ net.W.T
        c_target = gradients[i]

        w_new = w_old
        if np.max(np.abs(c_network - c_target)) > tol:
            sensitivity = net.v[i] * act.deriv(N[i, i])
            if sensitivity != 0:
                candidate = w_old + (c_target - c_network) / sensitivity
                if np.max(np.abs(candidate)) <= GRADIENT_WEIGHT_BOUND:
                    w_new = candidate

        net.W[:, i] = w_new
        net.d[i] = -(x[i] @ net.W[:, i])
        N[:, i] = net.d[i] + x @ net.W[:, i]

        S = act(N)
        net.v[:] = _output_weights(S, y, net.s)


def _anchor_biases(x: NDArray, W: NDArray) -> NDArray[np.floating[Any]]:
    """d[i] = -<x_i, W[:, i]> for the first s training points."""
    s = W.shape[1]
    return -np.einsum('ij,ji->i', x[:s], W)


def _output_weights(S: NDArray, y: NDArray, s: int) -> NDArray[np.floating[Any]]:
    """v = S \\ y; minimum-norm least squares when S is rank-deficient."""
    if np.linalg.matrix_rank(S) < s:
        return lstsq_solve(S, y)
    return left_divide(S, y)
