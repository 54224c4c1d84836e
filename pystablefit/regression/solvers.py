"""
Solver dispatch for stable regression.

This module provides regress() (coefficients only) and fit() (full
solution with diagnostics). Both validate inputs at the boundary and
then follow one of four execution paths chosen by the estimator's
(should_normalize, should_add_intercept) flags:

    neither             slopes on X directly
    intercept only      slopes on [1 X]
    normalize only      slopes on standardized X, y, then rescaled
    normalize+intercept as above, plus an explicit intercept μy - μx'β
"""

import warnings
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pystablefit.core.exceptions import ValidationError
from pystablefit.core.result import Result
from pystablefit.core.compute.timing import Timer
from pystablefit.regression._normalize import add_intercept, normalize
from pystablefit.regression.design import RegressionDesign
from pystablefit.regression.estimators import ESTIMATORS, Estimator
from pystablefit.regression.solution import RegressionParams, RegressionSolution


def regress(estimator: Estimator, X: ArrayLike, y: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Compute regression coefficients in the caller's original units.

    Args:
        estimator: One of the estimator variants (OLS, LSLdiv, LSSVD,
            RLSTikhonov, RLSSVD, LADPP, LADDP, RLADPP, RLADDP)
        X: Design matrix (n x k), without an intercept column
        y: Response vector (n,) or matrix (n x m)

    Returns:
        Coefficients of shape (k [+1],) for a vector y or (k [+1], m)
        for a matrix y. When the estimator adds an intercept it is the
        first row.

    Raises:
        ValidationError: If inputs are invalid or estimator is unknown
        DimensionError: If X and y have inconsistent dimensions
        SingularMatrixError: LSSVD with a zero singular value, LSLdiv
            with a singular square system
        LinearProgramError: If a LAD program is infeasible or unbounded

    Example:
        >>> X = np.array([[1, 0], [0, 1], [1, 1]])
        >>> regress(OLS(normalize=False, intercept=False), X, [1, 2, 3])
        array([1., 2.])
    """
    _check_estimator(estimator)
    design = RegressionDesign.from_arrays(X, y)
    return _dispatch(estimator, design.X, design.y)


def fit(estimator: Estimator, X: ArrayLike, y: ArrayLike) -> RegressionSolution:
    """
    Fit a stable regression and return the full solution.

    Same computation as regress(), wrapped with fitted values,
    residuals, timing and diagnostics.

    Returns:
        RegressionSolution

    Example:
        >>> result = fit(RLSSVD(kappa=1e6), X, y)
        >>> result.coefficients
        >>> print(result.summary())
    """
    _check_estimator(estimator)

    timer = Timer()
    timer.start()

    design = RegressionDesign.from_arrays(X, y)

    n_params = design.k + int(estimator.should_add_intercept)
    messages: list[str] = []
    if design.n <= n_params:
        msg = (
            f"{design.n} observations for {n_params} coefficients: "
            f"the regression is not overdetermined and coefficients may not be unique"
        )
        warnings.warn(msg, RuntimeWarning, stacklevel=2)
        messages.append(msg)

    with timer.section('coefficients'):
        coefficients = _dispatch(estimator, design.X, design.y)

    with timer.section('residuals'):
        if estimator.should_add_intercept:
            fitted = coefficients[0] + design.X @ coefficients[1:]
        else:
            fitted = design.X @ coefficients
        residuals = design.y - fitted

    timer.stop()

    params = RegressionParams(
        coefficients=coefficients,
        fitted_values=fitted,
        residuals=residuals,
        has_intercept=estimator.should_add_intercept,
    )
    info: dict[str, Any] = {
        'method': estimator.name,
        'estimator': estimator,
        'normalize': estimator.should_normalize,
        'intercept': estimator.should_add_intercept,
        'n': design.n,
        'k': design.k,
        'm': design.m,
    }
    result = Result(
        params=params,
        info=info,
        timing=timer.result(),
        backend_name=f'cpu_{estimator.name}',
        warnings=tuple(messages),
    )
    return RegressionSolution(_result=result, _design=design)


def _check_estimator(estimator: Any) -> None:
    if not isinstance(estimator, ESTIMATORS):
        known = ", ".join(cls.__name__ for cls in ESTIMATORS)
        raise ValidationError(
            f"Unknown estimator {type(estimator).__name__!r}; expected one of: {known}"
        )


def _dispatch(estimator: Estimator, X: NDArray, y: NDArray) -> NDArray[np.floating[Any]]:
    norm = estimator.should_normalize
    intercept = estimator.should_add_intercept
    if norm and intercept:
        return _reg_norm_int(estimator, X, y)
    if intercept:
        return _reg_nonorm_int(estimator, X, y)
    if norm:
        return _reg_norm_noint(estimator, X, y)
    return _reg_nonorm_noint(estimator, X, y)


def _reg_nonorm_noint(estimator: Estimator, X: NDArray, y: NDArray) -> NDArray:
    return estimator.slopes(X, y)


def _reg_nonorm_int(estimator: Estimator, X: NDArray, y: NDArray) -> NDArray:
    return estimator.slopes(add_intercept(X), y)


def _reg_norm_noint(estimator: Estimator, X: NDArray, y: NDArray) -> NDArray:
    xn, _, sigma_x = normalize(X)
    yn, _, sigma_y = normalize(y)

    beta = estimator.slopes(xn, yn)
    return _unnormalize(beta, sigma_x, sigma_y)


def _reg_norm_int(estimator: Estimator, X: NDArray, y: NDArray) -> NDArray:
    xn, mu_x, sigma_x = normalize(X)
    yn, mu_y, sigma_y = normalize(y)

    beta1 = _unnormalize(estimator.slopes(xn, yn), sigma_x, sigma_y)
    beta0 = mu_y - mu_x @ beta1

    if beta1.ndim == 1:
        return np.concatenate([[beta0], beta1])
    return np.vstack([beta0[None, :], beta1])


def _unnormalize(beta: NDArray, sigma_x: NDArray, sigma_y: Any) -> NDArray:
    """β_ij *= σy_j / σx_i"""
    if beta.ndim == 1:
        return beta * (sigma_y / sigma_x)
    return beta * (np.asarray(sigma_y)[None, :] / sigma_x[:, None])
