"""
Regression solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pystablefit.core.exceptions import DimensionError
from pystablefit.core.result import Result
from pystablefit.core.validation import check_array

if TYPE_CHECKING:
    from pystablefit.regression.design import RegressionDesign


@dataclass(frozen=True)
class RegressionParams:
    """
    Parameter payload for a stable regression.

    This is the immutable data computed by the dispatcher.
    """
    coefficients: NDArray[np.floating[Any]]
    fitted_values: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    has_intercept: bool


@dataclass
class RegressionSolution:
    """
    User-facing regression results.

    Wraps the Result envelope and provides accessors for coefficients,
    residual diagnostics and a printable summary.
    """
    _result: Result[RegressionParams]
    _design: 'RegressionDesign'

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """(k [+1],) or (k [+1], m); intercept first when present."""
        return self._result.params.coefficients

    @property
    def intercept(self) -> float | NDArray[np.floating[Any]] | None:
        if not self._result.params.has_intercept:
            return None
        return self.coefficients[0]

    @property
    def slopes(self) -> NDArray[np.floating[Any]]:
        if self._result.params.has_intercept:
            return self.coefficients[1:]
        return self.coefficients

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    @property
    def rss(self) -> float | NDArray[np.floating[Any]]:
        """Residual sum of squares, per response."""
        return np.sum(self.residuals ** 2, axis=0)

    @property
    def sad(self) -> float | NDArray[np.floating[Any]]:
        """Sum of absolute deviations, per response (the LAD objective)."""
        return np.sum(np.abs(self.residuals), axis=0)

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def predict(self, X: NDArray) -> NDArray[np.floating[Any]]:
        """
        Predictions for new rows of X (same columns as the fitted X).

        Raises:
            ValidationError: If X is non-numeric
            DimensionError: If X does not have the fitted number of columns
        """
        X = check_array(X, 'X')
        k = self._design.k
        if X.ndim == 1 and k == 1:
            X = X.reshape(-1, 1)
        if X.ndim != 2 or X.shape[1] != k:
            raise DimensionError(
                f"X: wrong input dimension, expected (N, {k}), got {X.shape}"
            )
        if self._result.params.has_intercept:
            return self.intercept + X @ self.slopes
        return X @ self.coefficients

    def summary(self) -> str:
        """Plain-text summary of the fit."""
        design = self._design
        coef = self.coefficients.reshape(self.coefficients.shape[0], -1)
        names = [f"x{i}" for i in range(design.k)]
        if self._result.params.has_intercept:
            names = ["(Intercept)"] + names

        lines = [
            "Stable regression",
            "=" * 60,
            f"Method: {self.info.get('method')}    "
            f"normalize={self.info.get('normalize')}    "
            f"intercept={self.info.get('intercept')}",
            f"Observations: {design.n}    Regressors: {design.k}    "
            f"Responses: {design.m}",
            "",
            "Coefficients:",
        ]
        header = f"{'':<14}" + "".join(f"{f'y{j}':>14}" for j in range(coef.shape[1]))
        lines.append(header)
        for name, row in zip(names, coef):
            lines.append(f"{name:<14}" + "".join(f"{b:>14.6g}" for b in row))

        rss = np.atleast_1d(self.rss)
        sad = np.atleast_1d(self.sad)
        lines.append("")
        lines.append("Residual sum of squares: " + ", ".join(f"{r:.6g}" for r in rss))
        lines.append("Sum of absolute deviations: " + ", ".join(f"{s:.6g}" for s in sad))
        lines.append(f"Backend: {self.backend_name}")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"RegressionSolution(method={self.info.get('method')!r}, "
            f"n={self._design.n}, k={self._design.k}, m={self._design.m})"
        )
