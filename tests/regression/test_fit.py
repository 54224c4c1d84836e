"""
Tests for regression fit().

Tests the complete pipeline: Design construction, dispatch, and
solution properties.
"""

import warnings

import pytest
import numpy as np

from pystablefit.regression import (
    fit,
    regress,
    LADDP,
    OLS,
    RLSSVD,
    RegressionDesign,
)
from pystablefit.regression.solution import RegressionSolution
from pystablefit.core.exceptions import DimensionError, ValidationError


class TestFitBasic:
    """Basic fit() functionality tests."""

    def test_returns_solution(self, intercept_data):
        X, y, _ = intercept_data
        result = fit(OLS(), X, y)
        assert isinstance(result, RegressionSolution)
        assert result.coefficients.shape == (3,)

    def test_coefficients_match_regress(self, intercept_data):
        X, y, _ = intercept_data
        for est in (OLS(), RLSSVD(kappa=1e6), LADDP()):
            np.testing.assert_array_equal(fit(est, X, y).coefficients, regress(est, X, y))

    def test_fitted_plus_residuals_is_y(self, intercept_data):
        X, y, _ = intercept_data
        result = fit(RLSSVD(), X, y)
        np.testing.assert_allclose(result.fitted_values + result.residuals, y)

    def test_residuals_sum_to_near_zero_with_intercept(self, intercept_data):
        """Least squares with an intercept leaves zero-mean residuals."""
        X, y, _ = intercept_data
        result = fit(OLS(), X, y)
        assert abs(result.residuals.sum()) < 1e-8


class TestFitProperties:

    def test_intercept_and_slopes(self, intercept_data):
        X, y, beta_true = intercept_data
        result = fit(OLS(), X, y)
        assert result.intercept == pytest.approx(beta_true[0], abs=0.01)
        np.testing.assert_allclose(result.slopes, beta_true[1:], atol=0.01)

    def test_no_intercept(self, well_conditioned_data):
        X, y, beta_true = well_conditioned_data
        result = fit(OLS(normalize=False, intercept=False), X, y)
        assert result.intercept is None
        np.testing.assert_allclose(result.slopes, beta_true, atol=1e-10)

    def test_rss_and_sad(self, intercept_data):
        X, y, _ = intercept_data
        result = fit(LADDP(), X, y)
        assert result.rss == pytest.approx(np.sum(result.residuals ** 2))
        assert result.sad == pytest.approx(np.sum(np.abs(result.residuals)))

    def test_lad_has_smaller_sad_than_ols(self, intercept_data):
        X, y, _ = intercept_data
        assert fit(LADDP(), X, y).sad <= fit(OLS(), X, y).sad + 1e-8

    def test_multi_response(self, intercept_data):
        X, y, _ = intercept_data
        Y = np.column_stack([y, -2 * y])
        result = fit(OLS(), X, Y)
        assert result.coefficients.shape == (3, 2)
        assert result.fitted_values.shape == (80, 2)
        assert result.rss.shape == (2,)
        assert result.intercept.shape == (2,)
        assert result.info['m'] == 2

    def test_predict_on_training_data(self, intercept_data):
        X, y, _ = intercept_data
        result = fit(RLSSVD(), X, y)
        np.testing.assert_allclose(result.predict(X), result.fitted_values)

    def test_predict_without_intercept(self, well_conditioned_data):
        X, y, _ = well_conditioned_data
        result = fit(OLS(normalize=False, intercept=False), X, y)
        np.testing.assert_allclose(result.predict(X[:5]), y[:5], atol=1e-10)

    def test_predict_wrong_columns(self, intercept_data):
        X, y, _ = intercept_data
        result = fit(OLS(), X, y)
        with pytest.raises(DimensionError, match="wrong input dimension"):
            result.predict(np.ones((4, 3)))
        with pytest.raises(DimensionError):
            result.predict(np.ones(2))

    def test_predict_non_numeric(self, intercept_data):
        X, y, _ = intercept_data
        result = fit(OLS(), X, y)
        with pytest.raises(ValidationError):
            result.predict([["a", "b"]])

    def test_predict_vector_for_single_regressor(self, rng):
        x = rng.standard_normal(20)
        result = fit(OLS(), x, 1.0 + 2.0 * x)
        np.testing.assert_allclose(result.predict([0.0, 1.0]), [1.0, 3.0], atol=1e-10)

    def test_info(self, intercept_data):
        X, y, _ = intercept_data
        est = RLSSVD(kappa=1e4)
        result = fit(est, X, y)
        assert result.info['method'] == 'rls_svd'
        assert result.info['estimator'] is est
        assert result.info['normalize'] is True
        assert result.info['intercept'] is True
        assert (result.info['n'], result.info['k']) == (80, 2)

    def test_backend_name(self, intercept_data):
        X, y, _ = intercept_data
        assert fit(OLS(), X, y).backend_name == 'cpu_ols'
        assert fit(LADDP(), X, y).backend_name == 'cpu_lad_dp'

    def test_timing(self, intercept_data):
        X, y, _ = intercept_data
        timing = fit(OLS(), X, y).timing
        assert 'coefficients' in timing
        assert 'residuals' in timing
        assert timing['total_seconds'] >= 0


class TestFitDiagnostics:

    def test_no_warning_when_overdetermined(self, intercept_data):
        X, y, _ = intercept_data
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            result = fit(OLS(), X, y)
        assert result.warnings == ()

    def test_warns_when_not_overdetermined(self):
        X = np.array([[1.0, 0.0], [0.0, 1.0], [1.0, 2.0]])
        y = np.array([1.0, 2.0, 4.0])
        with pytest.warns(RuntimeWarning, match="not overdetermined"):
            result = fit(OLS(), X, y)
        assert len(result.warnings) == 1
        assert "3 observations for 3 coefficients" in result.warnings[0]

    def test_summary(self, intercept_data):
        X, y, _ = intercept_data
        text = fit(RLSSVD(), X, y).summary()
        assert "Stable regression" in text
        assert "Method: rls_svd" in text
        assert "(Intercept)" in text
        assert "Residual sum of squares" in text
        assert "Backend: cpu_rls_svd" in text

    def test_summary_multi_response(self, intercept_data):
        X, y, _ = intercept_data
        text = fit(OLS(normalize=False, intercept=False), X, np.column_stack([y, y])).summary()
        assert "(Intercept)" not in text
        assert "y1" in text

    def test_repr(self, intercept_data):
        X, y, _ = intercept_data
        assert repr(fit(OLS(), X, y)) == "RegressionSolution(method='ols', n=80, k=2, m=1)"


class TestFitValidation:

    def test_unknown_estimator(self, intercept_data):
        X, y, _ = intercept_data
        with pytest.raises(ValidationError, match="Unknown estimator"):
            fit(object(), X, y)

    def test_dimension_mismatch(self):
        with pytest.raises(DimensionError):
            fit(OLS(), np.ones((10, 2)), np.ones(9))

    def test_too_few_samples(self):
        with pytest.raises(ValidationError, match="at least 2"):
            fit(OLS(), np.ones((1, 1)), np.ones(1))

    def test_non_numeric(self):
        with pytest.raises(ValidationError):
            fit(OLS(), [["a", "b"], ["c", "d"]], [1.0, 2.0])


class TestRegressionDesign:

    def test_from_arrays(self, intercept_data):
        X, y, _ = intercept_data
        design = RegressionDesign.from_arrays(X, y)
        assert (design.n, design.k, design.m) == (80, 2, 1)
        assert not design.multi_response

    def test_vector_x_is_single_column(self):
        design = RegressionDesign.from_arrays([1.0, 2.0, 3.0], [1.0, 2.0, 3.0])
        assert design.X.shape == (3, 1)

    def test_matrix_y(self):
        design = RegressionDesign.from_arrays(np.ones((4, 2)), np.ones((4, 3)))
        assert design.m == 3
        assert design.multi_response

    def test_inputs_copied(self):
        X = np.ones((4, 2))
        design = RegressionDesign.from_arrays(X, np.ones(4))
        X[0, 0] = 5.0
        assert design.X[0, 0] == 1.0
