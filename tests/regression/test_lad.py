"""
Tests for least absolute deviations estimators.
"""

import numpy as np
import pytest

from pystablefit.core.compute.tolerances import LAD_COEFFICIENT_BOUND, select_tolerance
from pystablefit.core.exceptions import LinearProgramError
from pystablefit.regression import (
    LAD_ESTIMATORS,
    LADDP,
    LADPP,
    OLS,
    RLADDP,
    RLADPP,
    regress,
)
from pystablefit.regression._normalize import add_intercept
from pystablefit.regression.backends import cpu_lad


@pytest.fixture
def noisy_data(rng):
    """Heavy-ish tailed noise so the LAD solution is unique."""
    n = 40
    X = rng.standard_normal((n, 3))
    y = X @ [0.5, -1.0, 2.0] + rng.laplace(scale=0.3, size=n)
    return X, y


class TestExactRecovery:

    @pytest.mark.parametrize("cls", LAD_ESTIMATORS)
    def test_slopes_on_raw_data(self, cls, well_conditioned_data):
        X, y, beta_true = well_conditioned_data
        est = cls()
        tol = select_tolerance(est.name)
        np.testing.assert_allclose(est.slopes(X, y), beta_true, atol=10 * tol.atol)

    @pytest.mark.parametrize("cls", LAD_ESTIMATORS)
    def test_default_normalized_with_intercept(self, cls, rng):
        X = rng.standard_normal((30, 2)) * [3.0, 0.2] + [10.0, 0.0]
        y = -1.0 + X @ [0.25, 4.0]
        beta = regress(cls(), X, y)
        assert beta.shape == (3,)
        np.testing.assert_allclose(beta, [-1.0, 0.25, 4.0], atol=1e-5)


class TestPrimalDualAgreement:

    def test_lad_slopes(self, noisy_data):
        X, y = noisy_data
        primal = LADPP().slopes(X, y)
        dual = LADDP().slopes(X, y)
        np.testing.assert_allclose(primal, dual, atol=1e-6)

    def test_lad_with_intercept(self, noisy_data):
        X, y = noisy_data
        np.testing.assert_allclose(regress(LADPP(), X, y), regress(LADDP(), X, y), atol=1e-6)

    def test_regularized_lad(self, noisy_data):
        X, y = noisy_data
        primal = RLADPP(eta=-2.0).slopes(X, y)
        dual = RLADDP(eta=-2.0).slopes(X, y)
        np.testing.assert_allclose(primal, dual, atol=1e-6)


class TestLADBehaviour:

    def test_robust_to_outlier(self, rng):
        # LAD with its own intercept column; the normalized path centres on
        # the mean, which the outlier shifts
        n = 40
        x = rng.standard_normal(n)
        x[0] = 3.0
        y = 1.0 + 2.0 * x + 0.01 * rng.standard_normal(n)
        y[0] += 100.0

        lad = LADPP().slopes(add_intercept(x), y)
        ols = regress(OLS(), x, y)
        np.testing.assert_allclose(lad, [1.0, 2.0], atol=0.05)
        assert abs(ols[1] - 2.0) > 1.0

    def test_minimizes_absolute_deviations(self, noisy_data):
        X, y = noisy_data
        lad = LADDP().slopes(X, y)
        ols = regress(OLS(normalize=False, intercept=False), X, y)
        assert np.abs(y - X @ lad).sum() <= np.abs(y - X @ ols).sum() + 1e-8

    def test_primal_coefficients_bounded(self, rng):
        x = rng.standard_normal((20, 1))
        y = 1000.0 * x[:, 0]
        beta = LADPP().slopes(x, y)
        assert beta[0] == pytest.approx(LAD_COEFFICIENT_BOUND)

    @pytest.mark.parametrize("kernel", [cpu_lad.rlad_primal_slopes, cpu_lad.rlad_dual_slopes])
    def test_strong_penalty_zeroes_coefficients(self, kernel, noisy_data):
        # penalty above max_j sum_i |x_ij|, so beta = 0 is optimal
        X, y = noisy_data
        beta = kernel(X, y, 1.0)
        np.testing.assert_allclose(beta, 0.0, atol=1e-8)

    def test_penalty_shrinks(self, noisy_data):
        X, y = noisy_data
        weak = RLADPP(eta=-6.0).slopes(X, y)
        strong = RLADPP(eta=-0.5).slopes(X, y)
        assert np.abs(strong).sum() < np.abs(weak).sum()


class TestMultiResponse:

    @pytest.mark.parametrize("est", [LADPP(), LADDP(), RLADPP(), RLADDP()])
    def test_columns_match_single_fits(self, est, noisy_data, rng):
        X, y = noisy_data
        y2 = X @ [1.0, 0.0, -1.0] + rng.laplace(size=len(y))
        Y = np.column_stack([y, y2])
        beta = regress(est, X, Y)
        assert beta.shape == (4, 2)
        np.testing.assert_allclose(beta[:, 0], regress(est, X, y), atol=1e-8)
        np.testing.assert_allclose(beta[:, 1], regress(est, X, y2), atol=1e-8)


class TestSolverFailure:

    @pytest.mark.parametrize("est", [LADPP(), LADDP(), RLADPP(), RLADDP()])
    def test_failure_propagates(self, est, monkeypatch, noisy_data):
        def failing_solve_lp(*args, **kwargs):
            raise LinearProgramError("Problem is infeasible", status=2,
                                     solver_message="The problem is infeasible.")

        monkeypatch.setattr(cpu_lad, "solve_lp", failing_solve_lp)
        X, y = noisy_data
        with pytest.raises(LinearProgramError) as exc_info:
            regress(est, X, y)
        assert exc_info.value.is_infeasible
        assert exc_info.value.solver_message == "The problem is infeasible."
