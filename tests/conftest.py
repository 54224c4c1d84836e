"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def well_conditioned_data(rng):
    """Noiseless y = Xβ with a well-conditioned X and no intercept."""
    n = 60
    X = rng.standard_normal((n, 3))
    beta_true = np.array([1.0, -2.0, 0.5])
    y = X @ beta_true
    return X, y, beta_true


@pytest.fixture
def intercept_data(rng):
    """y = 3 + Xβ plus small noise, with non-constant regressors."""
    n = 80
    X = rng.standard_normal((n, 2)) * [2.0, 0.5] + [1.0, -4.0]
    beta_true = np.array([3.0, 1.5, -0.75])
    y = beta_true[0] + X @ beta_true[1:] + rng.standard_normal(n) * 0.01
    return X, y, beta_true


@pytest.fixture
def collinear_data(rng):
    """Dataset with perfect collinearity."""
    n = 50
    x1 = rng.standard_normal(n)
    x2 = rng.standard_normal(n)
    x3 = x1 + x2
    X = np.column_stack([x1, x2, x3])
    y = x1 + 2 * x2 + rng.standard_normal(n) * 0.01
    return X, y
