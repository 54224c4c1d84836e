"""
Tests for estimator construction and the shared capability interface.
"""

from dataclasses import FrozenInstanceError

import pytest

from pystablefit.core.exceptions import ConfigurationError
from pystablefit.regression import (
    ESTIMATORS,
    LAD_ESTIMATORS,
    LEAST_SQUARES_ESTIMATORS,
    LADDP,
    LADPP,
    LSLdiv,
    LSSVD,
    OLS,
    RLADDP,
    RLADPP,
    RLSSVD,
    RLST,
    RLSTikhonov,
    SlopeEstimator,
)


class TestDefaults:

    @pytest.mark.parametrize("cls", ESTIMATORS)
    def test_default_normalizes_with_intercept(self, cls):
        est = cls()
        assert est.should_normalize
        assert est.should_add_intercept

    @pytest.mark.parametrize("cls", ESTIMATORS)
    def test_satisfies_protocol(self, cls):
        assert isinstance(cls(), SlopeEstimator)

    def test_hyperparameter_defaults(self):
        assert RLSTikhonov().eta == -5.0
        assert RLADPP().eta == -5.0
        assert RLADDP().eta == -5.0
        assert RLSSVD().kappa == 1e5

    def test_rlst_alias(self):
        assert RLST is RLSTikhonov

    def test_names_unique(self):
        names = {cls().name for cls in ESTIMATORS}
        assert len(names) == len(ESTIMATORS)

    def test_closed_set(self):
        assert len(ESTIMATORS) == 9
        assert set(LAD_ESTIMATORS).isdisjoint(LEAST_SQUARES_ESTIMATORS)


class TestLeastSquaresFlags:

    @pytest.mark.parametrize("cls", LEAST_SQUARES_ESTIMATORS)
    def test_normalize_requires_intercept(self, cls):
        with pytest.raises(ConfigurationError, match="must have intercept") as exc_info:
            cls(normalize=True, intercept=False)
        assert exc_info.value.parameter == "intercept"

    @pytest.mark.parametrize("cls", LEAST_SQUARES_ESTIMATORS)
    @pytest.mark.parametrize("intercept", [True, False])
    def test_no_normalization_allowed(self, cls, intercept):
        est = cls(normalize=False, intercept=intercept)
        assert not est.should_normalize
        assert est.should_add_intercept is intercept


class TestLADFlags:

    @pytest.mark.parametrize("cls", LAD_ESTIMATORS)
    @pytest.mark.parametrize("normalize,intercept", [(False, True), (False, False), (True, False)])
    def test_both_flags_required(self, cls, normalize, intercept):
        with pytest.raises(ConfigurationError, match="must both be True"):
            cls(normalize=normalize, intercept=intercept)

    def test_lad_default_constructs(self):
        assert LADPP().name == "lad_pp"
        assert LADDP().name == "lad_dp"


class TestHyperparameters:

    @pytest.mark.parametrize("cls", [RLSTikhonov, RLADPP, RLADDP])
    @pytest.mark.parametrize("eta", [0.0, 1.0, float("nan")])
    def test_eta_must_be_negative(self, cls, eta):
        with pytest.raises(ConfigurationError, match="negative") as exc_info:
            cls(eta=eta)
        assert exc_info.value.parameter == "eta"

    @pytest.mark.parametrize("kappa", [0.0, -1.0])
    def test_kappa_must_be_positive(self, kappa):
        with pytest.raises(ConfigurationError, match="kappa"):
            RLSSVD(kappa=kappa)

    def test_positional_hyperparameter(self):
        assert RLSTikhonov(-3.0).eta == -3.0
        assert RLSSVD(1e8).kappa == 1e8


class TestImmutability:

    @pytest.mark.parametrize("est", [OLS(), LSLdiv(), LSSVD(), RLSSVD(), LADPP()])
    def test_frozen(self, est):
        with pytest.raises(FrozenInstanceError):
            est.normalize = False

    def test_hashable_value_objects(self):
        assert OLS() == OLS()
        assert hash(RLSTikhonov(eta=-4.0)) == hash(RLSTikhonov(eta=-4.0))
        assert RLSTikhonov(eta=-4.0) != RLSTikhonov(eta=-5.0)
