import numpy as np
import pytest
from numpy.testing import assert_allclose
from sklearn.base import clone
from sklearn.exceptions import NotFittedError

from scatsmooth import SmootherRegressor, SmootherRegistry
from scatsmooth.exceptions import DimensionMismatchError, InvalidParameterError, SmootherNotFoundError
from scatsmooth.registry import SmootherDescriptor
from scatsmooth.smooth import constant_mean


@pytest.fixture
def linear_data():
    x = np.linspace(0.0, 1.0, 21)
    return x, 2.0 * x + 1.0


def test_fit_predict_score(linear_data):
    x, y = linear_data
    model = SmootherRegressor("linear").fit(x, y)
    assert model.n_features_in_ == 1
    assert model.parameters_ == {}
    assert_allclose(model.predict([0.0, 0.5, 2.0]), [1.0, 2.0, 5.0])
    assert_allclose(model.score(x, y), 1.0)


def test_accepts_column_vector(linear_data):
    x, y = linear_data
    model = SmootherRegressor("polynomial", {"degree": 1}).fit(x[:, None], y)
    assert model.parameters_ == {"degree": 1, "lambda": 0.0}
    assert_allclose(model.predict(np.array([[0.25], [0.75]])), [1.5, 2.5])


def test_rejects_multiple_features(linear_data):
    x, y = linear_data
    with pytest.raises(DimensionMismatchError, match="X must have exactly 1 feature, got 2"):
        SmootherRegressor("linear").fit(np.column_stack([x, x]), y)


def test_rejects_mismatched_target(linear_data):
    x, y = linear_data
    with pytest.raises(DimensionMismatchError, match="y must be a 1D array with the same size as X."):
        SmootherRegressor("linear").fit(x, y[:-1])


def test_predict_before_fit():
    with pytest.raises(NotFittedError):
        SmootherRegressor().predict([0.5])


def test_few_samples_warns():
    with pytest.warns(UserWarning, match="less than or equal to 3"):
        SmootherRegressor("mean").fit([0.1, 0.2, 0.3], [1.0, 2.0, 3.0])


def test_unknown_smoother(linear_data):
    x, y = linear_data
    with pytest.raises(SmootherNotFoundError):
        SmootherRegressor("spline").fit(x, y)


def test_invalid_parameters(linear_data):
    x, y = linear_data
    with pytest.raises(InvalidParameterError, match="Unknown hyperparameter"):
        SmootherRegressor("running-mean", {"window": 3}).fit(x, y)


def test_custom_registry(linear_data):
    x, y = linear_data
    registry = SmootherRegistry({"flat": SmootherDescriptor("Flat", constant_mean)})
    model = SmootherRegressor("flat", registry=registry).fit(x, y)
    assert_allclose(model.predict([0.0, 1.0]), [2.0, 2.0])


def test_get_params_and_clone():
    model = SmootherRegressor("gaussian-kernel", {"lambda": 0.02})
    assert model.get_params() == {"smoother": "gaussian-kernel", "parameters": {"lambda": 0.02}, "registry": None}
    cloned = clone(model)
    assert cloned is not model
    assert cloned.get_params()["parameters"] == {"lambda": 0.02}
    model.set_params(smoother="loess", parameters={"k": 5})
    assert model.smoother == "loess"


def test_refit_replaces_state(linear_data):
    x, y = linear_data
    model = SmootherRegressor("mean")
    model.fit(x, y)
    model.fit(x, -y)
    assert_allclose(model.predict([0.5]), [-2.0])
