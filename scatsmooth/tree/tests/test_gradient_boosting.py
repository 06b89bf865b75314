import numpy as np
import pytest
from numpy.testing import assert_allclose

from scatsmooth.exceptions import InvalidParameterError
from scatsmooth.tree import GradientBooster, fit_booster, fit_tree, gradient_boosting


@pytest.fixture
def noisy_sine():
    rng = np.random.default_rng(7)
    x = np.sort(rng.uniform(0.0, 1.0, 60))
    return x, np.sin(2.0 * np.pi * x) + rng.normal(0.0, 0.1, 60)


def test_zero_trees_is_mean(noisy_sine):
    x, y = noisy_sine
    booster = fit_booster(x, y, n_trees=0, learning_rate=0.1, tree_depth=2)
    assert isinstance(booster, GradientBooster)
    assert booster.n_stages == 0
    assert_allclose(booster.intercept, y.mean())
    assert_allclose(booster.predict([0.0, 0.5, 1.0]), y.mean())


@pytest.mark.parametrize("n_trees", [1, 2, 5, 20])
def test_fits_exactly_n_trees(noisy_sine, n_trees):
    x, y = noisy_sine
    booster = fit_booster(x, y, n_trees=n_trees, learning_rate=0.1, tree_depth=2)
    assert len(booster.trees) == n_trees
    assert booster.n_stages == n_trees
    assert all(tree.max_depth == 2 for tree in booster.trees)


def test_single_full_step_recovers_step_function():
    x = np.linspace(0.0, 1.0, 10)
    y = np.where(x > 0.5, 3.0, 1.0)
    booster = fit_booster(x, y, n_trees=1, learning_rate=1.0, tree_depth=1)
    assert_allclose(booster.predict(x), y, atol=1e-12)


def test_training_error_never_increases(noisy_sine):
    x, y = noisy_sine
    errors = [np.mean((fit_booster(x, y, m, 0.3, 1).predict(x) - y) ** 2) for m in range(12)]
    assert np.all(np.diff(errors) <= 1e-12)
    assert errors[-1] < errors[0]


def test_prediction_is_shrunk_sum_of_trees(noisy_sine):
    x, y = noisy_sine
    booster = fit_booster(x, y, n_trees=4, learning_rate=0.25, tree_depth=2)
    query = np.linspace(-0.2, 1.2, 15)
    expected = booster.intercept + 0.25 * sum(tree.predict(query) for tree in booster.trees)
    assert_allclose(booster.predict(query), expected)


def test_first_tree_fits_centered_response(noisy_sine):
    x, y = noisy_sine
    booster = fit_booster(x, y, n_trees=1, learning_rate=0.5, tree_depth=2)
    assert booster.trees[0] == fit_tree(x, y - y.mean(), 2)


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"n_trees": -1, "learning_rate": 0.1, "tree_depth": 1}, "n_trees"),
        ({"n_trees": 1.5, "learning_rate": 0.1, "tree_depth": 1}, "n_trees"),
        ({"n_trees": 3, "learning_rate": 0.0, "tree_depth": 1}, "learning_rate"),
        ({"n_trees": 3, "learning_rate": -0.5, "tree_depth": 1}, "learning_rate"),
        ({"n_trees": 3, "learning_rate": 0.1, "tree_depth": -1}, "tree_depth"),
    ],
)
def test_invalid_arguments(kwargs, message):
    with pytest.raises(InvalidParameterError, match=message):
        fit_booster([0.0, 1.0], [0.0, 1.0], **kwargs)


def test_gradient_boosting_factory(noisy_sine):
    x, y = noisy_sine
    parameters = {"n_trees": 10, "learning_rate": 0.2, "tree_depth": 2}
    predict = gradient_boosting(parameters)(x, y)
    booster = fit_booster(x, y, 10, 0.2, 2)
    assert_allclose(predict(x), booster.predict(x))
    with pytest.raises(InvalidParameterError, match="Missing hyperparameter 'tree_depth'."):
        gradient_boosting({"n_trees": 10, "learning_rate": 0.2})
