import dataclasses

import numpy as np
import pytest
from numpy.testing import assert_allclose

from scatsmooth.exceptions import DimensionMismatchError, InvalidParameterError
from scatsmooth.tree import Internal, Leaf, RegressionTree, fit_tree, regression_tree


@pytest.fixture
def step_data():
    x = np.linspace(0.0, 1.0, 10)
    return x, np.where(x > 0.5, 2.0, -1.0)


def test_depth_zero_is_mean():
    tree = fit_tree([0.1, 0.5, 0.9], [1.0, 2.0, 6.0], 0)
    assert isinstance(tree, RegressionTree)
    assert tree.root == Leaf(3.0)
    assert_allclose(tree.predict([-10.0, 0.5, 10.0]), 3.0)


def test_recovers_step(step_data):
    x, y = step_data
    tree = fit_tree(x, y, 1)
    assert isinstance(tree.root, Internal)
    assert_allclose(tree.root.threshold, (x[4] + x[5]) / 2.0)
    assert tree.root.left == Leaf(-1.0)
    assert tree.root.right == Leaf(2.0)
    assert_allclose(tree.predict([0.0, 0.4, 0.6, 1.0]), [-1.0, -1.0, 2.0, 2.0])


def test_ties_pick_lowest_threshold():
    tree = fit_tree([0.0, 1.0, 2.0, 3.0], [0.0, 1.0, 0.0, 1.0], 1)
    assert tree.root.threshold == 0.5
    assert tree.root.left == Leaf(0.0)
    assert_allclose(tree.root.right.value, 2.0 / 3.0)


def test_mirrored_ties_pick_lowest_threshold():
    x = np.arange(8.0)
    y = np.array([0.99, 2.31, 0.66, -1.65, -1.65, 0.66, 2.31, 0.99])
    # splits after index 2 and after index 4 have the same cost
    tree = fit_tree(x, y, 1)
    assert tree.root.threshold == 2.5
    assert_allclose(tree.root.left.value, 1.32)


def _brute_force_split(x, y):
    costs = np.array([np.var(y[:i]) * i + np.var(y[i:]) * (y.size - i) for i in range(1, y.size)])
    best = np.flatnonzero(costs <= costs.min() + 1e-10 * np.sum((y - y.mean()) ** 2))[0] + 1
    return (x[best - 1] + x[best]) / 2.0


def test_random_mirrored_ties_pick_lowest_threshold():
    rng = np.random.default_rng(11)
    x = np.linspace(0.0, 1.0, 8)
    for _ in range(300):
        half = np.round(rng.uniform(-3.0, 3.0, 4), 2)
        y = np.concatenate([half, half[::-1]])
        tree = fit_tree(x, y, 1)
        assert_allclose(tree.root.threshold, _brute_force_split(x, y))


def test_query_on_threshold_goes_left():
    tree = fit_tree([0.0, 1.0, 2.0, 3.0], [0.0, 1.0, 0.0, 1.0], 1)
    assert_allclose(tree.predict([0.5, 0.5 + 1e-12]), [0.0, 2.0 / 3.0])


def test_depth_is_bounded():
    rng = np.random.default_rng(42)
    x = rng.uniform(0.0, 1.0, 50)
    y = np.sin(6.0 * x) + rng.normal(0.0, 0.2, 50)
    for max_depth in range(5):
        tree = fit_tree(x, y, max_depth)
        assert tree.max_depth == max_depth
        assert tree.depth <= max_depth
        assert tree.n_leaves <= 2**max_depth
        assert np.unique(tree.predict(np.linspace(0.0, 1.0, 200))).size <= 2**max_depth


def test_deep_tree_interpolates_training_data():
    x = np.array([0.3, 0.1, 0.7, 0.5, 0.9, 0.2])
    y = np.array([4.0, -1.0, 2.5, 0.0, 7.0, 3.0])
    tree = fit_tree(x, y, 10)
    assert_allclose(tree.predict(x), y)
    assert tree.n_leaves == 6


def test_constant_x_gives_single_leaf():
    tree = fit_tree([0.5, 0.5, 0.5], [1.0, 2.0, 3.0], 3)
    assert tree.root == Leaf(2.0)
    assert tree.depth == 0


def test_repeated_x_are_never_separated():
    x = np.array([0.0, 0.0, 1.0, 1.0])
    y = np.array([0.0, 10.0, 0.0, 10.0])
    tree = fit_tree(x, y, 3)
    assert isinstance(tree.root, Internal)
    assert tree.root.threshold == 0.5
    assert tree.root.left == Leaf(5.0)
    assert tree.root.right == Leaf(5.0)


def test_fit_is_order_invariant(step_data):
    x, y = step_data
    order = np.random.default_rng(0).permutation(x.size)
    assert fit_tree(x[order], y[order], 2) == fit_tree(x, y, 2)


@pytest.mark.parametrize("max_depth", [-1, 1.5, "2"])
def test_invalid_depth(max_depth):
    with pytest.raises(InvalidParameterError, match="max_depth"):
        fit_tree([0.0, 1.0], [0.0, 1.0], max_depth)


def test_empty_data():
    with pytest.raises(DimensionMismatchError):
        fit_tree([], [], 2)


def test_nodes_are_immutable():
    tree = fit_tree([0.0, 1.0], [0.0, 1.0], 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        tree.root.threshold = 2.0
    with pytest.raises(dataclasses.FrozenInstanceError):
        tree.root.left.value = 2.0
    with pytest.raises(dataclasses.FrozenInstanceError):
        tree.root = Leaf(0.0)


def test_regression_tree_factory(step_data):
    x, y = step_data
    predict = regression_tree({"max_depth": 1})(x, y)
    assert_allclose(predict([0.2, 0.8]), [-1.0, 2.0])
    with pytest.raises(InvalidParameterError, match="Missing hyperparameter 'max_depth'."):
        regression_tree({})
