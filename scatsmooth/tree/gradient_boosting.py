"""Gradient boosting of shallow regression trees under squared error loss.

Algorithm
---------
1. ``F_0(x) = mean(y)``
2. for m = 1, ..., M:
   a. residuals ``r_i = y_i - F_{m-1}(x_i)``
   b. fit a regression tree ``h_m`` to ``(x, r)``
   c. ``F_m(x) = F_{m-1}(x) + eta * h_m(x)``
3. predict with ``F_M``

With squared error the negative gradient is the residual, so each stage
simply fits what the ensemble has not explained yet.
"""

# Authors: Ching-Chuan Chen
# SPDX-License-Identifier: MIT

import logging
from dataclasses import dataclass
from typing import Callable, Mapping, Tuple

import numpy as np

from scatsmooth.tree.regression_tree import RegressionTree, fit_tree
from scatsmooth.utils.statistics import mean
from scatsmooth.utils.validation import check_float_parameter, check_int_parameter, check_query, check_xy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GradientBooster:
    """A fitted additive ensemble ``intercept + learning_rate * sum(trees)``.

    Attributes
    ----------
    intercept : float
        Mean of the training responses.
    trees : tuple of RegressionTree
        One tree per boosting stage, in fitting order.
    learning_rate : float
        Shrinkage applied to every tree's contribution.
    """

    intercept: float
    trees: Tuple[RegressionTree, ...]
    learning_rate: float

    def predict(self, query_xs) -> np.ndarray:
        query_xs = check_query(query_xs)
        total = np.zeros(query_xs.shape, dtype=np.float64)
        for tree in self.trees:
            total += tree.predict(query_xs)
        return self.intercept + self.learning_rate * total

    @property
    def n_stages(self) -> int:
        return len(self.trees)


def fit_booster(xs, ys, n_trees: int, learning_rate: float, tree_depth: int) -> GradientBooster:
    """Fit `n_trees` boosting stages of depth-`tree_depth` trees.

    Parameters
    ----------
    xs, ys : array-like of shape (n,)
        Training data.
    n_trees : int
        Number of boosting stages, ``>= 0``. Exactly this many trees are fit;
        ``n_trees=0`` reduces to the constant-mean predictor.
    learning_rate : float
        Shrinkage of every stage, ``> 0``.
    tree_depth : int
        Depth limit of each tree, ``>= 0``.

    Returns
    -------
    GradientBooster
    """
    n_trees = check_int_parameter({"n_trees": n_trees}, "n_trees", minimum=0)
    learning_rate = check_float_parameter({"learning_rate": learning_rate}, "learning_rate", minimum=0.0, exclusive=True)
    tree_depth = check_int_parameter({"tree_depth": tree_depth}, "tree_depth", minimum=0)
    xs, ys = check_xy(xs, ys, min_samples=1)

    intercept = mean(ys)
    residuals = ys - intercept
    trees = []
    for _ in range(n_trees):
        tree = fit_tree(xs, residuals, tree_depth)
        trees.append(tree)
        residuals = residuals - learning_rate * tree.predict(xs)

    logger.debug(
        "Fitted gradient booster: n_samples=%d, n_trees=%d, learning_rate=%g, tree_depth=%d, train_mse=%g",
        xs.size,
        n_trees,
        learning_rate,
        tree_depth,
        float(np.mean(residuals**2)),
    )
    return GradientBooster(intercept=intercept, trees=tuple(trees), learning_rate=learning_rate)


def gradient_boosting(parameters: Mapping[str, float]) -> Callable:
    """Smoother factory over ``{"n_trees", "learning_rate", "tree_depth"}``."""
    n_trees = check_int_parameter(parameters, "n_trees", minimum=0)
    learning_rate = check_float_parameter(parameters, "learning_rate", minimum=0.0, exclusive=True)
    tree_depth = check_int_parameter(parameters, "tree_depth", minimum=0)

    def fit(xs, ys):
        return fit_booster(xs, ys, n_trees, learning_rate, tree_depth).predict

    return fit
