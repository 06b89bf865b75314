"""Regression trees and gradient boosting on a single predictor."""

# Authors: Ching-Chuan Chen
# SPDX-License-Identifier: MIT

from scatsmooth.tree.gradient_boosting import GradientBooster, fit_booster, gradient_boosting
from scatsmooth.tree.regression_tree import Internal, Leaf, RegressionTree, TreeNode, fit_tree, regression_tree

__all__ = [
    "GradientBooster",
    "Internal",
    "Leaf",
    "RegressionTree",
    "TreeNode",
    "fit_booster",
    "fit_tree",
    "gradient_boosting",
    "regression_tree",
]
