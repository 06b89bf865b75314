"""Regression trees on a single predictor.

A tree recursively splits the x-axis at the threshold that minimises the
summed squared error of the two halves, down to a fixed depth. Nodes are a
tagged union of :class:`Leaf` and :class:`Internal`; there are no nullable
children.

Mathematical background
-----------------------
For a node holding sorted responses ``y_1, ..., y_n`` the split after
position ``i`` costs

    SSE(y_1..y_i) + SSE(y_{i+1}..y_n),   SSE(v) = sum_j (v_j - mean(v))^2

and the threshold is the midpoint ``(x_i + x_{i+1}) / 2``. Points with
``x <= threshold`` go to the left child.
"""

# Authors: Ching-Chuan Chen
# SPDX-License-Identifier: MIT

import logging
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, Union

import numpy as np

from scatsmooth.utils.statistics import mean, sort_by_x
from scatsmooth.utils.validation import check_int_parameter, check_query, check_xy

logger = logging.getLogger(__name__)

# relative to the total sum of squares of the node
_TIE_RTOL = 1e-10


@dataclass(frozen=True)
class Leaf:
    """Terminal node predicting a constant."""

    value: float


@dataclass(frozen=True)
class Internal:
    """Split node: ``x <= threshold`` goes `left`, everything else goes `right`."""

    threshold: float
    left: "TreeNode"
    right: "TreeNode"


TreeNode = Union[Leaf, Internal]


def _find_best_split(xs_sorted: np.ndarray, ys_sorted: np.ndarray) -> Optional[int]:
    """Return the size of the best left partition, or None if x is constant.

    Splits are only considered between adjacent points with distinct x.
    The scan runs in ascending threshold order and the first minimum wins.
    Costs within rounding of the minimum count as ties, since the prefix-sum
    form of the SSE is not exact.
    """
    n = ys_sorted.size
    valid = xs_sorted[:-1] < xs_sorted[1:]
    if not valid.any():
        return None

    centered = ys_sorted - ys_sorted.mean()
    csum = np.cumsum(centered)
    csum_sq = np.cumsum(centered**2)
    left_sizes = np.arange(1, n)
    right_sizes = n - left_sizes
    sse_left = csum_sq[:-1] - csum[:-1] ** 2 / left_sizes
    sse_right = (csum_sq[-1] - csum_sq[:-1]) - (csum[-1] - csum[:-1]) ** 2 / right_sizes
    cost = np.maximum(sse_left, 0.0) + np.maximum(sse_right, 0.0)
    cost[~valid] = np.inf
    tolerance = _TIE_RTOL * csum_sq[-1]
    return int(np.flatnonzero(cost <= cost.min() + tolerance)[0]) + 1


def _build_tree(xs_sorted: np.ndarray, ys_sorted: np.ndarray, max_depth: int) -> TreeNode:
    if max_depth == 0 or ys_sorted.size <= 1:
        return Leaf(value=mean(ys_sorted))
    split = _find_best_split(xs_sorted, ys_sorted)
    if split is None:
        return Leaf(value=mean(ys_sorted))
    threshold = float((xs_sorted[split - 1] + xs_sorted[split]) / 2.0)
    return Internal(
        threshold=threshold,
        left=_build_tree(xs_sorted[:split], ys_sorted[:split], max_depth - 1),
        right=_build_tree(xs_sorted[split:], ys_sorted[split:], max_depth - 1),
    )


def _predict_node(node: TreeNode, xs: np.ndarray) -> np.ndarray:
    if isinstance(node, Leaf):
        return np.full(xs.shape, node.value)
    out = np.empty(xs.shape, dtype=np.float64)
    go_left = xs <= node.threshold
    out[go_left] = _predict_node(node.left, xs[go_left])
    out[~go_left] = _predict_node(node.right, xs[~go_left])
    return out


def _node_depth(node: TreeNode) -> int:
    if isinstance(node, Leaf):
        return 0
    return 1 + max(_node_depth(node.left), _node_depth(node.right))


def _node_leaves(node: TreeNode) -> int:
    if isinstance(node, Leaf):
        return 1
    return _node_leaves(node.left) + _node_leaves(node.right)


@dataclass(frozen=True)
class RegressionTree:
    """A fitted, immutable regression tree.

    Attributes
    ----------
    root : Leaf or Internal
        Root node.
    max_depth : int
        Depth limit the tree was grown with; the realised depth can be smaller.
    """

    root: TreeNode
    max_depth: int

    def predict(self, query_xs) -> np.ndarray:
        """Descend from the root for every query point and return the leaf values."""
        return _predict_node(self.root, check_query(query_xs))

    @property
    def depth(self) -> int:
        return _node_depth(self.root)

    @property
    def n_leaves(self) -> int:
        return _node_leaves(self.root)


def fit_tree(xs, ys, max_depth: int) -> RegressionTree:
    """Grow a regression tree of depth at most `max_depth`.

    Parameters
    ----------
    xs : array-like of shape (n,)
        Predictor values, in any order.
    ys : array-like of shape (n,)
        Responses.
    max_depth : int
        Non-negative depth limit. ``0`` gives a single leaf holding ``mean(ys)``;
        depth ``d`` gives at most ``2**d`` leaves.

    Returns
    -------
    RegressionTree

    Raises
    ------
    DimensionMismatchError
        If the inputs are empty or differ in length.
    InvalidParameterError
        If `max_depth` is not a non-negative integer.
    """
    max_depth = check_int_parameter({"max_depth": max_depth}, "max_depth", minimum=0)
    xs, ys = check_xy(xs, ys, min_samples=1)
    xs_sorted, ys_sorted = sort_by_x(xs, ys)
    tree = RegressionTree(root=_build_tree(xs_sorted, ys_sorted, max_depth), max_depth=max_depth)
    logger.debug("Fitted regression tree: n_samples=%d, max_depth=%d", xs.size, max_depth)
    return tree


def regression_tree(parameters: Mapping[str, float]) -> Callable:
    """Smoother factory over ``{"max_depth"}`` wrapping :func:`fit_tree`."""
    max_depth = check_int_parameter(parameters, "max_depth", minimum=0)

    def fit(xs, ys):
        return fit_tree(xs, ys, max_depth).predict

    return fit
