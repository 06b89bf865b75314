"""Scatterplot smoothers built from local averages and local lines.

Each public smoother is a factory with the signature

    parameters -> fit(xs, ys) -> predict(query_xs)

where `parameters` maps hyperparameter names to values. Nothing is kept
between fits: every call to `fit` works on its own sorted copy of the data.
"""

# Authors: Ching-Chuan Chen
# SPDX-License-Identifier: MIT

import logging
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

import numpy as np

from scatsmooth.exceptions import DimensionMismatchError, NumericError
from scatsmooth.smooth.kernel import KernelType, calculate_kernel_weights
from scatsmooth.utils.statistics import mean, sort_by_x, vectorize, weighted_mean
from scatsmooth.utils.validation import check_float_parameter, check_int_parameter, check_query, check_xy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LinearFunction:
    """The line ``x -> intercept + slope * x``."""

    slope: float
    intercept: float

    def __call__(self, x):
        return self.intercept + self.slope * x


def linear_regressor(xs, ys) -> LinearFunction:
    """Ordinary least squares line through `(xs, ys)`.

    Uses the closed form ``slope = (mean(xy) - mean(x) mean(y)) / (mean(x^2) - mean(x)^2)``.

    Raises
    ------
    NumericError
        If `xs` is empty or all of its values are equal.
    """
    xs = np.asarray(xs, dtype=np.float64)
    ys = np.asarray(ys, dtype=np.float64)
    if xs.size != ys.size:
        raise DimensionMismatchError("ys must have the same size as xs.")
    if xs.size == 0 or np.ptp(xs) == 0:
        raise NumericError("A regression line needs at least two distinct x values.")
    x_mean = mean(xs)
    y_mean = mean(ys)
    xy_mean = mean(xs * ys)
    xsq_mean = mean(xs * xs)
    slope = (xy_mean - x_mean * y_mean) / (xsq_mean - x_mean * x_mean)
    return LinearFunction(slope=slope, intercept=y_mean - slope * x_mean)


def weighted_linear_regressor(xs, ys, ws) -> LinearFunction:
    """Weighted least squares line through `(xs, ys)` with weights `ws`."""
    xs = np.asarray(xs, dtype=np.float64)
    ys = np.asarray(ys, dtype=np.float64)
    ws = np.asarray(ws, dtype=np.float64)
    x_mean = weighted_mean(xs, ws)
    y_mean = weighted_mean(ys, ws)
    xy_mean = weighted_mean(xs * ys, ws)
    xsq_mean = weighted_mean(xs * xs, ws)
    x_var = xsq_mean - x_mean * x_mean
    if np.ptp(xs[ws > 0]) == 0 or x_var <= 0:
        raise NumericError("A weighted regression line needs two distinct x values with positive weight.")
    slope = (xy_mean - x_mean * y_mean) / x_var
    return LinearFunction(slope=slope, intercept=y_mean - slope * x_mean)


def _neighbourhood_bounds(xs_sorted: np.ndarray, query_xs: np.ndarray, k: int):
    """Half-open index window ``[pos - k, pos + k)`` around each query, clamped to ``[0, n]``.

    ``pos`` is the right insertion point, so the window holds up to `k` points
    at or left of the query and up to `k` points right of it.
    """
    pos = np.searchsorted(xs_sorted, query_xs, side="right")
    lo = np.maximum(0, pos - k)
    hi = np.minimum(xs_sorted.size, pos + k)
    return lo, hi


def constant_mean(parameters: Optional[Mapping[str, float]] = None) -> Callable:
    """Global mean of the responses, whatever the query."""

    def fit(xs, ys):
        _, ys = check_xy(xs, ys, min_samples=1)
        y_mean = mean(ys)

        def predict(query_xs) -> np.ndarray:
            return np.full(check_query(query_xs).shape, y_mean)

        return predict

    return fit


def running_mean(parameters: Mapping[str, float]) -> Callable:
    """Mean of the responses in a symmetric index neighbourhood.

    The data are sorted by x. For a query x, ``pos`` is its right insertion
    point in the sorted xs, and the smoothed value is the mean of the sorted
    ys at indices ``max(0, pos - k)`` up to, but excluding, ``min(n, pos + k)``.
    The window counts points, not distance.
    """
    k = check_int_parameter(parameters, "k", minimum=1)

    def fit(xs, ys):
        xs, ys = check_xy(xs, ys, min_samples=1)
        xs_sorted, ys_sorted = sort_by_x(xs, ys)
        cumulative = np.concatenate(([0.0], np.cumsum(ys_sorted)))

        def predict(query_xs) -> np.ndarray:
            lo, hi = _neighbourhood_bounds(xs_sorted, check_query(query_xs), k)
            return (cumulative[hi] - cumulative[lo]) / (hi - lo)

        return predict

    return fit


def running_line(parameters: Mapping[str, float]) -> Callable:
    """Least squares line over the same index neighbourhood as :func:`running_mean`.

    A window whose x values are all equal has no slope; the mean of its
    responses is used instead.
    """
    k = check_int_parameter(parameters, "k", minimum=2)

    def fit(xs, ys):
        xs, ys = check_xy(xs, ys, min_samples=2)
        xs_sorted, ys_sorted = sort_by_x(xs, ys)

        def local_line(x):
            lo, hi = _neighbourhood_bounds(xs_sorted, np.array([x]), k)
            window = slice(lo[0], hi[0])
            if xs_sorted[lo[0]] == xs_sorted[hi[0] - 1]:
                # no slope on a window of tied x
                return mean(ys_sorted[window])
            return linear_regressor(xs_sorted[window], ys_sorted[window])(x)

        return vectorize(local_line)

    return fit


def gaussian_kernel(parameters: Mapping[str, float]) -> Callable:
    """Nadaraya-Watson smoother with weights ``exp(-(x - x_i)^2 / lambda)``.

    Small ``lambda`` gives a wiggly, local fit; large ``lambda`` tends to the
    global mean.
    """
    lam = check_float_parameter(parameters, "lambda", minimum=0.0, exclusive=True)

    def fit(xs, ys):
        xs, ys = check_xy(xs, ys, min_samples=1)

        def predict(query_xs) -> np.ndarray:
            query_xs = check_query(query_xs)
            weights = calculate_kernel_weights(query_xs[:, None] - xs[None, :], lam, KernelType.GAUSSIAN)
            total_weight = weights.sum(axis=1)
            if np.any(total_weight == 0):
                raise NumericError(f"Kernel weights underflow to zero for lambda={lam}; the query is too far from the data.")
            return weights @ ys / total_weight

        return predict

    return fit


def linear_regression(parameters: Optional[Mapping[str, float]] = None) -> Callable:
    """Global ordinary least squares line, no regularisation."""

    def fit(xs, ys):
        xs, ys = check_xy(xs, ys, min_samples=2)
        line = linear_regressor(xs, ys)
        logger.debug("Linear regression: slope=%g, intercept=%g", line.slope, line.intercept)

        def predict(query_xs) -> np.ndarray:
            return line(check_query(query_xs))

        return predict

    return fit


def loess(parameters: Mapping[str, float]) -> Callable:
    """Locally weighted linear regression over the `k` nearest neighbours.

    For a query x the `k` training points closest to x (in distance) are
    weighted with the tricube kernel, scaled by the largest neighbour
    distance, and a weighted least squares line is evaluated at x.
    """
    k = check_int_parameter(parameters, "k", minimum=3)

    def fit(xs, ys):
        xs, ys = check_xy(xs, ys, min_samples=2)
        xs, ys = sort_by_x(xs, ys)
        n_neighbours = min(k, xs.size)

        def local_weighted_line(x):
            distances = np.abs(xs - x)
            nearest = np.argsort(distances, kind="stable")[:n_neighbours]
            # every selected neighbour keeps a positive weight
            bandwidth = 1.01 * distances[nearest].max()
            if bandwidth == 0:
                raise NumericError("All neighbours coincide with the query; the local line is undefined.")
            ws = calculate_kernel_weights(distances[nearest], bandwidth, KernelType.TRICUBE)
            return weighted_linear_regressor(xs[nearest], ys[nearest], ws)(x)

        return vectorize(local_weighted_line)

    return fit
