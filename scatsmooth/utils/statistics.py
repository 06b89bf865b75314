"""Summary statistics and small vector helpers used by the smoothers."""

# Authors: Ching-Chuan Chen
# SPDX-License-Identifier: MIT

from typing import Callable, Sequence, Tuple, Union

import numpy as np

from scatsmooth.exceptions import DimensionMismatchError, InvalidParameterError, NumericError

ArrayLike = Union[np.ndarray, Sequence[float]]


def _as_vector(v: ArrayLike, name: str) -> np.ndarray:
    arr = np.asarray(v, dtype=np.float64)
    if arr.ndim != 1:
        raise DimensionMismatchError(f"{name} must be a 1D array.")
    return arr


def mean(v: ArrayLike) -> float:
    """Arithmetic mean of a non-empty vector.

    Raises
    ------
    NumericError
        If `v` is empty.
    """
    v = _as_vector(v, "v")
    if v.size == 0:
        raise NumericError("Cannot compute the mean of an empty array.")
    return float(np.mean(v))


def weighted_mean(v: ArrayLike, w: ArrayLike) -> float:
    """Weighted mean of `v` with (possibly un-normalised) weights `w`.

    Parameters
    ----------
    v : array-like of shape (n,)
        Values.
    w : array-like of shape (n,)
        Weights. Their sum must be non-zero.

    Returns
    -------
    float
        ``sum(v * w) / sum(w)``.

    Raises
    ------
    DimensionMismatchError
        If `v` and `w` differ in length.
    NumericError
        If the inputs are empty or the weights sum to zero.
    """
    v = _as_vector(v, "v")
    w = _as_vector(w, "w")
    if v.size != w.size:
        raise DimensionMismatchError("w must have the same size as v.")
    if v.size == 0:
        raise NumericError("Cannot compute the weighted mean of an empty array.")
    total_weight = np.sum(w)
    if total_weight == 0:
        raise NumericError("Weights sum to zero; the weighted mean is undefined.")
    return float(np.sum(v * w) / total_weight)


def sample_sd(v: ArrayLike) -> float:
    """Sample standard deviation (``ddof=1``); needs at least two values."""
    v = _as_vector(v, "v")
    if v.size < 2:
        raise NumericError(f"The sample standard deviation needs at least 2 values, got {v.size}.")
    return float(np.std(v, ddof=1))


def dot(a: ArrayLike, b: ArrayLike) -> float:
    a = _as_vector(a, "a")
    b = _as_vector(b, "b")
    if a.size != b.size:
        raise DimensionMismatchError("b must have the same size as a.")
    return float(np.dot(a, b))


def vectorize(f: Callable[[float], float]) -> Callable[[ArrayLike], np.ndarray]:
    """Lift a scalar function to one mapping a sequence to an array, pointwise."""

    def vectorized(xs: ArrayLike) -> np.ndarray:
        return np.array([f(x) for x in _as_vector(xs, "xs")], dtype=np.float64)

    return vectorized


def sort_by_x(xs: ArrayLike, ys: ArrayLike) -> Tuple[np.ndarray, np.ndarray]:
    """Reorder `xs` and `ys` together so that `xs` is ascending.

    The sort is stable: points sharing an x value keep their input order.
    """
    xs = _as_vector(xs, "xs")
    ys = _as_vector(ys, "ys")
    if xs.size != ys.size:
        raise DimensionMismatchError("ys must have the same size as xs.")
    order = np.argsort(xs, kind="stable")
    return xs[order], ys[order]


def make_sampling_grid(start: float = 0.0, stop: float = 1.0, step: float = 0.01) -> np.ndarray:
    """Evenly spaced query points in ``[start, stop)``, the grid a curve is drawn on."""
    if step <= 0:
        raise InvalidParameterError("step must be positive.")
    if stop <= start:
        raise InvalidParameterError("stop must be greater than start.")
    return np.arange(start, stop, step, dtype=np.float64)
