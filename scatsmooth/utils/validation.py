"""Input checks run at the fit/predict boundary, before any numeric work."""

# Authors: Ching-Chuan Chen
# SPDX-License-Identifier: MIT

import math
import numbers
from typing import Mapping, Optional, Tuple

import numpy as np

from scatsmooth.exceptions import DimensionMismatchError, InvalidParameterError, NumericError


def _check_vector(v, name: str) -> np.ndarray:
    try:
        arr = np.asarray(v, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise DimensionMismatchError(f"{name} must be a 1D array of numbers.") from e
    if arr.ndim != 1:
        raise DimensionMismatchError(f"{name} must be a 1D array.")
    if np.isnan(arr).any():
        raise NumericError(f"Input array {name} contains NaN values.")
    if np.isinf(arr).any():
        raise NumericError(f"Input array {name} contains infinite values.")
    return arr


def check_xy(xs, ys, min_samples: int = 1) -> Tuple[np.ndarray, np.ndarray]:
    """Validate a dataset and return it as a pair of float64 arrays.

    Parameters
    ----------
    xs : array-like of shape (n,)
        Predictor values.
    ys : array-like of shape (n,)
        Responses aligned with `xs`.
    min_samples : int, default=1
        Fewest points the calling smoother can be fit on.

    Returns
    -------
    xs, ys : np.ndarray of shape (n,)
        Copies of the inputs as float64 arrays.

    Raises
    ------
    DimensionMismatchError
        If either input is not 1D, their lengths differ, or there are fewer
        than `min_samples` points.
    NumericError
        If either input contains NaN or infinite values.
    """
    xs = _check_vector(xs, "xs")
    ys = _check_vector(ys, "ys")
    if xs.size != ys.size:
        raise DimensionMismatchError(f"ys must have the same size as xs, got {ys.size} vs {xs.size}.")
    if xs.size < min_samples:
        raise DimensionMismatchError(f"At least {min_samples} data point(s) are required, got {xs.size}.")
    return xs.copy(), ys.copy()


def check_query(query_xs) -> np.ndarray:
    return _check_vector(query_xs, "query_xs")


def _lookup(parameters: Mapping[str, float], name: str):
    if parameters is None or name not in parameters:
        raise InvalidParameterError(f"Missing hyperparameter '{name}'.")
    value = parameters[name]
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameterError(f"Hyperparameter '{name}' must be a number, got {value!r}.")
    if math.isnan(value) or math.isinf(value):
        raise InvalidParameterError(f"Hyperparameter '{name}' must be finite, got {value!r}.")
    return value


def check_int_parameter(parameters: Mapping[str, float], name: str, minimum: Optional[int] = None) -> int:
    """Read an integer-valued hyperparameter.

    Integral floats (``3.0``) are accepted, since slider values arrive as floats.
    """
    value = _lookup(parameters, name)
    if float(value) != int(value):
        raise InvalidParameterError(f"Hyperparameter '{name}' must be an integer, got {value!r}.")
    value = int(value)
    if minimum is not None and value < minimum:
        raise InvalidParameterError(f"Hyperparameter '{name}' must be at least {minimum}, got {value}.")
    return value


def check_float_parameter(
    parameters: Mapping[str, float],
    name: str,
    minimum: Optional[float] = None,
    exclusive: bool = False,
) -> float:
    """Read a real-valued hyperparameter, optionally bounded below."""
    value = float(_lookup(parameters, name))
    if minimum is not None:
        if exclusive and value <= minimum:
            raise InvalidParameterError(f"Hyperparameter '{name}' must be greater than {minimum}, got {value}.")
        if not exclusive and value < minimum:
            raise InvalidParameterError(f"Hyperparameter '{name}' must be at least {minimum}, got {value}.")
    return value
