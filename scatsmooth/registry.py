"""Catalogue of the available smoothers.

A :class:`SmootherRegistry` maps an identifier to a
:class:`SmootherDescriptor` that bundles a display label, a smoother
``parameters -> fit``, the hyperparameters it reads and, for
fixed-knot splines, the knot generator. The registry is an immutable value:
build it once with :func:`build_default_registry` and pass it to whatever
needs to look smoothers up.

Examples
--------
>>> registry = build_default_registry()
>>> fit = registry.lookup("running-mean").factory({"k": 3})
>>> predict = fit([0.1, 0.4, 0.5, 0.9], [1.0, 2.0, 2.5, 0.5])
>>> predict([0.2, 0.6]).shape
(2,)
"""

# Authors: Ching-Chuan Chen
# SPDX-License-Identifier: MIT

import logging
import math
import numbers
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Dict, Iterator, Optional, Tuple

import numpy as np

from scatsmooth.basis import (
    cubic_spline_basis,
    make_knots,
    natural_cubic_spline_basis,
    pl_spline_basis,
    quadratic_spline_basis,
)
from scatsmooth.exceptions import InvalidParameterError, SmootherNotFoundError
from scatsmooth.smooth import (
    constant_mean,
    gaussian_kernel,
    linear_regression,
    loess,
    make_spline_regression,
    polynomial_regression,
    running_line,
    running_mean,
)
from scatsmooth.tree import gradient_boosting, regression_tree
from scatsmooth.utils.statistics import make_sampling_grid
from scatsmooth.utils.validation import check_xy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HyperParameter:
    """A named scalar setting with a valid range and a step size.

    Attributes
    ----------
    name : str
        Key under which the value is passed to the factory.
    label : str
        Human-readable description for a UI control.
    min, max : float
        Inclusive bounds.
    step : float
        Granularity of a UI control.
    default : float
        Value used when the caller does not supply one.
    integer : bool
        Whether the value counts something and must be integral.
    """

    name: str
    label: str
    min: float
    max: float
    step: float
    default: float
    integer: bool = False

    def __post_init__(self):
        if not self.min <= self.default <= self.max:
            raise ValueError(f"default of '{self.name}' must lie in [{self.min}, {self.max}], got {self.default}.")
        if self.step <= 0:
            raise ValueError(f"step of '{self.name}' must be positive.")

    def validate(self, value) -> float:
        """Check `value` against this descriptor and return it as int or float."""
        if isinstance(value, bool) or not isinstance(value, numbers.Real) or not math.isfinite(value):
            raise InvalidParameterError(f"Hyperparameter '{self.name}' must be a number, got {value!r}.")
        if self.integer and float(value) != int(value):
            raise InvalidParameterError(f"Hyperparameter '{self.name}' must be an integer, got {value!r}.")
        if not self.min <= value <= self.max:
            raise InvalidParameterError(f"Hyperparameter '{self.name}' must lie in [{self.min}, {self.max}], got {value!r}.")
        return int(value) if self.integer else float(value)


@dataclass(frozen=True)
class SmootherDescriptor:
    """Everything a caller needs to offer and run one smoothing algorithm.

    Attributes
    ----------
    label : str
        Short description, e.g. for a select box.
    smoother : callable
        Unchecked ``parameters -> fit`` where ``fit(xs, ys) -> predict``.
        Call it through :meth:`factory`, which validates the parameters first.
    hyperparameters : tuple of HyperParameter
        Settings the smoother reads from `parameters`.
    knot_function : callable, optional
        ``n -> knots``; only set for fixed-knot splines.
    """

    label: str
    smoother: Callable
    hyperparameters: Tuple[HyperParameter, ...] = field(default_factory=tuple)
    knot_function: Optional[Callable[[int], np.ndarray]] = None

    def default_parameters(self) -> Dict[str, float]:
        return {hp.name: hp.default for hp in self.hyperparameters}

    def resolve_parameters(self, parameters: Optional[Mapping] = None) -> Dict[str, float]:
        """Validate `parameters`, filling defaults for any that are missing.

        Raises
        ------
        InvalidParameterError
            If a name is unknown, a value is out of range, or an integer
            parameter is given a fractional value.
        """
        parameters = dict(parameters or {})
        known = {hp.name for hp in self.hyperparameters}
        unknown = sorted(set(parameters) - known)
        if unknown:
            raise InvalidParameterError(f"Unknown hyperparameter(s) {unknown} for smoother '{self.label}'.")
        return {hp.name: hp.validate(parameters.get(hp.name, hp.default)) for hp in self.hyperparameters}

    def factory(self, parameters: Optional[Mapping] = None) -> Callable:
        """Return ``fit(xs, ys) -> predict`` for `parameters`.

        Missing hyperparameters take their defaults; every value is checked
        against its declared range before the smoother sees it.

        Raises
        ------
        InvalidParameterError
            As :meth:`resolve_parameters`.
        """
        return self.smoother(self.resolve_parameters(parameters))


class SmootherRegistry(Mapping):
    """Read-only mapping from smoother identifier to :class:`SmootherDescriptor`."""

    def __init__(self, descriptors: Mapping[str, SmootherDescriptor]):
        self._descriptors = MappingProxyType(dict(descriptors))

    def __getitem__(self, smoother_id: str) -> SmootherDescriptor:
        return self.lookup(smoother_id)

    def __iter__(self) -> Iterator[str]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __repr__(self):
        return f"SmootherRegistry({list(self._descriptors)})"

    def lookup(self, smoother_id: str) -> SmootherDescriptor:
        try:
            return self._descriptors[smoother_id]
        except KeyError:
            raise SmootherNotFoundError(f"No smoother registered as '{smoother_id}'. Available: {list(self._descriptors)}") from None

    def smooth(self, smoother_id: str, parameters: Optional[Mapping], xs, ys, grid=None) -> Tuple[np.ndarray, np.ndarray]:
        """Fit `smoother_id` on ``(xs, ys)`` and evaluate it on `grid`.

        Parameters
        ----------
        smoother_id : str
            Registry key.
        parameters : mapping, optional
            Hyperparameter values; missing ones take their defaults.
        xs, ys : array-like of shape (n,)
            Data to smooth.
        grid : array-like, optional
            Query points. Defaults to ``0.00, 0.01, ..., 0.99``.

        Returns
        -------
        grid : np.ndarray
            The query points.
        fitted : np.ndarray
            Smoothed values at `grid`.
        """
        descriptor = self.lookup(smoother_id)
        fit = descriptor.factory(parameters)
        xs, ys = check_xy(xs, ys)
        grid = make_sampling_grid() if grid is None else np.asarray(grid, dtype=np.float64)
        logger.debug("Smoothing %d points with '%s'", xs.size, smoother_id)
        return grid, fit(xs, ys)(grid)


def _shrinkage(max_value: float, step: float) -> HyperParameter:
    return HyperParameter("lambda", "Ridge Shrinkage", 0.0, max_value, step, 0.0)


def _knot_count(default: int) -> HyperParameter:
    return HyperParameter("n", "Number of Knots", 2, 10, 1, default, integer=True)


def build_default_registry() -> SmootherRegistry:
    """Build the standard catalogue of smoothers."""
    return SmootherRegistry(
        {
            "mean": SmootherDescriptor("Constant Mean", constant_mean),
            "running-mean": SmootherDescriptor(
                "Running Mean",
                running_mean,
                (HyperParameter("k", "Number of Neighbors", 1, 20, 1, 2, integer=True),),
            ),
            "linear": SmootherDescriptor("Linear Regression", linear_regression),
            "gaussian-kernel": SmootherDescriptor(
                "Gaussian Kernel Smoother",
                gaussian_kernel,
                (HyperParameter("lambda", "Width of Kernel", 0.001, 0.05, 0.001, 0.01),),
            ),
            "running-line": SmootherDescriptor(
                "Running Line",
                running_line,
                (HyperParameter("k", "Number of Neighbors", 2, 20, 1, 2, integer=True),),
            ),
            "loess": SmootherDescriptor(
                "Locally Weighted Linear Regression",
                loess,
                (HyperParameter("k", "Number of Neighbors", 3, 30, 1, 7, integer=True),),
            ),
            "polynomial": SmootherDescriptor(
                "Polynomial Ridge Regression",
                polynomial_regression,
                (HyperParameter("degree", "Polynomial Degree", 1, 10, 1, 2, integer=True), _shrinkage(0.01, 0.00001)),
            ),
            "pl-spline": SmootherDescriptor(
                "Piecewise Linear Spline (Fixed Knots)",
                make_spline_regression(pl_spline_basis),
                (_knot_count(2), _shrinkage(0.1, 0.0001)),
                knot_function=make_knots,
            ),
            "quadratic-spline": SmootherDescriptor(
                "Quadratic Spline (Fixed Knots)",
                make_spline_regression(quadratic_spline_basis),
                (_knot_count(2), _shrinkage(0.01, 0.00001)),
                knot_function=make_knots,
            ),
            "cubic-spline": SmootherDescriptor(
                "Cubic Spline (Fixed Knots)",
                make_spline_regression(cubic_spline_basis),
                (_knot_count(2), _shrinkage(0.001, 0.000001)),
                knot_function=make_knots,
            ),
            "natural-spline": SmootherDescriptor(
                "Natural Cubic Spline (Fixed Knots)",
                make_spline_regression(natural_cubic_spline_basis),
                (_knot_count(3), _shrinkage(0.001, 0.000001)),
                knot_function=make_knots,
            ),
            "regression-tree": SmootherDescriptor(
                "Regression Tree",
                regression_tree,
                (HyperParameter("max_depth", "Maximum Depth", 0, 8, 1, 3, integer=True),),
            ),
            "gradient-boosting": SmootherDescriptor(
                "Gradient Boosted Trees",
                gradient_boosting,
                (
                    HyperParameter("n_trees", "Number of Trees", 1, 100, 1, 20, integer=True),
                    HyperParameter("learning_rate", "Learning Rate", 0.01, 1.0, 0.01, 0.1),
                    HyperParameter("tree_depth", "Depth of Each Tree", 1, 5, 1, 2, integer=True),
                ),
            ),
        }
    )
