"""Ridge regression on a basis expansion of the predictor.

Every constructor here returns a stage of the curried chain

    parameters -> fit(xs, ys) -> predict(query_xs)

so that spline and polynomial regressions plug into the registry like any
other smoother.
"""

# Authors: Ching-Chuan Chen
# SPDX-License-Identifier: MIT

import logging
from typing import Callable, List, Mapping

import numpy as np

from scatsmooth.basis import evaluate_basis_expansion, make_knots, polynomial_basis
from scatsmooth.basis.basis_functions import BasisFunction
from scatsmooth.smooth.ridge import fit_ridge_regression
from scatsmooth.utils.validation import check_float_parameter, check_int_parameter, check_query, check_xy

logger = logging.getLogger(__name__)


def make_basis_expansion_regression(basis: List[BasisFunction], lam: float) -> Callable:
    """Build a fit function regressing y on ``basis(x)`` with ridge strength `lam`.

    Parameters
    ----------
    basis : list of callable
        Basis functions; the first one must be the linear term.
    lam : float
        Ridge shrinkage strength, ``lam >= 0``.

    Returns
    -------
    callable
        ``fit(xs, ys) -> predict``. `fit` needs at least two points and
        `predict` maps an array of query points to an array of predictions.
    """

    def fit(xs, ys):
        xs, ys = check_xy(xs, ys, min_samples=2)
        X = evaluate_basis_expansion(basis, xs)
        ridge = fit_ridge_regression(X, ys, lam)

        def predict(query_xs) -> np.ndarray:
            query_xs = check_query(query_xs)
            return ridge.predict(evaluate_basis_expansion(basis, query_xs))

        return predict

    return fit


def make_spline_regression(spline_basis_function: Callable[[np.ndarray], List[BasisFunction]]) -> Callable:
    """Turn a spline basis family into a factory over ``{"n", "lambda"}``.

    The ``n`` knots are spread evenly inside ``(0, 1)`` by :func:`make_knots`.
    """

    def factory(parameters: Mapping[str, float]) -> Callable:
        n = check_int_parameter(parameters, "n", minimum=1)
        lam = check_float_parameter(parameters, "lambda", minimum=0.0)
        knots = make_knots(n)
        logger.debug("Spline regression with %d knots %s and lambda=%g", n, knots, lam)
        return make_basis_expansion_regression(spline_basis_function(knots), lam)

    return factory


def make_polynomial_regression(polynomial_basis_function: Callable[[int], List[BasisFunction]]) -> Callable:
    """Turn a polynomial basis family into a factory over ``{"degree", "lambda"}``."""

    def factory(parameters: Mapping[str, float]) -> Callable:
        degree = check_int_parameter(parameters, "degree", minimum=1)
        lam = check_float_parameter(parameters, "lambda", minimum=0.0)
        return make_basis_expansion_regression(polynomial_basis_function(degree), lam)

    return factory


polynomial_regression = make_polynomial_regression(polynomial_basis)
spline_regression = make_spline_regression
