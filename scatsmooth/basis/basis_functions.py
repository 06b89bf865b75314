"""Basis expansions of a scalar predictor.

A basis is an ordered list of functions ``[f_1, ..., f_p]``. Expanding a
vector ``x`` through a basis produces the design matrix whose j-th column is
``f_j(x)``. Every function here accepts scalars or numpy arrays.

No basis carries a constant term; the intercept is handled by the
standardisation in :func:`scatsmooth.smooth.ridge.fit_ridge_regression`.
"""

# Authors: Ching-Chuan Chen
# SPDX-License-Identifier: MIT

from typing import Callable, List

import numpy as np

from scatsmooth.exceptions import DimensionMismatchError, InvalidParameterError

BasisFunction = Callable[[np.ndarray], np.ndarray]


def _positive_part(t):
    return np.maximum(t, 0.0)


def _check_knots(knots, min_knots: int = 1) -> np.ndarray:
    knots = np.asarray(knots, dtype=np.float64)
    if knots.ndim != 1:
        raise InvalidParameterError("knots must be a 1D array.")
    if knots.size < min_knots:
        raise InvalidParameterError(f"At least {min_knots} knot(s) are required, got {knots.size}.")
    if not np.isfinite(knots).all():
        raise InvalidParameterError("knots must be finite.")
    if np.any(np.diff(knots) <= 0):
        raise InvalidParameterError("knots must be strictly increasing.")
    return knots


def make_knots(n: int) -> np.ndarray:
    """Return `n` equally spaced knots strictly inside ``(0, 1)``.

    This is ``linspace(0, 1, n + 2)`` with both end points dropped, so
    ``make_knots(2)`` is ``[1/3, 2/3]``.
    """
    if isinstance(n, bool) or int(n) != n:
        raise InvalidParameterError(f"Number of knots, n, should be an integer, got {n!r}.")
    if n < 1:
        raise InvalidParameterError(f"Number of knots, n, should be at least 1, got {n}.")
    return np.linspace(0.0, 1.0, int(n) + 2)[1:-1]


def polynomial_basis(degree: int) -> List[BasisFunction]:
    """Polynomial basis ``x -> [x, x^2, ..., x^degree]``."""
    if isinstance(degree, bool) or int(degree) != degree:
        raise InvalidParameterError(f"Degree of polynomial, degree, should be an integer, got {degree!r}.")
    if degree < 1:
        raise InvalidParameterError(f"Degree of polynomial, degree, should be positive, got {degree}.")
    return [lambda x, i=i: np.power(x, i) for i in range(1, int(degree) + 1)]


def pl_spline_basis(knots) -> List[BasisFunction]:
    """Piecewise linear spline basis ``[x, (x - k_1)_+, ..., (x - k_m)_+]``."""
    knots = _check_knots(knots)
    basis = [lambda x: np.asarray(x, dtype=np.float64)]
    basis.extend(lambda x, k=k: _positive_part(x - k) for k in knots)
    return basis


def quadratic_spline_basis(knots) -> List[BasisFunction]:
    """Quadratic spline basis ``[x, x^2, (x - k_i)_+^2 ...]``."""
    knots = _check_knots(knots)
    basis = [lambda x: np.asarray(x, dtype=np.float64), lambda x: np.power(x, 2)]
    basis.extend(lambda x, k=k: _positive_part(x - k) ** 2 for k in knots)
    return basis


def cubic_spline_basis(knots) -> List[BasisFunction]:
    """Unrestricted cubic spline basis ``[x, x^2, x^3, (x - k_i)_+^3 ...]``."""
    knots = _check_knots(knots)
    basis = [lambda x: np.asarray(x, dtype=np.float64), lambda x: np.power(x, 2), lambda x: np.power(x, 3)]
    basis.extend(lambda x, k=k: _positive_part(x - k) ** 3 for k in knots)
    return basis


def natural_cubic_spline_basis(knots) -> List[BasisFunction]:
    r"""Natural cubic spline basis on `m` knots.

    The basis has ``m - 1`` functions: ``x`` followed by
    ``d_k(x) - d_{m-2}(x)`` for ``k = 0, ..., m - 3`` where

    .. math::
        d_j(x) = \frac{(x - \kappa_j)_+^3 - (x - \kappa_{m-1})_+^3}{\kappa_{m-1} - \kappa_j}.

    Any linear combination is a cubic spline that is linear to the left of
    the first knot and to the right of the last one.

    Parameters
    ----------
    knots : array-like of shape (m,)
        Strictly increasing knots, ``m >= 2``.

    Returns
    -------
    list of callable
        The ``m - 1`` basis functions.
    """
    knots = _check_knots(knots, min_knots=2)
    last = knots[-1]

    def d(j):
        def dj(x):
            return (_positive_part(x - knots[j]) ** 3 - _positive_part(x - last) ** 3) / (last - knots[j])

        return dj

    d_penultimate = d(knots.size - 2)
    basis = [lambda x: np.asarray(x, dtype=np.float64)]
    basis.extend(lambda x, dk=d(k): dk(x) - d_penultimate(x) for k in range(knots.size - 2))
    return basis


def evaluate_basis_expansion(basis: List[BasisFunction], xs) -> np.ndarray:
    """Expand `xs` through `basis` into a design matrix of shape ``(len(xs), len(basis))``."""
    xs = np.asarray(xs, dtype=np.float64)
    if xs.ndim != 1:
        raise DimensionMismatchError("xs must be a 1D array.")
    if len(basis) == 0:
        return np.empty((xs.size, 0), dtype=np.float64)
    return np.column_stack([np.broadcast_to(f(xs), xs.shape) for f in basis]).astype(np.float64, copy=False)
