"""Basis expansions for regression on a single scalar predictor."""

# Authors: Ching-Chuan Chen
# SPDX-License-Identifier: MIT

from scatsmooth.basis.basis_functions import (
    cubic_spline_basis,
    evaluate_basis_expansion,
    make_knots,
    natural_cubic_spline_basis,
    pl_spline_basis,
    polynomial_basis,
    quadratic_spline_basis,
)

__all__ = [
    "cubic_spline_basis",
    "evaluate_basis_expansion",
    "make_knots",
    "natural_cubic_spline_basis",
    "pl_spline_basis",
    "polynomial_basis",
    "quadratic_spline_basis",
]
