"""Smoothers: ridge basis regression, local averages and kernel smoothing."""

# Authors: Ching-Chuan Chen
# SPDX-License-Identifier: MIT

from scatsmooth.smooth.basis_regression import (
    make_basis_expansion_regression,
    make_polynomial_regression,
    make_spline_regression,
    polynomial_regression,
    spline_regression,
)
from scatsmooth.smooth.kernel import KernelType, calculate_kernel_weights
from scatsmooth.smooth.local_smoothers import (
    LinearFunction,
    constant_mean,
    gaussian_kernel,
    linear_regression,
    linear_regressor,
    loess,
    running_line,
    running_mean,
    weighted_linear_regressor,
)
from scatsmooth.smooth.ridge import RidgeFit, Standardization, fit_ridge_regression

__all__ = [
    "KernelType",
    "LinearFunction",
    "RidgeFit",
    "Standardization",
    "calculate_kernel_weights",
    "constant_mean",
    "fit_ridge_regression",
    "gaussian_kernel",
    "linear_regression",
    "linear_regressor",
    "loess",
    "make_basis_expansion_regression",
    "make_polynomial_regression",
    "make_spline_regression",
    "polynomial_regression",
    "running_line",
    "running_mean",
    "spline_regression",
    "weighted_linear_regressor",
]
