"""Statistics and validation helpers shared by every smoother."""

# Authors: Ching-Chuan Chen
# SPDX-License-Identifier: MIT
from scatsmooth.utils.statistics import dot, make_sampling_grid, mean, sample_sd, sort_by_x, vectorize, weighted_mean
from scatsmooth.utils.validation import check_float_parameter, check_int_parameter, check_query, check_xy

__all__ = [
    "check_float_parameter",
    "check_int_parameter",
    "check_query",
    "check_xy",
    "dot",
    "make_sampling_grid",
    "mean",
    "sample_sd",
    "sort_by_x",
    "vectorize",
    "weighted_mean",
]
