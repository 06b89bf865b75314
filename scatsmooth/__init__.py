"""Scatterplot smoothers behind one curried interface and an immutable registry."""

# Authors: Ching-Chuan Chen
# SPDX-License-Identifier: MIT

# Scatterplot smoothers (scatsmooth) for Python
# =============================================
#
# scatsmooth is a library of curve-fitting algorithms for a scatter of 2D points: ridge regression on
# polynomial and spline bases, running means and lines, kernel smoothing, regression trees and gradient boosting.
#
# Every smoother shares one curried interface, parameters -> fit(xs, ys) -> predict(query_xs), and is exposed
# through an immutable registry together with the hyperparameter descriptions a user interface needs.
# A scikit-learn estimator adapter makes any registered smoother usable in scikit-learn workflows.

import importlib as _importlib
import logging

logger = logging.getLogger(__name__)


# PEP0440 compatible formatted version, see:
# https://www.python.org/dev/peps/pep-0440/
#
# Generic release markers:
#   X.Y.0   # For first release after an increment in Y
#   X.Y.Z   # For bugfix releases
#
# Admissible pre-release markers:
#   X.Y.ZaN   # Alpha release
#   X.Y.ZbN   # Beta release
#   X.Y.ZrcN  # Release Candidate
#   X.Y.Z     # Final release
#
# Dev branch marker is: 'X.Y.dev' or 'X.Y.devN' where N is an integer.
# 'X.Y.dev0' is the canonical version of 'X.Y.dev'

__version__ = "0.1.0.dev0"

from scatsmooth.estimator import SmootherRegressor  # noqa: F401 E402
from scatsmooth.registry import (  # noqa: F401 E402
    HyperParameter,
    SmootherDescriptor,
    SmootherRegistry,
    build_default_registry,
)

_submodules = [
    "basis",
    "exceptions",
    "smooth",
    "tree",
    "utils",
]

__all__ = _submodules + [
    "HyperParameter",
    "SmootherDescriptor",
    "SmootherRegistry",
    "SmootherRegressor",
    "build_default_registry",
]


def __dir__():
    return __all__ + ["__version__"]


def __getattr__(name):
    if name in _submodules:
        return _importlib.import_module(f"scatsmooth.{name}")
    else:
        try:
            return globals()[name]
        except KeyError:
            raise AttributeError(f"Module 'scatsmooth' has no attribute '{name}'")
