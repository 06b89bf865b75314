"""Exceptions raised by the smoothing engine."""

# Authors: Ching-Chuan Chen
# SPDX-License-Identifier: MIT


class SmootherError(ValueError):
    """Base class for every error raised by scatsmooth."""


class DimensionMismatchError(SmootherError):
    """Input arrays have mismatched lengths, wrong shape, or too few points."""


class InvalidParameterError(SmootherError):
    """A hyperparameter is missing, unknown, out of range, or of the wrong kind."""


class NumericError(SmootherError, ArithmeticError):
    """A computation is undefined for the given data.

    Raised for singular or ill-conditioned linear systems, zero standard
    deviations, zero total weights and statistics of empty inputs.
    """


class SmootherNotFoundError(SmootherError, KeyError):
    """No smoother is registered under the requested identifier."""

    def __str__(self):
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""
