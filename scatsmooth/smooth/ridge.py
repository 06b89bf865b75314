"""Ridge regression on standardised data."""

# Authors: Ching-Chuan Chen
# SPDX-License-Identifier: MIT

import logging
import warnings
from dataclasses import dataclass
from typing import Union

import numpy as np
import scipy.linalg
from scipy.linalg import LinAlgError, LinAlgWarning

from scatsmooth.exceptions import DimensionMismatchError, InvalidParameterError, NumericError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Standardization:
    """Translation and scale factors that standardise a vector or matrix columns.

    Attributes
    ----------
    mean : float or np.ndarray of shape (n_features,)
        Value(s) subtracted before scaling.
    sd : float or np.ndarray of shape (n_features,)
        Sample standard deviation(s) divided out after centering.
    """

    mean: Union[float, np.ndarray]
    sd: Union[float, np.ndarray]


@dataclass(frozen=True)
class RidgeFit:
    """Everything needed to score new rows with a fitted ridge regression.

    Attributes
    ----------
    coefficients : np.ndarray of shape (n_features,)
        Coefficients on the standardised scale.
    x_standardization : Standardization
        Per-column mean and sd of the training design matrix.
    y_standardization : Standardization
        Mean and sd of the training response.
    """

    coefficients: np.ndarray
    x_standardization: Standardization
    y_standardization: Standardization

    def predict(self, X: np.ndarray) -> np.ndarray:
        """Score the rows of an (already basis-expanded) design matrix."""
        X = np.asarray(X, dtype=np.float64)
        if X.ndim != 2 or X.shape[1] != self.coefficients.size:
            raise DimensionMismatchError(f"X must have shape (n, {self.coefficients.size}), got {X.shape}.")
        standardized = standardize_matrix(X, self.x_standardization)
        return standardized @ self.coefficients * self.y_standardization.sd + self.y_standardization.mean


def compute_vector_standardization(v: np.ndarray) -> Standardization:
    """Mean and sample standard deviation of `v`.

    Raises
    ------
    NumericError
        If `v` has fewer than 2 values or zero standard deviation.
    """
    v = np.asarray(v, dtype=np.float64)
    if v.size < 2:
        raise NumericError(f"Standardization needs at least 2 values, got {v.size}.")
    sd = float(np.std(v, ddof=1))
    if sd == 0:
        raise NumericError("Cannot standardize a constant vector (standard deviation is zero).")
    return Standardization(mean=float(np.mean(v)), sd=sd)


def compute_matrix_standardization(X: np.ndarray) -> Standardization:
    """Column-wise mean and sample standard deviation of `X`."""
    X = np.asarray(X, dtype=np.float64)
    if X.shape[0] < 2:
        raise NumericError(f"Standardization needs at least 2 rows, got {X.shape[0]}.")
    sd = np.std(X, axis=0, ddof=1)
    constant_columns = np.flatnonzero(sd == 0)
    if constant_columns.size > 0:
        raise NumericError(f"Cannot standardize constant column(s) {constant_columns.tolist()} of the design matrix.")
    return Standardization(mean=np.mean(X, axis=0), sd=sd)


def standardize_vector(v: np.ndarray, standardization: Standardization) -> np.ndarray:
    return (np.asarray(v, dtype=np.float64) - standardization.mean) / standardization.sd


def standardize_matrix(X: np.ndarray, standardization: Standardization) -> np.ndarray:
    return (np.asarray(X, dtype=np.float64) - standardization.mean) / standardization.sd


def make_ridge_shrinkage_matrix(n: int, lam: float) -> np.ndarray:
    """``lam * I`` of size `n` with the ``[0, 0]`` entry zeroed.

    The first feature of every basis is the linear term, which is never shrunk.
    """
    shrink_matrix = lam * np.eye(n)
    if n > 0:
        shrink_matrix[0, 0] = 0.0
    return shrink_matrix


def fit_ridge_regression(X: np.ndarray, y: np.ndarray, lam: float) -> RidgeFit:
    r"""Fit a ridge regression of `y` on the columns of `X`.

    Both the columns of `X` and `y` are standardised to zero mean and unit
    sample standard deviation, then the penalised normal equations

    .. math::
        (X^\top X + \Lambda)\,\beta = X^\top y

    are solved, where :math:`\Lambda = \lambda I` except :math:`\Lambda_{00} = 0`.

    Parameters
    ----------
    X : np.ndarray of shape (n_samples, n_features)
        Design matrix (a basis expansion of the predictor).
    y : np.ndarray of shape (n_samples,)
        Response.
    lam : float
        Shrinkage strength, ``lam >= 0``.

    Returns
    -------
    RidgeFit
        Standardised coefficients and both standardisations.

    Raises
    ------
    DimensionMismatchError
        If `X` is not 2D or its row count differs from ``len(y)``.
    InvalidParameterError
        If `lam` is negative or not finite.
    NumericError
        If any column of `X` or `y` is constant, or the linear system is
        singular or too ill-conditioned to solve reliably.
    """
    X = np.asarray(X, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    if X.ndim != 2:
        raise DimensionMismatchError("X must be a 2D array.")
    if y.ndim != 1:
        raise DimensionMismatchError("y must be a 1D array.")
    if X.shape[0] != y.size:
        raise DimensionMismatchError(f"y must have the same number of rows as X, got {y.size} vs {X.shape[0]}.")
    if X.shape[1] == 0:
        raise DimensionMismatchError("X must have at least one column.")
    if lam is None or not np.isfinite(lam) or lam < 0:
        raise InvalidParameterError(f"Ridge shrinkage, lambda, should be a non-negative number, got {lam!r}.")

    x_standardization = compute_matrix_standardization(X)
    y_standardization = compute_vector_standardization(y)
    Xs = standardize_matrix(X, x_standardization)
    ys = standardize_vector(y, y_standardization)

    XtX = Xs.T @ Xs
    Xty = Xs.T @ ys
    lhs = XtX + make_ridge_shrinkage_matrix(X.shape[1], lam)
    try:
        with warnings.catch_warnings():
            warnings.simplefilter("error", LinAlgWarning)
            betas = scipy.linalg.solve(lhs, Xty, assume_a="sym")
    except (LinAlgError, LinAlgWarning) as e:
        raise NumericError(f"Ridge system is singular or ill-conditioned: {e!s}") from e

    logger.debug("Fitted ridge regression: n_samples=%d, n_features=%d, lambda=%g", X.shape[0], X.shape[1], lam)
    return RidgeFit(coefficients=betas, x_standardization=x_standardization, y_standardization=y_standardization)
