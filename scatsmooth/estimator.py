"""scikit-learn estimator wrapping any registered smoother."""

# Authors: Ching-Chuan Chen
# SPDX-License-Identifier: MIT

import warnings
from typing import Dict, List, Optional, Union

import numpy as np
from sklearn.base import BaseEstimator, RegressorMixin
from sklearn.utils.validation import check_array, check_is_fitted

from scatsmooth.exceptions import DimensionMismatchError
from scatsmooth.registry import SmootherRegistry, build_default_registry


def _as_single_feature(X, name: str) -> np.ndarray:
    # Handle both (n_samples,) and (n_samples, 1) input shapes
    X = check_array(X, ensure_2d=False, dtype=np.float64)
    if X.ndim == 2:
        if X.shape[1] != 1:
            raise DimensionMismatchError(f"{name} must have exactly 1 feature, got {X.shape[1]}")
        X = X.ravel()
    return X


class SmootherRegressor(RegressorMixin, BaseEstimator):
    """Scatterplot smoother with the scikit-learn estimator interface.

    Parameters
    ----------
    smoother : str, default="running-mean"
        Identifier of the smoother in `registry`.
    parameters : dict, optional
        Hyperparameter values; missing ones take the registry defaults.
    registry : SmootherRegistry, optional
        Catalogue to look `smoother` up in. Defaults to
        :func:`scatsmooth.registry.build_default_registry`.

    Attributes
    ----------
    parameters_ : dict
        Resolved hyperparameters used for the fit.
    predict_fn_ : callable
        The prediction function returned by the smoother's fit.
    n_features_in_ : int
        Always 1.

    Examples
    --------
    >>> import numpy as np
    >>> x = np.linspace(0.0, 1.0, 11)
    >>> model = SmootherRegressor("linear").fit(x, 2.0 * x + 1.0)
    >>> round(float(model.predict([0.5])[0]), 6)
    2.0
    """

    def __init__(
        self,
        smoother: str = "running-mean",
        parameters: Optional[Dict[str, float]] = None,
        registry: Optional[SmootherRegistry] = None,
    ) -> None:
        self.smoother = smoother
        self.parameters = parameters
        self.registry = registry

    def fit(self, X: Union[np.ndarray, List[float]], y: Union[np.ndarray, List[float]]) -> "SmootherRegressor":
        """Fit the smoother.

        Parameters
        ----------
        X : array-like of shape (n_samples,) or (n_samples, 1)
            Training inputs.
        y : array-like of shape (n_samples,)
            Training targets.

        Returns
        -------
        SmootherRegressor
            Fitted estimator (self).

        Raises
        ------
        SmootherNotFoundError
            If `smoother` is not registered.
        SmootherError
            Any error raised by the smoother itself.
        """
        registry = self.registry if self.registry is not None else build_default_registry()
        descriptor = registry.lookup(self.smoother)
        self.parameters_ = descriptor.resolve_parameters(self.parameters)

        X = _as_single_feature(X, "X")
        y = check_array(y, ensure_2d=False, dtype=np.float64)
        if y.ndim != 1 or y.size != X.size:
            raise DimensionMismatchError("y must be a 1D array with the same size as X.")
        if X.size <= 3:
            warnings.warn("The number of samples is less than or equal to 3. The fitted curve may be unreliable.")

        self.predict_fn_ = descriptor.smoother(self.parameters_)(X, y)
        self.n_features_in_ = 1
        return self

    def predict(self, X: Union[np.ndarray, List[float]]) -> np.ndarray:
        """Predict responses at new inputs.

        Parameters
        ----------
        X : array-like of shape (m,) or (m, 1)
            Query points.

        Returns
        -------
        np.ndarray of shape (m,)
            Predicted values.

        Raises
        ------
        sklearn.exceptions.NotFittedError
            If the model is not fitted.
        """
        check_is_fitted(self, ["predict_fn_", "parameters_"])
        return self.predict_fn_(_as_single_feature(X, "X"))
