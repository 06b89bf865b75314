"""Kernel types and weights for the distance-weighted smoothers."""

# Authors: Ching-Chuan Chen
# SPDX-License-Identifier: MIT

from enum import Enum

import numpy as np

from scatsmooth.exceptions import InvalidParameterError


class KernelType(Enum):
    """Enum for kernel types used in local smoothing."""

    GAUSSIAN = 0
    TRICUBE = 105

    def __repr__(self):
        return f"KernelType.{self.name}"

    def __str__(self):
        return self.name


def calculate_kernel_weights(distances: np.ndarray, bandwidth: float, kernel_type: KernelType = KernelType.GAUSSIAN) -> np.ndarray:
    """Map distances to non-negative, un-normalised weights.

    Parameters
    ----------
    distances : np.ndarray
        Signed or absolute distances between query and training points.
    bandwidth : float
        Kernel width, positive. For the Gaussian kernel the weight is
        ``exp(-d^2 / bandwidth)``; for the tricube kernel it is
        ``(1 - |d / bandwidth|^3)^3`` inside ``|d| < bandwidth`` and 0 outside.
    kernel_type : KernelType, default=KernelType.GAUSSIAN

    Returns
    -------
    np.ndarray
        Weights with the shape of `distances`.
    """
    if bandwidth is None or np.isnan(bandwidth) or bandwidth <= 0:
        raise InvalidParameterError("Bandwidth, bandwidth, should be positive.")
    if not isinstance(kernel_type, KernelType):
        raise InvalidParameterError(f"kernel must be one of {list(KernelType)}.")
    distances = np.asarray(distances, dtype=np.float64)
    if kernel_type is KernelType.GAUSSIAN:
        return np.exp(-(distances**2) / bandwidth)
    u = np.abs(distances) / bandwidth
    return np.where(u < 1.0, (1.0 - u**3) ** 3, 0.0)
