"""
Utility functions.
"""

import numpy as np

from .exceptions import ValidationError


def check_array(X, name='X', dtype=np.float64):
    """Validate array input."""
    X = np.asarray(X, dtype=dtype)
    if X.ndim != 2:
        raise ValidationError(f"{name} must be 2-dimensional, got {X.ndim} dimension(s)")
    if X.size == 0:
        raise ValidationError(f"{name} is empty (shape {X.shape})")
    if not np.all(np.isfinite(X)):
        raise ValidationError(f"{name} contains NaN or Inf")
    return X


def check_vector(y, name='y', dtype=np.float64):
    """Validate vector input. A column vector (n, 1) is flattened."""
    y = np.asarray(y, dtype=dtype)
    if y.ndim == 2 and y.shape[1] == 1:
        y = y[:, 0]
    if y.ndim != 1:
        raise ValidationError(f"{name} must be 1-dimensional, got shape {y.shape}")
    if y.size == 0:
        raise ValidationError(f"{name} is empty")
    if not np.all(np.isfinite(y)):
        raise ValidationError(f"{name} contains NaN or Inf")
    return y


def has_constant_column(X: np.ndarray) -> bool:
    """True if some column of X is constant and non-zero (an intercept)."""
    first = X[0, :]
    return bool(np.any(np.all(X == first, axis=0) & (first != 0)))


def readonly(a: np.ndarray) -> np.ndarray:
    """Return a read-only copy of ``a``."""
    a = np.array(a, dtype=np.float64, copy=True)
    a.setflags(write=False)
    return a
