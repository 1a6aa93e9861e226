"""
Exception hierarchy for pyols.

Every error raised by a fit derives from PyOLSError, so callers can catch
the whole family at once. The concrete classes also derive from the
matching builtin (ValueError, LinAlgError, ArithmeticError) so existing
``except ValueError`` style handlers keep working.
"""

from typing import Optional

import numpy as np


class PyOLSError(Exception):
    """Base exception for all pyols errors."""
    pass


class ValidationError(PyOLSError, ValueError):
    """
    Input validation failed.

    Raised for arrays with the wrong number of dimensions, empty arrays,
    or arrays containing NaN/Inf.
    """
    pass


class DimensionMismatchError(ValidationError):
    """
    Row count of the design matrix does not match the response length.

    Attributes
    ----------
    n_rows : int
        Number of rows in X
    n_response : int
        Length of Y
    """

    def __init__(self, message: str, n_rows: Optional[int] = None,
                 n_response: Optional[int] = None):
        super().__init__(message)
        self.n_rows = n_rows
        self.n_response = n_response


class SingularMatrixError(PyOLSError, np.linalg.LinAlgError):
    """
    Gram matrix X'X is not invertible.

    Raised for perfectly collinear predictors or when there are more
    columns than observations.

    Attributes
    ----------
    rank : int
        Numerical rank of X, if computed
    expected_rank : int
        Number of columns of X
    """

    def __init__(self, message: str, rank: Optional[int] = None,
                 expected_rank: Optional[int] = None):
        super().__init__(message)
        self.rank = rank
        self.expected_rank = expected_rank


class DegenerateDegreesOfFreedomError(PyOLSError, ArithmeticError):
    """
    Residual degrees of freedom n - p is zero.

    The residual variance, and everything derived from it, is undefined.

    Attributes
    ----------
    n_obs : int
        Number of observations
    n_params : int
        Number of columns of X
    """

    def __init__(self, message: str, n_obs: Optional[int] = None,
                 n_params: Optional[int] = None):
        super().__init__(message)
        self.n_obs = n_obs
        self.n_params = n_params


__all__ = [
    'PyOLSError',
    'ValidationError',
    'DimensionMismatchError',
    'SingularMatrixError',
    'DegenerateDegreesOfFreedomError',
]
