"""
Abstract base classes for backends.

Defines the interface all backends must implement.
"""

from abc import ABC, abstractmethod
import numpy as np
from dataclasses import dataclass


@dataclass
class NormalEquationsSolution:
    """Raw solution of the normal equations (all numpy arrays)."""
    coef: np.ndarray           # (X'X)^-1 X'y
    gram_inv: np.ndarray       # (X'X)^-1, reused for the covariance matrix
    fitted_values: np.ndarray  # X @ coef
    residuals: np.ndarray      # y - fitted
    rank: int                  # Numerical rank of X


class BackendBase(ABC):
    """Abstract base class for all backends."""

    name = "base"
    precision = "fp64"

    @abstractmethod
    def solve_normal_equations(
        self,
        X: np.ndarray,
        y: np.ndarray,
    ) -> NormalEquationsSolution:
        """
        Solve the OLS normal equations by explicit inversion of X'X.

        Backends implement ALL computation internally using their
        native types, only converting at entry/exit.

        Parameters
        ----------
        X : ndarray, shape (n, p)
            Design matrix (intercept column, if any, already included)
        y : ndarray, shape (n,)
            Response vector

        Returns
        -------
        NormalEquationsSolution
            Coefficients, inverse Gram matrix, fitted values, residuals

        Raises
        ------
        SingularMatrixError
            If X is rank deficient or X'X cannot be inverted
        """
        pass

    @abstractmethod
    def get_device_info(self) -> dict:
        """Get backend information."""
        pass

    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r})"
