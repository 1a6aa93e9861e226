"""
CPU backend using NumPy + SciPy.

This is the reference implementation, always available.
"""

import numpy as np
from scipy import linalg

from .base import BackendBase, NormalEquationsSolution
from ..exceptions import SingularMatrixError


class CPUBackendFP64(BackendBase):
    """
    CPU backend using NumPy + SciPy.

    Always uses FP64 precision.
    """

    def __init__(self):
        self.name = "cpu_fp64"
        self.precision = "fp64"

    def solve_normal_equations(
        self,
        X: np.ndarray,
        y: np.ndarray,
    ) -> NormalEquationsSolution:
        """
        Solve beta = (X'X)^-1 X'y using LAPACK inversion.
        """
        X = np.asarray(X, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        p = X.shape[1]

        # Rank via SVD catches collinearity that LU on X'X can miss
        rank = int(np.linalg.matrix_rank(X))
        if rank < p:
            raise SingularMatrixError(
                f"X'X is singular: design matrix has rank {rank} < {p} columns",
                rank=rank,
                expected_rank=p,
            )

        gram = X.T @ X
        try:
            gram_inv = linalg.inv(gram)
        except linalg.LinAlgError as e:
            raise SingularMatrixError(
                f"X'X could not be inverted: {e}",
                rank=rank,
                expected_rank=p,
            ) from e

        coef = gram_inv @ (X.T @ y)
        fitted = X @ coef
        residuals = y - fitted

        return NormalEquationsSolution(
            coef=coef,
            gram_inv=gram_inv,
            fitted_values=fitted,
            residuals=residuals,
            rank=rank,
        )

    def get_device_info(self) -> dict:
        """Get backend information."""
        import scipy
        return {
            'backend': 'cpu',
            'precision': 'fp64',
            'library': f'NumPy {np.__version__}, SciPy {scipy.__version__}',
        }
