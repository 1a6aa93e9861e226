"""
GPU backend using PyTorch with FP64 precision.

Falls back to the torch CPU device when CUDA is unavailable.
"""

import numpy as np
import warnings
from typing import Optional

from .base import BackendBase, NormalEquationsSolution
from ..exceptions import SingularMatrixError


class PyTorchBackendFP64(BackendBase):
    """
    PyTorch backend with FP64 precision.

    Keeps all computation on the device using torch tensors.
    Only converts at entry (numpy -> torch) and exit (torch -> numpy).
    FP64 only: the explicit inverse of X'X is too fragile in FP32.
    """

    def __init__(self, device: Optional[str] = None):
        """Initialize PyTorch FP64 backend."""
        self.name = "pytorch_fp64"
        self.precision = "fp64"

        try:
            import torch
            self.torch = torch
        except ImportError:
            raise ImportError(
                "PyTorch required for GPU backend. "
                "Install: pip install torch"
            )

        if device == 'mps':
            raise RuntimeError(
                "FP64 not supported on Apple Metal. "
                "Use backend='cpu'."
            )

        if device is None:
            if torch.cuda.is_available():
                device = 'cuda'
            else:
                warnings.warn("No CUDA GPU available, using CPU")
                device = 'cpu'

        self.device = torch.device(device)

    def solve_normal_equations(
        self,
        X: np.ndarray,
        y: np.ndarray,
    ) -> NormalEquationsSolution:
        """
        Solve beta = (X'X)^-1 X'y on the device with FP64 precision.
        """
        torch = self.torch

        X_gpu = torch.from_numpy(np.ascontiguousarray(X, dtype=np.float64)).to(self.device)
        y_gpu = torch.from_numpy(np.ascontiguousarray(y, dtype=np.float64)).to(self.device)
        p = X_gpu.shape[1]

        rank = int(torch.linalg.matrix_rank(X_gpu).item())
        if rank < p:
            raise SingularMatrixError(
                f"X'X is singular: design matrix has rank {rank} < {p} columns",
                rank=rank,
                expected_rank=p,
            )

        gram = X_gpu.T @ X_gpu
        try:
            gram_inv = torch.linalg.inv(gram)
        except torch.linalg.LinAlgError as e:
            raise SingularMatrixError(
                f"X'X could not be inverted: {e}",
                rank=rank,
                expected_rank=p,
            ) from e

        coef = gram_inv @ (X_gpu.T @ y_gpu)
        fitted = X_gpu @ coef
        residuals = y_gpu - fitted

        return NormalEquationsSolution(
            coef=coef.cpu().numpy(),
            gram_inv=gram_inv.cpu().numpy(),
            fitted_values=fitted.cpu().numpy(),
            residuals=residuals.cpu().numpy(),
            rank=rank,
        )

    def get_device_info(self) -> dict:
        """Get backend information."""
        return {
            'backend': 'gpu' if self.device.type == 'cuda' else 'cpu',
            'precision': 'fp64',
            'device': str(self.device),
            'library': f'PyTorch {self.torch.__version__}',
        }
