"""
Backend selection and management.

Provides a unified interface for the CPU (NumPy/SciPy) and PyTorch backends.
"""

import warnings

from .base import BackendBase, NormalEquationsSolution

# Try importing CPU backend (always available)
try:
    from .cpu_fp64_backend import CPUBackendFP64
    CPU_AVAILABLE = True
except ImportError:
    CPU_AVAILABLE = False
    warnings.warn("CPU backend unavailable - installation error!")

# PyTorch is optional
try:
    import torch
    from .gpu_fp64_backend import PyTorchBackendFP64
    PYTORCH_AVAILABLE = True
except ImportError:
    PYTORCH_AVAILABLE = False


def _cuda_available() -> bool:
    return PYTORCH_AVAILABLE and torch.cuda.is_available()


def get_backend(backend: str = 'cpu') -> BackendBase:
    """
    Get computational backend.

    Parameters
    ----------
    backend : str
        Backend selection:
        - 'cpu': CPU with NumPy/SciPy (FP64, default)
        - 'pytorch': PyTorch FP64 (CUDA if present, else torch CPU)
        - 'auto': PyTorch on a CUDA GPU if one is present, else CPU

    Returns
    -------
    BackendBase
        Backend instance

    Examples
    --------
    >>> backend = get_backend('cpu')
    >>> backend.name
    'cpu_fp64'
    """
    if isinstance(backend, BackendBase):
        return backend

    if backend == 'auto':
        if _cuda_available():
            return PyTorchBackendFP64()
        if not CPU_AVAILABLE:
            raise RuntimeError("No backends available!")
        return CPUBackendFP64()

    elif backend == 'cpu':
        if not CPU_AVAILABLE:
            raise RuntimeError("CPU backend unavailable!")
        return CPUBackendFP64()

    elif backend == 'pytorch':
        if not PYTORCH_AVAILABLE:
            raise RuntimeError(
                "PyTorch backend unavailable.\n"
                "Install: pip install torch"
            )
        return PyTorchBackendFP64()

    else:
        raise ValueError(
            f"Unknown backend: '{backend}'\n"
            f"Valid options: 'auto', 'cpu', 'pytorch'"
        )


def list_available_backends() -> list:
    """List names of available backends."""
    backends = []
    if CPU_AVAILABLE:
        backends.append('cpu')
    if PYTORCH_AVAILABLE:
        backends.append('pytorch')
    return backends


def print_backend_info():
    """Print detailed backend information (diagnostic)."""
    print("pyols Backend Status")
    print("=" * 50)
    print(f"\nAvailable Backends:")
    print(f"  CPU (FP64):          {'✓' if CPU_AVAILABLE else '✗'} - normal equations (NumPy/SciPy)")
    print(f"  PyTorch (FP64):      {'✓' if PYTORCH_AVAILABLE else '✗'} - normal equations (torch)")

    print(f"\nHardware Detection:")
    if _cuda_available():
        print(f"  CUDA GPU: {torch.cuda.get_device_name(0)}")
    else:
        print(f"  No CUDA GPU detected")

    print(f"\nRecommended Backend:")
    try:
        backend = get_backend('auto')
        print(f"  {backend.name}")
    except Exception as e:
        print(f"  Error: {e}")


__all__ = [
    'get_backend',
    'list_available_backends',
    'print_backend_info',
    'BackendBase',
    'NormalEquationsSolution',
    'CPU_AVAILABLE',
    'PYTORCH_AVAILABLE',
]


if __name__ == "__main__":
    print_backend_info()
