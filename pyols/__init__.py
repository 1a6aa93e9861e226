"""
pyols: ordinary least squares regression with R-style inferential output.

Copyright (C) 2024 SGCX
Licensed under GPL-3.0
"""

__version__ = "1.0.0"

# Import main user-facing API
from .ols import fit, RegressionResult
from .lm import linear_regression, LinearRegression
from .diagnostics import DiagnosticData, diagnostic_data
from .summary import format_summary, print_regression_summary
from .io import design_matrix, load_xy, read_csv_xy
from .exceptions import (
    PyOLSError,
    ValidationError,
    DimensionMismatchError,
    SingularMatrixError,
    DegenerateDegreesOfFreedomError,
)

# Import backend utilities (for advanced users)
from ._backends import get_backend, list_available_backends

__all__ = [
    'fit',
    'RegressionResult',
    'linear_regression',
    'LinearRegression',
    'DiagnosticData',
    'diagnostic_data',
    'format_summary',
    'print_regression_summary',
    'design_matrix',
    'load_xy',
    'read_csv_xy',
    'PyOLSError',
    'ValidationError',
    'DimensionMismatchError',
    'SingularMatrixError',
    'DegenerateDegreesOfFreedomError',
    'get_backend',
    'list_available_backends',
]
