"""
Build a design matrix and response vector from tabular data.
"""

from typing import List, Tuple, Union

import numpy as np
import pandas as pd


def _require_columns(data: pd.DataFrame, columns: List[str]):
    missing = [c for c in columns if c not in data.columns]
    if missing:
        raise KeyError(f"Columns not found in data: {missing}")


def design_matrix(data: pd.DataFrame, columns: Union[str, List[str]],
                  intercept: bool = True) -> np.ndarray:
    """
    Numeric design matrix from ``columns`` of ``data``.

    With ``intercept=True`` a column of 1s is prepended.
    """
    if isinstance(columns, str):
        columns = [columns]
    _require_columns(data, columns)

    X = data[columns].to_numpy(dtype=np.float64)
    if intercept:
        X = np.column_stack([np.ones(len(X)), X])
    return X


def load_xy(data: pd.DataFrame, y: str, X: Union[str, List[str]],
            intercept: bool = True) -> Tuple[np.ndarray, np.ndarray]:
    """
    Design matrix and response from a DataFrame.

    Examples
    --------
    >>> df = pd.DataFrame({'x': [1, 2, 3], 'y': [2, 4, 7]})
    >>> X, Y = load_xy(df, y='y', X='x')
    >>> X.shape
    (3, 2)
    """
    _require_columns(data, [y])
    return design_matrix(data, X, intercept=intercept), data[y].to_numpy(dtype=np.float64)


def read_csv_xy(path, y: str, X: Union[str, List[str]], intercept: bool = True,
                **read_csv_kwargs) -> Tuple[np.ndarray, np.ndarray]:
    """Read a CSV file with pandas and return ``load_xy`` of it."""
    data = pd.read_csv(path, **read_csv_kwargs)
    return load_xy(data, y=y, X=X, intercept=intercept)
