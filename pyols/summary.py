"""
Text rendering of a RegressionResult.
"""

import sys

import numpy as np


def _vec(a) -> str:
    return np.array2string(np.asarray(a), precision=6, separator=', ')


def format_summary(result, n_head: int = 6) -> str:
    """
    Render every field of ``result`` in a fixed order.

    Parameters
    ----------
    result : RegressionResult
    n_head : int
        Number of fitted values / residuals to show

    Returns
    -------
    str
    """
    lines = ["======= Linear Regression Summary ======="]

    def section(title, body):
        lines.append("")
        lines.append(f"{title}:")
        lines.append(body)

    section("Regression Coefficients", _vec(result.coefficients))
    section(f"Fitted Values (First {n_head})", _vec(result.fitted_values[:n_head]))
    section(f"Residuals (First {n_head})", _vec(result.residuals[:n_head]))
    section("Mean Squared Error (MSE)", f"{result.mse:.6g}")
    section("R-squared", f"{result.r_squared:.6g}")
    section("Adjusted R-squared", f"{result.adj_r_squared:.6g}")
    section("Standard Errors", _vec(result.standard_errors))
    section("t-statistics", _vec(result.t_statistics))
    section("p-values", _vec(result.p_values))
    section("F-statistic", f"{result.f_statistic:.6g}")
    section("Degrees of Freedom (df1, df2)", f"{result.df1}, {result.df2}")
    section(
        "Diagnostic Plots",
        "Residuals vs Fitted, QQ Plot of Residuals, Actual vs Predicted Values "
        "(see result.diagnostics)",
    )
    lines.append("=========================================")
    return "\n".join(lines)


def print_regression_summary(result, file=None, n_head: int = 6):
    """Print ``format_summary(result)`` to ``file`` (default stdout)."""
    print(format_summary(result, n_head=n_head), file=file or sys.stdout)


def significance_code(p: float) -> str:
    """R's significance stars for a p-value."""
    if np.isnan(p):
        return ''
    if p < 0.001:
        return ' ***'
    elif p < 0.01:
        return ' **'
    elif p < 0.05:
        return ' *'
    elif p < 0.1:
        return ' .'
    return ''
