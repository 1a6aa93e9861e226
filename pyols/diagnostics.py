"""
Diagnostic plot inputs as plain data.

Three pairs, each with its reference line:

- residuals vs fitted values (horizontal line at 0)
- normal QQ of the residuals (line through the quartiles)
- actual vs predicted (45 degree line)

Computed from a RegressionResult only, so any rendering layer can use them.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np
from scipy import stats

from ._utils import readonly


def ppoints(n: int) -> np.ndarray:
    """Probability points for a normal QQ plot, as R's ``ppoints``."""
    a = 3.0 / 8.0 if n <= 10 else 0.5
    return (np.arange(1, n + 1) - a) / (n + 1 - 2 * a)


def qq_reference_line(sample: np.ndarray) -> Tuple[float, float]:
    """
    Slope and intercept of the line through the first and third quartiles
    of ``sample`` against the matching standard normal quantiles.
    """
    y = np.quantile(sample, [0.25, 0.75])
    x = stats.norm.ppf([0.25, 0.75])
    slope = (y[1] - y[0]) / (x[1] - x[0])
    intercept = y[0] - slope * x[0]
    return float(slope), float(intercept)


@dataclass(frozen=True, eq=False)
class DiagnosticData:
    """Inputs for the three residual diagnostic plots."""
    fitted_values: np.ndarray
    residuals: np.ndarray
    response: np.ndarray
    qq_theoretical: np.ndarray    # standard normal quantiles at ppoints(n)
    qq_sample: np.ndarray         # residuals in ascending order
    qq_line: Tuple[float, float]  # (slope, intercept)

    @classmethod
    def from_result(cls, result) -> "DiagnosticData":
        residuals = np.asarray(result.residuals)
        return cls(
            fitted_values=result.fitted_values,
            residuals=result.residuals,
            response=result.response,
            qq_theoretical=readonly(stats.norm.ppf(ppoints(len(residuals)))),
            qq_sample=readonly(np.sort(residuals)),
            qq_line=qq_reference_line(residuals),
        )

    @property
    def residuals_vs_fitted(self) -> Tuple[np.ndarray, np.ndarray]:
        """(x, y) for Residuals vs Fitted; reference y = 0."""
        return self.fitted_values, self.residuals

    @property
    def normal_qq(self) -> Tuple[np.ndarray, np.ndarray]:
        """(x, y) for the QQ plot; reference line ``qq_line``."""
        return self.qq_theoretical, self.qq_sample

    @property
    def actual_vs_predicted(self) -> Tuple[np.ndarray, np.ndarray]:
        """(x, y) for Actual vs Predicted; reference y = x."""
        return self.response, self.fitted_values


def diagnostic_data(result) -> DiagnosticData:
    """Diagnostic plot inputs for a fitted RegressionResult."""
    return result.diagnostics
