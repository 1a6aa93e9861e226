"""
Test the text reporter.
"""

import io

import numpy as np
import pytest

from pyols import fit, format_summary, print_regression_summary
from pyols.summary import significance_code


SECTIONS = [
    "Regression Coefficients:",
    "Fitted Values (First 6):",
    "Residuals (First 6):",
    "Mean Squared Error (MSE):",
    "R-squared:",
    "Adjusted R-squared:",
    "Standard Errors:",
    "t-statistics:",
    "p-values:",
    "F-statistic:",
    "Degrees of Freedom (df1, df2):",
    "Diagnostic Plots:",
]


@pytest.fixture
def result():
    X = np.column_stack([np.ones(8), np.arange(8.0)])
    y = np.array([1.0, 2.5, 2.9, 4.2, 5.1, 5.8, 7.3, 8.0])
    return fit(X, y)


class TestFormatSummary:

    def test_sections_in_order(self, result):
        text = format_summary(result)
        positions = [text.index(s) for s in SECTIONS]
        assert positions == sorted(positions)
        assert text.startswith("======= Linear Regression Summary =======")
        assert text.rstrip().endswith("=========================================")

    def test_head_length(self, result):
        text = format_summary(result, n_head=3)
        assert "Fitted Values (First 3):" in text
        block = text.split("Fitted Values (First 3):\n")[1].split("\n")[0]
        assert block.count(",") == 2

    def test_degrees_of_freedom(self, result):
        assert "Degrees of Freedom (df1, df2):\n1, 6" in format_summary(result)

    def test_print(self, result, capsys):
        print_regression_summary(result)
        assert "Linear Regression Summary" in capsys.readouterr().out

    def test_print_to_file(self, result):
        buf = io.StringIO()
        print_regression_summary(result, file=buf)
        assert buf.getvalue().strip() == format_summary(result).strip()


@pytest.mark.parametrize("p, code", [
    (0.0001, ' ***'),
    (0.005, ' **'),
    (0.03, ' *'),
    (0.07, ' .'),
    (0.5, ''),
    (float('nan'), ''),
])
def test_significance_code(p, code):
    assert significance_code(p) == code
