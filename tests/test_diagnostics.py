"""
Test diagnostic plot inputs.
"""

import pytest
import numpy as np
from scipy import stats

from pyols import fit, diagnostic_data, DiagnosticData
from pyols.diagnostics import ppoints, qq_reference_line


@pytest.fixture
def result():
    rng = np.random.default_rng(7)
    n = 30
    x = rng.uniform(0, 10, n)
    y = 1.0 + 0.5 * x + rng.standard_normal(n)
    return fit(np.column_stack([np.ones(n), x]), y)


class TestPPoints:
    """Plotting positions match R's ppoints()."""

    def test_small_n(self):
        # R: ppoints(4) -> (1:4 - 3/8) / (4 + 1/4)
        np.testing.assert_allclose(ppoints(4), (np.arange(1, 5) - 0.375) / 4.25)

    def test_large_n(self):
        # R: ppoints(20) -> (1:20 - 1/2) / 20
        np.testing.assert_allclose(ppoints(20), (np.arange(1, 21) - 0.5) / 20)

    def test_symmetric(self):
        p = ppoints(11)
        np.testing.assert_allclose(p + p[::-1], np.ones(11))


class TestQQLine:

    def test_normal_quantiles_give_unit_line(self):
        sample = stats.norm.ppf(ppoints(101))
        slope, intercept = qq_reference_line(sample)
        assert slope == pytest.approx(1.0, abs=0.05)
        assert intercept == pytest.approx(0.0, abs=1e-10)

    def test_scaled_sample(self):
        sample = 3.0 + 2.0 * stats.norm.ppf(ppoints(101))
        slope, intercept = qq_reference_line(sample)
        base_slope, _ = qq_reference_line(stats.norm.ppf(ppoints(101)))
        assert slope == pytest.approx(2.0 * base_slope)
        assert intercept == pytest.approx(3.0, abs=1e-10)


class TestDiagnosticData:

    def test_three_pairs(self, result):
        diag = result.diagnostics
        assert isinstance(diag, DiagnosticData)

        x, y = diag.residuals_vs_fitted
        np.testing.assert_array_equal(x, result.fitted_values)
        np.testing.assert_array_equal(y, result.residuals)

        x, y = diag.actual_vs_predicted
        np.testing.assert_array_equal(x, result.response)
        np.testing.assert_array_equal(y, result.fitted_values)

    def test_normal_qq(self, result):
        x, y = result.diagnostics.normal_qq
        assert x.shape == y.shape == (30,)
        assert np.all(np.diff(x) > 0)
        assert np.all(np.diff(y) >= 0)
        np.testing.assert_allclose(np.sort(result.residuals), y)

    def test_cached(self, result):
        assert result.diagnostics is result.diagnostics

    def test_function_form(self, result):
        assert diagnostic_data(result) is result.diagnostics

    def test_read_only(self, result):
        x, y = result.diagnostics.normal_qq
        with pytest.raises(ValueError):
            x[0] = 0.0
