"""
Test the R-style LinearRegression interface.
"""

import pytest
import numpy as np
import pandas as pd
from scipy import stats

from pyols import linear_regression, LinearRegression


@pytest.fixture
def data():
    return pd.DataFrame({
        'x': [1.0, 2.0, 3.0, 4.0, 5.0],
        'y': [1.0, 3.0, 2.0, 5.0, 4.0],
    })


class TestLinearRegression:

    def test_dataframe_interface(self, data):
        model = linear_regression(y='y', X=['x'], data=data)
        assert isinstance(model, LinearRegression)
        assert model.var_names == ['(Intercept)', 'x']
        assert model.y_name == 'y'
        np.testing.assert_allclose(model.coefficients, [0.6, 0.8], atol=1e-10)

    def test_string_predictor(self, data):
        model = linear_regression(y='y', X='x', data=data)
        assert model.X_names == ['x']

    def test_array_interface(self, data):
        model = linear_regression(y=data['y'].values, X=data['x'].values)
        assert model.var_names == ['(Intercept)', 'x1']
        np.testing.assert_allclose(model.coefficients, [0.6, 0.8], atol=1e-10)

    def test_requires_data_for_names(self):
        with pytest.raises(ValueError, match="Must provide data"):
            linear_regression(y='y', X=['x'])

    def test_missing_columns_listed(self, data):
        with pytest.raises(KeyError, match=r"Columns not found in data: \['w'\]"):
            linear_regression(y='y', X=['x', 'w'], data=data)
        with pytest.raises(KeyError, match="Columns not found in data"):
            linear_regression(y='outcome', X=['x'], data=data)

    def test_named_coefficients(self, data):
        coef = linear_regression(y='y', X=['x'], data=data).coef
        assert isinstance(coef, pd.Series)
        assert coef['x'] == pytest.approx(0.8)
        assert coef['(Intercept)'] == pytest.approx(0.6)

    def test_conf_int(self, data):
        model = linear_regression(y='y', X=['x'], data=data)
        ci = model.conf_int()
        t_crit = stats.t.ppf(0.975, 3)
        assert list(ci.columns) == ['lower', 'upper']
        assert ci.loc['x', 'lower'] == pytest.approx(0.8 - t_crit * np.sqrt(0.12))
        assert ci.loc['x', 'upper'] == pytest.approx(0.8 + t_crit * np.sqrt(0.12))

    def test_conf_int_narrows_with_alpha(self, data):
        model = linear_regression(y='y', X=['x'], data=data)
        wide = model.conf_int(0.01)
        narrow = model.conf_int(0.10)
        assert (wide['upper'] - wide['lower'] > narrow['upper'] - narrow['lower']).all()

    def test_conf_int_bad_alpha(self, data):
        model = linear_regression(y='y', X=['x'], data=data)
        with pytest.raises(ValueError, match="alpha"):
            model.conf_int(1.5)

    def test_predict(self, data):
        model = linear_regression(y='y', X=['x'], data=data)
        new = pd.DataFrame({'x': [0.0, 10.0]})
        np.testing.assert_allclose(model.predict(new), [0.6, 8.6], atol=1e-10)
        np.testing.assert_allclose(model.predict(np.array([0.0, 10.0])), [0.6, 8.6], atol=1e-10)

    def test_predict_wrong_columns(self, data):
        model = linear_regression(y='y', X=['x'], data=data)
        with pytest.raises(ValueError, match="columns"):
            model.predict(np.ones((2, 3)))

    def test_without_intercept(self, data):
        with pytest.warns(UserWarning, match="intercept"):
            model = linear_regression(y='y', X=['x'], data=data, intercept=False)
        assert model.var_names == ['x']
        assert len(model.coefficients) == 1

    def test_summary(self, data, capsys):
        linear_regression(y='y', X=['x'], data=data).summary()
        out = capsys.readouterr().out
        assert 'LINEAR REGRESSION RESULTS' in out
        assert '(Intercept)' in out
        assert 'Multiple R-squared:      0.6400' in out
        assert 'Adjusted R-squared:      0.5200' in out
        assert 'on 1 and 3 DF' in out
        assert 'Backend: cpu_fp64' in out

    def test_repr(self, data):
        model = linear_regression(y='y', X=['x'], data=data)
        assert repr(model) == "LinearRegression(n=5, p=2, R²=0.640)"
