"""
Linear regression with R-style interface and output.

This is the user-facing API that statisticians actually use.
"""

import numpy as np
import pandas as pd
from typing import Optional, Union, List
from scipy import stats

from .io import design_matrix
from .ols import fit
from .summary import significance_code


class LinearRegression:
    """
    Fit an OLS linear regression (like R's lm()).

    Examples
    --------
    >>> import pandas as pd
    >>> from pyols import linear_regression
    >>>
    >>> data = pd.read_csv('test.csv')
    >>> model = linear_regression(y='y', X=['x'], data=data)
    >>>
    >>> model.summary()    # Coefficient table like R
    >>> model.coef         # Named coefficients
    >>> model.pvalues      # P-values for each coefficient
    >>> model.conf_int()   # Confidence intervals
    >>> model.predict(new_data)
    """

    def __init__(
        self,
        y: Union[str, np.ndarray],
        X: Union[List[str], np.ndarray],
        data: Optional[pd.DataFrame] = None,
        intercept: bool = True,
        backend: str = 'cpu',
        degenerate: str = 'raise',
    ):
        """
        Fit linear regression model.

        Parameters
        ----------
        y : str or array
            Response variable (outcome)
            - If string: column name in data
            - If array: numeric values
        X : list of str or array
            Predictor variables
            - If list of strings: column names in data
            - If array: numeric matrix (n x k)
        data : DataFrame, optional
            Dataset containing y and X variables
        intercept : bool
            Prepend a column of 1s to X
        backend : str
            Computational backend: 'cpu', 'pytorch', 'auto'
        degenerate : {'raise', 'nan'}
            Behaviour when n equals the number of coefficients
        """
        # Parse inputs
        if isinstance(y, str):
            if data is None:
                raise ValueError("Must provide data when y is a string")
            self.y_values = design_matrix(data, y, intercept=False)[:, 0]
            self.y_name = y
        else:
            self.y_values = np.asarray(y, dtype=np.float64)
            self.y_name = 'y'

        if isinstance(X, str):
            X = [X]
        if isinstance(X, list) and all(isinstance(x, str) for x in X):
            if data is None:
                raise ValueError("Must provide data when X is list of strings")
            self.X_values = design_matrix(data, X, intercept=False)
            self.X_names = X
        else:
            self.X_values = np.asarray(X, dtype=np.float64)
            if self.X_values.ndim == 1:
                self.X_values = self.X_values[:, np.newaxis]
            self.X_names = [f'x{i + 1}' for i in range(self.X_values.shape[1])]

        self.intercept = intercept
        if intercept:
            design = np.column_stack([np.ones(len(self.X_values)), self.X_values])
            self.var_names = ['(Intercept)'] + self.X_names
        else:
            design = self.X_values
            self.var_names = list(self.X_names)

        self.result = fit(design, self.y_values, backend=backend, degenerate=degenerate)

        # R-style shortcuts
        self.coefficients = self.result.coefficients
        self.std_errors = self.result.standard_errors
        self.t_values = self.result.t_statistics
        self.pvalues = self.result.p_values
        self.residuals = self.result.residuals
        self.fitted_values = self.result.fitted_values
        self.n_obs = self.result.n_obs
        self.df_residual = self.result.df2
        self.r_squared = self.result.r_squared
        self.adj_r_squared = self.result.adj_r_squared

    @property
    def coef(self):
        """Named coefficients (pandas Series)."""
        return pd.Series(self.coefficients, index=self.var_names)

    def conf_int(self, alpha: float = 0.05):
        """
        Confidence intervals for coefficients.

        Parameters
        ----------
        alpha : float
            Significance level (default: 0.05 for 95% CI)

        Returns
        -------
        DataFrame
            Confidence intervals with columns 'lower' and 'upper'
        """
        if not 0 < alpha < 1:
            raise ValueError(f"alpha must be in (0, 1), got {alpha}")
        t_crit = stats.t.ppf(1 - alpha/2, self.df_residual)
        lower = self.coefficients - t_crit * self.std_errors
        upper = self.coefficients + t_crit * self.std_errors

        return pd.DataFrame({
            'lower': lower,
            'upper': upper
        }, index=self.var_names)

    def summary(self):
        """
        Print summary of regression results (like R's summary.lm).
        """
        res = self.result
        print()
        print("="*80)
        print("LINEAR REGRESSION RESULTS")
        print("="*80)
        print()

        print(f"Dependent variable: {self.y_name}")
        print(f"Number of observations: {self.n_obs}")
        print(f"Degrees of freedom: {res.df2} (residual), {res.df1} (model)")
        print()

        print("Residuals:")
        residual_summary = pd.Series(self.residuals).describe()
        print(f"  Min:    {residual_summary['min']:>10.4f}")
        print(f"  1Q:     {residual_summary['25%']:>10.4f}")
        print(f"  Median: {residual_summary['50%']:>10.4f}")
        print(f"  3Q:     {residual_summary['75%']:>10.4f}")
        print(f"  Max:    {residual_summary['max']:>10.4f}")
        print()

        print("Coefficients:")
        print("-"*80)
        print(f"{'Variable':<20} {'Estimate':>12} {'Std. Error':>12} {'t value':>10} {'Pr(>|t|)':>12}")
        print("-"*80)

        for i, name in enumerate(self.var_names):
            p = self.pvalues[i]
            if np.isnan(p):
                p_str = 'NA'
            else:
                p_str = f"{p:.4f}" if p >= 0.0001 else "<.0001"
            print(f"{name:<20} {self.coefficients[i]:>12.4f} {self.std_errors[i]:>12.4f} "
                  f"{self.t_values[i]:>10.3f} {p_str:>12}{significance_code(p)}")

        print("-"*80)
        print("Signif. codes:  0 '***' 0.001 '**' 0.01 '*' 0.05 '.' 0.1 ' ' 1")
        print()

        print(f"Residual standard error: {res.sigma:.4f} on {res.df2} degrees of freedom")
        print(f"Mean squared error:      {res.mse:.4f}")
        print(f"Multiple R-squared:      {res.r_squared:.4f}")
        print(f"Adjusted R-squared:      {res.adj_r_squared:.4f}")

        if not np.isnan(res.f_statistic):
            f_pval_str = f"{res.f_pvalue:.4e}" if res.f_pvalue >= 2.2e-16 else "< 2.2e-16"
            print(f"F-statistic:             {res.f_statistic:.2f} on {res.df1} and {res.df2} DF, p-value: {f_pval_str}")

        print()
        print(f"Backend: {res.backend}")
        print("="*80)
        print()

    def predict(self, newdata: Union[pd.DataFrame, np.ndarray]) -> np.ndarray:
        """
        Predict response for new data.

        Parameters
        ----------
        newdata : DataFrame or array
            New predictor values (without the intercept column)
            - If DataFrame: must have columns matching self.X_names
            - If array: must have same number of columns as X

        Returns
        -------
        array
            Predicted values
        """
        if isinstance(newdata, pd.DataFrame):
            X_new = newdata[self.X_names].to_numpy(dtype=np.float64)
        else:
            X_new = np.asarray(newdata, dtype=np.float64)
            if X_new.ndim == 1:
                X_new = X_new[:, np.newaxis]

        if X_new.shape[1] != len(self.X_names):
            raise ValueError(
                f"newdata has {X_new.shape[1]} columns, expected {len(self.X_names)}"
            )

        if self.intercept:
            X_new = np.column_stack([np.ones(len(X_new)), X_new])

        return X_new @ self.coefficients

    def __repr__(self):
        return (f"LinearRegression(n={self.n_obs}, p={len(self.var_names)}, "
                f"R²={self.r_squared:.3f})")


def linear_regression(y, X, data=None, **kwargs):
    """
    Fit linear regression model (convenience function).

    Parameters
    ----------
    y : str or array
        Response variable
    X : list of str or array
        Predictor variables
    data : DataFrame, optional
        Dataset
    **kwargs
        Additional arguments passed to LinearRegression

    Returns
    -------
    LinearRegression
        Fitted model object

    Examples
    --------
    >>> model = linear_regression(y='mpg', X=['wt', 'hp'], data=mtcars)
    >>> model.summary()
    >>> model.conf_int()
    """
    return LinearRegression(y=y, X=X, data=data, **kwargs)
