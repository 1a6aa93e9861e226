"""
Ordinary least squares via the normal equations.

This is the numerical core: one pure function, ``fit``, that turns a
design matrix and a response vector into an immutable RegressionResult.
Nothing here prints, plots or touches global state.
"""

import warnings
from dataclasses import dataclass
from functools import cached_property

import numpy as np
from scipy import stats

from ._backends import get_backend
from ._utils import check_array, check_vector, has_constant_column, readonly
from .exceptions import DimensionMismatchError, DegenerateDegreesOfFreedomError

DEGENERATE_MODES = ('raise', 'nan')


@dataclass(frozen=True, eq=False)
class RegressionResult:
    """
    Complete OLS results.

    Arrays are read-only; the record is never mutated after ``fit``.
    """
    coefficients: np.ndarray      # (p,)
    fitted_values: np.ndarray     # (n,)
    residuals: np.ndarray         # (n,)
    mse: float                    # SSR / n
    r_squared: float              # 1 - SSR/SST, unclamped
    adj_r_squared: float
    standard_errors: np.ndarray   # (p,)
    t_statistics: np.ndarray      # (p,)
    p_values: np.ndarray          # (p,) two-sided
    f_statistic: float
    df1: int                      # p - 1
    df2: int                      # n - p

    response: np.ndarray          # (n,) Y as fitted
    sigma: float                  # residual standard error
    f_pvalue: float
    vcov: np.ndarray              # (p, p) sigma^2 (X'X)^-1
    backend: str

    @property
    def n_obs(self) -> int:
        """Number of observations."""
        return len(self.response)

    @property
    def n_params(self) -> int:
        """Number of estimated coefficients, intercept included."""
        return len(self.coefficients)

    @cached_property
    def diagnostics(self):
        """Inputs for the three diagnostic plots (DiagnosticData)."""
        from .diagnostics import DiagnosticData
        return DiagnosticData.from_result(self)

    def __repr__(self):
        return (f"RegressionResult(n={self.n_obs}, p={self.n_params}, "
                f"R²={self.r_squared:.3f}, F={self.f_statistic:.3f})")


def fit(X, Y, backend='cpu', degenerate: str = 'raise') -> RegressionResult:
    """
    Fit an OLS regression by explicit inversion of the Gram matrix.

    Parameters
    ----------
    X : array-like, shape (n, p)
        Design matrix. The intercept column, if wanted, must already be
        included (conventionally the first column of 1s).
    Y : array-like, shape (n,)
        Response vector. A column vector (n, 1) is accepted.
    backend : str or BackendBase
        Computational backend: 'cpu' (default), 'pytorch', 'auto'
    degenerate : {'raise', 'nan'}
        What to do when n == p and the residual variance is undefined.
        'raise' raises DegenerateDegreesOfFreedomError. 'nan' returns a
        result whose variance-based statistics are NaN.

    Returns
    -------
    RegressionResult

    Raises
    ------
    ValidationError
        X or Y malformed (wrong ndim, empty, NaN/Inf)
    DimensionMismatchError
        rows(X) != len(Y)
    SingularMatrixError
        X'X is not invertible
    DegenerateDegreesOfFreedomError
        n == p and ``degenerate='raise'``

    Examples
    --------
    >>> res = fit([[1, 1], [1, 2], [1, 3], [1, 4]], [2, 4, 6, 8])
    >>> res.df1, res.df2
    (1, 2)
    """
    if degenerate not in DEGENERATE_MODES:
        raise ValueError(
            f"degenerate must be one of {DEGENERATE_MODES}, got {degenerate!r}"
        )

    X = check_array(X, name='X')
    Y = check_vector(Y, name='Y')

    n, p = X.shape
    if n != len(Y):
        raise DimensionMismatchError(
            f"The number of rows in X ({n}) must match the length of Y ({len(Y)}).",
            n_rows=n,
            n_response=len(Y),
        )

    if not has_constant_column(X):
        warnings.warn(
            "X has no constant (intercept) column; R-squared is not "
            "bounded to [0, 1] and is reported unclamped.",
            UserWarning,
            stacklevel=2,
        )

    engine = get_backend(backend)
    solution = engine.solve_normal_equations(X, Y)

    df1 = p - 1
    df2 = n - p

    if df2 == 0:
        if degenerate == 'raise':
            raise DegenerateDegreesOfFreedomError(
                f"Residual degrees of freedom is zero (n = p = {n}); "
                f"residual variance and standard errors are undefined.",
                n_obs=n,
                n_params=p,
            )
        warnings.warn(
            f"Residual degrees of freedom is zero (n = p = {n}); "
            f"variance-based statistics are NaN.",
            RuntimeWarning,
            stacklevel=2,
        )

    coef = solution.coef
    residuals = solution.residuals

    # Mean squared error (divisor n)
    mse = float(np.mean(residuals**2))

    # Total and residual sums of squares
    sst = float(np.sum((Y - np.mean(Y))**2))
    ssr = float(np.sum(residuals**2))

    # SST of a float constant is rounding noise, not zero; test the range
    constant_response = np.ptp(Y) == 0

    if not constant_response:
        r_squared = 1 - ssr / sst
    else:
        warnings.warn(
            "Y is constant (total sum of squares is zero); R-squared is NaN.",
            RuntimeWarning,
            stacklevel=2,
        )
        r_squared = np.nan

    if df2 > 0:
        adj_r_squared = 1 - (1 - r_squared) * (n - 1) / df2
        sigma_sq = ssr / df2
    else:
        adj_r_squared = np.nan
        sigma_sq = np.nan

    # Var(beta) = sigma^2 (X'X)^-1, same inverse as the coefficients
    vcov = sigma_sq * solution.gram_inv

    # A perfect fit gives SE = 0, hence t = +-Inf (or NaN for a zero coefficient).
    # A negative diagonal from an ill-conditioned inverse gives SE = NaN.
    with np.errstate(divide='ignore', invalid='ignore'):
        standard_errors = np.sqrt(np.diag(vcov))
        t_statistics = coef / standard_errors
        p_values = 2 * (1 - stats.t.cdf(np.abs(t_statistics), df2))

        if df1 > 0 and df2 > 0 and not constant_response:
            f_statistic = ((sst - ssr) / df1) / (ssr / df2)
            f_pvalue = float(stats.f.sf(f_statistic, df1, df2))
        else:
            f_statistic = np.nan
            f_pvalue = np.nan

    return RegressionResult(
        coefficients=readonly(coef),
        fitted_values=readonly(solution.fitted_values),
        residuals=readonly(residuals),
        mse=mse,
        r_squared=float(r_squared),
        adj_r_squared=float(adj_r_squared),
        standard_errors=readonly(standard_errors),
        t_statistics=readonly(t_statistics),
        p_values=readonly(p_values),
        f_statistic=float(f_statistic),
        df1=int(df1),
        df2=int(df2),
        response=readonly(Y),
        sigma=float(np.sqrt(sigma_sq)),
        f_pvalue=f_pvalue,
        vcov=readonly(vcov),
        backend=engine.name,
    )
