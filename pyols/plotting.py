"""
Diagnostic plots with matplotlib.

Optional: install with ``pip install pyols[plot]``. Nothing in the fitting
path imports this module.
"""

from .diagnostics import DiagnosticData


def _import_pyplot():
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        raise ImportError(
            "matplotlib required for diagnostic plots. "
            "Install: pip install matplotlib"
        )
    return plt


def plot_diagnostics(data, axes=None, show: bool = False):
    """
    Draw the three residual diagnostic plots.

    Parameters
    ----------
    data : RegressionResult or DiagnosticData
        Fitted result, or its precomputed diagnostics
    axes : sequence of 3 matplotlib Axes, optional
        Where to draw. A new 1x3 figure is created if omitted.
    show : bool
        Call ``plt.show()`` when done

    Returns
    -------
    matplotlib.figure.Figure
    """
    plt = _import_pyplot()

    diag = data if isinstance(data, DiagnosticData) else data.diagnostics

    if axes is None:
        fig, axes = plt.subplots(1, 3, figsize=(15, 4.5))
    else:
        if len(axes) != 3:
            raise ValueError(f"Need 3 axes, got {len(axes)}")
        fig = axes[0].figure
    ax_resid, ax_qq, ax_pred = axes

    # Residuals vs Fitted
    x, y = diag.residuals_vs_fitted
    ax_resid.scatter(x, y, s=12, color='blue')
    ax_resid.axhline(0, linestyle='--', color='red')
    ax_resid.set_title("Residuals vs Fitted")
    ax_resid.set_xlabel("Fitted Values")
    ax_resid.set_ylabel("Residuals")

    # Normal QQ
    x, y = diag.normal_qq
    slope, intercept = diag.qq_line
    ax_qq.scatter(x, y, s=12, color='black')
    ax_qq.axline((0.0, intercept), slope=slope, color='red')
    ax_qq.set_title("QQ Plot of Residuals")
    ax_qq.set_xlabel("Theoretical Quantiles")
    ax_qq.set_ylabel("Sample Quantiles")

    # Actual vs Predicted
    x, y = diag.actual_vs_predicted
    ax_pred.scatter(x, y, s=12, color='green')
    ax_pred.axline((0.0, 0.0), slope=1.0, color='red')
    ax_pred.set_title("Actual vs Predicted Values")
    ax_pred.set_xlabel("Actual Values")
    ax_pred.set_ylabel("Predicted Values")

    fig.tight_layout()
    if show:
        plt.show()
    return fig
