import numpy as np
import plotly.graph_objects as go

from rethinking.motors import DegeneratePosterior, GaussianApproximation, PosteriorTable


def plot_quad_vs_exact(
    quad: GaussianApproximation,
    exact,
    table: PosteriorTable = None,
    p_range: np.ndarray = None,
) -> go.Figure:
    """
    Plots the quadratic approximation against the exact posterior density.

    Args:
        quad (GaussianApproximation): The normal approximation.
        exact: A frozen scipy distribution, e.g. from `beta_posterior`.
        table (PosteriorTable): Optional grid posterior; its weights are divided
            by the grid spacing so they are on the density scale.
        p_range (np.ndarray): Points at which to evaluate the densities.

    Raises:
        DegeneratePosterior: If the approximation has zero width, as the
            closed form does when every toss lands on the same side.
    """
    if quad.std == 0:
        raise DegeneratePosterior(
            f"Normal approximation at p={quad.mean:.4f} has zero width; no density to plot"
        )

    if p_range is None:
        p_range = np.linspace(0.001, 0.999, 100)

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=p_range,
            y=quad.pdf(p_range),
            mode="lines",
            name="Quadratic Approximation (Normal)",
        )
    )
    fig.add_trace(
        go.Scatter(x=p_range, y=exact.pdf(p_range), mode="lines", name="True Posterior (Beta)")
    )
    if table is not None:
        spacing = table.p_grid[1] - table.p_grid[0]
        fig.add_trace(
            go.Scatter(
                x=table.p_grid,
                y=table.posterior / spacing,
                mode="markers",
                name=f"Grid Approximation ({len(table)} points)",
            )
        )
    fig.update_layout(
        title="Quadratic Approximation vs. True Posterior",
        xaxis_title="Parameter Value (p)",
        yaxis_title="Density",
    )
    return fig


def plot_map_estimates(estimates: np.ndarray) -> go.Figure:
    """
    Plots the history of the gradient-ascent MAP search.
    """
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=list(range(len(estimates))),
            y=estimates,
            mode="lines",
            name="Estimates",
        )
    )
    fig.update_layout(
        title="Estimates Progression",
        xaxis_title="Steps",
        yaxis_title="p",
    )
    return fig
