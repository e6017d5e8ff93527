import plotly.graph_objects as go

from rethinking.motors import PosteriorTable
from rethinking.plotting.grid_plots import plot_grid_resolutions, plot_prior_comparison
from rethinking.plotting.quap_plots import plot_map_estimates, plot_quad_vs_exact


def plot_grid_approx(table: PosteriorTable, **kwargs) -> go.Figure:
    """
    Plots the grid approximation of a posterior distribution using plotly.

    Args:
        table (PosteriorTable): The grid and its posterior probabilities.
        **kwargs: Additional keyword arguments to be passed to go.Figure().

    Returns:
        go.Figure: The plotly figure object.
    """

    fig = go.Figure(**kwargs)
    fig.add_trace(go.Scatter(x=table.p_grid, y=table.posterior, mode='markers', name='Posterior Points'))
    fig.add_trace(go.Scatter(x=table.p_grid, y=table.posterior, mode='lines', name='Posterior Line'))
    fig.update_layout(
        title="Grid Approximation of Posterior",
        xaxis_title="Parameter Value (p)",
        yaxis_title="Posterior Probability"
    )

    return fig
