from typing import Sequence

import numpy as np
import plotly.graph_objects as go
from plotly.subplots import make_subplots

from rethinking.motors import PosteriorTable


def plot_grid_resolutions(tables: Sequence[PosteriorTable], **kwargs) -> go.Figure:
    """
    One panel per grid resolution, side by side.
    """
    fig = make_subplots(
        rows=1,
        cols=len(tables),
        subplot_titles=[f"{len(table)} points" for table in tables],
        **kwargs,
    )
    for col, table in enumerate(tables, start=1):
        fig.add_trace(
            go.Scatter(
                x=table.p_grid,
                y=table.posterior,
                mode="lines+markers",
                name=f"{len(table)} points",
            ),
            row=1,
            col=col,
        )
        fig.update_xaxes(title_text="probability of water", row=1, col=col)
    fig.update_yaxes(title_text="posterior probability", row=1, col=1)
    fig.update_layout(title="Grid Approximation by Resolution")
    return fig


def plot_prior_comparison(
    p_grid: np.ndarray,
    prior: np.ndarray,
    likelihood: np.ndarray,
    posterior: np.ndarray,
    title: str = "Prior x Likelihood = Posterior",
) -> go.Figure:
    """
    Prior, likelihood and posterior over the same grid, one column each.
    """
    panels = [("prior", prior), ("likelihood", likelihood), ("posterior", posterior)]
    fig = make_subplots(rows=1, cols=3, subplot_titles=[name for name, _ in panels])
    for col, (name, values) in enumerate(panels, start=1):
        fig.add_trace(
            go.Scatter(x=p_grid, y=values, mode="lines", name=name),
            row=1,
            col=col,
        )
        fig.update_xaxes(title_text="p", range=[0, 1], row=1, col=col)
    fig.update_layout(title=title, showlegend=False)
    return fig
