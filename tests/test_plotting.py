"""Figure builders return plotly figures with the expected traces."""

import numpy as np
import plotly.graph_objects as go
import pytest

from rethinking.motors import (
    DegeneratePosterior,
    DoubleExponential,
    beta_posterior,
    binomial_likelihood,
    grid_approx,
    quadratic_approx,
)
from rethinking.plotting import (
    plot_grid_approx,
    plot_grid_resolutions,
    plot_map_estimates,
    plot_prior_comparison,
    plot_quad_vs_exact,
)


def test_plot_grid_approx():
    table = grid_approx(9, 6, num_points=20)
    fig = plot_grid_approx(table)
    assert isinstance(fig, go.Figure)
    assert [trace.mode for trace in fig.data] == ["markers", "lines"]
    np.testing.assert_array_equal(fig.data[0].y, table.posterior)


def test_plot_grid_resolutions_one_panel_per_table():
    tables = [grid_approx(9, 6, num_points=n) for n in (5, 20, 100)]
    fig = plot_grid_resolutions(tables)
    assert len(fig.data) == 3
    titles = [annotation.text for annotation in fig.layout.annotations]
    assert titles == ["5 points", "20 points", "100 points"]


def test_plot_prior_comparison():
    prior = DoubleExponential()
    table = grid_approx(9, 6, prior=prior, num_points=20)
    fig = plot_prior_comparison(
        table.p_grid,
        prior(table.p_grid),
        binomial_likelihood(table.p_grid, 9, 6),
        table.posterior,
    )
    assert [trace.name for trace in fig.data] == ["prior", "likelihood", "posterior"]


def test_plot_quad_vs_exact(globe_observations):
    quad = quadratic_approx(globe_observations)
    exact = beta_posterior(globe_observations)
    assert len(plot_quad_vs_exact(quad, exact).data) == 2

    table = grid_approx(9, 6, num_points=100)
    fig = plot_quad_vs_exact(quad, exact, table=table)
    assert len(fig.data) == 3
    # Grid weights rescaled to a density integrate to about one
    assert np.sum(fig.data[2].y) / 99 == pytest.approx(1.0)


def test_plot_map_estimates():
    fig = plot_map_estimates(np.linspace(0.5, 0.67, 10))
    assert len(fig.data[0].x) == 10


def test_plot_quad_vs_exact_rejects_zero_width(all_water_observations):
    quad = quadratic_approx(all_water_observations)
    with pytest.raises(DegeneratePosterior):
        plot_quad_vs_exact(quad, beta_posterior(all_water_observations))
