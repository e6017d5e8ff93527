import sys
from typing import Optional, Sequence

from rethinking.config import EstimationConfig, config_from_args
from rethinking.motors import (
    DegeneratePosterior,
    InvalidParameter,
    QuadraticPosteriorApproximator,
    beta_posterior,
    compare_approximations,
    estimate,
)
from rethinking.plotting import plot_grid_approx, plot_grid_resolutions, plot_quad_vs_exact


def run(config: EstimationConfig):
    """
    Estimates the posterior at every configured grid resolution, then compares
    a flat-prior grid at the finest resolution with the quadratic
    approximation and the exact Beta posterior.
    """
    observations = config.observations
    print(
        f"--- {observations.successes} water in {observations.trials} tosses, "
        f"prior: {config.prior!r} ---"
    )

    # --- 1. Grid approximation at each resolution ---
    tables = []
    for n_points in config.n_points:
        table = estimate(observations, n_points=n_points, prior=config.prior)
        tables.append(table)
        print(
            f"Grid ({n_points} points): mode={table.mode:.4f}, "
            f"mean={table.mean:.4f}, std={table.std:.4f}"
        )

    # --- 2. Flat-prior comparison: finest grid, quadratic and exact ---
    comparison = compare_approximations(
        observations,
        n_points=max(config.n_points),
        approximator=QuadraticPosteriorApproximator(method=config.quap_method),
    )
    print(f"\nFlat prior comparison ({config.quap_method} quadratic approximation):")
    for name, value in comparison.summary().items():
        print(f"  {name}: {value:.4f}")

    if config.plot:
        if len(tables) == 1:
            plot_grid_approx(tables[0]).show()
        else:
            plot_grid_resolutions(tables).show()
        if comparison.quadratic.std > 0:
            plot_quad_vs_exact(
                comparison.quadratic,
                beta_posterior(observations),
                table=comparison.grid,
            ).show()

    return tables, comparison


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        config = config_from_args(argv)
        run(config)
    except (InvalidParameter, DegeneratePosterior) as e:
        print(f"Error: {e}")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
