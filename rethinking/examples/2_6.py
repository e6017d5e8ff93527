# rethinking/examples/2_6.py

import os
import sys

# Add the root of the project to the Python path
sys.path.append(
    os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
)

from rethinking.motors import (
    ObservationSummary,
    QuadraticPosteriorApproximator,
    beta_posterior,
    compare_approximations,
    quadratic_approx,
)
from rethinking.plotting import plot_map_estimates, plot_quad_vs_exact


def main():
    """
    Calculates and plots the quadratic approximation of a posterior distribution,
    both by fitting the pyro model and in closed form, and compares it to the
    grid approximation and the true Beta posterior.
    """
    observations = ObservationSummary.from_tosses("WLWWWLWLW")

    # --- 1. Fit the quadratic approximation alongside a 100-point grid ---
    comparison = compare_approximations(
        observations,
        n_points=100,
        approximator=QuadraticPosteriorApproximator(method="pyro"),
    )
    fitted = comparison.quadratic
    closed_form = quadratic_approx(observations)

    print(f"Fitted MAP (mu): {fitted.mean:.4f}, Std Dev: {fitted.std:.4f}")
    print(f"Closed form MAP (mu): {closed_form.mean:.4f}, Std Dev: {closed_form.std:.4f}")
    print(f"Grid MAP: {comparison.grid.mode:.4f}, Beta mean: {comparison.exact_mean:.4f}")

    # --- 2. Plot the distributions ---
    plot_quad_vs_exact(fitted, beta_posterior(observations), table=comparison.grid).show()

    # --- 3. Plot the estimates ---
    plot_map_estimates(fitted.estimates).show()


if __name__ == "__main__":
    main()
