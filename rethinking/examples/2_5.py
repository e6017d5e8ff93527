# rethinking/examples/2_5.py

import os
import sys

# Add the root of the project to the Python path
sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from rethinking.motors import (
    DoubleExponential,
    Step,
    Uniform,
    binomial_likelihood,
    grid_approx,
)
from rethinking.plotting import plot_prior_comparison

def main():
    """
    Repeats the 20-point grid approximation with a flat, a truncated and a
    peaked prior, showing how each reshapes the posterior.
    """
    trials = 9
    num_successes = 6
    num_points = 20

    priors = {
        "Uniform": Uniform(),
        "Step (p >= 0.5)": Step(threshold=0.5),
        "Double exponential": DoubleExponential(rate=5, center=0.5),
    }

    for name, prior in priors.items():
        table = grid_approx(
            trials=trials,
            num_successes=num_successes,
            prior=prior,
            num_points=num_points,
        )
        likelihood = binomial_likelihood(table.p_grid, trials, num_successes)
        print(f"{name}: mode={table.mode:.4f}, mean={table.mean:.4f}")

        fig = plot_prior_comparison(
            table.p_grid,
            prior(table.p_grid),
            likelihood,
            table.posterior,
            title=f"{name} prior",
        )
        fig.show()

if __name__ == "__main__":
    main()
