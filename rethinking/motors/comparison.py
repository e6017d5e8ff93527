from dataclasses import dataclass

from rethinking.motors.beta_model import beta_posterior
from rethinking.motors.grid_model import PosteriorTable, estimate
from rethinking.motors.observations import ObservationSummary
from rethinking.motors.priors import Uniform
from rethinking.motors.quap_model import (
    GaussianApproximation,
    QuadraticPosteriorApproximator,
)


@dataclass(frozen=True, eq=False)
class ApproximationComparison:
    observations: ObservationSummary
    grid: PosteriorTable
    quadratic: GaussianApproximation
    exact_mean: float
    exact_std: float

    def summary(self) -> dict[str, float]:
        return {
            "grid_mode": self.grid.mode,
            "grid_mean": self.grid.mean,
            "grid_std": self.grid.std,
            "quap_mean": self.quadratic.mean,
            "quap_std": self.quadratic.std,
            "exact_mean": self.exact_mean,
            "exact_std": self.exact_std,
        }


def compare_approximations(
    observations: ObservationSummary,
    n_points: int = 1000,
    approximator: QuadraticPosteriorApproximator = None,
) -> ApproximationComparison:
    """
    Grid, quadratic and exact posteriors of the same data under a flat prior.
    """
    approximator = approximator or QuadraticPosteriorApproximator()
    exact = beta_posterior(observations)
    return ApproximationComparison(
        observations=observations,
        grid=estimate(observations, n_points=n_points, prior=Uniform()),
        quadratic=approximator.approximate(observations),
        exact_mean=float(exact.mean()),
        exact_std=float(exact.std()),
    )
