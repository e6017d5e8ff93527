from dataclasses import dataclass, field
from typing import Callable, Iterator, Union

import numpy as np
import pandas as pd
import scipy.stats as st

from rethinking.motors.errors import DegeneratePosterior, InvalidParameter
from rethinking.motors.observations import ObservationSummary
from rethinking.motors.priors import Prior, Uniform


PriorFn = Union[Prior, Callable[[np.ndarray], np.ndarray]]


@dataclass(frozen=True, eq=False)
class PosteriorTable:
    """
    Grid approximation of a posterior distribution.

    Attributes:
        p_grid (np.ndarray): Parameter values, strictly increasing over [0, 1].
        posterior (np.ndarray): Standardized posterior weights; sums to 1.
        unnormalized (np.ndarray): likelihood * prior at each grid point.
    """

    p_grid: np.ndarray
    posterior: np.ndarray
    unnormalized: np.ndarray = field(repr=False)

    def __len__(self) -> int:
        return len(self.p_grid)

    def __iter__(self) -> Iterator[tuple[float, float]]:
        return iter(self.pairs())

    def pairs(self) -> list[tuple[float, float]]:
        """Ordered (parameter value, density) pairs, ready for plotting."""
        return [(float(p), float(d)) for p, d in zip(self.p_grid, self.posterior)]

    @property
    def mode(self) -> float:
        """Grid value carrying the largest posterior weight (the grid MAP)."""
        return float(self.p_grid[np.argmax(self.posterior)])

    @property
    def mean(self) -> float:
        return float(np.sum(self.p_grid * self.posterior))

    @property
    def std(self) -> float:
        variance = np.sum((self.p_grid - self.mean) ** 2 * self.posterior)
        return float(np.sqrt(variance))

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "p": self.p_grid,
                "posterior": self.posterior,
                "unnormalized": self.unnormalized,
            }
        )


def make_grid(num_points: int) -> np.ndarray:
    """
    Evenly spaced grid over [0, 1], both endpoints included.
    """
    if isinstance(num_points, bool) or not isinstance(num_points, (int, np.integer)):
        raise InvalidParameter(f"num_points must be an integer, got {num_points!r}")
    if num_points < 2:
        raise InvalidParameter(f"num_points must be at least 2, got {num_points}")
    return np.linspace(0, 1, num_points)


def binomial_likelihood(
    p_grid: np.ndarray, trials: int, num_successes: int
) -> np.ndarray:
    """
    Probability of `num_successes` in `trials` at each p of the grid.

    scipy evaluates 0**0 as 1, so p=0 with no successes (and p=1 with no
    failures) has likelihood 1.
    """
    return st.binom(n=trials, p=p_grid).pmf(num_successes)


def evaluate_prior(prior: PriorFn, p_grid: np.ndarray) -> np.ndarray:
    weights = np.asarray(prior(p_grid), dtype=float)
    if weights.shape == ():
        weights = np.full_like(p_grid, float(weights))
    if weights.shape != p_grid.shape:
        raise InvalidParameter(
            f"Prior returned shape {weights.shape}, expected {p_grid.shape}"
        )
    if not np.all(np.isfinite(weights)) or np.any(weights < 0):
        raise InvalidParameter("Prior weights must be finite and non-negative")
    return weights


def grid_approx(
    trials: int,
    num_successes: int,
    prior: PriorFn = None,
    num_points: int = 20,
) -> PosteriorTable:
    """
    Computes the posterior of a binomial proportion by grid approximation.

    Args:
        trials (int): Number of trials (tosses).
        num_successes (int): Number of successes (water) observed.
        prior (Prior | Callable): Weighting over p; defaults to `Uniform()`.
        num_points (int): Grid resolution, at least 2.

    Returns:
        PosteriorTable: The grid, the standardized posterior and the
        un-standardized posterior.

    Raises:
        InvalidParameter: If the counts or the grid size are invalid, or the
            prior yields negative or non-finite weights.
        DegeneratePosterior: If likelihood * prior is zero everywhere on the grid.
    """
    observations = ObservationSummary(successes=num_successes, trials=trials)
    _prior = Uniform() if prior is None else prior

    # Define the grid
    p_grid = make_grid(num_points)

    # Define the prior distribution
    prior_weights = evaluate_prior(_prior, p_grid)

    # Define the likelihood at each p; the (conditional) PMF
    likelihood = binomial_likelihood(
        p_grid, observations.trials, observations.successes
    )

    # Compute un-standardized posterior
    unnormalized = likelihood * prior_weights

    total = unnormalized.sum()
    if not total > 0:
        raise DegeneratePosterior(
            f"Posterior has no mass on the grid (prior={_prior!r}, "
            f"{num_successes} successes in {trials} trials)"
        )

    # Standardize posterior so that it sums to 1
    posterior = unnormalized / total

    return PosteriorTable(p_grid=p_grid, posterior=posterior, unnormalized=unnormalized)


def estimate(
    observations: ObservationSummary,
    n_points: int = 20,
    prior: PriorFn = None,
) -> PosteriorTable:
    return grid_approx(
        trials=observations.trials,
        num_successes=observations.successes,
        prior=prior,
        num_points=n_points,
    )


@dataclass(frozen=True)
class GridPosteriorEstimator:
    """
    A grid resolution and a prior, applied to any set of observations.
    """

    n_points: int = 20
    prior: PriorFn = field(default_factory=Uniform)

    def __post_init__(self):
        make_grid(self.n_points)

    def estimate(self, observations: ObservationSummary) -> PosteriorTable:
        return estimate(observations, n_points=self.n_points, prior=self.prior)
