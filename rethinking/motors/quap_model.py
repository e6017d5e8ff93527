import math
from dataclasses import dataclass, field
from typing import Callable

import numpy as np
import pyro
import scipy.stats as st
import torch
from pyro.distributions import Binomial, Uniform

from rethinking.motors.errors import DegeneratePosterior, InvalidParameter
from rethinking.motors.observations import ObservationSummary


@dataclass(frozen=True)
class GaussianApproximation:
    """
    Normal approximation of a posterior, centred at its mode.

    Attributes:
        mean (float): The posterior mode (MAP).
        std (float): Inverse square root of the negative curvature of the
            log posterior at the mode.
        estimates (np.ndarray): Optimizer history, empty for closed forms.
    """

    mean: float
    std: float
    estimates: np.ndarray = field(
        default_factory=lambda: np.array([]), repr=False, compare=False
    )

    def __post_init__(self):
        if not math.isfinite(self.mean) or not (self.std >= 0):
            raise InvalidParameter(
                f"Invalid normal approximation: mean={self.mean}, std={self.std}"
            )

    def pdf(self, x) -> np.ndarray:
        """Normal density at x; NaN everywhere when std is 0."""
        return st.norm(loc=self.mean, scale=self.std).pdf(x)

    def pairs(self, x) -> list[tuple[float, float]]:
        return [(float(p), float(d)) for p, d in zip(x, self.pdf(x))]


def quadratic_approx(observations: ObservationSummary) -> GaussianApproximation:
    """
    Closed-form quadratic approximation for a binomial likelihood and a
    uniform prior on p.

    The log posterior is s*log(p) + f*log(1-p) + const, so the mode is
    p = s/n and the negative second derivative there is n / (p (1 - p)).
    """
    p_hat = observations.proportion
    std_dev = math.sqrt(p_hat * (1 - p_hat) / observations.trials)
    return GaussianApproximation(mean=p_hat, std=std_dev)


def globe_tossing_model(p, W, L):
    """
    Pyro model for binomial likelihood with a uniform prior on p.

    Args:
        p (torch.Tensor): The probability of success.
        W (float): The number of successes (water).
        L (float): The number of failures (land).
    """
    N = torch.tensor(W + L, dtype=torch.float)
    # Uniform prior for p
    pyro.sample("p_prior", Uniform(0.0, 1.0), obs=p)
    # Binomial likelihood for the observed data W
    pyro.sample("W", Binomial(N, p), obs=torch.tensor(W, dtype=torch.float))


def get_map_using_grad(
    model: Callable,
    weights: list[float],
    iters: int = 1000,
    learning_rate: float = 0.01,
    initial: float = 0.5,
) -> tuple[float, np.ndarray]:
    """
    Finds the Maximum a Posteriori (MAP) estimate using manual gradient ascent.

    The ascent runs on logit(p), so every step stays inside (0, 1).

    Args:
        model (Callable): A pyro model that takes a parameter tensor `p`
                         as its first argument, followed by other arguments (`weights`).
        weights (list[float]): Additional arguments to the model.
        iters (int): Number of optimization iterations.
        learning_rate (float): The learning rate for gradient ascent.
        initial (float): Starting value of the parameter, in (0, 1).

    Returns:
        A tuple containing the MAP estimate and the history of estimates.

    Raises:
        DegeneratePosterior: If the log posterior stops being finite.
    """
    if not 0.0 < initial < 1.0:
        raise InvalidParameter(f"initial must lie in (0, 1), got {initial}")

    # Unconstrained starting value, requires gradient for optimization
    z = torch.logit(torch.tensor(initial)).requires_grad_(True)
    values = []

    for _ in range(iters):
        p = torch.sigmoid(z)
        # A fresh trace is needed for each gradient calculation
        traced_model = pyro.poutine.trace(model)
        # Assumes the model's first argument is the parameter to optimize
        log_L = traced_model.get_trace(p, *weights).log_prob_sum()
        if not torch.isfinite(log_L):
            raise DegeneratePosterior(
                f"Log posterior is not finite at p={p.item():.6f}"
            )
        log_L.backward()

        # Manual gradient ascent step
        z.data += learning_rate * z.grad
        z.grad.zero_()
        values.append(torch.sigmoid(z).item())

    return torch.sigmoid(z).item(), np.array(values)


def get_quad_approx(
    model: Callable,
    weights: list[float],
    iters: int = 1000,
    learning_rate: float = 0.01,
) -> tuple[float, float, np.ndarray]:
    """
    Calculates the quadratic approximation of a posterior distribution.

    Args:
        model (Callable): The pyro model, with the parameter to be optimized
                         as the first argument.
        weights (list[float]): Arguments to the model.
        iters (int): Number of optimization iterations.
        learning_rate (float): The learning rate for gradient ascent.

    Returns:
        A tuple containing the mean (mu), standard deviation (std_dev),
        and the history of estimates during MAP optimization.

    Raises:
        DegeneratePosterior: If the log posterior is not concave at the optimum.
    """
    # 1. Find the Maximum a Posteriori (MAP) estimate for p
    mu_val, estimates = get_map_using_grad(model, weights, iters, learning_rate)
    mu_tensor = torch.tensor(mu_val, requires_grad=True)

    # 2. Calculate the curvature at the MAP to get the standard deviation
    traced_model = pyro.poutine.trace(model)
    log_L_at_map = traced_model.get_trace(mu_tensor, *weights).log_prob_sum()

    first_derivative = torch.autograd.grad(log_L_at_map, mu_tensor, create_graph=True)[0]
    second_derivative = torch.autograd.grad(first_derivative, mu_tensor)[0]

    if not second_derivative.item() < 0:
        raise DegeneratePosterior(
            f"Log posterior is not concave at p={mu_val:.4f} "
            f"(second derivative {second_derivative.item():.4f})"
        )

    std_dev = (1 / torch.sqrt(-second_derivative)).item()

    return mu_val, std_dev, estimates


def fit_quad_approx(
    observations: ObservationSummary, iters: int = 1000
) -> GaussianApproximation:
    """
    Fits `globe_tossing_model` numerically and returns its normal approximation.

    The optimum must be interior, so all-success or all-failure data is
    rejected; use `quadratic_approx` for those.
    """
    if observations.successes in (0, observations.trials):
        raise DegeneratePosterior(
            "The posterior mode lies on the boundary of [0, 1]; "
            "the curvature there is undefined"
        )
    weights = [float(observations.successes), float(observations.failures)]
    # The logit-scale gradient is bounded by the number of trials
    mu, std_dev, estimates = get_quad_approx(
        globe_tossing_model, weights, iters, learning_rate=1 / observations.trials
    )
    return GaussianApproximation(mean=mu, std=std_dev, estimates=estimates)


@dataclass(frozen=True)
class QuadraticPosteriorApproximator:
    """
    Produces a normal approximation by the closed form or by a pyro fit.
    """

    method: str = "closed_form"
    iters: int = 1000

    def __post_init__(self):
        if self.method not in ("closed_form", "pyro"):
            raise InvalidParameter(f"Unknown approximation method: {self.method}")

    def approximate(self, observations: ObservationSummary) -> GaussianApproximation:
        if self.method == "pyro":
            return fit_quad_approx(observations, iters=self.iters)
        return quadratic_approx(observations)
