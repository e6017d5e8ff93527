import math
from dataclasses import dataclass

import numpy as np

from rethinking.motors.errors import InvalidParameter


class Prior:
    """
    Base class for prior weightings over p in [0, 1].

    Subclasses implement `evaluate`, which maps a grid of parameter values
    to non-negative weights of the same shape. The weights need not sum to 1;
    the grid estimator standardizes the posterior afterwards.
    """

    def evaluate(self, p_grid: np.ndarray) -> np.ndarray:
        raise NotImplementedError

    def __call__(self, p_grid) -> np.ndarray:
        return self.evaluate(np.asarray(p_grid, dtype=float))


@dataclass(frozen=True)
class Uniform(Prior):
    """Flat prior: every value of p is equally plausible."""

    def evaluate(self, p_grid: np.ndarray) -> np.ndarray:
        return np.ones_like(p_grid, dtype=float)


@dataclass(frozen=True)
class Step(Prior):
    """
    Truncated prior: zero below `threshold`, one at and above it.

    With the default threshold this encodes "at least half of the globe is
    water".
    """

    threshold: float = 0.5

    def __post_init__(self):
        if not 0.0 <= self.threshold <= 1.0:
            raise InvalidParameter(
                f"Step threshold must lie in [0, 1], got {self.threshold}"
            )

    def evaluate(self, p_grid: np.ndarray) -> np.ndarray:
        return (p_grid >= self.threshold).astype(float)


@dataclass(frozen=True)
class DoubleExponential(Prior):
    """
    Laplace-shaped prior, exp(-rate * |p - center|), peaked at `center`.
    """

    rate: float = 5.0
    center: float = 0.5

    def __post_init__(self):
        if not (math.isfinite(self.rate) and self.rate >= 0):
            raise InvalidParameter(
                f"DoubleExponential rate must be non-negative, got {self.rate}"
            )
        if not math.isfinite(self.center):
            raise InvalidParameter(
                f"DoubleExponential center must be finite, got {self.center}"
            )

    def evaluate(self, p_grid: np.ndarray) -> np.ndarray:
        return np.exp(-self.rate * np.abs(p_grid - self.center))
