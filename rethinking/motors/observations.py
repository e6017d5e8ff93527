import numbers
from dataclasses import dataclass
from typing import Iterable

from rethinking.motors.errors import InvalidParameter


SUCCESS = "W"
FAILURE = "L"


@dataclass(frozen=True)
class ObservationSummary:
    """
    Counts of a sequence of binary outcomes, e.g. water (W) and land (L)
    from tossing a globe.

    Args:
        successes (int): Number of successes observed.
        trials (int): Total number of trials.
    """

    successes: int
    trials: int

    def __post_init__(self):
        for name in ("successes", "trials"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidParameter(f"{name} must be an integer, got {value!r}")
            # numpy counts are stored as plain ints
            object.__setattr__(self, name, int(value))
        if self.trials < 1:
            raise InvalidParameter(f"trials must be positive, got {self.trials}")
        if not 0 <= self.successes <= self.trials:
            raise InvalidParameter(
                f"successes must lie in [0, {self.trials}], got {self.successes}"
            )

    @classmethod
    def from_tosses(cls, tosses: Iterable[str]) -> "ObservationSummary":
        """
        Builds a summary from outcomes such as "WLWWWLWLW".
        """
        outcomes = [t.upper() for t in tosses if not t.isspace()]
        unknown = set(outcomes) - {SUCCESS, FAILURE}
        if unknown:
            raise InvalidParameter(f"Unknown outcomes: {sorted(unknown)}")
        return cls(successes=outcomes.count(SUCCESS), trials=len(outcomes))

    @property
    def failures(self) -> int:
        return self.trials - self.successes

    @property
    def proportion(self) -> float:
        return self.successes / self.trials
