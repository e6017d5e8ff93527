"""ObservationSummary validation and construction from toss sequences."""

import numpy as np
import pytest

from rethinking.motors import InvalidParameter, ObservationSummary, grid_approx


def test_from_tosses_counts_water():
    obs = ObservationSummary.from_tosses("WLWWWLWLW")
    assert obs.successes == 6
    assert obs.trials == 9
    assert obs.failures == 3


def test_from_tosses_is_case_insensitive():
    assert ObservationSummary.from_tosses("wLw") == ObservationSummary(2, 3)


def test_from_tosses_rejects_unknown_outcomes():
    with pytest.raises(InvalidParameter):
        ObservationSummary.from_tosses("WLX")


def test_from_tosses_rejects_empty_sequence():
    with pytest.raises(InvalidParameter):
        ObservationSummary.from_tosses("")


def test_proportion(globe_observations):
    assert globe_observations.proportion == pytest.approx(6 / 9)


@pytest.mark.parametrize(
    "successes, trials",
    [(10, 9), (-1, 9), (0, 0), (3, -2), (1.5, 3), (True, 3)],
)
def test_invalid_counts_raise(successes, trials):
    with pytest.raises(InvalidParameter):
        ObservationSummary(successes=successes, trials=trials)


def test_invalid_parameter_is_value_error():
    """Callers catching ValueError also see invalid inputs."""
    with pytest.raises(ValueError):
        ObservationSummary(successes=5, trials=4)


def test_is_immutable(globe_observations):
    with pytest.raises(AttributeError):
        globe_observations.successes = 7


def test_numpy_counts_are_accepted():
    tosses = np.array(list("WLWWWLWLW"))
    obs = ObservationSummary(successes=np.sum(tosses == "W"), trials=tosses.size)
    assert obs == ObservationSummary(successes=6, trials=9)
    assert type(obs.successes) is int


def test_grid_approx_with_numpy_counts():
    tosses = np.array(list("WLWWWLWLW"))
    table = grid_approx(trials=tosses.size, num_successes=np.sum(tosses == "W"))
    assert table.posterior.sum() == pytest.approx(1.0)
