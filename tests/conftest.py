"""Shared fixtures: the globe-tossing data from chapter 2."""

import pytest

from rethinking.motors import ObservationSummary


@pytest.fixture
def globe_observations():
    """W L W W W L W L W -> 6 water in 9 tosses."""
    return ObservationSummary(successes=6, trials=9)


@pytest.fixture
def all_water_observations():
    return ObservationSummary(successes=3, trials=3)
