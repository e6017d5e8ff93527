"""Prior variants: values, shapes and parameter validation."""

import numpy as np
import pytest

from rethinking.motors import DoubleExponential, InvalidParameter, Step, Uniform


P_GRID = np.linspace(0, 1, 11)


def test_uniform_is_flat():
    np.testing.assert_array_equal(Uniform()(P_GRID), np.ones(11))


def test_step_zero_below_threshold():
    weights = Step(threshold=0.5)(P_GRID)
    np.testing.assert_array_equal(weights[:5], np.zeros(5))
    np.testing.assert_array_equal(weights[5:], np.ones(6))


def test_step_default_threshold_is_half():
    assert Step() == Step(threshold=0.5)


def test_double_exponential_peaks_at_center():
    prior = DoubleExponential(rate=5, center=0.5)
    weights = prior(P_GRID)
    assert P_GRID[np.argmax(weights)] == pytest.approx(0.5)
    assert weights[5] == pytest.approx(1.0)
    assert weights[0] == pytest.approx(np.exp(-2.5))


def test_double_exponential_strictly_positive():
    weights = DoubleExponential(rate=50, center=0.0)(P_GRID)
    assert np.all(weights > 0)


def test_prior_accepts_lists():
    assert Uniform()([0.0, 0.5, 1.0]).shape == (3,)


@pytest.mark.parametrize("threshold", [-0.1, 1.5])
def test_step_threshold_outside_unit_interval(threshold):
    with pytest.raises(InvalidParameter):
        Step(threshold=threshold)


def test_double_exponential_negative_rate():
    with pytest.raises(InvalidParameter):
        DoubleExponential(rate=-1.0)


def test_double_exponential_non_finite_center():
    with pytest.raises(InvalidParameter):
        DoubleExponential(center=float("nan"))
