"""Tests for the power models."""

import numpy as np
import pytest
from energycalc.core.load import SineLoadConfig, build_load
from energycalc.core.power import CappedPowerConfig, LinearPowerConfig, build_power
from energycalc.core.power.models import CappedPowerModel, LinearPowerModel


@pytest.fixture
def sine_load():
    return build_load(SineLoadConfig(base=0.5, amplitude=0.3))


def test_linear_power_interpolates_idle_to_max(sine_load):
    # Arrange
    power = build_power(LinearPowerConfig(idle_power=120.0, max_power=320.0), sine_load)

    # Act & Assert
    assert isinstance(power, LinearPowerModel)
    assert power(0.0) == pytest.approx(120.0 + 200.0 * 0.5)
    assert power(0.5) == pytest.approx(120.0 + 200.0 * 0.8)


def test_linear_power_with_constant_load():
    # Arrange
    load = build_load(SineLoadConfig(base=1.0, amplitude=0.0))
    power = build_power(LinearPowerConfig(idle_power=50.0, max_power=80.0), load)

    # Act & Assert
    assert power(0.3) == pytest.approx(80.0)


def test_capped_power_never_exceeds_limit(sine_load):
    # Arrange
    power = build_power(
        CappedPowerConfig(idle_power=120.0, max_power=320.0, limit_watts=250.0), sine_load
    )

    # Act
    values = [power(t) for t in np.linspace(0.0, 2.0, 2001)]

    # Assert
    assert isinstance(power, CappedPowerModel)
    assert max(values) <= 250.0
    assert power(0.5) == 250.0
    assert power(0.0) == pytest.approx(220.0)


def test_capped_power_above_ceiling_matches_linear(sine_load):
    # Arrange
    linear = build_power(LinearPowerConfig(idle_power=120.0, max_power=320.0), sine_load)
    capped = build_power(
        CappedPowerConfig(idle_power=120.0, max_power=320.0, limit_watts=1000.0), sine_load
    )

    # Act & Assert
    for t in np.linspace(0.0, 1.0, 11):
        assert capped(t) == pytest.approx(linear(t))


def test_capped_power_accepts_arrays(sine_load):
    # Arrange
    power = build_power(
        CappedPowerConfig(idle_power=120.0, max_power=320.0, limit_watts=250.0), sine_load
    )

    # Act
    values = power(np.array([0.0, 0.5]))

    # Assert
    np.testing.assert_allclose(values, [220.0, 250.0])


@pytest.mark.parametrize(
    "config_cls, kwargs",
    [
        (LinearPowerConfig, {"idle_power": -1.0, "max_power": 10.0}),
        (LinearPowerConfig, {"idle_power": 20.0, "max_power": 10.0}),
        (CappedPowerConfig, {"idle_power": 0.0, "max_power": 10.0, "limit_watts": 0.0}),
    ],
)
def test_power_configs_reject_invalid_values(config_cls, kwargs):
    with pytest.raises(ValueError):
        config_cls(**kwargs)


def test_power_formula(sine_load):
    # Act
    power = build_power(
        CappedPowerConfig(idle_power=120.0, max_power=320.0, limit_watts=250.0), sine_load
    )

    # Assert
    assert power.formula == "P(t) = min(250, 120 + (320 − 120)·λ(t))"
    assert power.load is sine_load
