"""Tests for the composite trapezoidal and Simpson integrators."""

import math

import numpy as np
import pytest
from energycalc.core.integration import build_integrator
from energycalc.core.integration.methods import SimpsonIntegrator, TrapezoidalIntegrator
from energycalc.core.shared.types import IntegrationMethod


def test_build_integrator_by_method():
    assert isinstance(build_integrator(IntegrationMethod.TRAPEZOIDAL), TrapezoidalIntegrator)
    assert isinstance(build_integrator("simpson"), SimpsonIntegrator)


def test_build_integrator_unknown_method():
    with pytest.raises(ValueError):
        build_integrator("midpoint")


@pytest.mark.parametrize("method", list(IntegrationMethod))
@pytest.mark.parametrize("steps", [2, 4, 10, 1000])
def test_constant_power_integrates_exactly(method, steps):
    # Arrange
    integrator = build_integrator(method)

    # Act
    energy = integrator.integrate(lambda t: 150.0, 2.0, 5.0, steps)

    # Assert
    assert energy == pytest.approx(150.0 * 3.0, rel=1e-12)


@pytest.mark.parametrize("steps", [1, 3, 7])
def test_trapezoidal_accepts_odd_steps(steps):
    energy = TrapezoidalIntegrator().integrate(lambda t: 10.0, 0.0, 1.0, steps)

    assert energy == pytest.approx(10.0)


def test_trapezoidal_is_exact_for_linear_power():
    # Act
    energy = TrapezoidalIntegrator().integrate(lambda t: 100.0 + 20.0 * t, 0.0, 2.0, 5)

    # Assert
    assert energy == pytest.approx(240.0)


def test_simpson_is_exact_for_cubic_power():
    # Act
    energy = SimpsonIntegrator().integrate(lambda t: t**3, 0.0, 2.0, 2)

    # Assert
    assert energy == pytest.approx(4.0)


def test_trapezoidal_matches_hand_computed_sum():
    # Arrange
    def power(t):
        return 100.0 + 50.0 * np.sin(np.pi * t)

    a, b, n = 0.0, 1.0, 4
    h = (b - a) / n
    expected = (h / 2) * (power(a) + power(b) + 2 * sum(power(a + i * h) for i in range(1, n)))

    # Act
    energy = TrapezoidalIntegrator().integrate(power, a, b, n)

    # Assert
    assert energy == pytest.approx(expected, rel=1e-14)


def test_simpson_matches_hand_computed_sum():
    # Arrange
    def power(t):
        return 100.0 + 50.0 * np.sin(np.pi * t)

    a, b, n = 0.0, 1.0, 6
    h = (b - a) / n
    odd = sum(power(a + i * h) for i in range(1, n, 2))
    even = sum(power(a + i * h) for i in range(2, n, 2))
    expected = (h / 3) * (power(a) + power(b) + 4 * odd + 2 * even)

    # Act
    energy = SimpsonIntegrator().integrate(power, a, b, n)

    # Assert
    assert energy == pytest.approx(expected, rel=1e-14)


def test_rules_converge_to_the_same_limit():
    # Arrange
    def power(t):
        return 120.0 + 200.0 * (0.5 + 0.3 * np.sin(np.pi * t))

    exact = 120.0 + 200.0 * (0.5 + 0.3 * 2 / math.pi)

    # Act
    trapezoidal = TrapezoidalIntegrator().integrate(power, 0.0, 1.0, 2000)
    simpson = SimpsonIntegrator().integrate(power, 0.0, 1.0, 2000)

    # Assert
    assert trapezoidal == pytest.approx(exact, rel=1e-6)
    assert simpson == pytest.approx(exact, rel=1e-10)


def test_simpson_does_not_check_parity():
    # Odd n gives a wrong value, not an error
    energy = SimpsonIntegrator().integrate(lambda t: 3.0, 0.0, 1.0, 3)

    assert np.isfinite(energy)
    assert energy != pytest.approx(3.0)


def test_weights():
    np.testing.assert_array_equal(TrapezoidalIntegrator().weights(3), [1.0, 2.0, 2.0, 1.0])
    np.testing.assert_array_equal(SimpsonIntegrator().weights(4), [1.0, 4.0, 2.0, 4.0, 1.0])


@pytest.mark.parametrize("a, b, steps", [(0.0, 1.0, 0), (0.0, 1.0, -2), (1.0, 1.0, 2), (2.0, 1.0, 2)])
def test_integrate_rejects_degenerate_requests(a, b, steps):
    with pytest.raises(ValueError):
        TrapezoidalIntegrator().integrate(lambda t: 1.0, a, b, steps)


def test_power_is_sampled_in_one_call():
    # Arrange
    calls = []

    def power(t):
        calls.append(t)
        return 2.0 * t

    # Act
    energy = TrapezoidalIntegrator().integrate(power, 0.0, 1.0, 8)

    # Assert
    assert len(calls) == 1
    np.testing.assert_allclose(calls[0], np.linspace(0.0, 1.0, 9))
    assert energy == pytest.approx(1.0)
