import numpy as np

from energycalc.core.integration.base import Integrator
from energycalc.core.registry import register_integrator
from energycalc.core.shared.types import IntegrationMethod


@register_integrator(IntegrationMethod.TRAPEZOIDAL)
class TrapezoidalIntegrator(Integrator):
    """E = (h/2)·[P(a) + P(b) + 2·Σ P(a + i·h)], valid for any n."""

    name = "trapezoidal"

    def weights(self, steps: int) -> np.ndarray:
        weights = np.full(steps + 1, 2.0)
        weights[0] = weights[-1] = 1.0
        return weights

    def scale(self, step_width: float) -> float:
        return step_width / 2

    def formula(self, step_width: float) -> str:
        return f"E ≈ (h/2)·[P(a) + P(b) + 2·Σ P(a + i·h)], h = {step_width:g}"


@register_integrator(IntegrationMethod.SIMPSON)
class SimpsonIntegrator(Integrator):
    """
    E = (h/3)·[P(a) + P(b) + 4·Σ_odd P(a + i·h) + 2·Σ_even P(a + i·h)].

    Only meaningful for even n. Parity is not checked here, an odd n gives
    a wrong value rather than an error.
    """

    name = "simpson"

    def weights(self, steps: int) -> np.ndarray:
        weights = np.where(np.arange(steps + 1) % 2 == 1, 4.0, 2.0)
        weights[0] = weights[-1] = 1.0
        return weights

    def scale(self, step_width: float) -> float:
        return step_width / 3

    def formula(self, step_width: float) -> str:
        return (
            "E ≈ (h/3)·[P(a) + P(b) + 4·Σ_odd P(a + i·h) + 2·Σ_even P(a + i·h)], "
            f"h = {step_width:g}"
        )
