from abc import ABC, abstractmethod
from typing import Callable
import logging

import numpy as np

logger = logging.getLogger(__name__)


class Integrator(ABC):
    """
    Composite quadrature rule over n equal subintervals of [a, b].

    Power is sampled at the nodes t_i = a + i·h with h = (b − a)/n in a
    single call, so ``power`` must evaluate element-wise. The weighted
    samples are summed as plain floats. With t in hours and P in Watts the
    result is in Watt-hours.
    """

    name: str = "integrator"

    @abstractmethod
    def weights(self, steps: int) -> np.ndarray:
        """Weights of the n + 1 samples, before scaling by the step width."""
        pass

    @abstractmethod
    def scale(self, step_width: float) -> float:
        pass

    @abstractmethod
    def formula(self, step_width: float) -> str:
        pass

    def integrate(
        self,
        power: Callable[[np.ndarray], np.ndarray],
        lower_bound: float,
        upper_bound: float,
        steps: int,
    ) -> float:
        if steps <= 0:
            raise ValueError("Number of steps must be positive.")
        if not upper_bound > lower_bound:
            raise ValueError("Upper bound must be greater than lower bound.")

        h = (upper_bound - lower_bound) / steps
        nodes = lower_bound + np.arange(steps + 1) * h
        # constant callables return a scalar for the whole grid
        samples = np.broadcast_to(np.asarray(power(nodes), dtype=float), nodes.shape)
        energy = self.scale(h) * float(np.dot(self.weights(steps), samples))

        logger.debug(
            f"{self.name}: n={steps}, h={h:g}, [{lower_bound:g}, {upper_bound:g}] -> {energy:g}"
        )
        return energy
