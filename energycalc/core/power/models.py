from abc import ABC, abstractmethod

import numpy as np

from energycalc.core.load.models import LoadModel
from energycalc.core.power.config import CappedPowerConfig, LinearPowerConfig
from energycalc.core.registry import register_power


class PowerModel(ABC):
    """Instantaneous power P(t) in Watts."""

    def __init__(self, load: LoadModel):
        self._load = load

    @property
    def load(self) -> LoadModel:
        return self._load

    @abstractmethod
    def __call__(self, t):
        pass

    @property
    @abstractmethod
    def formula(self) -> str:
        pass


@register_power(LinearPowerConfig)
class LinearPowerModel(PowerModel):
    def __init__(self, config: LinearPowerConfig, load: LoadModel):
        super().__init__(load)
        self._config = config

    def __call__(self, t):
        idle = self._config.idle_power
        return idle + (self._config.max_power - idle) * self._load(t)

    @property
    def formula(self) -> str:
        idle = self._config.idle_power
        return f"P(t) = {idle:g} + ({self._config.max_power:g} − {idle:g})·λ(t)"


@register_power(CappedPowerConfig)
class CappedPowerModel(PowerModel):
    """P(t) = min(L, P_normal(t)); the load curve itself is not altered."""

    def __init__(self, config: CappedPowerConfig, load: LoadModel):
        super().__init__(load)
        self._config = config

    def __call__(self, t):
        idle = self._config.idle_power
        normal = idle + (self._config.max_power - idle) * self._load(t)
        if isinstance(normal, np.ndarray):
            return np.minimum(self._config.limit_watts, normal)
        return min(self._config.limit_watts, normal)

    @property
    def formula(self) -> str:
        idle = self._config.idle_power
        return (
            f"P(t) = min({self._config.limit_watts:g}, "
            f"{idle:g} + ({self._config.max_power:g} − {idle:g})·λ(t))"
        )
