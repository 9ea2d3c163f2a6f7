from dataclasses import dataclass
from typing import Literal, Union


@dataclass(frozen=True, slots=True, kw_only=True)
class LinearPowerConfig:
    """Power interpolated between idle and maximum draw by the relative load."""

    idle_power: float = 0.0
    max_power: float = 1.0

    type: Literal["linear"] = "linear"

    def __post_init__(self):
        if self.idle_power < 0:
            raise ValueError("Idle power must be non-negative.")
        if self.max_power < self.idle_power:
            raise ValueError("Max power must be greater than or equal to idle power.")


@dataclass(frozen=True, slots=True, kw_only=True)
class CappedPowerConfig:
    """Linear power with a hard ceiling, used by the savings scenario."""

    idle_power: float = 0.0
    max_power: float = 1.0
    limit_watts: float = 1.0

    type: Literal["capped"] = "capped"

    def __post_init__(self):
        if self.idle_power < 0:
            raise ValueError("Idle power must be non-negative.")
        if self.max_power < self.idle_power:
            raise ValueError("Max power must be greater than or equal to idle power.")
        if self.limit_watts <= 0:
            raise ValueError("Power limit must be positive.")


PowerConfig = Union[LinearPowerConfig, CappedPowerConfig]
