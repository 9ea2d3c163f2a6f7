from energycalc.core.power.config import (
    CappedPowerConfig,
    LinearPowerConfig,
    PowerConfig,
)
from energycalc.core.power.models import * # noqa: F403, F401 # register all models
from energycalc.core.power.factory import build_power

__all__ = [
    "CappedPowerConfig",
    "LinearPowerConfig",
    "PowerConfig",
    "build_power",
]
