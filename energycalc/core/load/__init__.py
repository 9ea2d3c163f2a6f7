from energycalc.core.load.config import (
    GaussianPeakLoadConfig,
    LoadConfig,
    SineLoadConfig,
)
from energycalc.core.load.models import * # noqa: F403, F401 # register all models
from energycalc.core.load.factory import build_load

__all__ = [
    "GaussianPeakLoadConfig",
    "LoadConfig",
    "SineLoadConfig",
    "build_load",
]
