from abc import ABC, abstractmethod

import numpy as np

from energycalc.core.load.config import GaussianPeakLoadConfig, SineLoadConfig
from energycalc.core.registry import register_load
from energycalc.core.utils.functions import clamp_unit


class LoadModel(ABC):
    """Relative load λ(t), a dimensionless value in [0, 1]."""

    @abstractmethod
    def __call__(self, t):
        pass

    @property
    @abstractmethod
    def formula(self) -> str:
        """Human-readable form of the curve with its coefficients."""
        pass


@register_load(SineLoadConfig)
class SineLoadModel(LoadModel):
    def __init__(self, config: SineLoadConfig):
        self._config = config

    @property
    def config(self) -> SineLoadConfig:
        return self._config

    def __call__(self, t):
        return clamp_unit(self._config.base + self._config.amplitude * np.sin(np.pi * t))

    @property
    def formula(self) -> str:
        return f"λ(t) = clamp01({self._config.base:g} + {self._config.amplitude:g}·sin(π·t))"


@register_load(GaussianPeakLoadConfig)
class GaussianPeakLoadModel(LoadModel):
    """
    Load concentrated around a peak hour.

    With the "offset" shape the curve is base + amplitude·exp(−k·(t − t0)²),
    with the "bare" shape base and amplitude are ignored and λ(t) = exp(−k·(t − t0)²).
    """

    def __init__(self, config: GaussianPeakLoadConfig):
        self._config = config

    @property
    def config(self) -> GaussianPeakLoadConfig:
        return self._config

    def __call__(self, t):
        cfg = self._config
        bump = np.exp(-cfg.steepness * (t - cfg.center) ** 2)
        if cfg.shape == "bare":
            return clamp_unit(bump)
        return clamp_unit(cfg.base + cfg.amplitude * bump)

    @property
    def formula(self) -> str:
        cfg = self._config
        bump = f"exp(−{cfg.steepness:g}·(t − {cfg.center:g})²)"
        if cfg.shape == "bare":
            return f"λ(t) = clamp01({bump})"
        return f"λ(t) = clamp01({cfg.base:g} + {cfg.amplitude:g}·{bump})"
