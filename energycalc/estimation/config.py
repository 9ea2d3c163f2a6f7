"""Process-wide settings for the estimator and YAML loading helpers."""

from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Optional

import dacite
import yaml

from energycalc.core.shared.types import Scenario

DEFAULT_EMISSION_FACTOR_KG_PER_KWH = 0.25
DEFAULT_MAX_STEPS = 10_000_000


@dataclass(frozen=True, slots=True, kw_only=True)
class LoadPreset:
    """Fixed load coefficients used when they are not taken from input."""

    base: float
    amplitude: float

    def __post_init__(self):
        if not (0.0 <= self.base <= 1.0):
            raise ValueError("Preset base must be between 0 and 1.")
        if not (0.0 <= self.amplitude <= 1.0):
            raise ValueError("Preset amplitude must be between 0 and 1.")


DEFAULT_PRESETS = {
    Scenario.NORMAL.value: LoadPreset(base=0.5, amplitude=0.3),
    Scenario.PEAK.value: LoadPreset(base=0.3, amplitude=0.6),
    Scenario.SAVINGS.value: LoadPreset(base=0.5, amplitude=0.3),
}


@dataclass(frozen=True, kw_only=True)
class EstimatorSettings:
    """
    Configuration axes for the estimator.

    emission_factor_policy:
        "fixed" always uses ``emission_factor``; "input" uses the caller's
        emission factor and falls back to ``emission_factor`` when absent.
    load_coefficients:
        "input" requires base and amplitude in every request; "preset" takes
        them from ``presets`` keyed by scenario.
    peak_shape:
        "offset" for base + amplitude·exp(−k·(t − t0)²), "bare" for exp(−k·(t − t0)²).
    max_steps:
        Upper bound on the number of subintervals, keeps a single call O(max_steps).
    """

    emission_factor: float = DEFAULT_EMISSION_FACTOR_KG_PER_KWH
    emission_factor_policy: Literal["fixed", "input"] = "fixed"
    load_coefficients: Literal["input", "preset"] = "input"
    peak_shape: Literal["offset", "bare"] = "offset"
    presets: Dict[str, LoadPreset] = field(default_factory=lambda: dict(DEFAULT_PRESETS))
    max_steps: int = DEFAULT_MAX_STEPS

    def __post_init__(self) -> None:
        if self.emission_factor < 0:
            raise ValueError("emission_factor must be non-negative")
        if self.emission_factor_policy not in ("fixed", "input"):
            raise ValueError(f"Unknown emission factor policy: {self.emission_factor_policy}")
        if self.load_coefficients not in ("input", "preset"):
            raise ValueError(f"Unknown load coefficient source: {self.load_coefficients}")
        if self.peak_shape not in ("offset", "bare"):
            raise ValueError(f"Unknown peak shape: {self.peak_shape}")
        if self.max_steps <= 0:
            raise ValueError("max_steps must be positive")
        unknown = set(self.presets) - {s.value for s in Scenario}
        if unknown:
            raise ValueError(f"Presets given for unknown scenarios: {sorted(unknown)}")

    def preset_for(self, scenario: Scenario) -> LoadPreset:
        scenario = Scenario(scenario)
        return self.presets.get(scenario.value, DEFAULT_PRESETS[scenario.value])


def settings_from_dict(data: Optional[Dict[str, Any]]) -> EstimatorSettings:
    return dacite.from_dict(EstimatorSettings, data or {}, config=dacite.Config(strict=True))


def load_settings(path: str) -> EstimatorSettings:
    """Load estimator settings from a YAML file."""
    with open(path, "r") as file:
        yaml_cfg = yaml.safe_load(file)
    return settings_from_dict(yaml_cfg)


def load_request(path: str) -> Dict[str, Any]:
    """Load raw request inputs from a YAML file."""
    with open(path, "r") as file:
        yaml_cfg = yaml.safe_load(file)
    if yaml_cfg is None:
        return {}
    if not isinstance(yaml_cfg, dict):
        raise ValueError(f"Request file '{path}' must contain a mapping.")
    return yaml_cfg
