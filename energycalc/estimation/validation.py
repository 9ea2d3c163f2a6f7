"""
Ordered validation of raw estimator inputs.

Checks run in a fixed order and the first failing one is reported, so a
parameter set with several problems always yields the same error.
"""

import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional
import logging

from energycalc.core.load.config import GaussianPeakLoadConfig, LoadConfig, SineLoadConfig
from energycalc.core.power.config import CappedPowerConfig, LinearPowerConfig, PowerConfig
from energycalc.core.shared.types import IntegrationMethod, Scenario
from energycalc.estimation.config import EstimatorSettings
from energycalc.estimation.errors import (
    InvalidBounds,
    InvalidStepCount,
    LoadCoefficientOutOfRange,
    MalformedField,
    MissingOrInvalidPeakSteepness,
    MissingOrInvalidSavingsLimit,
    MissingRequiredField,
    NegativeEmissionFactor,
    NegativeIdlePower,
    OddStepCountForSimpson,
    PeakCenterOutOfBounds,
    PowerOrderingViolation,
    UnknownOption,
)

logger = logging.getLogger(__name__)

# Accepted spellings per field, first match wins.
FIELD_ALIASES = {
    "scenario": ("scenario",),
    "method": ("method",),
    "a": ("a", "lower_bound"),
    "b": ("b", "upper_bound"),
    "n": ("n", "steps"),
    "idle_power": ("idle_power", "idlePower"),
    "max_power": ("max_power", "maxPower"),
    "base": ("base",),
    "amplitude": ("amplitude",),
    "k": ("k", "steepness"),
    "t0": ("t0", "center"),
    "savings_limit_watts": ("savings_limit_watts", "savingsLimitWatts"),
    "tariff_rate": ("tariff_rate", "tariffRate"),
    "emission_factor": ("emission_factor", "emissionFactor"),
}


@dataclass(frozen=True, slots=True, kw_only=True)
class EstimationRequest:
    """Fully resolved, typed parameter set accepted by the validator."""

    scenario: Scenario
    method: IntegrationMethod
    lower_bound: float
    upper_bound: float
    steps: int
    idle_power: float
    max_power: float
    base: float
    amplitude: float
    steepness: Optional[float] = None
    center: Optional[float] = None
    peak_shape: str = "offset"
    savings_limit_watts: Optional[float] = None
    tariff_rate: Optional[float] = None
    emission_factor: Optional[float] = None

    def load_config(self) -> LoadConfig:
        if self.scenario == Scenario.PEAK:
            return GaussianPeakLoadConfig(
                steepness=self.steepness,
                center=self.center,
                base=self.base,
                amplitude=self.amplitude,
                shape=self.peak_shape,
            )
        # savings reuses the normal curve, the cap is applied to power
        return SineLoadConfig(base=self.base, amplitude=self.amplitude)

    def power_config(self) -> PowerConfig:
        if self.scenario == Scenario.SAVINGS:
            return CappedPowerConfig(
                idle_power=self.idle_power,
                max_power=self.max_power,
                limit_watts=self.savings_limit_watts,
            )
        return LinearPowerConfig(idle_power=self.idle_power, max_power=self.max_power)


def _lookup(raw: Mapping[str, Any], name: str) -> Any:
    """Returns the raw value for ``name``, None when absent or blank."""
    for key in FIELD_ALIASES[name]:
        value = raw.get(key)
        if isinstance(value, str):
            value = value.strip()
            if value == "":
                continue
        if value is not None:
            return value
    return None


def _to_float(value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError("booleans are not numbers")
    number = float(value)
    if not math.isfinite(number):
        raise ValueError("number must be finite")
    return number


def _number(raw: Mapping[str, Any], name: str, error_cls=MalformedField) -> Optional[float]:
    value = _lookup(raw, name)
    if value is None:
        return None
    try:
        return _to_float(value)
    except (TypeError, ValueError, OverflowError):
        raise error_cls(f"Field '{name}' must be a number, got {value!r}.", field=name)


def _option(raw: Mapping[str, Any], name: str, enum_cls):
    value = _lookup(raw, name)
    try:
        return enum_cls(value.lower() if isinstance(value, str) else value)
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        raise UnknownOption(f"Field '{name}' must be one of {choices}, got {value!r}.", field=name)


def validate(raw: Mapping[str, Any], settings: Optional[EstimatorSettings] = None) -> EstimationRequest:
    """
    Check raw inputs and resolve defaults.

    Raises:
        ValidationError: the subclass naming the first failed check.
    """
    settings = settings or EstimatorSettings()
    coefficients_from_input = settings.load_coefficients == "input"

    # 1. required fields
    required = ["scenario", "method", "a", "b", "n", "idle_power", "max_power"]
    if coefficients_from_input:
        required += ["base", "amplitude"]
    for name in required:
        if _lookup(raw, name) is None:
            raise MissingRequiredField(f"Required field '{name}' is missing.", field=name)

    scenario = _option(raw, "scenario", Scenario)
    method = _option(raw, "method", IntegrationMethod)
    a = _number(raw, "a")
    b = _number(raw, "b")
    n = _number(raw, "n")
    idle_power = _number(raw, "idle_power")
    max_power = _number(raw, "max_power")
    if coefficients_from_input:
        base = _number(raw, "base")
        amplitude = _number(raw, "amplitude")
    else:
        preset = settings.preset_for(scenario)
        base, amplitude = preset.base, preset.amplitude

    # 2. bounds
    if not b > a:
        raise InvalidBounds(f"Upper bound b ({b:g}) must be greater than a ({a:g}).", field="b")
    if not math.isfinite(b - a):
        raise InvalidBounds(f"Interval [{a:g}, {b:g}] is too wide to integrate.", field="b")

    # 3. step count
    if not n.is_integer() or n <= 0:
        raise InvalidStepCount(f"n must be a positive integer, got {n:g}.", field="n")
    steps = int(n)
    if steps > settings.max_steps:
        raise InvalidStepCount(
            f"n must not exceed {settings.max_steps}, got {steps}.", field="n"
        )

    # 4. power ordering
    if idle_power < 0:
        raise NegativeIdlePower(f"Idle power must be non-negative, got {idle_power:g}.", field="idle_power")
    if max_power < idle_power:
        raise PowerOrderingViolation(
            f"Max power ({max_power:g}) must be >= idle power ({idle_power:g}).", field="max_power"
        )

    # 5. Simpson parity
    if method == IntegrationMethod.SIMPSON and steps % 2 != 0:
        raise OddStepCountForSimpson(f"Simpson's rule needs an even n, got {steps}.", field="n")

    # 6. load coefficients
    if coefficients_from_input:
        for name, value in (("base", base), ("amplitude", amplitude)):
            if not (0.0 <= value <= 1.0):
                raise LoadCoefficientOutOfRange(
                    f"Load {name} must be between 0 and 1, got {value:g}.", field=name
                )

    # 7. scenario-specific
    steepness = None
    center = None
    savings_limit = None
    if scenario == Scenario.PEAK:
        steepness = _number(raw, "k", MissingOrInvalidPeakSteepness)
        if steepness is None:
            raise MissingOrInvalidPeakSteepness("Peak scenario requires the steepness k.", field="k")
        if steepness <= 0:
            raise MissingOrInvalidPeakSteepness(f"Steepness k must be > 0, got {steepness:g}.", field="k")
        center = _number(raw, "t0")
        if center is None:
            center = (a + b) / 2
        elif not (a <= center <= b):
            raise PeakCenterOutOfBounds(
                f"Peak center t0 ({center:g}) must lie within [{a:g}, {b:g}].", field="t0"
            )
    elif scenario == Scenario.SAVINGS:
        savings_limit = _number(raw, "savings_limit_watts", MissingOrInvalidSavingsLimit)
        if savings_limit is None:
            raise MissingOrInvalidSavingsLimit(
                "Savings scenario requires the power limit in Watts.", field="savings_limit_watts"
            )
        if savings_limit <= 0:
            raise MissingOrInvalidSavingsLimit(
                f"Power limit must be > 0 W, got {savings_limit:g}.", field="savings_limit_watts"
            )

    # 8. optional derived-quantity inputs
    tariff_rate = _number(raw, "tariff_rate")
    emission_factor = _number(raw, "emission_factor")
    if emission_factor is not None and emission_factor < 0:
        raise NegativeEmissionFactor(
            f"Emission factor must be non-negative, got {emission_factor:g}.", field="emission_factor"
        )

    request = EstimationRequest(
        scenario=scenario,
        method=method,
        lower_bound=a,
        upper_bound=b,
        steps=steps,
        idle_power=idle_power,
        max_power=max_power,
        base=base,
        amplitude=amplitude,
        steepness=steepness,
        center=center,
        peak_shape=settings.peak_shape,
        savings_limit_watts=savings_limit,
        tariff_rate=tariff_rate,
        emission_factor=emission_factor,
    )
    logger.debug(f"Accepted request: {request}")
    return request
