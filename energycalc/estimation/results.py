from dataclasses import dataclass
from typing import Optional, Tuple

from energycalc.core.shared.types import IntegrationMethod, Scenario
from energycalc.estimation.config import EstimatorSettings
from energycalc.estimation.validation import EstimationRequest

WH_PER_KWH = 1000.0


@dataclass(frozen=True, slots=True, kw_only=True)
class ComputationResult:
    """
    Outcome of a single estimation.

    ``cost`` is None when no tariff was supplied. ``formula_trace`` lists the
    formulas actually used, in the order they were applied.
    """

    scenario: Scenario
    method: IntegrationMethod
    energy_wh: float
    energy_kwh: float
    cost: Optional[float]
    co2_kg: float
    emission_factor: float
    step_width: float
    formula_trace: Tuple[str, ...] = ()


def resolve_emission_factor(request: EstimationRequest, settings: EstimatorSettings) -> float:
    """kg CO₂ per kWh according to the configured policy."""
    if settings.emission_factor_policy == "input" and request.emission_factor is not None:
        return request.emission_factor
    return settings.emission_factor


def derive_result(
    request: EstimationRequest,
    energy_wh: float,
    settings: EstimatorSettings,
    trace: Tuple[str, ...] = (),
) -> ComputationResult:
    """Converts integrated Watt-hours into kWh, cost and CO₂ mass."""
    energy_kwh = energy_wh / WH_PER_KWH
    trace = tuple(trace) + (f"E_kWh = E_Wh / {WH_PER_KWH:g}",)

    cost = None
    if request.tariff_rate is not None:
        cost = energy_kwh * request.tariff_rate
        trace += (f"cost = E_kWh · {request.tariff_rate:g}",)

    emission_factor = resolve_emission_factor(request, settings)
    co2_kg = energy_kwh * emission_factor
    trace += (f"CO₂ = E_kWh · {emission_factor:g} kg/kWh",)

    return ComputationResult(
        scenario=request.scenario,
        method=request.method,
        energy_wh=energy_wh,
        energy_kwh=energy_kwh,
        cost=cost,
        co2_kg=co2_kg,
        emission_factor=emission_factor,
        step_width=(request.upper_bound - request.lower_bound) / request.steps,
        formula_trace=trace,
    )
