"""Which parameters apply to which scenario, for presentation layers."""

from typing import Mapping

from energycalc.core.shared.types import IntegrationMethod, Scenario
from energycalc.estimation.config import EstimatorSettings

COMMON_PARAMETERS = ("a", "b", "n", "idle_power", "max_power")
LOAD_COEFFICIENT_PARAMETERS = ("base", "amplitude")

# scenario-specific parameter -> required
SCENARIO_PARAMETERS: Mapping[Scenario, Mapping[str, bool]] = {
    Scenario.NORMAL: {},
    Scenario.PEAK: {"k": True, "t0": False},
    Scenario.SAVINGS: {"savings_limit_watts": True},
}

RECOMMENDED_METHODS: Mapping[Scenario, IntegrationMethod] = {
    Scenario.NORMAL: IntegrationMethod.SIMPSON,
    Scenario.PEAK: IntegrationMethod.SIMPSON,
    Scenario.SAVINGS: IntegrationMethod.TRAPEZOIDAL,
}


def recommended_method(scenario: Scenario) -> IntegrationMethod:
    return RECOMMENDED_METHODS[Scenario(scenario)]


def applicable_parameters(scenario: Scenario, settings: EstimatorSettings) -> dict[str, bool]:
    """Ordered mapping of every parameter to request for ``scenario`` -> required."""
    scenario = Scenario(scenario)
    params = {name: True for name in COMMON_PARAMETERS}
    if settings.load_coefficients == "input":
        params.update({name: True for name in LOAD_COEFFICIENT_PARAMETERS})
    params.update(SCENARIO_PARAMETERS[scenario])
    params["tariff_rate"] = False
    if settings.emission_factor_policy == "input":
        params["emission_factor"] = False
    return params
