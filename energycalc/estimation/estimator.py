import logging
from typing import Any, Mapping, Optional

from energycalc.core.integration import build_integrator
from energycalc.core.load import build_load
from energycalc.core.power import build_power
from energycalc.estimation.config import EstimatorSettings
from energycalc.estimation.errors import ValidationError
from energycalc.estimation.results import ComputationResult, derive_result
from energycalc.estimation.validation import EstimationRequest, validate

logger = logging.getLogger(__name__)


def estimate(request: EstimationRequest, settings: EstimatorSettings) -> ComputationResult:
    """Integrates the power curve of an already validated request."""
    load = build_load(request.load_config())
    power = build_power(request.power_config(), load)
    integrator = build_integrator(request.method)

    energy_wh = integrator.integrate(
        power, request.lower_bound, request.upper_bound, request.steps
    )
    h = (request.upper_bound - request.lower_bound) / request.steps
    trace = (load.formula, power.formula, integrator.formula(h))
    return derive_result(request, energy_wh, settings, trace)


def compute(
    raw_inputs: Mapping[str, Any], settings: Optional[EstimatorSettings] = None
) -> ComputationResult:
    """
    Validate raw inputs and estimate energy, cost and CO₂ over [a, b].

    Args:
        raw_inputs: scalar inputs keyed by field name, numbers or numeric strings.
        settings: process-wide settings, defaults to ``EstimatorSettings()``.

    Returns:
        A fresh ComputationResult.

    Raises:
        ValidationError: the first failed check. Nothing is computed.
    """
    settings = settings or EstimatorSettings()
    try:
        request = validate(raw_inputs, settings)
    except ValidationError as err:
        logger.warning(f"Rejected estimation request ({err.code}): {err.message}")
        raise

    result = estimate(request, settings)
    logger.info(
        f"Estimated {result.energy_kwh:.6f} kWh for scenario '{request.scenario.value}' "
        f"with {request.method.value} rule, n={request.steps}"
    )
    return result
