from energycalc.core.shared.types import IntegrationMethod, Scenario
from energycalc.estimation import (
    ComputationResult,
    EstimatorSettings,
    compute,
    load_request,
    load_settings,
    validate,
)
from energycalc.estimation.capabilities import applicable_parameters, recommended_method
from energycalc.estimation.errors import ValidationError

__all__ = [
    "ComputationResult",
    "EstimatorSettings",
    "IntegrationMethod",
    "Scenario",
    "ValidationError",
    "applicable_parameters",
    "compute",
    "load_request",
    "load_settings",
    "recommended_method",
    "validate",
]
