from energycalc.estimation.config import (
    EstimatorSettings,
    LoadPreset,
    load_request,
    load_settings,
)
from energycalc.estimation.estimator import compute, estimate
from energycalc.estimation.results import ComputationResult
from energycalc.estimation.validation import EstimationRequest, validate

__all__ = [
    "ComputationResult",
    "EstimationRequest",
    "EstimatorSettings",
    "LoadPreset",
    "compute",
    "estimate",
    "load_request",
    "load_settings",
    "validate",
]
