"""Rejections reported by the input validator, one class per failed check."""

from typing import Optional


class ValidationError(ValueError):
    """Base class for rejected parameter sets. Nothing downstream runs."""

    code = "validation_error"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class MissingRequiredField(ValidationError):
    code = "missing_required_field"


class MalformedField(ValidationError):
    code = "malformed_field"


class UnknownOption(ValidationError):
    code = "unknown_option"


class InvalidBounds(ValidationError):
    code = "invalid_bounds"


class InvalidStepCount(ValidationError):
    code = "invalid_step_count"


class NegativeIdlePower(ValidationError):
    code = "negative_idle_power"


class PowerOrderingViolation(ValidationError):
    code = "power_ordering_violation"


class OddStepCountForSimpson(ValidationError):
    code = "odd_step_count_for_simpson"


class LoadCoefficientOutOfRange(ValidationError):
    code = "load_coefficient_out_of_range"


class MissingOrInvalidPeakSteepness(ValidationError):
    code = "missing_or_invalid_peak_steepness"


class PeakCenterOutOfBounds(ValidationError):
    code = "peak_center_out_of_bounds"


class MissingOrInvalidSavingsLimit(ValidationError):
    code = "missing_or_invalid_savings_limit"


class NegativeEmissionFactor(ValidationError):
    code = "negative_emission_factor"
