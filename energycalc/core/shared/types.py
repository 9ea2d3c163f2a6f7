from enum import Enum


class Scenario(str, Enum):
    """Operating scenario, selects the load curve and the power ceiling rule."""

    NORMAL = "normal"
    PEAK = "peak"
    SAVINGS = "savings"


class IntegrationMethod(str, Enum):
    TRAPEZOIDAL = "trapezoidal"
    SIMPSON = "simpson"
