from energycalc.core.integration.base import Integrator
from energycalc.core.integration.methods import * # noqa: F403, F401 # register all methods
from energycalc.core.integration.factory import build_integrator

__all__ = [
    "Integrator",
    "build_integrator",
]
