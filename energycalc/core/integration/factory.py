from energycalc.core.integration.base import Integrator
from energycalc.core.registry import registry
from energycalc.core.shared.types import IntegrationMethod


def build_integrator(method: IntegrationMethod) -> Integrator:
    method = IntegrationMethod(method)
    if method not in registry.integrators:
        raise ValueError(f"Integration method '{method.value}' not found in registry.")
    return registry.integrators[method]()
