from dataclasses import dataclass, field


@dataclass
class Registry:
    """
    A central registry for load, power and integration models.

    ``loads`` and ``powers`` are keyed by config class name, ``integrators``
    by ``IntegrationMethod``.
    """
    loads: dict = field(default_factory=dict)
    powers: dict = field(default_factory=dict)
    integrators: dict = field(default_factory=dict)

registry = Registry()

def register_load(config_cls):
    """Decorator to register a load model class with its config class."""
    def decorator(cls):
        registry.loads[config_cls.__name__] = cls
        return cls
    return decorator

def register_power(config_cls):
    """Decorator to register a power model class with its config class."""
    def decorator(cls):
        registry.powers[config_cls.__name__] = cls
        return cls
    return decorator

def register_integrator(method):
    """Decorator to register an integrator class under an integration method."""
    def decorator(cls):
        registry.integrators[method] = cls
        return cls
    return decorator
