import logging

from energycalc.core.load.models import LoadModel
from energycalc.core.power.config import PowerConfig
from energycalc.core.power.models import PowerModel
from energycalc.core.registry import registry

logger = logging.getLogger(__name__)


def build_power(config: PowerConfig, load: LoadModel) -> PowerModel:
    """Wraps a load curve into a power model for the given configuration."""
    if config.__class__.__name__ not in registry.powers:
        raise ValueError(f"Power config '{config.__class__.__name__}' not found in registry.")
    model = registry.powers[config.__class__.__name__](config, load)
    logger.debug(f"Built power model {model.formula}")
    return model
