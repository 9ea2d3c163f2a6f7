import logging

from energycalc.core.load.config import LoadConfig
from energycalc.core.load.models import LoadModel
from energycalc.core.registry import registry

logger = logging.getLogger(__name__)


def build_load(config: LoadConfig) -> LoadModel:
    """Builds the relative-load curve for the given configuration."""
    if config.__class__.__name__ not in registry.loads:
        raise ValueError(f"Load config '{config.__class__.__name__}' not found in registry.")
    model = registry.loads[config.__class__.__name__](config)
    logger.debug(f"Built load model {model.formula}")
    return model
