"""Backend collaborators: where adapters discover factory units."""

from factory_resolver.backends.blueprints import (
    BlueprintRegistry,
    default_blueprints,
    register_blueprint,
)
from factory_resolver.backends.definitions import (
    FactoryDefinitions,
    default_definitions,
    factory_boy_available,
    register_factory,
)
from factory_resolver.backends.models import ModelRegistry, default_models, register_model

__all__ = [
    "BlueprintRegistry",
    "FactoryDefinitions",
    "ModelRegistry",
    "default_blueprints",
    "default_definitions",
    "default_models",
    "factory_boy_available",
    "register_blueprint",
    "register_factory",
    "register_model",
]
