"""Factory Resolver - create domain objects by name across factory backends."""

from factory_resolver.adapters import (
    Adapter,
    BlueprintAdapter,
    FactoryBoyAdapter,
    OrmAdapter,
    get_adapter_class,
    register_adapter,
)
from factory_resolver.backends import (
    register_blueprint,
    register_factory,
    register_model,
)
from factory_resolver.config import ResolverSettings, get_settings
from factory_resolver.errors import FactoryNotFoundError, UnknownAdapterError
from factory_resolver.naming import MASTER_TAG, normalize
from factory_resolver.resolver import FactoryResolver

__all__ = [
    "MASTER_TAG",
    "Adapter",
    "BlueprintAdapter",
    "FactoryBoyAdapter",
    "FactoryNotFoundError",
    "FactoryResolver",
    "OrmAdapter",
    "ResolverSettings",
    "UnknownAdapterError",
    "get_adapter_class",
    "get_settings",
    "normalize",
    "register_adapter",
    "register_blueprint",
    "register_factory",
    "register_model",
]
