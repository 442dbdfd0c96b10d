"""Adapter variants.

Importing this package registers every built-in variant.
"""

from factory_resolver.adapters.base import Adapter
from factory_resolver.adapters.blueprint import BlueprintAdapter
from factory_resolver.adapters.factory_boy import FactoryBoyAdapter
from factory_resolver.adapters.orm import OrmAdapter
from factory_resolver.adapters.registry import (
    available_adapters,
    get_adapter_class,
    register_adapter,
)

__all__ = [
    "Adapter",
    "BlueprintAdapter",
    "FactoryBoyAdapter",
    "OrmAdapter",
    "available_adapters",
    "get_adapter_class",
    "register_adapter",
]
