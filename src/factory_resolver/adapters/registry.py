"""Registry of adapter variants, keyed by the names used in configuration."""

from factory_resolver.adapters.base import Adapter
from factory_resolver.errors import UnknownAdapterError

# Global registry
_ADAPTER_REGISTRY: dict[str, type[Adapter]] = {}


def register_adapter(key: str):
    """Decorator to register an adapter variant.

    Usage:
        @register_adapter("orm")
        class OrmAdapter(Adapter):
            ...
    """

    def decorator(cls: type[Adapter]) -> type[Adapter]:
        _ADAPTER_REGISTRY[key] = cls
        return cls

    return decorator


def get_adapter_class(key: str) -> type[Adapter]:
    """Get an adapter variant by key.

    Args:
        key: Registry key, e.g. ``"orm"`` or ``"factory_boy"``.

    Returns:
        The registered Adapter subclass.

    Raises:
        UnknownAdapterError: If the key is not registered.
    """
    if key not in _ADAPTER_REGISTRY:
        raise UnknownAdapterError(key, _ADAPTER_REGISTRY)
    return _ADAPTER_REGISTRY[key]


def available_adapters() -> list[str]:
    """Registered adapter keys, in registration order."""
    return list(_ADAPTER_REGISTRY)
