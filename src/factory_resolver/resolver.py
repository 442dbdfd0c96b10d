"""Name aggregation across adapter variants.

``FactoryResolver`` merges the adapters of every active variant into one
name -> adapter mapping. Variants are consulted in the configured order
and a later variant overwrites same-named factories of earlier ones.
"""

import difflib
from collections.abc import Mapping, Sequence
from typing import Any

import structlog

from factory_resolver.adapters import Adapter, get_adapter_class
from factory_resolver.config import ResolverSettings, get_settings
from factory_resolver.errors import FactoryNotFoundError

logger = structlog.get_logger()


class FactoryResolver:
    """Resolve factories by name across an ordered list of adapter variants.

    Args:
        adapters: Adapter classes, in collision-resolution order.
        cache: Keep the merged mapping until ``invalidate`` is called.
            Factories declared while cached are not seen until then.
    """

    def __init__(self, adapters: Sequence[type[Adapter]], cache: bool = False):
        self.adapters = tuple(adapters)
        self.cache = cache
        self._factories: dict[str, Adapter] | None = None

    @classmethod
    def from_settings(cls, settings: ResolverSettings | None = None) -> "FactoryResolver":
        """Build a resolver from configured adapter keys.

        Raises:
            UnknownAdapterError: If a configured key is not registered.
        """
        settings = settings or get_settings()
        adapters = [get_adapter_class(key) for key in settings.adapter_keys]
        return cls(adapters, cache=settings.cache_factories)

    def factories_by_name(self) -> dict[str, Adapter]:
        """Return the merged name -> adapter mapping."""
        if self.cache and self._factories is not None:
            return dict(self._factories)

        factories: dict[str, Adapter] = {}
        for adapter_cls in self.adapters:
            for factory in adapter_cls.factories():
                previous = factories.get(factory.name)
                if previous is not None:
                    logger.debug(
                        "factory_name_overridden",
                        factory=factory.name,
                        previous=type(previous).__name__,
                        current=adapter_cls.__name__,
                    )
                factories[factory.name] = factory

        logger.debug(
            "factories_resolved",
            adapters=[adapter_cls.__name__ for adapter_cls in self.adapters],
            count=len(factories),
        )
        if self.cache:
            self._factories = factories
        return dict(factories)

    def names(self) -> list[str]:
        """Sorted names of every resolvable factory."""
        return sorted(self.factories_by_name())

    def get(self, name: str) -> Adapter:
        """Return the adapter registered under ``name``.

        Raises:
            FactoryNotFoundError: If no active variant provides ``name``.
        """
        factories = self.factories_by_name()
        if name not in factories:
            suggestions = difflib.get_close_matches(name, list(factories), n=3)
            raise FactoryNotFoundError(name, suggestions)
        return factories[name]

    def create(self, name: str, attrs: Mapping[str, Any] | None = None, **kwargs: Any) -> Any:
        """Create an object through the factory named ``name``.

        Keyword arguments are merged over ``attrs``. Backend errors propagate
        unchanged.
        """
        factory = self.get(name)
        merged = {**(attrs or {}), **kwargs}
        logger.info("factory_create", factory=name, adapter=type(factory).__name__)
        return factory.create(merged)

    def invalidate(self) -> None:
        """Drop the cached mapping; the next lookup rebuilds it."""
        self._factories = None
