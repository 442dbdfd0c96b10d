"""Adapter for named factory_boy factory definitions."""

from collections.abc import Mapping
from typing import Any, ClassVar

import structlog

from factory_resolver.adapters.base import Adapter
from factory_resolver.adapters.registry import register_adapter
from factory_resolver.backends.definitions import (
    FactoryDefinitions,
    build_class,
    default_definitions,
    factory_boy_available,
)

logger = structlog.get_logger()


@register_adapter("factory_boy")
class FactoryBoyAdapter(Adapter):
    """One adapter per registered factory; the declared name is used verbatim."""

    definitions: ClassVar[FactoryDefinitions] = default_definitions

    def __init__(self, factory_cls: Any, name: str):
        self.factory_cls = factory_cls
        self._name = str(name)
        self._model_class = build_class(factory_cls)

    def _key(self) -> tuple:
        return (*super()._key(), self.factory_cls)

    @classmethod
    def backend_available(cls) -> bool:
        return factory_boy_available()

    @classmethod
    def factories(cls) -> list[Adapter]:
        if not cls.backend_available():
            logger.debug("backend_unavailable", adapter="factory_boy")
            return []
        return [cls(factory_cls, name) for name, factory_cls in cls.definitions.definitions().items()]

    def create(self, attrs: Mapping[str, Any] | None = None) -> Any:
        """Run the factory's create strategy with ``attrs`` as overrides."""
        logger.debug("factory_boy_create", factory=self._name)
        return self.factory_cls.create(**dict(attrs or {}))
