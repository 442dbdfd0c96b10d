"""Adapter for per-model blueprints with tagged variants."""

from collections.abc import Mapping
from typing import Any, ClassVar

import structlog

from factory_resolver.adapters.base import Adapter
from factory_resolver.adapters.registry import register_adapter
from factory_resolver.backends.blueprints import BlueprintRegistry, default_blueprints
from factory_resolver.backends.definitions import factory_boy_available
from factory_resolver.backends.models import ModelRegistry, default_models
from factory_resolver.naming import MASTER_TAG, normalize, qualified_name

logger = structlog.get_logger()


@register_adapter("blueprint")
class BlueprintAdapter(Adapter):
    """One adapter per (model class, tag) pair.

    The master blueprint is named after the class (``three``); a tagged one
    is prefixed with its tag (``special_three``).
    """

    models: ClassVar[ModelRegistry] = default_models
    blueprints: ClassVar[BlueprintRegistry] = default_blueprints

    def __init__(self, model_class: type, tag: str = MASTER_TAG):
        self._model_class = model_class
        self.tag = tag
        self._name = normalize(qualified_name(model_class), tag)

    @classmethod
    def backend_available(cls) -> bool:
        return factory_boy_available()

    @classmethod
    def model_classes(cls) -> list[type]:
        """Known model classes, followed by blueprint-only models."""
        classes = cls.models.model_classes()
        classes.extend(model for model in cls.blueprints.model_classes() if model not in classes)
        return classes

    @classmethod
    def factories(cls) -> list[Adapter]:
        if not cls.backend_available():
            logger.debug("backend_unavailable", adapter="blueprint")
            return []
        return [
            cls(model, tag)
            for model in cls.model_classes()
            for tag, _ in cls.blueprints.blueprints(model)
        ]

    def create(self, attrs: Mapping[str, Any] | None = None) -> Any:
        """Materialize the blueprint, switching on the tag's trait when not master.

        Raises:
            LookupError: If the model's blueprint was unregistered since discovery.
        """
        factory_cls = self.blueprints.blueprint_for(self._model_class)
        if factory_cls is None:
            raise LookupError(f"No blueprint registered for {qualified_name(self._model_class)}")

        logger.debug("blueprint_create", factory=self._name, tag=self.tag)
        if self.tag == MASTER_TAG:
            return factory_cls.create(**dict(attrs or {}))
        return factory_cls.create(**{self.tag: True, **dict(attrs or {})})
