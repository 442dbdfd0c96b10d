"""Fallback adapter: plain SQLAlchemy model construction."""

from collections.abc import Mapping
from typing import Any, ClassVar

import structlog

from factory_resolver.adapters.base import Adapter
from factory_resolver.adapters.registry import register_adapter
from factory_resolver.backends.models import ModelRegistry, default_models
from factory_resolver.naming import normalize, qualified_name

logger = structlog.get_logger()


@register_adapter("orm")
class OrmAdapter(Adapter):
    """One adapter per model class; ``create`` constructs and persists."""

    models: ClassVar[ModelRegistry] = default_models

    def __init__(self, model_class: type):
        self._model_class = model_class
        self._name = normalize(qualified_name(model_class))

    @classmethod
    def model_classes(cls) -> list[type]:
        return cls.models.model_classes()

    @classmethod
    def factories(cls) -> list[Adapter]:
        if not cls.backend_available():
            return []
        return [cls(model) for model in cls.model_classes()]

    def create(self, attrs: Mapping[str, Any] | None = None) -> Any:
        """Instantiate the model with ``attrs`` and persist it via the bound session.

        Constructor and flush errors (unknown attributes, integrity
        violations) propagate unchanged.
        """
        instance = self._model_class(**dict(attrs or {}))
        logger.debug("orm_instance_created", factory=self._name)
        return self.models.persist(instance)
