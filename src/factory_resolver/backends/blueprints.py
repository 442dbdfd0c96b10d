"""Per-model blueprints built on factory_boy traits.

Each model has at most one blueprint factory. The factory itself is the
``master`` blueprint; every ``factory.Trait`` declared in its ``Params``
is an additional tagged blueprint.
"""

from typing import Any

from factory_resolver.backends.definitions import build_class
from factory_resolver.naming import MASTER_TAG


def trait_names(factory_cls: Any) -> list[str]:
    """Names of the traits declared on a factory, in declaration order.

    A trait named ``master`` is skipped; that tag always means the plain factory.
    """
    import factory

    parameters = factory_cls._meta.parameters
    return [
        name
        for name, value in parameters.items()
        if isinstance(value, factory.Trait) and name != MASTER_TAG
    ]


class BlueprintRegistry:
    """Model class -> blueprint factory."""

    def __init__(self):
        self._blueprints: dict[type, Any] = {}

    def register(self, factory_cls: Any) -> Any:
        """Register ``factory_cls`` as the blueprint of its model.

        A later registration for the same model replaces the earlier one.

        Raises:
            ValueError: If the factory declares no model.
        """
        model = build_class(factory_cls)
        if model is None:
            raise ValueError(f"{factory_cls.__name__} declares no model")
        self._blueprints[model] = factory_cls
        return factory_cls

    def model_classes(self) -> list[type]:
        return list(self._blueprints)

    def blueprint_for(self, model: type) -> Any | None:
        return self._blueprints.get(model)

    def blueprints(self, model: type) -> list[tuple[str, Any]]:
        """Return ``(tag, factory)`` pairs for a model, master first."""
        factory_cls = self._blueprints.get(model)
        if factory_cls is None:
            return []
        return [(MASTER_TAG, factory_cls)] + [(tag, factory_cls) for tag in trait_names(factory_cls)]

    def clear(self) -> None:
        """Clear all registered blueprints (for testing)."""
        self._blueprints.clear()


default_blueprints = BlueprintRegistry()


def register_blueprint(factory_cls: Any) -> Any:
    """Decorator registering a factory as its model's blueprint.

    Usage:
        @register_blueprint
        class ThreeFactory(factory.Factory):
            class Meta:
                model = Three

            class Params:
                special = factory.Trait(label="special")
    """
    return default_blueprints.register(factory_cls)
