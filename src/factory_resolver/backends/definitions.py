"""Named factory_boy factory definitions.

factory_boy keeps no global index of its factories, so factories that
should be reachable by name are registered here.
"""

import importlib.util
from collections.abc import Callable
from typing import Any

from factory_resolver.naming import normalize, qualified_name


def factory_boy_available() -> bool:
    """Whether the factory_boy distribution is importable."""
    return importlib.util.find_spec("factory") is not None


def build_class(factory_cls: Any) -> type | None:
    """Return the model class a factory_boy factory builds, if declared."""
    meta = getattr(factory_cls, "_meta", None)
    return getattr(meta, "model", None)


class FactoryDefinitions:
    """Ordered mapping of declared name -> factory class."""

    def __init__(self):
        self._definitions: dict[str, Any] = {}

    def register(self, factory_cls: Any, name: str | None = None) -> Any:
        """Register a factory under ``name``.

        Args:
            factory_cls: A factory_boy ``Factory`` subclass.
            name: Declared name. Defaults to the normalized model class name.

        Returns:
            The factory class, unchanged.

        Raises:
            ValueError: If no name is given and the factory declares no model.
        """
        if name is None:
            model = build_class(factory_cls)
            if model is None:
                raise ValueError(f"{factory_cls.__name__} declares no model; pass a name")
            name = normalize(qualified_name(model))
        self._definitions[name] = factory_cls
        return factory_cls

    def definitions(self) -> dict[str, Any]:
        """Return a copy of the registered definitions, in registration order."""
        return dict(self._definitions)

    def clear(self) -> None:
        """Clear all registered definitions (for testing)."""
        self._definitions.clear()


default_definitions = FactoryDefinitions()


def register_factory(name: str | None = None) -> Callable[[Any], Any]:
    """Decorator to register a factory_boy factory on ``default_definitions``.

    Usage:
        @register_factory("admin")
        class AdminFactory(factory.Factory):
            class Meta:
                model = User
    """

    def decorator(factory_cls: Any) -> Any:
        return default_definitions.register(factory_cls, name)

    return decorator
