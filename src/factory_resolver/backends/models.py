"""Domain model classes known to the ORM adapter.

Models are either registered explicitly or picked up from a SQLAlchemy
declarative base. A bound ``Session`` turns ``persist`` into add + flush.
"""

from typing import Any, TypeVar

import structlog
from sqlalchemy.orm import Session

logger = structlog.get_logger()

ModelT = TypeVar("ModelT", bound=type)


def _sort_key(model: type) -> tuple[str, str]:
    return (model.__module__, model.__qualname__)


class ModelRegistry:
    """Ordered collection of domain model classes plus an optional session."""

    def __init__(self, models: tuple[type, ...] = (), base: Any = None):
        self._models: list[type] = list(models)
        self._bases: list[Any] = [base] if base is not None else []
        self._session: Session | None = None

    def register(self, model: ModelT) -> ModelT:
        """Register a model class. Returns it, so it doubles as a decorator."""
        if model not in self._models:
            self._models.append(model)
        return model

    def add_base(self, base: Any) -> None:
        """Include every class mapped by a SQLAlchemy declarative base."""
        if base not in self._bases:
            self._bases.append(base)

    def model_classes(self) -> list[type]:
        """Return known model classes, explicit registrations first.

        Mapped classes are read from the declarative registry on every call,
        so models declared after configuration are picked up. Mappers are
        unordered, hence the sort.
        """
        classes = list(self._models)
        for base in self._bases:
            mapped = sorted((mapper.class_ for mapper in base.registry.mappers), key=_sort_key)
            classes.extend(model for model in mapped if model not in classes)
        return classes

    @property
    def session(self) -> Session | None:
        return self._session

    def bind_session(self, session: Session | None) -> None:
        """Attach (or detach, with ``None``) the session used by ``persist``."""
        self._session = session

    def persist(self, instance: Any) -> Any:
        """Add and flush ``instance`` if a session is bound."""
        if self._session is None:
            return instance
        self._session.add(instance)
        self._session.flush()
        logger.debug("model_persisted", model=type(instance).__name__)
        return instance

    def clear(self) -> None:
        """Forget registered models, bases and the bound session (for testing)."""
        self._models.clear()
        self._bases.clear()
        self._session = None


default_models = ModelRegistry()


def register_model(model: ModelT) -> ModelT:
    """Decorator registering a model class on ``default_models``.

    Usage:
        @register_model
        class Widget(Base):
            ...
    """
    return default_models.register(model)
