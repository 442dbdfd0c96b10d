"""Base adapter contract.

An adapter wraps one factory unit of one object-creation backend. A
concrete adapter must provide:

* a ``factories`` classmethod returning one adapter instance per factory
  unit the backend currently knows about;
* a ``name`` identifying the factory (set at construction);
* a ``create`` method taking an attributes mapping and returning a newly
  created object.
"""

from collections.abc import Mapping
from typing import Any


class Adapter:
    """Abstract factory adapter.

    Not an ``abc.ABC``: the bare contract stays instantiable so that calling
    its unimplemented methods fails with ``NotImplementedError``.
    """

    _name: str = ""
    _model_class: type | None = None

    @property
    def name(self) -> str:
        """Normalized factory name."""
        return self._name

    @property
    def model_class(self) -> type | None:
        """The domain class this adapter builds, when the backend exposes it."""
        return self._model_class

    @classmethod
    def backend_available(cls) -> bool:
        """Whether the backend library is loaded. Unavailable backends contribute nothing."""
        return True

    @classmethod
    def factories(cls) -> list["Adapter"]:
        """Return one adapter instance per factory unit known to the backend."""
        raise NotImplementedError("return a list of factory adapter objects")

    @classmethod
    def factories_by_name(cls) -> dict[str, "Adapter"]:
        """Map name -> adapter for this variant alone; later duplicates win."""
        return {factory.name: factory for factory in cls.factories()}

    def create(self, attrs: Mapping[str, Any] | None = None) -> Any:
        """Create and return an object with the given attributes."""
        raise NotImplementedError("create and return an object with the given attributes")

    def _key(self) -> tuple:
        return (type(self), self._name, self._model_class)

    def __eq__(self, other: object) -> bool:
        # Rebuilt adapters wrapping the same factory unit compare equal
        if not isinstance(other, Adapter):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self._name!r}>"
