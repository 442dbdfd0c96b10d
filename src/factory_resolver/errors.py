"""Errors raised by the factory resolution layer.

Backend construction failures are never wrapped; they reach the caller
of ``create`` as the backend raised them.
"""

from collections.abc import Iterable


class UnknownAdapterError(ValueError):
    """Raised when configuration names an adapter that is not registered."""

    def __init__(self, key: str, available: Iterable[str]):
        self.key = key
        self.available = sorted(available)
        super().__init__(f"Unknown adapter: {key}. Available: {self.available}")


class FactoryNotFoundError(KeyError):
    """Raised when no active adapter provides a factory with the given name."""

    def __init__(self, name: str, suggestions: Iterable[str] = ()):
        self.name = name
        self.suggestions = list(suggestions)
        message = f"No factory named {name!r}"
        if self.suggestions:
            message += f". Did you mean: {', '.join(self.suggestions)}?"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError repr-quotes its argument
        return self.args[0]
