"""Factory name derivation.

Every adapter exposes a stable, lowercase, underscore-separated name.
Class-backed adapters derive it from the class's qualified name; blueprint
adapters prefix non-master tags (``special_three``).
"""

import re

MASTER_TAG = "master"

_NAMESPACE_SEPARATORS = re.compile(r"::|[./\-\s]+")
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")
_REPEATED_UNDERSCORES = re.compile(r"_+")


_LOCALS_MARKER = "<locals>."


def qualified_name(cls: type) -> str:
    """Return the dotted qualified name of a class (``One.Two`` for nested classes).

    Function scopes are dropped: a class defined in ``f`` is ``Gadget``,
    not ``f.<locals>.Gadget``.
    """
    qualified = cls.__qualname__
    return qualified.rpartition(_LOCALS_MARKER)[2]


def underscore(qualified: str) -> str:
    """Underscore a CamelCase, possibly namespaced, name.

    Examples:
        >>> underscore("One.Two")
        'one_two'
        >>> underscore("CLIAgentConfig")
        'cli_agent_config'
    """
    word = _NAMESPACE_SEPARATORS.sub("_", qualified)
    word = _ACRONYM_BOUNDARY.sub(r"\1_\2", word)
    word = _WORD_BOUNDARY.sub(r"\1_\2", word)
    word = _REPEATED_UNDERSCORES.sub("_", word)
    return word.strip("_").lower()


def normalize(qualified: str, tag: str | None = None) -> str:
    """Derive a factory name from a qualified class name and an optional tag.

    Args:
        qualified: Class name, optionally namespaced (``One.Two``, ``One::Two``).
        tag: Blueprint tag. ``None`` and ``"master"`` give the bare name.

    Returns:
        The normalized name, prefixed with ``<tag>_`` for non-master tags.

    Raises:
        ValueError: If the name normalizes to an empty string.
    """
    name = underscore(qualified)
    if not name:
        raise ValueError(f"Cannot derive a factory name from {qualified!r}")

    if tag is None or tag == MASTER_TAG:
        return name
    return f"{underscore(tag)}_{name}"
