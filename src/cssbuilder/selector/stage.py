"""Compound-selector stages and combinator tokens."""
from __future__ import annotations

from enum import IntEnum, StrEnum


class Stage(IntEnum):
    """Parts of a compound selector, in the order CSS requires them.

    element#id.class[attr]:pseudo-class::pseudo-element
    """

    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def is_singleton(self) -> bool:
        """True for the parts that may appear at most once."""
        return self in _SINGLETONS

    def decorate(self, value: str) -> str:
        """Wrap *value* in this stage's syntax, e.g. ``.value`` or ``[value]``."""
        prefix, suffix = _DECORATIONS[self]
        return f"{prefix}{value}{suffix}"


_SINGLETONS = frozenset({Stage.ELEMENT, Stage.ID, Stage.PSEUDO_ELEMENT})

_DECORATIONS: dict[Stage, tuple[str, str]] = {
    Stage.ELEMENT: ("", ""),
    Stage.ID: ("#", ""),
    Stage.CLASS: (".", ""),
    Stage.ATTRIBUTE: ("[", "]"),
    Stage.PSEUDO_CLASS: (":", ""),
    Stage.PSEUDO_ELEMENT: ("::", ""),
}


class Combinator(StrEnum):
    """The four CSS combinators."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
