"""Selector objects: the compound-selector accumulator and combinator nodes."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from cssbuilder.errors import SelectorCardinalityError, SelectorOrderError
from cssbuilder.selector.stage import Stage

logger = logging.getLogger(__name__)

# Counter attribute per singleton stage.
_COUNTERS = {
    Stage.ELEMENT: "element_count",
    Stage.ID: "id_count",
    Stage.PSEUDO_ELEMENT: "pseudo_element_count",
}


class Stringifiable(Protocol):
    """Anything that renders to a selector string."""

    def stringify(self) -> str: ...


class CompoundSelector:
    """A compound selector built up one part at a time.

    Every appender checks that parts arrive in :class:`Stage` order and that
    element, id and pseudo-element appear at most once, then appends the
    decorated value and returns ``self`` so calls can be chained::

        CompoundSelector("a", Stage.ELEMENT).attr('href$=".png"').pseudo_class("focus")

    Text is emitted in call order; nothing is reordered on output.
    """

    def __init__(self, text: str = "", stage: Stage | None = None) -> None:
        self._text = text
        self.element_count = 1 if stage is Stage.ELEMENT else 0
        self.id_count = 1 if stage is Stage.ID else 0
        self.pseudo_element_count = 1 if stage is Stage.PSEUDO_ELEMENT else 0
        self.last_stage = stage

    # --- appenders ------------------------------------------------------------

    def element(self, value: str) -> CompoundSelector:
        return self.append(Stage.ELEMENT, value)

    def id(self, value: str) -> CompoundSelector:
        return self.append(Stage.ID, value)

    def class_(self, value: str) -> CompoundSelector:
        return self.append(Stage.CLASS, value)

    def attr(self, value: str) -> CompoundSelector:
        return self.append(Stage.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> CompoundSelector:
        return self.append(Stage.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> CompoundSelector:
        return self.append(Stage.PSEUDO_ELEMENT, value)

    def append(self, stage: Stage, value: str) -> CompoundSelector:
        """Append *value* as a *stage* part; the named appenders delegate here."""
        counter = _COUNTERS[stage] if stage.is_singleton else None
        if counter is not None and getattr(self, counter) >= 1:
            logger.debug("Rejected repeated %s in %r", stage.name, self._text)
            raise SelectorCardinalityError(stage)
        self._check_order(stage)
        if counter is not None:
            setattr(self, counter, getattr(self, counter) + 1)
        self._text += stage.decorate(value)
        self.last_stage = stage
        return self

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        return self._text

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"CompoundSelector({self._text!r}, last_stage={self.last_stage!r})"

    # --- internals ------------------------------------------------------------

    def _check_order(self, stage: Stage) -> None:
        if self.last_stage is not None and stage < self.last_stage:
            logger.debug(
                "Rejected %s after %s in %r", stage.name, self.last_stage.name, self._text
            )
            raise SelectorOrderError(stage, self.last_stage)


@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator token.

    The token is interpolated verbatim between single spaces, so the
    descendant combinator ``" "`` renders as three spaces.
    """

    left: Stringifiable
    combinator: str
    right: Stringifiable

    def stringify(self) -> str:
        return f"{self.left.stringify()} {self.combinator} {self.right.stringify()}"

    def __str__(self) -> str:
        return self.stringify()
