"""Error hierarchy for cssbuilder."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cssbuilder.selector.stage import Stage

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)
CARDINALITY_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)


class CSSBuilderError(Exception):
    """Base error for all cssbuilder errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Selector construction
# ---------------------------------------------------------------------------


class SelectorError(CSSBuilderError):
    """A selector part was appended in violation of compound-selector rules."""


class SelectorOrderError(SelectorError):
    """A part was appended after a part that must come later."""

    def __init__(
        self,
        stage: Stage,
        last_stage: Stage,
        message: str = ORDER_MESSAGE,
    ) -> None:
        super().__init__(message)
        self.stage = stage
        self.last_stage = last_stage


class SelectorCardinalityError(SelectorError):
    """Element, id or pseudo-element was appended a second time."""

    def __init__(self, stage: Stage, message: str = CARDINALITY_MESSAGE) -> None:
        super().__init__(message)
        self.stage = stage


# ---------------------------------------------------------------------------
# Structured data
# ---------------------------------------------------------------------------


class DecodeError(CSSBuilderError):
    """Raised when JSON text cannot be decoded onto a shape."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        *,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.line = line
        self.column = column
