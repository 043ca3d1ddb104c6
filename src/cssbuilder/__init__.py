"""cssbuilder: fluent CSS selector builder plus small object and JSON helpers."""
from __future__ import annotations

__version__ = "0.1.0"

from cssbuilder.config import CSSBuilderConfig
from cssbuilder.errors import (
    CSSBuilderError,
    DecodeError,
    SelectorCardinalityError,
    SelectorError,
    SelectorOrderError,
)
from cssbuilder.objects import Rectangle, decode_json, from_json, to_json
from cssbuilder.selector import (
    Combinator,
    CombinedSelector,
    CompoundSelector,
    SelectorBuilder,
    Stage,
    Stringifiable,
    css_selector_builder,
)

__all__ = [
    "__version__",
    # config
    "CSSBuilderConfig",
    # errors
    "CSSBuilderError",
    "SelectorError",
    "SelectorOrderError",
    "SelectorCardinalityError",
    "DecodeError",
    # objects
    "Rectangle",
    "to_json",
    "decode_json",
    "from_json",
    # selector
    "Stage",
    "Combinator",
    "Stringifiable",
    "CompoundSelector",
    "CombinedSelector",
    "SelectorBuilder",
    "css_selector_builder",
]
