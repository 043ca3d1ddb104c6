"""Plain data objects and JSON helpers."""
from __future__ import annotations

import dataclasses
import json
import logging
from dataclasses import dataclass
from typing import Any

from cssbuilder.config import CSSBuilderConfig
from cssbuilder.errors import DecodeError

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = CSSBuilderConfig()


@dataclass(frozen=True)
class Rectangle:
    """A width/height pair with a computed area."""

    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height

    def get_area(self) -> float:
        return self.area


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------


def _encode_default(value: Any) -> Any:
    """Fallback for objects the json module cannot encode on its own."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if hasattr(value, "__dict__"):
        return {k: v for k, v in vars(value).items() if not k.startswith("_")}
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: Any, *, config: CSSBuilderConfig | None = None) -> str:
    """Return the canonical JSON text for *value*.

    Mapping keys are sorted and separators are compact unless *config* asks
    for indentation. Dataclasses and plain objects encode as their fields.
    """
    cfg = config or _DEFAULT_CONFIG
    separators = (",", ":") if cfg.json_indent is None else (",", ": ")
    return json.dumps(
        value,
        sort_keys=cfg.json_sort_keys,
        indent=cfg.json_indent,
        separators=separators,
        default=_encode_default,
    )


def decode_json(text: str) -> Any:
    """Parse JSON *text*, raising :class:`DecodeError` with line and column on failure."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        logger.debug("JSON decode failed at line %d column %d", exc.lineno, exc.colno)
        raise DecodeError(
            f"Invalid JSON: {exc.msg}", line=exc.lineno, column=exc.colno, cause=exc
        ) from exc


def from_json(shape: Any, text: str) -> Any:
    """Decode *text* into an instance of *shape* without calling ``__init__``.

    *shape* is a class, or an instance whose class is used. The decoded
    object's keys become the new instance's attributes, so methods and
    properties defined on *shape* work on the result. Nothing is copied from
    *shape* itself.

    Raises :class:`DecodeError` on malformed JSON, when the decoded value
    is not a JSON object, or when instances of *shape* have no ``__dict__``.
    Keys that collide with properties or other class attributes are stored
    on the instance without going through them.
    """
    data = decode_json(text)

    if not isinstance(data, dict):
        raise DecodeError(
            f"Expected a JSON object, got {type(data).__name__}"
        )

    cls = shape if isinstance(shape, type) else type(shape)
    instance = cls.__new__(cls)
    try:
        # Bypasses __setattr__, so frozen dataclasses and properties are fine.
        vars(instance).update(data)
    except TypeError as exc:
        raise DecodeError(
            f"Cannot attach JSON data to {cls.__name__}: instances have no __dict__",
            cause=exc,
        ) from exc
    return instance
