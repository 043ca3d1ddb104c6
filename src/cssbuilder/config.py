from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CSSBuilderConfig:
    json_sort_keys: bool = True
    json_indent: int | None = None  # compact output when None
    log_level: str = "WARNING"
