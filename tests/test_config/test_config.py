from __future__ import annotations

import pytest

from cssbuilder.config import CSSBuilderConfig
from cssbuilder.errors import CSSBuilderError, SelectorError


class TestCSSBuilderConfig:
    def test_default_values(self) -> None:
        cfg = CSSBuilderConfig()
        assert cfg.json_sort_keys is True
        assert cfg.json_indent is None
        assert cfg.log_level == "WARNING"

    def test_custom_values(self) -> None:
        cfg = CSSBuilderConfig(json_sort_keys=False, json_indent=4, log_level="DEBUG")
        assert cfg.json_sort_keys is False
        assert cfg.json_indent == 4
        assert cfg.log_level == "DEBUG"

    def test_frozen_immutability(self) -> None:
        cfg = CSSBuilderConfig()
        with pytest.raises(AttributeError):
            cfg.json_indent = 2  # type: ignore[misc]

    def test_equality(self) -> None:
        assert CSSBuilderConfig() == CSSBuilderConfig()
        assert CSSBuilderConfig(json_indent=2) != CSSBuilderConfig(json_indent=4)

    def test_hashable(self) -> None:
        cfg = CSSBuilderConfig()
        assert cfg in {cfg}


class TestCSSBuilderError:
    def test_message(self) -> None:
        assert str(CSSBuilderError("boom")) == "boom"

    def test_cause_default_none(self) -> None:
        assert CSSBuilderError("boom").cause is None

    def test_cause_set(self) -> None:
        orig = ValueError("original")
        assert CSSBuilderError("wrapped", cause=orig).cause is orig

    def test_hierarchy(self) -> None:
        assert issubclass(SelectorError, CSSBuilderError)
