"""CLI command: cssbuilder build -- compose a selector from stage:value parts."""

from __future__ import annotations

import sys

import click

from cssbuilder.errors import SelectorError
from cssbuilder.selector import Combinator, Stage, Stringifiable, css_selector_builder
from cssbuilder.selector.builder import CompoundSelector

_STAGE_NAMES: dict[str, Stage] = {
    "element": Stage.ELEMENT,
    "id": Stage.ID,
    "class": Stage.CLASS,
    "attr": Stage.ATTRIBUTE,
    "pseudo-class": Stage.PSEUDO_CLASS,
    "pseudo-element": Stage.PSEUDO_ELEMENT,
}

_COMBINATORS = {c.value for c in Combinator}


def _split_part(part: str) -> tuple[Stage, str]:
    name, sep, value = part.partition(":")
    if not sep or name not in _STAGE_NAMES:
        raise click.BadParameter(
            f"expected stage:value or a combinator, got {part!r}", param_hint="PARTS"
        )
    return _STAGE_NAMES[name], value


def compose(parts: list[str]) -> Stringifiable:
    """Build a selector from CLI parts, folding combinators left to right."""
    result: Stringifiable | None = None
    pending: str | None = None
    current: CompoundSelector | None = None

    for part in parts:
        if part in _COMBINATORS:
            if current is None:
                raise click.BadParameter(
                    f"combinator {part!r} needs a selector on both sides",
                    param_hint="PARTS",
                )
            result = current if result is None else css_selector_builder.combine(
                result, pending, current
            )
            pending, current = part, None
            continue

        stage, value = _split_part(part)
        if current is None:
            current = css_selector_builder.start(stage, value)
        else:
            current.append(stage, value)

    if current is None:
        raise click.BadParameter("selector ends without a part", param_hint="PARTS")
    if result is None:
        return current
    return css_selector_builder.combine(result, pending, current)


@click.command()
@click.argument("parts", nargs=-1, required=True)
def build(parts: tuple[str, ...]) -> None:
    """Compose a selector and print it.

    Each part is STAGE:VALUE, where STAGE is one of element, id, class, attr,
    pseudo-class or pseudo-element. Parts are chained in order; the
    combinators " ", ">", "+" and "~" join the selectors around them.

    Example: cssbuilder build element:a 'attr:href$=".png"' pseudo-class:focus
    """
    try:
        selector = compose(list(parts))
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)
    click.echo(selector.stringify())
