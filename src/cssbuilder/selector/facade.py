"""Entry points for building selectors."""
from __future__ import annotations

from cssbuilder.selector.builder import CombinedSelector, CompoundSelector, Stringifiable
from cssbuilder.selector.stage import Stage


class SelectorBuilder:
    """Stateless facade: each entry point starts a new compound selector.

    A selector may start at any stage; later chained parts must follow it in
    stage order.

    Example:
        >>> b = css_selector_builder
        >>> b.id("main").class_("container").class_("editable").stringify()
        '#main.container.editable'
        >>> b.combine(b.element("div"), "+", b.element("span")).stringify()
        'div + span'
    """

    def element(self, value: str) -> CompoundSelector:
        return self.start(Stage.ELEMENT, value)

    def id(self, value: str) -> CompoundSelector:
        return self.start(Stage.ID, value)

    def class_(self, value: str) -> CompoundSelector:
        return self.start(Stage.CLASS, value)

    def attr(self, value: str) -> CompoundSelector:
        return self.start(Stage.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> CompoundSelector:
        return self.start(Stage.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> CompoundSelector:
        return self.start(Stage.PSEUDO_ELEMENT, value)

    def start(self, stage: Stage, value: str) -> CompoundSelector:
        """Start a selector at *stage*; the named entry points delegate here."""
        return CompoundSelector(stage.decorate(value), stage)

    def combine(
        self, left: Stringifiable, combinator: str, right: Stringifiable
    ) -> CombinedSelector:
        """Join two selectors. The combinator is not validated."""
        return CombinedSelector(left=left, combinator=combinator, right=right)


css_selector_builder = SelectorBuilder()
