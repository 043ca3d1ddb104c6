from cssbuilder.selector.builder import CombinedSelector, CompoundSelector, Stringifiable
from cssbuilder.selector.facade import SelectorBuilder, css_selector_builder
from cssbuilder.selector.stage import Combinator, Stage

__all__ = [
    "Stage",
    "Combinator",
    "Stringifiable",
    "CompoundSelector",
    "CombinedSelector",
    "SelectorBuilder",
    "css_selector_builder",
]
