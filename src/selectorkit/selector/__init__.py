from selectorkit.selector.builder import SelectorBuilder
from selectorkit.selector.compound import CompoundSelector, combine
from selectorkit.selector.errors import DuplicatePartError, OrderError, SelectorError
from selectorkit.selector.facade import SelectorFacade, css_selector_builder
from selectorkit.selector.kinds import PartKind

__all__ = [
    "PartKind",
    "SelectorBuilder",
    "CompoundSelector",
    "combine",
    "SelectorFacade",
    "css_selector_builder",
    "SelectorError",
    "OrderError",
    "DuplicatePartError",
]
