"""selectorkit - CSS selector builder with rectangle and JSON helpers."""

__version__ = "0.1.0"

from selectorkit.model import Rectangle  # noqa: E402
from selectorkit.selector import (  # noqa: E402
    CompoundSelector,
    DuplicatePartError,
    OrderError,
    PartKind,
    SelectorBuilder,
    SelectorError,
    css_selector_builder,
)
from selectorkit.serialization import from_json, to_json  # noqa: E402

__all__ = [
    "__version__",
    "css_selector_builder",
    "SelectorBuilder",
    "CompoundSelector",
    "PartKind",
    "SelectorError",
    "OrderError",
    "DuplicatePartError",
    "Rectangle",
    "to_json",
    "from_json",
]
