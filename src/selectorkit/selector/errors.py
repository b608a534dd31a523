"""Selector builder error types."""

from __future__ import annotations

from selectorkit.selector.kinds import ORDER_DESCRIPTION, PartKind


class SelectorError(Exception):
    """Base error for all selector building failures.

    A builder that raised a :class:`SelectorError` should be discarded.
    """

    def __init__(self, message: str, *, kind: PartKind) -> None:
        super().__init__(message)
        self.kind = kind


class OrderError(SelectorError):
    """A fragment was appended out of the required kind order."""

    def __init__(self, kind: PartKind, previous: PartKind) -> None:
        super().__init__(
            f"Cannot add {kind.label} after {previous.label}: selector parts "
            f"should be arranged in the following order: {ORDER_DESCRIPTION}",
            kind=kind,
        )
        self.previous = previous


class DuplicatePartError(SelectorError):
    """A second element, id or pseudo-element was appended to one selector."""

    def __init__(self, kind: PartKind) -> None:
        super().__init__(
            f"Element, id and pseudo-element should not occur more than one "
            f"time inside the selector (duplicate {kind.label})",
            kind=kind,
        )
