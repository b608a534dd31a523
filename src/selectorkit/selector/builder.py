"""SelectorBuilder: accumulates fragments into a single compound selector."""

from __future__ import annotations

import logging

from selectorkit.selector.errors import DuplicatePartError, OrderError
from selectorkit.selector.kinds import PartKind

__all__ = ["SelectorBuilder"]

logger = logging.getLogger("selectorkit")


class SelectorBuilder:
    """Builds one compound selector such as ``div#main.container:hover``.

    Every append method returns the builder itself so calls can be chained.
    Appends are validated before any state changes: a rejected fragment
    raises :class:`OrderError` or :class:`DuplicatePartError` and leaves the
    builder exactly as it was.
    """

    def __init__(self) -> None:
        self.serialized: list[str] = []
        self.part_kinds: list[PartKind] = []
        self.element_count = 0
        self.id_count = 0
        self.pseudo_element_count = 0

    # --- fragments ------------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        return self.append(PartKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self.append(PartKind.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self.append(PartKind.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        """Append an attribute fragment; *value* is the raw expression, e.g. ``href$=".png"``."""
        return self.append(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self.append(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self.append(PartKind.PSEUDO_ELEMENT, value)

    def append(self, kind: PartKind, value: str) -> SelectorBuilder:
        """Validate and append a fragment of *kind*."""
        self._check(kind)
        self.serialized.append(kind.render(value))
        self.part_kinds.append(kind)
        if kind is PartKind.ELEMENT:
            self.element_count += 1
        elif kind is PartKind.ID:
            self.id_count += 1
        elif kind is PartKind.PSEUDO_ELEMENT:
            self.pseudo_element_count += 1
        return self

    # --- output ---------------------------------------------------------------

    def stringify(self) -> str:
        """Return the selector text built so far."""
        return "".join(self.serialized)

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.stringify()!r})"

    # --- validation -----------------------------------------------------------

    def _count(self, kind: PartKind) -> int:
        if kind is PartKind.ELEMENT:
            return self.element_count
        if kind is PartKind.ID:
            return self.id_count
        if kind is PartKind.PSEUDO_ELEMENT:
            return self.pseudo_element_count
        return 0

    def _check(self, kind: PartKind) -> None:
        # part_kinds is append-only and already ordered, so comparing
        # against the last entry covers the whole history.
        if kind.is_singleton and self._count(kind) >= 1:
            logger.debug("Rejected duplicate %s on %r", kind.label, self.stringify())
            raise DuplicatePartError(kind)
        if self.part_kinds and kind < self.part_kinds[-1]:
            previous = self.part_kinds[-1]
            logger.debug(
                "Rejected %s after %s on %r", kind.label, previous.label, self.stringify()
            )
            raise OrderError(kind, previous)


setattr(SelectorBuilder, "class", SelectorBuilder.class_)
