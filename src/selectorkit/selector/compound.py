"""CompoundSelector: two selectors joined by a combinator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class Stringifiable(Protocol):
    def stringify(self) -> str: ...


@dataclass(frozen=True)
class CompoundSelector:
    """The result of combining two selectors, e.g. ``div#main + table#data``.

    Holds the operand texts as they were when combined. A compound selector
    is terminal: it cannot receive further fragments, only be stringified
    or combined again.
    """

    left: str
    combinator: str
    right: str

    def stringify(self) -> str:
        return f"{self.left} {self.combinator} {self.right}"

    def __str__(self) -> str:
        return self.stringify()


def combine(
    selector1: Stringifiable, combinator: str, selector2: Stringifiable
) -> CompoundSelector:
    """Join two selectors with *combinator*, inserted verbatim between single spaces.

    Operands are builders or other compound selectors; they are read once
    and never mutated.
    """
    return CompoundSelector(
        left=selector1.stringify(),
        combinator=combinator,
        right=selector2.stringify(),
    )
