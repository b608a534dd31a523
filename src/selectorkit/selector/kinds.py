"""Selector part kinds and their fixed ordering."""

from __future__ import annotations

from enum import IntEnum


class PartKind(IntEnum):
    """The kind of a selector fragment.

    The integer values define the order in which fragments must appear
    inside a single compound selector:

        element#id.class[attr]:pseudo-class::pseudo-element
    """

    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")

    @property
    def is_singleton(self) -> bool:
        """True for kinds that may occur at most once per selector."""
        return self in _SINGLETONS

    def render(self, value: str) -> str:
        """Return the CSS text for a fragment of this kind."""
        return _TEMPLATES[self].format(value=value)

    @classmethod
    def from_label(cls, label: str) -> PartKind:
        """Look up a kind by its label, e.g. ``"pseudo-class"``.

        Underscores and the bare ``"attr"`` abbreviation are accepted too.
        """
        key = label.strip().lower().replace("_", "-")
        key = _LABEL_ALIASES.get(key, key)
        for kind in cls:
            if kind.label == key:
                return kind
        raise ValueError(f"Unknown selector part kind: {label!r}")


_SINGLETONS = frozenset({PartKind.ELEMENT, PartKind.ID, PartKind.PSEUDO_ELEMENT})

_TEMPLATES: dict[PartKind, str] = {
    PartKind.ELEMENT: "{value}",
    PartKind.ID: "#{value}",
    PartKind.CLASS: ".{value}",
    PartKind.ATTRIBUTE: "[{value}]",
    PartKind.PSEUDO_CLASS: ":{value}",
    PartKind.PSEUDO_ELEMENT: "::{value}",
}

_LABEL_ALIASES: dict[str, str] = {
    "attr": "attribute",
    "pseudoclass": "pseudo-class",
    "pseudoelement": "pseudo-element",
}

ORDER_DESCRIPTION = ", ".join(kind.label for kind in PartKind)
