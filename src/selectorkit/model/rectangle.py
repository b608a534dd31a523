"""Rectangle model: width, height and a computed area."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """An axis-aligned rectangle.

    ``area()`` is computed from the current fields on every call, so it
    follows any later reassignment of ``width`` or ``height``.
    """

    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height
