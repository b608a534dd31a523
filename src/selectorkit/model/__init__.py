"""selectorkit model layer -- public type re-exports."""

from selectorkit.model.rectangle import Rectangle

__all__ = ["Rectangle"]
