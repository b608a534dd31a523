"""JSON helpers: encode plain values and dataclasses, decode into a shape."""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, Callable, TypeVar

__all__ = ["to_json", "from_json"]

logger = logging.getLogger("selectorkit")

T = TypeVar("T")


def _default(obj: object) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(value: Any, *, indent: int | None = None) -> str:
    """Return the JSON text for *value*.

    Output is compact (``[1,2,3]``) unless *indent* is given. Key order
    follows insertion order. Dataclass instances are encoded as objects of
    their fields.
    """
    separators = (",", ":") if indent is None else None
    return json.dumps(value, default=_default, indent=indent, separators=separators)


def from_json(shape: Callable[..., T] | None, text: str) -> T | Any:
    """Parse *text* and build an instance of *shape* from the parsed record.

    * ``shape`` is ``None``: the plain parsed value is returned.
    * dataclass: constructed from the fields it declares; extra keys are ignored.
    * class with a ``from_dict`` classmethod: called with the whole mapping.
    * any other callable: called with the mapping as keyword arguments.

    Raises ``json.JSONDecodeError`` for invalid JSON and ``TypeError`` when
    the document is not an object but a shape was requested.
    """
    data = json.loads(text)
    if shape is None:
        return data
    if not isinstance(data, dict):
        raise TypeError(
            f"Cannot build {getattr(shape, '__name__', shape)!r} from a JSON "
            f"{type(data).__name__}; expected an object"
        )

    if dataclasses.is_dataclass(shape):
        names = {f.name for f in dataclasses.fields(shape) if f.init}
        extra = sorted(set(data) - names)
        if extra:
            logger.debug("Ignoring unknown keys for %s: %s", shape.__name__, extra)
        return shape(**{k: v for k, v in data.items() if k in names})

    from_dict = getattr(shape, "from_dict", None)
    if callable(from_dict):
        return from_dict(data)
    return shape(**data)
