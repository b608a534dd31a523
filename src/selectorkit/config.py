from __future__ import annotations

import os
from dataclasses import dataclass, field

DEFAULT_COMBINATOR_ALIASES: dict[str, str] = {
    "descendant": " ",
    "child": ">",
    "adjacent": "+",
    "sibling": "~",
}


@dataclass(frozen=True)
class SelectorKitConfig:
    log_level: str = "WARNING"
    combinator_aliases: dict[str, str] = field(
        default_factory=lambda: dict(DEFAULT_COMBINATOR_ALIASES)
    )
    json_indent: int | None = None  # None = compact output

    @property
    def combinators(self) -> dict[str, str]:
        """All accepted combinator tokens mapped to their CSS text."""
        tokens = {c: c for c in (" ", ">", "+", "~")}
        tokens.update(self.combinator_aliases)
        return tokens

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> SelectorKitConfig:
        env = os.environ if environ is None else environ
        indent = env.get("SELECTORKIT_JSON_INDENT", "").strip()
        return cls(
            log_level=env.get("SELECTORKIT_LOG_LEVEL", "WARNING").upper(),
            json_indent=int(indent) if indent else None,
        )
