"""Shared type aliases, parse configuration and the package logger."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

logger: logging.Logger = logging.getLogger("typedjson")
logger.addHandler(logging.StreamHandler())
# Silent unless the caller lowers the level
logger.setLevel(logging.CRITICAL)

# Type aliases for domain concepts - recursive definition
type JsonValue = (
    str | int | float | bool | None | dict[str, JsonValue] | list[JsonValue]
)

# Hooks can return custom types
ObjectHook = Callable[[dict[str, Any]], Any] | None
ParseFloatHook = Callable[[str], Any] | None
ParseIntHook = Callable[[str], Any] | None


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures JSON parsing behavior with immutable settings.

    Number hooks see the literal text of the number; object_hook sees each
    untyped object after all of its members are parsed. Objects bound to a
    target type never go through object_hook.
    """

    parse_int: ParseIntHook = None
    parse_float: ParseFloatHook = None
    object_hook: ObjectHook = None
    allow_trailing_data: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.allow_trailing_data, bool):
            raise TypeError("allow_trailing_data must be a boolean")
        for name in ("parse_int", "parse_float", "object_hook"):
            hook = getattr(self, name)
            if hook is not None and not callable(hook):
                raise TypeError(f"{name} must be callable or None")
