"""
Exception hierarchy for typedjson.

Decode errors carry the document, position and derived line/column the same
way for every stage; binding errors carry the type and member names involved.
"""

from collections.abc import Sequence
from typing import Any

type Position = int


class TypedJsonError(Exception):
    """Base class for every error raised by typedjson."""


class JSONDecodeError(TypedJsonError, ValueError):
    """
    Handles JSON parsing failures with precise position and context information.

    Error state containing position, line/column numbers, and surrounding
    context to help users identify and fix JSON syntax issues.
    """

    def __init__(self, msg: str, doc: str = "", pos: Position = 0) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.msg = msg
        self.doc = doc
        self.pos = pos

        # Compute line and column numbers from position
        self.lineno = doc.count("\n", 0, pos) + 1 if doc else 1
        self.colno = pos - doc.rfind("\n", 0, pos) if doc else pos + 1

        super().__init__(f"{msg} at line {self.lineno}, column {self.colno}")

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.msg, self.doc, self.pos)


class LexicalError(JSONDecodeError):
    """An input character that starts no token."""


class JsonSyntaxError(JSONDecodeError):
    """A structural token is missing or out of place."""


class UnexpectedEndOfInput(JSONDecodeError):
    """Input ended inside a string or literal."""


class TypeMismatchError(TypedJsonError, TypeError):
    """The top-level value does not have the requested shape."""

    def __init__(self, expected: str, actual: Any) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Expected {expected}, got {type(actual).__name__}"
        )

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.expected, self.actual)


class BindingError(TypedJsonError, TypeError):
    """A required constructor parameter has no matching member."""

    def __init__(
        self, type_name: str, parameter: str, members: Sequence[str]
    ) -> None:
        self.type_name = type_name
        self.parameter = parameter
        self.members = tuple(members)
        super().__init__(
            f'The constructor of {type_name} requires a parameter named '
            f'"{parameter}", but none was provided. '
            f"The provided members are: {', '.join(self.members)}"
        )

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.type_name, self.parameter, self.members)


class ConstructionNotAllowedError(TypedJsonError, TypeError):
    """The target type cannot be instantiated from JSON."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(
            f"Can't construct {type_name} because its constructor is not public"
        )

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.type_name,)


class InternalConsistencyError(TypedJsonError, RuntimeError):
    """An internal invariant was broken."""
