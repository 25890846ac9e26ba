"""
Parsing straight into caller-supplied classes.

The grammar walk is the one JsonParser performs; at every value the typed
parser also carries the type it should produce, asking the Reflector for the
declared type of each object member as it goes.
"""

from typing import Any
from typing import get_origin

from ._binder import ObjectFactory
from ._config import ParseConfig
from ._config import logger
from ._errors import TypeMismatchError
from ._lexer import Token
from ._lexer import TokenKind
from ._parser import JsonParser
from ._peekable import Peekable
from ._profile import ProfileContext


class TypedJsonParser(JsonParser):
    """
    JsonParser that binds objects to target types while parsing.

    With no target every method behaves exactly like the untyped parser.
    """

    def __init__(
        self,
        tokens: Peekable[Token],
        config: ParseConfig | None = None,
        doc: str = "",
        factory: ObjectFactory | None = None,
    ):
        super().__init__(tokens, config, doc)
        self.factory = factory if factory is not None else ObjectFactory()
        self.reflector = self.factory.reflector

    def parse(self, target: Any = None) -> Any:
        return self._finish(self.parse_typed(target))

    def parse_typed(self, target: Any) -> Any:
        """Parses one value, producing ``target`` where the JSON allows it."""
        if target is None:
            return self.parse_value()

        token = self.tokens.current()
        kind = token.kind if token is not None else None
        if kind is TokenKind.OPEN_CURLY and isinstance(target, type):
            if self.reflector.is_reflectable(target):
                return self.parse_typed_object(target)
        elif kind is TokenKind.OPEN_SQUARE:
            return self.parse_typed_array(self.reflector.element_type(target))
        return self.parse_value()

    def parse_typed_object(self, target: type) -> Any:
        with ProfileContext("parse_typed_object"):
            self.tokens.advance()
            members = self.parse_members(
                lambda key: self._parse_member(target, key)
            )
            self.expect(TokenKind.CLOSE_CURLY)
            return self.factory.create(target, members)

    def _parse_member(self, target: type, key: str) -> Any:
        declared = self.reflector.declared_type(target, key)
        if declared is None:
            logger.debug(
                "No declared type for %s.%s, parsing as JSON",
                target.__name__,
                key,
            )
        return self.parse_typed(declared)

    def parse_typed_array(self, element: Any) -> list[Any]:
        with ProfileContext("parse_typed_array"):
            return self._parse_array(lambda: self.parse_typed(element))


def _resolve_target(target: Any) -> tuple[Any, bool]:
    """
    Splits a top-level target into the type to parse with and whether a
    list is expected.

    ``[Cls]`` and ``list[Cls]`` both ask for a list of Cls.
    """
    if isinstance(target, list):
        if len(target) != 1:
            raise TypeError(
                "a list target must hold exactly one element type, "
                f"got {len(target)}"
            )
        return list[target[0]], True
    if get_origin(target) is list:
        return target, True
    if isinstance(target, type):
        return target, False
    raise TypeError(
        "target must be a class, a one-element list or list[...], "
        f"not {target!r}"
    )


def parse_typed(
    text: str,
    target: Any,
    config: ParseConfig | None = None,
    factory: ObjectFactory | None = None,
) -> Any:
    """
    Parses ``text`` into ``target``.

    Raises TypeMismatchError when the document is not an instance of a bare
    target class, or not an array when a list was requested.
    """
    parse_target, want_list = _resolve_target(target)
    parser = TypedJsonParser.from_text(text, config, factory=factory)
    result = parser.parse(parse_target)

    if want_list:
        if not isinstance(result, list):
            raise TypeMismatchError("list", result)
    elif not isinstance(result, parse_target):
        raise TypeMismatchError(parse_target.__name__, result)
    return result
