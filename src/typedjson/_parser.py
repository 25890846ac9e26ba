"""
Recursive descent parser producing untyped JSON values.

Objects become dicts, arrays become lists and scalars come straight from the
token that carried them.
"""

from collections.abc import Callable
from collections.abc import Iterable
from collections.abc import Iterator
from typing import Any
from typing import Self

from ._config import JsonValue
from ._config import ParseConfig
from ._errors import JsonSyntaxError
from ._errors import Position
from ._lexer import VALUE_KINDS
from ._lexer import JsonLexer
from ._lexer import Token
from ._lexer import TokenKind
from ._peekable import Peekable
from ._profile import ProfileContext

_LITERAL_VALUES = {
    TokenKind.TRUE: True,
    TokenKind.FALSE: False,
    TokenKind.NULL: None,
}


def significant(tokens: Iterable[Token]) -> Iterator[Token]:
    """Drops whitespace tokens, lazily."""
    for token in tokens:
        if token.kind is not TokenKind.WHITESPACE:
            yield token


def describe(token: Token | None) -> str:
    return token.describe() if token is not None else "end of input"


class JsonParser:
    """
    Parses a whitespace-free token stream into one JSON value.

    Structural rules advance past their own brackets as they go; a scalar is
    advanced past by parse_value once its token has been read.
    """

    def __init__(
        self,
        tokens: Peekable[Token],
        config: ParseConfig | None = None,
        doc: str = "",
    ):
        self.tokens = tokens
        self.config = config if config is not None else ParseConfig()
        self.doc = doc

    @classmethod
    def from_text(
        cls, text: str, config: ParseConfig | None = None, **kwargs: Any
    ) -> Self:
        """Wires characters, lexer and token cursor together for ``text``."""
        config = config if config is not None else ParseConfig()
        lexer = JsonLexer(Peekable(text), config)
        return cls(Peekable(significant(lexer)), config, text, **kwargs)

    def _position(self, token: Token | None) -> Position:
        return token.start if token is not None else len(self.doc)

    def _syntax_error(self, msg: str, token: Token | None) -> JsonSyntaxError:
        return JsonSyntaxError(msg, self.doc, self._position(token))

    def _at(self, kind: TokenKind) -> bool:
        token = self.tokens.current()
        return token is not None and token.kind is kind

    def expect(self, kind: TokenKind) -> None:
        """Consumes a token of the given kind or fails naming both sides."""
        token = self.tokens.current()
        if token is None or token.kind is not kind:
            raise self._syntax_error(
                f"Expected {kind.name}, got {describe(token)}", token
            )
        self.tokens.advance()

    def parse(self) -> Any:
        """
        Parses the top-level value.

        Tokens after the value are ignored unless the configuration disallows
        trailing data.
        """
        return self._finish(self.parse_value())

    def _finish(self, value: Any) -> Any:
        if not self.config.allow_trailing_data:
            token = self.tokens.current()
            if token is not None:
                raise self._syntax_error("Extra data", token)
        return value

    def parse_value(self) -> Any:
        """Parses any JSON value based on current token."""
        token = self.tokens.current()
        if token is None:
            raise self._syntax_error("Unexpected token end of input", token)

        if token.kind is TokenKind.OPEN_CURLY:
            return self.parse_object()
        if token.kind is TokenKind.OPEN_SQUARE:
            return self.parse_array()

        if token.kind in _LITERAL_VALUES:
            value = _LITERAL_VALUES[token.kind]
        elif token.kind in VALUE_KINDS:
            value = token.value
        else:
            raise self._syntax_error(
                f"Unexpected token {token.describe()}", token
            )
        self.tokens.advance()
        return value

    def parse_key(self) -> str:
        token = self.tokens.current()
        if token is None or token.kind is not TokenKind.STRING:
            raise self._syntax_error(
                f"Expected STRING, got {describe(token)}", token
            )
        self.tokens.advance()
        return token.value

    def parse_members(
        self, parse_member: Callable[[str], Any]
    ) -> dict[str, Any]:
        """
        Parses ``key: value`` pairs up to, but not including, the closing
        brace. ``parse_member`` receives the key and parses its value.
        A repeated key keeps its first position and takes the last value.
        """
        members: dict[str, Any] = {}
        if self._at(TokenKind.CLOSE_CURLY):
            return members

        first = True
        while True:
            if not first:
                self.expect(TokenKind.COMMA)
            first = False
            key = self.parse_key()
            self.expect(TokenKind.COLON)
            members[key] = parse_member(key)
            if self._at(TokenKind.CLOSE_CURLY):
                return members

    def parse_elements(self, parse_element: Callable[[], Any]) -> list[Any]:
        """Parses comma separated values up to the closing bracket."""
        values: list[Any] = []
        first = True
        while True:
            if not first:
                self.expect(TokenKind.COMMA)
            first = False
            values.append(parse_element())
            if self._at(TokenKind.CLOSE_SQUARE):
                return values

    def parse_object(self) -> Any:
        with ProfileContext("parse_object"):
            self.tokens.advance()
            members = self.parse_members(lambda _key: self.parse_value())
            self.expect(TokenKind.CLOSE_CURLY)
            if self.config.object_hook:
                return self.config.object_hook(members)
            return members

    def parse_array(self) -> list[JsonValue]:
        with ProfileContext("parse_array"):
            return self._parse_array(self.parse_value)

    def _parse_array(self, parse_element: Callable[[], Any]) -> list[Any]:
        self.tokens.advance()
        if self._at(TokenKind.CLOSE_SQUARE):
            self.tokens.advance()
            return []
        values = self.parse_elements(parse_element)
        self.expect(TokenKind.CLOSE_SQUARE)
        return values
