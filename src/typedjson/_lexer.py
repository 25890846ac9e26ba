"""
Character-level tokenizer.

Pulls characters from a Peekable cursor and yields one Token per lexical
unit, on demand. Whitespace runs collapse into a single WHITESPACE token so
the parser side decides what to do with them.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ._config import ParseConfig
from ._errors import JSONDecodeError
from ._errors import LexicalError
from ._errors import Position
from ._errors import UnexpectedEndOfInput
from ._peekable import Peekable
from ._profile import ProfileContext

_DIGITS = "0123456789"


class TokenKind(Enum):
    """Closed set of token kinds produced by the lexer."""

    OPEN_CURLY = "{"
    CLOSE_CURLY = "}"
    OPEN_SQUARE = "["
    CLOSE_SQUARE = "]"
    COLON = ":"
    COMMA = ","
    WHITESPACE = "whitespace"
    NULL = "null"
    TRUE = "true"
    FALSE = "false"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"


VALUE_KINDS = frozenset({TokenKind.STRING, TokenKind.INTEGER, TokenKind.FLOAT})

_PUNCTUATION = {
    kind.value: kind
    for kind in (
        TokenKind.OPEN_CURLY,
        TokenKind.CLOSE_CURLY,
        TokenKind.OPEN_SQUARE,
        TokenKind.CLOSE_SQUARE,
        TokenKind.COLON,
        TokenKind.COMMA,
    )
}

# First character -> (kind, remaining characters that must follow)
_LITERALS = {
    "t": (TokenKind.TRUE, "rue"),
    "f": (TokenKind.FALSE, "alse"),
    "n": (TokenKind.NULL, "ull"),
}


@dataclass(frozen=True)
class Token:
    """
    One lexical unit with the offset of its first character.

    ``value`` carries the decoded literal for STRING, INTEGER and FLOAT
    tokens and is None for everything else.
    """

    kind: TokenKind
    value: Any = None
    start: Position = 0

    def describe(self) -> str:
        """Human-readable form used in error messages."""
        if self.kind in VALUE_KINDS:
            return f"{self.kind.name} {self.value!r}"
        return self.kind.name


class JsonLexer:
    """
    Tokenizes JSON text one token at a time.

    Iterating the lexer drives the underlying character cursor forward; the
    token stream is finite and cannot be restarted.
    """

    def __init__(self, chars: Peekable[str], config: ParseConfig | None = None):
        self.chars = chars
        self.config = config if config is not None else ParseConfig()

    def __iter__(self) -> Iterator[Token]:
        return self.tokens()

    def tokens(self) -> Iterator[Token]:
        """Yields tokens until the character cursor is exhausted."""
        chars = self.chars
        while True:
            start = chars.position
            char = chars.current()
            if char is None:
                return
            chars.advance()

            if char in _PUNCTUATION:
                yield Token(_PUNCTUATION[char], None, start)
            elif char in _LITERALS:
                kind, rest = _LITERALS[char]
                self.scan_literal(rest, start)
                yield Token(kind, None, start)
            elif char == '"':
                yield Token(TokenKind.STRING, self.scan_string(start), start)
            elif char in _DIGITS or char == "-":
                yield self.scan_number(char, start)
            elif char.isspace():
                self.skip_whitespace()
                yield Token(TokenKind.WHITESPACE, None, start)
            else:
                raise self._error(
                    LexicalError, f'Unexpected character "{char}"', start
                )

    def _error(
        self, error: type[JSONDecodeError], msg: str, pos: Position
    ) -> JSONDecodeError:
        # The cursor history holds everything read so far, which is enough
        # to place the error on a line and column.
        return error(msg, "".join(self.chars.history), pos)

    def _unexpected(self, start: Position) -> JSONDecodeError:
        """Error for whatever character sits at the cursor."""
        char = self.chars.current()
        if char is None:
            return self._error(
                UnexpectedEndOfInput, "Unexpected end of input", start
            )
        return self._error(
            LexicalError, f'Unexpected character "{char}"', self.chars.position
        )

    def skip_whitespace(self) -> None:
        """Consumes the rest of a whitespace run."""
        chars = self.chars
        while (char := chars.current()) is not None and char.isspace():
            chars.advance()

    def scan_literal(self, rest: str, start: Position) -> None:
        """Requires the fixed suffix of true/false/null to follow exactly."""
        for expected in rest:
            if self.chars.current() != expected:
                raise self._unexpected(start)
            self.chars.advance()

    def scan_string(self, start: Position) -> str:
        """
        Scans string content up to the closing quote.

        A backslash makes the following character literal, so ``\\"`` yields
        a quote and ``\\n`` yields ``n``. No other escape decoding happens.
        """
        with ProfileContext("scan_string"):
            chars = self.chars
            parts: list[str] = []
            escape = False
            while True:
                char = chars.current()
                if char is None:
                    raise self._error(
                        UnexpectedEndOfInput,
                        "Unterminated string starting at",
                        start,
                    )
                chars.advance()
                if escape:
                    parts.append(char)
                    escape = False
                elif char == "\\":
                    escape = True
                elif char == '"':
                    return "".join(parts)
                else:
                    parts.append(char)

    def _scan_digits(self) -> str:
        """Consumes a run of ASCII digits and returns it."""
        chars = self.chars
        digits: list[str] = []
        while (char := chars.current()) is not None and char in _DIGITS:
            digits.append(char)
            chars.advance()
        return "".join(digits)

    def scan_number(self, first: str, start: Position) -> Token:
        """
        Scans an integer, or a float when a dot follows the digits.

        A single leading minus sign is accepted as an extension to the
        unsigned number grammar, so documents written by ordinary encoders
        parse. Exponents are still rejected.
        """
        with ProfileContext("scan_number"):
            if first == "-":
                integer = self._scan_digits()
                if not integer:
                    raise self._unexpected(start)
                integer = "-" + integer
            else:
                integer = first + self._scan_digits()

            if self.chars.current() != ".":
                if self.config.parse_int:
                    return Token(
                        TokenKind.INTEGER, self.config.parse_int(integer), start
                    )
                try:
                    return Token(TokenKind.INTEGER, int(integer), start)
                except ValueError as e:
                    # Python's int conversion limit
                    raise self._error(
                        LexicalError, "Number too large", start
                    ) from e

            self.chars.advance()
            fraction = self._scan_digits() or "0"
            text = f"{integer}.{fraction}"
            if self.config.parse_float:
                return Token(
                    TokenKind.FLOAT, self.config.parse_float(text), start
                )
            return Token(TokenKind.FLOAT, float(text), start)
