"""
JSON parsing into plain values or directly into your own classes.

A hand-written lexer and recursive descent parser turn JSON text into dicts,
lists and scalars. Given a target class, the same walk builds instances of
that class instead, matching object members to constructor parameters and
fields by name and recursing into nested classes.
"""

from typing import IO
from typing import Any

from ._binder import ObjectFactory
from ._binder import Reflector
from ._config import JsonValue
from ._config import ParseConfig
from ._config import logger
from ._errors import BindingError
from ._errors import ConstructionNotAllowedError
from ._errors import InternalConsistencyError
from ._errors import JSONDecodeError
from ._errors import JsonSyntaxError
from ._errors import LexicalError
from ._errors import TypedJsonError
from ._errors import TypeMismatchError
from ._errors import UnexpectedEndOfInput
from ._lexer import JsonLexer
from ._lexer import Token
from ._lexer import TokenKind
from ._parser import JsonParser
from ._peekable import Peekable
from ._profile import HotPathStats
from ._profile import clear_hot_path_stats
from ._profile import format_hot_path_stats
from ._profile import get_hot_path_stats
from ._typed import TypedJsonParser
from ._typed import parse_typed

__version__ = "0.1.0"


def _as_text(s: Any) -> str:
    if isinstance(s, str):
        return s
    if isinstance(s, bytes | bytearray):
        return bytes(s).decode("utf-8")
    raise TypeError(
        f"the JSON object must be str, bytes or bytearray, not {type(s).__name__}"
    )


def loads(s: str | bytes | bytearray, target: Any = None, **kwargs: Any) -> Any:
    """
    Parses one JSON document.

    Without ``target`` the result is built from dicts, lists, str, int,
    float, bool and None. With a class as ``target`` the document must
    describe an instance of it; ``[Cls]`` or ``list[Cls]`` asks for a list
    of instances. Keyword arguments configure parsing (see ParseConfig).
    """
    text = _as_text(s)
    config = ParseConfig(**kwargs)
    if target is None:
        return JsonParser.from_text(text, config).parse()
    return parse_typed(text, target, config)


def load(fp: IO[str], target: Any = None, **kwargs: Any) -> Any:
    """Parses the whole content of a file-like object."""
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return loads(fp.read(), target, **kwargs)


__all__ = [
    "BindingError",
    "ConstructionNotAllowedError",
    "HotPathStats",
    "InternalConsistencyError",
    "JSONDecodeError",
    "JsonLexer",
    "JsonParser",
    "JsonSyntaxError",
    "JsonValue",
    "LexicalError",
    "ObjectFactory",
    "ParseConfig",
    "Peekable",
    "Reflector",
    "Token",
    "TokenKind",
    "TypeMismatchError",
    "TypedJsonError",
    "TypedJsonParser",
    "UnexpectedEndOfInput",
    "clear_hot_path_stats",
    "format_hot_path_stats",
    "get_hot_path_stats",
    "load",
    "loads",
    "logger",
    "parse_typed",
]
