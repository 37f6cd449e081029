"""
Recursive-descent JSON parser over raw byte buffers.

Parses a complete, in-memory JSON document into a tree of tagged values
(``Null``, ``Boolean``, ``Number``, ``String``, ``Array``, ``Object``) and
reports the first syntax error with its kind, byte offset, line and column.
"""

import codecs
import logging
import sys
from typing import Any

from ._config import DEFAULT_MAX_DEPTH
from ._config import ParseConfig
from ._cursor import Cursor
from ._errors import ErrorKind
from ._errors import ParseError
from ._errors import Position
from ._parser import JsonParser
from ._profile import HotPathStats
from ._profile import ProfileContext
from ._profile import clear_hot_path_stats
from ._profile import format_hot_path_stats
from ._profile import get_hot_path_stats
from ._value import Array
from ._value import Boolean
from ._value import Null
from ._value import Number
from ._value import Object
from ._value import String
from ._value import Value
from ._value import ValueKind

__version__ = "0.1.0"

log = logging.getLogger("rdjson")

Buffer = bytes | bytearray | memoryview

# Interpreter frames held per open container: parse_value plus parse_array
# or parse_object. The margin covers leaf productions and error reporting.
_FRAMES_PER_LEVEL = 2
_FRAME_MARGIN = 100

# Type alias for the plain Python rendering of a value tree
JsonValue = (
    str
    | int
    | float
    | bool
    | None
    | dict[str, "JsonValue"]
    | list["JsonValue"]
)


def _parse_document(buffer: bytes, config: ParseConfig) -> Value:
    """
    Parses exactly one JSON value surrounded by optional whitespace.

    Any root kind is accepted. Bytes left over after the value are an error.
    """
    cursor = Cursor(buffer)
    with ProfileContext("parse_document", cursor):
        # Check for UTF-8 BOM and reject it per RFC 8259
        if buffer.startswith(codecs.BOM_UTF8):
            raise cursor.error(
                ErrorKind.UNEXPECTED_TOKEN,
                "JSON input should not contain BOM (Byte Order Mark)",
                actual=buffer[0],
            )

        parser = JsonParser(cursor, config)
        previous_limit = sys.getrecursionlimit()
        sys.setrecursionlimit(
            previous_limit
            + _FRAMES_PER_LEVEL * config.max_depth
            + _FRAME_MARGIN
        )
        try:
            result = parser.parse_value()
        except RecursionError as e:
            # Stack exhausted despite the raised limit
            raise cursor.error(
                ErrorKind.NESTING_TOO_DEEP,
                "Maximum nesting depth exceeded",
            ) from e
        finally:
            sys.setrecursionlimit(previous_limit)

        cursor.skip_whitespace()
        if not cursor.at_end():
            raise cursor.error(
                ErrorKind.TRAILING_CONTENT,
                "Extra data",
                actual=cursor.lookahead(),
            )

        return result


def parse(buffer: Buffer, **kwargs: Any) -> Value:
    """
    Parses a JSON byte buffer into a value tree.

    Keyword arguments are ``ParseConfig`` fields. Raises ``ParseError`` at
    the first grammar violation; no partial tree is ever returned.
    """
    if not isinstance(buffer, Buffer):
        raise TypeError(
            "the JSON document must be bytes, bytearray or memoryview, "
            f"not {type(buffer).__name__}"
        )

    config = ParseConfig(**kwargs)
    data = bytes(buffer)
    try:
        value = _parse_document(data, config)
    except ParseError as err:
        log.debug("rejected %d byte document: %s", len(data), err)
        raise

    log.debug("parsed %d byte document into %s", len(data), value.kind.value)
    return value


def loads(s: str | Buffer, **kwargs: Any) -> JsonValue:
    """
    Parses a JSON document into plain Python objects.

    Text is encoded as UTF-8 first, so error offsets count bytes of that
    encoding.
    """
    if isinstance(s, str):
        s = s.encode("utf-8", "surrogatepass")
    return parse(s, **kwargs).to_python()


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "Array",
    "Boolean",
    "Cursor",
    "ErrorKind",
    "HotPathStats",
    "JsonParser",
    "Null",
    "Number",
    "Object",
    "ParseConfig",
    "ParseError",
    "Position",
    "String",
    "Value",
    "ValueKind",
    "clear_hot_path_stats",
    "format_hot_path_stats",
    "get_hot_path_stats",
    "loads",
    "parse",
]
