"""
Recursive-descent JSON productions over a byte cursor.

``JsonParser.parse_value`` is the dispatcher: it inspects the next
significant byte and hands off to the string, number, literal, object or
array production. Objects and arrays call back into it for every nested
value, so nesting depth in the document equals recursion depth here.
"""

from __future__ import annotations

import sys

from ._config import ParseConfig
from ._cursor import Cursor
from ._errors import ErrorKind
from ._errors import Position
from ._errors import describe_byte
from ._profile import ProfileContext
from ._value import FALSE
from ._value import NULL
from ._value import TRUE
from ._value import Array
from ._value import Boolean
from ._value import Null
from ._value import Number
from ._value import Object
from ._value import String
from ._value import Value

QUOTE = ord('"')
BACKSLASH = ord("\\")
LBRACE = ord("{")
RBRACE = ord("}")
LBRACKET = ord("[")
RBRACKET = ord("]")
COLON = ord(":")
COMMA = ord(",")
MINUS = ord("-")
PLUS = ord("+")
DOT = ord(".")
ZERO = ord("0")
LOWER_U = ord("u")

DIGITS = frozenset(b"0123456789")
HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")
EXPONENT_MARKERS = frozenset(b"eE")
LETTERS = frozenset(
    b"abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
)

# Bytes that end a run of plain string content
CONTROL_LIMIT = 0x20
STRING_SPECIAL = frozenset(range(CONTROL_LIMIT)) | {QUOTE, BACKSLASH}

ESCAPES = {
    QUOTE: '"',
    BACKSLASH: "\\",
    ord("/"): "/",
    ord("b"): "\b",
    ord("f"): "\f",
    ord("n"): "\n",
    ord("r"): "\r",
    ord("t"): "\t",
}

LITERALS: dict[int, tuple[bytes, Boolean | Null]] = {
    ord("t"): (b"true", TRUE),
    ord("f"): (b"false", FALSE),
    ord("n"): (b"null", NULL),
}

HIGH_SURROGATES = range(0xD800, 0xDC00)
LOW_SURROGATES = range(0xDC00, 0xE000)


class JsonParser:
    """
    Builds a value tree from the bytes under a cursor.

    One parser serves one document. Errors abort the whole parse; the
    parser keeps no partial results.
    """

    def __init__(self, cursor: Cursor, config: ParseConfig):
        self.cursor = cursor
        self.config = config
        self.depth = 0
        self._key_cache: dict[bytes, str] = {}

    def parse_value(self) -> Value:
        """Parses any JSON value based on the next significant byte."""
        cursor = self.cursor
        with ProfileContext("parse_value", cursor):
            cursor.skip_whitespace()
            byte = cursor.lookahead()

            if byte == LBRACE:
                return self.parse_object()
            elif byte == LBRACKET:
                return self.parse_array()
            elif byte == QUOTE:
                return String(self.parse_string())
            elif byte == MINUS or byte in DIGITS:
                return self.parse_number()
            elif byte in LETTERS:
                return self.parse_literal()
            else:
                raise cursor.error(
                    ErrorKind.UNEXPECTED_TOKEN, "Expecting value", actual=byte
                )

    # Scalars

    def parse_literal(self) -> Boolean | Null:
        """Parses ``true``, ``false`` or ``null``."""
        cursor = self.cursor
        with ProfileContext("parse_literal", cursor):
            byte = cursor.peek()
            if byte not in LITERALS:
                raise cursor.error(
                    ErrorKind.INVALID_LITERAL, "Invalid literal", actual=byte
                )

            literal, value = LITERALS[byte]
            cursor.expect_literal(literal)
            cursor.pos += len(literal)
            return value

    def parse_string(self) -> str:
        """Parses a JSON string and returns its decoded contents."""
        cursor = self.cursor
        with ProfileContext("parse_string", cursor):
            start = cursor.pos
            cursor.expect_byte(QUOTE)

            buffer = cursor.buffer
            length = cursor.length
            chunks: list[str] = []

            while True:
                run_start = pos = cursor.pos
                while pos < length and buffer[pos] not in STRING_SPECIAL:
                    pos += 1
                if pos > run_start:
                    chunks.append(self._decode_run(run_start, pos))
                cursor.pos = pos

                if pos >= length:
                    raise cursor.error(
                        ErrorKind.UNTERMINATED_STRING,
                        "Unterminated string starting at",
                        start,
                    )

                byte = buffer[pos]
                if byte == QUOTE:
                    cursor.pos += 1
                    return "".join(chunks)
                elif byte == BACKSLASH:
                    chunks.append(self._parse_escape(start))
                elif self.config.strict:
                    raise cursor.error(
                        ErrorKind.INVALID_CONTROL_CHARACTER,
                        "Invalid control character at",
                        actual=byte,
                    )
                else:
                    chunks.append(chr(byte))
                    cursor.pos += 1

    def _decode_run(self, start: Position, end: Position) -> str:
        """Decodes raw string bytes, which must be valid UTF-8."""
        buffer = self.cursor.buffer
        try:
            return buffer[start:end].decode("utf-8")
        except UnicodeDecodeError as e:
            bad = start + e.start
            raise self.cursor.error(
                ErrorKind.INVALID_ENCODING,
                "Invalid UTF-8 in string",
                bad,
                actual=buffer[bad],
            ) from e

    def _parse_escape(self, string_start: Position) -> str:
        """Parses one backslash escape and returns the character it denotes."""
        cursor = self.cursor
        escape_pos = cursor.pos
        cursor.pos += 1

        if cursor.at_end():
            raise cursor.error(
                ErrorKind.UNTERMINATED_STRING,
                "Unterminated string starting at",
                string_start,
            )

        byte = cursor.advance()
        if byte in ESCAPES:
            return ESCAPES[byte]
        if byte != LOWER_U:
            raise cursor.error(
                ErrorKind.INVALID_ESCAPE,
                f"Invalid \\escape: {describe_byte(byte)}",
                escape_pos,
                actual=byte,
            )

        code_point = self._read_hex4(escape_pos)
        if code_point in LOW_SURROGATES:
            raise cursor.error(
                ErrorKind.INVALID_ESCAPE, "Unpaired low surrogate", escape_pos
            )
        if code_point not in HIGH_SURROGATES:
            return chr(code_point)

        # A high surrogate is only valid as the first half of a pair
        low_pos = cursor.pos
        if cursor.buffer[low_pos : low_pos + 2] != b"\\u":
            raise cursor.error(
                ErrorKind.INVALID_ESCAPE, "Unpaired high surrogate", escape_pos
            )
        cursor.pos += 2
        low = self._read_hex4(low_pos)
        if low not in LOW_SURROGATES:
            raise cursor.error(
                ErrorKind.INVALID_ESCAPE,
                "Invalid low surrogate in surrogate pair",
                low_pos,
            )
        return chr(0x10000 + ((code_point - 0xD800) << 10) + (low - 0xDC00))

    def _read_hex4(self, escape_pos: Position) -> int:
        """Consumes the four hex digits of a ``\\u`` escape."""
        cursor = self.cursor
        digits = cursor.buffer[cursor.pos : cursor.pos + 4]
        if len(digits) != 4 or not all(d in HEX_DIGITS for d in digits):
            raise cursor.error(
                ErrorKind.INVALID_ESCAPE,
                "Invalid \\uXXXX escape",
                escape_pos,
            )
        cursor.pos += 4
        return int(digits, 16)

    def _scan_integer_part(self, start: Position) -> None:
        """Scans the integer part of a JSON number."""
        cursor = self.cursor
        byte = cursor.lookahead()
        if byte not in DIGITS:
            raise cursor.error(
                ErrorKind.INVALID_NUMBER, "Invalid number", start
            )

        cursor.pos += 1
        if byte == ZERO:
            if cursor.lookahead() in DIGITS:
                raise cursor.error(
                    ErrorKind.INVALID_NUMBER,
                    "Leading zeros not allowed",
                    start,
                )
        else:
            self._skip_digits()

    def _scan_fraction_part(self, start: Position) -> bool:
        """Scans the fraction part if present; returns True when found."""
        cursor = self.cursor
        if cursor.lookahead() != DOT:
            return False
        cursor.pos += 1
        if not self._skip_digits():
            raise cursor.error(
                ErrorKind.INVALID_NUMBER, "Invalid decimal number", start
            )
        return True

    def _scan_exponent_part(self, start: Position) -> bool:
        """Scans the exponent part if present; returns True when found."""
        cursor = self.cursor
        if cursor.lookahead() not in EXPONENT_MARKERS:
            return False
        cursor.pos += 1
        if cursor.lookahead() in (PLUS, MINUS):
            cursor.pos += 1
        if not self._skip_digits():
            raise cursor.error(
                ErrorKind.INVALID_NUMBER, "Invalid exponent", start
            )
        return True

    def _skip_digits(self) -> int:
        """Consumes a run of ASCII digits and returns how many there were."""
        cursor = self.cursor
        buffer = cursor.buffer
        pos = start = cursor.pos
        while pos < cursor.length and buffer[pos] in DIGITS:
            pos += 1
        cursor.pos = pos
        return pos - start

    def parse_number(self) -> Number:
        """Parses a JSON number into an exact int or a float."""
        cursor = self.cursor
        with ProfileContext("parse_number", cursor):
            start = cursor.pos

            if cursor.lookahead() == MINUS:
                cursor.pos += 1

            self._scan_integer_part(start)
            has_fraction = self._scan_fraction_part(start)
            has_exponent = self._scan_exponent_part(start)

            text = cursor.buffer[start : cursor.pos].decode("ascii")
            config = self.config
            is_integer = not (has_fraction or has_exponent)
            if is_integer and not config.parse_int:
                limit = sys.get_int_max_str_digits()
                if limit and len(text.lstrip("-")) > limit:
                    raise cursor.error(
                        ErrorKind.INVALID_NUMBER, "Number too large", start
                    )

            try:
                if not is_integer:
                    if config.parse_float:
                        return Number(config.parse_float(text))
                    return Number(float(text))
                if config.parse_int:
                    return Number(config.parse_int(text))
                return Number(int(text))
            except ValueError as e:
                raise cursor.error(
                    ErrorKind.INVALID_NUMBER, "Invalid number", start
                ) from e

    # Composites

    def _enter_container(self, open_pos: Position) -> None:
        self.depth += 1
        if self.depth > self.config.max_depth:
            raise self.cursor.error(
                ErrorKind.NESTING_TOO_DEEP,
                f"Maximum nesting depth of {self.config.max_depth} exceeded",
                open_pos,
            )

    def _parse_object_key(self) -> str:
        """Parses an object key, reusing one str per distinct raw key."""
        cursor = self.cursor
        byte = cursor.peek()
        if byte != QUOTE:
            raise cursor.error(
                ErrorKind.EXPECTED_STRING,
                "Expecting property name enclosed in double quotes",
                expected=QUOTE,
                actual=byte,
            )

        start = cursor.pos
        key = self.parse_string()
        raw = cursor.buffer[start : cursor.pos]
        return self._key_cache.setdefault(raw, key)

    def _handle_object_continuation(self) -> bool:
        """Handles object continuation logic, returns True if should continue parsing."""
        cursor = self.cursor
        byte = cursor.peek()

        if byte == RBRACE:
            cursor.pos += 1
            return False
        elif byte == COMMA:
            comma_pos = cursor.pos
            cursor.pos += 1
            cursor.skip_whitespace()
            if cursor.peek() == RBRACE:
                raise cursor.error(
                    ErrorKind.TRAILING_COMMA,
                    "Illegal trailing comma before end of object",
                    comma_pos,
                )
            return True
        else:
            raise cursor.error(
                ErrorKind.EXPECTED_COMMA_OR_BRACE,
                "Expecting ',' delimiter",
                actual=byte,
            )

    def parse_object(self) -> Object:
        """Parses a JSON object; a repeated key keeps the last value."""
        cursor = self.cursor
        with ProfileContext("parse_object", cursor):
            open_pos = cursor.pos
            cursor.expect_byte(LBRACE)
            self._enter_container(open_pos)

            members: dict[str, Value] = {}
            cursor.skip_whitespace()
            if cursor.peek() == RBRACE:
                cursor.pos += 1
            else:
                while True:
                    key = self._parse_object_key()
                    cursor.skip_whitespace()
                    cursor.expect_byte(
                        COLON,
                        ErrorKind.EXPECTED_COLON,
                        "Expecting ':' delimiter",
                    )
                    members[key] = self.parse_value()
                    cursor.skip_whitespace()

                    if not self._handle_object_continuation():
                        break

            self.depth -= 1
            return Object(members)

    def _handle_array_continuation(self) -> bool:
        """Handles array continuation logic, returns True if should continue parsing."""
        cursor = self.cursor
        byte = cursor.peek()

        if byte == RBRACKET:
            cursor.pos += 1
            return False
        elif byte == COMMA:
            comma_pos = cursor.pos
            cursor.pos += 1
            cursor.skip_whitespace()
            if cursor.peek() == RBRACKET:
                raise cursor.error(
                    ErrorKind.TRAILING_COMMA,
                    "Illegal trailing comma before end of array",
                    comma_pos,
                )
            return True
        else:
            raise cursor.error(
                ErrorKind.EXPECTED_COMMA_OR_BRACKET,
                "Expecting ',' delimiter",
                actual=byte,
            )

    def parse_array(self) -> Array:
        """Parses a JSON array, keeping every element in order."""
        cursor = self.cursor
        with ProfileContext("parse_array", cursor):
            open_pos = cursor.pos
            cursor.expect_byte(LBRACKET)
            self._enter_container(open_pos)

            items: list[Value] = []
            cursor.skip_whitespace()
            if cursor.peek() == RBRACKET:
                cursor.pos += 1
            else:
                while True:
                    items.append(self.parse_value())
                    cursor.skip_whitespace()

                    if not self._handle_array_continuation():
                        break

            self.depth -= 1
            return Array(items)
