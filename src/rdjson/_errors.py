"""Parse error taxonomy and position reporting for byte buffers."""

from __future__ import annotations

from enum import Enum

type Position = int

# Bytes of the form 0b10xxxxxx continue a multi-byte UTF-8 sequence
_CONTINUATION_MASK = 0xC0
_CONTINUATION_BITS = 0x80


class ErrorKind(Enum):
    """Identifies which grammar rule a parse failure violated."""

    UNEXPECTED_END = "unexpected_end"
    UNEXPECTED_BYTE = "unexpected_byte"
    UNEXPECTED_TOKEN = "unexpected_token"
    INVALID_LITERAL = "invalid_literal"
    INVALID_NUMBER = "invalid_number"
    UNTERMINATED_STRING = "unterminated_string"
    INVALID_ESCAPE = "invalid_escape"
    INVALID_CONTROL_CHARACTER = "invalid_control_character"
    INVALID_ENCODING = "invalid_encoding"
    EXPECTED_STRING = "expected_string"
    EXPECTED_COLON = "expected_colon"
    EXPECTED_COMMA_OR_BRACE = "expected_comma_or_brace"
    EXPECTED_COMMA_OR_BRACKET = "expected_comma_or_bracket"
    TRAILING_COMMA = "trailing_comma"
    TRAILING_CONTENT = "trailing_content"
    NESTING_TOO_DEEP = "nesting_too_deep"


def line_and_column(doc: bytes, pos: Position) -> tuple[int, int]:
    """
    Converts a byte offset into a 1-based line and character column.

    Lines are split on LF only. Columns count UTF-8 characters rather than
    bytes, so a multi-byte character before the offset advances the column
    by one.
    """
    lineno = doc.count(b"\n", 0, pos) + 1
    line_start = doc.rfind(b"\n", 0, pos) + 1

    colno = 1
    for byte in doc[line_start:pos]:
        if byte & _CONTINUATION_MASK != _CONTINUATION_BITS:
            colno += 1
    # Offsets past a truncated sequence still land on the next column
    return lineno, colno


def describe_byte(byte: int | None) -> str:
    """Renders a byte as ``'x'``, ``0x8f`` or ``end of input``."""
    if byte is None:
        return "end of input"
    if 0x20 <= byte < 0x7F:
        return repr(chr(byte))
    return f"0x{byte:02x}"


class ParseError(ValueError):
    """
    Reports the first point at which a JSON byte buffer failed to parse.

    Carries the violated rule, the byte offset, line/column numbers and,
    where the parser knew what it wanted, the expected and actual bytes.
    """

    def __init__(
        self,
        kind: ErrorKind,
        msg: str,
        doc: bytes = b"",
        pos: Position = 0,
        *,
        expected: int | bytes | None = None,
        actual: int | None = None,
    ) -> None:
        if not isinstance(kind, ErrorKind):
            raise TypeError("kind must be an ErrorKind")
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.kind = kind
        self.msg = msg
        self.doc = doc
        self.pos = pos
        self.expected = expected
        self.actual = actual
        self.lineno, self.colno = line_and_column(doc, pos)

        super().__init__(f"{msg} at line {self.lineno}, column {self.colno}")

    def __reduce__(
        self,
    ) -> tuple[type[ParseError], tuple[ErrorKind, str, bytes, Position]]:
        # Keyword-only diagnostics are dropped when pickling
        return self.__class__, (self.kind, self.msg, self.doc, self.pos)
