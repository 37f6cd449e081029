"""Read position over an immutable JSON byte buffer."""

from __future__ import annotations

from ._errors import ErrorKind
from ._errors import ParseError
from ._errors import Position
from ._errors import describe_byte

WHITESPACE = frozenset(b" \t\n\r")


class Cursor:
    """
    Byte-level primitives shared by every grammar production.

    The offset only moves forward. Failed expectations leave it where it was
    so the error points at the offending byte.
    """

    def __init__(self, buffer: bytes):
        self.buffer = buffer
        self.pos: Position = 0
        self.length = len(buffer)

    def at_end(self) -> bool:
        """Returns True once every byte has been consumed."""
        return self.pos >= self.length

    def error(
        self,
        kind: ErrorKind,
        msg: str,
        pos: Position | None = None,
        *,
        expected: int | bytes | None = None,
        actual: int | None = None,
    ) -> ParseError:
        """Builds a ParseError located at ``pos`` (default: current offset)."""
        return ParseError(
            kind,
            msg,
            self.buffer,
            self.pos if pos is None else pos,
            expected=expected,
            actual=actual,
        )

    def peek(self) -> int:
        """Returns current byte without advancing."""
        if self.pos >= self.length:
            raise self.error(
                ErrorKind.UNEXPECTED_END, "Unexpected end of input"
            )
        return self.buffer[self.pos]

    def lookahead(self) -> int | None:
        """Returns current byte, or None at end of input."""
        return self.buffer[self.pos] if self.pos < self.length else None

    def advance(self) -> int:
        """Returns current byte and advances position."""
        byte = self.peek()
        self.pos += 1
        return byte

    def expect_byte(
        self,
        expected: int,
        kind: ErrorKind = ErrorKind.UNEXPECTED_BYTE,
        msg: str | None = None,
    ) -> None:
        """Consumes ``expected`` or raises ``kind`` without consuming."""
        actual = self.peek()
        if actual != expected:
            if msg is None:
                msg = (
                    f"Expecting {describe_byte(expected)}, "
                    f"got {describe_byte(actual)}"
                )
            raise self.error(kind, msg, expected=expected, actual=actual)
        self.pos += 1

    def expect_literal(self, literal: bytes) -> None:
        """
        Checks that ``literal`` starts at the current offset, without
        consuming it.

        A literal that ends exactly at the end of the buffer matches; one that
        would run past it (``tru``) is an invalid literal.
        """
        if self.pos >= self.length:
            raise self.error(
                ErrorKind.UNEXPECTED_END,
                "Unexpected end of input",
                expected=literal,
            )

        end = self.pos + len(literal)
        candidate = self.buffer[self.pos : end]
        if end <= self.length and candidate == literal:
            return

        raise self.error(
            ErrorKind.INVALID_LITERAL,
            "Invalid literal",
            expected=literal,
            actual=candidate[0] if candidate else None,
        )

    def skip_whitespace(self) -> None:
        """Skips whitespace bytes as defined by RFC 8259."""
        buffer = self.buffer
        pos = self.pos
        while pos < self.length and buffer[pos] in WHITESPACE:
            pos += 1
        self.pos = pos
