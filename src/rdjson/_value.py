"""
Tagged value tree produced by the parser.

Each JSON entity is one of six frozen dataclasses. Together they form the
``Value`` sum type, so a payload can never disagree with its tag.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from dataclasses import field
from decimal import Decimal
from enum import Enum
from typing import Any
from typing import ClassVar

type Numeric = int | float | Decimal


class ValueKind(Enum):
    """Discriminates the six JSON value variants."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


@dataclass(frozen=True)
class Null:
    """The JSON ``null`` literal."""

    kind: ClassVar[ValueKind] = ValueKind.NULL

    def to_python(self) -> None:
        return None


@dataclass(frozen=True)
class Boolean:
    """A JSON ``true`` or ``false`` literal."""

    value: bool
    kind: ClassVar[ValueKind] = ValueKind.BOOLEAN

    def to_python(self) -> bool:
        return self.value


@dataclass(frozen=True)
class Number:
    """
    A JSON number.

    Integer literals hold an exact ``int``; literals with a fraction or
    exponent hold a ``float`` unless a conversion hook chose another type.
    """

    value: Numeric
    kind: ClassVar[ValueKind] = ValueKind.NUMBER

    def to_python(self) -> Numeric:
        return self.value


@dataclass(frozen=True)
class String:
    """A JSON string with all escape sequences decoded."""

    value: str
    kind: ClassVar[ValueKind] = ValueKind.STRING

    def to_python(self) -> str:
        return self.value


@dataclass(frozen=True)
class Array:
    """An ordered sequence of values."""

    items: list[Value] = field(default_factory=list)
    kind: ClassVar[ValueKind] = ValueKind.ARRAY

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Value:
        return self.items[index]

    def to_python(self) -> list[Any]:
        return [item.to_python() for item in self.items]


@dataclass(frozen=True)
class Object:
    """
    A mapping from decoded string keys to values.

    Keys keep the order of their first appearance in the document; a repeated
    key replaces the earlier value.
    """

    members: dict[str, Value] = field(default_factory=dict)
    kind: ClassVar[ValueKind] = ValueKind.OBJECT

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[str]:
        return iter(self.members)

    def __contains__(self, key: object) -> bool:
        return key in self.members

    def __getitem__(self, key: str) -> Value:
        return self.members[key]

    def to_python(self) -> dict[str, Any]:
        return {key: value.to_python() for key, value in self.members.items()}


type Value = Null | Boolean | Number | String | Array | Object

# Shared instances for the fixed literals
NULL = Null()
TRUE = Boolean(True)
FALSE = Boolean(False)
