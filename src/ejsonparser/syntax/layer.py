"""One layer of the EJSON tree.

Each node type is a frozen dataclass. Array and map nodes are generic over
the type of their children: the grammar fills them with whatever the
caller's element parser returns, so the grammar never depends on a
concrete tree type. ejsonparser.syntax.tree ties the knot with Value.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from typing import ClassVar

from ejsonparser.enums import LayerKind
from ejsonparser.syntax.dates import ProlepticDate, ProlepticTimestamp

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Scalars
    "NullLiteral",
    "BooleanLiteral",
    "DecimalLiteral",
    "IntegerLiteral",
    "StringLiteral",
    # Tagged literals
    "TimestampLiteral",
    "TimeLiteral",
    "DateLiteral",
    "IntervalLiteral",
    "ObjectIdLiteral",
    # Structures
    "ArrayLiteral",
    "MapLiteral",
    # Type aliases
    "Layer",
]


@dataclass(frozen=True, slots=True)
class NullLiteral:
    """null"""

    kind: ClassVar[LayerKind] = LayerKind.NULL


@dataclass(frozen=True, slots=True)
class BooleanLiteral:
    """true | false"""

    kind: ClassVar[LayerKind] = LayerKind.BOOLEAN

    value: bool


@dataclass(frozen=True, slots=True)
class DecimalLiteral:
    """Arbitrary-precision decimal: 12.5, -0.25, 1.5e2"""

    kind: ClassVar[LayerKind] = LayerKind.DECIMAL

    value: Decimal


@dataclass(frozen=True, slots=True)
class IntegerLiteral:
    """Unbounded signed integer: 42, -7"""

    kind: ClassVar[LayerKind] = LayerKind.INTEGER

    value: int


@dataclass(frozen=True, slots=True)
class StringLiteral:
    """Quoted string with \\" unescaped."""

    kind: ClassVar[LayerKind] = LayerKind.STRING

    value: str


@dataclass(frozen=True, slots=True)
class TimestampLiteral:
    """TIMESTAMP("YYYY-MM-DDTHH:MM:SSZ"), always UTC."""

    kind: ClassVar[LayerKind] = LayerKind.TIMESTAMP

    value: datetime | ProlepticTimestamp


@dataclass(frozen=True, slots=True)
class TimeLiteral:
    """TIME("HH:MM:SS")"""

    kind: ClassVar[LayerKind] = LayerKind.TIME

    value: time


@dataclass(frozen=True, slots=True)
class DateLiteral:
    """DATE("YYYY-MM-DD"), a ProlepticDate in year 0."""

    kind: ClassVar[LayerKind] = LayerKind.DATE

    value: date | ProlepticDate


@dataclass(frozen=True, slots=True)
class IntervalLiteral:
    """INTERVAL("...") with an opaque payload."""

    kind: ClassVar[LayerKind] = LayerKind.INTERVAL

    value: str


@dataclass(frozen=True, slots=True)
class ObjectIdLiteral:
    """OID("...") with an opaque payload."""

    kind: ClassVar[LayerKind] = LayerKind.OBJECT_ID

    value: str


@dataclass(frozen=True, slots=True)
class ArrayLiteral[T]:
    """[child, child, ...] in input order."""

    kind: ClassVar[LayerKind] = LayerKind.ARRAY

    items: tuple[T, ...]


@dataclass(frozen=True, slots=True)
class MapLiteral[T]:
    """{key: value, ...} as an ordered list of pairs.

    Keys are values of any kind, not just strings. Duplicate keys and input
    order are preserved; nothing is deduplicated.
    """

    kind: ClassVar[LayerKind] = LayerKind.MAP

    entries: tuple[tuple[T, T], ...]

    def keys(self) -> tuple[T, ...]:
        """Keys in input order, duplicates included."""
        return tuple(key for key, _ in self.entries)

    def get_all(self, key: T) -> tuple[T, ...]:
        """Every value paired with key, in input order."""
        return tuple(value for k, value in self.entries if k == key)


type Layer[T] = (
    NullLiteral
    | BooleanLiteral
    | DecimalLiteral
    | IntegerLiteral
    | StringLiteral
    | TimestampLiteral
    | TimeLiteral
    | DateLiteral
    | IntervalLiteral
    | ObjectIdLiteral
    | ArrayLiteral[T]
    | MapLiteral[T]
)
"""One tree layer whose nested children have type T."""
