"""Default EJSON tree: the fixpoint of Layer.

Value wraps one Layer whose children are themselves Values, plus the
source span the node was parsed from. EJSONParser builds this tree; callers
who want a different representation drive parse_layer() themselves.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, time
from decimal import Decimal

from ejsonparser.enums import LayerKind
from ejsonparser.syntax.dates import ProlepticDate, ProlepticTimestamp
from ejsonparser.syntax.layer import (
    ArrayLiteral,
    BooleanLiteral,
    DateLiteral,
    DecimalLiteral,
    IntegerLiteral,
    IntervalLiteral,
    Layer,
    MapLiteral,
    NullLiteral,
    ObjectIdLiteral,
    StringLiteral,
    TimeLiteral,
    TimestampLiteral,
)

__all__ = ["PythonValue", "Span", "Value", "to_python"]


@dataclass(frozen=True, slots=True)
class Span:
    """Source position span.

    Attributes:
        start: Starting character offset (inclusive)
        end: Ending character offset (exclusive)

    Example:
        Source: '[1, "a"]'
        Array span: Span(start=0, end=8)
        String span: Span(start=4, end=7)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate span invariants."""
        if self.start < 0:
            msg = f"Span start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"Span end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Value:
    """One node of the EJSON tree.

    Attributes:
        layer: The node's own layer; array items and map pairs are Values
        span: Where the node was parsed from (None for constructed trees).
            Spans do not take part in equality.
    """

    layer: Layer["Value"]
    span: Span | None = field(default=None, compare=False)

    @property
    def kind(self) -> LayerKind:
        """Kind of this node's layer."""
        return self.layer.kind


type PythonValue = (
    None
    | bool
    | Decimal
    | int
    | str
    | datetime
    | time
    | date
    | ProlepticTimestamp
    | ProlepticDate
    | IntervalLiteral
    | ObjectIdLiteral
    | list["PythonValue"]
    | list[tuple["PythonValue", "PythonValue"]]
)
"""Plain Python rendering of a Value (see to_python)."""


def to_python(value: Value) -> PythonValue:  # noqa: PLR0911 - one return per layer kind
    """Flatten a Value tree into plain Python objects.

    Scalars become None, bool, Decimal, int, str, datetime, time and date
    (year-0 dates and timestamps stay as their Proleptic types).
    Intervals and object ids stay as their literal dataclasses so they are
    not mistaken for strings. Arrays become lists; maps become lists of
    (key, value) tuples, keeping order and duplicate keys.

    Example:
        >>> from ejsonparser import parse
        >>> to_python(parse('{"a": [1, 2.5], "a": null}'))
        [('a', [1, Decimal('2.5')]), ('a', None)]
    """
    match value.layer:
        case NullLiteral():
            return None
        case (
            BooleanLiteral(inner)
            | DecimalLiteral(inner)
            | IntegerLiteral(inner)
            | StringLiteral(inner)
            | TimestampLiteral(inner)
            | TimeLiteral(inner)
            | DateLiteral(inner)
        ):
            return inner
        case IntervalLiteral() | ObjectIdLiteral():
            return value.layer
        case ArrayLiteral(items):
            return [to_python(item) for item in items]
        case MapLiteral(entries):
            return [(to_python(key), to_python(item)) for key, item in entries]
