"""Grammar rules for EJSON values.

This module provides the keyword literals, the structural rules (arrays
and maps) and the one-layer dispatcher that ties every literal parser
together.

Open Recursion:
    Arrays, maps and the dispatcher never parse nested values themselves.
    They take an `element` parser for "one nested value" as an explicit
    argument. The caller decides what a child is and how recursion happens;
    see EJSONParser for the default fixpoint.

Dispatch Order:
    null, boolean, decimal, integer, string, TIMESTAMP, TIME, DATE,
    INTERVAL, OID, array, map. Decimal runs under attempt() because a bare
    digit run also starts an integer; whether a '.' or exponent follows is
    only known after scanning ahead.
"""

from functools import partial

from ejsonparser.diagnostics import ErrorTemplate
from ejsonparser.syntax.cursor import Cursor, ParseError, ParseOutcome, ParseResult, Parser, fail
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
from ejsonparser.syntax.parser.combinators import (
    attempt,
    braces,
    brackets,
    choice,
    comma_separated,
    label,
    mapped,
)
from ejsonparser.syntax.parser.numbers import parse_decimal, parse_integer
from ejsonparser.syntax.parser.strings import parse_string
from ejsonparser.syntax.parser.temporal import (
    parse_date_literal,
    parse_interval_literal,
    parse_object_id_literal,
    parse_time_literal,
    parse_timestamp_literal,
)
from ejsonparser.syntax.parser.whitespace import skip_padded

__all__ = ["parse_array", "parse_boolean", "parse_layer", "parse_map", "parse_null"]

_NULL = "null"
_TRUE = "true"
_FALSE = "false"


def parse_null(cursor: Cursor) -> ParseOutcome[None]:
    """Parse the keyword null (matched atomically)."""
    if cursor.starts_with(_NULL):
        return ParseResult(None, cursor.advance(len(_NULL)))
    return fail(cursor, ErrorTemplate.expected_token(_NULL, cursor.peek()))


def parse_boolean(cursor: Cursor) -> ParseOutcome[bool]:
    """Parse the keyword true or false (matched atomically)."""
    if cursor.starts_with(_TRUE):
        return ParseResult(True, cursor.advance(len(_TRUE)))
    if cursor.starts_with(_FALSE):
        return ParseResult(False, cursor.advance(len(_FALSE)))
    return fail(cursor, ErrorTemplate.expected_one_of((_TRUE, _FALSE), cursor.peek()))


def parse_array[T](cursor: Cursor, element: Parser[T]) -> ParseOutcome[tuple[T, ...]]:
    """Parse array: "[" ( value ( WS* "," WS* value )* )? "]"

    Args:
        cursor: Current position in source
        element: Parser for one nested value

    Returns:
        ParseResult with the children in input order

    Examples:
        "[]" -> ()
        "[1, 2,3]" (element = parse_integer) -> (1, 2, 3)
        "[1,]" -> ParseError (no trailing comma)
    """
    return brackets(cursor, partial(comma_separated, element=element))


def _parse_pair[T](cursor: Cursor, element: Parser[T]) -> ParseOutcome[tuple[T, T]]:
    """key WS* ":" WS* value"""
    key = element(cursor)
    if isinstance(key, ParseError):
        return key

    after_colon = skip_padded(key.cursor, ":")
    if after_colon is None:
        return fail(key.cursor, ErrorTemplate.expected_token("':'", key.cursor.peek()))

    value = element(after_colon)
    if isinstance(value, ParseError):
        return value
    return ParseResult((key.value, value.value), value.cursor)


def parse_map[T](cursor: Cursor, element: Parser[T]) -> ParseOutcome[tuple[tuple[T, T], ...]]:
    """Parse map: "{" ( pair ( WS* "," WS* pair )* )? "}"

    Keys and values both use element, so keys may be any value. The result
    is an ordered list of pairs with duplicates preserved.

    Examples:
        "{}" -> ()
        '{"a":1,"a":2}' -> (("a", 1), ("a", 2))
    """
    pair = partial(_parse_pair, element=element)
    return braces(cursor, partial(comma_separated, element=pair))


def _null_layer(_: None) -> NullLiteral:
    return NullLiteral()


_LITERAL_ALTERNATIVES: tuple[Parser[Layer[object]], ...] = (
    label(mapped(parse_null, _null_layer), "null"),
    label(mapped(parse_boolean, BooleanLiteral), "boolean"),
    label(mapped(attempt(parse_decimal), DecimalLiteral), "decimal"),
    label(mapped(parse_integer, IntegerLiteral), "integer"),
    label(mapped(parse_string, StringLiteral), "string"),
    label(mapped(parse_timestamp_literal, TimestampLiteral), "TIMESTAMP(...)"),
    label(mapped(parse_time_literal, TimeLiteral), "TIME(...)"),
    label(mapped(parse_date_literal, DateLiteral), "DATE(...)"),
    label(mapped(parse_interval_literal, IntervalLiteral), "INTERVAL(...)"),
    label(mapped(parse_object_id_literal, ObjectIdLiteral), "OID(...)"),
)


def parse_layer[T](cursor: Cursor, element: Parser[T]) -> ParseOutcome[Layer[T]]:
    """Parse one layer of the EJSON tree.

    Tries every alternative in dispatch order; the first success wins and a
    committed failure stops the search.

    Args:
        cursor: Current position in source
        element: Parser for one nested value, used for array items and
            map keys/values

    Returns:
        ParseResult with the layer, or ParseError. When nothing matches the
        error lists every alternative that was tried.

    Examples:
        "1.0" -> DecimalLiteral(Decimal("1.0"))
        "1" -> IntegerLiteral(1)
        "[1]" -> ArrayLiteral((<element result for "1">,))
    """
    array: Parser[Layer[T]] = label(
        mapped(partial(parse_array, element=element), ArrayLiteral), "array"
    )
    map_: Parser[Layer[T]] = label(
        mapped(partial(parse_map, element=element), MapLiteral), "map"
    )
    return choice(cursor, *_LITERAL_ALTERNATIVES, array, map_)
