"""Primitive numeral parsers for the EJSON grammar.

This module provides the lowest-level parsers: single digits, the
fixed-width numerals used by calendar and clock fields, unbounded natural
numbers, and sign handling generic over any negatable numeric type.

Digits are ASCII only: str.isdigit() accepts Unicode digits like ² that
the grammar does not.
"""

from typing import Protocol, Self

from ejsonparser.constants import ASCII_DIGITS
from ejsonparser.diagnostics import ErrorTemplate
from ejsonparser.syntax.cursor import Cursor, ParseError, ParseOutcome, ParseResult, Parser, fail
from ejsonparser.syntax.parser.whitespace import skip_whitespace

__all__ = [
    "Negatable",
    "parse10",
    "parse1000",
    "parse_digit",
    "parse_natural",
    "parse_negative",
    "parse_positive",
    "parse_signed",
]

# Field widths tried by the fixed-width numerals, widest first.
_WIDTHS_10: tuple[int, ...] = (2, 1)
_WIDTHS_1000: tuple[int, ...] = (4, 3, 2, 1)

# Digit runs up to this length convert with int() directly. Below
# sys.int_info.str_digits_check_threshold, so the int/str digit limit never applies.
_DIRECT_DIGITS = 600


class Negatable(Protocol):
    """Numeric type supporting unary negation (int, Decimal, ...)."""

    def __neg__(self) -> Self: ...


def _digit_value(ch: str) -> int:
    return ord(ch) - ord("0")


def _expected_digit(cursor: Cursor) -> ParseError:
    return fail(cursor, ErrorTemplate.expected_token("digit", cursor.peek()))


def parse_digit(cursor: Cursor) -> ParseOutcome[int]:
    """Parse exactly one ASCII digit and yield its value.

    Examples:
        "7" -> 7
        "x" -> ParseError (expected digit)
    """
    if cursor.is_eof or cursor.current not in ASCII_DIGITS:
        return _expected_digit(cursor)
    return ParseResult(_digit_value(cursor.current), cursor.advance())


def _parse_fixed_width(cursor: Cursor, widths: tuple[int, ...]) -> ParseOutcome[int]:
    """Match the widest digit run from widths and fold it to an integer."""
    for width in widths:
        text = cursor.slice_ahead(width)
        if len(text) == width and all(ch in ASCII_DIGITS for ch in text):
            value = 0
            for ch in text:
                value = value * 10 + _digit_value(ch)
            return ParseResult(value, cursor.advance(width))
    return _expected_digit(cursor)


def parse10(cursor: Cursor) -> ParseOutcome[int]:
    """Parse a 1-2 digit numeral, two digits tried first.

    Used for month, day, hour, minute and second fields.
    """
    return _parse_fixed_width(cursor, _WIDTHS_10)


def parse1000(cursor: Cursor) -> ParseOutcome[int]:
    """Parse a 1-4 digit numeral, widest width tried first.

    Used for the year field. No leading zeros are required.
    """
    return _parse_fixed_width(cursor, _WIDTHS_1000)


def _digits_to_int(digits: str) -> int:
    """Value of an ASCII digit run, splitting long runs in half."""
    if len(digits) <= _DIRECT_DIGITS:
        return int(digits)
    half = len(digits) // 2
    low = digits[half:]
    return _digits_to_int(digits[:half]) * 10 ** len(low) + _digits_to_int(low)


def parse_natural(cursor: Cursor) -> ParseOutcome[int]:
    """Parse one or more digits as an unbounded natural number.

    The value equals folding acc * 10 + digit left to right. Long runs are
    converted by halves, which keeps multi-megabyte numerals subquadratic
    and sidesteps int()'s string conversion digit limit.

    Examples:
        "007" -> 7
        "123abc" -> 123 (cursor stops at 'a')
    """
    first = parse_digit(cursor)
    if isinstance(first, ParseError):
        return first

    source = cursor.source
    end = first.cursor.pos
    while end < len(source) and source[end] in ASCII_DIGITS:
        end += 1
    return ParseResult(_digits_to_int(source[cursor.pos : end]), cursor.advance(end - cursor.pos))


def parse_negative[N: Negatable](cursor: Cursor, quantity: Parser[N]) -> ParseOutcome[N]:
    """Parse '-', optional whitespace, then quantity; negate the result.

    Once the minus sign is consumed the quantity is required, so a failure
    after it is committed.
    """
    after_minus = cursor.expect("-")
    if after_minus is None:
        return fail(cursor, ErrorTemplate.expected_token("'-'", cursor.peek()))

    result = quantity(skip_whitespace(after_minus))
    if isinstance(result, ParseError):
        return result
    return ParseResult(-result.value, result.cursor)


def parse_positive[N: Negatable](cursor: Cursor, quantity: Parser[N]) -> ParseOutcome[N]:
    """Parse an optional '+' (followed by optional whitespace), then quantity."""
    after_plus = cursor.expect("+")
    if after_plus is not None:
        cursor = skip_whitespace(after_plus)
    return quantity(cursor)


def parse_signed[N: Negatable](cursor: Cursor, quantity: Parser[N]) -> ParseOutcome[N]:
    """Parse quantity with an optional sign: negative form first, else positive.

    Examples:
        "-5" -> -5
        "- 5" -> -5
        "+ 5" -> 5
        "5" -> 5
    """
    negative = parse_negative(cursor, quantity)
    if isinstance(negative, ParseResult) or negative.committed(cursor):
        return negative
    return parse_positive(cursor, quantity)
