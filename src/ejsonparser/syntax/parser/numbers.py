"""Integer and arbitrary-precision decimal literal parsers.

Grammar:
    integer      ::= sign? digit+
    decimal      ::= plainDecimal | scientific
    plainDecimal ::= [0-9\\-.]+         (must read as one signed decimal)
    scientific   ::= sign? digit+ "." digit* ("e" | "E") integer

Decimal and integer grammars overlap: a bare digit run is a valid prefix of
both. parse_decimal() rolls back fully on failure so the value dispatcher
can fall through to parse_integer().

Precision:
    Scientific mantissas are assembled with decimal.Decimal arithmetic under
    an exact context (MAX_PREC, Inexact trapped), so no digit is ever
    rounded away. Exponents beyond the decimal module's range fail the
    parse instead of raising.
"""

from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    Context,
    Decimal,
    DivisionByZero,
    Inexact,
    InvalidOperation,
    Overflow,
    localcontext,
)

from ejsonparser.constants import ASCII_DIGITS, EXPONENT_MARKERS, PLAIN_DECIMAL_CHARS
from ejsonparser.diagnostics import ErrorTemplate
from ejsonparser.syntax.cursor import Cursor, ParseError, ParseOutcome, ParseResult, fail
from ejsonparser.syntax.parser.combinators import attempt, choice
from ejsonparser.syntax.parser.primitives import parse_natural, parse_signed

__all__ = [
    "decimal_power",
    "parse_decimal",
    "parse_integer",
    "parse_plain_decimal",
    "parse_scientific_decimal",
]

# Exact arithmetic: unbounded precision and exponent range, rounding is an error.
_EXACT_CONTEXT = Context(
    prec=MAX_PREC,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
    traps=[Inexact, Overflow, InvalidOperation, DivisionByZero],
)

# Coefficient 1, exponent 1: powers stay a one-digit coefficient.
_TEN = Decimal("1E+1")
_ONE = Decimal(1)


def decimal_power(base: Decimal, exponent: int) -> Decimal:
    """Raise base to a non-negative integer power, exactly.

    base ** 0 is 1 for every base, zero included.

    Raises:
        ValueError: If exponent is negative
    """
    if exponent < 0:
        msg = f"decimal_power exponent must be >= 0, got {exponent}"
        raise ValueError(msg)
    if exponent == 0:
        return _ONE
    with localcontext(_EXACT_CONTEXT):
        return base**exponent


def parse_integer(cursor: Cursor) -> ParseOutcome[int]:
    """Parse integer literal: sign? digit+

    Examples:
        "42" -> 42
        "-0" -> 0
        "007" -> 7
        "- 3" -> -3
    """
    return parse_signed(cursor, parse_natural)


def _is_plain_decimal(text: str) -> bool:
    """-?[0-9]+ "." [0-9]+ over a run already restricted to digits, '-' and '.'."""
    body = text.removeprefix("-")
    integer, dot, fraction = body.partition(".")
    return bool(dot) and integer.isdigit() and fraction.isdigit()


def parse_plain_decimal(cursor: Cursor) -> ParseOutcome[Decimal]:
    """Scan a maximal run of [0-9.-] and read it wholesale as a decimal.

    Fails when the run is not a decimal (misplaced '-', several '.', no
    fraction) or when an exponent marker follows, since the run then does
    not end the numeral.

    Examples:
        "12.50" -> Decimal("12.50")
        "-0.5" -> Decimal("-0.5")
        "1-2.0" -> ParseError
        "1.5e2" -> ParseError (scientific form handles it)
    """
    start = cursor
    while not cursor.is_eof and cursor.current in PLAIN_DECIMAL_CHARS:
        cursor = cursor.advance()
    text = start.slice_to(cursor.pos)

    if not text:
        return fail(start, ErrorTemplate.expected_token("decimal", start.peek()))
    if not _is_plain_decimal(text):
        return fail(start, ErrorTemplate.invalid_decimal(text))

    following = cursor.peek()
    if following is not None and following in EXPONENT_MARKERS:
        return fail(cursor, ErrorTemplate.expected_token("end of plain decimal", following))

    return ParseResult(Decimal(text), cursor)


def _fold_fraction(digits: list[int]) -> Decimal:
    """Fold fraction digits right to left as (digit + acc) / 10."""
    acc = Decimal(0)
    for digit in reversed(digits):
        acc = (digit + acc) / 10
    return acc


def _scale(mantissa: Decimal, exponent: int) -> Decimal:
    """mantissa * 10 ** exponent, negative exponents by division."""
    if exponent == 0:
        return mantissa * _ONE
    if exponent > 0:
        return mantissa * decimal_power(_TEN, exponent)
    return mantissa / decimal_power(_TEN, -exponent)


def _parse_unsigned_scientific(cursor: Cursor) -> ParseOutcome[Decimal]:
    """digit+ "." digit* ("e" | "E") integer"""
    integer_part = parse_natural(cursor)
    if isinstance(integer_part, ParseError):
        return integer_part

    cursor = integer_part.cursor
    after_dot = cursor.expect(".")
    if after_dot is None:
        return fail(cursor, ErrorTemplate.expected_token("'.'", cursor.peek()))

    cursor = after_dot
    digits: list[int] = []
    while not cursor.is_eof and cursor.current in ASCII_DIGITS:
        digits.append(ord(cursor.current) - ord("0"))
        cursor = cursor.advance()

    marker = cursor.peek()
    if marker is None or marker not in EXPONENT_MARKERS:
        return fail(cursor, ErrorTemplate.expected_token("exponent ('e' or 'E')", marker))

    exponent = parse_integer(cursor.advance())
    if isinstance(exponent, ParseError):
        return exponent

    try:
        mantissa = integer_part.value + _fold_fraction(digits)
        value = _scale(mantissa, exponent.value)
    except ArithmeticError:
        return fail(cursor, ErrorTemplate.decimal_exponent_out_of_range(exponent.value))
    return ParseResult(value, exponent.cursor)


def parse_scientific_decimal(cursor: Cursor) -> ParseOutcome[Decimal]:
    """Parse scientific decimal: sign? digit+ "." digit* ("e" | "E") integer

    Examples:
        "1.5e2" -> Decimal("150.0")
        "-2.e-1" -> Decimal("-0.2")
        "2.0E0" -> Decimal("2.0")
    """
    with localcontext(_EXACT_CONTEXT):
        return parse_signed(cursor, _parse_unsigned_scientific)


def parse_decimal(cursor: Cursor) -> ParseOutcome[Decimal]:
    """Parse decimal literal: plain form first, scientific form second.

    Both forms are attempted with full rollback, so a failure never
    consumes input.

    Examples:
        "1.0" -> Decimal("1.0")
        "1.5e2" -> Decimal("150.0")
        "1" -> ParseError (no '.', left to parse_integer)
    """
    return choice(cursor, attempt(parse_plain_decimal), attempt(parse_scientific_decimal))
