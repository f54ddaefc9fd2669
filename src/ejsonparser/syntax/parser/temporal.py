"""Date, time and timestamp parsing with calendar/clock validation.

Grammar:
    date      ::= digit{1,4} "-" digit{1,2} "-" digit{1,2}
    time      ::= digit{1,2} ":" digit{1,2} ":" digit{1,2}
    timestamp ::= date "T" time "Z"

    timestampLit ::= "TIMESTAMP" "(" '"' timestamp '"' ")"
    timeLit      ::= "TIME" "(" '"' time '"' ")"
    dateLit      ::= "DATE" "(" '"' date '"' ")"
    intervalLit  ::= "INTERVAL" "(" '"' [^"]* '"' ")"
    oidLit       ::= "OID" "(" '"' [^"]* '"' ")"

Values are checked against the real calendar and clock: a date whose day
does not exist in its month/year, or an hour/minute/second outside the
clock, fails with a message naming every field. Timestamps are always UTC
and carry no sub-second component.
"""

from datetime import date, datetime, time

from ejsonparser.diagnostics import ErrorTemplate
from ejsonparser.enums import LiteralTag
from ejsonparser.syntax.cursor import Cursor, ParseError, ParseOutcome, ParseResult, fail
from ejsonparser.syntax.dates import ProlepticDate, ProlepticTimestamp, make_date, make_timestamp
from ejsonparser.syntax.parser.combinators import parse_char, tagged_literal
from ejsonparser.syntax.parser.primitives import parse10, parse1000
from ejsonparser.syntax.parser.strings import parse_raw_content

__all__ = [
    "parse_date",
    "parse_date_literal",
    "parse_interval_literal",
    "parse_object_id_literal",
    "parse_time",
    "parse_time_literal",
    "parse_timestamp",
    "parse_timestamp_literal",
]


def _parse_triple(
    first: ParseOutcome[int],
    separator: str,
) -> ParseOutcome[tuple[int, int, int]]:
    """Continue an already parsed first field with `sep NN sep NN`."""
    if isinstance(first, ParseError):
        return first
    values = [first.value]
    cursor = first.cursor
    for _ in range(2):
        sep = parse_char(cursor, separator)
        if isinstance(sep, ParseError):
            return sep
        field_result = parse10(sep.cursor)
        if isinstance(field_result, ParseError):
            return field_result
        values.append(field_result.value)
        cursor = field_result.cursor
    return ParseResult((values[0], values[1], values[2]), cursor)


def parse_time(cursor: Cursor) -> ParseOutcome[time]:
    """Parse time of day: HH:MM:SS

    Examples:
        "03:04:05" -> time(3, 4, 5)
        "3:4:5" -> time(3, 4, 5)
        "24:00:00" -> ParseError (hour out of range)
    """
    fields = _parse_triple(parse10(cursor), ":")
    if isinstance(fields, ParseError):
        return fields

    hour, minute, second = fields.value
    try:
        value = time(hour, minute, second)
    except ValueError as e:
        return fail(cursor, ErrorTemplate.invalid_time(hour, minute, second, str(e)))
    return ParseResult(value, fields.cursor)


def parse_date(cursor: Cursor) -> ParseOutcome[date | ProlepticDate]:
    """Parse calendar date: YYYY-MM-DD with an exact-date check.

    The year takes 1-4 digits with no leading zeros required. Year 0
    yields a ProlepticDate since datetime.date starts at year 1.

    Examples:
        "2021-01-02" -> date(2021, 1, 2)
        "2020-02-29" -> date(2020, 2, 29)
        "0-02-29" -> ProlepticDate(0, 2, 29)
        "2021-02-29" -> ParseError (day does not exist)
    """
    fields = _parse_triple(parse1000(cursor), "-")
    if isinstance(fields, ParseError):
        return fields

    year, month, day = fields.value
    try:
        value = make_date(year, month, day)
    except ValueError as e:
        return fail(cursor, ErrorTemplate.invalid_date(year, month, day, str(e)))
    return ParseResult(value, fields.cursor)


def parse_timestamp(cursor: Cursor) -> ParseOutcome[datetime | ProlepticTimestamp]:
    """Parse UTC timestamp: date "T" time "Z"

    Examples:
        "2021-01-02T03:04:05Z" -> datetime(2021, 1, 2, 3, 4, 5, tzinfo=UTC)
        "2021-01-02T03:04:05" -> ParseError (missing 'Z')
    """
    date_result = parse_date(cursor)
    if isinstance(date_result, ParseError):
        return date_result

    separator = parse_char(date_result.cursor, "T")
    if isinstance(separator, ParseError):
        return separator

    time_result = parse_time(separator.cursor)
    if isinstance(time_result, ParseError):
        return time_result

    zulu = parse_char(time_result.cursor, "Z")
    if isinstance(zulu, ParseError):
        return zulu

    return ParseResult(make_timestamp(date_result.value, time_result.value), zulu.cursor)


def parse_timestamp_literal(cursor: Cursor) -> ParseOutcome[datetime | ProlepticTimestamp]:
    """TIMESTAMP("2021-01-02T03:04:05Z")"""
    return tagged_literal(cursor, LiteralTag.TIMESTAMP, parse_timestamp)


def parse_time_literal(cursor: Cursor) -> ParseOutcome[time]:
    """TIME("03:04:05")"""
    return tagged_literal(cursor, LiteralTag.TIME, parse_time)


def parse_date_literal(cursor: Cursor) -> ParseOutcome[date | ProlepticDate]:
    """DATE("2021-01-02")"""
    return tagged_literal(cursor, LiteralTag.DATE, parse_date)


def parse_interval_literal(cursor: Cursor) -> ParseOutcome[str]:
    """INTERVAL("...") with the payload kept as opaque text."""
    return tagged_literal(cursor, LiteralTag.INTERVAL, parse_raw_content)


def parse_object_id_literal(cursor: Cursor) -> ParseOutcome[str]:
    """OID("...") with the payload kept as opaque text."""
    return tagged_literal(cursor, LiteralTag.OID, parse_raw_content)
