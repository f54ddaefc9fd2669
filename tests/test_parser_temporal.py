"""Tests for syntax/parser/temporal.py.

Dates, times and UTC timestamps, with calendar and clock validation, and
the tagged literal forms including the opaque INTERVAL and OID.
"""

from __future__ import annotations

from datetime import UTC, date, datetime, time

import pytest
from hypothesis import given

from ejsonparser.diagnostics import DiagnosticCode
from ejsonparser.syntax.cursor import Cursor, ParseError, ParseResult
from ejsonparser.syntax.dates import ProlepticDate, ProlepticTimestamp
from ejsonparser.syntax.parser.temporal import (
    parse_date,
    parse_date_literal,
    parse_interval_literal,
    parse_object_id_literal,
    parse_time,
    parse_time_literal,
    parse_timestamp,
    parse_timestamp_literal,
)
from tests.strategies import ejson_dates, ejson_times, ejson_timestamps


def _value[T](result: ParseResult[T] | ParseError) -> T:
    assert isinstance(result, ParseResult), result
    return result.value


# ============================================================================
# DATES
# ============================================================================


class TestParseDate:
    """Test calendar dates."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("2021-01-02", date(2021, 1, 2)),
            ("2020-02-29", date(2020, 2, 29)),
            ("2000-02-29", date(2000, 2, 29)),
            ("33-1-5", date(33, 1, 5)),
            ("1-12-31", date(1, 12, 31)),
        ],
    )
    def test_valid_dates(self, source: str, expected: date) -> None:
        """Exact dates, leap days and unpadded fields."""
        assert _value(parse_date(Cursor(source, 0))) == expected

    @pytest.mark.parametrize(
        "source",
        ["2021-02-29", "1900-02-29", "2021-02-30", "2021-13-01", "2021-04-31", "2021-00-10"],
    )
    def test_impossible_dates(self, source: str) -> None:
        """Dates that do not exist fail with INVALID_DATE."""
        result = parse_date(Cursor(source, 0))

        assert isinstance(result, ParseError)
        assert result.code == DiagnosticCode.INVALID_DATE
        assert result.cursor.pos == 0

    def test_message_names_fields(self) -> None:
        """The failure message names year, month and day."""
        result = parse_date(Cursor("2021-02-30", 0))

        assert isinstance(result, ParseError)
        assert "year=2021, month=2, day=30" in result.message

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("0-01-01", ProlepticDate(0, 1, 1)),
            ("0000-02-29", ProlepticDate(0, 2, 29)),
            ("0-12-31", ProlepticDate(0, 12, 31)),
        ],
    )
    def test_year_zero(self, source: str, expected: ProlepticDate) -> None:
        """Year 0 is a leap year on the proleptic calendar."""
        assert _value(parse_date(Cursor(source, 0))) == expected

    @pytest.mark.parametrize("source", ["0-02-30", "0-04-31", "0-13-01", "0-01-00"])
    def test_year_zero_impossible_dates(self, source: str) -> None:
        """Year 0 dates are validated like any other."""
        result = parse_date(Cursor(source, 0))

        assert isinstance(result, ParseError)
        assert result.code == DiagnosticCode.INVALID_DATE

    def test_missing_separator(self) -> None:
        """Fields must be separated by '-'."""
        assert isinstance(parse_date(Cursor("2021/01/02", 0)), ParseError)


# ============================================================================
# TIMES
# ============================================================================


class TestParseTime:
    """Test times of day."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [("03:04:05", time(3, 4, 5)), ("3:4:5", time(3, 4, 5)), ("23:59:59", time(23, 59, 59))],
    )
    def test_valid_times(self, source: str, expected: time) -> None:
        """Whole-second times with padded or unpadded fields."""
        assert _value(parse_time(Cursor(source, 0))) == expected

    @pytest.mark.parametrize("source", ["24:00:00", "12:60:00", "12:00:60"])
    def test_out_of_range(self, source: str) -> None:
        """Fields outside the clock fail with INVALID_TIME."""
        result = parse_time(Cursor(source, 0))

        assert isinstance(result, ParseError)
        assert result.code == DiagnosticCode.INVALID_TIME

    def test_three_digit_field_leaves_digit(self) -> None:
        """Fields are at most two digits wide."""
        result = parse_time(Cursor("01:02:034", 0))

        assert isinstance(result, ParseResult)
        assert result.cursor.current == "4"


# ============================================================================
# TIMESTAMPS
# ============================================================================


class TestParseTimestamp:
    """Test UTC timestamps."""

    def test_decomposition(self) -> None:
        """Timestamp components decompose to the literal's fields."""
        value = _value(parse_timestamp(Cursor("2021-01-02T03:04:05Z", 0)))

        assert value == datetime(2021, 1, 2, 3, 4, 5, tzinfo=UTC)
        assert value.tzinfo is UTC

    @pytest.mark.parametrize(
        "source",
        ["2021-01-02T03:04:05", "2021-01-02 03:04:05Z", "2021-01-02T03:04:05+00:00"],
    )
    def test_malformed(self, source: str) -> None:
        """'T' and 'Z' are required; offsets are not supported."""
        assert isinstance(parse_timestamp(Cursor(source, 0)), ParseError)

    def test_invalid_day_in_timestamp(self) -> None:
        """Calendar validation applies inside timestamps."""
        result = parse_timestamp(Cursor("2021-02-30T00:00:00Z", 0))

        assert isinstance(result, ParseError)
        assert result.code == DiagnosticCode.INVALID_DATE

    def test_year_zero_timestamp(self) -> None:
        """A year-0 timestamp keeps its date and time."""
        value = _value(parse_timestamp(Cursor("0-02-29T12:00:01Z", 0)))

        assert value == ProlepticTimestamp(ProlepticDate(0, 2, 29), time(12, 0, 1))
        assert value.isoformat() == "0000-02-29T12:00:01Z"


# ============================================================================
# TAGGED LITERALS
# ============================================================================


class TestTaggedLiterals:
    """Test TAG("payload") forms."""

    def test_timestamp_literal(self) -> None:
        """TIMESTAMP literal yields an aware UTC datetime."""
        value = _value(parse_timestamp_literal(Cursor('TIMESTAMP("2021-01-02T03:04:05Z")', 0)))

        assert value == datetime(2021, 1, 2, 3, 4, 5, tzinfo=UTC)

    def test_date_and_time_literals(self) -> None:
        """DATE and TIME literals yield date and time."""
        assert _value(parse_date_literal(Cursor('DATE("2021-01-02")', 0))) == date(2021, 1, 2)
        assert _value(parse_time_literal(Cursor('TIME("03:04:05")', 0))) == time(3, 4, 5)

    def test_opaque_payloads(self) -> None:
        """INTERVAL and OID payloads are kept verbatim."""
        assert _value(parse_interval_literal(Cursor('INTERVAL("P1D\\x")', 0))) == "P1D\\x"
        assert _value(parse_object_id_literal(Cursor('OID("5f1d")', 0))) == "5f1d"
        assert _value(parse_object_id_literal(Cursor('OID("")', 0))) == ""

    def test_timestamp_tag_does_not_consume_time(self) -> None:
        """TIMESTAMP fails without consuming input on a TIME literal."""
        start = Cursor('TIME("03:04:05")', 0)
        result = parse_timestamp_literal(start)

        assert isinstance(result, ParseError)
        assert not result.committed(start)

    def test_missing_paren_commits(self) -> None:
        """Once the tag matched, a missing parenthesis is a committed failure."""
        start = Cursor('DATE"2021-01-02")', 0)
        result = parse_date_literal(start)

        assert isinstance(result, ParseError)
        assert result.committed(start)

    @pytest.mark.parametrize(
        "source",
        ['DATE( "2021-01-02")', 'DATE ("2021-01-02")', 'DATE("2021-01-02"', "DATE(2021-01-02)"],
    )
    def test_no_whitespace_or_missing_delimiters(self, source: str) -> None:
        """Tagged literals admit no whitespace and need every delimiter."""
        assert isinstance(parse_date_literal(Cursor(source, 0)), ParseError)

    @pytest.mark.parametrize(
        "source",
        [
            'TIMESTAMP("2021-01-02T03:04:05Z"',
            'TIMESTAMP("2021-01-02T03:04:05")',
            'TIMESTAMP("2021-01-02T03:04:05Z)',
        ],
    )
    def test_timestamp_literal_incomplete(self, source: str) -> None:
        """A missing closing paren, quote or 'Z' fails after the tag."""
        start = Cursor(source, 0)
        result = parse_timestamp_literal(start)

        assert isinstance(result, ParseError)
        assert result.committed(start)

    def test_invalid_payload_commits(self) -> None:
        """An impossible date inside DATE(...) is a committed failure."""
        start = Cursor('DATE("2021-02-30")', 0)
        result = parse_date_literal(start)

        assert isinstance(result, ParseError)
        assert result.committed(start)
        assert result.code == DiagnosticCode.INVALID_DATE

    @given(ejson_dates())
    def test_date_property(self, sample: tuple[str, object]) -> None:
        """Property: formatted dates parse back to the same date."""
        source, expected = sample

        assert _value(parse_date_literal(Cursor(source, 0))) == expected

    @given(ejson_times())
    def test_time_property(self, sample: tuple[str, object]) -> None:
        """Property: formatted times parse back to the same time."""
        source, expected = sample

        assert _value(parse_time_literal(Cursor(source, 0))) == expected

    @given(ejson_timestamps())
    def test_timestamp_property(self, sample: tuple[str, object]) -> None:
        """Property: formatted timestamps parse back to the same instant."""
        source, expected = sample

        assert _value(parse_timestamp_literal(Cursor(source, 0))) == expected
