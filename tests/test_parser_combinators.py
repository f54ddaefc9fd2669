"""Tests for syntax/parser/combinators.py and whitespace.py.

Backtracking (attempt), ordered choice with commit semantics, delimiters,
comma-separated lists and tagged literals.
"""

from __future__ import annotations

from ejsonparser.syntax.cursor import Cursor, ParseError, ParseOutcome, ParseResult
from ejsonparser.syntax.parser.combinators import (
    attempt,
    brackets,
    choice,
    comma_separated,
    label,
    mapped,
    parse_char,
    tagged_literal,
)
from ejsonparser.syntax.parser.primitives import parse_natural
from ejsonparser.syntax.parser.strings import parse_raw_content
from ejsonparser.syntax.parser.whitespace import skip_padded


def _consume_then_fail(cursor: Cursor) -> ParseOutcome[str]:
    """Consume two characters, then fail."""
    return ParseError("consumed then failed", cursor.advance(2), ("twice",))


def _fail_uncommitted(cursor: Cursor) -> ParseOutcome[str]:
    return ParseError("nothing here", cursor, ("first",))


def _accept(cursor: Cursor) -> ParseOutcome[str]:
    return ParseResult("accepted", cursor.advance())


# ============================================================================
# ATTEMPT / LABEL / MAPPED
# ============================================================================


class TestAttempt:
    """Test rollback on failure."""

    def test_attempt_rolls_back(self) -> None:
        """A failure after consuming input is relocated to the start."""
        start = Cursor("abcd", 0)
        result = attempt(_consume_then_fail)(start)

        assert isinstance(result, ParseError)
        assert result.cursor == start
        assert result.message == "consumed then failed"

    def test_attempt_passes_success(self) -> None:
        """Successful results are returned unchanged."""
        result = attempt(_accept)(Cursor("ab", 0))

        assert isinstance(result, ParseResult)
        assert result.cursor.pos == 1

    def test_label_renames_uncommitted(self) -> None:
        """label() replaces expected on uncommitted failures only."""
        start = Cursor("abcd", 0)
        uncommitted = label(_fail_uncommitted, "thing")(start)
        committed = label(_consume_then_fail, "thing")(start)

        assert isinstance(uncommitted, ParseError)
        assert uncommitted.expected == ("thing",)
        assert isinstance(committed, ParseError)
        assert committed.expected == ("twice",)

    def test_mapped_transforms_value(self) -> None:
        """mapped() applies its function to successful values."""
        result = mapped(parse_natural, lambda n: n * 2)(Cursor("21", 0))

        assert isinstance(result, ParseResult)
        assert result.value == 42


# ============================================================================
# CHOICE
# ============================================================================


class TestChoice:
    """Test ordered choice."""

    def test_first_success_wins(self) -> None:
        """Later alternatives do not run after a success."""
        calls: list[str] = []

        def tracked(cursor: Cursor) -> ParseOutcome[str]:
            calls.append("tracked")
            return _accept(cursor)

        result = choice(Cursor("x", 0), _accept, tracked)

        assert isinstance(result, ParseResult)
        assert calls == []

    def test_uncommitted_failure_falls_through(self) -> None:
        """An alternative failing at the start lets the next one run."""
        result = choice(Cursor("x", 0), _fail_uncommitted, _accept)

        assert isinstance(result, ParseResult)
        assert result.value == "accepted"

    def test_committed_failure_stops(self) -> None:
        """A committed failure is returned without trying later alternatives."""
        calls: list[str] = []

        def tracked(cursor: Cursor) -> ParseOutcome[str]:
            calls.append("tracked")
            return _accept(cursor)

        result = choice(Cursor("abcd", 0), _consume_then_fail, tracked)

        assert isinstance(result, ParseError)
        assert result.message == "consumed then failed"
        assert calls == []

    def test_attempt_reopens_choice(self) -> None:
        """attempt() turns a committed failure into a recoverable one."""
        result = choice(Cursor("abcd", 0), attempt(_consume_then_fail), _accept)

        assert isinstance(result, ParseResult)

    def test_all_fail_merges_expected(self) -> None:
        """When every alternative fails uncommitted, expectations are merged."""
        result = choice(
            Cursor("z", 0),
            label(_fail_uncommitted, "a"),
            label(_fail_uncommitted, "b"),
            label(_fail_uncommitted, "a"),
        )

        assert isinstance(result, ParseError)
        assert result.expected == ("a", "b")
        assert result.cursor.pos == 0
        assert result.message == "Expected one of a, b but found 'z'"


# ============================================================================
# DELIMITERS AND LISTS
# ============================================================================


class TestDelimiters:
    """Test parse_char, brackets and comma_separated."""

    def test_parse_char(self) -> None:
        """parse_char matches exactly one character."""
        assert isinstance(parse_char(Cursor("(", 0), "("), ParseResult)
        assert isinstance(parse_char(Cursor(")", 0), "("), ParseError)

    def test_brackets_require_both_delimiters(self) -> None:
        """Missing the closing bracket fails after the content."""
        result = brackets(Cursor("[12", 0), parse_natural)

        assert isinstance(result, ParseError)
        assert result.cursor.pos == 3

    def test_comma_separated_empty(self) -> None:
        """An empty list succeeds without consuming input."""
        result = comma_separated(Cursor("]", 0), parse_natural)

        assert isinstance(result, ParseResult)
        assert result.value == ()
        assert result.cursor.pos == 0

    def test_comma_separated_with_whitespace(self) -> None:
        """Whitespace is allowed around commas."""
        result = comma_separated(Cursor("1 ,2,\n 3]", 0), parse_natural)

        assert isinstance(result, ParseResult)
        assert result.value == (1, 2, 3)
        assert result.cursor.current == "]"

    def test_trailing_comma_rejected(self) -> None:
        """A separator must be followed by an element."""
        result = comma_separated(Cursor("1,2,]", 0), parse_natural)

        assert isinstance(result, ParseError)
        assert result.cursor.pos == 4

    def test_whitespace_before_non_separator_not_consumed(self) -> None:
        """Trailing whitespace without a comma is left in place."""
        result = comma_separated(Cursor("1 ]", 0), parse_natural)

        assert isinstance(result, ParseResult)
        assert result.cursor.pos == 1

    def test_skip_padded_is_atomic(self) -> None:
        """skip_padded consumes nothing when the separator is absent."""
        assert skip_padded(Cursor("  x", 0), ",") is None
        padded = skip_padded(Cursor(" , x", 0), ",")
        assert padded is not None
        assert padded.pos == 3


# ============================================================================
# TAGGED LITERALS
# ============================================================================


class TestTaggedLiteral:
    """Test TAG("payload")."""

    def test_tagged_literal(self) -> None:
        """Tag, parenthesis, quotes and payload in sequence."""
        result = tagged_literal(Cursor('OID("abc")', 0), "OID", parse_raw_content)

        assert isinstance(result, ParseResult)
        assert result.value == "abc"
        assert result.cursor.is_eof

    def test_wrong_tag_uncommitted(self) -> None:
        """A different tag fails at the start."""
        start = Cursor('OID("abc")', 0)
        result = tagged_literal(start, "INTERVAL", parse_raw_content)

        assert isinstance(result, ParseError)
        assert not result.committed(start)
