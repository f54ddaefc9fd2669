"""Generic parser combinators for the EJSON grammar.

Every combinator works on the immutable Cursor and returns either a
ParseResult or a ParseError. Backtracking is explicit: a failure whose
cursor lies past the starting position has committed input, and choice()
will not try further alternatives after it. Wrap an alternative in
attempt() to roll a failure back to its start.
"""

from collections.abc import Callable

from ejsonparser.diagnostics import ErrorTemplate
from ejsonparser.syntax.cursor import Cursor, ParseError, ParseOutcome, ParseResult, Parser, fail
from ejsonparser.syntax.parser.whitespace import skip_padded

__all__ = [
    "attempt",
    "between",
    "braces",
    "brackets",
    "choice",
    "comma_separated",
    "label",
    "mapped",
    "parens",
    "parse_char",
    "quoted",
    "tagged_literal",
]


def attempt[T](parser: Parser[T]) -> Parser[T]:
    """Run parser with full rollback on failure.

    A failure of the wrapped parser is relocated to the starting cursor, so
    it never counts as committed and the enclosing choice() may continue.
    """

    def attempted(cursor: Cursor) -> ParseOutcome[T]:
        result = parser(cursor)
        if isinstance(result, ParseError):
            return result.at(cursor)
        return result

    return attempted


def label[T](parser: Parser[T], name: str) -> Parser[T]:
    """Name what parser expects when it fails without consuming input."""

    def labelled(cursor: Cursor) -> ParseOutcome[T]:
        result = parser(cursor)
        if isinstance(result, ParseError) and not result.committed(cursor):
            return ParseError(result.message, result.cursor, (name,), result.code)
        return result

    return labelled


def mapped[T, U](parser: Parser[T], transform: Callable[[T], U]) -> Parser[U]:
    """Apply transform to the value of a successful parse."""

    def mapping(cursor: Cursor) -> ParseOutcome[U]:
        result = parser(cursor)
        if isinstance(result, ParseError):
            return result
        return ParseResult(transform(result.value), result.cursor)

    return mapping


def choice[T](cursor: Cursor, *alternatives: Parser[T]) -> ParseOutcome[T]:
    """Try alternatives in order; first success wins.

    Later alternatives run only while earlier ones fail without committing
    input. A committed failure is returned immediately. If every
    alternative fails uncommitted, the result is one error at cursor that
    lists everything the alternatives expected.
    """
    expected: list[str] = []
    for alternative in alternatives:
        result = alternative(cursor)
        if isinstance(result, ParseResult) or result.committed(cursor):
            return result
        expected.extend(e for e in result.expected if e not in expected)
    return fail(cursor, ErrorTemplate.expected_one_of(tuple(expected), cursor.peek()))


def parse_char(cursor: Cursor, char: str) -> ParseOutcome[str]:
    """Match exactly one character."""
    after = cursor.expect(char)
    if after is None:
        return fail(cursor, ErrorTemplate.expected_token(f"'{char}'", cursor.peek()))
    return ParseResult(char, after)


def between[T](cursor: Cursor, open_char: str, close_char: str, inner: Parser[T]) -> ParseOutcome[T]:
    """Parse open_char, inner, close_char.

    Missing either delimiter fails the whole construct; there is no
    partial recovery.
    """
    opened = parse_char(cursor, open_char)
    if isinstance(opened, ParseError):
        return opened

    result = inner(opened.cursor)
    if isinstance(result, ParseError):
        return result

    closed = parse_char(result.cursor, close_char)
    if isinstance(closed, ParseError):
        return closed
    return ParseResult(result.value, closed.cursor)


def parens[T](cursor: Cursor, inner: Parser[T]) -> ParseOutcome[T]:
    """( inner )"""
    return between(cursor, "(", ")", inner)


def brackets[T](cursor: Cursor, inner: Parser[T]) -> ParseOutcome[T]:
    """[ inner ]"""
    return between(cursor, "[", "]", inner)


def braces[T](cursor: Cursor, inner: Parser[T]) -> ParseOutcome[T]:
    """{ inner }"""
    return between(cursor, "{", "}", inner)


def quoted[T](cursor: Cursor, inner: Parser[T]) -> ParseOutcome[T]:
    """Double-quote delimited content."""
    return between(cursor, '"', '"', inner)


def comma_separated[T](cursor: Cursor, element: Parser[T]) -> ParseOutcome[tuple[T, ...]]:
    """Parse zero or more elements separated by WS* "," WS*.

    An empty sequence is valid. A trailing comma is not: once a separator
    has been consumed the next element is required.

    Args:
        cursor: Current position in source
        element: Parser for one element

    Returns:
        ParseResult with the elements in input order, or the first
        committed element failure
    """
    first = element(cursor)
    if isinstance(first, ParseError):
        if first.committed(cursor):
            return first
        return ParseResult((), cursor)

    items = [first.value]
    cursor = first.cursor

    while True:
        after_comma = skip_padded(cursor, ",")
        if after_comma is None:
            break
        item = element(after_comma)
        if isinstance(item, ParseError):
            return item
        items.append(item.value)
        cursor = item.cursor

    return ParseResult(tuple(items), cursor)


def tagged_literal[T](cursor: Cursor, tag: str, payload: Parser[T]) -> ParseOutcome[T]:
    """Parse TAG("payload") with no whitespace anywhere.

    The tag text is matched atomically: input holding only part of the tag
    (TIME where TIMESTAMP is wanted) consumes nothing, so the next
    alternative may still run. Tags that prefix one another must be tried
    longest first.
    """
    if not cursor.starts_with(tag):
        return fail(cursor, ErrorTemplate.expected_token(tag, cursor.peek()))
    return parens(cursor.advance(len(tag)), lambda inner: quoted(inner, payload))
