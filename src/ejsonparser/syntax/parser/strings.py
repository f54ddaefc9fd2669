"""String literal parsing.

Grammar:
    string ::= '"' ( '\\"' | [^"] )* '"'

The only escape sequence is \\" (yielding "). Every other character,
including a lone backslash, is literal.
"""

from ejsonparser.syntax.cursor import Cursor, ParseOutcome, ParseResult
from ejsonparser.syntax.parser.combinators import quoted

__all__ = ["parse_quoted_content", "parse_raw_content", "parse_string"]

_ESCAPED_QUOTE = '\\"'


def parse_quoted_content(cursor: Cursor) -> ParseResult[str]:
    """Parse string content up to (not including) the next unescaped quote.

    Zero or more characters; never fails. The two-character escape \\" is
    tried before the single-character case.

    Examples:
        'a\\"b"' -> 'a"b' (cursor at the final quote)
        'C:\\dir"' -> 'C:\\dir'
    """
    chars: list[str] = []
    while not cursor.is_eof:
        if cursor.starts_with(_ESCAPED_QUOTE):
            chars.append('"')
            cursor = cursor.advance(len(_ESCAPED_QUOTE))
        elif cursor.current == '"':
            break
        else:
            chars.append(cursor.current)
            cursor = cursor.advance()
    return ParseResult("".join(chars), cursor)


def parse_raw_content(cursor: Cursor) -> ParseResult[str]:
    """Parse opaque payload content: [^"]* with no escapes.

    Used for INTERVAL and OID payloads, which carry no internal structure.
    """
    start = cursor
    while not cursor.is_eof and cursor.current != '"':
        cursor = cursor.advance()
    return ParseResult(start.slice_to(cursor.pos), cursor)


def parse_string(cursor: Cursor) -> ParseOutcome[str]:
    """Parse string literal: "text"

    Examples:
        '"hello"' -> 'hello'
        '"a\\"b"' -> 'a"b'
        '"unterminated' -> ParseError (expected '"' at end of input)
    """
    return quoted(cursor, parse_quoted_content)
