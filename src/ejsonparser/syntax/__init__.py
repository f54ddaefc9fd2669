"""EJSON syntax package.

Provides the cursor, the one-layer node types, the default Value tree and
the parser. Grammar parsers live in ejsonparser.syntax.parser.

Python 3.13+.
"""

from .cursor import Cursor, ParseError, ParseResult, Parser
from .layer import (
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
from .dates import ProlepticDate, ProlepticTimestamp
from .parser import EJSONParser, parse_layer
from .tree import PythonValue, Span, Value, to_python

__all__ = [
    "ArrayLiteral",
    "BooleanLiteral",
    "Cursor",
    "DateLiteral",
    "DecimalLiteral",
    "EJSONParser",
    "IntegerLiteral",
    "IntervalLiteral",
    "Layer",
    "MapLiteral",
    "NullLiteral",
    "ObjectIdLiteral",
    "ParseError",
    "ParseResult",
    "Parser",
    "ProlepticDate",
    "ProlepticTimestamp",
    "PythonValue",
    "Span",
    "StringLiteral",
    "TimeLiteral",
    "TimestampLiteral",
    "Value",
    "parse",
    "parse_layer",
    "to_python",
]


_default_parser = EJSONParser()


def parse(source: str) -> Value:
    """Parse an EJSON document into a Value tree.

    Convenience function for EJSONParser.parse() on a shared parser with
    default limits. EJSONParser keeps no per-parse state.

    Args:
        source: EJSON document text

    Returns:
        Root Value of the document

    Raises:
        EJSONSyntaxError: If the document is malformed

    Example:
        >>> from ejsonparser.syntax import parse
        >>> value = parse('{"a": DATE("2021-01-02")}')
        >>> value.layer.keys()[0].layer.value
        'a'
    """
    return _default_parser.parse(source)
