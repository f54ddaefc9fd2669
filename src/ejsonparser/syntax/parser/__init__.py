"""EJSON parser module.

This module provides the EJSONParser document driver and the grammar
parsers it is built from, organized into focused submodules.

Module Organization:
- core.py: EJSONParser document driver (fixpoint, size and depth limits)
- combinators.py: attempt, choice, delimiters, comma lists, tagged literals
- primitives.py: Digits, fixed-width numerals, naturals, signs
- numbers.py: Integer and decimal literals
- strings.py: Quoted string content
- temporal.py: Date, time, timestamp and opaque tagged literals
- whitespace.py: Inter-token whitespace
- rules.py: null, boolean, array, map and the one-layer dispatcher

Public API:
    EJSONParser: Document driver producing Value trees
    parse_layer: One-layer dispatcher for custom recursion drivers
"""

from ejsonparser.syntax.parser.core import EJSONParser
from ejsonparser.syntax.parser.numbers import parse_decimal, parse_integer
from ejsonparser.syntax.parser.rules import parse_array, parse_boolean, parse_layer, parse_map, parse_null
from ejsonparser.syntax.parser.strings import parse_string
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

__all__ = [
    "EJSONParser",
    "parse_array",
    "parse_boolean",
    "parse_date",
    "parse_date_literal",
    "parse_decimal",
    "parse_integer",
    "parse_interval_literal",
    "parse_layer",
    "parse_map",
    "parse_null",
    "parse_object_id_literal",
    "parse_string",
    "parse_time",
    "parse_time_literal",
    "parse_timestamp",
    "parse_timestamp_literal",
]
