"""EJSONParser - recursive-descent parser for extended JSON.

Decodes a textual EJSON document into a tree of typed values: null,
booleans, arbitrary-precision decimals, unbounded integers, strings,
UTC timestamps, times of day, calendar dates, opaque intervals and object
ids, arrays, and order-preserving maps that tolerate duplicate keys.

Public API:
    parse - Parse an EJSON document to a Value tree
    EJSONParser - Document parser with configurable size and depth limits
    Value - Node of the parsed tree
    to_python - Flatten a Value tree into plain Python objects

Exceptions:
    EJSONError - Base exception class
    EJSONSyntaxError - Parse errors

Submodules:
    ejsonparser.syntax.layer - One-layer node types (NullLiteral, MapLiteral, etc.)
    ejsonparser.syntax.parser - Grammar parsers and the one-layer dispatcher
    ejsonparser.diagnostics - Diagnostic codes, templates and formatting
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import EJSONError, EJSONSyntaxError
from .syntax import EJSONParser, Value, parse, to_python

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("ejsonparser")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "EJSONError",
    "EJSONParser",
    "EJSONSyntaxError",
    "Value",
    "__version__",
    "parse",
    "to_python",
]
