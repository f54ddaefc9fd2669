"""Shared constants for EJSONParser.

This module provides centralized configuration constants used across
the syntax and diagnostics packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for the document driver
- Input limits: DoS prevention via size constraints
- Lexical sets: Characters the grammar treats specially

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Lexical sets
    "ASCII_DIGITS",
    "WHITESPACE",
    "PLAIN_DECIMAL_CHARS",
    "EXPONENT_MARKERS",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum array/map nesting accepted by EJSONParser.
# Each nesting level costs around a dozen Python frames (dispatcher, structural
# combinator, comma list, element), so 64 levels stays inside the
# default recursion limit of 1000.
MAX_DEPTH: int = 64

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (10 MB).
# Prevents DoS attacks via unbounded memory allocation from large documents.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# LEXICAL SETS
# ============================================================================

# ASCII digits only. str.isdigit() accepts Unicode digits like ² which int() rejects.
ASCII_DIGITS: str = "0123456789"

# Inter-token whitespace: space, tab, line feed, carriage return.
WHITESPACE: str = " \t\n\r"

# Characters scanned by the plain decimal form before it is validated wholesale.
PLAIN_DECIMAL_CHARS: str = ASCII_DIGITS + "-."

# Exponent introducers for scientific decimals.
EXPONENT_MARKERS: str = "eE"
