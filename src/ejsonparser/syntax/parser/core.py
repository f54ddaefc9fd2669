"""EJSON document driver.

This module provides the EJSONParser class that turns a complete EJSON
document into a :class:`~ejsonparser.syntax.tree.Value` tree.

Architecture:
    The grammar in :mod:`~ejsonparser.syntax.parser.rules` parses one tree
    layer at a time and takes the parser for nested values as a parameter.
    EJSONParser supplies that parameter: a child parser that calls
    parse_layer() with itself, wrapping each layer in a Value. Each call
    runs under a DepthGuard so deeply nested input fails cleanly instead of
    exhausting the interpreter stack.

Errors:
    Grammar failures come back as ParseError values. The driver converts the
    first unrecovered failure into EJSONSyntaxError carrying a Diagnostic
    with line and column. There is no error recovery.

Security:
    Includes configurable input size and nesting depth limits to prevent DoS
    via extremely large or deeply nested documents.
"""

import logging
from dataclasses import replace

from ejsonparser.constants import MAX_DEPTH, MAX_SOURCE_SIZE
from ejsonparser.core.depth_guard import DepthGuard, DepthLimitExceededError, depth_clamp
from ejsonparser.diagnostics import Diagnostic, EJSONSyntaxError, ErrorTemplate, SourceSpan
from ejsonparser.syntax.cursor import Cursor, ParseError, ParseOutcome, ParseResult
from ejsonparser.syntax.parser.rules import parse_layer
from ejsonparser.syntax.parser.whitespace import skip_whitespace
from ejsonparser.syntax.tree import Span, Value

__all__ = ["EJSONParser"]

logger = logging.getLogger(__name__)


def _locate(diagnostic: Diagnostic, cursor: Cursor) -> Diagnostic:
    """Attach a one-character SourceSpan at cursor to diagnostic."""
    line, column = cursor.compute_line_col()
    end = min(cursor.pos + 1, len(cursor.source))
    span = SourceSpan(start=cursor.pos, end=max(end, cursor.pos), line=line, column=column)
    return replace(diagnostic, span=span)


class _TreeBuilder:
    """Per-parse recursion state: the depth guard and the deepest position.

    Not shared between parses, so EJSONParser instances stay reentrant.
    max_depth arrives already clamped by EJSONParser.__init__.
    """

    __slots__ = ("guard", "position")

    def __init__(self, max_depth: int) -> None:
        self.guard = DepthGuard(max_depth=max_depth, clamp=False)
        self.position = 0

    def parse_value(self, cursor: Cursor) -> ParseOutcome[Value]:
        """Parse one nested value: the fixpoint handed to parse_layer()."""
        self.position = cursor.pos
        with self.guard:
            result = parse_layer(cursor, self.parse_value)
        if isinstance(result, ParseError):
            return result
        return ParseResult(Value(result.value, Span(cursor.pos, result.cursor.pos)), result.cursor)


class EJSONParser:
    """EJSON document parser using immutable cursor pattern.

    Design:
    - Immutable cursor prevents infinite loops
    - Grammar returns ParseResult | ParseError; the driver raises
    - Error messages include line:column

    Security:
    - Configurable max_source_size prevents DoS via large inputs
    - Configurable max_nesting_depth prevents stack exhaustion via deeply
      nested arrays and maps

    Attributes:
        max_source_size: Maximum allowed source size in characters (default: 10 MB)
        max_nesting_depth: Maximum allowed array/map nesting depth (default: 64)
    """

    __slots__ = ("_max_nesting_depth", "_max_source_size")

    def __init__(
        self,
        *,
        max_source_size: int | None = None,
        max_nesting_depth: int | None = None,
    ) -> None:
        """Initialize parser with optional size and nesting depth limits.

        Args:
            max_source_size: Maximum source size in characters (default: 10 MB).
                            Set to 0 to disable the size limit.
            max_nesting_depth: Maximum nesting depth (default: 64), clamped
                              against the interpreter recursion limit.
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        self._max_nesting_depth = depth_clamp(
            max_nesting_depth if max_nesting_depth is not None else MAX_DEPTH
        )

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in characters."""
        return self._max_source_size

    @property
    def max_nesting_depth(self) -> int:
        """Maximum allowed nesting depth."""
        return self._max_nesting_depth

    def parse(self, source: str) -> Value:
        """Parse a complete EJSON document.

        Whitespace is allowed before and after the top-level value; anything
        else after it is an error.

        Args:
            source: EJSON document text

        Returns:
            Root :class:`~ejsonparser.syntax.tree.Value` of the document

        Raises:
            EJSONSyntaxError: On the first syntax or value error, on input
                larger than max_source_size, or on nesting deeper than
                max_nesting_depth

        Example:
            >>> parser = EJSONParser()
            >>> parser.parse('[1, 2.5]').kind
            <LayerKind.ARRAY: 'array'>
        """
        if self._max_source_size and len(source) > self._max_source_size:
            logger.warning(
                "Rejected EJSON source of %d characters (limit %d)",
                len(source),
                self._max_source_size,
            )
            raise EJSONSyntaxError(
                ErrorTemplate.source_too_large(len(source), self._max_source_size)
            )

        logger.debug("Parsing EJSON source (%d characters)", len(source))
        builder = _TreeBuilder(self._max_nesting_depth)
        cursor = skip_whitespace(Cursor(source, 0))

        try:
            result = builder.parse_value(cursor)
        except DepthLimitExceededError as e:
            diagnostic = e.diagnostic or ErrorTemplate.nesting_depth_exceeded(
                self._max_nesting_depth
            )
            raise EJSONSyntaxError(
                _locate(diagnostic, Cursor(source, builder.position))
            ) from e

        if isinstance(result, ParseError):
            logger.debug("EJSON parse failed: %s", result.format_error())
            raise EJSONSyntaxError(_locate(result.to_diagnostic(), result.cursor))

        end = skip_whitespace(result.cursor)
        if not end.is_eof:
            raise EJSONSyntaxError(_locate(ErrorTemplate.trailing_input(end.current), end))

        logger.debug("Parsed EJSON %s value (%d characters)", result.value.kind, end.pos)
        return result.value
