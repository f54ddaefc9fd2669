"""Immutable cursor infrastructure for type-safe parsing.

Implements the immutable cursor pattern for zero-`None` parsing.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Line:column computed on-demand (O(n) only for errors)
    - Parsers return ParseResult on success and ParseError on failure;
      nothing in the grammar layer raises

Backtracking:
    A ParseError positioned past the cursor an alternative started from has
    consumed (committed) input. Only uncommitted failures let a choice move
    on to its next alternative; see combinators.attempt() for explicit
    rollback.

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
    - F# FParsec
"""

from collections.abc import Callable
from dataclasses import dataclass, field

from ejsonparser.constants import WHITESPACE
from ejsonparser.diagnostics import Diagnostic, DiagnosticCode, ErrorTemplate

__all__ = ["Cursor", "ParseError", "ParseOutcome", "ParseResult", "Parser", "fail"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("null", 0)
        >>> cursor.current
        'n'
        >>> new_cursor = cursor.advance()
        >>> new_cursor.current
        'u'
        >>> cursor.current  # Original unchanged (immutability)
        'n'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Returns:
            Current character at position

        Raises:
            EOFError: If at end of input

        Note:
            Check is_eof first, or use peek() for lookahead that may pass EOF.
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions.

        Args:
            count: Number of positions to advance (default: 1)

        Returns:
            New Cursor instance at new position (original unchanged)
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos.

        Store the start cursor before scanning, then slice:

            >>> cursor = Cursor("12.5,", 0)
            >>> start_cursor = cursor
            >>> while not cursor.is_eof and cursor.current != ",":
            ...     cursor = cursor.advance()
            >>> start_cursor.slice_to(cursor.pos)
            '12.5'
        """
        return self.source[self.pos : end_pos]

    def slice_ahead(self, n: int) -> str:
        """Get next n characters without advancing cursor.

        May return fewer characters if near EOF.

        Example:
            >>> Cursor("TIMESTAMP", 0).slice_ahead(4)
            'TIME'
        """
        return self.source[self.pos : self.pos + n]

    def starts_with(self, text: str) -> bool:
        """Check whether the remaining input begins with text."""
        return self.source.startswith(text, self.pos)

    def skip_whitespace(self) -> "Cursor":
        """Skip inter-token whitespace (space, tab, LF, CR).

        Example:
            >>> Cursor("  \\t\\n  ,", 0).skip_whitespace().pos
            6
        """
        c = self
        while not c.is_eof and c.current in WHITESPACE:
            c = c.advance()
        return c

    def expect(self, char: str) -> "Cursor | None":
        """Consume character if it matches expected, return None otherwise.

        Example:
            >>> Cursor("[]", 0).expect("[").pos
            1
            >>> Cursor("[]", 0).expect("{") is None
            True
        """
        if not self.is_eof and self.current == char:
            return self.advance()
        return None

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Performance:
            O(n) where n = current position.
            Only call for error reporting, not during normal parsing.

        Example:
            >>> Cursor("[1,\\n 2]", 5).compute_line_col()
            (2, 2)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Type Parameters:
        T: The type of the parsed value

    Pattern:
        Every parser has signature:
            def parse_foo(cursor: Cursor) -> ParseResult[Foo] | ParseError:
                ...
                return ParseResult(parsed_value, new_cursor)
    """

    value: T
    cursor: Cursor


@dataclass(frozen=True, slots=True)
class ParseError:
    """Parse failure with location and context.

    Design:
        - Stores cursor at the failure point (for line:column and for
          deciding whether input was committed)
        - User-friendly message
        - Expected tokens tuple (immutable for better errors)
        - Diagnostic code so the driver can raise a structured error

    Example:
        >>> error = ParseError("Expected ']'", Cursor("[1,2", 4), expected=("']'",))
        >>> error.format_error()
        "1:5: Expected ']' (expected: ']')"
    """

    message: str
    cursor: Cursor
    expected: tuple[str, ...] = field(default_factory=tuple)
    code: DiagnosticCode = DiagnosticCode.EXPECTED_TOKEN

    def committed(self, start: Cursor) -> bool:
        """True if the failing parser consumed input after start."""
        return self.cursor.pos > start.pos

    def at(self, cursor: Cursor) -> "ParseError":
        """Return the same failure relocated to cursor (used for rollback)."""
        return ParseError(self.message, cursor, self.expected, self.code)

    def to_diagnostic(self) -> Diagnostic:
        """Convert to a Diagnostic; the span is attached by the driver."""
        return Diagnostic(code=self.code, message=self.message, expected=self.expected)

    def format_error(self) -> str:
        """Format error with line:column.

        Example:
            >>> ParseError("Expected ':'", Cursor("{1\\n2}", 3)).format_error()
            "2:1: Expected ':'"
        """
        line, col = self.cursor.compute_line_col()
        error_msg = f"{line}:{col}: {self.message}"

        if self.expected:
            expected_str = ", ".join(self.expected)
            error_msg += f" (expected: {expected_str})"

        return error_msg

    def format_with_context(self, context_lines: int = 2) -> str:
        """Format error with source context and a caret under the failure.

        Args:
            context_lines: Number of lines to show before/after error

        Returns:
            Multi-line formatted error with context
        """
        line, col = self.cursor.compute_line_col()
        lines = self.cursor.source.split("\n")

        result_lines = [self.format_error(), ""]

        start_line = max(1, line - context_lines)
        end_line = min(len(lines), line + context_lines)

        for i in range(start_line, end_line + 1):
            line_num_str = f"{i:4} | "
            result_lines.append(line_num_str + lines[i - 1])

            if i == line:
                pointer = " " * (len(line_num_str) + col - 1) + "^"
                result_lines.append(pointer)

        return "\n".join(result_lines)


type ParseOutcome[T] = ParseResult[T] | ParseError
"""Either a successful parse or a failure; parsers never return None."""

type Parser[T] = Callable[[Cursor], ParseOutcome[T]]
"""A parser: pure function from cursor to outcome."""


def fail(cursor: Cursor, diagnostic: Diagnostic) -> ParseError:
    """Build a ParseError at cursor from an ErrorTemplate diagnostic."""
    return ParseError(diagnostic.message, cursor, diagnostic.expected, diagnostic.code)
