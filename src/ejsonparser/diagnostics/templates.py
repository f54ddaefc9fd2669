"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


def _describe(found: str | None) -> str:
    """Describe the offending character (or end of input) for messages."""
    if found is None:
        return "end of input"
    return repr(found)


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Cursor read past the end of input.

        Args:
            position: Character offset where EOF was hit

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            hint="The document ends in the middle of a value",
        )

    @staticmethod
    def expected_token(expected: str, found: str | None) -> Diagnostic:
        """A specific token was required but something else was found.

        Args:
            expected: Human-readable description of the required token
            found: Character found instead (None at end of input)

        Returns:
            Diagnostic for EXPECTED_TOKEN (UNEXPECTED_EOF at end of input)
        """
        msg = f"Expected {expected} but found {_describe(found)}"
        code = (
            DiagnosticCode.UNEXPECTED_EOF if found is None else DiagnosticCode.EXPECTED_TOKEN
        )
        return Diagnostic(code=code, message=msg, expected=(expected,))

    @staticmethod
    def expected_one_of(alternatives: tuple[str, ...], found: str | None) -> Diagnostic:
        """No alternative of a choice matched.

        Args:
            alternatives: What every tried alternative expected, in order
            found: Character at the failure position (None at end of input)

        Returns:
            Diagnostic for EXPECTED_TOKEN (UNEXPECTED_EOF at end of input)
        """
        if len(alternatives) == 1:
            msg = f"Expected {alternatives[0]} but found {_describe(found)}"
        else:
            msg = f"Expected one of {', '.join(alternatives)} but found {_describe(found)}"
        code = (
            DiagnosticCode.UNEXPECTED_EOF if found is None else DiagnosticCode.EXPECTED_TOKEN
        )
        return Diagnostic(code=code, message=msg, expected=alternatives)

    @staticmethod
    def invalid_decimal(text: str) -> Diagnostic:
        """Plain decimal scan produced a run that is not a decimal.

        Args:
            text: The scanned run of digits, '-' and '.'

        Returns:
            Diagnostic for INVALID_DECIMAL
        """
        msg = f"Invalid decimal literal '{text}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_DECIMAL,
            message=msg,
            hint="Plain decimals look like 12.5 or -0.25",
            expected=("decimal",),
        )

    @staticmethod
    def decimal_exponent_out_of_range(exponent: int) -> Diagnostic:
        """Scientific exponent cannot be represented.

        Args:
            exponent: The parsed exponent

        Returns:
            Diagnostic for INVALID_DECIMAL
        """
        msg = f"Decimal exponent {exponent} is out of range"
        return Diagnostic(code=DiagnosticCode.INVALID_DECIMAL, message=msg)

    @staticmethod
    def invalid_date(year: int, month: int, day: int, reason: str) -> Diagnostic:
        """Date fields do not denote a day on the calendar.

        Args:
            year: Parsed year
            month: Parsed month
            day: Parsed day
            reason: Why the combination is impossible

        Returns:
            Diagnostic for INVALID_DATE
        """
        msg = f"Invalid date: year={year}, month={month}, day={day} ({reason})"
        return Diagnostic(
            code=DiagnosticCode.INVALID_DATE,
            message=msg,
            hint="Check the month length and leap-year rules",
        )

    @staticmethod
    def invalid_time(hour: int, minute: int, second: int, reason: str) -> Diagnostic:
        """Time fields do not denote a time of day.

        Args:
            hour: Parsed hour
            minute: Parsed minute
            second: Parsed second
            reason: Why the combination is impossible

        Returns:
            Diagnostic for INVALID_TIME
        """
        msg = f"Invalid time: hour={hour}, minute={minute}, second={second} ({reason})"
        return Diagnostic(
            code=DiagnosticCode.INVALID_TIME,
            message=msg,
            hint="Hours run 0-23, minutes and seconds 0-59",
        )

    @staticmethod
    def trailing_input(found: str) -> Diagnostic:
        """Input remains after the top-level value.

        Args:
            found: First unconsumed character

        Returns:
            Diagnostic for TRAILING_INPUT
        """
        msg = f"Unexpected {_describe(found)} after value"
        return Diagnostic(
            code=DiagnosticCode.TRAILING_INPUT,
            message=msg,
            hint="A document holds exactly one top-level value",
            expected=("end of input",),
        )

    @staticmethod
    def source_too_large(size: int, limit: int) -> Diagnostic:
        """Source exceeds the configured size limit.

        Args:
            size: Source size in characters
            limit: Configured maximum

        Returns:
            Diagnostic for SOURCE_TOO_LARGE
        """
        msg = f"Source size {size} exceeds limit of {limit} characters"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=msg,
            hint="Raise max_source_size or pass 0 to disable the limit",
        )

    @staticmethod
    def nesting_depth_exceeded(max_depth: int) -> Diagnostic:
        """Array/map nesting exceeds the configured depth.

        Args:
            max_depth: Configured maximum depth

        Returns:
            Diagnostic for NESTING_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.NESTING_DEPTH_EXCEEDED,
            message=msg,
            hint="Flatten the document or raise max_nesting_depth",
        )
