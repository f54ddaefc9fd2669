"""EJSON exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic for rich error information.
The grammar layer never raises; these exceptions are raised by the
document driver (EJSONParser) when a parse cannot complete.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class EJSONError(Exception):
    """Base exception for all EJSON errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize EJSONError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def code(self) -> DiagnosticCode | None:
        """Diagnostic code, or None for plain-message errors."""
        return self.diagnostic.code if self.diagnostic is not None else None


class EJSONSyntaxError(EJSONError):
    """EJSON syntax or value error during parsing.

    No error recovery: the first unrecovered failure aborts the parse.
    """
