"""
Error types for tokenizing, parsing, and configuring the calculator.
"""

from dataclasses import dataclass


class CalcError(Exception):
    """Base exception for all bracketcalc errors."""

    def __init__(self, message: str, context: "ErrorContext | None" = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.message}\n{self.context.format()}"
        return self.message


class FormatError(CalcError):
    """
    Raised when input text cannot be turned into tokens.

    Examples:
    - Malformed numeric literal (1.2.3)
    - Closing bracket with no open group
    - Opening bracket still open at end of input
    """

    pass


class StructuralError(CalcError):
    """
    Raised when a token sequence does not form an expression.

    Examples:
    - Empty input or empty bracket group
    - Operator missing an operand (1+, *2)
    - Two operands with no operator between them ((1)(2))
    """

    pass


class ConfigError(CalcError):
    """Raised when the configuration file or environment is invalid."""

    pass


@dataclass
class ErrorContext:
    """
    Location of an error within a single input line.

    Attributes:
        source: The line being processed
        column: Column number (0-indexed) of the offending character
    """

    source: str
    column: int

    def format(self) -> str:
        """
        Format the line with a marker under the error column.

        Returns:
            Two lines like "  1 + ) 2" and "      ^"
        """
        line = self.source.rstrip("\n")
        return f"  {line}\n  {' ' * self.column}^"


def make_format_error(message: str, source: str | None = None, column: int | None = None) -> FormatError:
    """
    Helper to create a FormatError with optional context.

    Args:
        message: Error description
        source: Optional input line
        column: Optional column of the offending character

    Returns:
        FormatError with context if location provided
    """
    if source is not None and column is not None:
        return FormatError(message, ErrorContext(source=source, column=column))
    return FormatError(message)


def make_structural_error(
    message: str, source: str | None = None, column: int | None = None
) -> StructuralError:
    """Helper to create a StructuralError with optional context."""
    if source is not None and column is not None:
        return StructuralError(message, ErrorContext(source=source, column=column))
    return StructuralError(message)
