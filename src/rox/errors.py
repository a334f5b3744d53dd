"""
Rox Error Hierarchy
===================

This module defines the exception hierarchy for the rox scanner.
All exceptions inherit from RoxError, allowing callers to catch every
rox-related error with a single except clause if desired.

Exception Hierarchy
-------------------
RoxError (base)
├── ScanError - lexical error, fatal to the current scan
│   ├── UnexpectedCharacterError - character matched no token rule
│   └── UnterminatedStringError - input ended inside a string literal
└── LiteralParseError - lexeme is not a literal (handled by the scanner)

Error messages follow this format:
    Error reading code at line <line>, column <column>: <message>
"""

from dataclasses import dataclass


# =============================================================================
# Base Exception Class
# =============================================================================

class RoxError(Exception):
    """
    Base exception for all rox errors.

        try:
            tokens = scan(source)
        except RoxError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Position Tracking
# =============================================================================

@dataclass(frozen=True, order=True)
class Position:
    """
    A (line, column) pair in the scanned source.

    Both counters start at 0. Instances compare lexicographically, so
    positions of successive tokens can be checked with ``<=``.

    Attributes:
        line: Line number (0-indexed)
        column: Column number (0-indexed, counted after the character)
    """
    line: int = 0
    column: int = 0

    def __str__(self) -> str:
        """Format as '(line, column)' for token display."""
        return f"({self.line}, {self.column})"


# =============================================================================
# Scanner Exceptions
# =============================================================================

class ScanError(RoxError):
    """
    Base exception for lexical errors.

    A scan error ends the scan: the scanner never recovers past the
    first one, and callers collecting tokens discard the partial result.

    Attributes:
        position: Where the scanner was when the error was detected
        text: The offending source text
        message: The error description
    """

    def __init__(self, position: Position, text: str, message: str):
        self.position = position
        self.text = text
        self.message = message
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error for display.

        Example output:
            Error reading code at line 3, column 7: Unexpected character: "@"
        """
        return (
            f"Error reading code at line {self.position.line}, "
            f"column {self.position.column}: {self.message}"
        )


class UnexpectedCharacterError(ScanError):
    """
    A character that cannot start any token.

    Examples:
        - ``@`` or ``#`` anywhere outside a string or comment
        - ``&`` (Lox spells logical and as ``and``)
    """

    def __init__(self, position: Position, text: str):
        super().__init__(
            position,
            text,
            f"Unexpected character: {quote(text)}",
        )


class UnterminatedStringError(ScanError):
    """
    End of input reached before the closing quote of a string literal.

    Example:
        var s = "hello    // no closing quote before end of input
    """

    def __init__(self, position: Position, text: str):
        super().__init__(
            position,
            text,
            f"Unterminated string: {quote(text)}",
        )


# =============================================================================
# Literal Parsing Exception
# =============================================================================

class LiteralParseError(RoxError):
    """
    A lexeme that is not a boolean, number, or string literal.

    Raised by the literal parser. The scanner treats it as "no literal
    attached" and carries on, so it never escapes a scan.
    """

    def __init__(self, text: str, message: str):
        self.text = text
        self.message = message
        super().__init__(f"Could not parse literal {text}: {message}")


# =============================================================================
# Helpers
# =============================================================================

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def quote(text: str) -> str:
    """Double-quote text for display, escaping quotes and control characters."""
    return '"' + "".join(_ESCAPES.get(ch, ch) for ch in text) + '"'
