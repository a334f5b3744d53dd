"""
Character Source and Position Tracking
======================================

The two leaf components the scanner is built on:

- CharSource: a single-pass cursor over the source text with
  non-destructive lookahead.
- PositionTracker: the (line, column) counter, updated once for every
  character the scanner consumes.
"""

from rox.errors import Position


# =============================================================================
# Character Source
# =============================================================================

class CharSource:
    """
    Peekable cursor over the characters of a source string.

    The end of input is signalled by the empty string, so callers can
    test membership (``source.peek() in DIGITS``) without a None check.

    Usage:
        chars = CharSource("1.5")
        chars.advance()    # "1"
        chars.peek()       # "."
        chars.peek(1)      # "5"
    """

    def __init__(self, text: str):
        self.text = text
        self._pos = 0

    def at_end(self) -> bool:
        """Check if every character has been consumed."""
        return self._pos >= len(self.text)

    def peek(self, offset: int = 0) -> str:
        """
        Look at the character at current position + offset without advancing.

        Returns empty string if past end of source.
        """
        pos = self._pos + offset
        if pos >= len(self.text):
            return ""
        return self.text[pos]

    def advance(self) -> str:
        """Consume and return the next character, or "" at end of source."""
        if self.at_end():
            return ""
        char = self.text[self._pos]
        self._pos += 1
        return char

    @property
    def consumed(self) -> int:
        """Number of characters consumed so far."""
        return self._pos


# =============================================================================
# Position Tracker
# =============================================================================

class PositionTracker:
    """Tracks the (line, column) of the scanner, both counting from 0."""

    def __init__(self) -> None:
        self._line = 0
        self._column = 0

    def forward(self) -> None:
        """Move one column to the right."""
        self._column += 1

    def down(self) -> None:
        """Move to the start of the next line."""
        self._line += 1
        self._column = 0

    def track(self, char: str) -> None:
        """Update the position for one consumed character."""
        if char == "\n":
            self.down()
        else:
            self.forward()

    @property
    def position(self) -> Position:
        return Position(self._line, self._column)
