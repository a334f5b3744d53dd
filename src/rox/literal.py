"""
Literal Parser
==============

Maps a lexeme to the literal value it spells, if any.

The scanner runs this parser on every lexeme it emits, not only on
string and number tokens. As a result the ``true`` and ``false``
keyword tokens also carry a boolean literal.

Accepted Forms
--------------
| Kind    | Example         | Value          |
|---------|-----------------|----------------|
| Boolean | true, false     | True, False    |
| Number  | 12, 2.5, -3, 1. | float          |
| String  | "hi", ""        | text between quotes |

Exponents, hexadecimal, ``inf`` and ``nan`` are not numbers. Strings
have no escape sequences, so the payload is the raw text between the
quotes.
"""

from dataclasses import dataclass
from enum import Enum, auto
import re

from rox.errors import LiteralParseError, quote


# Optional sign, digits, optional fraction. Also accepts "1." and ".5".
NUMBER_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


class LiteralKind(Enum):
    """The three kinds of literal value."""
    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()


@dataclass(frozen=True)
class Literal:
    """
    A parsed literal value.

    Attributes:
        kind: Which of the three literal kinds this is
        value: The payload (str, float or bool, matching kind)
    """
    kind: LiteralKind
    value: str | float | bool

    def __repr__(self) -> str:
        """Format as it appears inside a token, e.g. Number(2.5)."""
        if self.kind is LiteralKind.STRING:
            return f"String({quote(self.value)})"
        if self.kind is LiteralKind.NUMBER:
            return f"Number({format_number(self.value)})"
        return f"Boolean({'true' if self.value else 'false'})"

    def __str__(self) -> str:
        """Format the bare value for display."""
        if self.kind is LiteralKind.STRING:
            return self.value
        if self.kind is LiteralKind.NUMBER:
            if self.value.is_integer():
                return str(int(self.value))
            return repr(self.value)
        return "true" if self.value else "false"

    @classmethod
    def string(cls, value: str) -> "Literal":
        return cls(LiteralKind.STRING, value)

    @classmethod
    def number(cls, value: float) -> "Literal":
        return cls(LiteralKind.NUMBER, float(value))

    @classmethod
    def boolean(cls, value: bool) -> "Literal":
        return cls(LiteralKind.BOOLEAN, value)


def format_number(value: float) -> str:
    """
    Format a float with the shortest round-trip digits.

    Exponents are written without a plus sign or leading zeros
    (1e16, 1e-5), so 1e16 does not display as 1e+16.
    """
    text = repr(value)
    if "e" not in text:
        return text
    mantissa, exponent = text.split("e")
    return f"{mantissa}e{int(exponent)}"


# =============================================================================
# Parsing
# =============================================================================

def parse_literal(text: str) -> Literal:
    """
    Parse a lexeme as a boolean, a number or a string, in that order.

    Args:
        text: The (trimmed) lexeme

    Returns:
        The parsed Literal

    Raises:
        LiteralParseError: If text is none of the three forms
    """
    for parser in (parse_bool, parse_number):
        try:
            return parser(text)
        except LiteralParseError:
            pass
    return parse_string(text)


def parse_bool(text: str) -> Literal:
    """Parse exactly ``true`` or ``false``."""
    if text == "true":
        return Literal.boolean(True)
    if text == "false":
        return Literal.boolean(False)
    raise LiteralParseError(text, "provided string was not `true` or `false`")


def parse_number(text: str) -> Literal:
    """Parse a decimal number with an optional sign and fraction."""
    if not NUMBER_PATTERN.fullmatch(text):
        raise LiteralParseError(text, "invalid float literal")
    return Literal.number(float(text))


def parse_string(text: str) -> Literal:
    """Parse a double-quoted string; the payload is the text between the quotes."""
    if len(text) < 2 or not (text.startswith('"') and text.endswith('"')):
        raise LiteralParseError(text, "Incorrectly formatted string!")
    return Literal.string(text[1:-1])
