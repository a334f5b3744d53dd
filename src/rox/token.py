"""
Tokens
======

Token types, the keyword table, and the immutable token record produced
by the scanner.

Token Categories
----------------
- Single-character punctuators: ( ) { } , . - + ; / *
- One- or two-character operators: ! != = == < <= > >=
- Literals: identifiers, strings, numbers
- Keywords: and class else false for fun if nil or print return
  super this true var while

Display Format
--------------
>>> from rox.scanner import scan
>>> for token in scan('var x = "hi";'):
...     print(token)
<Token type: Var, lexeme: "var", position: (0, 3)>
<Token type: Identifier, lexeme: "x", position: (0, 5)>
<Token type: Equal, lexeme: "=", position: (0, 7)>
<Token type: String, lexeme: "\\"hi\\"", literal: String("hi"), position: (0, 12)>
<Token type: Semicolon, lexeme: ";", position: (0, 13)>
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from rox.errors import Position, quote
from rox.literal import Literal


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """
    Token types for the Lox language.

    Member values are the names shown when a token is displayed.
    Keywords are distinguished from identifiers to simplify parsing.
    """

    # === Single-character Tokens ===
    LEFT_PAREN = "LeftParen"        # (
    RIGHT_PAREN = "RightParen"      # )
    LEFT_BRACE = "LeftBrace"        # {
    RIGHT_BRACE = "RightBrace"      # }
    COMMA = "Comma"                 # ,
    DOT = "Dot"                     # .
    MINUS = "Minus"                 # -
    PLUS = "Plus"                   # +
    SEMICOLON = "Semicolon"         # ;
    SLASH = "Slash"                 # /
    STAR = "Star"                   # *

    # === One or Two Character Tokens ===
    BANG = "Bang"                   # !
    BANG_EQUAL = "BangEqual"        # !=
    EQUAL = "Equal"                 # =
    EQUAL_EQUAL = "EqualEqual"      # ==
    GREATER = "Greater"             # >
    GREATER_EQUAL = "GreaterEqual"  # >=
    LESS = "Less"                   # <
    LESS_EQUAL = "LessEqual"        # <=

    # === Literals ===
    IDENTIFIER = "Identifier"
    STRING = "String"
    NUMBER = "Number"

    # === Keywords ===
    AND = "And"
    CLASS = "Class"
    ELSE = "Else"
    FALSE = "False"
    FOR = "For"
    FUN = "Fun"
    IF = "If"
    NIL = "Nil"
    OR = "Or"
    PRINT = "Print"
    RETURN = "Return"
    SUPER = "Super"
    THIS = "This"
    TRUE = "True"
    VAR = "Var"
    WHILE = "While"


# =============================================================================
# Keyword Mapping
# =============================================================================

# Map keyword strings to their token types
KEYWORDS: dict[str, TokenType] = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token from Lox source code.

    Attributes:
        type: The TokenType classification
        lexeme: The trimmed source text the token was built from
        literal: The parsed literal value, if the lexeme spells one
        position: Scanner position when the token was emitted
    """
    type: TokenType
    lexeme: str
    literal: Optional[Literal]
    position: Position

    def __str__(self) -> str:
        """Format token for display."""
        parts = [f"type: {self.type.value}", f"lexeme: {quote(self.lexeme)}"]
        if self.literal is not None:
            parts.append(f"literal: {self.literal!r}")
        parts.append(f"position: {self.position}")
        return f"<Token {', '.join(parts)}>"

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column

    def is_keyword(self) -> bool:
        """Return True if this token is a reserved word."""
        return self.type in KEYWORDS.values()
