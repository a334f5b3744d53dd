"""
Rox - A Scanner for the Lox Language
====================================

This package implements the lexical-analysis front end of a Lox
interpreter: it turns source text into an ordered stream of tokens,
each carrying its lexeme, an optional literal value and a position.

Main Components
---------------
- **scanner**: the streaming scanner (Scanner, scan, scan_results)
- **token**: token types, keyword table and the Token record
- **literal**: the literal parser (booleans, numbers, strings)
- **source**: character cursor and position tracker
- **cli**: the ``rox`` command (interactive prompt or script file)

Quick Start
-----------
    >>> from rox import scan
    >>> for token in scan("print 1 + 2;"):
    ...     print(token)

Or use the command-line tool:
    $ rox script.lox
    $ rox              # interactive prompt
"""

__version__ = "0.1.0"
__author__ = "Rox Contributors"

# =============================================================================
# Public API Exports
# =============================================================================

from rox.errors import (
    RoxError,
    Position,
    ScanError,
    UnexpectedCharacterError,
    UnterminatedStringError,
    LiteralParseError,
)
from rox.literal import Literal, LiteralKind, parse_literal
from rox.token import KEYWORDS, Token, TokenType
from rox.scanner import Scanner, scan, scan_results

__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Scanner
    "Scanner",
    "scan",
    "scan_results",
    # Tokens
    "Token",
    "TokenType",
    "KEYWORDS",
    # Literals
    "Literal",
    "LiteralKind",
    "parse_literal",
    # Exception hierarchy
    "RoxError",
    "Position",
    "ScanError",
    "UnexpectedCharacterError",
    "UnterminatedStringError",
    "LiteralParseError",
]
