"""
Lox Scanner (Lexer)
===================

This module implements the scanner for the Lox language. It converts
source text into a stream of tokens, one token per pull, and stops at
the first lexical error.

Scanning Rules
--------------
| First char          | Result                                       |
|---------------------|----------------------------------------------|
| ( ) { } , . - + ; * | single-character token                       |
| ! = < >             | one-character token, or two with a trailing = |
| /                   | Slash, or a // comment skipped to end of line |
| "                   | String, up to the next "                     |
| blank or newline    | skipped (position still advances)            |
| digit               | Number, with an optional .digits fraction    |
| letter or _         | Identifier, or a keyword                     |
| anything else       | UnexpectedCharacterError                     |

Positions
---------
Lines and columns count from 0. A token's position is the scanner
position just after its last character, so the first token of a line
is reported at column 1 or later.

Example Usage
-------------
>>> from rox.scanner import scan
>>> [t.type.value for t in scan("(1 + 2.5)")]
['LeftParen', 'Number', 'Plus', 'Number', 'RightParen']
"""

from typing import Callable, Iterator, Optional
import logging
import string

from rox.errors import (
    LiteralParseError,
    Position,
    ScanError,
    UnexpectedCharacterError,
    UnterminatedStringError,
)
from rox.literal import parse_literal
from rox.source import CharSource, PositionTracker
from rox.token import KEYWORDS, Token, TokenType

# Logger for this module
logger = logging.getLogger(__name__)


# Tokens made of exactly one character
SINGLE_TOKENS: dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# Operators that become a different token when followed by "="
EQUAL_PAIRS: dict[str, tuple[TokenType, TokenType]] = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}

WHITESPACE = " \r\t"


def is_digit(char: str) -> bool:
    return char != "" and char in string.digits


def is_alpha(char: str) -> bool:
    return char.isalpha() or char == "_"


def is_alphanumeric(char: str) -> bool:
    return is_alpha(char) or is_digit(char)


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Tokenizes Lox source code.

    A scanner makes exactly one pass over one source string. Tokens are
    produced lazily; the first lexical error is raised from the
    generator and ends the scan.

    Usage:
        scanner = Scanner(source_text)
        tokens = list(scanner.tokenize())

    Attributes:
        source: The source code being tokenized
    """

    def __init__(self, source: str):
        self.source = source
        self._chars = CharSource(source)
        self._tracker = PositionTracker()

        # Characters of the token being built
        self._current: list[str] = []

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens from the source code.

        Yields:
            Token objects in source order

        Raises:
            UnexpectedCharacterError: If a character starts no token
            UnterminatedStringError: If input ends inside a string
        """
        while not self._chars.at_end():
            token = self._scan_token()
            if token is not None:
                yield token

    # =========================================================================
    # Buffer and Position Handling
    # =========================================================================

    @property
    def position(self) -> Position:
        """Current scanner position."""
        return self._tracker.position

    @property
    def consumed(self) -> int:
        """Number of source characters read so far."""
        return self._chars.consumed

    def _consume(self, char: str) -> None:
        """Append a character to the current lexeme and update the position."""
        self._tracker.track(char)
        self._current.append(char)

    def _match(self, expected: str) -> bool:
        """
        Consume the next character into the lexeme if it matches expected.

        Returns:
            True if matched and consumed, False otherwise
        """
        if self._chars.peek() == expected:
            self._consume(self._chars.advance())
            return True
        return False

    def _consume_while(self, keep_going: Callable[[str], bool]) -> None:
        """Consume characters while keep_going(next char) holds."""
        while not self._chars.at_end() and keep_going(self._chars.peek()):
            self._consume(self._chars.advance())

    def _emit(self, token_type: TokenType) -> Token:
        """
        Build a token from the current lexeme and reset the buffer.

        The literal parser is run on every lexeme; a lexeme that is not
        a literal simply gets no literal attached.
        """
        lexeme = "".join(self._current).strip()
        self._current = []

        try:
            literal = parse_literal(lexeme)
        except LiteralParseError:
            literal = None

        return Token(token_type, lexeme, literal, self._tracker.position)

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_token(self) -> Optional[Token]:
        """
        Dispatch on the next character.

        Returns:
            The next Token, or None if only whitespace or a comment
            was consumed
        """
        char = self._chars.advance()

        if char in SINGLE_TOKENS:
            self._consume(char)
            return self._emit(SINGLE_TOKENS[char])

        if char in EQUAL_PAIRS:
            single, double = EQUAL_PAIRS[char]
            self._consume(char)
            if self._match("="):
                return self._emit(double)
            return self._emit(single)

        if char == "/":
            if self._chars.peek() == "/":
                self._skip_comment(char)
                return None
            self._consume(char)
            return self._emit(TokenType.SLASH)

        if char == '"':
            return self._scan_string(char)

        if char in WHITESPACE or char == "\n":
            self._tracker.track(char)
            return None

        if is_digit(char):
            return self._scan_number(char)

        if is_alpha(char):
            return self._scan_identifier(char)

        # Unknown character, reported at the position before it
        raise UnexpectedCharacterError(self._tracker.position, char)

    def _skip_comment(self, slash: str) -> None:
        """Skip a // comment up to and including the end of the line."""
        self._tracker.track(slash)
        while not self._chars.at_end():
            char = self._chars.advance()
            self._tracker.track(char)
            if char == "\n":
                break

    def _scan_string(self, quote: str) -> Token:
        """
        Scan a double-quoted string literal.

        There are no escape sequences; newlines inside the string are
        part of it and move the position down.
        """
        self._consume(quote)
        self._consume_while(lambda c: c != '"')

        if self._chars.at_end():
            text = "".join(self._current)
            raise UnterminatedStringError(self._tracker.position, text)

        self._consume(self._chars.advance())  # closing "
        return self._emit(TokenType.STRING)

    def _scan_number(self, first: str) -> Token:
        """
        Scan a numeric literal.

        The fraction is only taken when a "." is followed by a digit, so
        "1." scans as Number then Dot, and "1.2.3" as 1.2, Dot, 3.
        """
        self._consume(first)
        self._consume_while(is_digit)

        if self._chars.peek() == "." and is_digit(self._chars.peek(1)):
            self._consume(self._chars.advance())  # .
            self._consume_while(is_digit)

        return self._emit(TokenType.NUMBER)

    def _scan_identifier(self, first: str) -> Token:
        """
        Scan an identifier or keyword.

        Identifiers start with a letter or underscore and continue with
        letters, digits and underscores. Keywords are distinguished by
        checking against the keyword table.
        """
        self._consume(first)
        self._consume_while(is_alphanumeric)

        name = "".join(self._current)
        return self._emit(KEYWORDS.get(name, TokenType.IDENTIFIER))


# =============================================================================
# Entry Points
# =============================================================================

def scan(source: str) -> list[Token]:
    """
    Scan a whole source string.

    Returns:
        Every token in source order

    Raises:
        ScanError: On the first lexical error; no partial result is kept
    """
    try:
        scanner = Scanner(source)
        tokens = list(scanner.tokenize())
    except ScanError as e:
        logger.debug(f"Scan failed: {e}")
        raise
    logger.debug(
        f"Scanned {len(tokens)} tokens from {scanner.consumed} characters, "
        f"ending at {scanner.position}"
    )
    return tokens


def scan_results(source: str) -> Iterator[Token | ScanError]:
    """
    Scan a source string, delivering errors as values.

    Yields tokens in source order. If a lexical error occurs, the error
    is yielded as the final item and the stream ends.
    """
    try:
        yield from Scanner(source).tokenize()
    except ScanError as e:
        logger.debug(f"Scan failed: {e}")
        yield e
