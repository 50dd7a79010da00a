"""
Expression Lexer - Tokenizes arithmetic source text into tokens.

Handles:
- Decimal integer literals
- Punctuators: + - * / ( )
- Whitespace (skipped, but tracked for line/column positions)
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional, List

from ..errors import ErrorReporter, LexError


PUNCTUATORS = '+-*/()'
# Python 3.11+ refuses longer decimal conversions by default
MAX_INTEGER_DIGITS = 4300
WHITESPACE = ' \t\n\r\f'


class TokenKind(Enum):
    """Token kinds."""
    INTEGER = auto()     # 123
    PUNCT = auto()       # + - * / ( )
    EOF = auto()         # end-of-input sentinel


@dataclass(frozen=True)
class Token:
    """Represents a single token."""
    kind: TokenKind
    text: str
    value: Optional[int]
    offset: int
    line: int
    column: int

    def __repr__(self):
        return f"Token({self.kind.name}, {self.text!r}, {self.line}:{self.column})"


class Lexer:
    """Tokenizes expression source text."""

    def __init__(self, source: str, filename: str = "<input>"):
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []
        self.reporter = ErrorReporter(source, filename)

    def error(self, message: str):
        """Raise a lexer error at the current position."""
        self.reporter.error_at_position(self.line, self.column, self.pos, message, LexError)

    def peek(self, offset: int = 0) -> Optional[str]:
        """Peek at character at current position + offset."""
        pos = self.pos + offset
        if pos < len(self.source):
            return self.source[pos]
        return None

    def advance(self) -> Optional[str]:
        """Consume and return current character."""
        if self.pos >= len(self.source):
            return None

        ch = self.source[self.pos]
        self.pos += 1

        if ch == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        return ch

    def skip_whitespace(self):
        """Skip whitespace characters."""
        while self.peek() and self.peek() in WHITESPACE:
            self.advance()

    def read_number(self) -> str:
        """Read a run of decimal digits."""
        chars = []
        while self.peek() and self.peek() in '0123456789':
            chars.append(self.advance())
        return ''.join(chars)

    def tokenize(self) -> List[Token]:
        """Tokenize the entire source text."""
        while self.pos < len(self.source):
            self.skip_whitespace()

            if self.pos >= len(self.source):
                break

            ch = self.peek()
            start, line, col = self.pos, self.line, self.column

            if ch in '0123456789':
                text = self.read_number()
                try:
                    value = int(text)
                except ValueError:
                    value = None
                if value is None or len(text) > MAX_INTEGER_DIGITS:
                    self.reporter.error_at_position(
                        line, col, start,
                        f"Integer literal too long ({len(text)} digits, limit {MAX_INTEGER_DIGITS})",
                        LexError)
                self.tokens.append(Token(TokenKind.INTEGER, text, value, start, line, col))

            elif ch in PUNCTUATORS:
                self.advance()
                self.tokens.append(Token(TokenKind.PUNCT, ch, None, start, line, col))

            else:
                self.error(f"Invalid token: {ch!r}")

        # Add EOF token
        self.tokens.append(Token(TokenKind.EOF, '', None, self.pos, self.line, self.column))
        return self.tokens


def tokenize(source: str, filename: str = "<input>") -> List[Token]:
    """Convenience function to tokenize expression source text."""
    lexer = Lexer(source, filename)
    return lexer.tokenize()
