"""
Token cursor - forward-only position over a token list.

The cursor never rewinds: lookahead() either consumes every token it matched
or leaves the position untouched.
"""

from typing import List

from ..errors import (
    ErrorReporter, ExpectedInteger, ExpectedOperator, UnexpectedEndOfInput,
)
from ..lexer import Token, TokenKind


class Cursor:
    """Current read position within a token sequence."""

    def __init__(self, tokens: List[Token], reporter: ErrorReporter = None):
        if not tokens or tokens[-1].kind != TokenKind.EOF:
            raise ValueError("token list must end with an EOF token")
        self.tokens = tokens
        self.pos = 0
        self.reporter = reporter or ErrorReporter()

    @property
    def current(self) -> Token:
        return self.tokens[self.pos]

    def _token_at(self, offset: int) -> Token:
        """Token at current + offset, clamped to the EOF sentinel."""
        return self.tokens[min(self.pos + offset, len(self.tokens) - 1)]

    def at_end(self) -> bool:
        return self.current.kind == TokenKind.EOF

    def at_end_within(self, k: int) -> bool:
        """True if EOF is among the k tokens following the current one."""
        return any(self._token_at(i).kind == TokenKind.EOF for i in range(1, k + 1))

    def is_operator(self) -> bool:
        return self.current.kind == TokenKind.PUNCT

    def is_integer(self) -> bool:
        return self.current.kind == TokenKind.INTEGER

    def is_open_paren(self) -> bool:
        return self.is_operator() and self.current.text == '('

    def is_close_paren(self) -> bool:
        return self.is_operator() and self.current.text == ')'

    def advance(self) -> Token:
        """Consume and return current token."""
        token = self.current
        if token.kind == TokenKind.EOF:
            self.reporter.error_at(token, "Unexpected end of input", UnexpectedEndOfInput)
        self.pos += 1
        return token

    def eat_operator(self) -> Token:
        if self.at_end():
            self.reporter.error_at(self.current, "Unexpected end of input", UnexpectedEndOfInput)
        if not self.is_operator():
            self.reporter.error_at(self.current, "Expect an operator", ExpectedOperator)
        return self.advance()

    def eat_integer(self) -> Token:
        if self.at_end():
            self.reporter.error_at(self.current, "Unexpected end of input", UnexpectedEndOfInput)
        if not self.is_integer():
            self.reporter.error_at(self.current, "Expect an integer", ExpectedInteger)
        return self.advance()

    def lookahead(self, k: int, pattern: str) -> bool:
        """
        Match the concatenated text of the next k tokens against pattern.

        On an exact match that is not followed by EOF within k tokens, the
        k tokens are consumed and True is returned. Otherwise the cursor is
        left where it was.
        """
        if k < 1:
            self.reporter.report(f"lookahead width must be positive, got {k}")

        window = self.tokens[self.pos:self.pos + k]
        if len(window) < k or any(t.kind == TokenKind.EOF for t in window):
            return False

        text = ''.join(t.text for t in window)
        if text != pattern or self.at_end_within(k):
            return False

        self.pos += k
        return True

    def remaining(self) -> List[Token]:
        """Unconsumed tokens, excluding the EOF sentinel."""
        return self.tokens[self.pos:-1]

    def __repr__(self):
        return f"Cursor({self.pos}, {self.current!r})"
