"""
Error types and source-position reporting for vcc.

All user-input errors are ParseError subclasses (which are also SyntaxErrors,
so callers that catch SyntaxError keep working). Each one knows where in the
source it happened and can render the offending line with a caret.
"""

from typing import Optional, Type


class VccError(Exception):
    """Base exception for all vcc errors."""
    pass


class ParseError(VccError, SyntaxError):
    """A user-input error at a known source position."""

    def __init__(self, message: str, filename: str = "<input>", line: int = 0,
                 column: int = 0, offset: int = 0, source_line: Optional[str] = None):
        super().__init__(f"{filename}:{line}:{column}: {message}")
        self.message = message
        self.filename = filename
        self.line = line
        self.column = column
        # SyntaxError reserves .offset for the column
        self.source_offset = offset
        self.source_line = source_line

    def __str__(self):
        return f"{self.filename}:{self.line}:{self.column}: {self.message}"

    def pretty(self) -> str:
        """Render the error with the source line and a caret under the column."""
        if self.source_line is None:
            return str(self)
        caret = ' ' * max(self.column - 1, 0) + '^'
        return f"{self.source_line}\n{caret} {self.message}\n{self}"


class LexError(ParseError):
    """Character that cannot start a token."""
    pass


class ExpectedNumber(ParseError):
    """Atom position holds neither an integer nor an open parenthesis."""
    pass


class ExpectedCloseParen(ParseError):
    """Parenthesized subexpression is not followed by ')'."""
    pass


class ExpectedOperator(ParseError):
    pass


class ExpectedInteger(ParseError):
    pass


class UnexpectedEndOfInput(ParseError):
    """Input was truncated: a token was required but only EOF remained."""
    pass


class TrailingInput(ParseError):
    """Tokens left over after a complete expression."""
    pass


class NestingTooDeep(ParseError):
    """Parentheses nested deeper than the parser allows."""
    pass


class InternalError(VccError):
    """Consistency failure unrelated to user input."""
    pass


class EvaluationError(VccError):
    """Error raised while evaluating an AST."""

    def __init__(self, message: str, line: int = 0, column: int = 0):
        self.message = message
        self.line = line
        self.column = column
        super().__init__(f"{line}:{column}: {message}" if line else message)


class DivisionByZero(EvaluationError):
    pass


class ErrorReporter:
    """Raises positioned errors against one source text."""

    def __init__(self, source: Optional[str] = None, filename: str = "<input>"):
        self.source = source
        self.filename = filename

    def source_line(self, line: int) -> Optional[str]:
        """Return the 1-based source line, or None if unknown."""
        if self.source is None or line < 1:
            return None
        lines = self.source.split('\n')
        if line > len(lines):
            return None
        return lines[line - 1]

    def error_at(self, token, message: str, error_class: Type[ParseError] = ParseError):
        """Abort the parse with error_class positioned at token."""
        raise error_class(
            message,
            filename=self.filename,
            line=token.line,
            column=token.column,
            offset=token.offset,
            source_line=self.source_line(token.line),
        )

    def error_at_position(self, line: int, column: int, offset: int, message: str,
                          error_class: Type[ParseError] = ParseError):
        """Abort with error_class at an explicit position (used by the lexer)."""
        raise error_class(
            message,
            filename=self.filename,
            line=line,
            column=column,
            offset=offset,
            source_line=self.source_line(line),
        )

    def report(self, message: str):
        """Abort on an internal consistency failure."""
        raise InternalError(message)
