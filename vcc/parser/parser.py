"""
Expression Parser - Builds an Abstract Syntax Tree from tokens.

An LL(k) recursive-descent parser. Each grammar level calls the next-higher
precedence level first, then loops over its own operators:

    S    -> Expr
    Expr -> Term ("+" Term | "-" Term)*
    Term -> Atom ("*" Atom | "/" Atom)*
    Atom -> "(" Expr ")" | integer
"""

from dataclasses import dataclass
from typing import List, Optional

from ..errors import (
    ErrorReporter, ExpectedCloseParen, ExpectedNumber, NestingTooDeep, ParseError,
    TrailingInput, UnexpectedEndOfInput,
)
from ..lexer import Token, tokenize
from .ast_nodes import ASTNode, NodeType, make_binary, make_number
from .cursor import Cursor


# Each nesting level costs three Python frames (atom, term, expr)
MAX_NESTING_DEPTH = 200


@dataclass
class ParseResult:
    """Outcome of a parse: either a tree or the error that stopped it."""
    success: bool
    node: Optional[ASTNode] = None
    error: Optional[ParseError] = None
    node_count: int = 0


class Parser:
    """Parses expression tokens into an Abstract Syntax Tree."""

    def __init__(self, tokens: List[Token], filename: str = "<input>",
                 source: Optional[str] = None, allow_trailing: bool = False,
                 max_depth: int = MAX_NESTING_DEPTH):
        self.tokens = tokens
        self.filename = filename
        self.allow_trailing = allow_trailing  # Leave tokens after the root unconsumed
        self.reporter = ErrorReporter(source, filename)
        self.cursor = Cursor(tokens, self.reporter)
        self.root: Optional[ASTNode] = None
        self.node_count = 0
        self.max_depth = max_depth
        self.depth = 0

    def error(self, message: str, error_class=ParseError):
        """Raise a parser error at the current token."""
        self.reporter.error_at(self.cursor.current, message, error_class)

    def parse(self) -> ASTNode:
        """Parse the whole token sequence and return the root node."""
        self.root = self.add_or_sub()

        if not self.allow_trailing and not self.cursor.at_end():
            token = self.cursor.current
            if token.text in ('+', '-', '*', '/') and self.cursor.at_end_within(1):
                self.error(f"Expression ends after operator '{token.text}'", UnexpectedEndOfInput)
            self.error(f"Unexpected {token.text!r} after expression", TrailingInput)

        return self.root

    def try_parse(self) -> ParseResult:
        """Parse, returning a ParseResult instead of raising on bad input."""
        try:
            node = self.parse()
        except ParseError as e:
            return ParseResult(False, error=e, node_count=self.node_count)
        return ParseResult(True, node=node, node_count=self.node_count)

    def remaining(self) -> List[Token]:
        """Tokens left unconsumed after parse(), excluding EOF."""
        return self.cursor.remaining()

    # AST creation

    def _new_number(self, token: Token) -> ASTNode:
        self.node_count += 1
        return make_number(token.value, token.line, token.column)

    def _new_binary(self, kind: NodeType, op_token: Token, left: ASTNode, right: ASTNode) -> ASTNode:
        self.node_count += 1
        return make_binary(kind, left, right, op_token.line, op_token.column)

    # Grammar levels

    def num_or_bracket(self) -> ASTNode:
        """Parse an atom: an integer or a parenthesized expression."""
        if self.cursor.is_open_paren():
            if self.depth >= self.max_depth:
                self.error(f"Expression nested too deeply (limit {self.max_depth})", NestingTooDeep)
            self.depth += 1
            self.cursor.advance()  # (
            node = self.add_or_sub()
            self.depth -= 1
            if not self.cursor.is_close_paren():
                self.error("Expect )", ExpectedCloseParen)
            self.cursor.advance()  # )
        else:
            if not self.cursor.is_integer():
                self.error("Expect a number", ExpectedNumber)
            node = self._new_number(self.cursor.eat_integer())
        return node

    def mul_or_div(self) -> ASTNode:
        """Parse a term: atoms joined by * and /, folded left."""
        node = self.num_or_bracket()
        while not self.cursor.at_end():
            op_token = self.cursor.current
            if self.cursor.lookahead(1, '*'):
                node = self._new_binary(NodeType.MUL, op_token, node, self.num_or_bracket())
            elif self.cursor.lookahead(1, '/'):
                node = self._new_binary(NodeType.DIV, op_token, node, self.num_or_bracket())
            else:
                break
        return node

    def add_or_sub(self) -> ASTNode:
        """Parse an expression: terms joined by + and -, folded left."""
        node = self.mul_or_div()
        while not self.cursor.at_end():
            op_token = self.cursor.current
            if self.cursor.lookahead(1, '+'):
                node = self._new_binary(NodeType.ADD, op_token, node, self.mul_or_div())
            elif self.cursor.lookahead(1, '-'):
                node = self._new_binary(NodeType.SUB, op_token, node, self.mul_or_div())
            else:
                break
        return node


def parse(source: str, filename: str = "<input>", allow_trailing: bool = False) -> ASTNode:
    """Convenience function to tokenize and parse expression source text."""
    tokens = tokenize(source, filename)
    return Parser(tokens, filename, source, allow_trailing).parse()
