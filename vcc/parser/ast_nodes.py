"""
Abstract Syntax Tree node definitions for arithmetic expressions.

Each node is immutable once built and owned by exactly one parent.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterator, Tuple
from enum import Enum, auto

from ..errors import InternalError


class NodeType(Enum):
    """AST node types."""
    NUMBER = auto()
    ADD = auto()    # +
    SUB = auto()    # -
    MUL = auto()    # *
    DIV = auto()    # /


class BinaryOperator(Enum):
    """Binary operators, valued by their display symbol."""
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def node_type(self) -> NodeType:
        return NodeType[self.name]


# Fixed and total over the binary node types
BINARY_OPERATORS = {
    NodeType.ADD: BinaryOperator.ADD,
    NodeType.SUB: BinaryOperator.SUB,
    NodeType.MUL: BinaryOperator.MUL,
    NodeType.DIV: BinaryOperator.DIV,
}


class ASTNode(ABC):
    """Base class for all AST nodes."""

    @property
    @abstractmethod
    def node_type(self) -> NodeType:
        """Kind tag for this node."""

    def children(self) -> Tuple['ASTNode', ...]:
        return ()


@dataclass(frozen=True)
class NumberNode(ASTNode):
    """Integer literal node."""
    value: int
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    @property
    def node_type(self) -> NodeType:
        return NodeType.NUMBER

    def __repr__(self):
        return f"Number({self.value})"


@dataclass(frozen=True)
class BinaryOpNode(ASTNode):
    """Binary operation: left <op> right."""
    op: BinaryOperator
    left: ASTNode
    right: ASTNode
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    @property
    def node_type(self) -> NodeType:
        return self.op.node_type

    def children(self) -> Tuple[ASTNode, ...]:
        return (self.left, self.right)

    def __repr__(self):
        return f"BinaryOp({self.op.symbol}, {self.left!r}, {self.right!r})"


def make_number(value: int, line: int = 0, column: int = 0) -> NumberNode:
    """Create a Number leaf."""
    return NumberNode(value, line, column)


def make_binary(kind: NodeType, left: ASTNode, right: ASTNode,
                line: int = 0, column: int = 0) -> BinaryOpNode:
    """
    Create a binary node for kind.

    Raises:
        InternalError: if kind is not a binary node type
    """
    op = BINARY_OPERATORS.get(kind)
    if op is None:
        raise InternalError(f"Not a binary node type: {kind}")
    return BinaryOpNode(op, left, right, line, column)


def walk(node: ASTNode) -> Iterator[ASTNode]:
    """Yield every node in the tree, pre-order."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children()))


def count_nodes(node: ASTNode) -> Tuple[int, int]:
    """Return (number leaves, binary nodes) for the tree rooted at node."""
    numbers = 0
    binaries = 0
    for n in walk(node):
        if isinstance(n, NumberNode):
            numbers += 1
        else:
            binaries += 1
    return numbers, binaries
