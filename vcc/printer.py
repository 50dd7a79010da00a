"""
Render expression trees as text.

Operator chains fold into deep left spines, so every renderer walks the tree
with an explicit stack instead of recursing.
"""

from typing import Callable, List

from .parser.ast_nodes import ASTNode, BinaryOpNode, NumberNode


def _render(node: ASTNode, combine: Callable[[str, str, str], str]) -> str:
    """Post-order render: combine(symbol, left_text, right_text) per operator."""
    parts: List[str] = []
    # (node, children_done)
    stack = [(node, False)]
    while stack:
        current, children_done = stack.pop()
        if isinstance(current, NumberNode):
            parts.append(str(current.value))
        elif not children_done:
            stack.append((current, True))
            stack.append((current.right, False))
            stack.append((current.left, False))
        else:
            right = parts.pop()
            left = parts.pop()
            parts.append(combine(current.op.symbol, left, right))
    return parts.pop()


def to_infix(node: ASTNode) -> str:
    """Fully parenthesized infix form, e.g. (2 + (3 * 4))."""
    return _render(node, lambda symbol, left, right: f"({left} {symbol} {right})")


def to_sexpr(node: ASTNode) -> str:
    """Prefix form, e.g. (+ 2 (* 3 4))."""
    return _render(node, lambda symbol, left, right: f"({symbol} {left} {right})")


def dump_tree(node: ASTNode, indent: str = '  ') -> str:
    """One node per line, children indented under their parent."""
    lines: List[str] = []
    stack = [(node, 0)]
    while stack:
        current, depth = stack.pop()
        prefix = indent * depth
        if isinstance(current, BinaryOpNode):
            lines.append(f"{prefix}BinaryOp {current.op.symbol}")
            stack.append((current.right, depth + 1))
            stack.append((current.left, depth + 1))
        else:
            lines.append(f"{prefix}Number {current.value}")
    return '\n'.join(lines)
