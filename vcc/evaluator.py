"""
Integer evaluation of expression trees.

Division truncates toward zero, matching C integer semantics rather than
Python's floor division.
"""

from .errors import DivisionByZero
from .parser.ast_nodes import ASTNode, BinaryOperator, NumberNode


def apply_operator(op: BinaryOperator, left: int, right: int, node: ASTNode = None) -> int:
    """Apply one binary operator to already-evaluated operands."""
    if op == BinaryOperator.ADD:
        return left + right
    elif op == BinaryOperator.SUB:
        return left - right
    elif op == BinaryOperator.MUL:
        return left * right
    elif op == BinaryOperator.DIV:
        if right == 0:
            line = getattr(node, 'line', 0)
            column = getattr(node, 'column', 0)
            raise DivisionByZero("Division by zero", line, column)
        quotient = abs(left) // abs(right)
        return quotient if (left < 0) == (right < 0) else -quotient
    raise ValueError(f"Unknown operator: {op!r}")


def evaluate(node: ASTNode) -> int:
    """
    Evaluate an expression tree to an integer.

    Uses an explicit stack, so long operator chains (which fold into deep
    left spines) don't hit the recursion limit.
    """
    values = []
    # (node, children_done)
    stack = [(node, False)]
    while stack:
        current, children_done = stack.pop()
        if isinstance(current, NumberNode):
            values.append(current.value)
        elif not children_done:
            stack.append((current, True))
            stack.append((current.right, False))
            stack.append((current.left, False))
        else:
            right = values.pop()
            left = values.pop()
            values.append(apply_operator(current.op, left, right, current))
    return values.pop()
