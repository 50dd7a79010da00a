"""
Test helpers for the vcc test suite.

- eval_and_assert(): Parse and evaluate an expression, check the result
- parse_and_catch(): Parse an expression and expect a ParseError subclass
"""

import sys
from pathlib import Path
from typing import Callable, Optional, Type

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from vcc.evaluator import evaluate
from vcc.errors import ParseError
from vcc.parser import parse


def eval_and_assert(expression: str, expected: int, allow_trailing: bool = False):
    """Parse and evaluate expression, asserting the result equals expected."""
    actual = evaluate(parse(expression, allow_trailing=allow_trailing))
    if actual != expected:
        raise AssertionError(
            f"EvalAndAssert failed. Expected: {expected}. Actual: {actual}. "
            f"Expression was: {expression}"
        )


def parse_and_catch(
    expression: str,
    exception_type: Type[ParseError],
    predicate: Optional[Callable[[ParseError], bool]] = None,
) -> ParseError:
    """Parse expression and expect it to raise exception_type."""
    try:
        node = parse(expression)
    except exception_type as ex:
        if predicate is not None and not predicate(ex):
            raise AssertionError(
                f"ParseAndCatch failed. Predicate returned false. Exception: {ex}"
            )
        return ex
    except ParseError as ex:
        raise AssertionError(
            f"ParseAndCatch failed. Expected exception: {exception_type.__name__}. "
            f"Actual: {type(ex).__name__}: {ex}. Expression was: {expression!r}"
        )
    raise AssertionError(
        f"ParseAndCatch failed. Expected exception: {exception_type.__name__}. "
        f"Actual: no exception, returned {node!r}. Expression was: {expression!r}"
    )
