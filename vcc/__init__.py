"""
vcc - Recursive-descent front end for integer arithmetic expressions.

This package provides a lexer, an LL(k) parser producing an immutable AST,
and a small evaluator and printers that consume the tree.
"""

__version__ = "0.1.0"
__author__ = "vcc Project"

from .errors import ParseError
from .lexer import tokenize
from .parser import Parser, parse
from .evaluator import evaluate

__all__ = ['ParseError', 'Parser', 'parse', 'tokenize', 'evaluate']
