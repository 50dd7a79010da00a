"""Expression Parser - Builds Abstract Syntax Tree from tokens."""

from .parser import Parser, ParseResult, parse
from .cursor import Cursor
from .ast_nodes import *

__all__ = ['Parser', 'ParseResult', 'parse', 'Cursor']
