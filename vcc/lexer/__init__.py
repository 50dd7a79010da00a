"""Expression Lexer - Tokenizes source text."""

from .lexer import Lexer, Token, TokenKind, tokenize

__all__ = ['Lexer', 'Token', 'TokenKind', 'tokenize']
