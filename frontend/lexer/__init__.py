"""
Front-end Lexer Package

Implements a from-scratch lexical scanner for the language front-end.
The scanner is pull-based: a parser calls ``next_token()`` and gets back
exactly one token per call.

Key Features:
- ASCII scanning with one character of lookahead
- Two-character comparison operators (==, !=)
- Reserved-word lookup for identifiers
- Unrecognized characters reported as ILLEGAL tokens, never as exceptions
- Optional strict mode on the convenience helpers

Author: xwest
"""

from .tokens import Token, TokenKind, KEYWORDS, lookup_ident
from .lexer import Scanner, tokenize_string, tokenize_file
from .errors import LexerError, Diagnostic

__all__ = [
    "Scanner",
    "Token",
    "TokenKind",
    "KEYWORDS",
    "lookup_ident",
    "tokenize_string",
    "tokenize_file",
    "LexerError",
    "Diagnostic",
]
