"""
Language Front-end Package

Entry stage of the language front-end: turns raw source text into the
token stream consumed by a parser.

Architecture:
    frontend/
    └── lexer/           # Tokenization and lexical analysis

Author: xwest
License: MIT
"""

__version__ = "0.1.0-alpha"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Scanner, Token, TokenKind

__all__ = [
    # Core classes
    "Scanner",
    "Token",
    "TokenKind",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
