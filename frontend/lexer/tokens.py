"""
Token definitions for the front-end scanner.

This module defines the closed set of token kinds the scanner can produce:
- Special tokens (illegal character, end of input)
- Identifiers and integer literals
- Operators and punctuation
- Reserved words

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


class TokenKind(Enum):
    """
    Enumeration of all token kinds.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    ILLEGAL = auto()                # Unrecognized character
    END_OF_INPUT = auto()           # End of input

    # ========================================================================
    # Identifiers and Literals
    # ========================================================================
    IDENTIFIER = auto()             # add, foo_bar, x
    INTEGER = auto()                # 1343456, 007

    # ========================================================================
    # Operators
    # ========================================================================
    ASSIGN = auto()                 # =
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    BANG = auto()                   # !
    ASTERISK = auto()               # *
    SLASH = auto()                  # /

    LESS_THAN = auto()              # <
    GREATER_THAN = auto()           # >
    EQUAL = auto()                  # ==
    NOT_EQUAL = auto()              # !=

    # ========================================================================
    # Punctuation and Delimiters
    # ========================================================================
    COMMA = auto()                  # ,
    SEMICOLON = auto()              # ;
    LPAREN = auto()                 # (
    RPAREN = auto()                 # )
    LBRACE = auto()                 # {
    RBRACE = auto()                 # }

    # ========================================================================
    # Keywords
    # ========================================================================
    FUNCTION = auto()               # fn
    LET = auto()                    # let
    TRUE = auto()                   # true
    FALSE = auto()                  # false
    IF = auto()                     # if
    ELSE = auto()                   # else
    RETURN = auto()                 # return


@dataclass(frozen=True)
class Token:
    """
    A lexical token: its kind plus the exact text it was formed from.

    The literal is empty for the end-of-input token.
    """
    kind: TokenKind
    literal: str

    def __str__(self) -> str:
        return f"{self.kind.name}({self.literal!r})"

    @property
    def is_illegal(self) -> bool:
        """Check if this token holds an unrecognized character."""
        return self.kind == TokenKind.ILLEGAL

    @property
    def is_eof(self) -> bool:
        return self.kind == TokenKind.END_OF_INPUT


# Lookup tables shared by every scanner. Wrapped read-only so that no caller
# can mutate them after import.

KEYWORDS: Mapping[str, TokenKind] = MappingProxyType({
    "fn": TokenKind.FUNCTION,
    "let": TokenKind.LET,
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
    "if": TokenKind.IF,
    "else": TokenKind.ELSE,
    "return": TokenKind.RETURN,
})

OPERATORS: Mapping[str, TokenKind] = MappingProxyType({
    # Two-character operators
    "==": TokenKind.EQUAL,
    "!=": TokenKind.NOT_EQUAL,

    # Single-character operators
    "=": TokenKind.ASSIGN,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "!": TokenKind.BANG,
    "/": TokenKind.SLASH,
    "*": TokenKind.ASTERISK,
    "<": TokenKind.LESS_THAN,
    ">": TokenKind.GREATER_THAN,

    # Punctuation
    ";": TokenKind.SEMICOLON,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    ",": TokenKind.COMMA,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
})


def lookup_ident(literal: str) -> TokenKind:
    """Return the keyword kind for ``literal``, or IDENTIFIER if it isn't reserved."""
    return KEYWORDS.get(literal, TokenKind.IDENTIFIER)
