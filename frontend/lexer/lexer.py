"""
Front-end scanner - turns source text into tokens, one per call

The scanner walks the input one character at a time with a single
character of lookahead. It never fails: anything it doesn't recognize
comes back as an ILLEGAL token and scanning carries on from the next
character.

xwest
"""

import logging
from typing import Iterator, List, Union

from .tokens import Token, TokenKind, OPERATORS, lookup_ident
from .errors import create_illegal_character_error

logger = logging.getLogger(__name__)

# End-of-input marker. An empty string can never be a character of the
# input, so a NUL byte in the source is scanned as ILLEGAL instead.
EOF_CHAR = ""

WHITESPACE = (" ", "\t", "\n", "\r")


class Scanner:
    """
    Lexical scanner over a single source string.

    Call ``next_token()`` repeatedly; once the input is exhausted every
    further call returns an END_OF_INPUT token. Instances hold mutable
    cursor state and must not be shared between threads.
    """

    def __init__(self, input: Union[str, bytes]):
        """
        Initialize the scanner and load the first character.

        Args:
            input: Source text. Scanning is byte-oriented: ``str`` is UTF-8
                encoded first, then every byte becomes one character.
        """
        if isinstance(input, str):
            input = input.encode("utf-8", "surrogatepass")
        if isinstance(input, (bytes, bytearray)):
            input = bytes(input).decode("latin-1")

        self.input = input
        self.position = 0           # index of self.ch
        self.read_position = 0      # index of the next unread character
        self.ch = EOF_CHAR

        self._read_char()

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the first END_OF_INPUT."""
        while True:
            token = self.next_token()
            yield token
            if token.is_eof:
                return

    def tokenize(self) -> List[Token]:
        """
        Scan the rest of the input.

        Returns:
            List of tokens ending with exactly one END_OF_INPUT token
        """
        return list(self)

    def next_token(self) -> Token:
        """Scan and return the next token, advancing the cursor past it."""
        self._skip_whitespace()

        ch = self.ch
        pair = ch + self._peek_char()

        if len(pair) == 2 and pair in OPERATORS:
            # Two-character operator: consume the continuation so both
            # characters end up in the literal
            self._read_char()
            token = Token(OPERATORS[pair], pair)
        elif ch in OPERATORS:
            token = Token(OPERATORS[ch], ch)
        elif ch == EOF_CHAR:
            token = Token(TokenKind.END_OF_INPUT, "")
        elif is_letter(ch):
            literal = self._read_identifier()
            return Token(lookup_ident(literal), literal)
        elif is_digit(ch):
            return Token(TokenKind.INTEGER, self._read_number())
        else:
            token = Token(TokenKind.ILLEGAL, ch)

        # Step past the last character of the token. Identifiers and
        # numbers returned above already stopped on the next character.
        self._read_char()
        return token

    def _read_char(self):
        """Advance one character; clamps at end of input."""
        if self.read_position >= len(self.input):
            self.ch = EOF_CHAR
        else:
            self.ch = self.input[self.read_position]
        self.position = self.read_position
        self.read_position += 1

    def _peek_char(self) -> str:
        """Peek at the next character without advancing."""
        if self.read_position >= len(self.input):
            return EOF_CHAR
        return self.input[self.read_position]

    def _read_identifier(self) -> str:
        start = self.position
        while is_letter(self.ch):
            self._read_char()
        return self.input[start:self.position]

    def _read_number(self) -> str:
        start = self.position
        while is_digit(self.ch):
            self._read_char()
        return self.input[start:self.position]

    def _skip_whitespace(self):
        while self.ch in WHITESPACE:
            self._read_char()


def is_letter(ch: str) -> bool:
    """ASCII letter or underscore."""
    return "a" <= ch <= "z" or "A" <= ch <= "Z" or ch == "_"


def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def tokenize_string(source: Union[str, bytes], strict: bool = False) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        strict: Raise on the first ILLEGAL token instead of returning it

    Returns:
        List of tokens ending with END_OF_INPUT

    Raises:
        LexerError: If ``strict`` and an ILLEGAL token was scanned
    """
    tokens = Scanner(source).tokenize()
    illegal = [token for token in tokens if token.is_illegal]

    logger.debug("scanned %d tokens (%d illegal)", len(tokens), len(illegal))

    if illegal:
        if strict:
            raise create_illegal_character_error(illegal[0])
        logger.warning(
            "source contains %d illegal character(s), first: %r",
            len(illegal), illegal[0].literal
        )

    return tokens


def tokenize_file(filepath: str, strict: bool = False) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file
        strict: Raise on the first ILLEGAL token instead of returning it

    Returns:
        List of tokens

    Raises:
        LexerError: If ``strict`` and an ILLEGAL token was scanned
        OSError: If file cannot be read
    """
    logger.debug("tokenizing %s", filepath)

    with open(filepath, "rb") as f:
        source = f.read()

    return tokenize_string(source, strict=strict)


__all__ = [
    "Scanner",
    "EOF_CHAR",
    "is_letter",
    "is_digit",
    "tokenize_string",
    "tokenize_file",
]
