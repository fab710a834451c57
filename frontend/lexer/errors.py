"""
Error handling for the front-end scanner.

The scanner itself never raises: unrecognized characters come back as
ILLEGAL tokens. These types are used by callers (and by the strict
tokenizing helpers) that want to turn an ILLEGAL token into a failure
with a readable diagnostic.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass

from .tokens import Token


@dataclass
class Diagnostic:
    """Base class for lexer diagnostics (errors, warnings, info)."""
    message: str
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            result = f"{severity_prefix}[{self.code}]: {self.message}\n"
        else:
            result = f"{severity_prefix}: {self.message}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when a caller rejects a scanned token.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.token = token
        self.diagnostic = Diagnostic(
            message=message,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Invalid character",
}


def create_illegal_character_error(token: Token) -> LexerError:
    """Create an error for an ILLEGAL token."""
    char = token.literal

    if char.isprintable():
        help_text = f"The character '{char}' is not valid in source code."
    else:
        help_text = f"Non-printable character (0x{ord(char):02X}) is not allowed."

    return LexerError(
        message=f"{ERROR_CODES['L001']}: {char!r}",
        token=token,
        code="L001",
        help_text=help_text,
        suggestions=["Remove the character", "Check the file encoding (source must be ASCII)"]
    )
