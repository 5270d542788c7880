"""
Error handling for the PLC lexer.

Lexing stops at the first problem, so there is a single user-facing error
type, LexicalError, carrying the offset of the offending character and a
diagnostic that can be rendered for the user.
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """A renderable lexer diagnostic."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location} (offset {self.location.offset})\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexicalError(Exception):
    """
    Exception raised when the input cannot be split into tokens.

    ``offset`` indexes into the exact original input.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.offset = location.offset
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class LexerInternalError(RuntimeError):
    """Raised when the lexer breaks one of its own invariants."""


def _describe(char: Optional[str]) -> str:
    if char is None:
        return "end of input"
    if char.isprintable():
        return f"'{char}'"
    return f"U+{ord(char):04X}"


def create_invalid_character_error(char: str, location: SourceLocation) -> LexicalError:
    """Create an error for a character that starts no token."""
    return LexicalError(
        message=f"invalid character {_describe(char)} at offset {location.offset}",
        location=location,
        code="L001",
        help_text="Only printable characters and the whitespace characters "
                  "space, \\b, \\n, \\r and \\t may appear outside literals."
    )


def create_unterminated_string_error(location: SourceLocation) -> LexicalError:
    """Create an error for an unterminated string literal.

    The location is the opening quote.
    """
    return LexicalError(
        message=f"unterminated string literal at offset {location.offset}",
        location=location,
        code="L002",
        help_text="String literals must be closed with a matching \" on the same line.",
        suggestions=['Add a closing " quote', "Use \\n instead of a literal line break"]
    )


def create_invalid_escape_error(char: Optional[str], location: SourceLocation) -> LexicalError:
    """Create an error for a backslash followed by an unsupported character."""
    return LexicalError(
        message=f"invalid escape sequence {_describe(char)} at offset {location.offset}",
        location=location,
        code="L006",
        help_text="Supported escapes are \\b \\n \\r \\t \\' \\\" and \\\\."
    )


def create_malformed_character_error(char: Optional[str], location: SourceLocation) -> LexicalError:
    """Create an error for a character literal that is not exactly one character."""
    return LexicalError(
        message=f"malformed character literal: unexpected {_describe(char)} at offset {location.offset}",
        location=location,
        code="L009",
        help_text="Character literals hold exactly one character or escape, e.g. 'a' or '\\n'.",
        suggestions=['Use double quotes for strings: "ab"']
    )


def create_invalid_number_error(location: SourceLocation, reason: str) -> LexicalError:
    """Create an error for an invalid numeric literal."""
    return LexicalError(
        message=f"invalid numeric literal at offset {location.offset}",
        location=location,
        code="L003",
        help_text=reason
    )
