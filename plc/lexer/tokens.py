"""
Token definitions for the PLC lexer.

This module defines the token kinds produced by the lexer along with:
- The immutable Token value handed to the parser
- Source locations (line/column) used when rendering diagnostics
- Single-character classes shared by the dispatch rules
- Escape sequence tables for character and string literals
"""

from enum import Enum, auto
from dataclasses import dataclass
from decimal import Decimal
from typing import Any


class TokenKind(Enum):
    """
    Enumeration of all token kinds in the PLC language.

    Keywords are not distinguished here; the parser sees them as identifiers.
    """

    IDENTIFIER = auto()             # getName, @thing, is-valid
    INTEGER = auto()                # 0, 42, -7, +1
    DECIMAL = auto()                # 3.14, -0.5
    CHARACTER = auto()              # 'a', '\n'
    STRING = auto()                 # "hello\tworld"
    OPERATOR = auto()               # ==, &&, +, (, ;


# ============================================================================
# Character classes (each matches exactly one character)
# ============================================================================

IDENTIFIER_START = r"[@A-Za-z]"
IDENTIFIER_PART = r"[A-Za-z0-9_-]"
IDENTIFIER_PART_NO_HYPHEN = r"[A-Za-z0-9_]"

SIGN = r"[+-]"
DIGIT = r"[0-9]"
NONZERO_DIGIT = r"[1-9]"
ZERO = r"0"
DOT = r"\."

SINGLE_QUOTE = r"'"
DOUBLE_QUOTE = r'"'
BACKSLASH = r"\\"
ESCAPE_CHAR = r"[bnrt'\"\\]"
CHARACTER_BODY = r"[^'\n\r\\]"
STRING_BODY = r'[^"\n\r\\]'

# Two-character operators, matched before falling back to a single character
MULTI_CHAR_OPERATORS = ("==", "!=", "&&", "||")

# Characters skipped between tokens
WHITESPACE = (" ", "\b", "\n", "\r", "\t")

# Escape character -> decoded value
ESCAPE_VALUES = {
    "b": "\b",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "'": "'",
    '"': '"',
    "\\": "\\",
}


def unescape(body: str) -> str:
    """Resolve escape sequences in the body of an already-lexed literal."""
    result = []
    chars = iter(body)
    for char in chars:
        if char == "\\":
            char = ESCAPE_VALUES[next(chars)]
        result.append(char)
    return "".join(result)


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Tokens only carry an offset; line and column are derived on demand
    when an error has to be shown to a person.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    @classmethod
    def from_offset(cls, source: str, offset: int, filename: str = "<input>") -> "SourceLocation":
        """Compute the 1-based line and column of ``offset`` in ``source``.

        ``\\n``, ``\\r\\n`` and a lone ``\\r`` each count as one line break.
        """
        line = 1
        line_start = 0
        i = 0
        limit = min(offset, len(source))
        while i < limit:
            char = source[i]
            if char == "\r" and i + 1 < limit and source[i + 1] == "\n":
                i += 1
            if char in "\r\n":
                line += 1
                line_start = i + 1
            i += 1
        return cls(filename, line, offset - line_start + 1, offset)

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the PLC language.

    The lexeme is the exact slice of the input, so quotes and signs are
    kept. Use ``value`` for the decoded literal.
    """
    kind: TokenKind
    lexeme: str                     # Raw text from source
    offset: int                     # Index of the first character

    def __str__(self) -> str:
        return f"{self.kind.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.lexeme!r}, {self.offset})"

    @property
    def end(self) -> int:
        """Offset one past the last character of the token."""
        return self.offset + len(self.lexeme)

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.kind in {
            TokenKind.INTEGER, TokenKind.DECIMAL,
            TokenKind.CHARACTER, TokenKind.STRING,
        }

    @property
    def value(self) -> Any:
        """Decoded value of the token (int, Decimal or str)."""
        if self.kind == TokenKind.INTEGER:
            return int(self.lexeme)
        if self.kind == TokenKind.DECIMAL:
            return Decimal(self.lexeme)
        if self.kind in (TokenKind.CHARACTER, TokenKind.STRING):
            return unescape(self.lexeme[1:-1])
        return self.lexeme
