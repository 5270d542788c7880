"""
PLC Lexer Package

Implements the lexical analyzer (tokenizer) for the PLC expression and
statement language.

Key Features:
- Identifiers, integer/decimal literals, character and string literals, operators
- Exact source offsets on every token
- Lookahead-driven dispatch through peek/match over single-character classes
- Diagnostics with line/column rendering for lexical errors
"""

from .tokens import Token, TokenKind, SourceLocation
from .cursor import Cursor
from .config import LexerConfig, DEFAULT_CONFIG
from .lexer import Lexer, tokenize_string, tokenize_file
from .errors import LexicalError, LexerInternalError, Diagnostic

__all__ = [
    "Lexer",
    "Cursor",
    "Token",
    "TokenKind",
    "SourceLocation",
    "LexerConfig",
    "DEFAULT_CONFIG",
    "LexicalError",
    "LexerInternalError",
    "Diagnostic",
    "tokenize_string",
    "tokenize_file",
]
