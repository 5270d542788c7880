"""
PLC Language Front End

Lexical analysis for the PLC expression/statement language. Parsing and
evaluation live in separate projects that consume the token list.

Architecture:
    plc/
    ├── lexer/           # Tokenization and lexical analysis
    └── cli.py           # plc-lex command line driver

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenKind, LexicalError, LexerConfig

__all__ = [
    "Lexer",
    "Token",
    "TokenKind",
    "LexicalError",
    "LexerConfig",

    # Version info
    "__version__",
    "__license__",
]
