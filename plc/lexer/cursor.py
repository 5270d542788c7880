"""
Character cursor used by the lexer.

The cursor never looks behind the start of the token being built: token
boundaries come purely from how many characters were advanced since the
last emit or reset.
"""

from typing import Optional

from .tokens import Token, TokenKind
from .errors import LexerInternalError


class Cursor:
    """
    Scan state over an immutable input string.

    ``position`` is the index of the next unconsumed character and
    ``pending_length`` the number of characters consumed for the token in
    progress, so the token starts at ``position - pending_length``.
    """

    def __init__(self, source: str):
        self._input = source
        self._position = 0
        self._pending_length = 0

    @property
    def input(self) -> str:
        return self._input

    @property
    def position(self) -> int:
        return self._position

    @property
    def pending_length(self) -> int:
        return self._pending_length

    @property
    def start(self) -> int:
        """Offset of the first character of the token in progress."""
        return self._position - self._pending_length

    def has(self, offset: int = 0) -> bool:
        """Check if a character exists at ``position + offset``."""
        index = self._position + offset
        return 0 <= index < len(self._input)

    def peek_char(self, offset: int = 0) -> Optional[str]:
        """Return the character at ``position + offset`` without consuming it."""
        if not self.has(offset):
            return None
        return self._input[self._position + offset]

    def advance(self):
        """Consume exactly one character into the pending token."""
        if self._position >= len(self._input):
            raise LexerInternalError(f"advanced past end of input at offset {self._position}")
        self._position += 1
        self._pending_length += 1

    def reset_pending(self):
        """Drop the pending characters (used after discarding whitespace)."""
        self._pending_length = 0

    def emit(self, kind: TokenKind) -> Token:
        """Build a token from the pending characters and reset."""
        start = self.start
        token = Token(kind, self._input[start:self._position], start)
        self.reset_pending()
        return token
