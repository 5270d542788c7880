"""
PLC Lexer - turns source text into a list of tokens

The lexer works through three layers:
- lex_all() repeatedly calls next_token() and skips whitespace
- next_token() picks a sub-lexer using lookahead only
- the sub-lexers consume characters with match() and emit a token

Every rule reads the input through peek()/match(), which test the upcoming
characters against one single-character class per position. Nothing indexes
into the source directly, so token boundaries always come from the cursor.
"""

import re
import logging
from functools import lru_cache
from typing import Callable, List, Optional, Union

from .tokens import (
    Token, TokenKind, SourceLocation, IDENTIFIER_START, IDENTIFIER_PART,
    IDENTIFIER_PART_NO_HYPHEN, SIGN, DIGIT, NONZERO_DIGIT, ZERO, DOT,
    SINGLE_QUOTE, DOUBLE_QUOTE, BACKSLASH, ESCAPE_CHAR, CHARACTER_BODY,
    STRING_BODY, MULTI_CHAR_OPERATORS
)
from .errors import (
    LexicalError, LexerInternalError, create_invalid_character_error,
    create_unterminated_string_error, create_invalid_escape_error,
    create_malformed_character_error, create_invalid_number_error
)
from .config import LexerConfig, DEFAULT_CONFIG
from .cursor import Cursor

log = logging.getLogger(__name__)

# A regex source string, a compiled regex or a predicate; always tested
# against exactly one character.
CharPattern = Union[str, re.Pattern, Callable[[str], bool]]


@lru_cache(maxsize=None)
def _compile(pattern: str) -> re.Pattern:
    return re.compile(pattern)


def _matches(pattern: CharPattern, char: str) -> bool:
    if isinstance(pattern, str):
        pattern = _compile(pattern)
    if isinstance(pattern, re.Pattern):
        return pattern.fullmatch(char) is not None
    return bool(pattern(char))


def is_operator_char(char: str) -> bool:
    """Any printable, non-whitespace character can be a one-character operator."""
    return char.isprintable() and not char.isspace()


_MULTI_CHAR_PATTERNS = [tuple(re.escape(c) for c in op) for op in MULTI_CHAR_OPERATORS]


class Lexer:
    """
    PLC lexical analyzer.

    Holds no state between lex_all() calls other than a fresh Cursor, so
    lexing the same input twice gives equal token lists.
    """

    def __init__(self, source: str, config: Optional[LexerConfig] = None,
                 filename: str = "<input>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Complete source text
            config: Grammar options, defaults to DEFAULT_CONFIG
            filename: Name of source file for error reporting
        """
        self.source = source
        self.config = config or DEFAULT_CONFIG
        self.filename = filename
        self.chars = Cursor(source)

        self._identifier_part = (
            IDENTIFIER_PART if self.config.identifier_hyphens else IDENTIFIER_PART_NO_HYPHEN
        )
        self._whitespace = frozenset(self.config.whitespace).__contains__

    def lex_all(self) -> List[Token]:
        """
        Tokenize the entire input.

        Returns:
            List of tokens in source order (no EOF token)

        Raises:
            LexicalError: On the first character that cannot be classified
        """
        self.chars = Cursor(self.source)
        tokens: List[Token] = []
        log.debug("lexing %s (%d characters)", self.filename, len(self.source))

        try:
            while self.chars.has(0):
                before = self.chars.position
                if self.match(self._whitespace):
                    self.chars.reset_pending()
                else:
                    tokens.append(self.next_token())
                if self.chars.position == before:
                    raise LexerInternalError(f"no progress at offset {before}")
        except LexicalError as e:
            log.debug("lexing %s failed at offset %d: %s", self.filename, e.offset, e.message)
            raise

        log.debug("lexed %d tokens from %s", len(tokens), self.filename)
        return tokens

    def next_token(self) -> Token:
        """
        Lex the token starting at the current position.

        Only looks ahead here; the chosen sub-lexer does the consuming.
        """
        if self.peek(IDENTIFIER_START):
            return self.lex_identifier()
        elif self.peek(DIGIT) or self.peek(SIGN, DIGIT):
            return self.lex_number()
        elif self.peek(SINGLE_QUOTE):
            return self.lex_character()
        elif self.peek(DOUBLE_QUOTE):
            return self.lex_string()
        elif self.peek(is_operator_char):
            return self.lex_operator()

        raise create_invalid_character_error(self.chars.peek_char(0), self._location())

    def lex_identifier(self) -> Token:
        self.match(IDENTIFIER_START)
        while self.match(self._identifier_part):
            pass
        return self.chars.emit(TokenKind.IDENTIFIER)

    def lex_number(self) -> Token:
        """Lex an INTEGER or DECIMAL, with optional sign."""
        self.match(SIGN)

        if self.match(ZERO):
            # "01" is either two tokens or an error, never one integer
            if self.config.reject_leading_zeros and self.peek(DIGIT):
                raise create_invalid_number_error(
                    self._location(),
                    "Numbers other than 0 cannot start with a leading zero."
                )
        elif self.match(NONZERO_DIGIT):
            while self.match(DIGIT):
                pass
        else:
            raise LexerInternalError(f"number rule chosen without a digit at offset {self.chars.start}")

        if self.match(DOT, DIGIT):
            while self.match(DIGIT):
                pass
            return self.chars.emit(TokenKind.DECIMAL)

        return self.chars.emit(TokenKind.INTEGER)

    def lex_character(self) -> Token:
        """Lex a character literal: exactly one character or escape between quotes."""
        self.match(SINGLE_QUOTE)

        if self.peek(BACKSLASH):
            self.lex_escape()
        elif not self.match(CHARACTER_BODY):
            raise create_malformed_character_error(self.chars.peek_char(0), self._location())

        if not self.match(SINGLE_QUOTE):
            raise create_malformed_character_error(self.chars.peek_char(0), self._location())

        return self.chars.emit(TokenKind.CHARACTER)

    def lex_string(self) -> Token:
        """
        Lex a string literal.

        Unterminated strings are reported at the opening quote.
        """
        opening = self.chars.position
        self.match(DOUBLE_QUOTE)

        while not self.match(DOUBLE_QUOTE):
            if self.peek(BACKSLASH) and self.chars.has(1):
                self.lex_escape()
            elif not self.match(STRING_BODY):
                # End of input, a line break, or a trailing backslash
                raise create_unterminated_string_error(self._location(opening))

        return self.chars.emit(TokenKind.STRING)

    def lex_escape(self):
        """Consume a backslash escape inside a character or string literal."""
        self.match(BACKSLASH)
        if not self.match(ESCAPE_CHAR):
            raise create_invalid_escape_error(self.chars.peek_char(0), self._location())

    def lex_operator(self) -> Token:
        for patterns in _MULTI_CHAR_PATTERNS:
            if self.match(*patterns):
                return self.chars.emit(TokenKind.OPERATOR)

        self.match(is_operator_char)
        return self.chars.emit(TokenKind.OPERATOR)

    def peek(self, *patterns: CharPattern) -> bool:
        """
        Check the upcoming characters without consuming them.

        ``peek("a", "b", "c")`` is true if the next characters are 'a', 'b'
        and 'c'. Each pattern is tested against exactly one character.
        """
        for i, pattern in enumerate(patterns):
            char = self.chars.peek_char(i)
            if char is None or not _matches(pattern, char):
                return False
        return True

    def match(self, *patterns: CharPattern) -> bool:
        """Like peek(), but also consumes the characters when they match."""
        matched = self.peek(*patterns)
        if matched:
            for _ in patterns:
                self.chars.advance()
        return matched

    def _location(self, offset: Optional[int] = None) -> SourceLocation:
        if offset is None:
            offset = self.chars.position
        return SourceLocation.from_offset(self.source, offset, self.filename)


def tokenize_string(source: str, filename: str = "<string>",
                    config: Optional[LexerConfig] = None) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Raises:
        LexicalError: If lexing fails
    """
    return Lexer(source, config, filename).lex_all()


def tokenize_file(filepath: str, config: Optional[LexerConfig] = None) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Line endings are left untranslated so token offsets index the file text.

    Raises:
        LexicalError: If lexing fails
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8', newline='') as f:
        source = f.read()

    return tokenize_string(source, filepath, config)
