"""
Lexer configuration.

The grammar leaves two points open; both are fixed here so that the
behaviour never depends on dispatch order.
"""

from dataclasses import dataclass
from typing import Tuple

from .tokens import WHITESPACE


@dataclass(frozen=True)
class LexerConfig:
    """
    Options controlling the accepted token shapes.

    Attributes:
        identifier_hyphens: Allow '-' after the first character of an
            identifier (``is-empty``). When off, ``a-b`` lexes as three tokens.
        reject_leading_zeros: Raise a LexicalError for ``01``/``-007`` instead
            of splitting them into adjacent INTEGER tokens.
        whitespace: Characters skipped between tokens.
    """
    identifier_hyphens: bool = True
    reject_leading_zeros: bool = False
    whitespace: Tuple[str, ...] = WHITESPACE


DEFAULT_CONFIG = LexerConfig()
