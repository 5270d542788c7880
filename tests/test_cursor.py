"""
Tests for the lexer's character cursor.
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from plc.lexer.cursor import Cursor
from plc.lexer.tokens import Token, TokenKind
from plc.lexer.errors import LexerInternalError


class TestCursor(unittest.TestCase):

    def test_has_and_peek_char(self):
        cursor = Cursor("ab")
        self.assertTrue(cursor.has(0))
        self.assertTrue(cursor.has(1))
        self.assertFalse(cursor.has(2))
        self.assertEqual(cursor.peek_char(0), "a")
        self.assertEqual(cursor.peek_char(1), "b")
        self.assertIsNone(cursor.peek_char(2))
        # Peeking never moves the cursor
        self.assertEqual(cursor.position, 0)
        self.assertEqual(cursor.pending_length, 0)

    def test_empty_input(self):
        cursor = Cursor("")
        self.assertFalse(cursor.has(0))
        self.assertIsNone(cursor.peek_char(0))

    def test_advance_tracks_pending_length(self):
        cursor = Cursor("abc")
        cursor.advance()
        cursor.advance()
        self.assertEqual(cursor.position, 2)
        self.assertEqual(cursor.pending_length, 2)
        self.assertEqual(cursor.start, 0)
        self.assertEqual(cursor.peek_char(0), "c")

    def test_reset_pending_keeps_position(self):
        cursor = Cursor(" x")
        cursor.advance()
        cursor.reset_pending()
        self.assertEqual(cursor.position, 1)
        self.assertEqual(cursor.pending_length, 0)
        self.assertEqual(cursor.start, 1)

    def test_emit_slices_pending_characters(self):
        cursor = Cursor("  ab cd")
        cursor.advance()
        cursor.advance()
        cursor.reset_pending()
        cursor.advance()
        cursor.advance()

        token = cursor.emit(TokenKind.IDENTIFIER)

        self.assertEqual(token, Token(TokenKind.IDENTIFIER, "ab", 2))
        self.assertEqual(cursor.pending_length, 0)
        self.assertEqual(cursor.position, 4)

    def test_advance_past_end_is_an_internal_error(self):
        cursor = Cursor("a")
        cursor.advance()
        with self.assertRaises(LexerInternalError):
            cursor.advance()


if __name__ == '__main__':
    unittest.main()
