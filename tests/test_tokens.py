"""
Tests for the varlang token model: keyword lookup, character classes and
Token behavior.
"""

import os
import sys
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from varlang.lexer.tokens import (
    Token, TokenType, SourceLocation, is_letter, is_digit, lookup_ident
)


class TestLookupIdent(unittest.TestCase):

    def test_bool_literals(self):
        self.assertEqual(lookup_ident("true"), (TokenType.BOOL, True))
        self.assertEqual(lookup_ident("false"), (TokenType.BOOL, False))

    def test_type_names(self):
        for name in ("bool", "int", "float", "string"):
            self.assertEqual(lookup_ident(name), (TokenType.TYPE, name))

    def test_other_words_are_identifiers(self):
        for word in ("my_var", "_", "string2", "Int"):
            self.assertEqual(lookup_ident(word), (TokenType.IDENT, word))


class TestCharacterClasses(unittest.TestCase):

    def test_letters(self):
        for ch in "azAZ_":
            self.assertTrue(is_letter(ch), ch)
        for ch in ("0", " ", "é", "-", None):
            self.assertFalse(is_letter(ch), ch)

    def test_digits(self):
        for ch in "0123456789":
            self.assertTrue(is_digit(ch))
        # Unicode digits are not accepted
        for ch in ("a", "٣", "²", None):
            self.assertFalse(is_digit(ch), ch)


class TestToken(unittest.TestCase):

    def test_str(self):
        self.assertEqual(str(Token(TokenType.IDENT, "x")), "IDENT('x')")
        self.assertEqual(str(Token(TokenType.PLUS)), "PLUS")
        self.assertEqual(str(Token(TokenType.BOOL, False)), "BOOL(False)")
        self.assertEqual(str(Token(TokenType.ILLEGAL, "\t")), "ILLEGAL('\\t')")

    def test_equality_ignores_metadata(self):
        here = SourceLocation("a.vl", 1, 1, 0)
        there = SourceLocation("b.vl", 3, 7, 40)
        self.assertEqual(Token(TokenType.INT, 3, "3", here), Token(TokenType.INT, 3, "3", there))
        self.assertNotEqual(Token(TokenType.INT, 3), Token(TokenType.INT, 4))
        self.assertNotEqual(Token(TokenType.IDENT, "int"), Token(TokenType.TYPE, "int"))
        self.assertEqual(len({Token(TokenType.COLON, None, ":", here), Token(TokenType.COLON)}), 1)

    def test_categories(self):
        self.assertTrue(Token(TokenType.STRING, "").is_literal)
        self.assertTrue(Token(TokenType.BOOL, True).is_literal)
        self.assertFalse(Token(TokenType.IDENT, "x").is_literal)
        self.assertTrue(Token(TokenType.NOT_EQUAL).is_operator)
        self.assertTrue(Token(TokenType.MODULO).is_operator)
        self.assertFalse(Token(TokenType.TYPE, "int").is_operator)
        self.assertTrue(Token(TokenType.IDENT, "x").is_identifier)
        self.assertTrue(Token(TokenType.EOF).is_eof)

    def test_tokens_are_immutable(self):
        token = Token(TokenType.INT, 1)
        with self.assertRaises(AttributeError):
            token.value = 2


if __name__ == '__main__':
    unittest.main()
