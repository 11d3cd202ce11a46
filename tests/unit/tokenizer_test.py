import unittest

import numpy as np

from core.token_system import (TokenType, Token, tokenize, precedence, is_right_associative,
                               is_numeric_text, parse_numeric)


class TokenizerTests(unittest.TestCase):
    def test_classifies_tokens(self):
        tokens = list(tokenize("A + bc*(12.5)"))
        self.assertEqual(["A", "+", "bc", "*", "(", "12.5", ")"], [t.text for t in tokens])
        self.assertEqual([TokenType.OPERAND, TokenType.OPERATOR, TokenType.OPERAND,
                          TokenType.OPERATOR, TokenType.LEFT_PAREN, TokenType.OPERAND,
                          TokenType.RIGHT_PAREN], [t.type for t in tokens])
        self.assertEqual([0, 2, 4, 6, 7, 8, 12], [t.position for t in tokens])

    def test_whitespace_is_skipped(self):
        self.assertEqual(["x1", "^", "2"], [t.text for t in tokenize("  x1\t^ \n2 ")])

    def test_unknown_character_is_reported_not_raised(self):
        tokens = list(tokenize("a$b"))
        self.assertEqual(TokenType.UNKNOWN, tokens[1].type)
        self.assertEqual("$", tokens[1].text)
        self.assertEqual("b", tokens[2].text, "scanning continues past the unknown character")

    def test_leading_dot(self):
        self.assertEqual([TokenType.UNKNOWN, TokenType.OPERAND],
                         [t.type for t in tokenize(".5")])
        self.assertEqual([".5"], [t.text for t in tokenize(".5", leading_dot=True)])

    def test_tokenize_is_lazy_and_single_pass(self):
        tokens = tokenize("A+B")
        self.assertEqual("A", next(tokens).text)
        self.assertEqual(["+", "B"], [t.text for t in tokens])
        self.assertEqual([], list(tokens))

    def test_tokens_are_immutable(self):
        token = Token(TokenType.OPERAND, "A", 0)
        with self.assertRaises(AttributeError):
            token.text = "B"

    def test_precedence_table(self):
        self.assertEqual(3, precedence("^"))
        self.assertEqual(2, precedence("*"))
        self.assertEqual(2, precedence("/"))
        self.assertEqual(1, precedence("+"))
        self.assertEqual(1, precedence("-"))
        self.assertEqual(0, precedence("("))
        self.assertTrue(is_right_associative("^"))
        self.assertFalse(is_right_associative("-"))

    def test_strict_numeric(self):
        for text in ("12", "1.5", ".5", "1."):
            self.assertTrue(is_numeric_text(text), text)
        for text in ("1.2.3", "abc", "", ".", ".5abc", "2x"):
            self.assertFalse(is_numeric_text(text), text)

    def test_lenient_numeric_uses_first_character(self):
        self.assertTrue(is_numeric_text(".5abc", strict=False))
        self.assertTrue(is_numeric_text("2x", strict=False))
        self.assertFalse(is_numeric_text("x1", strict=False))
        self.assertEqual(0.5, parse_numeric(".5abc", strict=False))
        self.assertEqual(2.0, parse_numeric("2x", strict=False))
        self.assertEqual(0.0, parse_numeric(".", strict=False))
        self.assertIsInstance(parse_numeric("3"), np.float64)


class ConfigTests(unittest.TestCase):
    def test_default_config_is_valid(self):
        from config.config import validate_config, ENGINE_CONFIG
        validate_config()
        self.assertFalse(ENGINE_CONFIG['postfix_trailing_space'])
