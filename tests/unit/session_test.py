import unittest

from session import StackSession
from utils.trace import format_stack_listing
from core import UnknownToken, StackUnderflow, DivisionByZero


class StackSessionTests(unittest.TestCase):
    def setUp(self):
        self.session = StackSession()

    def test_push_and_apply(self):
        self.session.push("3")
        self.session.push("4")
        self.assertEqual("7.00", self.session.apply("+"))
        self.assertEqual(("7.00",), self.session.snapshot())

    def test_stack_persists_across_operations(self):
        for token in ("A", "2", "3"):
            self.session.push(token)
        self.session.apply("*")
        self.session.apply("+")
        self.assertEqual(("(A+6.00)",), self.session.snapshot())

    def test_invalid_tokens_rejected(self):
        self.assertRaises(UnknownToken, self.session.push, "")
        self.assertRaises(UnknownToken, self.session.push, "a+b")
        self.assertEqual(0, len(self.session))

    def test_push_strips_whitespace(self):
        self.assertEqual("x1", self.session.push("  x1 "))

    def test_leading_dot_switch(self):
        self.session.push(".5")
        strict = StackSession(allow_leading_dot=False)
        self.assertRaises(UnknownToken, strict.push, ".5")

    def test_pop_empty(self):
        self.assertRaises(StackUnderflow, self.session.pop)

    def test_division_by_zero_keeps_session_usable(self):
        self.session.push("8")
        self.session.push("0")
        self.assertRaises(DivisionByZero, self.session.apply, "/")
        self.assertEqual(("8", "0"), self.session.snapshot())
        self.assertEqual("0", self.session.pop())
        self.session.push("2")
        self.assertEqual("4.00", self.session.apply("/"))

    def test_listing(self):
        self.session.push("A")
        self.session.push("B")
        self.assertEqual([(2, "B", True), (1, "A", False)], self.session.listing())
        self.assertEqual(["#2: B  <- Top", "#1: A"], format_stack_listing(self.session.listing()))

    def test_clear(self):
        self.session.push("A")
        self.session.clear()
        self.assertEqual([], self.session.listing())
