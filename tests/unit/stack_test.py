import unittest

from core import TokenStack, StackUnderflow


class TokenStackTests(unittest.TestCase):
    def test_push_pop_is_lifo(self):
        stack = TokenStack()
        for token in ("A", "B", "C"):
            stack.push(token)
        self.assertEqual(3, stack.size())
        self.assertEqual("C", stack.pop())
        self.assertEqual("B", stack.pop())
        self.assertEqual("A", stack.pop())
        self.assertTrue(stack.is_empty())

    def test_peek_does_not_remove(self):
        stack = TokenStack(["1", "2"])
        self.assertEqual("2", stack.peek())
        self.assertEqual(2, len(stack))

    def test_empty_stack_underflow(self):
        stack = TokenStack()
        self.assertRaises(StackUnderflow, stack.pop)
        self.assertRaises(StackUnderflow, stack.peek)
        self.assertEqual(0, stack.size())

    def test_items_bottom_to_top(self):
        stack = TokenStack()
        stack.push("x")
        stack.push("y")
        self.assertEqual(("x", "y"), stack.items())
        self.assertEqual(["y", "x"], list(stack), "iteration starts at the top")

    def test_no_token_length_limit(self):
        stack = TokenStack()
        long_token = "a" * 500
        stack.push(long_token)
        self.assertEqual(long_token, stack.pop())

    def test_clear(self):
        stack = TokenStack(["1", "2", "3"])
        stack.clear()
        self.assertTrue(stack.is_empty())
        self.assertRaises(StackUnderflow, stack.pop)
