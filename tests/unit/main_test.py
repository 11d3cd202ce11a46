import argparse
import os
import tempfile
import unittest

import pandas as pd

import main


def scripted(lines):
    it = iter(lines)

    def _input(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return _input


class ReplTests(unittest.TestCase):
    def test_interactive_session(self):
        out = []
        main.run_repl(input_func=scripted([
            "push 3", "push 4", "+", "show", "push X", "*", "pop", "pop", "exit", "push 9",
        ]), output=out.append)
        self.assertEqual([
            "Successfully pushed: 3",
            "Successfully pushed: 4",
            "Operation result: 7.00",
            "#1: 7.00  <- Top",
            "Successfully pushed: X",
            "Operation result: (7.00*X)",
            "Popped from stack: (7.00*X)",
            "Error: Stack is empty. Cannot pop.",
        ], out[1:])

    def test_division_by_zero_and_conversions(self):
        out = []
        session = main.run_repl(input_func=scripted([
            "push 1", "push 0", "/", "convert (A+B)*C", "eval 2 3 2 ^ ^", "infix A B +",
            "bogus",
        ]), output=out.append)
        self.assertTrue(out[3].startswith("Error: Division by zero"))
        self.assertEqual(("1", "0"), session.snapshot())
        self.assertEqual("Final Postfix Expression: A B + C *", out[4])
        self.assertEqual("Evaluation result: 512.00", out[5])
        self.assertEqual("Infix expression: (A + B)", out[6])
        self.assertTrue(out[7].startswith("Invalid option"))


class MainTests(unittest.TestCase):
    def _args(self, **kwargs):
        defaults = dict(mode='convert', expression=None, steps=False,
                        trace_csv=None, results_path=None)
        defaults.update(kwargs)
        return argparse.Namespace(**defaults)

    def test_convert(self):
        self.assertEqual(0, main.main(self._args(expression="A+B*C")))

    def test_conversion_error_exit_code(self):
        self.assertEqual(1, main.main(self._args(expression="(A+B")))

    def test_missing_expression(self):
        self.assertEqual(2, main.main(self._args(mode='evaluate')))

    def test_trace_csv(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "trace.csv")
            result = main._run_operation('convert', "A+B*C", trace_csv=path)
            self.assertEqual("A B C * +", result)
            frame = pd.read_csv(path)
            self.assertEqual("done", frame.iloc[-1]['action'])

    def test_roundtrip_mode(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "results.csv")
            self.assertEqual(0, main.main(self._args(mode='roundtrip', results_path=path)))
            self.assertTrue(os.path.exists(path))
