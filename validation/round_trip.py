"""往返校验模块 validation/round_trip.py"""
import logging

import numpy as np
import pandas as pd

from config.config import VALIDATION_CONFIG
from core import (convert, evaluate, tokenize, TokenType, ExpressionError,
                  DivisionByZero, InvalidExpression, MismatchedParentheses,
                  NonNumericOperand, UnknownToken, is_numeric_text)

logger = logging.getLogger(__name__)


class ReferenceEvaluator:
    """
    递归下降直接求值中缀表达式，不经过后缀转换，用作对照。

    expr  := term (('+'|'-') term)*
    term  := power (('*'|'/') power)*
    power := primary ('^' power)?
    """

    def __init__(self, expression):
        self.expression = expression
        self.tokens = list(tokenize(expression))
        self.pos = 0

    def _peek(self):
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def _next(self):
        token = self._peek()
        if token is None:
            raise InvalidExpression(0, f"Unexpected end of expression: {self.expression}")
        self.pos += 1
        return token

    def evaluate(self):
        value = self._expr()
        if self._peek() is not None:
            token = self._peek()
            if token.type == TokenType.RIGHT_PAREN:
                raise MismatchedParentheses(token=token.text, position=token.position)
            raise InvalidExpression(0, f"Unexpected token '{token.text}' at position {token.position}")
        return value

    def _expr(self):
        value = self._term()
        while self._peek() is not None and self._peek().text in ('+', '-'):
            op = self._next().text
            right = self._term()
            value = value + right if op == '+' else value - right
        return value

    def _term(self):
        value = self._power()
        while self._peek() is not None and self._peek().text in ('*', '/'):
            op = self._next().text
            right = self._power()
            if op == '*':
                value = value * right
            else:
                if right == 0:
                    raise DivisionByZero()
                value = value / right
        return value

    def _power(self):
        base = self._primary()
        if self._peek() is not None and self._peek().text == '^':
            self._next()
            exponent = self._power()
            try:
                result = base ** exponent
            except ZeroDivisionError:
                # 0 的负数次幂，与 np.power 一致返回 inf
                return float('inf')
            # 负数的分数次幂在实数域无定义
            if isinstance(result, complex):
                return float('nan')
            return result
        return base

    def _primary(self):
        token = self._next()
        if token.type == TokenType.LEFT_PAREN:
            value = self._expr()
            closing = self._peek()
            if closing is None or closing.type != TokenType.RIGHT_PAREN:
                raise MismatchedParentheses(token=token.text, position=token.position)
            self._next()
            return value
        if token.type == TokenType.OPERAND:
            if not is_numeric_text(token.text):
                raise NonNumericOperand(token.text, token.position)
            return float(token.text)
        if token.type == TokenType.UNKNOWN:
            raise UnknownToken(token.text, token.position)
        raise InvalidExpression(0, f"Unexpected token '{token.text}' at position {token.position}")


def reference_evaluate(expression):
    return ReferenceEvaluator(expression).evaluate()


def check_round_trip(expressions=None, rtol=None, atol=None):
    """
    对每个中缀表达式比较 evaluate(convert(expr)) 与对照求值结果

    Returns:
    - DataFrame: expression, postfix, engine, reference, match, error
    """
    if expressions is None:
        expressions = VALIDATION_CONFIG['sample_expressions']
    rtol = VALIDATION_CONFIG['rtol'] if rtol is None else rtol
    atol = VALIDATION_CONFIG['atol'] if atol is None else atol

    rows = []
    for expression in expressions:
        row = {'expression': expression, 'postfix': None, 'engine': np.nan,
               'reference': np.nan, 'match': False, 'error': None}
        try:
            postfix = convert(expression)
            row['postfix'] = str(postfix)
            row['engine'] = evaluate(postfix)
            row['reference'] = reference_evaluate(expression)
            row['match'] = bool(np.isclose(row['engine'], row['reference'],
                                           rtol=rtol, atol=atol, equal_nan=True))
        except (ExpressionError, OverflowError) as e:
            row['error'] = str(e)
            logger.warning(f"Round trip failed for '{expression}': {e}")
        if row['error'] is None and not row['match']:
            logger.warning(f"Round trip mismatch for '{expression}': "
                           f"engine={row['engine']}, reference={row['reference']}")
        rows.append(row)

    return pd.DataFrame(rows, columns=['expression', 'postfix', 'engine',
                                       'reference', 'match', 'error'])
