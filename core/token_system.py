"""core/token_system.py"""
import re
from enum import Enum
from typing import NamedTuple, Optional

import numpy as np


class TokenType(Enum):
    OPERAND = "operand"  # 操作数（变量名或数字）
    OPERATOR = "operator"  # 二元操作符
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"
    UNKNOWN = "unknown"  # 无法识别的字符，由调用方决定如何处理


class Token(NamedTuple):
    type: TokenType
    text: str
    position: Optional[int] = None

    @property
    def is_operand(self):
        return self.type == TokenType.OPERAND

    @property
    def is_operator(self):
        return self.type == TokenType.OPERATOR

    @property
    def is_paren(self):
        return self.type in (TokenType.LEFT_PAREN, TokenType.RIGHT_PAREN)

    def __str__(self):
        return self.text


class OperatorInfo(NamedTuple):
    name: str
    precedence: int
    right_assoc: bool = False
    arity: int = 2


# 操作符定义：优先级 ^ > * / > + -，只有 ^ 是右结合
OPERATOR_DEFINITIONS = {
    '+': OperatorInfo('add', 1),
    '-': OperatorInfo('sub', 1),
    '*': OperatorInfo('mul', 2),
    '/': OperatorInfo('div', 2),
    '^': OperatorInfo('pow', 3, right_assoc=True),
}

LEFT_PAREN = '('
RIGHT_PAREN = ')'

_STRICT_NUMBER = re.compile(r'^([0-9]+\.?[0-9]*|\.[0-9]+)$')
_LEADING_NUMBER = re.compile(r'^[0-9]*\.?[0-9]*')


def is_operator_char(ch):
    return ch in OPERATOR_DEFINITIONS


def precedence(symbol):
    """操作符优先级；括号和其他字符为0"""
    info = OPERATOR_DEFINITIONS.get(symbol)
    return info.precedence if info else 0


def is_right_associative(symbol):
    info = OPERATOR_DEFINITIONS.get(symbol)
    return bool(info and info.right_assoc)


def is_numeric_text(text, strict=True):
    """
    判断Token文本是否为数值。

    strict=True: 整个文本必须是数字，最多一个小数点，且至少一个数字
    strict=False: 旧版启发式，只看首字符是否为数字或小数点（'.5abc' 也算数值）
    """
    if not text:
        return False
    if strict:
        return bool(_STRICT_NUMBER.match(text))
    return text[0].isdigit() or text[0] == '.'


def parse_numeric(text, strict=True):
    """
    把数值文本解析为 float64。
    宽松模式按 atof 语义只取前缀（'.5abc' -> 0.5，'.' -> 0.0）
    """
    if strict:
        return np.float64(text)
    prefix = _LEADING_NUMBER.match(text).group(0)
    if not prefix or prefix == '.':
        return np.float64(0.0)
    return np.float64(prefix)


def _is_operand_start(ch, leading_dot):
    if ch.isascii() and ch.isalnum():
        return True
    return leading_dot and ch == '.'


def _is_operand_char(ch):
    return (ch.isascii() and ch.isalnum()) or ch == '.'


def tokenize(expression, leading_dot=False):
    """
    从左到右扫描表达式，惰性产生Token（跳过空白）。

    Args:
        expression: 原始表达式字符串
        leading_dot: 是否允许操作数以 '.' 开头（后缀表达式读取时使用）
    Yields:
        Token；无法识别的字符产生 TokenType.UNKNOWN，不在此处报错
    """
    i = 0
    length = len(expression)
    while i < length:
        ch = expression[i]
        if ch.isspace():
            i += 1
            continue

        if _is_operand_start(ch, leading_dot):
            start = i
            while i < length and _is_operand_char(expression[i]):
                i += 1
            yield Token(TokenType.OPERAND, expression[start:i], start)
            continue

        if ch == LEFT_PAREN:
            yield Token(TokenType.LEFT_PAREN, ch, i)
        elif ch == RIGHT_PAREN:
            yield Token(TokenType.RIGHT_PAREN, ch, i)
        elif is_operator_char(ch):
            yield Token(TokenType.OPERATOR, ch, i)
        else:
            yield Token(TokenType.UNKNOWN, ch, i)
        i += 1
