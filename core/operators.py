"""core/operators.py"""
import logging

import numpy as np

from config.config import ENGINE_CONFIG, SESSION_CONFIG
from core.errors import DivisionByZero, InsufficientOperands, UnknownOperator
from core.token_system import OPERATOR_DEFINITIONS, is_numeric_text, parse_numeric

logger = logging.getLogger(__name__)


class Operators:
    """二元操作符的静态方法集合（float64 运算）"""

    @staticmethod
    def add(operand1, operand2):
        return np.add(operand1, operand2)

    @staticmethod
    def sub(operand1, operand2):
        return np.subtract(operand1, operand2)

    @staticmethod
    def mul(operand1, operand2):
        with np.errstate(over='ignore'):
            return np.multiply(operand1, operand2)

    @staticmethod
    def div(operand1, operand2):
        """除数恰好为0时报错，不做 epsilon 替换"""
        if operand2 == 0:
            raise DivisionByZero(f"Division by zero: {operand1} / {operand2}", '/')
        return np.divide(operand1, operand2)

    @staticmethod
    def pow(operand1, operand2):
        with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
            return np.power(np.float64(operand1), np.float64(operand2))

    @staticmethod
    def apply(symbol, operand1, operand2):
        """按操作符符号分派，未知符号抛出 UnknownOperator"""
        info = OPERATOR_DEFINITIONS.get(symbol)
        if info is None:
            raise UnknownOperator(symbol)
        op_method = getattr(Operators, info.name)
        return np.float64(op_method(np.float64(operand1), np.float64(operand2)))


def format_result(value, precision=None):
    """按固定小数位格式化数值（交互栈与结果展示使用）"""
    if precision is None:
        precision = SESSION_CONFIG['result_precision']
    return f"{float(value):.{precision}f}"


def format_value(value):
    """中间结果压栈时保留完整精度"""
    return repr(float(value))


class BinaryOpApplier:
    """
    交互栈上的单步运算：弹出栈顶两个元素，数值则计算，符号则拼接表达式。

    数值判断默认严格（整个Token必须是数字）；strict_numeric=False 时
    沿用旧版的首字符判断。
    """

    def __init__(self, strict_numeric=None, precision=None, operators=None):
        if strict_numeric is None:
            strict_numeric = ENGINE_CONFIG['strict_numeric']
        self.strict_numeric = strict_numeric
        self.precision = SESSION_CONFIG['result_precision'] if precision is None else precision
        self.operators = tuple(operators or SESSION_CONFIG['session_operators'])

    def is_numeric(self, text):
        return is_numeric_text(text, strict=self.strict_numeric)

    def apply(self, stack, operator):
        """
        对 stack 原地应用 operator。

        Raises:
            UnknownOperator: 不支持的操作符
            InsufficientOperands: 栈中少于两个元素（栈不变）
            DivisionByZero: 除数为0，栈恢复原状
        """
        if operator not in self.operators:
            raise UnknownOperator(operator)
        if stack.size() < 2:
            raise InsufficientOperands(operator, stack.size())

        top = stack.pop()
        below = stack.pop()
        a, b = str(top), str(below)

        if not (self.is_numeric(a) and self.is_numeric(b)):
            expr = f"({b}{operator}{a})"
            stack.push(expr)
            logger.debug(f"Symbolic operation result: {expr}")
            return expr

        val_a = parse_numeric(a, strict=self.strict_numeric)
        val_b = parse_numeric(b, strict=self.strict_numeric)
        try:
            result = Operators.apply(operator, val_b, val_a)
        except DivisionByZero:
            # 恢复原栈顺序：b 在下，a 在上
            stack.push(below)
            stack.push(top)
            logger.warning(f"Division by zero: {b} / {a}, stack restored")
            raise

        text = format_result(result, self.precision)
        stack.push(text)
        logger.debug(f"Operation result: {b} {operator} {a} = {text}")
        return text


def apply_binary_op(stack, operator):
    """对交互栈栈顶两个元素应用二元操作符，返回压入的新Token文本"""
    return BinaryOpApplier().apply(stack, operator)
