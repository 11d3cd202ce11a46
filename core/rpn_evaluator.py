"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

import numpy as np

from core.errors import (InsufficientOperands, InvalidExpression,
                         NonNumericOperand, UnknownOperator)
from core.operators import Operators, format_value
from core.stack import TokenStack
from core.steps import StepRecorder, collect_steps
from core.token_system import TokenType, tokenize, is_numeric_text

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估纯数值后缀表达式的值"""

    @staticmethod
    def evaluate(postfix, on_step=None):
        """
        Args:
            postfix: 后缀表达式字符串（空格分隔）或 PostfixSequence
            on_step: 可选回调，每处理一个Token调用一次
        Returns:
            float 结果
        Raises:
            NonNumericOperand, InsufficientOperands, DivisionByZero,
            UnknownOperator, InvalidExpression
        """
        stack = TokenStack()
        recorder = StepRecorder(on_step, source='evaluate')

        for token in tokenize(str(postfix), leading_dot=True):
            if token.type == TokenType.OPERAND:
                # 操作数必须是数字，变量名不在求值范围内
                if not is_numeric_text(token.text, strict=True):
                    logger.debug(f"Non-numeric operand '{token.text}' at position {token.position}")
                    raise NonNumericOperand(token.text, token.position)
                stack.push(format_value(np.float64(token.text)))
                recorder.emit('operand', token, stack)

            elif token.type == TokenType.OPERATOR:
                if stack.size() < 2:
                    logger.debug(f"Insufficient operands for {token.text}")
                    raise InsufficientOperands(token.text, stack.size(), token.position)
                operand2 = stack.pop()
                operand1 = stack.pop()

                result = Operators.apply(token.text, np.float64(operand1), np.float64(operand2))
                stack.push(format_value(result))
                recorder.emit('apply_operator', token, stack)

            else:
                # 括号或无法识别的字符都不是合法的后缀操作符
                logger.debug(f"Unknown operator '{token.text}' at position {token.position}")
                raise UnknownOperator(token.text, token.position)

        if stack.size() != 1:
            logger.debug(f"Stack has {stack.size()} elements after evaluation, expected 1")
            raise InvalidExpression(stack.size())

        return float(stack.pop())

    @staticmethod
    def trace(postfix):
        return collect_steps(RPNEvaluator.evaluate, postfix)


def evaluate(postfix, on_step=None):
    return RPNEvaluator.evaluate(postfix, on_step=on_step)
