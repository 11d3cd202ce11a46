"""后缀转中缀 - 重建完全加括号的中缀表达式"""
import logging

from core.errors import InsufficientOperands, InvalidExpression, UnknownOperator
from core.stack import TokenStack
from core.steps import StepRecorder, collect_steps
from core.token_system import TokenType, tokenize

logger = logging.getLogger(__name__)


class PostfixToInfixBuilder:

    @staticmethod
    def build(postfix, on_step=None):
        """
        Args:
            postfix: 后缀表达式字符串或 PostfixSequence
            on_step: 可选回调
        Returns:
            完全加括号的中缀字符串，如 "((A + B) * C)"
        """
        stack = TokenStack()
        recorder = StepRecorder(on_step, source='postfix->infix')

        for token in tokenize(str(postfix), leading_dot=True):
            if token.type == TokenType.OPERAND:
                stack.push(token.text)
                recorder.emit('operand', token, stack)

            elif token.type == TokenType.OPERATOR:
                if stack.size() < 2:
                    logger.debug(f"Insufficient operands for operator '{token.text}'")
                    raise InsufficientOperands(token.text, stack.size(), token.position)
                # 先入栈的是左操作数
                op2 = stack.pop()
                op1 = stack.pop()
                stack.push(f"({op1} {token.text} {op2})")
                recorder.emit('combine', token, stack)

            else:
                raise UnknownOperator(token.text, token.position)

        if stack.size() != 1:
            logger.debug(f"Invalid postfix expression '{postfix}', stack size {stack.size()}")
            raise InvalidExpression(stack.size())

        return stack.pop()

    @staticmethod
    def trace(postfix):
        return collect_steps(PostfixToInfixBuilder.build, postfix)


def build_infix(postfix, on_step=None):
    return PostfixToInfixBuilder.build(postfix, on_step=on_step)
