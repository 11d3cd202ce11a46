"""中缀转后缀 - 调度场算法（shunting-yard）"""
import logging
from collections.abc import Sequence
from enum import Enum

from config.config import ENGINE_CONFIG
from core.errors import MismatchedParentheses, UnknownToken
from core.stack import TokenStack
from core.steps import StepRecorder, collect_steps
from core.token_system import TokenType, tokenize, precedence, is_right_associative

logger = logging.getLogger(__name__)


class ConverterState(Enum):
    SCANNING = "scanning"
    FLUSHING_FOR_PAREN = "flushing_for_paren"
    FLUSHING_FOR_PRECEDENCE = "flushing_for_precedence"
    FAILED = "failed"
    DONE = "done"


class PostfixSequence(Sequence):
    """转换结果：不可变的Token序列，顺序即求值顺序"""

    def __init__(self, tokens):
        self._tokens = tuple(tokens)

    def __getitem__(self, index):
        return self._tokens[index]

    def __len__(self):
        return len(self._tokens)

    def __eq__(self, other):
        if isinstance(other, PostfixSequence):
            return self.texts == other.texts
        return NotImplemented

    def __hash__(self):
        return hash(tuple(self.texts))

    @property
    def tokens(self):
        return self._tokens

    @property
    def texts(self):
        return [token.text for token in self._tokens]

    def to_string(self, trailing_space=None):
        if trailing_space is None:
            trailing_space = ENGINE_CONFIG['postfix_trailing_space']
        separator = ENGINE_CONFIG['postfix_separator']
        text = separator.join(self.texts)
        if trailing_space and text:
            text += separator
        return text

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"PostfixSequence({self.texts!r})"


class ShuntingYardConverter:
    """
    中缀表达式转后缀表达式。

    每处理完一个Token向观察者发出一次 StepEvent；观察者同步调用，
    转换器不会等待它。
    """

    def __init__(self, skip_unknown_tokens=None, emit_flush_steps=None):
        if skip_unknown_tokens is None:
            skip_unknown_tokens = ENGINE_CONFIG['skip_unknown_tokens']
        if emit_flush_steps is None:
            emit_flush_steps = ENGINE_CONFIG['emit_flush_steps']
        self.skip_unknown_tokens = skip_unknown_tokens
        self.emit_flush_steps = emit_flush_steps

    def convert(self, expression, on_step=None):
        """
        Args:
            expression: 中缀表达式字符串
            on_step: 可选回调，参数为 StepEvent
        Returns:
            PostfixSequence
        Raises:
            MismatchedParentheses, UnknownToken
        """
        op_stack = TokenStack()
        output = []
        unknown_tokens = []
        recorder = StepRecorder(on_step, source='infix->postfix')

        def emit(action, token, state):
            recorder.emit(action, token, op_stack, output, state=state.value)

        def fail(error, token):
            emit('error', token, ConverterState.FAILED)
            logger.debug(f"Conversion of '{expression}' failed: {error.message}")
            raise error

        for token in tokenize(expression):
            if token.type == TokenType.OPERAND:
                output.append(token)
                emit('operand', token, ConverterState.SCANNING)

            elif token.type == TokenType.LEFT_PAREN:
                op_stack.push(token)
                emit('push_paren', token, ConverterState.SCANNING)

            elif token.type == TokenType.RIGHT_PAREN:
                # 弹出直到遇到左括号
                while not op_stack.is_empty() and op_stack.peek().type != TokenType.LEFT_PAREN:
                    output.append(op_stack.pop())
                if op_stack.is_empty():
                    fail(MismatchedParentheses(
                        f"Mismatched parentheses: unmatched ')' at position {token.position}",
                        token.text, token.position), token)
                op_stack.pop()
                emit('discard_paren', token, ConverterState.FLUSHING_FOR_PAREN)

            elif token.type == TokenType.OPERATOR:
                current = token.text
                while not op_stack.is_empty():
                    top = op_stack.peek()
                    if top.type == TokenType.LEFT_PAREN:
                        break
                    top_prec, cur_prec = precedence(top.text), precedence(current)
                    if top_prec > cur_prec or (top_prec == cur_prec and not is_right_associative(current)):
                        output.append(op_stack.pop())
                    else:
                        break
                op_stack.push(token)
                emit('push_operator', token, ConverterState.FLUSHING_FOR_PRECEDENCE)

            else:
                logger.warning(f"Unknown token encountered: '{token.text}' at position {token.position}")
                unknown_tokens.append(token)
                emit('unknown', token, ConverterState.SCANNING)

        # 输入结束，弹出剩余操作符
        while not op_stack.is_empty():
            popped = op_stack.pop()
            if popped.is_paren:
                fail(MismatchedParentheses(
                    f"Mismatched parentheses: unmatched '(' at position {popped.position}",
                    popped.text, popped.position), popped)
            output.append(popped)
            if self.emit_flush_steps:
                emit('flush', popped, ConverterState.SCANNING)

        if unknown_tokens and not self.skip_unknown_tokens:
            first = unknown_tokens[0]
            chars = ', '.join(f"'{t.text}'" for t in unknown_tokens)
            fail(UnknownToken(first.text, first.position,
                              message=f"Unknown token(s) encountered: {chars}"), first)

        emit('done', None, ConverterState.DONE)
        return PostfixSequence(output)

    def trace(self, expression):
        """返回 (PostfixSequence, [StepEvent, ...])"""
        return collect_steps(self.convert, expression)


def convert(infix, on_step=None):
    return ShuntingYardConverter().convert(infix, on_step=on_step)
