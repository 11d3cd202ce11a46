"""交互栈会话 - 手动压栈、出栈和单步运算"""
import logging

from config.config import SESSION_CONFIG
from core import TokenStack, BinaryOpApplier, UnknownToken

logger = logging.getLogger(__name__)


class StackSession:
    """
    交互模式下的工作栈。栈在多次操作之间保持，直到会话结束。
    """

    def __init__(self, applier=None, allow_leading_dot=None):
        self.stack = TokenStack()
        self.applier = applier or BinaryOpApplier()
        if allow_leading_dot is None:
            allow_leading_dot = SESSION_CONFIG['allow_leading_dot']
        self.allow_leading_dot = allow_leading_dot

    def validate_token(self, text):
        """压栈的Token只能由字母、数字和小数点组成"""
        if not text:
            raise UnknownToken(text, message="Empty input! Nothing pushed.")
        for i, ch in enumerate(text):
            if not ((ch.isascii() and ch.isalnum()) or ch == '.'):
                raise UnknownToken(ch, i, message=f"Invalid token '{text}': use alphanumeric chars only.")
        if text[0] == '.' and not self.allow_leading_dot:
            raise UnknownToken(text, 0, message=f"Invalid token '{text}': cannot start with '.'")

    def push(self, text):
        text = text.strip()
        self.validate_token(text)
        self.stack.push(text)
        logger.info(f"Successfully pushed: {text}")
        return text

    def pop(self):
        value = self.stack.pop()
        logger.info(f"Popped from stack: {value}")
        return value

    def apply(self, operator):
        """应用二元操作符，返回压入栈顶的结果"""
        result = self.applier.apply(self.stack, operator)
        logger.info(f"Operation result: {result}")
        return result

    def clear(self):
        self.stack.clear()

    def listing(self):
        """
        栈内容，栈顶在前：[(序号, Token, 是否栈顶), ...]，序号从栈底的1开始
        """
        items = self.stack.items()
        size = len(items)
        return [(size - i, items[size - 1 - i], i == 0) for i in range(size)]

    def snapshot(self):
        return self.stack.items()

    def __len__(self):
        return self.stack.size()
