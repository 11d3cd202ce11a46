"""core/stack.py"""
from core.errors import StackUnderflow


class TokenStack:
    """后进先出的Token栈，所有算法共用的基础结构"""

    def __init__(self, items=None):
        self._items = list(items) if items else []

    def push(self, token):
        self._items.append(token)

    def pop(self):
        """弹出栈顶元素，空栈时抛出 StackUnderflow"""
        if not self._items:
            raise StackUnderflow("Stack is empty. Cannot pop.")
        return self._items.pop()

    def peek(self):
        """查看栈顶元素（不移除）"""
        if not self._items:
            raise StackUnderflow("Stack is empty. Cannot peek.")
        return self._items[-1]

    def size(self):
        return len(self._items)

    def is_empty(self):
        return not self._items

    def clear(self):
        self._items.clear()

    def items(self):
        """从栈底到栈顶的快照"""
        return tuple(self._items)

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        # 栈顶优先
        return reversed(self._items)

    def __repr__(self):
        return f"TokenStack({list(self._items)!r})"
