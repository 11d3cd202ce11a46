"""core/steps.py - 算法步骤快照，供可视化界面逐步展示"""
import logging
from typing import NamedTuple, Optional, Tuple

logger = logging.getLogger(__name__)


class StepEvent(NamedTuple):
    step: int  # 从1开始计数
    action: str  # 本步执行的动作，如 'operand' / 'push_operator' / 'flush'
    token: Optional[str]  # 本步处理的Token文本
    state: Optional[str]  # 转换器状态（仅中缀转后缀时有值）
    stack: Tuple[str, ...]  # 栈快照，栈底在前
    output: Tuple[str, ...]  # 目前累计的输出

    @property
    def stack_top(self):
        return self.stack[-1] if self.stack else None


class StepRecorder:
    """把每一步的快照转交给观察者回调；没有观察者时只计数"""

    def __init__(self, on_step=None, source=''):
        self.on_step = on_step
        self.source = source
        self.count = 0

    def emit(self, action, token, stack, output=(), state=None):
        self.count += 1
        event = StepEvent(
            step=self.count,
            action=action,
            token=None if token is None else str(token),
            state=state,
            stack=tuple(str(item) for item in stack.items()),
            output=tuple(str(item) for item in output),
        )
        logger.debug(f"[{self.source}] step {event.step}: {action} {event.token!r} "
                     f"stack={list(event.stack)} output={list(event.output)}")
        if self.on_step is not None:
            self.on_step(event)
        return event


def collect_steps(operation, expression, **kwargs):
    """运行一次操作并收集全部步骤事件（拉取式用法）"""
    events = []
    result = operation(expression, on_step=events.append, **kwargs)
    return result, events
