"""utils/trace.py"""
import pandas as pd

TRACE_COLUMNS = ['step', 'action', 'token', 'state', 'stack', 'output']


def trace_to_frame(events, separator=' '):
    """把 StepEvent 列表整理成表格，栈和输出用空格拼接"""
    rows = []
    for event in events:
        rows.append({
            'step': event.step,
            'action': event.action,
            'token': event.token,
            'state': event.state,
            'stack': separator.join(event.stack),
            'output': separator.join(event.output),
        })
    return pd.DataFrame(rows, columns=TRACE_COLUMNS)


def format_stack_listing(listing):
    """
    把 StackSession.listing() 格式化为多行文本：
    #3: X  <- Top
    #2: 4
    """
    lines = []
    for index, token, is_top in listing:
        line = f"#{index}: {token}"
        if is_top:
            line += "  <- Top"
        lines.append(line)
    return lines


def describe_step(event):
    """单步事件的一句话描述"""
    if event.action == 'operand':
        return f"Read operand: {event.token}"
    if event.action == 'push_paren':
        return "Push '(' onto operator stack."
    if event.action == 'discard_paren':
        return "Pop operators until '(' found and discard it."
    if event.action == 'push_operator':
        return f"Push operator '{event.token}' onto stack."
    if event.action == 'flush':
        return f"Pop remaining operator: {event.token}"
    if event.action == 'combine':
        return f"Processed token '{event.token}', built {event.stack_top}"
    if event.action == 'apply_operator':
        return f"Applied '{event.token}', result {event.stack_top}"
    if event.action == 'unknown':
        return f"Unknown token encountered: {event.token}"
    if event.action == 'error':
        return f"Error at token: {event.token}"
    if event.action == 'done':
        return f"Final postfix expression: {' '.join(event.output)}"
    return f"{event.action}: {event.token}"
