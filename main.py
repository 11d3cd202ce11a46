"""主程序入口 - 中缀/后缀转换、求值和交互栈"""
import argparse
import logging
import sys

from config.config import *
from core import (ShuntingYardConverter, RPNEvaluator, PostfixToInfixBuilder,
                  ExpressionError, format_result)
from session import StackSession
from utils.trace import trace_to_frame, format_stack_listing, describe_step
from validation.round_trip import check_round_trip

logger = logging.getLogger(__name__)

REPL_HELP = """Commands:
  push <token>        push a number or variable name
  pop                 pop the top token
  + | - | * | /       apply operator to the top two tokens
  show                list stack contents
  clear               empty the stack
  convert <infix>     infix to postfix
  eval <postfix>      evaluate a numeric postfix expression
  infix <postfix>     postfix to fully parenthesized infix
  help                show this text
  exit                leave the session"""


def _run_operation(mode, expression, show_steps=False, trace_csv=None):
    """执行一次转换/求值操作，返回结果文本"""
    events = []
    on_step = events.append if (show_steps or trace_csv) else None

    try:
        if mode == 'convert':
            result = str(ShuntingYardConverter().convert(expression, on_step=on_step))
        elif mode == 'evaluate':
            result = format_result(RPNEvaluator.evaluate(expression, on_step=on_step))
        elif mode == 'infix':
            result = PostfixToInfixBuilder.build(expression, on_step=on_step)
        else:
            raise ValueError(f"Unsupported mode: {mode}")
    finally:
        # 出错时也保留已经发生的步骤，便于定位
        if show_steps:
            for event in events:
                print(f"Step {event.step}: {describe_step(event)}")
                print(f"    stack -> {' '.join(event.stack)}")
                if event.output:
                    print(f"    output: {' '.join(event.output)}")
        if trace_csv and events:
            logger.info(f"Saving trace to {trace_csv}")
            trace_to_frame(events).to_csv(trace_csv, index=False)

    return result


def run_repl(session=None, input_func=input, output=print):
    """逐行读取命令操作交互栈，直到 exit 或输入结束"""
    session = session or StackSession()
    output(REPL_HELP)

    while True:
        try:
            line = input_func("> ")
        except EOFError:
            break
        line = line.strip()
        if not line:
            continue

        command, _, argument = line.partition(' ')
        argument = argument.strip()

        try:
            if command == 'exit':
                break
            elif command == 'help':
                output(REPL_HELP)
            elif command == 'push':
                output(f"Successfully pushed: {session.push(argument)}")
            elif command == 'pop':
                output(f"Popped from stack: {session.pop()}")
            elif command in SESSION_CONFIG['session_operators']:
                output(f"Operation result: {session.apply(command)}")
            elif command == 'show':
                lines = format_stack_listing(session.listing())
                output('\n'.join(lines) if lines else "(empty)")
            elif command == 'clear':
                session.clear()
                output("Stack cleared.")
            elif command == 'convert':
                output(f"Final Postfix Expression: {_run_operation('convert', argument)}")
            elif command == 'eval':
                output(f"Evaluation result: {_run_operation('evaluate', argument)}")
            elif command == 'infix':
                output(f"Infix expression: {_run_operation('infix', argument)}")
            else:
                output(f"Invalid option: {command}. Type 'help' for commands.")
        except ExpressionError as e:
            output(f"Error: {e.message}")

    return session


def main(args):
    if args.mode == 'repl':
        run_repl()
        return 0

    if args.mode == 'roundtrip':
        expressions = [args.expression] if args.expression else None
        results = check_round_trip(expressions)
        logger.info("\nRound trip results:")
        for _, row in results.iterrows():
            status = "OK" if row['match'] else f"FAIL ({row['error'] or 'mismatch'})"
            logger.info(f"{row['expression']} -> {row['postfix']} = {row['engine']} "
                        f"(reference {row['reference']}) {status}")
        if args.results_path:
            logger.info(f"Saving results to {args.results_path}")
            results.to_csv(args.results_path, index=False)
        return 0 if results['match'].all() else 1

    if not args.expression:
        logger.error(f"--expression is required for mode '{args.mode}'")
        return 2

    try:
        result = _run_operation(args.mode, args.expression,
                                show_steps=args.steps, trace_csv=args.trace_csv)
    except ExpressionError as e:
        logger.error(f"{type(e).__name__}: {e.message}")
        return 1

    print(result)
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Stack-based expression engine")

    parser.add_argument(
        "--mode",
        type=str,
        choices=["convert", "evaluate", "infix", "roundtrip", "repl"],
        default="repl",
        help="Operation to run (default: repl)"
    )
    parser.add_argument(
        "--expression",
        type=str,
        default=None,
        help="Infix expression for convert/roundtrip, postfix expression for evaluate/infix"
    )
    parser.add_argument(
        "--steps",
        action="store_true",
        help="Print every algorithm step"
    )
    parser.add_argument(
        "--trace_csv",
        type=str,
        default=None,
        help="Save the step trace to a CSV file"
    )
    parser.add_argument(
        "--results_path",
        type=str,
        default=None,
        help="Save the round trip results to a CSV file"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        help="Logging level (default: INFO)"
    )
    args = parser.parse_args()

    # 设置日志
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format=LOGGING_CONFIG["format"]
    )
    sys.exit(main(args))
