"""核心模块 - Token系统、栈、转换器、求值器和操作符"""
from .errors import (
    ExpressionError, StackUnderflow, MismatchedParentheses, InsufficientOperands,
    DivisionByZero, UnknownToken, UnknownOperator, NonNumericOperand, InvalidExpression
)
from .token_system import (
    TokenType, Token, OPERATOR_DEFINITIONS, tokenize, precedence, is_numeric_text
)
from .stack import TokenStack
from .steps import StepEvent
from .converter import ShuntingYardConverter, PostfixSequence, ConverterState, convert
from .infix_builder import PostfixToInfixBuilder, build_infix
from .rpn_evaluator import RPNEvaluator, evaluate
from .operators import Operators, BinaryOpApplier, apply_binary_op, format_result

__all__ = [
    'ExpressionError', 'StackUnderflow', 'MismatchedParentheses', 'InsufficientOperands',
    'DivisionByZero', 'UnknownToken', 'UnknownOperator', 'NonNumericOperand',
    'InvalidExpression',
    'TokenType', 'Token', 'OPERATOR_DEFINITIONS', 'tokenize', 'precedence', 'is_numeric_text',
    'TokenStack', 'StepEvent',
    'ShuntingYardConverter', 'PostfixSequence', 'ConverterState', 'convert',
    'PostfixToInfixBuilder', 'build_infix',
    'RPNEvaluator', 'evaluate',
    'Operators', 'BinaryOpApplier', 'apply_binary_op', 'format_result',
]
