"""core/errors.py - 表达式引擎的错误类型"""


class ExpressionError(ValueError):
    """所有表达式错误的基类，message 可直接展示给用户"""

    def __init__(self, message, token=None, position=None):
        super().__init__(message)
        self.message = message
        self.token = token
        self.position = position


class StackUnderflow(ExpressionError):
    def __init__(self, message="Stack is empty"):
        super().__init__(message)


class MismatchedParentheses(ExpressionError):
    def __init__(self, message="Mismatched parentheses detected", token=None, position=None):
        super().__init__(message, token, position)


class InsufficientOperands(ExpressionError):
    def __init__(self, operator, available=0, position=None):
        super().__init__(
            f"Insufficient operands for operator '{operator}' (have {available}, need 2)",
            operator, position
        )
        self.available = available


class DivisionByZero(ExpressionError):
    def __init__(self, message="Division by zero", token=None, position=None):
        super().__init__(message, token, position)


class UnknownToken(ExpressionError):
    def __init__(self, token, position=None, message=None):
        super().__init__(message or f"Unknown token encountered: {token}", token, position)


class UnknownOperator(ExpressionError):
    def __init__(self, operator, position=None):
        super().__init__(f"Unknown operator: '{operator}'", operator, position)


class NonNumericOperand(ExpressionError):
    def __init__(self, operand, position=None):
        super().__init__(f"Operand '{operand}' is not numeric", operand, position)


class InvalidExpression(ExpressionError):
    def __init__(self, stack_size, message=None):
        super().__init__(
            message or f"Invalid postfix expression, stack size {stack_size} (expected 1)"
        )
        self.stack_size = stack_size

