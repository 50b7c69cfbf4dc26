"""core/errors.py - 表达式处理的错误类型"""
from enum import Enum


class ErrorKind(Enum):
    INVALID_TOKEN = "invalid_token"
    INVALID_FUNCTION = "invalid_function"
    UNMATCHED_PARENTHESIS = "unmatched_parenthesis"
    DIVISION_BY_ZERO = "division_by_zero"
    INSUFFICIENT_OPERANDS = "insufficient_operands"
    INVALID_EXPRESSION = "invalid_expression"
    EMPTY_EXPRESSION = "empty_expression"
    MISSING_OPERAND = "missing_operand"


class ExpressionError(Exception):
    """所有表达式错误的基类，kind 标识错误种类"""
    kind = None

    def __init__(self, payload=None):
        self.payload = payload
        super().__init__(self.description)

    @property
    def description(self):
        return "Expression error"


class InvalidTokenError(ExpressionError):
    kind = ErrorKind.INVALID_TOKEN

    @property
    def description(self):
        return f"Invalid token: '{self.payload}'"


class DomainError(InvalidTokenError):
    """sqrt/log 定义域错误，沿用 InvalidToken 的展示方式"""

    def __init__(self, function, value):
        self.function = function
        self.value = value
        if function == 'sqrt':
            message = "sqrt of negative number"
        else:
            message = "log of non-positive number"
        super().__init__(message)


class InvalidFunctionError(ExpressionError):
    kind = ErrorKind.INVALID_FUNCTION

    @property
    def description(self):
        return f"Invalid function: '{self.payload}'"


class UnmatchedParenthesisError(ExpressionError):
    kind = ErrorKind.UNMATCHED_PARENTHESIS

    @property
    def description(self):
        return "Unmatched parenthesis"


class DivisionByZeroError(ExpressionError):
    kind = ErrorKind.DIVISION_BY_ZERO

    @property
    def description(self):
        return "Division by zero"


class InsufficientOperandsError(ExpressionError):
    kind = ErrorKind.INSUFFICIENT_OPERANDS

    @property
    def description(self):
        return "Insufficient operands for operation"


class InvalidExpressionError(ExpressionError):
    kind = ErrorKind.INVALID_EXPRESSION

    @property
    def description(self):
        return "Invalid expression structure"


class EmptyExpressionError(ExpressionError):
    kind = ErrorKind.EMPTY_EXPRESSION

    @property
    def description(self):
        return "Empty expression"


class MissingOperandError(ExpressionError):
    kind = ErrorKind.MISSING_OPERAND

    @property
    def description(self):
        return f"Missing operand for operator '{self.payload}'"
