"""核心模块 - Token系统、调度场解析器、RPN评估器和操作符"""
from .errors import (
    ErrorKind, ExpressionError, InvalidTokenError, DomainError,
    InvalidFunctionError, UnmatchedParenthesisError, DivisionByZeroError,
    InsufficientOperandsError, InvalidExpressionError, EmptyExpressionError,
    MissingOperandError
)
from .token_system import (
    TokenType, Token, OperatorInfo, OPERATOR_DEFINITIONS,
    FUNCTION_DEFINITIONS, Tokenizer
)
from .parser import ShuntingYardParser
from .rpn_evaluator import RPNEvaluator
from .operators import Operators

tokenize = Tokenizer.tokenize
to_postfix = ShuntingYardParser.to_postfix
evaluate_postfix = RPNEvaluator.evaluate

__all__ = [
    'ErrorKind', 'ExpressionError', 'InvalidTokenError', 'DomainError',
    'InvalidFunctionError', 'UnmatchedParenthesisError', 'DivisionByZeroError',
    'InsufficientOperandsError', 'InvalidExpressionError', 'EmptyExpressionError',
    'MissingOperandError',
    'TokenType', 'Token', 'OperatorInfo', 'OPERATOR_DEFINITIONS',
    'FUNCTION_DEFINITIONS', 'Tokenizer',
    'ShuntingYardParser', 'RPNEvaluator', 'Operators',
    'tokenize', 'to_postfix', 'evaluate_postfix'
]
