"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.token_system import TokenType
from core.operators import Operators, BINARY_OPERATIONS
from core.errors import (
    EmptyExpressionError, InsufficientOperandsError,
    InvalidExpressionError, InvalidFunctionError, InvalidTokenError
)

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估后缀表达式的值"""

    @staticmethod
    def _apply_function(name, operand, log_base):
        if name == 'log':
            return Operators.log(operand, base=log_base)
        op_method = getattr(Operators, name, None)
        if op_method is None:
            raise InvalidFunctionError(name)
        return op_method(operand)

    @staticmethod
    def evaluate(postfix, log_base='e', round_decimals=10):
        """
        单遍扫描后缀序列，用一个数值栈求值
        Args:
            postfix: 后缀Token序列
            log_base: 'e' 或 '10'，决定 log 的底数（ln 恒为自然对数）
            round_decimals: 结果保留的小数位数，None 表示不舍入
        Returns:
            float 结果
        """
        if not postfix:
            raise EmptyExpressionError()

        stack = []

        for token in postfix:
            if token.type == TokenType.NUMBER:
                stack.append(token.value)

            # ================== 二元操作符 ==================
            elif token.type == TokenType.OPERATOR:
                if len(stack) < 2:
                    logger.debug(f"Insufficient operands for {token.name}")
                    raise InsufficientOperandsError()
                operand2 = stack.pop()
                operand1 = stack.pop()
                op_method = BINARY_OPERATIONS.get(token.name)
                if op_method is None:
                    raise InvalidTokenError(token.name)
                stack.append(op_method(operand1, operand2))

            # ================== 一元函数 ==================
            elif token.type == TokenType.FUNCTION:
                if not stack:
                    logger.debug(f"Insufficient operands for {token.name}")
                    raise InsufficientOperandsError()
                operand = stack.pop()
                stack.append(RPNEvaluator._apply_function(token.name, operand, log_base))

            else:
                # 后缀序列中不应再出现括号
                logger.debug(f"Unexpected token in postfix: {token!r}")
                raise InvalidExpressionError()

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise InvalidExpressionError()

        result = stack[0]
        if round_decimals is not None:
            result = Operators.round_result(result, round_decimals)
        return result
