"""core/operators.py"""
import numpy as np
import logging

from core.errors import DivisionByZeroError, DomainError

logger = logging.getLogger(__name__)

# 超过该量级的 double 不再有小数部分，舍入时原样返回
MAX_EXACT_FLOAT = 2.0 ** 52


class Operators:
    """所有操作符和函数的静态方法集合，输入输出均为 float"""

    # 二元操作符========================================
    @staticmethod
    def add(operand1, operand2):
        with np.errstate(over='ignore', invalid='ignore'):
            return float(np.add(operand1, operand2))

    @staticmethod
    def sub(operand1, operand2):
        with np.errstate(over='ignore', invalid='ignore'):
            return float(np.subtract(operand1, operand2))

    @staticmethod
    def mul(operand1, operand2):
        with np.errstate(over='ignore', invalid='ignore'):
            return float(np.multiply(operand1, operand2))

    @staticmethod
    def div(operand1, operand2):
        """除法：除数为0直接报错，不做平滑"""
        if operand2 == 0:
            raise DivisionByZeroError()
        with np.errstate(over='ignore', invalid='ignore'):
            return float(np.divide(operand1, operand2))

    @staticmethod
    def power(operand1, operand2):
        """幂运算：负底数配分数指数得到NaN，不拦截"""
        with np.errstate(all='ignore'):
            return float(np.power(np.float64(operand1), np.float64(operand2)))

    # 一元函数====================
    @staticmethod
    def sin(operand):
        with np.errstate(invalid='ignore'):
            return float(np.sin(operand))

    @staticmethod
    def cos(operand):
        with np.errstate(invalid='ignore'):
            return float(np.cos(operand))

    @staticmethod
    def tan(operand):
        with np.errstate(invalid='ignore'):
            return float(np.tan(operand))

    @staticmethod
    def sqrt(operand):
        if operand < 0:
            raise DomainError('sqrt', operand)
        return float(np.sqrt(operand))

    @staticmethod
    def log(operand, base='e'):
        """log 默认自然对数；base='10' 时为常用对数"""
        if operand <= 0:
            raise DomainError('log', operand)
        if str(base) == '10':
            return float(np.log10(operand))
        return float(np.log(operand))

    @staticmethod
    def ln(operand):
        if operand <= 0:
            raise DomainError('ln', operand)
        return float(np.log(operand))

    # 结果处理====================
    @staticmethod
    def round_result(value, decimals=10):
        """
        保留 decimals 位小数，吸收二进制浮点误差（四舍五入，远离零）
        NaN/Inf 及无小数部分的大数原样返回
        """
        if not np.isfinite(value):
            return float(value)
        scale = 10.0 ** decimals
        scaled = value * scale
        if abs(scaled) >= MAX_EXACT_FLOAT:
            return float(value)
        rounded = np.trunc(scaled)
        if abs(scaled - rounded) >= 0.5:
            rounded += np.copysign(1.0, scaled)
        return float(rounded / scale)


# 操作符符号 -> 实现
BINARY_OPERATIONS = {
    '+': Operators.add,
    '-': Operators.sub,
    '*': Operators.mul,
    '/': Operators.div,
    '^': Operators.power,
}
