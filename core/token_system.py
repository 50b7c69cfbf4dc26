"""core/token_system.py"""
import logging
from enum import Enum

from core.errors import InvalidTokenError, InvalidFunctionError

logger = logging.getLogger(__name__)


class TokenType(Enum):
    NUMBER = "number"      # 数值字面量
    OPERATOR = "operator"  # 二元操作符
    PAREN = "paren"        # 括号
    FUNCTION = "function"  # 一元函数


class OperatorInfo:
    def __init__(self, precedence, right_associative=False, arity=2):
        self.precedence = precedence
        self.right_associative = right_associative
        self.arity = arity

    def __repr__(self):
        return (f"OperatorInfo(precedence={self.precedence}, "
                f"right_associative={self.right_associative})")


# 操作符优先级表：^ 最高且唯一右结合
OPERATOR_DEFINITIONS = {
    '^': OperatorInfo(4, right_associative=True),
    '*': OperatorInfo(3),
    '/': OperatorInfo(3),
    '+': OperatorInfo(2),
    '-': OperatorInfo(2),
}

# 函数名 -> 参数个数
FUNCTION_DEFINITIONS = {
    'sin': 1,
    'cos': 1,
    'tan': 1,
    'sqrt': 1,
    'log': 1,
    'ln': 1,
}

PAREN_SYMBOLS = ('(', ')')


class Token:
    """不可变Token：name 为符号/函数名/字面量文本，value 仅数字有"""
    __slots__ = ('_type', '_name', '_value')

    def __init__(self, token_type, name, value=None):
        self._type = token_type
        self._name = name
        self._value = value

    @property
    def type(self):
        return self._type

    @property
    def name(self):
        return self._name

    @property
    def value(self):
        return self._value

    @property
    def arity(self):
        if self._type == TokenType.OPERATOR:
            return OPERATOR_DEFINITIONS[self._name].arity
        if self._type == TokenType.FUNCTION:
            return FUNCTION_DEFINITIONS[self._name]
        return 0

    @property
    def is_open(self):
        return self._type == TokenType.PAREN and self._name == '('

    @classmethod
    def number(cls, value, text=None):
        value = float(value)
        return cls(TokenType.NUMBER, text if text is not None else repr(value), value=value)

    @classmethod
    def operator(cls, symbol):
        if symbol not in OPERATOR_DEFINITIONS:
            raise InvalidTokenError(symbol)
        return cls(TokenType.OPERATOR, symbol)

    @classmethod
    def paren(cls, is_open):
        return cls(TokenType.PAREN, '(' if is_open else ')')

    @classmethod
    def function(cls, name):
        if name not in FUNCTION_DEFINITIONS:
            raise InvalidFunctionError(name)
        return cls(TokenType.FUNCTION, name)

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        if self._type == TokenType.NUMBER:
            return other._type == TokenType.NUMBER and self._value == other._value
        return self._type == other._type and self._name == other._name

    def __hash__(self):
        if self._type == TokenType.NUMBER:
            return hash((self._type, self._value))
        return hash((self._type, self._name))

    def __repr__(self):
        if self._type == TokenType.NUMBER:
            return f"Token(number, {self._value!r})"
        return f"Token({self._type.value}, {self._name!r})"


class Tokenizer:
    """把表达式字符串切分为Token序列"""

    @staticmethod
    def _sign_allowed(tokens):
        """负号可以并入数字的位置：开头、'(' 之后、操作符之后"""
        if not tokens:
            return True
        last = tokens[-1]
        return last.is_open or last.type == TokenType.OPERATOR

    @staticmethod
    def _read_number(expression, i):
        """从 i 开始读取数字串（可带前导负号），返回 (Token, 新位置)"""
        sign = ''
        if expression[i] == '-':
            sign = '-'
            i += 1
            # 负号与数字之间允许空白
            while i < len(expression) and expression[i].isspace():
                i += 1
        start = i
        while i < len(expression) and (expression[i].isdigit() or expression[i] == '.'):
            i += 1
        text = sign + expression[start:i]
        try:
            value = float(text)
        except ValueError:
            logger.debug(f"Unparsable numeric literal: {text!r}")
            raise InvalidTokenError(text) from None
        return Token.number(value, text), i

    @staticmethod
    def tokenize(expression):
        """
        单次从左到右扫描

        Args:
            expression: 原始表达式字符串
        Returns:
            Token列表；空串或纯空白返回空列表
        Raises:
            InvalidTokenError / InvalidFunctionError
        """
        tokens = []
        i = 0
        n = len(expression)

        while i < n:
            ch = expression[i]

            if ch.isspace():
                i += 1
                continue

            # 标识符：整段字母必须是已知函数名
            if ch.isalpha():
                start = i
                while i < n and expression[i].isalpha():
                    i += 1
                name = expression[start:i]
                if name not in FUNCTION_DEFINITIONS:
                    logger.debug(f"Unknown identifier: {name!r}")
                    raise InvalidFunctionError(name)
                tokens.append(Token.function(name))
                continue

            if ch.isdigit() or ch == '.' or (ch == '-' and Tokenizer._sign_allowed(tokens)):
                token, i = Tokenizer._read_number(expression, i)
                tokens.append(token)
                continue

            if ch in OPERATOR_DEFINITIONS:
                tokens.append(Token.operator(ch))
            elif ch in PAREN_SYMBOLS:
                tokens.append(Token.paren(ch == '('))
            else:
                logger.debug(f"Unexpected character {ch!r} at position {i}")
                raise InvalidTokenError(ch)
            i += 1

        logger.debug(f"Tokenized {expression!r} into {len(tokens)} tokens")
        return tokens

    @staticmethod
    def check_parentheses(expression):
        """括号配对预检查"""
        balance = 0
        for ch in expression:
            if ch == '(':
                balance += 1
            elif ch == ')':
                balance -= 1
                if balance < 0:
                    return False
        return balance == 0
