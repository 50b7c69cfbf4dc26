"""core/parser.py - 调度场算法：中缀Token序列 -> 后缀(RPN)序列"""
import logging

from core.token_system import TokenType, OPERATOR_DEFINITIONS
from core.errors import UnmatchedParenthesisError, MissingOperandError

logger = logging.getLogger(__name__)


class ShuntingYardParser:

    @staticmethod
    def _should_pop(top, op_info):
        """栈顶是否应在当前操作符入栈前弹出"""
        if top.type == TokenType.FUNCTION:
            # 函数总是比后续操作符绑定更紧
            return True
        if top.type != TokenType.OPERATOR:
            return False
        top_info = OPERATOR_DEFINITIONS[top.name]
        if op_info.right_associative:
            return top_info.precedence > op_info.precedence
        return top_info.precedence >= op_info.precedence

    @staticmethod
    def _check_right_operand(tokens, idx):
        """操作符右侧紧跟 ')' 或另一个操作符时缺少操作数"""
        if idx + 1 >= len(tokens):
            # 末尾的操作符交给求值器报 InsufficientOperands
            return
        nxt = tokens[idx + 1]
        if nxt.type == TokenType.OPERATOR or (nxt.type == TokenType.PAREN and not nxt.is_open):
            raise MissingOperandError(tokens[idx].name)

    @staticmethod
    def to_postfix(tokens):
        """
        Args:
            tokens: Tokenizer 输出的中缀Token序列
        Returns:
            后缀Token序列
        Raises:
            UnmatchedParenthesisError / MissingOperandError
        """
        output = []
        op_stack = []

        for idx, token in enumerate(tokens):
            if token.type == TokenType.NUMBER:
                output.append(token)

            elif token.type == TokenType.FUNCTION:
                op_stack.append(token)

            elif token.type == TokenType.PAREN:
                if token.is_open:
                    op_stack.append(token)
                    continue

                while op_stack and not op_stack[-1].is_open:
                    output.append(op_stack.pop())
                if not op_stack:
                    logger.debug("Closing parenthesis without matching '('")
                    raise UnmatchedParenthesisError()
                op_stack.pop()  # 丢弃 '('

                # 括号前是函数则立即应用
                if op_stack and op_stack[-1].type == TokenType.FUNCTION:
                    output.append(op_stack.pop())

            elif token.type == TokenType.OPERATOR:
                ShuntingYardParser._check_right_operand(tokens, idx)
                op_info = OPERATOR_DEFINITIONS[token.name]
                while op_stack and ShuntingYardParser._should_pop(op_stack[-1], op_info):
                    output.append(op_stack.pop())
                op_stack.append(token)

        # 弹出剩余操作符
        while op_stack:
            top = op_stack.pop()
            if top.is_open:
                logger.debug("Unclosed '(' left on operator stack")
                raise UnmatchedParenthesisError()
            output.append(top)

        logger.debug(f"Postfix: {' '.join(t.name for t in output)}")
        return output
