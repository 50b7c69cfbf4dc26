import logging
from typing import Iterable, List, Optional

import numpy as np
import pandas as pd

from config.config import CALCULATOR_CONFIG
from core import (
    Tokenizer, ShuntingYardParser, RPNEvaluator, Token,
    ExpressionError, EmptyExpressionError, UnmatchedParenthesisError
)

logger = logging.getLogger(__name__)


class ExpressionEvaluator:
    """字符串 -> Tokenizer -> 调度场 -> RPN求值，任一阶段出错即抛出"""

    def __init__(self, log_base: Optional[str] = None, round_decimals: Optional[int] = None,
                 precheck_parentheses: Optional[bool] = None):
        self.log_base = str(log_base if log_base is not None else CALCULATOR_CONFIG['log_base'])
        self.round_decimals = (round_decimals if round_decimals is not None
                               else CALCULATOR_CONFIG['round_decimals'])
        self.precheck_parentheses = (precheck_parentheses if precheck_parentheses is not None
                                     else CALCULATOR_CONFIG['precheck_parentheses'])
        if self.log_base not in ('e', '10'):
            raise ValueError(f"Unsupported log base: {self.log_base}")

    def to_postfix(self, expression: str) -> List[Token]:
        """
        Args:
            expression: 中缀表达式字符串
        Returns:
            后缀Token序列
        """
        expr = (expression or "").strip()
        if self.precheck_parentheses and not Tokenizer.check_parentheses(expr):
            logger.debug(f"Parenthesis pre-check failed: {expr!r}")
            raise UnmatchedParenthesisError()

        tokens = Tokenizer.tokenize(expr)
        if not tokens:
            raise EmptyExpressionError()
        return ShuntingYardParser.to_postfix(tokens)

    def evaluate(self, expression: str) -> float:
        postfix = self.to_postfix(expression)
        result = RPNEvaluator.evaluate(
            postfix,
            log_base=self.log_base,
            round_decimals=self.round_decimals
        )
        logger.debug(f"{expression!r} = {result!r}")
        return result

    def evaluate_many(self, expressions: Iterable[str]) -> pd.DataFrame:
        """
        逐个求值，失败的表达式 result 为 NaN，error 为错误描述
        Returns:
            DataFrame[expression, result, error]
        """
        rows = []
        for expression in expressions:
            try:
                rows.append((expression, self.evaluate(expression), None))
            except ExpressionError as e:
                logger.info(f"Failed to evaluate {expression!r}: {e.description}")
                rows.append((expression, np.nan, e.description))

        results = pd.DataFrame(rows, columns=['expression', 'result', 'error'])
        results['result'] = results['result'].astype(float)
        return results
