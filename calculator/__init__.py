"""计算器模块 - 表达式字符串求值入口"""
from .evaluator import ExpressionEvaluator

__all__ = ['ExpressionEvaluator']
