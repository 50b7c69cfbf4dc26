"""数据模块 - 批量表达式处理"""
from .data_loader import load_expressions, apply_expressions_and_return_results, save_results

__all__ = ['load_expressions', 'apply_expressions_and_return_results', 'save_results']
