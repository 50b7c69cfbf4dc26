"""工具模块"""
from .formatting import format_result, format_postfix
from .history import append_history

__all__ = ['format_result', 'format_postfix', 'append_history']
