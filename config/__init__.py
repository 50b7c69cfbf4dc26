"""配置模块"""
from .config import (
    CALCULATOR_CONFIG, HISTORY_CONFIG, CLI_CONFIG, LOGGING_CONFIG, validate_config
)

__all__ = ['CALCULATOR_CONFIG', 'HISTORY_CONFIG', 'CLI_CONFIG', 'LOGGING_CONFIG', 'validate_config']
