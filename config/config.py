"""配置文件"""

# 计算核心参数
CALCULATOR_CONFIG = {
    "round_decimals": 10,  # 结果保留10位小数，吸收浮点误差
    "max_fraction_digits": 10,  # 显示时最多10位小数
    "log_base": "e",  # log 的底数：'e' 自然对数 / '10' 常用对数；ln 恒为自然对数
    "precheck_parentheses": True,  # 分词前先做括号配对检查
}

# 历史记录
HISTORY_CONFIG = {
    "enabled": True,
    "history_path": "~/.calchistory",
}

# 交互界面
CLI_CONFIG = {
    "prompt": "Enter expression: ",
    "continue_prompt": "Continue? (y/n): ",
    "separator": "-" * 24,
    "exit_commands": ("exit", "quit"),
}

# 日志
LOGGING_CONFIG = {
    "level": "WARNING",  # 默认不打断结果输出
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    import logging
    assert CALCULATOR_CONFIG["round_decimals"] >= 0, "round_decimals 不能为负"
    assert CALCULATOR_CONFIG["max_fraction_digits"] >= 0, "max_fraction_digits 不能为负"
    assert str(CALCULATOR_CONFIG["log_base"]) in ("e", "10"), "log_base 只能是 'e' 或 '10'"
    assert HISTORY_CONFIG["history_path"], "history_path 不能为空"
    assert LOGGING_CONFIG["level"] in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
    logging.getLogger(__name__).debug("Configuration validated successfully!")
