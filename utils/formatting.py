"""utils/formatting.py"""
import numpy as np


def format_result(value, max_fraction_digits=10):
    """定点小数显示：最多 max_fraction_digits 位小数，去掉末尾的0和小数点，无千分位"""
    value = float(value)
    if np.isnan(value):
        return "NaN"
    if np.isinf(value):
        return "∞" if value > 0 else "-∞"

    text = np.format_float_positional(
        value, precision=max_fraction_digits, unique=False, fractional=True, trim='-'
    )
    # 舍入后的负零
    if text == '-0':
        return '0'
    return text


def format_postfix(tokens):
    """后缀序列的文本形式，如 '2 3 4 * +'"""
    return ' '.join(t.name for t in tokens)
