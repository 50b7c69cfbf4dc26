"""批量表达式的加载、求值与保存"""
import os
import logging

import pandas as pd

logger = logging.getLogger(__name__)


def load_expressions(file_path):
    """
    加载表达式文件（每行一个表达式，与历史文件格式相同）

    Parameters:
    - file_path: 文本文件路径，支持 ~

    Returns:
    - expressions: 去掉首尾空白、丢弃空行后的 Series
    """
    file_path = os.path.expanduser(file_path)
    logger.info(f"Loading expressions from {file_path}")

    with open(file_path, 'r', encoding='utf-8') as f:
        lines = f.read().splitlines()

    expressions = pd.Series(lines, dtype=object, name='expression').str.strip()
    expressions = expressions[expressions != ''].reset_index(drop=True)
    logger.info(f"Loaded {len(expressions)} expressions")
    return expressions


def apply_expressions_and_return_results(expressions, evaluator):
    """
    对每个表达式求值，返回结果表

    Parameters:
    - expressions: 表达式序列（list 或 Series）
    - evaluator: ExpressionEvaluator 实例

    Returns:
    - results: DataFrame[expression, result, error]
    """
    results = evaluator.evaluate_many(list(expressions))
    n_failed = int(results['error'].notna().sum())
    if n_failed:
        logger.warning(f"{n_failed} of {len(results)} expressions failed to evaluate")
    return results


def save_results(results, output_path):
    """保存结果为 CSV（不含索引）"""
    output_path = os.path.expanduser(output_path)
    logger.info(f"Saving results to {output_path}")
    results.to_csv(output_path, index=False)
