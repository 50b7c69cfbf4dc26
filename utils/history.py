"""utils/history.py - 追加式历史记录"""
import os
import logging

from config.config import HISTORY_CONFIG

logger = logging.getLogger(__name__)


def append_history(expression, path=None):
    """
    把一行原始输入追加到历史文件，空输入跳过
    写入失败只记录警告，不影响计算
    Returns:
        是否写入
    """
    if not expression:
        return False

    path = os.path.expanduser(path or HISTORY_CONFIG['history_path'])
    try:
        with open(path, 'a', encoding='utf-8') as f:
            f.write(expression + '\n')
    except OSError as e:
        logger.warning(f"Failed to write history to {path}: {e}")
        return False
    return True
