"""
ログ設定ユーティリティ

ルールエンジンの判定ログを標準エラーへ出力します（標準出力はCLIの結果用）。
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "unmovable"

console = Console(stderr=True)


def resolve_level(level: str) -> int:
    """レベル名を数値に変換（不明な名前は INFO）"""
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(level: str = "INFO", verbose: bool = False) -> logging.Logger:
    """unmovable ロガーに RichHandler を設定

    Args:
        level: ログレベル名
        verbose: True の場合は DEBUG とし、出力元のパスも表示

    Returns:
        設定されたロガー
    """
    log_level = logging.DEBUG if verbose else resolve_level(level)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)
    logger.handlers.clear()

    handler = RichHandler(console=console, show_path=verbose, markup=False)
    handler.setLevel(log_level)
    logger.addHandler(handler)

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """ロガーを取得"""
    return logging.getLogger(name)
