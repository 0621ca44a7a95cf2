"""structlog ベースのロガー設定"""

from __future__ import annotations

import logging
import sys

import structlog

from .config import LogSection

# ライブラリ内のロガーは全てこの名前の配下になる
ROOT_LOGGER_NAME = "flag_rollout"


def _build_processors(format: str) -> list[structlog.types.Processor]:
    shared: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if format == "text":
        return [*shared, structlog.dev.ConsoleRenderer()]
    return [
        *shared,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]


def new_logger(level: str = "INFO", format: str = "json") -> structlog.stdlib.BoundLogger:
    """flag_rollout 用に structlog を設定し、ロガーを返す。

    Args:
        level: ログレベル ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        format: 出力形式 ("json" or "text")

    レベルは ROOT_LOGGER_NAME の stdlib ロガーに設定する。
    """
    logging.basicConfig(format="%(message)s", stream=sys.stdout)
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(level.upper())

    # モジュールのロガーはインポート時に生成されるため、再設定を反映できるよう
    # キャッシュしない
    structlog.configure(
        processors=_build_processors(format),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
    return structlog.stdlib.get_logger(ROOT_LOGGER_NAME)


def configure_logging(section: LogSection) -> structlog.stdlib.BoundLogger:
    """設定ファイルの log セクションからロガーを設定する。"""
    return new_logger(level=section.level, format=section.format)
