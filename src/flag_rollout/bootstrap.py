"""設定ファイルからクライアントを組み立てる"""

from __future__ import annotations

from pathlib import Path

from .client import FeatureFlagClient
from .config import load_config
from .logger import configure_logging
from .memory import InMemoryFlagSource


def create_client(config_path: Path) -> FeatureFlagClient:
    """設定ファイルを読み込み、ログ設定を適用したクライアントを返す。

    フラグ定義はインメモリの取得元に載せる。ホスト側ストレージを使う場合は
    FeatureFlagClient に FlagSource 実装を直接渡す。
    """
    config = load_config(config_path)
    log = configure_logging(config.log)
    log.debug("flag_config_loaded", path=str(config_path), flags=len(config.flags))
    return FeatureFlagClient(InMemoryFlagSource.from_config(config))
