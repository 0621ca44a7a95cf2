"""InMemoryFlagSource 実装"""

from __future__ import annotations

from .config import FlagRolloutConfig
from .models import FeatureFlag


class InMemoryFlagSource:
    """テスト用インメモリフラグ取得元。"""

    def __init__(self, flags: list[FeatureFlag] | None = None) -> None:
        self._flags: dict[str, FeatureFlag] = {}
        for flag in flags or []:
            self.set_flag(flag)

    @classmethod
    def from_config(cls, config: FlagRolloutConfig) -> InMemoryFlagSource:
        """設定ファイルのフラグ定義から生成する。"""
        return cls(config.to_flags())

    def set_flag(self, flag: FeatureFlag) -> None:
        """フラグを設定する。"""
        self._flags[flag.name] = flag

    def remove_flag(self, name: str) -> bool:
        """フラグを削除する。削除できたら True。"""
        return self._flags.pop(name, None) is not None

    async def get_flag(self, name: str) -> FeatureFlag | None:
        return self._flags.get(name)

    async def list_flags(self) -> list[FeatureFlag]:
        return list(self._flags.values())
