"""フラグ取得元とクライアントのプロトコル"""

from __future__ import annotations

from typing import Protocol

from .models import EvaluationContext, EvaluationResult, FeatureFlag


class FlagSource(Protocol):
    """フラグ定義の取得元（ホスト側ストレージ）プロトコル。"""

    async def get_flag(self, name: str) -> FeatureFlag | None: ...

    async def list_flags(self) -> list[FeatureFlag]: ...


class FeatureFlagClientProtocol(Protocol):
    """フィーチャーフラグクライアントプロトコル。"""

    async def evaluate(
        self, flag_name: str, context: EvaluationContext
    ) -> EvaluationResult: ...

    async def get_flag(self, flag_name: str) -> FeatureFlag: ...

    async def is_enabled(self, flag_name: str, context: EvaluationContext) -> bool: ...
