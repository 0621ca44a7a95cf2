"""FeatureFlagClient 実装"""

from __future__ import annotations

import structlog

from .assignment import is_in_rollout, select_variant
from .exceptions import FeatureFlagError, FeatureFlagErrorCodes
from .models import EvaluationContext, EvaluationReasons, EvaluationResult, FeatureFlag
from .source import FlagSource

logger = structlog.get_logger(__name__)


class FeatureFlagClient:
    """FlagSource からフラグを取得して評価するクライアント。

    取得元の障害時はログを出力し、フラグ無効として扱う（fail closed）。
    取得結果はキャッシュしない。
    """

    def __init__(self, source: FlagSource) -> None:
        self._source = source

    async def get_feature_flag(self, flag_name: str) -> FeatureFlag | None:
        """フラグを取得する。存在しない・取得失敗の場合は None。"""
        try:
            return await self._source.get_flag(flag_name)
        except Exception:
            logger.warning("flag_lookup_failed", flag=flag_name, exc_info=True)
            return None

    async def is_feature_enabled(self, flag_name: str) -> bool:
        """フラグのマスタースイッチが有効か。"""
        flag = await self.get_feature_flag(flag_name)
        return flag is not None and flag.enabled

    async def get_all_feature_flags(self) -> dict[str, FeatureFlag]:
        """有効なフラグを名前をキーにして返す。"""
        try:
            flags = await self._source.list_flags()
        except Exception:
            logger.warning("flag_list_failed", exc_info=True)
            return {}
        return {flag.name: flag for flag in flags if flag.enabled}

    async def get_feature_flags_by_tag(self, tag: str) -> list[FeatureFlag]:
        """タグが付いたフラグを返す。有効・無効は問わない。"""
        try:
            flags = await self._source.list_flags()
        except Exception:
            logger.warning("flag_list_failed", tag=tag, exc_info=True)
            return []
        return [flag for flag in flags if tag in flag.tags]

    async def is_user_in_rollout(self, flag_name: str, user_id: str) -> bool:
        """ユーザーがロールアウト対象か。"""
        flag = await self.get_feature_flag(flag_name)
        if flag is None:
            return False
        return is_in_rollout(flag, user_id)

    async def get_user_variant(self, flag_name: str, user_id: str) -> str | None:
        """A/B テストでユーザーに割り当てるバリアント名。"""
        flag = await self.get_feature_flag(flag_name)
        if flag is None:
            return None
        return select_variant(flag, user_id)

    async def evaluate(
        self, flag_name: str, context: EvaluationContext
    ) -> EvaluationResult:
        try:
            flag = await self._source.get_flag(flag_name)
        except Exception:
            logger.warning("flag_lookup_failed", flag=flag_name, exc_info=True)
            return EvaluationResult(
                flag_name=flag_name, enabled=False, reason=EvaluationReasons.ERROR
            )
        if flag is None:
            logger.debug("flag_not_found", flag=flag_name)
            return EvaluationResult(
                flag_name=flag_name,
                enabled=False,
                reason=EvaluationReasons.FLAG_NOT_FOUND,
            )
        if not flag.enabled:
            return EvaluationResult(
                flag_name=flag_name,
                enabled=False,
                reason=EvaluationReasons.FLAG_DISABLED,
            )

        user_id = context.user_id or ""
        if not is_in_rollout(flag, user_id):
            return EvaluationResult(
                flag_name=flag_name,
                enabled=False,
                reason=EvaluationReasons.ROLLOUT_EXCLUDED,
            )
        return EvaluationResult(
            flag_name=flag_name,
            enabled=True,
            variant=select_variant(flag, user_id),
            reason=EvaluationReasons.ROLLOUT_INCLUDED,
        )

    async def get_flag(self, flag_name: str) -> FeatureFlag:
        flag = await self._source.get_flag(flag_name)
        if flag is None:
            raise FeatureFlagError(
                FeatureFlagErrorCodes.FLAG_NOT_FOUND,
                f"フラグが見つかりません: {flag_name}",
            )
        return flag

    async def is_enabled(self, flag_name: str, context: EvaluationContext) -> bool:
        result = await self.evaluate(flag_name, context)
        return result.enabled
