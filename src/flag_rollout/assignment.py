"""ロールアウト判定とバリアント選択"""

from __future__ import annotations

from collections.abc import Sequence

from .bucketing import get_bucket
from .models import FeatureFlag, FlagVariant


def check_rollout(user_id: str, percentage: float | None) -> bool:
    """ユーザーがロールアウト率の範囲内か判定する。

    None または 100 以上は全員対象、0 以下は対象なし。
    いずれの場合もバケット計算を省略する。
    """
    if percentage is None or percentage >= 100:
        return True
    if percentage <= 0:
        return False
    return get_bucket(user_id) < percentage


def choose_variant(user_id: str, variants: Sequence[FlagVariant]) -> str | None:
    """累積 weight がバケットを超えた最初のバリアント名を返す。

    どのバリアントも該当しない場合（weight の合計が 100 未満など）は
    先頭のバリアントにフォールバックする。空リストは None。
    """
    if not variants:
        return None
    bucket = get_bucket(user_id)
    cumulative: float = 0
    for variant in variants:
        cumulative += variant.weight
        if bucket < cumulative:
            return variant.name
    return variants[0].name


def is_in_rollout(flag: FeatureFlag, user_id: str) -> bool:
    """フラグが有効かつユーザーがロールアウト対象なら True。"""
    if not flag.enabled:
        return False
    return check_rollout(user_id, flag.rollout_percentage)


def select_variant(flag: FeatureFlag, user_id: str) -> str | None:
    """フラグが有効な場合にユーザーのバリアントを選択する。"""
    if not flag.enabled:
        return None
    return choose_variant(user_id, flag.variants)
