"""flag_rollout データモデル"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class FlagVariant:
    """フラグバリアント。weight はバケット空間 (0-100) に占める割合。"""

    name: str
    weight: float = 0
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class FeatureFlag:
    """フィーチャーフラグ。

    rollout_percentage が None の場合は 100% として扱う。
    id / description / environment / tags / metadata は評価に使わない。
    """

    name: str
    enabled: bool = False
    rollout_percentage: float | None = None
    variants: list[FlagVariant] = field(default_factory=list)
    id: str | None = None
    description: str = ""
    environment: str | None = None
    tags: list[str] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class EvaluationContext:
    """フラグ評価コンテキスト。"""

    user_id: str | None = None
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass
class EvaluationResult:
    """フラグ評価結果。"""

    flag_name: str
    enabled: bool
    variant: str | None = None
    reason: str = ""


class EvaluationReasons:
    """評価理由の定数。"""

    FLAG_NOT_FOUND: str = "FLAG_NOT_FOUND"
    FLAG_DISABLED: str = "FLAG_DISABLED"
    ROLLOUT_INCLUDED: str = "ROLLOUT_INCLUDED"
    ROLLOUT_EXCLUDED: str = "ROLLOUT_EXCLUDED"
    ERROR: str = "ERROR"
