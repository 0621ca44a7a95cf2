"""フラグ定義ファイルの読み込み（pydantic BaseModel）"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
)

from .exceptions import FeatureFlagError, FeatureFlagErrorCodes
from .models import FeatureFlag, FlagVariant


class LogSection(BaseModel):
    """ログ設定。level は大文字小文字を区別しない。"""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "text"] = "json"

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.upper()
        return value


class VariantDocument(BaseModel):
    """バリアント定義。weight の範囲は検証しない。"""

    name: str = Field(min_length=1)
    weight: float = 0
    metadata: dict[str, Any] = Field(default_factory=dict)

    def to_variant(self) -> FlagVariant:
        return FlagVariant(name=self.name, weight=self.weight, metadata=self.metadata)


class FlagDocument(BaseModel):
    """フラグ定義。キーは camelCase / snake_case のどちらでも受け付ける。"""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    enabled: bool = False
    rollout_percentage: float | None = Field(default=None, alias="rolloutPercentage")
    variants: list[VariantDocument] = Field(default_factory=list)
    id: str | None = None
    description: str = ""
    environment: Literal["development", "staging", "production"] | None = None
    tags: list[str] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: Any) -> Any:
        # ホスト側の ID は数値の場合がある
        if isinstance(value, int):
            return str(value)
        return value

    @field_validator("variants", "tags", "metadata", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return {} if info.field_name == "metadata" else []
        return value

    @field_validator("tags", mode="before")
    @classmethod
    def _flatten_tags(cls, value: Any) -> Any:
        # ホスト側は [{"tag": "x"}] 形式で返す
        if isinstance(value, list):
            return [item.get("tag") if isinstance(item, Mapping) else item for item in value]
        return value

    def to_flag(self) -> FeatureFlag:
        return FeatureFlag(
            name=self.name,
            enabled=self.enabled,
            rollout_percentage=self.rollout_percentage,
            variants=[v.to_variant() for v in self.variants],
            id=self.id,
            description=self.description,
            environment=self.environment,
            tags=list(self.tags),
            metadata=dict(self.metadata),
        )


class FlagRolloutConfig(BaseModel):
    """設定ファイル全体。"""

    log: LogSection = Field(default_factory=LogSection)
    flags: list[FlagDocument] = Field(default_factory=list)

    def to_flags(self) -> list[FeatureFlag]:
        """検証済みのフラグ定義を FeatureFlag に変換する。"""
        return [doc.to_flag() for doc in self.flags]


def _read_yaml(path: Path) -> dict[str, Any]:
    """YAML ファイルを読み込む。"""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise FeatureFlagError(
            code=FeatureFlagErrorCodes.CONFIG_ERROR,
            message=f"Failed to read config file: {path}",
            cause=e,
        ) from e
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise FeatureFlagError(
            code=FeatureFlagErrorCodes.CONFIG_ERROR,
            message=f"Failed to parse YAML: {path}",
            cause=e,
        ) from e
    if not isinstance(data, dict):
        raise FeatureFlagError(
            code=FeatureFlagErrorCodes.CONFIG_ERROR,
            message=f"Config root must be a mapping: {path}",
        )
    return data


def load_config(path: Path) -> FlagRolloutConfig:
    """設定ファイルを読み込んで FlagRolloutConfig を返す。"""
    data = _read_yaml(path)
    try:
        return FlagRolloutConfig.model_validate(data)
    except ValidationError as e:
        raise FeatureFlagError(
            code=FeatureFlagErrorCodes.CONFIG_ERROR,
            message=f"Config validation failed: {e}",
            cause=e,
        ) from e


def parse_flag(record: Mapping[str, Any]) -> FeatureFlag:
    """ホストのフラグレコード 1 件を FeatureFlag に変換する。"""
    try:
        return FlagDocument.model_validate(dict(record)).to_flag()
    except ValidationError as e:
        raise FeatureFlagError(
            code=FeatureFlagErrorCodes.CONFIG_ERROR,
            message=f"Invalid feature flag record: {e}",
            cause=e,
        ) from e
