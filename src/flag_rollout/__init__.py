"""flag_rollout: deterministic user bucketing for feature flag rollouts."""

from .assignment import check_rollout, choose_variant, is_in_rollout, select_variant
from .bootstrap import create_client
from .bucketing import BUCKET_COUNT, get_bucket, hash_identifier
from .client import FeatureFlagClient
from .config import FlagRolloutConfig, load_config, parse_flag
from .exceptions import FeatureFlagError, FeatureFlagErrorCodes
from .logger import configure_logging, new_logger
from .memory import InMemoryFlagSource
from .models import (
    EvaluationContext,
    EvaluationReasons,
    EvaluationResult,
    FeatureFlag,
    FlagVariant,
)
from .source import FeatureFlagClientProtocol, FlagSource

__all__ = [
    "BUCKET_COUNT",
    "EvaluationContext",
    "EvaluationReasons",
    "EvaluationResult",
    "FeatureFlag",
    "FeatureFlagClient",
    "FeatureFlagClientProtocol",
    "FeatureFlagError",
    "FeatureFlagErrorCodes",
    "FlagRolloutConfig",
    "FlagSource",
    "FlagVariant",
    "InMemoryFlagSource",
    "check_rollout",
    "choose_variant",
    "configure_logging",
    "create_client",
    "get_bucket",
    "hash_identifier",
    "is_in_rollout",
    "load_config",
    "new_logger",
    "parse_flag",
    "select_variant",
]
