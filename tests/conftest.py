import logging
from collections.abc import Iterator

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """テストごとに structlog と flag_rollout ロガーの設定を戻す。"""
    yield
    structlog.reset_defaults()
    logging.getLogger("flag_rollout").setLevel(logging.NOTSET)
