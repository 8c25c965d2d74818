from collections.abc import Iterator
from typing import Any

import pytest
from loguru import logger

from failchain.config import reset_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop cached settings and any FAILCHAIN_* variables around each test."""
    for name in (
        "FAILCHAIN_DEFAULT_MESSAGE",
        "FAILCHAIN_CALL_STACK_DEPTH",
        "FAILCHAIN_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def loguru_records() -> Iterator[list[dict[str, Any]]]:
    """Collect loguru records emitted while the test runs."""
    records: list[dict[str, Any]] = []
    sink_id = logger.add(lambda message: records.append(message.record), level="TRACE")
    yield records
    logger.remove(sink_id)
