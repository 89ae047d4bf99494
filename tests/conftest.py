from __future__ import annotations

import typing

import pytest
from loguru import logger


@pytest.fixture
def log_records() -> typing.Iterator[list[dict[str, typing.Any]]]:
    """Capture effectful's loguru records (library logging is off by default)."""
    records: list[dict[str, typing.Any]] = []
    logger.enable("effectful")
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    try:
        yield records
    finally:
        logger.remove(handler_id)
        logger.disable("effectful")
