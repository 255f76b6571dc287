"""Pytest configuration and fixtures."""

import logging
import random
from datetime import datetime, timezone
from typing import Iterator

import pytest


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def rng(seed: int) -> random.Random:
    """Seeded random source."""
    return random.Random(seed)


@pytest.fixture
def fixed_now() -> datetime:
    """Mid-June of the current year, so generated expiries are never in the past."""
    return datetime(datetime.now(timezone.utc).year, 6, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Undo handler changes made by setup_logging."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
