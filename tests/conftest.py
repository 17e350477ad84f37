"""Pytest fixtures for all tests."""

import random

import pytest

from core.entropy import set_random_source
from core.ksuid import configure
from internal.logging import LogLevel, StructuredLogger
from utils.timestamp import KSUID_EPOCH


@pytest.fixture(autouse=True)
def reset_codec():
    """Restore process-wide codec, entropy and logger settings after each test."""
    yield
    configure("raise")
    set_random_source(None)
    StructuredLogger.configure(LogLevel.INFO)


@pytest.fixture
def seeded_source():
    """Deterministic random source."""
    return random.Random(1234)


@pytest.fixture
def fixed_clock():
    """Clock frozen at 2017-10-10T04:00:47Z."""
    return lambda: KSUID_EPOCH + 107608047 + 0.75
