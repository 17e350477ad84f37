"""Tests for wiring configuration into the codec and logger."""

import pytest

import core
from config import CodecConfig, Config, LoggingConfig
from core.errors import ClockError
from core.ksuid import get_clock_policy
from internal.logging import LogLevel, get_logger
from utils.timestamp import KSUID_EPOCH


class TestSetup:
    """Tests for core.setup."""

    def test_setup_from_config_file(self):
        """Defaults come from config.json."""
        config = core.setup()
        assert config.logging.level == "WARN"
        assert get_logger().level == LogLevel.WARN
        assert get_clock_policy() == "raise"

    def test_setup_clamp(self):
        core.setup(Config(CodecConfig(clock_policy="clamp"), LoggingConfig(level="ERROR")))
        assert get_clock_policy() == "clamp"
        assert get_logger().level == LogLevel.ERROR
        assert core.new(clock=lambda: KSUID_EPOCH - 10).timestamp == 0

    def test_setup_raise(self):
        core.setup(Config(CodecConfig(clock_policy="raise")))
        with pytest.raises(ClockError):
            core.new(clock=lambda: KSUID_EPOCH - 10)

    def test_setup_invalid_policy(self):
        with pytest.raises(ValueError):
            core.setup(Config(CodecConfig(clock_policy="wrap")))

    def test_setup_invalid_level(self):
        with pytest.raises(ValueError):
            core.setup(Config(logging=LoggingConfig(level="LOUD")))


class TestPublicSurface:
    """Tests for names exported from core."""

    def test_round_trip_through_package(self):
        ksuid = core.new()
        assert core.deserialize(core.serialize(ksuid)) == ksuid
        assert isinstance(ksuid, core.Ksuid)

    def test_error_hierarchy(self):
        assert issubclass(core.DecodeError, core.KsuidError)
        assert issubclass(core.FieldRangeError, core.KsuidError)
        assert issubclass(core.ClockError, core.KsuidError)
