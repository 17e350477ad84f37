from config import load_config
from core.errors import ClockError, DecodeError, FieldRangeError, KsuidError
from core.ksuid import Ksuid, configure, deserialize, new, serialize
from internal.logging import LogLevel, StructuredLogger


def setup(config=None):
    """Apply a Config (loaded from config.json when omitted) to the logger and codec."""
    config = config or load_config()
    StructuredLogger.configure(LogLevel.parse(config.logging.level))
    configure(config.codec.clock_policy)
    return config


__all__ = [
    "Ksuid",
    "new",
    "serialize",
    "deserialize",
    "configure",
    "setup",
    "KsuidError",
    "DecodeError",
    "FieldRangeError",
    "ClockError",
]
