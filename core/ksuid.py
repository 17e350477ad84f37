"""
KSUID - K-Sortable Unique Identifier.

Time-sortable, globally unique IDs without coordination.
Format: 4 bytes timestamp + 16 bytes random = 27 char base62 string.
"""

import math
import struct
import threading
import time
from functools import total_ordering

from core import base62
from core.entropy import check_random_source, get_random_source
from core.errors import ClockError, DecodeError, FieldRangeError
from internal.logging import get_logger
from utils.timestamp import KSUID_EPOCH, to_std_epoch

TIMESTAMP_MAX = 2**32 - 1
PAYLOAD_MAX = 2**128 - 1
BYTE_LENGTH = 20
STRING_LENGTH = 27

CLOCK_POLICIES = ("raise", "clamp")

_clock_policy = "raise"
_settings_lock = threading.Lock()


def configure(clock_policy="raise"):
    """Set how a clock outside the 32-bit window is handled."""
    global _clock_policy
    if clock_policy not in CLOCK_POLICIES:
        raise ValueError(f"unknown clock policy {clock_policy!r}, expected one of {CLOCK_POLICIES}")
    with _settings_lock:
        _clock_policy = clock_policy


def get_clock_policy():
    return _clock_policy


@total_ordering
class Ksuid:
    """Immutable (timestamp, payload) pair. Orders like its string form."""

    __slots__ = ("timestamp", "payload")

    def __init__(self, timestamp, payload):
        object.__setattr__(self, "timestamp", _check_field("timestamp", timestamp, TIMESTAMP_MAX))
        object.__setattr__(self, "payload", _check_field("payload", payload, PAYLOAD_MAX))

    def __setattr__(self, name, value):
        raise AttributeError(f"Ksuid is immutable, cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"Ksuid is immutable, cannot delete {name!r}")

    def __reduce__(self):
        return (Ksuid, (self.timestamp, self.payload))

    def __eq__(self, other):
        if not isinstance(other, Ksuid):
            return NotImplemented
        return self.timestamp == other.timestamp and self.payload == other.payload

    def __lt__(self, other):
        if not isinstance(other, Ksuid):
            return NotImplemented
        return (self.timestamp, self.payload) < (other.timestamp, other.payload)

    def __hash__(self):
        return hash((self.timestamp, self.payload))

    def __repr__(self):
        return f"Ksuid(timestamp={self.timestamp}, payload={self.payload:#034x})"

    def __str__(self):
        return self.serialize()

    @property
    def datetime(self):
        """Creation instant in UTC, second precision."""
        return to_std_epoch(self.timestamp)

    def to_bytes(self):
        return struct.pack(">I", self.timestamp) + self.payload.to_bytes(16, byteorder="big")

    @classmethod
    def from_bytes(cls, buf):
        if not isinstance(buf, (bytes, bytearray, memoryview)):
            raise DecodeError(f"expected bytes, got {type(buf).__name__}")
        if len(buf) != BYTE_LENGTH:
            raise DecodeError(f"expected {BYTE_LENGTH} bytes, got {len(buf)}")
        (timestamp,) = struct.unpack(">I", buf[:4])
        return cls(timestamp, int.from_bytes(buf[4:], byteorder="big"))

    def serialize(self):
        """27-character, zero-padded base62 form."""
        return base62.encode(self.to_bytes(), STRING_LENGTH)

    @classmethod
    def parse(cls, text):
        return deserialize(text)


def _check_field(name, value, maximum):
    if isinstance(value, bool) or not isinstance(value, int):
        raise FieldRangeError(f"{name} must be an int, got {type(value).__name__}", field=name)
    if not 0 <= value <= maximum:
        raise FieldRangeError(f"{name} out of range 0..{maximum}", field=name, value=value)
    return value


def _current_timestamp(clock):
    unix_seconds = math.floor(clock())
    timestamp = unix_seconds - KSUID_EPOCH
    if 0 <= timestamp <= TIMESTAMP_MAX:
        return timestamp

    if _clock_policy == "raise":
        raise ClockError("system clock outside the KSUID timestamp window", unix_seconds=unix_seconds)
    clamped = min(max(timestamp, 0), TIMESTAMP_MAX)
    get_logger().warn("Clock outside KSUID window, clamping", unix_seconds=unix_seconds, timestamp=clamped)
    return clamped


def new(timestamp=None, payload=None, source=None, clock=None):
    """Create a KSUID, filling in whichever fields are not given.

    The timestamp defaults to whole seconds since the KSUID epoch read from
    `clock` (``time.time`` by default). The payload defaults to 128 bits from
    `source` (the process-wide entropy source by default).
    """
    if timestamp is None:
        timestamp = _current_timestamp(clock or time.time)
    if payload is None:
        source = check_random_source(source) if source is not None else get_random_source()
        payload = source.getrandbits(128)
    return Ksuid(timestamp, payload)


def serialize(ksuid):
    return ksuid.serialize()


def deserialize(text):
    """Parse the 27-character base62 form. Raises DecodeError, never returns partial values."""
    if not isinstance(text, str):
        raise DecodeError(f"expected str, got {type(text).__name__}")
    try:
        if len(text) != STRING_LENGTH:
            raise DecodeError(f"expected {STRING_LENGTH} characters, got {len(text)}", text=text)
        return Ksuid.from_bytes(base62.decode(text, BYTE_LENGTH))
    except DecodeError as exc:
        get_logger().debug("KSUID decode failed", error=str(exc), **exc.context)
        raise
