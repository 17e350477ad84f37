"""Timestamp utilities: KSUID epoch and microsecond log stamps."""

import time
from datetime import datetime, timedelta, timezone

# KSUID epoch: 2014-05-13T16:53:20Z
KSUID_EPOCH = 1400000000


def ksuid_epoch():
    """The KSUID custom epoch as an aware UTC datetime."""
    return datetime.fromtimestamp(KSUID_EPOCH, tz=timezone.utc)


def to_std_epoch(timestamp):
    """Absolute UTC instant of a KSUID timestamp field (for display)."""
    return ksuid_epoch() + timedelta(seconds=timestamp)


def now_micros():
    """Current time in microseconds since Unix epoch."""
    return int(time.time() * 1_000_000)


def format_timestamp(epoch_us=None):
    """Format timestamp as ISO 8601 with microseconds."""
    if epoch_us is None:
        epoch_us = now_micros()

    dt = datetime.fromtimestamp(epoch_us / 1_000_000, tz=timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.%f") + "Z"
