"""Random-bit providers for KSUID payloads.

A source is any object with a ``getrandbits(k)`` method, so ``random.Random(seed)``
works as a deterministic stand-in. The default is ``secrets.SystemRandom``, which
reads OS entropy on every draw and keeps no state between threads.
"""

import secrets
import threading

_source = None
_source_lock = threading.Lock()


def get_random_source():
    global _source
    if _source is None:
        with _source_lock:
            if _source is None:
                _source = secrets.SystemRandom()
    return _source


def check_random_source(source):
    if not callable(getattr(source, "getrandbits", None)):
        raise TypeError(f"random source must provide getrandbits(k), got {type(source).__name__}")
    return source


def set_random_source(source):
    """Replace the process-wide source. Passing None restores the default."""
    global _source
    if source is not None:
        check_random_source(source)
    with _source_lock:
        _source = source
