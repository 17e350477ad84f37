"""Shortcut for a fresh KSUID string."""

from core.ksuid import new


def generate_ksuid():
    """Generate a 27-character sortable unique ID."""
    return new().serialize()
