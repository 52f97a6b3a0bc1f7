"""Helpers for enforcing per-move time limits."""

import time


def deadline_after(seconds):
    """Absolute deadline `seconds` from now, or None when moves are untimed."""
    if seconds is None or seconds <= 0:
        return None
    return time.time() + seconds

