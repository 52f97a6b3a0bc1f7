"""Lightweight logging utilities for matches and debugging."""

import datetime
import logging


def log_event(message):
    timestamp = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {message}")


def configure(verbose=False):
    """Route search-module loggers to stderr; DEBUG shows per-move search stats."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
