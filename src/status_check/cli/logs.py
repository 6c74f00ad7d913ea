"""Logging setup for the command line."""

from __future__ import annotations

import logging


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr, at DEBUG when verbose."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
