"""Logging setup: all records go to stderr so JSON on stdout stays clean."""

import logging
import sys


def setup_logging(level: str = "WARNING") -> None:
    """Configure the root logger once per CLI invocation."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )
