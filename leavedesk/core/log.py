"""
Logging setup.

All modules log through ``logging.getLogger(__name__)``; this module wires the
root logger once at process start. Output goes to stderr so it never mixes
with anything a transport writes to stdout.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger. Safe to call more than once."""
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )
