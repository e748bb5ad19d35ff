"""
Shared helpers: logging setup.

Usage:
    from makedeck.utils import log, setup_logging
"""

from __future__ import annotations

import logging
import sys

from ..errors import WriteError

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

log = logging.getLogger("makedeck")


# --------------------------------------------------------------------------- #
# Logging
# --------------------------------------------------------------------------- #
def setup_logging(level: str = "WARNING", log_file: str | None = None) -> None:
    """Configure root logging once; diagnostics go to stderr so stdout stays clean."""
    if logging.getLogger().handlers:
        return
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file))
        except OSError as exc:
            raise WriteError(f"Cannot open log file {log_file}: {exc}") from exc
    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
    )
