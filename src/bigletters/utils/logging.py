"""Logging setup for the bigletters server and CLI.

Modules log through ``logging.getLogger(__name__)``; everything under the
``bigletters`` namespace is routed to stderr and, when configured, a log
file. Uvicorn keeps its own access/error loggers.
"""

from __future__ import annotations

import logging
import sys

from bigletters.config.settings import LoggingConfig


def setup_logging(config: LoggingConfig | None = None) -> None:
    """Attach handlers to the ``bigletters`` logger.

    Safe to call more than once; earlier handlers are replaced.
    """
    if config is None:
        config = LoggingConfig()

    app_logger = logging.getLogger("bigletters")
    app_logger.setLevel(getattr(logging, config.level.upper(), logging.INFO))

    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.file:
        handlers.append(logging.FileHandler(config.file))

    formatter = logging.Formatter(config.format)
    for handler in handlers:
        handler.setFormatter(formatter)
        app_logger.addHandler(handler)

    app_logger.debug("Logging to %d handler(s) at %s", len(handlers), config.level)
