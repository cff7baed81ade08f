"""Logging setup for the service and the CLI."""

from __future__ import annotations

import logging
import sys

from storefront.infrastructure.config import AppConfig


def configure_logging(config: AppConfig) -> None:
    """Install a console handler on the root logger.

    Safe to call more than once; later calls replace the handler.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(config.log_format))

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(config.log_level)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
