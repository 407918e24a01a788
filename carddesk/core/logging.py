"""Process-wide logging setup."""

from __future__ import annotations

import logging
import sys

from carddesk.core.config import LoggingSettings

_HANDLER_NAME = "carddesk"


def setup_logging(settings: LoggingSettings) -> None:
    """Attach a single stdout handler to the root logger.

    Safe to call more than once; the handler installed by a previous call is
    replaced rather than duplicated.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(settings.format))
    root.addHandler(handler)
    root.setLevel(settings.level.upper())


__all__ = ["setup_logging"]
