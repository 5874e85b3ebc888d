from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    resolved = logging.getLevelName(str(level or "INFO").upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO

    package_logger = logging.getLogger("voyage_aeon")
    package_logger.setLevel(resolved)
    if not logging.getLogger().handlers and not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
