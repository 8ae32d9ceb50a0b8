from __future__ import annotations

import logging
from pathlib import Path

PACKAGE_LOGGER = "lutengine"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(threadName)s] %(name)s %(message)s"


def configure_logging(level: str, log_file: Path | None = None) -> logging.Logger:
    """Route ``lutengine.*`` records at ``level``; other libraries stay at WARNING.

    The thread name is part of the format so band work from the frame
    worker pool can be told apart.
    """
    resolved_level = getattr(logging, level.upper(), logging.INFO)
    handlers: list[logging.Handler] = [logging.StreamHandler()]

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=logging.WARNING,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
    for handler in handlers:
        handler.setLevel(min(resolved_level, logging.WARNING))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(resolved_level)
    return package_logger
