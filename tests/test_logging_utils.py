from __future__ import annotations

import logging
from pathlib import Path

from lutengine.utils.logging_utils import PACKAGE_LOGGER, configure_logging


def test_configure_logging_scopes_level_to_package(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "lut.log"
    package_logger = configure_logging("debug", log_file)
    try:
        assert package_logger.name == PACKAGE_LOGGER
        assert package_logger.level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

        logging.getLogger("lutengine.formats.cube").debug("parsed cube table")
        logging.getLogger("some.library").info("library chatter")
        for handler in logging.getLogger().handlers:
            handler.flush()

        text = log_file.read_text(encoding="utf-8")
        assert "lutengine.formats.cube parsed cube table" in text
        assert "[MainThread]" in text
        assert "library chatter" not in text
    finally:
        configure_logging("INFO")
