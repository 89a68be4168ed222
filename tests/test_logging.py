from __future__ import annotations

import logging

from bioneer.utils.logging import PACKAGE_LOGGER, configure_logging, get_logger


def test_get_logger_nests_under_package() -> None:
    assert get_logger("bioneer.fixation").name == "bioneer.fixation"
    assert get_logger("custom").name == "bioneer.custom"


def test_configure_logging_is_idempotent() -> None:
    logger = logging.getLogger(PACKAGE_LOGGER)
    before = len(logger.handlers)
    configure_logging("DEBUG")
    after_first = len(logger.handlers)
    configure_logging("INFO")
    assert len(logger.handlers) == after_first <= before + 1
    assert logger.level == logging.INFO
    configure_logging("WARNING")
