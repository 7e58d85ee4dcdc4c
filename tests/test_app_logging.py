"""Tests for logging configuration."""

import logging
from collections.abc import Iterator

import pytest

from dj_wishboard.app_logging import LOG_FORMAT, configure_logging


@pytest.fixture
def app_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger("dj_wishboard")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    logger.handlers.clear()
    yield logger
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]


def test_configure_logging_installs_one_handler(app_logger) -> None:
    configure_logging()
    configure_logging()

    assert len(app_logger.handlers) == 1
    assert app_logger.handlers[0].formatter._fmt == LOG_FORMAT
    assert app_logger.propagate is False


def test_configure_logging_adjusts_level_on_later_calls(app_logger) -> None:
    configure_logging("info")
    configure_logging("warning")

    assert app_logger.level == logging.WARNING
    assert len(app_logger.handlers) == 1


def test_module_loggers_use_the_package_handler(app_logger) -> None:
    configure_logging("debug")

    child = logging.getLogger("dj_wishboard.services.persistence")

    assert child.getEffectiveLevel() == logging.DEBUG
    assert child.hasHandlers()
