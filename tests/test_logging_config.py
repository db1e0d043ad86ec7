"""Tests for logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from mess_detector.logging_config import ROOT_LOGGER, get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_package_logger():
    logger = logging.getLogger(ROOT_LOGGER)
    saved = (logger.level, list(logger.handlers), logger.propagate)
    yield
    logger.setLevel(saved[0])
    logger.handlers[:] = saved[1]
    logger.propagate = saved[2]


class TestSetupLogging:
    @pytest.mark.parametrize(
        "verbosity,level",
        [("quiet", logging.ERROR), ("normal", logging.WARNING), ("verbose", logging.DEBUG)],
    )
    def test_levels(self, verbosity, level):
        assert setup_logging(verbosity).level == level

    def test_repeated_setup_keeps_one_handler(self):
        setup_logging("normal")
        logger = setup_logging("verbose")
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)

    def test_root_logger_untouched(self):
        root_handlers = list(logging.getLogger().handlers)
        setup_logging("verbose")
        assert logging.getLogger().handlers == root_handlers


class TestGetLogger:
    def test_nests_foreign_names(self):
        assert get_logger("custom").name == "mess_detector.custom"

    def test_keeps_package_names(self):
        assert get_logger("mess_detector.discovery").name == "mess_detector.discovery"
        assert get_logger().name == ROOT_LOGGER
