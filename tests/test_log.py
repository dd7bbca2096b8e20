"""Test suite for the package logger"""

import logging

from meshvtu.log import LOGGER_NAME, logger


def test_logger_is_named_after_the_package():
    assert logger.name == LOGGER_NAME == "meshvtu"


def test_log_lines_carry_level_and_logger_name():
    handler = next(h for h in logger.handlers if isinstance(h, logging.StreamHandler))
    record = logging.LogRecord(LOGGER_NAME, logging.WARNING, __file__, 1, "disk full", None, None)

    line = handler.format(record)

    assert line == "WARNING [meshvtu] disk full"
