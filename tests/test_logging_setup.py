"""Tests for the process logging configuration."""

import logging

from audread.logging_setup import configure_logging


def test_configure_logging_is_idempotent():
    logger = configure_logging("debug")
    handlers = list(logger.handlers)
    assert logger.level == logging.DEBUG

    configure_logging("warning")
    assert logger.handlers == handlers
    assert logger.level == logging.WARNING


def test_unknown_level_falls_back_to_info():
    assert configure_logging("chatty").level == logging.INFO
