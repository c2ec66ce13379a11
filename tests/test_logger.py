import logging

from underbar.logger.logger import logger, setup_logger


def test_default_logger_configured():
    assert logger.name == "underbar"
    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_setup_logger_is_idempotent():
    first = setup_logger(name="underbar.test_idempotent", level="DEBUG")
    second = setup_logger(name="underbar.test_idempotent", level="ERROR")

    assert first is second
    assert len(first.handlers) == 1
    assert first.level == logging.DEBUG


def test_setup_logger_stream_handler():
    test_logger = setup_logger(name="underbar.test_stdout", level="WARNING")
    handler = test_logger.handlers[0]

    assert isinstance(handler, logging.StreamHandler)
    assert test_logger.level == logging.WARNING
