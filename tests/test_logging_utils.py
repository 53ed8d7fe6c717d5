import logging

from fastabuf.logging_utils import LOGGER_NAME, configure_logging, get_logger


def test_configure_logging_sets_package_level():
    logger = configure_logging(verbose=True)
    try:
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.DEBUG
        assert configure_logging().level == logging.INFO
    finally:
        logger.setLevel(logging.NOTSET)


def test_get_logger_returns_package_children():
    assert get_logger() is logging.getLogger("fastabuf")
    assert get_logger("buffer") is logging.getLogger("fastabuf.buffer")
