import logging

import pytest

from yapgeom.logging_config import setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("yapgeom")
    saved_level = logger.level
    saved_handlers = list(logger.handlers)
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


def test_setup_logging_configures_package_logger(package_logger):
    logger = setup_logging(logging.DEBUG)
    assert logger is package_logger
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)


def test_setup_logging_is_idempotent(package_logger):
    setup_logging()
    setup_logging()
    assert len(package_logger.handlers) == 1


def test_setup_logging_writes_file(package_logger, tmp_path):
    log_file = tmp_path / "yapgeom.log"
    setup_logging(logging.INFO, str(log_file))
    assert len(package_logger.handlers) == 2
    logging.getLogger("yapgeom.triangulation").warning("hello from %s", "triangulation")
    for handler in package_logger.handlers:
        handler.flush()
    text = log_file.read_text(encoding="utf-8")
    assert "yapgeom.triangulation - WARNING - hello from triangulation" in text
