import logging

import pytest


@pytest.fixture(autouse=True)
def restore_pyupath_logger():
    """The CLI installs handlers on the package logger; undo that between tests."""
    logger = logging.getLogger("pyupath")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)
