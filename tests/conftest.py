import logging

import pytest

from buildnumber import loggers


@pytest.fixture(autouse=True)
def fixture_restore_loggers():
    """
    The CLI replaces the root logger handlers, restore them after each test.
    """
    root_logger = logging.getLogger()
    result_logger = logging.getLogger(loggers.RESULT_LOGGER_NAME)
    original_level = root_logger.level
    original_handlers = list(root_logger.handlers)
    yield
    root_logger.setLevel(original_level)
    root_logger.handlers[:] = original_handlers
    result_logger.handlers.clear()
    result_logger.propagate = True


@pytest.fixture(name="output_dir")
def fixture_output_dir(tmp_path):
    output_dir = tmp_path / "project"
    output_dir.mkdir()
    return output_dir
