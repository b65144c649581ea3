import logging

import pytest


@pytest.fixture(autouse=True)
def configure_logging_for_tests(caplog):
    """Configure logging to work properly with caplog fixture.

    This fixture ensures that all commentdeck loggers propagate their messages to the root logger so that caplog can
    capture them properly.
    """
    caplog.set_level(logging.DEBUG)

    root_logger = logging.getLogger()
    original_level = root_logger.level
    root_logger.setLevel(logging.DEBUG)

    # Ensure commentdeck loggers propagate to root
    commentdeck_logger = logging.getLogger("commentdeck")
    original_propagate = commentdeck_logger.propagate
    commentdeck_logger.propagate = True

    yield

    root_logger.setLevel(original_level)
    commentdeck_logger.propagate = original_propagate
