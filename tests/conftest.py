import logging

import pytest


@pytest.fixture
def reset_logging():
    """Drop handlers installed by `setup_logging` during a test."""
    root = logging.getLogger()
    before = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in before:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
