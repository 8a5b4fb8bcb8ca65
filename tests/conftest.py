import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers installed by configure_logging() between tests."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_metadata_json_lint", False):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(logging.WARNING)
