"""Root test configuration — isolate tests from the caller's environment and loguru sinks"""

import os

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove any DOCSTORE_* variables so config defaults are predictable."""
    for name in list(os.environ):
        if name.startswith("DOCSTORE_"):
            monkeypatch.delenv(name)


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop sinks a test installed so later tests never write to a closed capture stream."""
    yield
    logger.remove()
