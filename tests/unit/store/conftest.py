"""Shared fixtures for store unit tests"""

from datetime import datetime, timezone

import pytest

from docstore.models import Author, Document
from docstore.store.memory_repo import MemoryRepo


@pytest.fixture(name="author")
def author_fixture():
    return Author(id="a1", name="Ada")


@pytest.fixture(name="repo")
def repo_fixture():
    """Empty store with a fixed clock so created timestamps are predictable."""
    return MemoryRepo(clock=lambda: datetime(2024, 1, 1, tzinfo=timezone.utc))


@pytest.fixture(name="make_doc")
def make_doc_fixture(author):
    """Factory for unsaved documents; keyword overrides replace defaults."""
    def _make(**kwargs) -> Document:
        data = {"title": "Title", "content": "Body", "author": author}
        data.update(kwargs)
        return Document(**data)
    return _make
