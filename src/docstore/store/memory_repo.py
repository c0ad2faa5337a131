"""Dict-backed document store: upsert, lookup by id and linear search"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable
from uuid import uuid4

from loguru import logger

from docstore.errors import InvalidArgumentError
from docstore.models import Document, SearchRequest, as_utc
from docstore.store.filters import matches
from docstore.store.repo import DocumentRepo


_REQUIRED_FIELDS = ("title", "content", "author")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid4())


@dataclass
class MemoryRepo(DocumentRepo):
    """Owns its documents; construct one per caller rather than sharing a global.

    Not safe for concurrent mutation.
    """
    clock:      Callable[[], datetime] = _utcnow
    id_factory: Callable[[], str]      = _new_id
    _docs: dict[str, Document] = field(default_factory=dict)

    def save(self, document: Document) -> Document:
        """Upsert document by id.

        A document without an id gets a fresh one and created = now. A document
        with an id replaces the stored entry as given, including its created
        value (which is not reset or compared against the stored one).
        """
        if document is None:
            raise InvalidArgumentError("document must not be None")
        missing = [name for name in _REQUIRED_FIELDS if getattr(document, name, None) is None]
        if missing:
            raise InvalidArgumentError(f"document is missing required fields: {', '.join(missing)}")

        if document.id is None:
            document.id = self.id_factory()
            document.created = as_utc(self.clock())
            logger.debug(f"Inserted document {document.id} ({document.title!r})")
        else:
            logger.debug(f"Replaced document {document.id} ({document.title!r})")

        self._docs[document.id] = document
        return document

    def find_by_id(self, doc_id: str) -> Document | None:
        """Return the stored document with doc_id, or None if absent."""
        if doc_id is None:
            raise InvalidArgumentError("doc_id must not be None")
        return self._docs.get(doc_id)

    def search(self, request: SearchRequest | None = None) -> list[Document]:
        """Return every stored document matching request; None matches all. Order is unspecified."""
        found = [doc for doc in self._docs.values() if matches(doc, request)]
        logger.debug(f"Search matched {len(found)} of {len(self._docs)} documents")
        return found

    def __len__(self) -> int:
        return len(self._docs)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._docs
