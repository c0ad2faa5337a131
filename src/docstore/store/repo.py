from __future__ import annotations
from abc import ABC, abstractmethod
from docstore.models import Document, SearchRequest

class DocumentRepo(ABC):
    @abstractmethod
    def save(self, document: Document) -> Document:
        """Insert a new document (assigning id and created) or replace one by id."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, doc_id: str) -> Document | None:
        raise NotImplementedError

    @abstractmethod
    def search(self, request: SearchRequest | None = None) -> list[Document]:
        raise NotImplementedError
