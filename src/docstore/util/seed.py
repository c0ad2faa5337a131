"""Load documents from a YAML seed file"""

from __future__ import annotations
from pathlib import Path

import yaml
from loguru import logger
from pydantic import ValidationError

from docstore.models import Document
from docstore.store.repo import DocumentRepo


def load_documents(path: Path) -> list[Document]:
    """Parse a YAML list of document mappings (title, content, author, optional id/created)."""
    try:
        raw = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or []
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path}: {e}") from e
    if not isinstance(raw, list):
        raise ValueError(f"Invalid {path}: expected a list of documents")

    try:
        docs = [Document.model_validate(entry) for entry in raw]
    except ValidationError as e:
        raise ValueError(f"Invalid {path}: {e}") from e
    logger.info(f"Loaded {len(docs)} document(s) from {path}")
    return docs


def seed_repo(repo: DocumentRepo, path: Path) -> DocumentRepo:
    """Save every document in the seed file into repo."""
    for doc in load_documents(path):
        repo.save(doc)
    return repo
