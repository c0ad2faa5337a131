"""CLI command implementations"""

import json
from datetime import datetime
from pathlib import Path
from typing import Annotated, Optional

import typer

from docstore.config import Settings, load_config
from docstore.models import Document, SearchRequest
from docstore.store.memory_repo import MemoryRepo
from docstore.util.log import configure_logging
from docstore.util.seed import seed_repo


_DATETIME_FORMATS = [
    "%Y-%m-%d",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%dT%H:%M:%S%z",
]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then set up logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    configure_logging(settings.log_level)
    return settings


def _seeded_repo(settings: Settings) -> MemoryRepo:
    """Build a fresh store populated from the configured seed file."""
    if not settings.seed_file:
        _fail("No seed file given. Pass --seed or set DOCSTORE_SEED_FILE.")
    path = Path(settings.seed_file)
    if not path.is_file():
        _fail(f"Seed file not found: {path}")
    repo = MemoryRepo()
    try:
        seed_repo(repo, path)
    except ValueError as e:
        _fail("Could not load seed file", e)
    return repo


def _dump(payload, settings: Settings) -> str:
    return json.dumps(payload, indent=settings.json_indent, ensure_ascii=False)


def _as_json(doc: Document) -> dict:
    return doc.model_dump(mode="json")


def search_cmd(
    seed: Annotated[Optional[str], typer.Option("--seed", help="YAML file of documents")] = None,
    title_prefix: Annotated[Optional[list[str]], typer.Option("--title-prefix", help="Title starts with (repeatable)")] = None,
    contains: Annotated[Optional[list[str]], typer.Option("--contains", help="Content contains (repeatable)")] = None,
    author: Annotated[Optional[list[str]], typer.Option("--author", help="Author id (repeatable)")] = None,
    created_from: Annotated[Optional[datetime], typer.Option("--created-from", formats=_DATETIME_FORMATS, help="Inclusive lower bound (UTC if no offset)")] = None,
    created_to: Annotated[Optional[datetime], typer.Option("--created-to", formats=_DATETIME_FORMATS, help="Inclusive upper bound (UTC if no offset)")] = None,
    ):
    """Print seeded documents matching every given filter as a JSON array."""
    settings = _settings(overrides={"seed_file": seed})
    repo = _seeded_repo(settings)
    request = SearchRequest(
        title_prefixes=list(title_prefix) if title_prefix else None,
        contains_contents=list(contains) if contains else None,
        author_ids=list(author) if author else None,
        created_from=created_from,
        created_to=created_to,
    )
    typer.echo(_dump([_as_json(d) for d in repo.search(request)], settings))


def show_cmd(
    doc_id: Annotated[str, typer.Argument(help="Document id")],
    seed: Annotated[Optional[str], typer.Option("--seed", help="YAML file of documents")] = None,
    ):
    """Print a single seeded document as JSON."""
    settings = _settings(overrides={"seed_file": seed})
    repo = _seeded_repo(settings)
    doc = repo.find_by_id(doc_id)
    if doc is None:
        _fail(f"No document with id '{doc_id}'")
    typer.echo(_dump(_as_json(doc), settings))
