"""Search predicate: AND across request fields, OR within each list field"""

from docstore.models import Document, SearchRequest


def _in_range(created, request: SearchRequest) -> bool:
    """Inclusive bounds; an unset created never satisfies a bound."""
    if request.created_from is None and request.created_to is None:
        return True
    if created is None:
        return False
    if request.created_from is not None and created < request.created_from:
        return False
    return request.created_to is None or created <= request.created_to


def matches(document: Document, request: SearchRequest | None) -> bool:
    """Return True if document satisfies every criterion set on request."""
    if request is None:
        return True

    if request.title_prefixes is not None and not any(
        document.title.startswith(prefix) for prefix in request.title_prefixes
    ):
        return False

    if request.contains_contents is not None and not any(
        text in document.content for text in request.contains_contents
    ):
        return False

    if request.author_ids is not None and document.author.id not in request.author_ids:
        return False

    return _in_range(document.created, request)
