"""Content-type dispatch table.

Every supported MIME type maps to exactly one :class:`DocumentFormat`.
The parser table (:mod:`doc_indexer.ingestion.loader`) and the splitter
table (:mod:`doc_indexer.ingestion.chunker`) are keyed by the same enum,
so supporting a new type is one entry here plus one entry per table.
"""

from __future__ import annotations

from enum import Enum

from doc_indexer.errors import UnsupportedContentTypeError


class DocumentFormat(str, Enum):
    """Parsing family of a stored document."""

    PDF = "pdf"
    WORD = "word"
    TEXT = "text"
    CSV = "csv"


CONTENT_TYPES: dict[str, DocumentFormat] = {
    "application/pdf": DocumentFormat.PDF,
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": DocumentFormat.WORD,
    "application/msword": DocumentFormat.WORD,
    "text/plain": DocumentFormat.TEXT,
    "text/csv": DocumentFormat.CSV,
}


def resolve_format(content_type: str) -> DocumentFormat:
    """Return the format for *content_type*.

    Matching is exact: ``"text/plain; charset=utf-8"`` is not ``"text/plain"``.

    Raises
    ------
    UnsupportedContentTypeError
        When *content_type* is not in :data:`CONTENT_TYPES`.
    """
    try:
        return CONTENT_TYPES[content_type]
    except KeyError:
        raise UnsupportedContentTypeError(content_type) from None
