"""Exceptions raised by the indexing pipeline."""

from __future__ import annotations


class IndexingError(Exception):
    """Base class for every error raised by doc-indexer."""


class UnsupportedContentTypeError(IndexingError):
    """The blob's declared content type has no parser."""

    def __init__(self, content_type: str) -> None:
        super().__init__(f"Unsupported file type: {content_type!r}")
        self.content_type = content_type


class DocumentIndexingError(IndexingError):
    """Opaque failure surfaced to callers; the cause is only in the logs."""

    def __init__(self, message: str = "Failed to index document") -> None:
        super().__init__(message)
        self.message = message
