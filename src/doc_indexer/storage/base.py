"""Abstract blob reader and the blob value type.

Adding a new object store only requires subclassing
:class:`BlobFetcherBase` and implementing :meth:`~BlobFetcherBase.fetch`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from doc_indexer.config import settings


def bucket_for(user_id: str) -> str:
    """Return the bucket holding *user_id*'s documents (``doc-<userId>``)."""
    return f"{settings.bucket_prefix}{user_id}"


@dataclass(frozen=True)
class Blob:
    """A stored file: raw bytes plus the content type declared at upload."""

    bucket: str
    key: str
    data: bytes
    content_type: str

    @property
    def source(self) -> str:
        """Human-readable locator written into chunk metadata."""
        return f"{self.bucket}/{self.key}"


class BlobFetcherBase(ABC):
    """Backend-agnostic object-store reader."""

    @abstractmethod
    def fetch(self, bucket: str, key: str) -> Blob:
        """Return the object stored under *bucket* / *key*.

        Implementations raise on missing objects or transport errors; the
        ingestion pipeline treats every exception as a failed request.
        """
        ...
