"""Shared pytest configuration, fakes and fixtures."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import pytest
from langchain_core.documents import Document

from doc_indexer.indexing.base import DocumentStoreBase, check_metadata_keys
from doc_indexer.storage.base import Blob, BlobFetcherBase


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests requiring external services")


# ── Fakes for deterministic testing ─────────────────────────────────────


class FakeBlobFetcher(BlobFetcherBase):
    """Serves one canned payload, or raises *error*."""

    def __init__(
        self,
        data: bytes = b"",
        content_type: str = "text/plain",
        error: Exception | None = None,
    ) -> None:
        self._data = data
        self._content_type = content_type
        self._error = error
        self.calls: list[tuple[str, str]] = []

    def fetch(self, bucket: str, key: str) -> Blob:
        self.calls.append((bucket, key))
        if self._error is not None:
            raise self._error
        return Blob(bucket=bucket, key=key, data=self._data, content_type=self._content_type)


class FakeDocumentStore(DocumentStoreBase):
    """In-memory store that records every bulk write."""

    def __init__(self, error: Exception | None = None, healthy: bool = True) -> None:
        super().__init__("Documents")
        self._error = error
        self.healthy = healthy
        self.calls: list[tuple[list[Document], tuple[str, ...]]] = []

    def add_documents(
        self,
        documents: list[Document],
        *,
        metadata_keys: Sequence[str],
    ) -> list[str]:
        self.calls.append((documents, tuple(metadata_keys)))
        if self._error is not None:
            raise self._error
        check_metadata_keys(documents, metadata_keys)
        return [f"id-{i}" for i in range(len(documents))]

    def health_check(self) -> bool:
        return self.healthy


# ── Fixtures ────────────────────────────────────────────────────────────


@pytest.fixture()
def make_fetcher() -> Callable[..., FakeBlobFetcher]:
    return FakeBlobFetcher


@pytest.fixture()
def store() -> FakeDocumentStore:
    return FakeDocumentStore()


@pytest.fixture()
def make_store() -> Callable[..., FakeDocumentStore]:
    return FakeDocumentStore
