"""The *index document* pipeline.

Usage::

    from doc_indexer.ingestion.models import IndexRequest
    from doc_indexer.ingestion.pipeline import DocumentIndexer

    DocumentIndexer().index(IndexRequest(userId="u1", name="report.pdf"))

Steps run strictly in order: fetch → dispatch → parse → split → tag →
store. Any failure is logged and collapsed into
:class:`~doc_indexer.errors.DocumentIndexingError`.
"""

from __future__ import annotations

import logging

from langchain_core.documents import Document

from doc_indexer.errors import DocumentIndexingError
from doc_indexer.indexing.base import DocumentStoreBase
from doc_indexer.ingestion.chunker import split_documents
from doc_indexer.ingestion.formats import resolve_format
from doc_indexer.ingestion.loader import load_blob
from doc_indexer.ingestion.models import IndexRequest
from doc_indexer.storage.base import BlobFetcherBase, bucket_for

logger = logging.getLogger(__name__)

# Metadata fields every indexed chunk must carry.
METADATA_KEYS: tuple[str, ...] = ("userId", "name")


def tag_documents(documents: list[Document], user_id: str, name: str) -> list[Document]:
    """Return copies of *documents* with owner metadata attached."""
    return [
        Document(
            page_content=doc.page_content,
            metadata={**doc.metadata, "userId": user_id, "name": name},
        )
        for doc in documents
    ]


class DocumentIndexer:
    """Runs the ingestion pipeline against pluggable storage backends.

    Parameters
    ----------
    fetcher:
        Object-store reader. When *None*, an
        :class:`~doc_indexer.storage.s3.S3BlobFetcher` is built from settings.
    store:
        Vector-store writer. When *None*, a
        :class:`~doc_indexer.indexing.chroma_store.ChromaDocumentStore` is
        built from settings.
    """

    def __init__(
        self,
        fetcher: BlobFetcherBase | None = None,
        store: DocumentStoreBase | None = None,
    ) -> None:
        if fetcher is None:
            from doc_indexer.storage.s3 import S3BlobFetcher

            fetcher = S3BlobFetcher()
        if store is None:
            from doc_indexer.indexing.chroma_store import ChromaDocumentStore

            store = ChromaDocumentStore()
        self._fetcher = fetcher
        self._store = store

    @property
    def store(self) -> DocumentStoreBase:
        return self._store

    def index(self, request: IndexRequest) -> None:
        """Index the document named by *request*.

        Raises
        ------
        DocumentIndexingError
            On any failure, including an unsupported content type. The
            underlying exception is chained and logged, never surfaced.
        """
        bucket = bucket_for(request.user_id)
        try:
            blob = self._fetcher.fetch(bucket, request.name)
            fmt = resolve_format(blob.content_type)
            raw_docs = load_blob(blob, fmt)
            docs = split_documents(raw_docs, fmt)
            logger.info("Split %s into %d chunk(s) from %d document(s)", blob.source, len(docs), len(raw_docs))

            tagged = tag_documents(docs, request.user_id, request.name)
            if not tagged:
                logger.warning("No text extracted from %s; nothing to index", blob.source)
                return

            self._store.add_documents(tagged, metadata_keys=METADATA_KEYS)
        except Exception as exc:
            logger.exception("Failed to index %s/%s", bucket, request.name)
            raise DocumentIndexingError() from exc
