"""Chroma implementation of the vector-store abstraction."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING
from uuid import uuid4

import chromadb
from langchain_community.vectorstores import Chroma
from langchain_community.vectorstores.utils import filter_complex_metadata

from doc_indexer.config import settings
from doc_indexer.indexing.base import DocumentStoreBase, check_metadata_keys
from doc_indexer.indexing.embedder import get_embedding_function

if TYPE_CHECKING:
    from langchain_core.documents import Document
    from langchain_core.embeddings import Embeddings

logger = logging.getLogger(__name__)


class ChromaDocumentStore(DocumentStoreBase):
    """Chroma-backed vector store.

    Parameters
    ----------
    collection_name:
        Name of the Chroma collection.
    host:
        Chroma server hostname.
    port:
        Chroma server port.
    embedding:
        Embedding function; defaults to :func:`get_embedding_function`.
    """

    def __init__(
        self,
        collection_name: str = settings.chroma_collection,
        *,
        host: str = settings.chroma_host,
        port: int = settings.chroma_port,
        embedding: Embeddings | None = None,
    ) -> None:
        super().__init__(collection_name)
        self._host = host
        self._port = port
        self._client = chromadb.HttpClient(host=host, port=port)
        self._embedding = embedding if embedding is not None else get_embedding_function()

    # -- DocumentStoreBase overrides ------------------------------------------

    def add_documents(
        self,
        documents: list[Document],
        *,
        metadata_keys: Sequence[str],
    ) -> list[str]:
        check_metadata_keys(documents, metadata_keys)

        # Chroma metadata values must be flat str/int/float/bool
        documents = filter_complex_metadata(documents)
        ids = [uuid4().hex for _ in documents]

        Chroma.from_documents(
            documents=documents,
            embedding=self._embedding,
            ids=ids,
            client=self._client,
            collection_name=self.collection_name,
        )
        logger.info("Indexed %d vectors → collection '%s'", len(ids), self.collection_name)
        return ids

    def health_check(self) -> bool:
        try:
            self._client.heartbeat()
            return True
        except Exception:
            logger.warning("Chroma health-check failed", exc_info=True)
            return False
