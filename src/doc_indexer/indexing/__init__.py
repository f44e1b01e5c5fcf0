"""
Indexing — embedding and vector-store persistence of tagged chunks.

Public surface
--------------
- :class:`DocumentStoreBase` — abstract backend (subclass for Weaviate, Qdrant, …).
- :class:`ChromaDocumentStore` — default Chroma backend.
- :func:`get_embedding_function` — configured LangChain embeddings.
"""

from doc_indexer.indexing.base import DocumentStoreBase

__all__ = [
    "ChromaDocumentStore",
    "DocumentStoreBase",
    "get_embedding_function",
]


def __getattr__(name: str):  # noqa: ANN001
    """Lazy-import the Chroma backend to avoid pulling in chromadb at import time."""
    if name == "ChromaDocumentStore":
        from doc_indexer.indexing.chroma_store import ChromaDocumentStore

        return ChromaDocumentStore
    if name == "get_embedding_function":
        from doc_indexer.indexing.embedder import get_embedding_function

        return get_embedding_function
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
