"""Embedding function selection.

Two providers are supported:

1. **OpenAI** (default) — set ``OPENAI_API_KEY``; model from ``EMBEDDING_MODEL``.
2. **HuggingFace** — set ``EMBEDDING_PROVIDER=huggingface`` to embed locally
   with the sentence-transformer named by ``HF_EMBEDDING_MODEL``.
"""

from __future__ import annotations

import logging

from langchain_core.embeddings import Embeddings
from langchain_openai import OpenAIEmbeddings

from doc_indexer.config import settings

logger = logging.getLogger(__name__)


def get_embedding_function(provider: str | None = None) -> Embeddings:
    """Return the configured embedding function.

    Parameters
    ----------
    provider:
        Overrides ``settings.embedding_provider`` when given.

    Raises
    ------
    ValueError
        For an unknown provider.
    """
    provider = (provider or settings.embedding_provider).lower()

    if provider == "openai":
        kwargs: dict = {"model": settings.embedding_model}
        # Empty key: let the client read OPENAI_API_KEY itself.
        if settings.openai_api_key:
            kwargs["api_key"] = settings.openai_api_key
        return OpenAIEmbeddings(**kwargs)

    if provider == "huggingface":
        # sentence-transformers is heavy; only import when selected.
        from langchain_huggingface import HuggingFaceEmbeddings

        logger.info("Using local HuggingFace embeddings: %s", settings.hf_embedding_model)
        return HuggingFaceEmbeddings(model_name=settings.hf_embedding_model)

    raise ValueError(
        f"Unsupported embedding_provider={provider!r}. Choose from: openai, huggingface."
    )
