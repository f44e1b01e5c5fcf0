"""Abstract base class for vector-store backends.

Adding a new backend only requires subclassing :class:`DocumentStoreBase`
and implementing the two abstract methods. The ingestion pipeline is
backend-agnostic.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from langchain_core.documents import Document


def check_metadata_keys(documents: list[Document], metadata_keys: Sequence[str]) -> None:
    """Raise ``ValueError`` if any document lacks one of *metadata_keys*."""
    for i, doc in enumerate(documents):
        missing = [key for key in metadata_keys if key not in doc.metadata]
        if missing:
            raise ValueError(f"Document {i} missing required metadata keys: {missing}")


class DocumentStoreBase(ABC):
    """Backend-agnostic vector-store writer.

    Parameters
    ----------
    collection_name:
        Logical name of the collection / index / class.
    """

    def __init__(self, collection_name: str) -> None:
        self.collection_name = collection_name

    # -- required overrides ---------------------------------------------------

    @abstractmethod
    def add_documents(
        self,
        documents: list[Document],
        *,
        metadata_keys: Sequence[str],
    ) -> list[str]:
        """Embed *documents* and upsert them in one bulk write.

        Every document **must** carry each key in *metadata_keys*;
        implementations call :func:`check_metadata_keys` before writing.

        Returns
        -------
        list[str]
            Identifiers assigned to the written vectors.
        """
        ...

    @abstractmethod
    def health_check(self) -> bool:
        """Return ``True`` when the backend is reachable and ready."""
        ...
