"""Document loaders — thin wrappers around LangChain document loaders.

LangChain's loaders read from the filesystem, so blob bytes are spilled to
a temporary file for the duration of a single load.
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING, Callable

from langchain_community.document_loaders import (
    Docx2txtLoader,
    PyPDFLoader,
    TextLoader,
)

from doc_indexer.ingestion.formats import DocumentFormat

if TYPE_CHECKING:
    from langchain_core.documents import Document

    from doc_indexer.storage.base import Blob

logger = logging.getLogger(__name__)


def load_pdf(path: str | Path) -> list[Document]:
    """Load a PDF file, one document per page."""
    return PyPDFLoader(str(path)).load()


def load_word(path: str | Path) -> list[Document]:
    """Load a Word document as a single document."""
    return Docx2txtLoader(str(path)).load()


def load_text(path: str | Path) -> list[Document]:
    """Load a UTF-8 text file (plain text or CSV) as a single document."""
    return TextLoader(str(path), encoding="utf-8").load()


PARSERS: dict[DocumentFormat, Callable[[str], list[Document]]] = {
    DocumentFormat.PDF: load_pdf,
    DocumentFormat.WORD: load_word,
    DocumentFormat.TEXT: load_text,
    DocumentFormat.CSV: load_text,
}

_SUFFIXES: dict[DocumentFormat, str] = {
    DocumentFormat.PDF: ".pdf",
    DocumentFormat.WORD: ".docx",
    DocumentFormat.TEXT: ".txt",
    DocumentFormat.CSV: ".csv",
}


def load_blob(blob: Blob, fmt: DocumentFormat) -> list[Document]:
    """Parse *blob* with the loader registered for *fmt*.

    Parameters
    ----------
    blob:
        The fetched object.
    fmt:
        Format resolved from the blob's content type.

    Returns
    -------
    list[Document]
        Parsed documents whose ``source`` metadata points at the blob
        rather than the temporary file.
    """
    parser = PARSERS[fmt]

    with tempfile.NamedTemporaryFile(suffix=_SUFFIXES[fmt], delete=False) as fh:
        fh.write(blob.data)
        tmp_path = Path(fh.name)

    try:
        documents = parser(str(tmp_path))
    finally:
        tmp_path.unlink(missing_ok=True)

    for doc in documents:
        doc.metadata["source"] = blob.source

    logger.info("Parsed %s as %s into %d document(s)", blob.source, fmt.value, len(documents))
    return documents
