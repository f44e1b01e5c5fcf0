"""Text chunking strategies."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from langchain_text_splitters import RecursiveCharacterTextSplitter

from doc_indexer.ingestion.formats import DocumentFormat

if TYPE_CHECKING:
    from langchain_core.documents import Document
    from langchain_text_splitters import TextSplitter

# Recursive splitter defaults (applied to plain text).
TEXT_CHUNK_SIZE = 1000
TEXT_CHUNK_OVERLAP = 200

# CSV: keep rows whole where possible, fall back to cell boundaries.
CSV_SEPARATORS = ["\n", ","]
CSV_CHUNK_SIZE = 10000
CSV_CHUNK_OVERLAP = 1


def text_splitter() -> RecursiveCharacterTextSplitter:
    """Generic recursive splitter used for ``text/plain``."""
    return RecursiveCharacterTextSplitter(
        chunk_size=TEXT_CHUNK_SIZE,
        chunk_overlap=TEXT_CHUNK_OVERLAP,
    )


def csv_splitter() -> RecursiveCharacterTextSplitter:
    """Row-oriented splitter used for ``text/csv``."""
    return RecursiveCharacterTextSplitter(
        separators=CSV_SEPARATORS,
        chunk_size=CSV_CHUNK_SIZE,
        chunk_overlap=CSV_CHUNK_OVERLAP,
    )


# ``None`` means the parser output is indexed as-is.
SPLITTERS: dict[DocumentFormat, Callable[[], TextSplitter] | None] = {
    DocumentFormat.PDF: None,
    DocumentFormat.WORD: None,
    DocumentFormat.TEXT: text_splitter,
    DocumentFormat.CSV: csv_splitter,
}


def get_splitter(fmt: DocumentFormat) -> TextSplitter | None:
    """Return a fresh splitter for *fmt*, or ``None`` when it is not chunked."""
    factory = SPLITTERS[fmt]
    return factory() if factory is not None else None


def split_documents(documents: list[Document], fmt: DocumentFormat) -> list[Document]:
    """Apply the splitter registered for *fmt*; pass through when there is none."""
    splitter = get_splitter(fmt)
    if splitter is None:
        return documents
    return splitter.split_documents(documents)
