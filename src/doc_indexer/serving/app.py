"""FastAPI application exposing document indexing as an RPC endpoint."""

from __future__ import annotations

import logging
from functools import lru_cache

from fastapi import Depends, FastAPI, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from doc_indexer import __version__
from doc_indexer.errors import DocumentIndexingError
from doc_indexer.ingestion.models import IndexRequest
from doc_indexer.ingestion.pipeline import DocumentIndexer

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Document Indexer API",
    version=__version__,
    description="Fetches stored documents, chunks them and writes embeddings to the vector index.",
)


@lru_cache(maxsize=1)
def _build_indexer() -> DocumentIndexer:
    """Build the process-wide indexer on first use; failures are not cached."""
    return DocumentIndexer()


def get_indexer() -> DocumentIndexer:
    """Return the shared indexer.

    Backend clients connect while being built, so a construction failure is
    reported like any other indexing failure.
    """
    try:
        return _build_indexer()
    except Exception as exc:
        logger.exception("Failed to initialise the document indexer")
        raise DocumentIndexingError() from exc


def get_optional_indexer() -> DocumentIndexer | None:
    """Like :func:`get_indexer`, but ``None`` when the backends are unavailable."""
    try:
        return get_indexer()
    except DocumentIndexingError:
        return None


# ── Error mapping ─────────────────────────────────────────────────────
@app.exception_handler(DocumentIndexingError)
async def indexing_error_handler(request: Request, exc: DocumentIndexingError) -> JSONResponse:
    """Every pipeline failure reaches the caller as one opaque internal error."""
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"code": "INTERNAL_SERVER_ERROR", "message": exc.message},
    )


# ── Routes ────────────────────────────────────────────────────────────
@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}


@app.get("/ready")
async def ready(indexer: DocumentIndexer | None = Depends(get_optional_indexer)) -> JSONResponse:
    """Readiness probe; checks that the backends build and the vector store answers."""
    if indexer is not None and await run_in_threadpool(indexer.store.health_check):
        return JSONResponse({"status": "ready"})
    return JSONResponse({"status": "unavailable"}, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)


@app.post("/documents/index", status_code=status.HTTP_204_NO_CONTENT)
async def index_document(
    request: IndexRequest,
    indexer: DocumentIndexer = Depends(get_indexer),
) -> None:
    """Fetch, chunk, embed and store one document."""
    logger.info("Indexing request for user=%s name=%s", request.user_id, request.name)
    await run_in_threadpool(indexer.index, request)
