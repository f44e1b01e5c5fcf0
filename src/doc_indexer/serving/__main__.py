"""Launch the FastAPI server."""

from __future__ import annotations

import logging

from uvicorn import run

from doc_indexer.config import settings


def main() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run("doc_indexer.serving.app:app", host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    main()
