"""
Serving — FastAPI application exposing the *index document* procedure.

Run locally with ``python -m doc_indexer.serving``.
"""
