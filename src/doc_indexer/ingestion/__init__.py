"""
Ingestion — turn a stored file into tagged chunks and hand them to the index.

This package owns the linear pipeline behind the *index document*
procedure: fetch the blob, dispatch on its content type, parse, split,
tag with owner metadata and write to the vector store.
"""
