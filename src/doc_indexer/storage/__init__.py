"""
Storage — read access to the object store holding uploaded documents.

Public surface
--------------
- :class:`Blob` — raw bytes plus declared content type.
- :class:`BlobFetcherBase` — abstract reader (subclass for GCS, local disk, …).
- :class:`S3BlobFetcher` — default S3-compatible backend.
- :func:`bucket_for` — per-user bucket naming.
"""

from doc_indexer.storage.base import Blob, BlobFetcherBase, bucket_for

__all__ = [
    "Blob",
    "BlobFetcherBase",
    "S3BlobFetcher",
    "bucket_for",
]


def __getattr__(name: str):  # noqa: ANN001
    """Lazy-import S3BlobFetcher to avoid pulling in boto3 at import time."""
    if name == "S3BlobFetcher":
        from doc_indexer.storage.s3 import S3BlobFetcher

        return S3BlobFetcher
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
