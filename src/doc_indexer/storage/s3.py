"""S3-compatible implementation of the blob reader."""

from __future__ import annotations

import logging
from typing import Any

import boto3

from doc_indexer.config import settings
from doc_indexer.storage.base import Blob, BlobFetcherBase

logger = logging.getLogger(__name__)


def _build_client() -> Any:
    """Create an S3 client from the global settings.

    Empty settings are omitted so boto3 falls back to its own credential
    chain and the public AWS endpoint.
    """
    kwargs: dict[str, Any] = {"region_name": settings.s3_region}
    if settings.s3_endpoint_url:
        kwargs["endpoint_url"] = settings.s3_endpoint_url
    if settings.aws_access_key_id and settings.aws_secret_access_key:
        kwargs["aws_access_key_id"] = settings.aws_access_key_id
        kwargs["aws_secret_access_key"] = settings.aws_secret_access_key
    return boto3.client("s3", **kwargs)


class S3BlobFetcher(BlobFetcherBase):
    """Reads whole objects with ``GetObject``.

    Parameters
    ----------
    client:
        A boto3 S3 client. When *None*, one is built from the global settings.
    """

    def __init__(self, client: Any | None = None) -> None:
        self._client = client if client is not None else _build_client()

    def fetch(self, bucket: str, key: str) -> Blob:
        response = self._client.get_object(Bucket=bucket, Key=key)
        body = response["Body"]
        try:
            data = body.read()
        finally:
            body.close()

        content_type = response.get("ContentType") or ""
        logger.info("Fetched s3://%s/%s (%d bytes, %s)", bucket, key, len(data), content_type or "no content type")
        return Blob(bucket=bucket, key=key, data=data, content_type=content_type)
