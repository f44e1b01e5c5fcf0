"""Unit tests for the object-store reader."""

from __future__ import annotations

import io
from unittest.mock import MagicMock, patch

import pytest

from doc_indexer.config import settings
from doc_indexer.storage.base import Blob, bucket_for
from doc_indexer.storage.s3 import S3BlobFetcher, _build_client


def test_bucket_for_uses_prefix() -> None:
    with patch.object(settings, "bucket_prefix", "doc-"):
        assert bucket_for("u1") == "doc-u1"


def test_blob_source() -> None:
    blob = Blob(bucket="doc-u1", key="a/b.txt", data=b"abc", content_type="text/plain")
    assert blob.source == "doc-u1/a/b.txt"


class TestS3BlobFetcher:
    def test_fetch_reads_body_and_content_type(self) -> None:
        client = MagicMock()
        client.get_object.return_value = {"Body": io.BytesIO(b"hello"), "ContentType": "text/plain"}

        blob = S3BlobFetcher(client=client).fetch("doc-u1", "notes.txt")

        client.get_object.assert_called_once_with(Bucket="doc-u1", Key="notes.txt")
        assert blob == Blob(bucket="doc-u1", key="notes.txt", data=b"hello", content_type="text/plain")

    def test_missing_content_type_is_empty_string(self) -> None:
        client = MagicMock()
        client.get_object.return_value = {"Body": io.BytesIO(b"x")}
        assert S3BlobFetcher(client=client).fetch("b", "k").content_type == ""

    def test_client_errors_propagate(self) -> None:
        client = MagicMock()
        client.get_object.side_effect = RuntimeError("NoSuchKey")
        with pytest.raises(RuntimeError, match="NoSuchKey"):
            S3BlobFetcher(client=client).fetch("doc-u1", "missing.pdf")


class TestBuildClient:
    def test_defaults_defer_to_boto3(self) -> None:
        with (
            patch.object(settings, "s3_endpoint_url", ""),
            patch.object(settings, "aws_access_key_id", ""),
            patch.object(settings, "aws_secret_access_key", ""),
            patch.object(settings, "s3_region", "us-east-1"),
            patch("doc_indexer.storage.s3.boto3.client") as mock_client,
        ):
            _build_client()
        mock_client.assert_called_once_with("s3", region_name="us-east-1")

    def test_custom_endpoint_and_credentials(self) -> None:
        with (
            patch.object(settings, "s3_endpoint_url", "http://minio:9000"),
            patch.object(settings, "aws_access_key_id", "key"),
            patch.object(settings, "aws_secret_access_key", "secret"),
            patch.object(settings, "s3_region", "eu-west-1"),
            patch("doc_indexer.storage.s3.boto3.client") as mock_client,
        ):
            _build_client()
        mock_client.assert_called_once_with(
            "s3",
            region_name="eu-west-1",
            endpoint_url="http://minio:9000",
            aws_access_key_id="key",
            aws_secret_access_key="secret",
        )
