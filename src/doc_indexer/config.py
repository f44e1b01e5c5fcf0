"""Shared configuration loaded from environment / .env file."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application-wide settings, populated from env vars or .env file."""

    # Embedding
    openai_api_key: str = Field(default="", description="OpenAI API key used for embeddings")
    embedding_provider: str = Field(
        default="openai",
        description="Embedding backend: 'openai' or 'huggingface'",
    )
    embedding_model: str = "text-embedding-ada-002"
    hf_embedding_model: str = "sentence-transformers/all-MiniLM-L6-v2"

    # Vector store
    chroma_host: str = "localhost"
    chroma_port: int = 8000
    chroma_collection: str = "Documents"

    # Object storage
    s3_endpoint_url: str = Field(
        default="",
        description=(
            "Endpoint of an S3-compatible object store. Leave empty to use AWS S3; "
            "set to e.g. 'http://minio:9000' for a self-hosted store."
        ),
    )
    s3_region: str = "us-east-1"
    aws_access_key_id: str = ""
    aws_secret_access_key: str = ""
    bucket_prefix: str = Field(default="doc-", description="Per-user bucket name is <prefix><userId>")

    # Serving
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton; import `settings` wherever needed.
settings = Settings()
