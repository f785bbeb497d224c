"""
Application Configuration

Reads settings from environment variables. Everything is resolved once at
startup; missing required values are a startup error, never a request error.
"""

import os
from typing import List, Optional

from shortdrop.domain.errors import ConfigurationError

SUPPORTED_BACKENDS = ("s3", "gcs", "local")


class StorageConfig:
    """Object storage configuration settings."""

    def __init__(self):
        self.backend = os.getenv("STORAGE_BACKEND", "s3").strip().lower()

        # S3-compatible buckets (AWS S3, Cloudflare R2, MinIO, ...)
        self.s3_endpoint_url = os.getenv("S3_ENDPOINT_URL") or None
        self.s3_region = os.getenv("S3_REGION", "auto")
        self.s3_access_key_id = os.getenv("S3_ACCESS_KEY_ID")
        self.s3_secret_access_key = os.getenv("S3_SECRET_ACCESS_KEY")
        self.s3_bucket_name = os.getenv("S3_BUCKET_NAME")

        # Google Cloud Storage
        self.gcs_bucket_name = os.getenv("GCS_BUCKET_NAME")
        self.gcs_credentials_path = os.getenv("GOOGLE_APPLICATION_CREDENTIALS")

        # Local filesystem (development)
        self.local_dir = os.getenv("LOCAL_STORAGE_DIR", "/tmp/shortdrop")

        self.public_url = os.getenv("STORAGE_PUBLIC_URL")

    def missing(self) -> List[str]:
        """Return the names of required variables that are not set."""
        missing = []
        if self.backend == "s3":
            for name, value in (
                ("S3_ACCESS_KEY_ID", self.s3_access_key_id),
                ("S3_SECRET_ACCESS_KEY", self.s3_secret_access_key),
                ("S3_BUCKET_NAME", self.s3_bucket_name),
                ("STORAGE_PUBLIC_URL", self.public_url),
            ):
                if not value:
                    missing.append(name)
        elif self.backend == "gcs":
            for name, value in (
                ("GCS_BUCKET_NAME", self.gcs_bucket_name),
                ("STORAGE_PUBLIC_URL", self.public_url),
            ):
                if not value:
                    missing.append(name)
        return missing


class AppConfig:
    """Application configuration."""

    def __init__(self, storage: Optional[StorageConfig] = None):
        self.auth_key = os.getenv("AUTH_KEY")
        self.public_base_url = os.getenv(
            "PUBLIC_BASE_URL", "http://localhost:3000"
        ).rstrip("/")
        self.storage = storage or StorageConfig()

        # The local backend is served by this app under /_local
        if self.storage.backend == "local" and not self.storage.public_url:
            self.storage.public_url = f"{self.public_base_url}/_local"

        max_upload = os.getenv("MAX_UPLOAD_BYTES")
        self.max_upload_bytes = int(max_upload) if max_upload else None

        self.cors_origins = os.getenv("CORS_ORIGINS", "*")

    def validate(self) -> None:
        """
        Check that every required setting is present.

        Raises:
            ConfigurationError: Listing every missing or invalid setting
        """
        problems = []
        if not self.auth_key:
            problems.append("AUTH_KEY")
        if self.storage.backend not in SUPPORTED_BACKENDS:
            problems.append(
                f"STORAGE_BACKEND (got {self.storage.backend!r}, "
                f"expected one of {', '.join(SUPPORTED_BACKENDS)})"
            )
        else:
            problems.extend(self.storage.missing())

        if problems:
            raise ConfigurationError(
                "Missing or invalid configuration: " + ", ".join(problems)
            )
