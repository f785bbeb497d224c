"""
Google Cloud Storage Repository Implementation

Concrete implementation of IObjectStorageRepository for Google Cloud Storage.
Uses the google-cloud-storage library for all bucket operations.
"""

import logging
import os
from typing import List, Optional

from google.cloud import storage
from google.cloud.exceptions import GoogleCloudError, NotFound
from google.oauth2 import service_account

from shortdrop.domain.errors import StorageBackendError
from shortdrop.domain.file_storage.entities import StoredObject
from shortdrop.domain.file_storage.storage_repository import IObjectStorageRepository

logger = logging.getLogger(__name__)


class GCSStorageRepository(IObjectStorageRepository):
    """
    Google Cloud Storage implementation of IObjectStorageRepository.

    Thread Safety:
        The GCS client handles concurrent operations safely.

    Attributes:
        bucket_name: Name of the GCS bucket for file storage
        client: Google Cloud Storage client instance
        bucket: GCS bucket object
    """

    def __init__(self, bucket_name: str, client: Optional[storage.Client] = None):
        """
        Initialize the GCS storage repository.

        Args:
            bucket_name: Name of the GCS bucket to use for storage
            client: Pre-built storage client. Use from_config() to build one.

        Raises:
            ValueError: If bucket_name is empty
        """
        if not bucket_name or not bucket_name.strip():
            raise ValueError("bucket_name cannot be empty")

        self.bucket_name = bucket_name
        self.client = client if client is not None else storage.Client()
        self.bucket = self.client.bucket(bucket_name)

    @classmethod
    def from_config(
        cls, bucket_name: str, credentials_path: Optional[str] = None
    ) -> "GCSStorageRepository":
        """
        Build a repository with service account credentials if provided,
        otherwise with the default credentials of the environment.
        """
        if credentials_path and os.path.exists(credentials_path):
            credentials = service_account.Credentials.from_service_account_file(
                credentials_path
            )
            client = storage.Client(credentials=credentials)
            logger.info(f"GCS client initialized with service account: {credentials_path}")
        else:
            client = storage.Client()
            logger.info("GCS client initialized with default credentials")
        return cls(bucket_name, client=client)

    def put_object(self, key: str, content: bytes, content_type: str) -> None:
        """Upload one blob."""
        if not key or not key.strip():
            raise ValueError("key cannot be empty")

        try:
            blob = self.bucket.blob(key)
            blob.upload_from_string(content, content_type=content_type)
        except GoogleCloudError as e:
            raise StorageBackendError(f"Failed to save {key} to GCS: {e}", e) from e

    def list_objects(self, prefix: str, max_keys: int = 1000) -> List[StoredObject]:
        """List blobs under a prefix."""
        try:
            blobs = self.client.list_blobs(
                self.bucket_name, prefix=prefix, max_results=max_keys
            )
            return [
                StoredObject(key=blob.name, size=blob.size, last_modified=blob.updated)
                for blob in blobs
            ]
        except GoogleCloudError as e:
            raise StorageBackendError(f"Failed to list {prefix} in GCS: {e}", e) from e

    def delete_object(self, key: str) -> None:
        """Delete one blob. Missing blobs are ignored."""
        try:
            self.bucket.blob(key).delete()
        except NotFound:
            return
        except GoogleCloudError as e:
            raise StorageBackendError(f"Failed to delete {key} from GCS: {e}", e) from e

    def health_check(self) -> bool:
        """Check that the bucket exists and is reachable."""
        try:
            return self.bucket.exists()
        except Exception as e:
            logger.warning(f"GCS health check failed: {e}")
            return False
