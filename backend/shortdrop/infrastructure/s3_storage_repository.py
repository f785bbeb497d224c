"""
S3 Storage Repository Implementation

Concrete implementation of IObjectStorageRepository for S3-compatible object
stores (AWS S3, Cloudflare R2, MinIO). Uses boto3 for all bucket operations.
"""

import logging
from typing import List, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from shortdrop.domain.errors import StorageBackendError
from shortdrop.domain.file_storage.entities import StoredObject
from shortdrop.domain.file_storage.storage_repository import IObjectStorageRepository

logger = logging.getLogger(__name__)


class S3StorageRepository(IObjectStorageRepository):
    """
    S3-compatible implementation of IObjectStorageRepository.

    Thread Safety:
        boto3 low-level clients are thread-safe, so one client is shared by
        every request and by the delete fan-out pool.

    Attributes:
        bucket_name: Name of the bucket holding uploaded files
        client: boto3 S3 client
    """

    def __init__(self, bucket_name: str, client=None):
        """
        Initialize the S3 storage repository.

        Args:
            bucket_name: Name of the bucket to use for storage
            client: Pre-built boto3 S3 client. Use from_config() to build one.

        Raises:
            ValueError: If bucket_name is empty
        """
        if not bucket_name or not bucket_name.strip():
            raise ValueError("bucket_name cannot be empty")

        self.bucket_name = bucket_name
        self.client = client if client is not None else boto3.client("s3")

    @classmethod
    def from_config(
        cls,
        bucket_name: str,
        endpoint_url: Optional[str] = None,
        region_name: str = "auto",
        access_key_id: Optional[str] = None,
        secret_access_key: Optional[str] = None,
    ) -> "S3StorageRepository":
        """
        Build a repository with its own boto3 client.

        Args:
            bucket_name: Bucket name
            endpoint_url: S3-compatible endpoint; None means AWS
            region_name: Region ('auto' for R2)
            access_key_id: Access key id
            secret_access_key: Secret access key
        """
        client = boto3.client(
            "s3",
            endpoint_url=endpoint_url,
            region_name=region_name,
            aws_access_key_id=access_key_id,
            aws_secret_access_key=secret_access_key,
        )
        return cls(bucket_name, client=client)

    def put_object(self, key: str, content: bytes, content_type: str) -> None:
        """Write one object with PutObject."""
        if not key or not key.strip():
            raise ValueError("key cannot be empty")

        try:
            self.client.put_object(
                Bucket=self.bucket_name,
                Key=key,
                Body=content,
                ContentType=content_type,
            )
        except (ClientError, BotoCoreError) as e:
            raise StorageBackendError(f"Failed to put {key} to S3: {e}", e) from e

    def list_objects(self, prefix: str, max_keys: int = 1000) -> List[StoredObject]:
        """List objects under a prefix with a single ListObjectsV2 call."""
        try:
            response = self.client.list_objects_v2(
                Bucket=self.bucket_name,
                Prefix=prefix,
                MaxKeys=max_keys,
            )
        except (ClientError, BotoCoreError) as e:
            raise StorageBackendError(f"Failed to list {prefix} in S3: {e}", e) from e

        return [
            StoredObject(
                key=item["Key"],
                size=item.get("Size"),
                last_modified=item.get("LastModified"),
            )
            for item in response.get("Contents", [])
            if item.get("Key")
        ]

    def delete_object(self, key: str) -> None:
        """Delete one object. S3 reports success for missing keys."""
        try:
            self.client.delete_object(Bucket=self.bucket_name, Key=key)
        except (ClientError, BotoCoreError) as e:
            raise StorageBackendError(f"Failed to delete {key} from S3: {e}", e) from e

    def health_check(self) -> bool:
        """Check bucket access with HeadBucket."""
        try:
            self.client.head_bucket(Bucket=self.bucket_name)
            return True
        except (ClientError, BotoCoreError) as e:
            logger.warning(f"S3 health check failed for {self.bucket_name}: {e}")
            return False
