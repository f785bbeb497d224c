"""
Storage Factory

Factory for creating the object storage repository implementation selected
by configuration. The application layer stays decoupled from the concrete
implementation via the `IObjectStorageRepository` interface.
"""

import logging
from typing import Optional

from shortdrop.config.settings import StorageConfig
from shortdrop.domain.file_storage.storage_repository import IObjectStorageRepository

logger = logging.getLogger(__name__)


class StorageFactory:
    """Factory that returns the configured storage repository."""

    @staticmethod
    def create_storage(config: Optional[StorageConfig] = None) -> IObjectStorageRepository:
        """
        Create the storage repository named by STORAGE_BACKEND.

        Args:
            config: Storage configuration, read from the environment if None

        Returns:
            `IObjectStorageRepository` implementation

        Raises:
            ValueError: If the backend name is unknown
            RuntimeError: If the backend client cannot be created
        """
        if config is None:
            config = StorageConfig()

        if config.backend == "s3":
            return StorageFactory._create_s3_storage(config)
        if config.backend == "gcs":
            return StorageFactory._create_gcs_storage(config)
        if config.backend == "local":
            return StorageFactory._create_local_storage(config)

        raise ValueError(f"Unknown storage backend: {config.backend}")

    @staticmethod
    def _create_s3_storage(config: StorageConfig) -> IObjectStorageRepository:
        from shortdrop.infrastructure.s3_storage_repository import S3StorageRepository

        try:
            storage = S3StorageRepository.from_config(
                bucket_name=config.s3_bucket_name,
                endpoint_url=config.s3_endpoint_url,
                region_name=config.s3_region,
                access_key_id=config.s3_access_key_id,
                secret_access_key=config.s3_secret_access_key,
            )
        except Exception as e:
            raise RuntimeError(f"Failed to initialize S3 storage: {e}") from e

        logger.info(
            f"Storage factory: Using S3 bucket {config.s3_bucket_name} "
            f"at {config.s3_endpoint_url or 'AWS default endpoint'}"
        )
        return storage

    @staticmethod
    def _create_gcs_storage(config: StorageConfig) -> IObjectStorageRepository:
        from shortdrop.infrastructure.gcs_storage_repository import GCSStorageRepository

        try:
            storage = GCSStorageRepository.from_config(
                config.gcs_bucket_name, config.gcs_credentials_path
            )
        except Exception as e:
            raise RuntimeError(f"Failed to initialize GCS storage: {e}") from e

        logger.info(f"Storage factory: Using GCS bucket {config.gcs_bucket_name}")
        return storage

    @staticmethod
    def _create_local_storage(config: StorageConfig) -> IObjectStorageRepository:
        from shortdrop.infrastructure.local_file_storage_repository import (
            LocalFileStorageRepository,
        )

        try:
            storage = LocalFileStorageRepository(config.local_dir)
        except Exception as e:
            raise RuntimeError(f"Failed to initialize local storage: {e}") from e

        logger.info(f"Storage factory: Using local filesystem storage at {config.local_dir}")
        return storage
