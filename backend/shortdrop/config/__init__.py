"""Configuration loaded from environment variables."""

from .settings import AppConfig, StorageConfig

__all__ = ["AppConfig", "StorageConfig"]
