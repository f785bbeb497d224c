"""
Test fixtures package.

Provides the in-memory object store and assertion helpers shared across
the unit, integration and contract suites.
"""

from .assertion_helpers import assert_error_body, assert_short_id_format
from .mock_repositories import MockObjectStorageRepository

__all__ = [
    "MockObjectStorageRepository",
    "assert_error_body",
    "assert_short_id_format",
]
