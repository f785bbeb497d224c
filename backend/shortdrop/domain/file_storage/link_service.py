"""
Link Service

Builds the two kinds of URLs the service hands out: the short link that users
share, and the public object URL that short links redirect to.
"""

import os
from typing import Optional
from urllib.parse import quote

from .value_objects import ShortId


class LinkService:
    """
    Service for constructing short links and public object URLs.

    Both URLs are pure string concatenation over configured base URLs; no
    request to the store is made here.
    """

    def __init__(
        self,
        public_base_url: Optional[str] = None,
        storage_public_url: Optional[str] = None,
    ):
        """
        Initialize LinkService.

        Args:
            public_base_url: Base URL of this service, used for short links.
                Falls back to the `PUBLIC_BASE_URL` environment variable, then
                to 'http://localhost:3000'.
            storage_public_url: Base URL serving bucket contents publicly.
                Falls back to the `STORAGE_PUBLIC_URL` environment variable.
        """
        base = public_base_url or os.getenv("PUBLIC_BASE_URL") or "http://localhost:3000"
        self.public_base_url = base.rstrip("/")

        storage_base = storage_public_url or os.getenv("STORAGE_PUBLIC_URL") or ""
        self.storage_public_url = storage_base.rstrip("/")

    def short_url(self, short_id: ShortId) -> str:
        """
        Build the short link for a short id.

        Returns:
            '{public_base_url}/{short_id}'
        """
        return f"{self.public_base_url}/{short_id.value}"

    def public_object_url(self, key: str) -> str:
        """
        Build the public URL of a stored object.

        The key is percent-encoded segment by segment, so file names with
        spaces or reserved characters still produce a valid URL.

        Args:
            key: Storage key (e.g., 'aB3_x9/my report.pdf')

        Returns:
            '{storage_public_url}/{encoded key}'
        """
        return f"{self.storage_public_url}/{quote(key, safe='/')}"
