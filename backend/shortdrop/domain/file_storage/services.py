"""
File Storage Services

Domain services for short id allocation, access checks, and file naming.
"""

import hmac
import unicodedata
from typing import Callable, Optional, Sequence

from .value_objects import ShortId


class ShortIdAllocator:
    """
    Allocates a fresh short id per upload.

    Stateless: there is no persistence and no uniqueness check against the
    store. With 64^6 possible ids the collision probability per allocation
    is accepted as negligible.
    """

    def __init__(self, choice: Optional[Callable[[Sequence[str]], str]] = None):
        """
        Initialize allocator.

        Args:
            choice: Optional replacement for secrets.choice (deterministic tests)
        """
        self._choice = choice

    def allocate(self) -> ShortId:
        """Return a new random ShortId."""
        return ShortId.generate(self._choice)


class SharedSecretAuthorizer:
    """
    Capability check against the single deployment-wide secret.

    There is exactly one privilege level: whoever presents the secret may
    upload and delete any file.
    """

    def __init__(self, secret: str):
        if not secret:
            raise ValueError("secret cannot be empty")
        self._secret = secret.encode("utf-8")

    def is_authorized(self, token: Optional[str]) -> bool:
        """
        Validate a presented token.

        Args:
            token: Value of the x-auth-key header, may be None

        Returns:
            True only if the token equals the configured secret
        """
        if not token:
            return False

        # Constant-time comparison to prevent timing attacks
        return hmac.compare_digest(token.encode("utf-8"), self._secret)


def sanitize_file_name(raw_name: Optional[str]) -> str:
    """
    Apply the file name policy for storage keys.

    Names are kept verbatim (spaces, unicode, punctuation) except:
    - any directory part sent by the client is dropped, both "/" and "\\"
    - control characters are removed
    - surrounding whitespace is stripped

    Args:
        raw_name: File name as declared by the upload

    Returns:
        The name to store, or "" if nothing usable remains
    """
    if not raw_name:
        return ""

    name = raw_name.replace("\\", "/").rpartition("/")[2]
    name = "".join(c for c in name if unicodedata.category(c) != "Cc")
    name = name.strip()

    if name in (".", ".."):
        return ""

    return name
