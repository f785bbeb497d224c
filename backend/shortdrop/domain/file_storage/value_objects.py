"""
File Storage Value Objects

Immutable value objects for short identifiers and object keys.
"""

import secrets
import string
from dataclasses import dataclass
from typing import Callable, Optional, Sequence


SHORT_ID_LENGTH = 6
SHORT_ID_ALPHABET = string.ascii_letters + string.digits + "_-"


class InvalidShortIdError(ValueError):
    """Raised when a short identifier is malformed."""
    pass


class InvalidObjectKeyError(ValueError):
    """Raised when an object key cannot be composed or parsed."""
    pass


@dataclass(frozen=True)
class ShortId:
    """
    Value object representing a short link identifier.

    Exactly 6 characters drawn from a 64-symbol URL-safe, case-sensitive
    alphabet, so the value can be used as a URL path segment without escaping.
    """
    value: str

    def __post_init__(self):
        if not self.is_valid(self.value):
            raise InvalidShortIdError(
                f"Invalid short id: expected {SHORT_ID_LENGTH} URL-safe characters, "
                f"got {self.value!r}"
            )

    @staticmethod
    def is_valid(value) -> bool:
        """Check whether a raw value is a well-formed short id."""
        if not value or not isinstance(value, str):
            return False

        if len(value) != SHORT_ID_LENGTH:
            return False

        return all(c in SHORT_ID_ALPHABET for c in value)

    @classmethod
    def generate(
        cls, choice: Optional[Callable[[Sequence[str]], str]] = None
    ) -> "ShortId":
        """
        Generate a new random short id.

        Each character is drawn independently with secrets.choice, so every
        call is statistically independent of prior calls.

        Args:
            choice: Optional replacement for secrets.choice (deterministic tests)

        Returns:
            New ShortId instance
        """
        pick = choice or secrets.choice
        return cls("".join(pick(SHORT_ID_ALPHABET) for _ in range(SHORT_ID_LENGTH)))

    @property
    def prefix(self) -> str:
        """Storage key prefix owned by this short id."""
        return f"{self.value}/"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ObjectKey:
    """
    Storage key for an uploaded file: ``{short_id}/{file_name}``.

    The key namespace is the whole data model, so composing and parsing it
    lives in one place.
    """
    short_id: ShortId
    file_name: str

    def __post_init__(self):
        if not self.file_name:
            raise InvalidObjectKeyError("file_name cannot be empty")

    @property
    def value(self) -> str:
        return f"{self.short_id.value}/{self.file_name}"

    @classmethod
    def parse(cls, key: str) -> "ObjectKey":
        """
        Parse a raw storage key back into its parts.

        Raises:
            InvalidObjectKeyError: If the key is not ``{short_id}/{file_name}``
        """
        short_part, sep, file_name = (key or "").partition("/")
        if not sep or not file_name:
            raise InvalidObjectKeyError(f"Not a short link key: {key!r}")
        try:
            short_id = ShortId(short_part)
        except InvalidShortIdError as e:
            raise InvalidObjectKeyError(f"Not a short link key: {key!r}") from e
        return cls(short_id, file_name)

    def __str__(self) -> str:
        return self.value
