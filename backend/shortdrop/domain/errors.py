"""
Errors

Domain exceptions raised by services and gateways, and the user-facing
error categories they are reported under. Response bodies carry only the
category texts below; technical details stay in the logs.
"""

from enum import Enum
from typing import Any, Dict, Optional, Tuple


class ErrorCategory(Enum):
    """Category reported in the `error` field of every failure response."""

    UNAUTHORIZED = "unauthorized"
    INVALID_REQUEST = "invalid_request"
    FILE_NOT_FOUND = "file_not_found"
    STORAGE_ERROR = "storage_error"
    SYSTEM_ERROR = "system_error"


# title, message and action shown to users for each category
ERROR_MESSAGES: Dict[ErrorCategory, Dict[str, str]] = {
    ErrorCategory.UNAUTHORIZED: {
        "title": "Unauthorized",
        "message": "The access key is missing or incorrect.",
        "action": "Enter the correct access key and try again.",
    },
    ErrorCategory.INVALID_REQUEST: {
        "title": "Invalid Request",
        "message": "The request is missing required information or contains invalid data.",
        "action": "Please check your input and try again.",
    },
    ErrorCategory.FILE_NOT_FOUND: {
        "title": "File Not Found",
        "message": "No file exists for this link. It may have been deleted or the link is wrong.",
        "action": "Check the link or ask the sender for a new one.",
    },
    ErrorCategory.STORAGE_ERROR: {
        "title": "Storage Error",
        "message": "The file storage could not complete the operation.",
        "action": "Please try again. A failed delete may have been partially applied.",
    },
    ErrorCategory.SYSTEM_ERROR: {
        "title": "System Error",
        "message": "An unexpected error occurred while processing your request.",
        "action": "Please try again later. If the problem persists, contact support.",
    },
}


# ----------------------------------------------------------------------------
# Domain exceptions
# ----------------------------------------------------------------------------

class DomainError(Exception):
    """Base class for errors raised by services and gateways.

    original_error keeps the client library exception, if any, for logging.
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        super().__init__(message)
        self.original_error = original_error


class UnauthorizedError(DomainError):
    """Raised when the presented access key does not match the shared secret."""
    pass


class BadRequestError(DomainError):
    """Raised for malformed input such as a missing file or missing short id."""
    pass


class ShortLinkNotFoundError(DomainError):
    """Raised when no stored object exists under a short id."""
    pass


class StorageFailureError(DomainError):
    """
    Raised when an object store call fails during an operation.

    Network, permission and throttling failures all collapse into this one
    category; no differentiated recovery is attempted.
    """
    pass


class StorageBackendError(DomainError):
    """
    Raised by object store gateways when the backend call fails.

    Gateways wrap the client library exception so the application layer
    never depends on boto3 or google-cloud exception types.
    """
    pass


class ConfigurationError(DomainError):
    """Raised at startup when required configuration is missing or invalid."""
    pass


# ----------------------------------------------------------------------------
# Response building
# ----------------------------------------------------------------------------

class ApplicationError(Exception):
    """
    A failure as reported to the client.

    Carries the category texts for the response body and, separately, the
    technical message and context for the logs.
    """

    def __init__(
        self,
        category: ErrorCategory,
        technical_message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.category = category
        self.technical_message = technical_message or ""
        self.context = context or {}

        texts = ERROR_MESSAGES.get(category, ERROR_MESSAGES[ErrorCategory.SYSTEM_ERROR])
        self.title = texts["title"]
        self.message = texts["message"]
        self.action = texts["action"]

        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Response body: {error, title, message, action}."""
        return {
            "error": self.category.value,
            "title": self.title,
            "message": self.message,
            "action": self.action,
        }


def create_error_response(
    category: ErrorCategory,
    technical_message: Optional[str] = None,
    context: Optional[Dict[str, Any]] = None,
    status_code: int = 400,
) -> Tuple[Dict[str, Any], int]:
    """
    Build the (body, status) pair returned by a route for a failure.

    technical_message is accepted for symmetry with ApplicationError and is
    never part of the body.
    """
    error = ApplicationError(category, technical_message, context)
    return error.to_dict(), status_code
