"""
API Error Mapping

Translates domain exceptions into structured HTTP error responses.
"""

from typing import Any, Dict, Tuple

from flask import current_app

from shortdrop.domain.errors import (
    BadRequestError,
    ErrorCategory,
    ShortLinkNotFoundError,
    StorageFailureError,
    UnauthorizedError,
    create_error_response,
)

# Most specific first; every category maps to exactly one status code
DOMAIN_ERROR_STATUS = (
    (UnauthorizedError, ErrorCategory.UNAUTHORIZED, 401),
    (BadRequestError, ErrorCategory.INVALID_REQUEST, 400),
    (ShortLinkNotFoundError, ErrorCategory.FILE_NOT_FOUND, 404),
    (StorageFailureError, ErrorCategory.STORAGE_ERROR, 500),
)


def error_response_for(error: Exception, operation: str) -> Tuple[Dict[str, Any], int]:
    """
    Build the error response for an exception raised by an operation.

    Known domain errors map to their category. Anything else is logged with
    its traceback and reported as a generic system error; internal details
    never reach the response body.

    Args:
        error: The exception caught at the route boundary
        operation: Operation name used in log messages

    Returns:
        Tuple of (error_dict, status_code)
    """
    for error_type, category, status_code in DOMAIN_ERROR_STATUS:
        if isinstance(error, error_type):
            if status_code >= 500:
                current_app.logger.error(f"[{operation.upper()}] {error}")
            else:
                current_app.logger.info(f"[{operation.upper()}] {error}")
            return create_error_response(category, str(error), status_code=status_code)

    current_app.logger.exception(f"[{operation.upper()}] Unexpected error: {error}")
    return create_error_response(
        ErrorCategory.SYSTEM_ERROR, str(error), status_code=500
    )
