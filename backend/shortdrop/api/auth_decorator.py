"""
Auth Decorator

Rejects requests that do not carry the shared secret before the route body
runs, so an unauthorized upload is refused without reading the multipart body.
"""

from functools import wraps

from flask import current_app, request

from shortdrop.domain.errors import ErrorCategory, create_error_response
from shortdrop.domain.file_storage import SharedSecretAuthorizer

AUTH_HEADER = "x-auth-key"


def get_auth_token():
    """Return the presented shared secret, or None."""
    return request.headers.get(AUTH_HEADER)


def require_auth_key(f):
    """
    Decorator enforcing the x-auth-key header on a route.

    Usage:
        @require_auth_key
        def post(self):
            pass
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        authorizer = current_app.container.resolve(SharedSecretAuthorizer)

        if not authorizer.is_authorized(get_auth_token()):
            current_app.logger.info(
                f"Rejected {request.method} {request.path}: invalid or missing {AUTH_HEADER}"
            )
            return create_error_response(
                ErrorCategory.UNAUTHORIZED,
                f"Invalid or missing {AUTH_HEADER}",
                status_code=401,
            )

        return f(*args, **kwargs)

    return decorated_function
