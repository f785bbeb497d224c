"""
Short Link Routes

Public, unauthenticated routes: resolving a short link to its stored object,
and serving objects of the local development backend.
"""

from flask import Blueprint, current_app, redirect, send_from_directory

from shortdrop.api.errors import error_response_for
from shortdrop.application.resolution_service import ResolutionService
from shortdrop.domain.errors import ErrorCategory, create_error_response
from shortdrop.domain.file_storage import IObjectStorageRepository
from shortdrop.infrastructure.local_file_storage_repository import (
    LocalFileStorageRepository,
)

links_bp = Blueprint("links", __name__)

REDIRECT_STATUS = 307


@links_bp.route("/<string:short_id>", methods=["GET"])
def resolve_short_link(short_id):
    """
    Redirect a short link to the public URL of its file.

    Returns a JSON 404 instead of a redirect when nothing is stored under the
    short id, so clients can tell a dead link from an outage (500).
    """
    try:
        resolution_service = current_app.container.resolve(ResolutionService)
        target = resolution_service.resolve(short_id)
    except Exception as e:
        return error_response_for(e, "resolve")

    return redirect(target, code=REDIRECT_STATUS)


@links_bp.route("/_local/<path:key>", methods=["GET"])
def serve_local_object(key):
    """Serve a stored object when the local filesystem backend is active."""
    storage = current_app.container.resolve(IObjectStorageRepository)
    if not isinstance(storage, LocalFileStorageRepository):
        return create_error_response(
            ErrorCategory.FILE_NOT_FOUND, "Local storage is not enabled", status_code=404
        )

    if storage.resolve_path(key) is None:
        return create_error_response(
            ErrorCategory.FILE_NOT_FOUND, f"Invalid key {key!r}", status_code=404
        )

    return send_from_directory(storage.base_path, key)
