"""
API Namespaces - Organized endpoint groups
"""

from flask import current_app, request
from flask_restx import Namespace, Resource

from shortdrop.api.auth_decorator import get_auth_token, require_auth_key
from shortdrop.api.errors import error_response_for
from shortdrop.api.v1.models import (
    delete_parser,
    delete_response,
    error_response,
    upload_parser,
    upload_response,
)
from shortdrop.application.deletion_service import DeletionService
from shortdrop.application.upload_service import UploadService
from shortdrop.domain.errors import ErrorCategory, create_error_response

# =============================================================================
# Files Namespace - Upload and delete operations
# =============================================================================

files_ns = Namespace("files", description="Authenticated file operations")


@files_ns.route("/upload")
class Upload(Resource):
    """Upload a file and get a short link"""

    @files_ns.doc("upload_file")
    @files_ns.expect(upload_parser)
    @files_ns.response(200, "Success", upload_response)
    @files_ns.response(400, "No File Provided", error_response)
    @files_ns.response(401, "Unauthorized", error_response)
    @files_ns.response(500, "Storage Error", error_response)
    @require_auth_key
    def post(self):
        """
        Upload one file

        Stores the file under a new 6-character short id and returns the short
        link. The multipart field must be named 'file'.
        """
        upload = request.files.get("file")
        if upload is None or not upload.filename:
            return create_error_response(
                ErrorCategory.INVALID_REQUEST, "No file provided", status_code=400
            )

        try:
            upload_service = current_app.container.resolve(UploadService)
            shared = upload_service.upload(
                get_auth_token(),
                upload.filename,
                upload.read(),
                upload.mimetype,
            )
            current_app.logger.info(
                f"[UPLOAD] Stored {shared.key} ({shared.size} bytes)"
            )
            return shared.to_dict(), 200

        except Exception as e:
            return error_response_for(e, "upload")


@files_ns.route("/delete")
class Delete(Resource):
    """Delete a shared file"""

    @files_ns.doc("delete_file")
    @files_ns.expect(delete_parser)
    @files_ns.response(200, "File deleted", delete_response)
    @files_ns.response(400, "Missing Short ID", error_response)
    @files_ns.response(401, "Unauthorized", error_response)
    @files_ns.response(404, "File Not Found", error_response)
    @files_ns.response(500, "Storage Error", error_response)
    @require_auth_key
    def delete(self):
        """
        Delete a file by short id

        Removes every stored object under the short id. The link stops working
        immediately. A 500 response may have been partially applied; retrying
        then returns 404 once everything is gone.
        """
        short_id = request.args.get("shortId", "")

        try:
            deletion_service = current_app.container.resolve(DeletionService)
            deleted_count = deletion_service.delete(get_auth_token(), short_id)
            return {
                "success": True,
                "message": "File deleted successfully",
                "deletedCount": deleted_count,
            }, 200

        except Exception as e:
            return error_response_for(e, "delete")
