"""
API Models for request/response validation and Swagger documentation
"""

from flask_restx import fields, reqparse
from werkzeug.datastructures import FileStorage

from shortdrop.api.v1 import api

# =============================================================================
# Request Parsers
# =============================================================================

upload_parser = reqparse.RequestParser()
upload_parser.add_argument(
    "file",
    location="files",
    type=FileStorage,
    required=True,
    help="File to share",
)

delete_parser = reqparse.RequestParser()
delete_parser.add_argument(
    "shortId",
    location="args",
    type=str,
    required=True,
    help="Short id of the file to delete",
)

# =============================================================================
# Response Models
# =============================================================================

upload_response = api.model(
    "UploadResponse",
    {
        "url": fields.String(
            description="Short link to share",
            example="https://s.example.com/aB3_x9",
        ),
        "shortId": fields.String(description="Allocated short id", example="aB3_x9"),
        "fileName": fields.String(description="Stored file name", example="report.pdf"),
    },
)

delete_response = api.model(
    "DeleteResponse",
    {
        "success": fields.Boolean(description="Always true on success"),
        "message": fields.String(example="File deleted successfully"),
        "deletedCount": fields.Integer(
            description="Number of stored objects removed", example=1
        ),
    },
)

error_response = api.model(
    "ErrorResponse",
    {
        "error": fields.String(description="Error category", example="file_not_found"),
        "title": fields.String(description="Short error title"),
        "message": fields.String(description="User-facing message"),
        "action": fields.String(description="Suggested next step"),
    },
)
