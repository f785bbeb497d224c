"""
API - ShortDrop REST API

This module contains the authenticated file endpoints with OpenAPI/Swagger
documentation. Short link resolution lives outside /api in shortdrop.api.links.
"""

from flask import Blueprint
from flask_restx import Api

# Create blueprint for the file API
api_bp = Blueprint("api", __name__, url_prefix="/api")

# Initialize Flask-RESTX API with Swagger documentation
api = Api(
    api_bp,
    version="1.0",
    title="ShortDrop API",
    description="Upload files, get short links, delete them later",
    doc="/docs",  # Swagger UI will be available at /api/docs
    authorizations={
        "authKey": {"type": "apiKey", "in": "header", "name": "x-auth-key"}
    },
    security="authKey",
)

# Import namespaces after api is created to avoid circular imports
from .namespaces import files_ns  # noqa: E402

api.add_namespace(files_ns, path="/")
