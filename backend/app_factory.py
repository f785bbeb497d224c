"""
Application Factory

Creates and configures the Flask application with all dependencies.
This factory pattern improves testability by allowing dependency injection
and configuration overrides.
"""

import logging
from typing import Optional

from flask import Flask, jsonify
from flask_cors import CORS

from shortdrop.api.auth_decorator import AUTH_HEADER
from shortdrop.application.deletion_service import DeletionService
from shortdrop.application.dependency_container import DependencyContainer
from shortdrop.application.event_publisher import EventPublisher
from shortdrop.application.resolution_service import ResolutionService
from shortdrop.application.upload_service import UploadService
from shortdrop.config.settings import AppConfig
from shortdrop.domain.file_storage import (
    IObjectStorageRepository,
    LinkService,
    SharedSecretAuthorizer,
    ShortIdAllocator,
)
from shortdrop.infrastructure.storage_factory import StorageFactory

logger = logging.getLogger(__name__)


def create_app(
    config: Optional[AppConfig] = None,
    storage: Optional[IObjectStorageRepository] = None,
) -> Flask:
    """
    Create and configure Flask application.

    Args:
        config: Application configuration, read from the environment if None
        storage: Object store to use instead of the one built by StorageFactory

    Returns:
        Configured Flask application

    Raises:
        ConfigurationError: If required configuration is missing
    """
    if config is None:
        config = AppConfig()
    config.validate()

    app = Flask(__name__)
    if config.max_upload_bytes:
        app.config["MAX_CONTENT_LENGTH"] = config.max_upload_bytes

    # Configure CORS
    CORS(
        app,
        resources={
            r"/api/*": {
                "origins": config.cors_origins,
                "methods": ["GET", "POST", "DELETE", "OPTIONS"],
                "allow_headers": ["Content-Type", AUTH_HEADER],
                "max_age": 3600,
            }
        },
    )

    _initialize_services(app, config, storage)
    _register_blueprints(app)
    _register_health_endpoint(app)

    return app


def _initialize_services(
    app: Flask, config: AppConfig, storage: Optional[IObjectStorageRepository]
) -> None:
    """
    Build services and attach them to the app through a DependencyContainer.

    Routes resolve everything via current_app.container.resolve().

    Args:
        app: Flask application
        config: Application configuration
        storage: Pre-built object store, or None to use StorageFactory
    """
    container = DependencyContainer()

    if storage is None:
        storage = StorageFactory.create_storage(config.storage)
    container.register_singleton(IObjectStorageRepository, storage)

    event_publisher = EventPublisher()
    container.setup_event_handlers(event_publisher)
    container.register_singleton(EventPublisher, event_publisher)

    authorizer = SharedSecretAuthorizer(config.auth_key)
    allocator = ShortIdAllocator()
    link_service = LinkService(
        public_base_url=config.public_base_url,
        storage_public_url=config.storage.public_url,
    )
    container.register_singleton(SharedSecretAuthorizer, authorizer)
    container.register_singleton(ShortIdAllocator, allocator)
    container.register_singleton(LinkService, link_service)

    container.register_singleton(
        UploadService,
        UploadService(storage, authorizer, allocator, link_service, event_publisher),
    )
    container.register_singleton(
        ResolutionService,
        ResolutionService(storage, link_service, event_publisher),
    )
    container.register_singleton(
        DeletionService,
        DeletionService(storage, authorizer, event_publisher),
    )

    app.container = container
    logger.info(
        f"Services initialized with {type(storage).__name__} "
        f"(short links at {link_service.public_base_url})"
    )


def _register_blueprints(app: Flask) -> None:
    """
    Register the API and short link blueprints.

    Args:
        app: Flask application
    """
    from shortdrop.api.links import links_bp
    from shortdrop.api.v1 import api_bp

    app.register_blueprint(api_bp)
    app.register_blueprint(links_bp)


def _get_health_status(app: Flask) -> tuple[dict, int]:
    """
    Get health status of the object store.

    Args:
        app: Flask application instance

    Returns:
        Tuple of (health_status_dict, http_status_code)
    """
    health_status = {
        "status": "ok",
        "message": "backend ready",
        "storage": "unknown",
    }

    storage = app.container.resolve(IObjectStorageRepository)
    if storage.health_check():
        health_status["storage"] = "connected"
    else:
        health_status["storage"] = "disconnected"
        health_status["status"] = "degraded"

    status_code = 200 if health_status["status"] == "ok" else 503
    return health_status, status_code


def _register_health_endpoint(app: Flask) -> None:
    """
    Register health check endpoint.

    Args:
        app: Flask application
    """

    @app.route("/health", methods=["GET"])
    def health():
        """
        Health check endpoint.
        Returns overall health status of the application and its object store.
        """
        health_status, status_code = _get_health_status(app)
        return jsonify(health_status), status_code
