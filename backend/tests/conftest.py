"""
Shared pytest fixtures and configuration for the ShortDrop backend test suite.

This module provides:
- Hypothesis configuration for property-based testing
- Environment and application fixtures for API tests
- The in-memory object store used by unit tests
"""

from datetime import datetime

import pytest

# Hypothesis configuration
from hypothesis import settings, HealthCheck, Phase

from app_factory import create_app
from shortdrop.application.event_publisher import EventPublisher
from shortdrop.config.settings import AppConfig
from shortdrop.domain.events import DomainEvent
from shortdrop.domain.file_storage import LinkService, SharedSecretAuthorizer
from tests.fixtures.mock_repositories import MockObjectStorageRepository

# Register Hypothesis profiles
settings.register_profile(
    "default",
    max_examples=100,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.target, Phase.shrink],
)
settings.register_profile(
    "ci",
    max_examples=200,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.register_profile(
    "dev",
    max_examples=10,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.load_profile("default")


AUTH_KEY = "test-shared-secret"
PUBLIC_BASE_URL = "https://s.example.com"
STORAGE_PUBLIC_URL = "https://files.example.com"

ENV_VARS = (
    "AUTH_KEY",
    "PUBLIC_BASE_URL",
    "STORAGE_BACKEND",
    "STORAGE_PUBLIC_URL",
    "S3_ENDPOINT_URL",
    "S3_REGION",
    "S3_ACCESS_KEY_ID",
    "S3_SECRET_ACCESS_KEY",
    "S3_BUCKET_NAME",
    "GCS_BUCKET_NAME",
    "GOOGLE_APPLICATION_CREDENTIALS",
    "LOCAL_STORAGE_DIR",
    "MAX_UPLOAD_BYTES",
    "CORS_ORIGINS",
)


# =============================================================================
# Environment Fixtures
# =============================================================================

@pytest.fixture
def clean_env(monkeypatch):
    """Remove every ShortDrop setting from the environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def s3_env(clean_env):
    """Provide a complete S3 configuration in the environment."""
    clean_env.setenv("AUTH_KEY", AUTH_KEY)
    clean_env.setenv("PUBLIC_BASE_URL", PUBLIC_BASE_URL)
    clean_env.setenv("STORAGE_BACKEND", "s3")
    clean_env.setenv("STORAGE_PUBLIC_URL", STORAGE_PUBLIC_URL)
    clean_env.setenv("S3_ENDPOINT_URL", "https://account.r2.cloudflarestorage.com")
    clean_env.setenv("S3_ACCESS_KEY_ID", "test-access-key")
    clean_env.setenv("S3_SECRET_ACCESS_KEY", "test-secret-key")
    clean_env.setenv("S3_BUCKET_NAME", "shortdrop-test")
    return clean_env


# =============================================================================
# Domain Fixtures
# =============================================================================

@pytest.fixture
def memory_storage():
    """Provide an empty in-memory object store."""
    return MockObjectStorageRepository()


@pytest.fixture
def authorizer():
    """Provide an authorizer for the test secret."""
    return SharedSecretAuthorizer(AUTH_KEY)


@pytest.fixture
def link_service():
    """Provide a link service with fixed base URLs."""
    return LinkService(
        public_base_url=PUBLIC_BASE_URL,
        storage_public_url=STORAGE_PUBLIC_URL,
    )


@pytest.fixture
def recorded_events():
    """Provide a list that collects every published domain event."""
    return []


@pytest.fixture
def event_publisher(recorded_events):
    """Provide an EventPublisher that records events into recorded_events."""
    publisher = EventPublisher()
    publisher.subscribe(DomainEvent, recorded_events.append)
    return publisher


@pytest.fixture
def fixed_datetime():
    """Provide a fixed datetime for deterministic testing."""
    return datetime(2024, 1, 15, 12, 0, 0)


# =============================================================================
# Application Fixtures
# =============================================================================

@pytest.fixture
def app(s3_env, memory_storage):
    """Create the Flask app wired to the in-memory object store."""
    flask_app = create_app(AppConfig(), storage=memory_storage)
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def auth_headers():
    """Provide headers carrying the correct access key."""
    return {"x-auth-key": AUTH_KEY}


# =============================================================================
# Pytest Configuration Hooks
# =============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (real filesystem, full app)"
    )
    config.addinivalue_line(
        "markers", "contract: Contract tests (verify interface compliance)"
    )
    config.addinivalue_line(
        "markers", "property: Property-based tests using Hypothesis"
    )


def pytest_collection_modifyitems(config, items):
    """
    Automatically mark tests based on their location.

    - tests/unit/* -> @pytest.mark.unit
    - tests/integration/* -> @pytest.mark.integration
    - tests/contracts/* -> @pytest.mark.contract
    - tests/property/* -> @pytest.mark.property
    """
    for item in items:
        test_path = str(item.fspath)

        if "/unit/" in test_path or "\\unit\\" in test_path:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in test_path or "\\integration\\" in test_path:
            item.add_marker(pytest.mark.integration)
        elif "/contracts/" in test_path or "\\contracts\\" in test_path:
            item.add_marker(pytest.mark.contract)
        elif "/property/" in test_path or "\\property\\" in test_path:
            item.add_marker(pytest.mark.property)
