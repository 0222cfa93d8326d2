"""
Fixtures for end-to-end workflow tests.

The full application is built with ``create_app`` and its providers are
overridden at the system boundary: the temporary project, its store and
the fake AI client.
"""

import pytest
from fastapi.testclient import TestClient

from api.dependencies.translation_client import require_translation_client
from infrastructure.services import get_project_config, get_translation_store
from server.server import create_app


@pytest.fixture
def app(project_config, store, fake_client):
    application = create_app()
    application.dependency_overrides[get_project_config] = lambda: project_config
    application.dependency_overrides[get_translation_store] = lambda: store
    application.dependency_overrides[require_translation_client] = lambda: fake_client
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app)
