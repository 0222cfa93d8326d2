"""Fixtures for API route tests."""

import pytest
from fastapi import APIRouter
from fastapi.testclient import TestClient

from api.dependencies.translation_client import require_translation_client
from api.v1.router import router as v1_router
from infrastructure.services import get_project_config, get_translation_store
from utils.tests import create_test_app


@pytest.fixture
def app(project_config, store, fake_client):
    """v1 API wired to the temporary project and the fake AI client."""
    api_router = APIRouter()
    api_router.include_router(v1_router, prefix="/api/v1")
    test_app = create_test_app(api_router)
    test_app.dependency_overrides[get_project_config] = lambda: project_config
    test_app.dependency_overrides[get_translation_store] = lambda: store
    test_app.dependency_overrides[require_translation_client] = lambda: fake_client
    return test_app


@pytest.fixture
def client(app):
    return TestClient(app)
