from types import SimpleNamespace

import pytest

from infrastructure.services import get_settings
from tests.factories.translations import (
    FakeTranslationClient,
    make_entry,
    make_openai_status_error,
)
from api.dependencies.translation_client import require_translation_client


@pytest.fixture
def seeded_store(store):
    store.replace_translations(
        {
            "farewell": make_entry(en="Goodbye", es="Adiós"),
            "no_master": make_entry(),
        }
    )
    return store


@pytest.mark.unit
class TestTranslateEndpoints:
    def test_translate_missing(self, client, seeded_store, fake_client):
        response = client.post("/api/v1/translate")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["translatedCount"] == 2
        assert sorted(seeded_store.read().pending_approval) == [
            "de:farewell",
            "fr:farewell",
        ]

    def test_translate_subset(self, client, seeded_store, fake_client):
        response = client.post("/api/v1/translate", json={"keys": ["no_master"]})

        assert response.json()["data"]["translatedCount"] == 0
        assert fake_client.batch_calls == []

    def test_translate_single(self, client, seeded_store):
        response = client.post(
            "/api/v1/translate/single", json={"key": "farewell", "language": "fr"}
        )

        assert response.status_code == 200
        assert response.json()["data"] == {
            "key": "farewell",
            "language": "fr",
            "translation": "fr:Goodbye",
        }

    def test_translate_single_unknown_key(self, client, seeded_store):
        response = client.post(
            "/api/v1/translate/single", json={"key": "nope", "language": "fr"}
        )
        assert response.status_code == 404

    def test_translate_single_missing_master(self, client, seeded_store):
        response = client.post(
            "/api/v1/translate/single", json={"key": "no_master", "language": "fr"}
        )
        assert response.status_code == 400
        assert response.json()["error_code"] == "MISSING_MASTER_VALUE"

    def test_translate_single_rate_limited(self, app, client, seeded_store):
        failing = FakeTranslationClient(
            single_error=make_openai_status_error(429, {"retry-after": "30"})
        )
        app.dependency_overrides[require_translation_client] = lambda: failing

        response = client.post(
            "/api/v1/translate/single", json={"key": "farewell", "language": "fr"}
        )

        assert response.status_code == 429
        assert response.headers["retry-after"] == "30"
        assert response.json()["error_code"] == "RATE_LIMITED"

    def test_translate_single_upstream_failure(self, app, client, seeded_store):
        failing = FakeTranslationClient(single_error=make_openai_status_error(500))
        app.dependency_overrides[require_translation_client] = lambda: failing

        response = client.post(
            "/api/v1/translate/single", json={"key": "farewell", "language": "fr"}
        )

        assert response.status_code == 502
        assert response.json()["error_code"] == "SERVER_ERROR"

    def test_translate_single_unexpected_client_error(self, app, client, seeded_store):
        failing = FakeTranslationClient(single_error=RuntimeError("boom"))
        app.dependency_overrides[require_translation_client] = lambda: failing

        response = client.post(
            "/api/v1/translate/single", json={"key": "farewell", "language": "fr"}
        )

        assert response.status_code == 502
        assert response.json()["success"] is False
        assert response.json()["error_code"] == "UNKNOWN_ERROR"

    def test_requires_api_key(self, app, client, seeded_store):
        """Without OPENAI_API_KEY the translate routes answer 400."""
        del app.dependency_overrides[require_translation_client]
        app.dependency_overrides[get_settings] = lambda: SimpleNamespace(
            openai=SimpleNamespace(is_configured=False, BATCH_SIZE=50)
        )

        response = client.post("/api/v1/translate")

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error_code"] == "OPENAI_NOT_CONFIGURED"
        assert "OPENAI_API_KEY" in body["error"]
