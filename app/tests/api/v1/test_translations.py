"""Tests for the translation listing and editing endpoints."""

import pytest

from modules.translations.models import TranslationResult
from tests.factories.translations import make_entry


@pytest.fixture
def seeded_store(store):
    store.replace_translations(
        {
            "common_save": make_entry(en="Save", es="Guardar", fr="Enregistrer"),
            "dashboard_title": make_entry(en="Dashboard"),
            "mail_subject": make_entry(en="Welcome", es="Bienvenido"),
        }
    )
    store.record_translations([TranslationResult("common_save", "fr", "Enregistrer")])
    store.recompute_unused_keys(["common_save", "dashboard_title"])
    return store


@pytest.mark.unit
class TestListTranslations:
    def test_lists_document_and_statuses(self, client, seeded_store):
        response = client.get("/api/v1/translations")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        data = body["data"]
        assert set(data["translations"]) == {"common_save", "dashboard_title", "mail_subject"}
        assert data["pendingApproval"] == ["fr:common_save"]
        assert data["unusedKeys"] == ["mail_subject"]
        assert data["groups"] == {
            "common_save": "common",
            "dashboard_title": "web",
            "mail_subject": "mail",
        }
        assert data["config"] == {
            "masterLanguage": "en",
            "availableLanguages": ["en", "es", "fr", "de"],
        }
        assert data["metadata"]["version"] == 1
        assert [item["key"] for item in data["statuses"]] == [
            "dashboard_title",
            "mail_subject",
            "common_save",
        ]
        assert data["stats"] == {
            "total": 3,
            "complete": 1,
            "partial": 1,
            "missing": 1,
            "pending": 1,
            "unused": 1,
        }

    def test_filter_and_search(self, client, seeded_store):
        response = client.get(
            "/api/v1/translations", params={"filter": "partial", "search": "bienvenido"}
        )

        statuses = response.json()["data"]["statuses"]
        assert [item["key"] for item in statuses] == ["mail_subject"]
        # counts always describe the whole store
        assert response.json()["data"]["stats"]["total"] == 3

    def test_invalid_filter(self, client, seeded_store):
        response = client.get("/api/v1/translations", params={"filter": "bogus"})
        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_ERROR"


@pytest.mark.unit
class TestEditTranslations:
    def test_update_value(self, client, seeded_store):
        response = client.patch(
            "/api/v1/translations/dashboard_title",
            json={"language": "de", "value": "Übersicht"},
        )

        assert response.status_code == 200
        assert response.json()["data"]["translations"]["de"] == "Übersicht"
        assert seeded_store.read().translations["dashboard_title"]["de"] == "Übersicht"

    def test_update_unknown_key(self, client, seeded_store):
        response = client.patch(
            "/api/v1/translations/missing_key", json={"language": "es", "value": "x"}
        )

        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "error": 'Translation key "missing_key" not found',
            "error_code": "KEY_NOT_FOUND",
            "details": None,
        }

    def test_update_unknown_language(self, client, seeded_store):
        response = client.patch(
            "/api/v1/translations/dashboard_title", json={"language": "it", "value": "x"}
        )
        assert response.status_code == 400
        assert response.json()["error_code"] == "UNKNOWN_LANGUAGE"

    def test_update_clears_value(self, client, seeded_store):
        client.patch("/api/v1/translations/common_save", json={"language": "es", "value": ""})
        assert seeded_store.read().translations["common_save"]["es"] is None

    def test_replace(self, client, seeded_store):
        response = client.put(
            "/api/v1/translations",
            json={"translations": {"only_key": {"en": "Only", "es": "Solo"}}},
        )

        assert response.status_code == 200
        data = seeded_store.read()
        assert list(data.translations) == ["only_key"]
        assert data.translations["only_key"] == make_entry(en="Only", es="Solo")
        assert data.pending_approval == []

    def test_approve_single_language(self, client, seeded_store):
        response = client.post(
            "/api/v1/translations/common_save/approve", json={"language": "fr"}
        )

        assert response.status_code == 200
        assert response.json()["data"] == {"key": "common_save", "pendingApproval": []}
        assert seeded_store.read().pending_approval == []

    def test_approve_all(self, client, seeded_store):
        seeded_store.mark_pending_approval("es", "common_save")

        response = client.post("/api/v1/translations/common_save/approve-all")

        assert response.json()["data"] == {"key": "common_save", "approvedCount": 2}
        assert seeded_store.read().pending_approval == []

    def test_approve_all_unknown_key(self, client, seeded_store):
        response = client.post("/api/v1/translations/unknown/approve-all")
        assert response.status_code == 404

    def test_clear(self, client, seeded_store):
        response = client.post("/api/v1/translations/common_save/clear")

        assert response.status_code == 200
        assert response.json()["data"]["translations"] == make_entry(en="Save")
        assert seeded_store.read().pending_approval == []
