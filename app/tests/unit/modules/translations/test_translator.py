"""Unit tests for AI translation of missing values.

The OpenAI SDK is never called: batch and single translations go through
``FakeTranslationClient`` and SDK errors are built from real httpx objects.
"""

from unittest.mock import MagicMock, patch

import pytest

from infrastructure.operations import OperationStatus
from modules.translations.errors import (
    KeyNotFoundError,
    MissingMasterValueError,
    TranslationResponseError,
    UnknownLanguageError,
)
from modules.translations.translator import (
    OpenAITranslationClient,
    collect_missing,
    parse_batch_reply,
    strip_code_fence,
    translate_missing_strings,
    translate_single_string,
)
from tests.factories.translations import (
    FakeTranslationClient,
    make_entry,
    make_openai_connection_error,
    make_openai_status_error,
)


@pytest.fixture
def seeded_store(store):
    store.replace_translations(
        {
            "greeting": make_entry(en="Hello {{name}}", es="Hola {{name}}"),
            "farewell": make_entry(en="Goodbye"),
            "untranslatable": make_entry(),
        }
    )
    return store


@pytest.mark.unit
class TestReplyParsing:
    @pytest.mark.parametrize(
        "reply",
        [
            '{"a": "A"}',
            '```json\n{"a": "A"}\n```',
            '```\n{"a": "A"}\n```',
            '  \n```json{"a": "A"}```  ',
        ],
    )
    def test_code_fences_are_stripped(self, reply):
        assert parse_batch_reply(reply) == {"a": "A"}

    def test_strip_code_fence_plain_text(self):
        assert strip_code_fence("  Hola  ") == "Hola"

    def test_non_string_values_are_dropped(self):
        assert parse_batch_reply('{"a": "A", "b": 2, "c": null}') == {"a": "A"}

    def test_invalid_json(self):
        with pytest.raises(TranslationResponseError):
            parse_batch_reply("Sorry, I cannot help with that.")

    def test_non_object_json(self):
        with pytest.raises(TranslationResponseError):
            parse_batch_reply('["a", "b"]')


@pytest.mark.unit
class TestCollectMissing:
    def test_groups_absent_slots_by_language(self, project_config):
        translations = {
            "greeting": make_entry(en="Hello", es="Hola"),
            "farewell": make_entry(en="Goodbye"),
            "orphan": make_entry(es="Huérfano"),
        }

        pending = collect_missing(project_config, translations)

        assert pending == {
            "fr": {"greeting": "Hello", "farewell": "Goodbye"},
            "de": {"greeting": "Hello", "farewell": "Goodbye"},
            "es": {"farewell": "Goodbye"},
        }

    def test_key_subset(self, project_config):
        translations = {
            "greeting": make_entry(en="Hello"),
            "farewell": make_entry(en="Goodbye"),
        }
        pending = collect_missing(project_config, translations, keys=["farewell", "unknown"])
        assert pending == {
            "es": {"farewell": "Goodbye"},
            "fr": {"farewell": "Goodbye"},
            "de": {"farewell": "Goodbye"},
        }


@pytest.mark.unit
class TestTranslateMissingStrings:
    def test_fills_absent_values_pending_approval(self, project_config, seeded_store, fake_client):
        results = translate_missing_strings(project_config, seeded_store, fake_client)

        assert len(results) == 5
        data = seeded_store.read()
        assert data.translations["greeting"] == make_entry(
            en="Hello {{name}}",
            es="Hola {{name}}",
            fr="fr:Hello {{name}}",
            de="de:Hello {{name}}",
        )
        assert data.translations["farewell"]["es"] == "es:Goodbye"
        assert data.translations["untranslatable"] == make_entry()
        assert sorted(data.pending_approval) == [
            "de:farewell",
            "de:greeting",
            "es:farewell",
            "fr:farewell",
            "fr:greeting",
        ]

    def test_existing_values_are_never_sent(self, project_config, seeded_store, fake_client):
        translate_missing_strings(project_config, seeded_store, fake_client)

        sent_to_spanish = [
            strings for strings, _, target in fake_client.batch_calls if target == "es"
        ]
        assert sent_to_spanish == [{"farewell": "Goodbye"}]
        assert all(source == "en" for _, source, _ in fake_client.batch_calls)

    def test_batches_respect_batch_size(self, project_config, store, fake_client):
        store.replace_translations(
            {f"key_{i}": make_entry(en=f"Value {i}", es="x", de="x") for i in range(5)}
        )

        translate_missing_strings(project_config, store, fake_client, batch_size=2)

        assert [len(strings) for strings, _, _ in fake_client.batch_calls] == [2, 2, 1]

    def test_failed_batch_is_skipped(self, project_config, store):
        """An upstream error skips one batch; later batches still run."""
        store.replace_translations(
            {f"key_{i}": make_entry(en=f"Value {i}", es="x", de="x") for i in range(4)}
        )
        client = FakeTranslationClient(
            batch_errors=[make_openai_status_error(429, {"retry-after": "5"})]
        )

        results = translate_missing_strings(project_config, store, client, batch_size=2)

        assert [r.key for r in results] == ["key_2", "key_3"]
        data = store.read()
        assert data.translations["key_0"]["fr"] is None
        assert data.translations["key_3"]["fr"] == "fr:Value 3"

    def test_unexpected_client_error_is_skipped(self, project_config, store):
        store.replace_translations(
            {f"key_{i}": make_entry(en=f"Value {i}", es="x", de="x") for i in range(4)}
        )
        client = FakeTranslationClient(batch_errors=[RuntimeError("upstream exploded")])

        results = translate_missing_strings(project_config, store, client, batch_size=2)

        assert [r.key for r in results] == ["key_2", "key_3"]
        assert store.read().translations["key_0"]["fr"] is None

    def test_connection_error_is_skipped(self, project_config, seeded_store):
        """The first batch (French) fails; German and Spanish still run."""
        client = FakeTranslationClient(batch_errors=[make_openai_connection_error()])

        results = translate_missing_strings(project_config, seeded_store, client)

        assert {r.language for r in results} == {"de", "es"}

    def test_unparseable_reply_is_skipped(self, project_config, seeded_store):
        client = FakeTranslationClient(batch_reply="not json at all")

        results = translate_missing_strings(project_config, seeded_store, client)

        assert results == []
        assert seeded_store.read().pending_approval == []

    def test_blank_and_unknown_reply_entries_are_ignored(self, project_config, store):
        store.replace_translations({"only": make_entry(en="Only", fr="x", de="x")})
        client = FakeTranslationClient(batch_reply='{"only": "   ", "invented": "Nope"}')

        results = translate_missing_strings(project_config, store, client)

        assert results == []
        assert "invented" not in store.read().translations

    def test_key_subset(self, project_config, seeded_store, fake_client):
        results = translate_missing_strings(
            project_config, seeded_store, fake_client, keys=["greeting"]
        )
        assert {r.key for r in results} == {"greeting"}

    def test_nothing_to_translate(self, project_config, store, fake_client):
        assert translate_missing_strings(project_config, store, fake_client) == []
        assert fake_client.batch_calls == []


@pytest.mark.unit
class TestTranslateSingleString:
    def test_success(self, project_config, seeded_store, fake_client):
        result = translate_single_string(
            project_config, seeded_store, fake_client, "farewell", "de"
        )

        assert result.is_success
        assert result.data.to_dict() == {
            "key": "farewell",
            "language": "de",
            "translation": "de:Goodbye",
        }
        data = seeded_store.read()
        assert data.translations["farewell"]["de"] == "de:Goodbye"
        assert data.pending_approval == ["de:farewell"]

    def test_overwrites_existing_value(self, project_config, seeded_store, fake_client):
        translate_single_string(project_config, seeded_store, fake_client, "greeting", "es")
        assert seeded_store.read().translations["greeting"]["es"] == "es:Hello {{name}}"

    def test_unknown_key(self, project_config, seeded_store, fake_client):
        with pytest.raises(KeyNotFoundError):
            translate_single_string(project_config, seeded_store, fake_client, "nope", "es")

    def test_missing_master_value(self, project_config, seeded_store, fake_client):
        with pytest.raises(MissingMasterValueError):
            translate_single_string(
                project_config, seeded_store, fake_client, "untranslatable", "es"
            )
        assert fake_client.single_calls == []

    @pytest.mark.parametrize("language", ["en", "it"])
    def test_language_must_be_a_target(self, project_config, seeded_store, fake_client, language):
        with pytest.raises(UnknownLanguageError):
            translate_single_string(
                project_config, seeded_store, fake_client, "farewell", language
            )

    def test_upstream_failure_is_returned(self, project_config, seeded_store):
        client = FakeTranslationClient(single_error=make_openai_status_error(401))

        result = translate_single_string(project_config, seeded_store, client, "farewell", "fr")

        assert not result.is_success
        assert result.status == OperationStatus.UNAUTHORIZED
        assert seeded_store.read().translations["farewell"]["fr"] is None

    def test_unexpected_client_error_is_returned(self, project_config, seeded_store):
        client = FakeTranslationClient(single_error=IndexError("list index out of range"))

        result = translate_single_string(project_config, seeded_store, client, "farewell", "fr")

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "UNKNOWN_ERROR"
        assert seeded_store.read().pending_approval == []

    def test_empty_reply(self, project_config, seeded_store):
        client = FakeTranslationClient(single_reply="   ")

        result = translate_single_string(project_config, seeded_store, client, "farewell", "fr")

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "INVALID_TRANSLATION_RESPONSE"


@pytest.mark.unit
class TestOpenAITranslationClient:
    @patch("modules.translations.translator.openai.OpenAI")
    def test_batch_prompt(self, mock_openai):
        completion = MagicMock()
        completion.choices[0].message.content = '{"k": "Hola"}'
        mock_openai.return_value.chat.completions.create.return_value = completion

        client = OpenAITranslationClient(api_key="sk-test", model="gpt-4o-mini")
        reply = client.translate_batch({"k": "Hello {{name}}"}, "en", "es")

        assert reply == '{"k": "Hola"}'
        mock_openai.assert_called_once_with(api_key="sk-test", base_url=None, timeout=60.0)
        kwargs = mock_openai.return_value.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-4o-mini"
        prompt = kwargs["messages"][0]["content"]
        assert "from en to es" in prompt
        assert '"k": "Hello {{name}}"' in prompt
        assert "{{name}}, {{count}}" in prompt

    @patch("modules.translations.translator.openai.OpenAI")
    def test_single_prompt_and_empty_content(self, mock_openai):
        completion = MagicMock()
        completion.choices[0].message.content = None
        mock_openai.return_value.chat.completions.create.return_value = completion

        client = OpenAITranslationClient(api_key="sk-test")
        reply = client.translate_text("Goodbye", "en", "fr")

        assert reply == ""
        kwargs = mock_openai.return_value.chat.completions.create.call_args.kwargs
        assert kwargs["messages"][0]["content"].endswith('Text to translate: "Goodbye"')
