"""AI translation of missing values.

The model call sits behind the ``TranslationClient`` protocol;
``OpenAITranslationClient`` implements it with the OpenAI SDK. This module
only decides what to send, interprets the reply shape (batch replies may be
wrapped in Markdown code fences) and records the results in the store,
each one marked pending approval.

Batch runs persist after every batch, and a failed batch is logged and
skipped so the remaining batches still run.
"""

import json
from typing import Dict, Iterable, List, Optional, Protocol

import openai

from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult, classify_openai_error
from modules.translations.config import ProjectConfig
from modules.translations.errors import (
    KeyNotFoundError,
    MissingMasterValueError,
    TranslationResponseError,
    UnknownLanguageError,
)
from modules.translations.models import TranslationResult
from modules.translations.store import TranslationStore

logger = get_module_logger()

DEFAULT_BATCH_SIZE = 50

BATCH_PROMPT = """Translate the following strings from {source} to {target}.

Important rules:
1. Preserve any placeholders like {{{{name}}}}, {{{{count}}}}, etc. exactly as they appear
2. Preserve any special formatting (e.g. markdown, HTML tags) exactly as they appear
3. Return ONLY a valid JSON object with the same keys, where values are the translations
4. Maintain the same tone and style for each string

Input JSON:
{payload}

Output JSON:"""

SINGLE_PROMPT = """Translate the following text from {source} to {target}.

Important rules:
1. Preserve any placeholders like {{{{name}}}}, {{{{count}}}}, etc. exactly as they appear
2. Preserve any special formatting (e.g. markdown, HTML tags) exactly as they appear
3. Only return the translated text, nothing else
4. Maintain the same tone and style

Text to translate: "{text}\""""


class TranslationClient(Protocol):
    """Anything able to turn prompts into model replies."""

    def translate_text(self, text: str, source_language: str, target_language: str) -> str:
        ...

    def translate_batch(
        self, strings: Dict[str, str], source_language: str, target_language: str
    ) -> str:
        ...


class OpenAITranslationClient:
    """Translation client backed by OpenAI chat completions."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o",
        base_url: Optional[str] = None,
        timeout: float = 60.0,
    ):
        self.client = openai.OpenAI(api_key=api_key, base_url=base_url, timeout=timeout)
        self.model = model

    def _complete(self, prompt: str) -> str:
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            temperature=0.2,
        )
        return response.choices[0].message.content or ""

    def translate_text(self, text: str, source_language: str, target_language: str) -> str:
        prompt = SINGLE_PROMPT.format(
            source=source_language, target=target_language, text=text
        )
        return self._complete(prompt)

    def translate_batch(
        self, strings: Dict[str, str], source_language: str, target_language: str
    ) -> str:
        prompt = BATCH_PROMPT.format(
            source=source_language,
            target=target_language,
            payload=json.dumps(strings, indent=2, ensure_ascii=False),
        )
        return self._complete(prompt)


def strip_code_fence(text: str) -> str:
    """Remove a surrounding ```json / ``` fence from a model reply."""
    stripped = text.strip()
    if stripped.startswith("```json"):
        stripped = stripped[len("```json") :]
    elif stripped.startswith("```"):
        stripped = stripped[3:]
    if stripped.endswith("```"):
        stripped = stripped[:-3]
    return stripped.strip()


def parse_batch_reply(text: str) -> Dict[str, str]:
    """Parse a batch reply into ``key -> translation``.

    Non-string values are dropped.

    Raises:
        TranslationResponseError: If the reply is not a JSON object.
    """
    try:
        parsed = json.loads(strip_code_fence(text))
    except json.JSONDecodeError as e:
        raise TranslationResponseError(f"Reply is not valid JSON: {e}") from e
    if not isinstance(parsed, dict):
        raise TranslationResponseError("Reply is not a JSON object")
    return {key: value for key, value in parsed.items() if isinstance(value, str)}


def collect_missing(
    config: ProjectConfig,
    translations: Dict[str, Dict[str, Optional[str]]],
    keys: Optional[Iterable[str]] = None,
) -> Dict[str, Dict[str, str]]:
    """Group ``key -> master value`` by target language for absent slots.

    Keys without a master value, or unknown to the store, are skipped.
    """
    pending: Dict[str, Dict[str, str]] = {}
    for key in keys if keys is not None else translations.keys():
        entry = translations.get(key)
        if not entry:
            continue
        master_value = entry.get(config.master_language)
        if not master_value:
            continue
        for language in config.target_languages:
            if entry.get(language) is not None:
                continue
            pending.setdefault(language, {})[key] = master_value
    return pending


def _chunks(items: Dict[str, str], size: int) -> List[Dict[str, str]]:
    keys = list(items)
    return [
        {key: items[key] for key in keys[start : start + size]}
        for start in range(0, len(keys), size)
    ]


def translate_missing_strings(
    config: ProjectConfig,
    store: TranslationStore,
    client: TranslationClient,
    keys: Optional[Iterable[str]] = None,
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> List[TranslationResult]:
    """Translate every absent non-master value, batch by batch.

    Args:
        config: Project configuration.
        store: Store read for missing values and written after each batch.
        client: Translation client.
        keys: Optional subset of keys to translate.
        batch_size: Strings per request.

    Returns:
        Every translation recorded, across all successful batches.
    """
    data = store.read()
    pending = collect_missing(config, data.translations, keys)
    results: List[TranslationResult] = []

    for language, strings in pending.items():
        for batch in _chunks(strings, batch_size):
            reply = ""
            try:
                reply = client.translate_batch(batch, config.master_language, language)
                translated = parse_batch_reply(reply)
            except TranslationResponseError as exc:
                logger.error(
                    "batch_reply_unparseable",
                    language=language,
                    batch_size=len(batch),
                    error=str(exc),
                    reply=reply,
                )
                continue
            except Exception as exc:
                outcome = classify_openai_error(exc)
                logger.error(
                    "batch_translation_failed",
                    language=language,
                    batch_size=len(batch),
                    status=outcome.status.value,
                    error_code=outcome.error_code,
                    error=outcome.message,
                )
                continue

            batch_results = [
                TranslationResult(
                    key=key, language=language, translation=translated[key].strip()
                )
                for key in batch
                if translated.get(key, "").strip()
            ]
            if batch_results:
                store.record_translations(batch_results)
                results.extend(batch_results)

            logger.info(
                "batch_translated",
                language=language,
                requested=len(batch),
                translated=len(batch_results),
            )

    return results


def translate_single_string(
    config: ProjectConfig,
    store: TranslationStore,
    client: TranslationClient,
    key: str,
    language: str,
) -> OperationResult:
    """Translate one value of ``key`` into ``language``.

    Returns:
        A successful OperationResult holding the ``TranslationResult``, or
        the classified upstream failure.

    Raises:
        KeyNotFoundError: If ``key`` is not in the store.
        UnknownLanguageError: If ``language`` is not a target language.
        MissingMasterValueError: If ``key`` has no master value.
    """
    if language not in config.target_languages:
        raise UnknownLanguageError(language)

    data = store.read()
    entry = data.translations.get(key)
    if entry is None:
        raise KeyNotFoundError(key)
    master_value = entry.get(config.master_language)
    if not master_value:
        raise MissingMasterValueError(key)

    try:
        translated = client.translate_text(
            master_value, config.master_language, language
        ).strip()
    except Exception as exc:
        outcome = classify_openai_error(exc)
        logger.error(
            "single_translation_failed",
            key=key,
            language=language,
            status=outcome.status.value,
            error=outcome.message,
        )
        return outcome

    if not translated:
        return OperationResult.permanent_error(
            f'Empty translation returned for "{key}"',
            error_code=TranslationResponseError.error_code,
        )

    result = TranslationResult(key=key, language=language, translation=translated)
    store.record_translations([result])
    logger.info("single_translation_recorded", key=key, language=language)
    return OperationResult.success(data=result)
