"""JSON-backed translation store.

The store persists one document (see ``TranslationsData``) and rewrites it
whole on every mutation. Writes go to a temporary file in the same
directory which then replaces the document, so readers only ever see a
complete document. There is no locking: a single writer process is assumed.

Every entry always carries a slot for every configured language; absent
values are ``None``.
"""

import json
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from infrastructure.logging import get_module_logger
from modules.translations.errors import (
    KeyNotFoundError,
    StoreError,
    UnknownLanguageError,
)
from modules.translations.models import (
    ExtractedTranslation,
    TranslationEntry,
    TranslationResult,
    TranslationsData,
    new_entry,
    normalize_value,
    parse_pending_approval_id,
    pending_approval_id,
)

logger = get_module_logger()


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace(
        "+00:00", "Z"
    )


class TranslationStore:
    """Read-modify-write access to the translations document.

    Attributes:
        path: Location of the JSON document.
        master_language: Language that default values are written to.
        languages: Every configured language, master included.
    """

    def __init__(self, path: Path, master_language: str, languages: Sequence[str]):
        self.path = Path(path)
        self.master_language = master_language
        self.languages = list(languages)

    @classmethod
    def from_config(cls, config) -> "TranslationStore":
        """Create a store for a ``ProjectConfig``."""
        return cls(
            path=config.db_path,
            master_language=config.master_language,
            languages=config.available_languages,
        )

    # Persistence

    def read(self) -> TranslationsData:
        """Load the document, creating and persisting an empty one if missing.

        Loaded entries are completed with absent slots for configured
        languages, and pending identifiers that reference unknown keys are
        dropped.

        Raises:
            StoreError: If the file cannot be read or parsed.
        """
        if not self.path.exists():
            data = TranslationsData()
            self.write(data)
            logger.info("store_initialized", path=str(self.path))
            return data

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            logger.error("store_parse_error", path=str(self.path), error=str(e))
            raise StoreError(f"Failed to parse {self.path}: {e}") from e
        except OSError as e:
            logger.error("store_read_error", path=str(self.path), error=str(e))
            raise StoreError(f"Failed to read {self.path}: {e}") from e

        if not isinstance(raw, dict):
            raise StoreError(f"Invalid translations document in {self.path}")

        try:
            data = TranslationsData.from_dict(raw)
        except ValueError as e:
            logger.error("store_invalid_document", path=str(self.path), error=str(e))
            raise StoreError(f"Invalid translations document in {self.path}: {e}") from e
        self._normalize(data)
        return data

    def write(self, data: TranslationsData) -> None:
        """Stamp ``last_updated`` and atomically replace the document.

        Raises:
            StoreError: If the document cannot be written.
        """
        data.last_updated = _timestamp()
        payload = json.dumps(data.to_dict(), indent=2, ensure_ascii=False)

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                    f.write("\n")
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as e:
            logger.error("store_write_error", path=str(self.path), error=str(e))
            raise StoreError(f"Failed to write {self.path}: {e}") from e

    def _normalize(self, data: TranslationsData) -> None:
        for entry in data.translations.values():
            for language in self.languages:
                entry.setdefault(language, None)

        valid = []
        for identifier in data.pending_approval:
            try:
                language, key = parse_pending_approval_id(identifier)
            except ValueError:
                continue
            if key in data.translations and language in data.translations[key]:
                valid.append(identifier)
        if len(valid) != len(data.pending_approval):
            logger.warning(
                "dangling_pending_approvals_dropped",
                dropped=len(data.pending_approval) - len(valid),
            )
        data.pending_approval = valid
        data.unused_keys = [k for k in data.unused_keys if k in data.translations]

    # Guards

    def _require_key(self, data: TranslationsData, key: str) -> TranslationEntry:
        entry = data.translations.get(key)
        if entry is None:
            raise KeyNotFoundError(key)
        return entry

    def _require_language(self, language: str) -> None:
        if language not in self.languages:
            raise UnknownLanguageError(language)

    # Registration

    def _add_entry(
        self, data: TranslationsData, key: str, default_value: Optional[str]
    ) -> bool:
        if key in data.translations:
            return False
        entry = new_entry(self.languages)
        default_value = normalize_value(default_value)
        if default_value is not None:
            entry[self.master_language] = default_value
        data.translations[key] = entry
        return True

    def register_if_absent(
        self, key: str, default_value: Optional[str] = None
    ) -> TranslationsData:
        """Create ``key`` with every language absent, unless it exists.

        The master slot receives ``default_value`` when one is supplied.
        Calling this twice leaves the same state as calling it once.
        """
        data = self.read()
        if self._add_entry(data, key, default_value):
            self.write(data)
            logger.info("key_registered", key=key)
        return data

    def register_extracted(
        self, extracted: Iterable[ExtractedTranslation]
    ) -> Tuple[int, int]:
        """Register every extracted occurrence with a single write.

        Only the first occurrence of a key affects the store.

        Returns:
            ``(added, existing)`` occurrence counts.
        """
        data = self.read()
        added = existing = 0
        for item in extracted:
            if self._add_entry(data, item.key, item.default_value):
                added += 1
            else:
                existing += 1
        if added:
            self.write(data)
        logger.info("keys_registered", added=added, existing=existing)
        return added, existing

    # Values

    def set_value(
        self, key: str, language: str, value: Optional[str]
    ) -> TranslationsData:
        """Set one slot of an existing key and clear its pending marker.

        Raises:
            KeyNotFoundError: If ``key`` is not in the store.
            UnknownLanguageError: If ``language`` is not configured.
        """
        self._require_language(language)
        data = self.read()
        entry = self._require_key(data, key)
        entry[language] = normalize_value(value)
        self._discard_pending(data, language, key)
        self.write(data)
        return data

    def replace_translations(
        self, translations: Dict[str, TranslationEntry]
    ) -> TranslationsData:
        """Replace the whole translations mapping.

        Entries are completed to full language coverage, empty strings become
        absent, and pending or unused markers for removed keys are dropped.
        """
        data = self.read()
        replaced: Dict[str, TranslationEntry] = {}
        for key, entry in translations.items():
            normalized = new_entry(self.languages)
            for language, value in (entry or {}).items():
                normalized[language] = normalize_value(value)
            replaced[key] = normalized
        data.translations = replaced
        self._normalize(data)
        self.write(data)
        logger.info("translations_replaced", key_count=len(replaced))
        return data

    def clear_translations(self, key: str) -> TranslationsData:
        """Reset every non-master value of ``key`` and its pending markers."""
        data = self.read()
        entry = self._require_key(data, key)
        for language in self.languages:
            if language != self.master_language:
                entry[language] = None
        self._discard_pending_for_key(data, key)
        self.write(data)
        return data

    def record_translations(
        self, results: Iterable[TranslationResult]
    ) -> TranslationsData:
        """Write AI-produced values and mark each one pending approval."""
        data = self.read()
        count = 0
        for result in results:
            entry = self._require_key(data, result.key)
            self._require_language(result.language)
            entry[result.language] = normalize_value(result.translation)
            identifier = pending_approval_id(result.language, result.key)
            if identifier not in data.pending_approval:
                data.pending_approval.append(identifier)
            count += 1
        self.write(data)
        logger.info("ai_translations_recorded", count=count)
        return data

    # Pending approval

    def _discard_pending(self, data: TranslationsData, language: str, key: str) -> None:
        identifier = pending_approval_id(language, key)
        if identifier in data.pending_approval:
            data.pending_approval.remove(identifier)

    def _discard_pending_for_key(self, data: TranslationsData, key: str) -> int:
        kept = []
        for identifier in data.pending_approval:
            if parse_pending_approval_id(identifier)[1] != key:
                kept.append(identifier)
        removed = len(data.pending_approval) - len(kept)
        data.pending_approval = kept
        return removed

    def mark_pending_approval(self, language: str, key: str) -> TranslationsData:
        """Flag the ``(language, key)`` value as awaiting review."""
        self._require_language(language)
        data = self.read()
        self._require_key(data, key)
        identifier = pending_approval_id(language, key)
        if identifier not in data.pending_approval:
            data.pending_approval.append(identifier)
        self.write(data)
        return data

    def clear_pending_approval(self, language: str, key: str) -> TranslationsData:
        """Approve one value of ``key``.

        Raises:
            KeyNotFoundError: If ``key`` is not in the store.
        """
        data = self.read()
        self._require_key(data, key)
        self._discard_pending(data, language, key)
        self.write(data)
        logger.info("translation_approved", key=key, language=language)
        return data

    def clear_all_pending_approval_for_key(self, key: str) -> int:
        """Approve every value of ``key``.

        Returns:
            Number of pending markers removed.

        Raises:
            KeyNotFoundError: If ``key`` is not in the store.
        """
        data = self.read()
        self._require_key(data, key)
        removed = self._discard_pending_for_key(data, key)
        self.write(data)
        logger.info("translations_approved", key=key, approved_count=removed)
        return removed

    # Unused keys

    def recompute_unused_keys(self, used_keys: Iterable[str]) -> TranslationsData:
        """Set unused keys to the stored keys missing from ``used_keys``."""
        used = set(used_keys)
        data = self.read()
        data.unused_keys = [key for key in data.translations if key not in used]
        self.write(data)
        return data

