"""Data models for the translations module.

Lightweight dataclasses (not Pydantic) describing the persisted translations
document and the transient records produced by extraction, status
classification, generation and AI translation.

The persisted document uses camelCase field names on disk
(``pendingApproval``, ``unusedKeys``, ``lastUpdated``) so files written by
earlier tools stay loadable.
"""

import re
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple

SCHEMA_VERSION = 1

KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.\-]+$")

# language code -> value; None means "not yet translated"
TranslationEntry = Dict[str, Optional[str]]


def is_valid_key(key: str) -> bool:
    """Check that a key only uses letters, digits, ``_``, ``-`` and ``.``."""
    return bool(KEY_PATTERN.match(key))


def normalize_value(value: Optional[str]) -> Optional[str]:
    """Empty strings are stored as absent."""
    if value is None or value == "":
        return None
    return value


def pending_approval_id(language: str, key: str) -> str:
    """Build the ``"<language>:<key>"`` identifier of a pending approval."""
    return f"{language}:{key}"


def parse_pending_approval_id(identifier: str) -> Tuple[str, str]:
    """Split a pending approval identifier into ``(language, key)``.

    Keys never contain ``:``, so the first colon is the separator.

    Raises:
        ValueError: If the identifier has no separator.
    """
    language, sep, key = identifier.partition(":")
    if not sep or not language or not key:
        raise ValueError(f"Invalid pending approval identifier: {identifier}")
    return language, key


def new_entry(languages: Iterable[str]) -> TranslationEntry:
    """Create an entry with every language slot absent."""
    return {language: None for language in languages}


class TranslationStatus(str, Enum):
    """Completeness of a key across non-master languages."""

    COMPLETE = "complete"
    PARTIAL = "partial"
    MISSING = "missing"


@dataclass
class TranslationsData:
    """Persisted root of the translations store.

    Attributes:
        translations: Mapping of key to per-language values.
        pending_approval: ``"<language>:<key>"`` identifiers of AI-written
            values awaiting review. Set semantics, insertion ordered.
        unused_keys: Keys absent from the last codebase scan.
        last_updated: ISO 8601 timestamp of the last write.
        version: Schema version of the document.
    """

    translations: Dict[str, TranslationEntry] = field(default_factory=dict)
    pending_approval: List[str] = field(default_factory=list)
    unused_keys: List[str] = field(default_factory=list)
    last_updated: str = ""
    version: int = SCHEMA_VERSION

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the on-disk document shape."""
        return {
            "translations": self.translations,
            "pendingApproval": list(self.pending_approval),
            "unusedKeys": list(self.unused_keys),
            "metadata": {
                "lastUpdated": self.last_updated,
                "version": self.version,
            },
        }

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "TranslationsData":
        """Build from the on-disk document shape.

        Documents written before ``pendingApproval`` and ``unusedKeys``
        existed load with both defaulted to empty.

        Raises:
            ValueError: If the document does not have the expected shape.
        """
        metadata = raw.get("metadata") or {}
        if not isinstance(metadata, dict):
            raise ValueError("metadata must be an object")
        raw_translations = raw.get("translations") or {}
        if not isinstance(raw_translations, dict):
            raise ValueError("translations must be an object")

        translations: Dict[str, TranslationEntry] = {}
        for key, entry in raw_translations.items():
            if entry is None:
                entry = {}
            if not isinstance(entry, dict):
                raise ValueError(f'entry for "{key}" must be an object')
            for language, value in entry.items():
                if value is not None and not isinstance(value, str):
                    raise ValueError(f'value of "{key}" in "{language}" must be a string')
            translations[key] = dict(entry)

        for field_name in ("pendingApproval", "unusedKeys"):
            if not isinstance(raw.get(field_name) or [], list):
                raise ValueError(f"{field_name} must be a list")

        return cls(
            translations=translations,
            pending_approval=list(dict.fromkeys(raw.get("pendingApproval") or [])),
            unused_keys=list(dict.fromkeys(raw.get("unusedKeys") or [])),
            last_updated=metadata.get("lastUpdated", ""),
            version=metadata.get("version", SCHEMA_VERSION),
        )

    def pending_for_key(self, key: str) -> List[str]:
        """Languages of ``key`` whose values await approval."""
        languages = []
        for identifier in self.pending_approval:
            language, pending_key = parse_pending_approval_id(identifier)
            if pending_key == key:
                languages.append(language)
        return languages


@dataclass
class ExtractedTranslation:
    """A single ``t(...)`` call site found in source text."""

    key: str
    default_value: Optional[str]
    file: str
    line: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "defaultValue": self.default_value,
            "file": self.file,
            "line": self.line,
        }


@dataclass
class ExtractionSummary:
    """Outcome of scanning a codebase and registering the keys found."""

    extracted: List[ExtractedTranslation]
    added: int
    existing: int


@dataclass
class UnusedKeysReport:
    """Outcome of an unused-key check."""

    unused_keys: List[str]
    used_keys: List[str]
    total_keys: int


@dataclass
class GeneratedFile:
    """Audit record for one written locale bundle."""

    path: str
    language: str
    key_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {"path": self.path, "language": self.language, "keyCount": self.key_count}


@dataclass
class TranslationResult:
    """A value produced by the AI translation client."""

    key: str
    language: str
    translation: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class KeyStatus:
    """Per-key view used for listings, filters and ordering."""

    key: str
    translations: TranslationEntry
    status: TranslationStatus
    group: str
    pending: bool = False
    unused: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "translations": self.translations,
            "status": self.status.value,
            "group": self.group,
            "pending": self.pending,
            "unused": self.unused,
        }


@dataclass
class StatusSummary:
    """Counts shown next to the key listing."""

    total: int = 0
    complete: int = 0
    partial: int = 0
    missing: int = 0
    pending: int = 0
    unused: int = 0

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)
