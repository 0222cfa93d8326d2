"""Translation management.

Extracts ``t(key[, default])`` call sites from source code, keeps the
key -> per-language value store, classifies completeness, tracks values
awaiting approval and unused keys, generates locale bundles and fills
missing values with AI translations.

Main components:
- scanner / extractor: call-site tokenizer, key extraction, codebase walking
- store: JSON-backed translations document
- status: status classification, filters, ordering and counts
- groups / config: key grouping and project configuration
- generator: per-destination locale bundles
- translator: AI translation of missing values
"""

from modules.translations.config import ProjectConfig, load_project_config
from modules.translations.errors import (
    BundleWriteError,
    ConfigurationError,
    KeyNotFoundError,
    MissingMasterValueError,
    SourceReadError,
    StoreError,
    TranslationClientNotConfiguredError,
    TranslationResponseError,
    TranslationsError,
    UnknownLanguageError,
)
from modules.translations.extractor import (
    check_unused_keys,
    extract_from_codebase,
    extract_from_file,
    extract_from_text,
    walk_codebase,
)
from modules.translations.generator import generate_translation_sets
from modules.translations.models import (
    ExtractedTranslation,
    GeneratedFile,
    KeyStatus,
    TranslationResult,
    TranslationsData,
    TranslationStatus,
)
from modules.translations.status import (
    StatusFilter,
    build_status_report,
    classify_status,
    filter_statuses,
    sort_statuses,
    summarize,
)
from modules.translations.store import TranslationStore
from modules.translations.translator import (
    OpenAITranslationClient,
    TranslationClient,
    translate_missing_strings,
    translate_single_string,
)

__all__ = [
    "ProjectConfig",
    "load_project_config",
    "TranslationsError",
    "BundleWriteError",
    "ConfigurationError",
    "KeyNotFoundError",
    "MissingMasterValueError",
    "SourceReadError",
    "StoreError",
    "TranslationClientNotConfiguredError",
    "TranslationResponseError",
    "UnknownLanguageError",
    "check_unused_keys",
    "extract_from_codebase",
    "extract_from_file",
    "extract_from_text",
    "walk_codebase",
    "generate_translation_sets",
    "ExtractedTranslation",
    "GeneratedFile",
    "KeyStatus",
    "TranslationResult",
    "TranslationsData",
    "TranslationStatus",
    "StatusFilter",
    "build_status_report",
    "classify_status",
    "filter_statuses",
    "sort_statuses",
    "summarize",
    "TranslationStore",
    "OpenAITranslationClient",
    "TranslationClient",
    "translate_missing_strings",
    "translate_single_string",
]
