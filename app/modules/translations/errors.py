"""Errors for the translations module.

Every failure the translation workflow reports derives from
``TranslationsError`` so callers (API handlers, the CLI) can surface a
descriptive reason without crashing the host process.
"""


class TranslationsError(Exception):
    """Base exception for all translation management errors."""

    error_code = "TRANSLATIONS_ERROR"


class KeyNotFoundError(TranslationsError):
    """Raised when a mutation targets a key absent from the store.

    Attributes:
        key: The translation key that was not found.
    """

    error_code = "KEY_NOT_FOUND"

    def __init__(self, key: str):
        super().__init__(f'Translation key "{key}" not found')
        self.key = key


class UnknownLanguageError(TranslationsError):
    """Raised when a language is not part of the configured language list."""

    error_code = "UNKNOWN_LANGUAGE"

    def __init__(self, language: str):
        super().__init__(f'Language "{language}" is not configured')
        self.language = language


class MissingMasterValueError(TranslationsError):
    """Raised when a key has no master-language value to translate from."""

    error_code = "MISSING_MASTER_VALUE"

    def __init__(self, key: str):
        super().__init__(f'Master language value not found for key "{key}"')
        self.key = key


class SourceReadError(TranslationsError):
    """Raised when a source file cannot be read during a codebase scan."""

    error_code = "SOURCE_READ_ERROR"

    def __init__(self, path: str, reason: str):
        super().__init__(f"Failed to read source file {path}: {reason}")
        self.path = path


class StoreError(TranslationsError):
    """Raised when the translations document cannot be read or written."""

    error_code = "STORE_ERROR"


class BundleWriteError(TranslationsError):
    """Raised when a generated locale bundle cannot be written."""

    error_code = "BUNDLE_WRITE_ERROR"


class ConfigurationError(TranslationsError):
    """Raised when the project configuration file is missing or invalid."""

    error_code = "CONFIGURATION_ERROR"


class TranslationResponseError(TranslationsError):
    """Raised when a translation model reply cannot be interpreted."""

    error_code = "INVALID_TRANSLATION_RESPONSE"


class TranslationClientNotConfiguredError(TranslationsError):
    """Raised when AI translation is requested without an API key."""

    error_code = "OPENAI_NOT_CONFIGURED"

    def __init__(self):
        super().__init__("OPENAI_API_KEY environment variable is required for AI translation")
