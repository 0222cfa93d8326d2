"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for settings, the project
configuration, the translation store and the AI translation client.
"""

from functools import lru_cache
from pathlib import Path

from infrastructure.configuration import Settings
from modules.translations.config import ProjectConfig, load_project_config
from modules.translations.store import TranslationStore
from modules.translations.translator import OpenAITranslationClient


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/version")
        def get_version(settings: SettingsDep):
            return {"version": settings.GIT_SHA}

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_project_config() -> ProjectConfig:
    """
    Get the application-scoped project configuration.

    Loaded from the file named by ``LANGO_CONFIG_PATH``.

    Returns:
        ProjectConfig: Cached, validated project configuration.

    Raises:
        ConfigurationError: If the project file is missing or invalid.
    """
    settings = get_settings()
    return load_project_config(Path(settings.project.CONFIG_PATH))


@lru_cache
def get_translation_store() -> TranslationStore:
    """
    Get the application-scoped translation store.

    Returns:
        TranslationStore: Store bound to the project's document and languages.
    """
    return TranslationStore.from_config(get_project_config())


@lru_cache
def get_translation_client() -> OpenAITranslationClient:
    """
    Get the application-scoped OpenAI translation client.

    Returns:
        OpenAITranslationClient: Client configured from ``settings.openai``.

    Raises:
        ValueError: If OPENAI_API_KEY is not configured.
    """
    settings = get_settings()
    if not settings.openai.is_configured:
        raise ValueError("OPENAI_API_KEY environment variable is required for AI translation")
    return OpenAITranslationClient(
        api_key=settings.openai.API_KEY,
        model=settings.openai.MODEL,
        base_url=settings.openai.BASE_URL,
        timeout=settings.openai.TIMEOUT,
    )
