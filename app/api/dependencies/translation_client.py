"""AI translation client dependency for the translate routes."""

from typing import Annotated

from fastapi import Depends

from infrastructure.services import SettingsDep, get_translation_client
from modules.translations.errors import TranslationClientNotConfiguredError
from modules.translations.translator import TranslationClient


def require_translation_client(settings: SettingsDep) -> TranslationClient:
    """Return the configured client, or reject the request with a 400."""
    if not settings.openai.is_configured:
        raise TranslationClientNotConfiguredError()
    return get_translation_client()


TranslationClientDep = Annotated[TranslationClient, Depends(require_translation_client)]
