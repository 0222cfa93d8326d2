"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated

from fastapi import Depends

from infrastructure.configuration import Settings
from infrastructure.services.providers import (
    get_project_config,
    get_settings,
    get_translation_store,
)
from modules.translations.config import ProjectConfig
from modules.translations.store import TranslationStore

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Project configuration dependency (languages, source root, sets)
ProjectConfigDep = Annotated[ProjectConfig, Depends(get_project_config)]

# Translation store dependency
TranslationStoreDep = Annotated[TranslationStore, Depends(get_translation_store)]

__all__ = [
    "SettingsDep",
    "ProjectConfigDep",
    "TranslationStoreDep",
]
