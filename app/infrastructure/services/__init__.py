"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    SettingsDep,
    ProjectConfigDep,
    TranslationStoreDep,
)
from infrastructure.services.providers import (
    get_settings,
    get_project_config,
    get_translation_store,
    get_translation_client,
)

__all__ = [
    "SettingsDep",
    "ProjectConfigDep",
    "TranslationStoreDep",
    "get_settings",
    "get_project_config",
    "get_translation_store",
    "get_translation_client",
]
