"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.project import ProjectSettings

__all__ = [
    "ProjectSettings",
]
