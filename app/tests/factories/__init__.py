"""Test data factories for deterministic test data generation."""

from tests.factories.translations import (
    FakeTranslationClient,
    make_entry,
    make_project_config,
    make_translations_data,
    write_source,
)

__all__ = [
    "FakeTranslationClient",
    "make_entry",
    "make_project_config",
    "make_translations_data",
    "write_source",
]
