import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `modules.translations`) works during pytest collection.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest
from modules.translations.config import ProjectConfig
from modules.translations.store import TranslationStore
from tests.factories.translations import (
    FakeTranslationClient,
    make_project_config,
    write_source,
)


@pytest.fixture
def project_config(tmp_path) -> ProjectConfig:
    """Four-language project rooted in a temporary directory."""
    return make_project_config(tmp_path)


@pytest.fixture
def store(project_config) -> TranslationStore:
    """Store bound to the temporary project's translations document."""
    return TranslationStore.from_config(project_config)


@pytest.fixture
def fake_client() -> FakeTranslationClient:
    """Translation client returning deterministic, prefixed translations."""
    return FakeTranslationClient()


@pytest.fixture
def sample_sources(project_config):
    """A small source tree with keys spread across groups."""
    root = Path(project_config.source_root)
    write_source(
        root / "components" / "Header.tsx",
        "export const Header = () => <h1>{t('dashboard_title', 'Dashboard')}</h1>;\n",
    )
    write_source(
        root / "components" / "Buttons.tsx",
        "const save = t(\"common_save\", \"Save\");\n"
        "const cancel = t(`common_cancel`, `Cancel`);\n",
    )
    write_source(
        root / "mail" / "welcome.ts",
        "export const subject = t('mail_welcome_subject', 'Welcome aboard');\n",
    )
    write_source(
        root / "node_modules" / "lib" / "index.js",
        "t('vendor_key', 'Should be ignored');\n",
    )
    return root
