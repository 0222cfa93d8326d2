"""Project configuration.

A project is described by a YAML file (``lango.config.yml`` by default):

.. code-block:: yaml

    master_language: en
    available_languages: [en, es, fr, de]
    source_root: ../webapp
    db_path: translations.json
    groups:
      known: [common, sign, mail, api, site, store]
      fallback: web
    sets:
      - destination: ../webapp/packages/web/public/i18n
        groups: [web, common, mail]

Relative paths are resolved against the directory holding the file.
"""

from pathlib import Path
from typing import Dict, List, Optional

import yaml
from pydantic import Field, ValidationError, field_validator, model_validator

from infrastructure.logging import get_module_logger
from infrastructure.models import InfrastructureModel
from modules.translations.errors import ConfigurationError
from modules.translations.groups import GroupClassifier
from modules.translations.status import DEFAULT_COMPLETE_MAX_ABSENT

logger = get_module_logger()


class GroupRules(InfrastructureModel):
    """Declared prefix table for group classification."""

    known: List[str] = Field(default_factory=list)
    overrides: Dict[str, str] = Field(default_factory=dict)
    fallback: str = "web"
    separator: str = Field(default="_", min_length=1)

    def classifier(self) -> GroupClassifier:
        return GroupClassifier(
            known=frozenset(self.known),
            overrides=dict(self.overrides),
            fallback=self.fallback,
            separator=self.separator,
        )


class TranslationSet(InfrastructureModel):
    """One output destination and the groups it includes."""

    destination: Path
    groups: List[str] = Field(min_length=1)


class ProjectConfig(InfrastructureModel):
    """Validated project configuration consumed by the translations module.

    Attributes:
        master_language: Language default values are written in.
        available_languages: Every language, master included.
        source_root: Directory scanned for ``t(...)`` calls.
        db_path: Location of the translations document.
        patterns: Glob patterns selecting source files.
        ignore_paths: Glob patterns excluded from scans.
        groups: Group classification rules.
        sets: Output destinations for generated bundles.
        complete_max_absent: Largest number of absent non-master languages
            a key may have and still count as complete.
    """

    master_language: str
    available_languages: List[str] = Field(min_length=1)
    source_root: Path = Path(".")
    db_path: Path = Path("translations.json")
    patterns: List[str] = Field(default_factory=lambda: ["**/*.{ts,tsx,js,jsx}"])
    ignore_paths: List[str] = Field(
        default_factory=lambda: [
            "**/node_modules/**",
            "**/dist/**",
            "**/build/**",
            "**/.git/**",
        ]
    )
    groups: GroupRules = Field(default_factory=GroupRules)
    sets: List[TranslationSet] = Field(default_factory=list)
    complete_max_absent: int = Field(default=DEFAULT_COMPLETE_MAX_ABSENT, ge=0)

    @field_validator("available_languages")
    @classmethod
    def validate_unique_languages(cls, v: List[str]) -> List[str]:
        if len(set(v)) != len(v):
            raise ValueError("available_languages must not contain duplicates")
        return v

    @model_validator(mode="after")
    def validate_master_language(self) -> "ProjectConfig":
        if self.master_language not in self.available_languages:
            raise ValueError(
                f"master_language '{self.master_language}' must be listed in available_languages"
            )
        return self

    @property
    def target_languages(self) -> List[str]:
        """Configured languages other than the master."""
        return [
            language
            for language in self.available_languages
            if language != self.master_language
        ]

    def classify(self, key: str) -> str:
        """Group of ``key`` according to the configured rules."""
        return self.groups.classifier()(key)

    def resolve_paths(self, base_dir: Path) -> "ProjectConfig":
        """Return a copy with relative paths anchored at ``base_dir``."""

        def anchor(path: Path) -> Path:
            return path if path.is_absolute() else (base_dir / path).resolve()

        return self.model_copy(
            update={
                "source_root": anchor(self.source_root),
                "db_path": anchor(self.db_path),
                "sets": [
                    TranslationSet(
                        destination=anchor(item.destination), groups=item.groups
                    )
                    for item in self.sets
                ],
            }
        )


def load_project_config(path: Optional[Path] = None) -> ProjectConfig:
    """Load and validate the project file.

    Args:
        path: Location of the YAML file (default: ``lango.config.yml``).

    Returns:
        ProjectConfig with paths resolved against the file's directory.

    Raises:
        ConfigurationError: If the file is missing, not YAML or invalid.
    """
    config_path = Path(path or "lango.config.yml")
    if not config_path.exists():
        raise ConfigurationError(f"Project configuration not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error("config_parse_error", file=str(config_path), error=str(e))
        raise ConfigurationError(f"Failed to parse {config_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigurationError(f"Invalid project configuration in {config_path}")

    try:
        config = ProjectConfig.model_validate(raw)
    except ValidationError as e:
        logger.error("config_validation_error", file=str(config_path), error=str(e))
        raise ConfigurationError(f"Invalid project configuration in {config_path}: {e}") from e

    config = config.resolve_paths(config_path.resolve().parent)
    logger.info(
        "project_config_loaded",
        file=str(config_path),
        languages=config.available_languages,
        set_count=len(config.sets),
    )
    return config
