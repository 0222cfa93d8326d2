"""Locale bundle generation.

For every configured set (a destination directory and the groups it
includes) and every configured language, writes ``<destination>/<lang>.json``
holding a flat ``key -> string`` mapping sorted by key:

- keys without a master-language value are skipped everywhere;
- a language without its own value falls back to the master value.

Files are overwritten in full on every run.
"""

import json
from pathlib import Path
from typing import Dict, List

from infrastructure.logging import get_module_logger
from modules.translations.config import ProjectConfig, TranslationSet
from modules.translations.errors import BundleWriteError
from modules.translations.models import GeneratedFile, TranslationsData
from modules.translations.store import TranslationStore

logger = get_module_logger()


def build_bundles(
    data: TranslationsData, config: ProjectConfig, translation_set: TranslationSet
) -> Dict[str, Dict[str, str]]:
    """Compute the per-language bundles of one set without writing them."""
    classify = config.groups.classifier()
    included = set(translation_set.groups)
    bundles: Dict[str, Dict[str, str]] = {
        language: {} for language in config.available_languages
    }

    for key in sorted(data.translations):
        if classify(key) not in included:
            continue
        entry = data.translations[key]
        master_value = entry.get(config.master_language)
        if master_value is None:
            continue
        for language in config.available_languages:
            value = entry.get(language)
            bundles[language][key] = value if value is not None else master_value

    return bundles


def write_bundle(path: Path, bundle: Dict[str, str]) -> None:
    """Write one bundle as indented JSON with keys in sorted order."""
    ordered = {key: bundle[key] for key in sorted(bundle)}
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(ordered, f, indent=2, ensure_ascii=False)
            f.write("\n")
    except OSError as e:
        logger.error("bundle_write_error", path=str(path), error=str(e))
        raise BundleWriteError(f"Failed to write locale bundle {path}: {e}") from e


def generate_translation_sets(
    config: ProjectConfig, store: TranslationStore
) -> List[GeneratedFile]:
    """Write every configured bundle.

    Returns:
        One ``GeneratedFile`` per (set, language) pair, in configuration order.
    """
    data = store.read()
    generated: List[GeneratedFile] = []

    for translation_set in config.sets:
        bundles = build_bundles(data, config, translation_set)
        destination = Path(translation_set.destination)

        for language in config.available_languages:
            path = destination / f"{language}.json"
            write_bundle(path, bundles[language])
            generated.append(
                GeneratedFile(
                    path=str(path),
                    language=language,
                    key_count=len(bundles[language]),
                )
            )

        logger.info(
            "translation_set_generated",
            destination=str(destination),
            groups=translation_set.groups,
        )

    return generated
